# src/corp_finance/config.py
"""
Model Input Configuration

Loads three-statement inputs from YAML or JSON files and provides the
reference scenario used in examples and tests.

Example YAML:

    base_revenue: 1000
    revenue_growth_rates: [0.10, 0.08, 0.06]
    cogs_pct: 0.60
    ...
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Union

import yaml

from .core.model_inputs import ThreeStatementInput
from .exceptions import InvalidInputError

logger = logging.getLogger(__name__)

SAMPLE_INPUT: Dict[str, Any] = {
    'base_revenue': 1000.0,
    'revenue_growth_rates': [0.10, 0.08, 0.06],
    'cogs_pct': 0.60,
    'sga_pct': 0.10,
    'rnd_pct': 0.05,
    'da_pct': 0.10,
    'interest_rate': 0.05,
    'tax_rate': 0.25,
    'base_cash': 100.0,
    'base_receivables': 80.0,
    'base_inventory': 60.0,
    'base_payables': 50.0,
    'base_ppe': 500.0,
    'base_debt': 400.0,
    'base_equity': 290.0,
    'dso_days': 30.0,
    'dio_days': 40.0,
    'dpo_days': 35.0,
    'capex_pct': 0.08,
    'debt_repayment_pct': 0.05,
    'dividend_payout_ratio': 0.30,
    'min_cash_balance': 50.0,
}


def sample_input(**overrides: Any) -> ThreeStatementInput:
    """
    Reference three-year scenario with moderate assumptions.

    Args:
        **overrides: Field values replacing the defaults

    Returns:
        ThreeStatementInput
    """
    data = dict(SAMPLE_INPUT)
    data.update(overrides)
    return ThreeStatementInput.from_dict(data)


def parse_model_input(text: str, fmt: str = 'yaml') -> ThreeStatementInput:
    """
    Parse a model input document.

    Args:
        text: Document contents
        fmt: 'yaml' or 'json' (JSON is also valid YAML, but is parsed
            strictly when declared)

    Returns:
        ThreeStatementInput

    Raises:
        InvalidInputError: Unparseable document or invalid fields
    """
    try:
        if fmt == 'json':
            data = json.loads(text)
        elif fmt == 'yaml':
            data = yaml.safe_load(text)
        else:
            raise ValueError(f"Unsupported input format: {fmt}")
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise InvalidInputError('input', f"Could not parse {fmt.upper()}: {e}") from e

    if data is None:
        raise InvalidInputError('input', "Input document is empty")

    return ThreeStatementInput.from_dict(data)


def load_model_input(path: Union[str, Path]) -> ThreeStatementInput:
    """
    Load a model input from a YAML (.yaml/.yml) or JSON (.json) file.

    Args:
        path: Path to the input file

    Returns:
        ThreeStatementInput

    Raises:
        InvalidInputError: Undecodable, unparseable or invalid contents
        OSError: The file cannot be opened
    """
    path = Path(path)
    fmt = 'json' if path.suffix.lower() == '.json' else 'yaml'
    logger.debug("Loading model input from %s as %s", path, fmt)

    try:
        with open(path, 'r', encoding='utf-8') as f:
            text = f.read()
    except UnicodeDecodeError as e:
        raise InvalidInputError('input', f"File is not valid UTF-8: {e}") from e

    return parse_model_input(text, fmt=fmt)


def configure_logging(verbose: bool = False) -> None:
    """Configure root logging for command-line use."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format='%(asctime)s %(name)s %(levelname)s: %(message)s',
    )
