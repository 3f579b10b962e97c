# src/corp_finance/models/financial_model.py
"""
Linked Three-Statement Financial Model

Projects income statement, balance sheet and cash flow statement jointly
over N years:

1. Validate the input (fails fast, no partial output)
2. For each year, in order, build the period's statements from the
   prior year's closing state (operating projection, circular financing
   solve, assembly)
3. Summarise the full series

Usage:
    result = build_three_statement_model(model_input)
    result.result.income_statements[0].revenue
    result.warnings

    model = FinancialModel(model_input)
    df = model.build()
"""

import logging
import time
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Union

import pandas as pd

from ..constants import METHODOLOGY
from ..core.metadata import ComputationOutput, with_metadata
from ..core.model_inputs import ModelAssumptions, PeriodState, ThreeStatementInput
from ..core.validation import validate_input
from ..financial_statements.balance_sheet import BalanceSheet
from ..financial_statements.cash_flow_statement import CashFlowStatement
from ..financial_statements.income_statement import IncomeStatement
from ..financial_statements.statement_builder import StatementBuilder
from .diagnostics import base_year_warnings, period_warnings
from .summary import ProjectionSummary, build_summary

logger = logging.getLogger(__name__)

STATEMENT_NAMES = ('income_statements', 'balance_sheets', 'cash_flow_statements')


@dataclass
class ThreeStatementOutput:
    """Complete three-statement model output."""
    income_statements: List[IncomeStatement] = field(default_factory=list)
    balance_sheets: List[BalanceSheet] = field(default_factory=list)
    cash_flow_statements: List[CashFlowStatement] = field(default_factory=list)
    summary: Optional[ProjectionSummary] = None

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert the output to a JSON-friendly dictionary.

        Returns:
            Dictionary with one list per statement plus the summary
        """
        return {
            'income_statements': [s.to_dict() for s in self.income_statements],
            'balance_sheets': [s.to_dict() for s in self.balance_sheets],
            'cash_flow_statements': [s.to_dict() for s in self.cash_flow_statements],
            'summary': self.summary.to_dict() if self.summary else None,
        }

    def to_dataframe(self, statement: str = 'income_statements') -> pd.DataFrame:
        """
        Convert one statement series to a DataFrame.

        Args:
            statement: 'income_statements', 'balance_sheets' or
                'cash_flow_statements'

        Returns:
            DataFrame with one row per projected year, indexed by year
        """
        if statement not in STATEMENT_NAMES:
            raise ValueError(
                f"Unknown statement '{statement}', expected one of {STATEMENT_NAMES}"
            )

        rows = [s.to_dict() for s in getattr(self, statement)]
        if not rows:
            return pd.DataFrame()
        return pd.DataFrame(rows).set_index('year')


def _coerce_input(
    model_input: Union[ThreeStatementInput, Mapping[str, Any]]
) -> ThreeStatementInput:
    if isinstance(model_input, ThreeStatementInput):
        return model_input
    return ThreeStatementInput.from_dict(model_input)


def build_three_statement_model(
    model_input: Union[ThreeStatementInput, Mapping[str, Any]],
    iterations: Optional[int] = None
) -> ComputationOutput[ThreeStatementOutput]:
    """
    Build a linked three-statement financial model.

    Args:
        model_input: ThreeStatementInput, or a mapping with the same fields
        iterations: Override for the circular solver's round count

    Returns:
        ComputationOutput wrapping ThreeStatementOutput, with warnings
        and timing metadata

    Raises:
        InvalidInputError: Invalid field value or empty growth vector
        FinancialImpossibilityError: Operating costs exceed revenue
    """
    start = time.perf_counter()

    model_input = _coerce_input(model_input)
    validate_input(model_input)

    assumptions = ModelAssumptions.from_input(model_input)
    builder = StatementBuilder(assumptions, iterations=iterations)

    state = PeriodState.opening(model_input)
    warnings = base_year_warnings(state)
    output = ThreeStatementOutput()

    for year, growth_rate in enumerate(model_input.revenue_growth_rates, start=1):
        period = builder.build_period(year, state, growth_rate)

        output.income_statements.append(period.income_statement)
        output.balance_sheets.append(period.balance_sheet)
        output.cash_flow_statements.append(period.cash_flow_statement)
        warnings.extend(period_warnings(period))

        state = period.closing_state

    output.summary = build_summary(
        model_input.base_revenue,
        output.income_statements,
        output.balance_sheets,
        output.cash_flow_statements,
    )

    elapsed_us = int((time.perf_counter() - start) * 1_000_000)

    logger.info(
        "Projected %d years in %d us with %d warnings",
        model_input.n_years, elapsed_us, len(warnings)
    )

    return with_metadata(
        METHODOLOGY,
        model_input.to_dict(),
        warnings,
        elapsed_us,
        output,
    )


class FinancialModel:
    """
    Stateful wrapper around a three-statement projection.

    Keeps the last run so statements can be pulled out as DataFrames.
    """

    def __init__(
        self,
        model_input: Union[ThreeStatementInput, Mapping[str, Any]],
        iterations: Optional[int] = None
    ):
        """Initialize financial model."""
        self.model_input = _coerce_input(model_input)
        self.iterations = iterations
        self.output: Optional[ComputationOutput[ThreeStatementOutput]] = None
        self._is_built = False

    def build(self) -> pd.DataFrame:
        """
        Run the projection.

        Returns:
            Wide DataFrame of all three statements, one row per year,
            columns prefixed ``is_``, ``bs_`` and ``cf_``
        """
        self.output = build_three_statement_model(
            self.model_input, iterations=self.iterations
        )
        self._is_built = True
        return self.to_dataframe()

    def _require_built(self) -> ComputationOutput[ThreeStatementOutput]:
        if not self._is_built:
            raise RuntimeError("Model has not been built. Call build() first.")
        return self.output

    @property
    def warnings(self) -> List[str]:
        return self._require_built().warnings

    @property
    def summary(self) -> ProjectionSummary:
        return self._require_built().result.summary

    def to_dataframe(self) -> pd.DataFrame:
        """
        Combine the three statements into one DataFrame indexed by year.

        Returns:
            DataFrame with prefixed statement columns
        """
        result = self._require_built().result
        frames = []
        for prefix, name in zip(('is', 'bs', 'cf'), STATEMENT_NAMES):
            frames.append(result.to_dataframe(name).add_prefix(f'{prefix}_'))
        return pd.concat(frames, axis=1)
