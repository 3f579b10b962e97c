# src/corp_finance/core/validation.py
"""
Input Validation

Gates a model run: every check here runs before any period is projected,
so a failing input never yields partial statements.
"""

import math
from typing import List

from ..exceptions import FinancialImpossibilityError, InvalidInputError
from .model_inputs import ThreeStatementInput

RATE_FIELDS = [
    'cogs_pct',
    'sga_pct',
    'rnd_pct',
    'da_pct',
    'interest_rate',
    'tax_rate',
    'capex_pct',
    'debt_repayment_pct',
    'dividend_payout_ratio',
]

NON_NEGATIVE_FIELDS = [
    'base_revenue',
    'base_cash',
    'base_receivables',
    'base_inventory',
    'base_payables',
    'base_ppe',
    'base_debt',
    'base_equity',
    'min_cash_balance',
    'dso_days',
    'dio_days',
    'dpo_days',
]


def validate_rate(field: str, value: float) -> None:
    """Require a fraction in [0, 1]."""
    if not math.isfinite(value) or value < 0 or value > 1:
        raise InvalidInputError(
            field, f"Rate must be between 0 and 1, got {value}"
        )


def validate_non_negative(field: str, value: float) -> None:
    """Require a finite amount >= 0."""
    if not math.isfinite(value) or value < 0:
        raise InvalidInputError(
            field, f"Value must be non-negative, got {value}"
        )


def validate_growth_rates(rates: List[float]) -> None:
    """
    Validate the per-year revenue growth vector.

    Growth may be negative (a shrinking business) but not below -100%,
    and there must be at least one projected year.
    """
    if len(rates) == 0:
        raise InvalidInputError(
            'revenue_growth_rates', "Must contain at least one growth rate"
        )

    for year, rate in enumerate(rates, start=1):
        if not math.isfinite(rate) or rate < -1:
            raise InvalidInputError(
                'revenue_growth_rates',
                f"Year {year} growth must be a finite rate >= -1, got {rate}"
            )


def validate_input(model_input: ThreeStatementInput) -> None:
    """
    Validate a full model input.

    Args:
        model_input: Input to check

    Raises:
        InvalidInputError: A rate outside [0, 1], a negative balance or
            day count, or an empty/invalid growth vector
        FinancialImpossibilityError: COGS + SG&A + R&D exceed 100% of revenue
    """
    validate_growth_rates(list(model_input.revenue_growth_rates))

    for field in RATE_FIELDS:
        validate_rate(field, getattr(model_input, field))

    for field in NON_NEGATIVE_FIELDS:
        validate_non_negative(field, getattr(model_input, field))

    total_cost_pct = (
        model_input.cogs_pct +
        model_input.sga_pct +
        model_input.rnd_pct
    )
    # Sums such as 0.7 + 0.2 + 0.1 carry binary rounding noise
    if total_cost_pct > 1 + 1e-12:
        raise FinancialImpossibilityError(
            f"Total operating cost percentage ({total_cost_pct:.4f}) "
            f"exceeds 100% of revenue"
        )
