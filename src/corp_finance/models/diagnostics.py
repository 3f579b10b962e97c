# src/corp_finance/models/diagnostics.py
"""
Projection Diagnostics

Non-fatal checks run on every projected period. Findings are returned as
human-readable strings and collected into the run's warning list; they
never stop the projection.
"""

from typing import List

from ..constants import BALANCE_TOLERANCE, COVERAGE_WARNING, LEVERAGE_WARNING
from ..core.model_inputs import PeriodState
from ..financial_statements.statement_builder import PeriodStatements


def base_year_warnings(opening: PeriodState) -> List[str]:
    """
    Check the base-year snapshot before projection.

    An unbalanced base year is carried into every projected balance
    sheet, so it is reported once up front.
    """
    warnings = []
    gap = opening.balance_gap
    if abs(gap) >= BALANCE_TOLERANCE:
        warnings.append(
            f"Base year: assets ({opening.total_assets:.2f}) differ from "
            f"liabilities and equity ({opening.total_liabilities_and_equity:.2f}) "
            f"by {gap:.2f}; projected balance sheets inherit the gap"
        )
    return warnings


def period_warnings(period: PeriodStatements) -> List[str]:
    """
    Credit and consistency diagnostics for one period.

    Checks:
    - Leverage (total debt / EBITDA) above 6.0x, when EBITDA is positive
    - Interest coverage (EBIT / interest) below 2.0x, when there is interest
    - Negative free cash flow
    - Revolver draws needed to hold the minimum cash balance
    - Balance sheet or cash tie breaches beyond the tolerance

    Args:
        period: Statements for one projected year

    Returns:
        List of warning messages (possibly empty)
    """
    year = period.year
    income = period.income_statement
    balance = period.balance_sheet
    cash_flow = period.cash_flow_statement
    warnings = []

    if income.ebitda > 0:
        leverage = balance.total_debt / income.ebitda
        if leverage > LEVERAGE_WARNING:
            warnings.append(
                f"Year {year}: leverage ratio {leverage:.1f}x exceeds "
                f"{LEVERAGE_WARNING:.1f}x threshold"
            )

    if income.interest_expense > 0:
        coverage = income.interest_coverage
        if coverage < COVERAGE_WARNING:
            warnings.append(
                f"Year {year}: interest coverage ratio {coverage:.2f}x below "
                f"{COVERAGE_WARNING:.1f}x minimum"
            )

    if cash_flow.fcf < 0:
        warnings.append(f"Year {year}: negative free cash flow ({cash_flow.fcf:.2f})")

    if cash_flow.new_debt > 0:
        warnings.append(
            f"Year {year}: revolver draw of {cash_flow.new_debt:.2f} to maintain "
            f"minimum cash balance"
        )

    is_balanced, imbalance = balance.validate()
    if not is_balanced:
        warnings.append(
            f"Year {year}: balance sheet out of balance by {imbalance:.2f}"
        )

    if abs(balance.cash - cash_flow.ending_cash) >= BALANCE_TOLERANCE:
        warnings.append(
            f"Year {year}: balance sheet cash ({balance.cash:.2f}) does not tie "
            f"to cash flow ending cash ({cash_flow.ending_cash:.2f})"
        )

    is_valid, errors = income.validate()
    if not is_valid:
        warnings.extend(f"Year {year}: {error}" for error in errors)

    return warnings
