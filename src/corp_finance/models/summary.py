# src/corp_finance/models/summary.py
"""
Projection Summary

Aggregate metrics computed once over the full projected series.
"""

from dataclasses import dataclass, asdict
from typing import Dict, Sequence

import numpy as np

from ..financial_statements.balance_sheet import BalanceSheet
from ..financial_statements.cash_flow_statement import CashFlowStatement
from ..financial_statements.income_statement import IncomeStatement
from ..utils.growth import compound_growth_rate


@dataclass(frozen=True)
class ProjectionSummary:
    """Aggregate summary metrics across the projection period."""
    total_years: int
    revenue_cagr: float
    avg_ebitda_margin: float
    avg_net_margin: float
    ending_debt: float
    ending_leverage: float
    cumulative_fcf: float

    def to_dict(self) -> Dict[str, float]:
        return asdict(self)


def build_summary(
    base_revenue: float,
    income_statements: Sequence[IncomeStatement],
    balance_sheets: Sequence[BalanceSheet],
    cash_flow_statements: Sequence[CashFlowStatement]
) -> ProjectionSummary:
    """
    Summarise a full projection.

    Args:
        base_revenue: Revenue of the base (pre-projection) year
        income_statements: Income statements in year order
        balance_sheets: Balance sheets in year order
        cash_flow_statements: Cash flow statements in year order

    Returns:
        ProjectionSummary
    """
    n = len(income_statements)
    if n == 0:
        return ProjectionSummary(
            total_years=0,
            revenue_cagr=0.0,
            avg_ebitda_margin=0.0,
            avg_net_margin=0.0,
            ending_debt=0.0,
            ending_leverage=0.0,
            cumulative_fcf=0.0,
        )

    last_is = income_statements[-1]
    last_bs = balance_sheets[-1]

    revenue_cagr = compound_growth_rate(base_revenue, last_is.revenue, n)

    avg_ebitda_margin = float(np.mean([s.ebitda_margin for s in income_statements]))
    avg_net_margin = float(np.mean([s.net_margin for s in income_statements]))

    # Sequential sum, year by year
    cumulative_fcf = sum(cf.fcf for cf in cash_flow_statements)

    if last_is.ebitda > 0:
        ending_leverage = last_bs.total_debt / last_is.ebitda
    else:
        ending_leverage = 0.0

    return ProjectionSummary(
        total_years=n,
        revenue_cagr=revenue_cagr,
        avg_ebitda_margin=avg_ebitda_margin,
        avg_net_margin=avg_net_margin,
        ending_debt=last_bs.total_debt,
        ending_leverage=ending_leverage,
        cumulative_fcf=cumulative_fcf,
    )
