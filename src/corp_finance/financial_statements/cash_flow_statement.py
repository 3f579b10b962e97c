# src/corp_finance/financial_statements/cash_flow_statement.py
"""
Cash Flow Statement Construction

Indirect-method cash flow statement for one projected year, plus free
cash flow to the firm (FCF) and to equity (FCFE).
"""

from dataclasses import dataclass, asdict
from typing import Dict

from ..core.circularity_solver import CircularSolution
from ..core.period_projector import PeriodProjection


@dataclass(frozen=True)
class CashFlowStatement:
    """Cash flow statement for a single projected year."""
    year: int

    # Operating activities
    net_income: float
    depreciation: float
    change_in_receivables: float
    change_in_inventory: float
    change_in_payables: float
    cash_from_operations: float

    # Investing activities
    capex: float
    cash_from_investing: float

    # Financing activities
    debt_repayment: float
    new_debt: float
    dividends: float
    cash_from_financing: float

    # Totals
    net_change_in_cash: float
    ending_cash: float
    fcf: float
    fcfe: float

    @classmethod
    def construct(
        cls,
        year: int,
        projection: PeriodProjection,
        solution: CircularSolution
    ) -> 'CashFlowStatement':
        """
        Construct the cash flow statement.

        FCF = CFO - capex
        FCFE = FCF - total debt repayment + new debt

        Args:
            year: Projection year (1-based)
            projection: Pre-financing results for the year
            solution: Solved financing figures

        Returns:
            CashFlowStatement
        """
        cfo = solution.cash_from_operations
        cfi = -projection.capex
        debt_repayment = solution.total_debt_repayment
        cff = -debt_repayment + solution.new_debt - solution.dividends

        fcf = cfo - projection.capex
        fcfe = fcf - debt_repayment + solution.new_debt

        return cls(
            year=year,
            net_income=solution.net_income,
            depreciation=projection.depreciation,
            change_in_receivables=projection.change_in_receivables,
            change_in_inventory=projection.change_in_inventory,
            change_in_payables=projection.change_in_payables,
            cash_from_operations=cfo,
            capex=projection.capex,
            cash_from_investing=cfi,
            debt_repayment=debt_repayment,
            new_debt=solution.new_debt,
            dividends=solution.dividends,
            cash_from_financing=cff,
            net_change_in_cash=cfo + cfi + cff,
            ending_cash=solution.ending_cash,
            fcf=fcf,
            fcfe=fcfe,
        )

    def to_dict(self) -> Dict[str, float]:
        """
        Convert cash flow statement to dictionary format.

        Returns:
            Dictionary with all cash flow items
        """
        return asdict(self)
