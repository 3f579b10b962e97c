# src/corp_finance/financial_statements/income_statement.py
"""
Income Statement Construction

Builds the income statement for one projected year from the operating
projection and the solved financing figures. Interest expense comes from
the circular solve on average debt, so the statement is only final once
the financing loop has converged.
"""

from dataclasses import dataclass, asdict
from typing import Dict, List, Tuple

from ..core.circularity_solver import CircularSolution
from ..core.period_projector import PeriodProjection
from ..utils.growth import safe_divide


@dataclass(frozen=True)
class IncomeStatement:
    """Income statement for a single projected year."""
    year: int

    # Revenue and cost of sales
    revenue: float
    cogs: float
    gross_profit: float
    gross_margin: float

    # Operating expenses
    sga: float
    rnd: float
    total_opex: float
    ebitda: float
    ebitda_margin: float
    depreciation: float
    ebit: float
    ebit_margin: float

    # Financing and tax
    interest_expense: float
    ebt: float
    taxes: float
    net_income: float
    net_margin: float

    @classmethod
    def construct(
        cls,
        year: int,
        projection: PeriodProjection,
        solution: CircularSolution
    ) -> 'IncomeStatement':
        """
        Construct the income statement from its components.

        Args:
            year: Projection year (1-based)
            projection: Pre-financing results for the year
            solution: Solved interest, taxes and net income

        Returns:
            IncomeStatement
        """
        revenue = projection.revenue
        return cls(
            year=year,
            revenue=revenue,
            cogs=projection.cogs,
            gross_profit=projection.gross_profit,
            gross_margin=safe_divide(projection.gross_profit, revenue),
            sga=projection.sga,
            rnd=projection.rnd,
            total_opex=projection.total_opex,
            ebitda=projection.ebitda,
            ebitda_margin=safe_divide(projection.ebitda, revenue),
            depreciation=projection.depreciation,
            ebit=projection.ebit,
            ebit_margin=safe_divide(projection.ebit, revenue),
            interest_expense=solution.interest_expense,
            ebt=solution.ebt,
            taxes=solution.taxes,
            net_income=solution.net_income,
            net_margin=safe_divide(solution.net_income, revenue),
        )

    @property
    def interest_coverage(self) -> float:
        """EBIT / interest expense (0 when there is no interest)."""
        return safe_divide(self.ebit, self.interest_expense)

    def to_dict(self) -> Dict[str, float]:
        """
        Convert income statement to dictionary format.

        Returns:
            Dictionary with all income statement items
        """
        return asdict(self)

    def validate(self, tolerance: float = 1e-6) -> Tuple[bool, List[str]]:
        """
        Validate income statement subtotals.

        Args:
            tolerance: Maximum acceptable difference per subtotal

        Returns:
            Tuple of (is_valid, list of error messages)
        """
        errors = []

        if self.revenue < 0:
            errors.append("Revenue is negative")

        if abs(self.revenue - self.cogs - self.gross_profit) > tolerance:
            errors.append("Gross profit calculation error")

        if abs(self.gross_profit - self.total_opex - self.ebitda) > tolerance:
            errors.append("EBITDA calculation error")

        if abs(self.ebitda - self.depreciation - self.ebit) > tolerance:
            errors.append("EBIT calculation error")

        if abs(self.ebit - self.interest_expense - self.ebt) > tolerance:
            errors.append("EBT calculation error")

        if abs(self.ebt - self.taxes - self.net_income) > tolerance:
            errors.append("Net income calculation error")

        return len(errors) == 0, errors
