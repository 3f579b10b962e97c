# src/corp_finance/financial_statements/statement_builder.py
"""
Statement Builder

Orchestrates the construction of all three financial statements for one
period in the order the circular dependency allows:

1. Period projection: revenue down to EBIT, working capital, PP&E
2. Circular solve: interest, net income, dividends, debt and cash
3. Income statement, cash flow statement and balance sheet
4. Closing balances handed forward as the next period's opening state
"""

import logging
from dataclasses import dataclass
from typing import Optional, Tuple

from ..core.circularity_solver import CircularitySolver, CircularSolution
from ..core.model_inputs import ModelAssumptions, PeriodState
from ..core.period_projector import PeriodProjection, project_period
from .balance_sheet import BalanceSheet
from .cash_flow_statement import CashFlowStatement
from .income_statement import IncomeStatement

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PeriodStatements:
    """Everything produced for one projected period."""
    year: int
    income_statement: IncomeStatement
    balance_sheet: BalanceSheet
    cash_flow_statement: CashFlowStatement
    projection: PeriodProjection
    solution: CircularSolution
    closing_state: PeriodState


class StatementBuilder:
    """
    Build linked financial statements one period at a time.

    The builder never mutates a PeriodState: each call takes the opening
    state by value and returns the closing state inside PeriodStatements.
    """

    def __init__(self, assumptions: ModelAssumptions, iterations: Optional[int] = None):
        """
        Initialize statement builder.

        Args:
            assumptions: Operating and financing policy for every year
            iterations: Override for the circular solver's round count
        """
        self.assumptions = assumptions

        solver_kwargs = {}
        if iterations is not None:
            solver_kwargs['iterations'] = iterations

        self.solver = CircularitySolver(
            interest_rate=assumptions.interest_rate,
            tax_rate=assumptions.tax_rate,
            dividend_payout_ratio=assumptions.dividend_payout_ratio,
            min_cash_balance=assumptions.min_cash_balance,
            **solver_kwargs
        )

    def build_period(
        self,
        year: int,
        opening: PeriodState,
        growth_rate: float
    ) -> PeriodStatements:
        """
        Build all three financial statements for one period.

        Args:
            year: Projection year (1-based)
            opening: Balances at the start of the year
            growth_rate: Revenue growth for the year

        Returns:
            PeriodStatements with the statements and the closing state
        """
        # Step 1: Operating projection (no financing dependency)
        projection = project_period(opening, self.assumptions, growth_rate)

        # Step 2: Resolve interest <-> debt <-> cash
        solution = self.solver.solve(
            ebit=projection.ebit,
            depreciation=projection.depreciation,
            working_capital_cash_flow=projection.working_capital_cash_flow,
            capex=projection.capex,
            opening_debt=opening.total_debt,
            opening_cash=opening.cash,
            scheduled_repayment=opening.total_debt * self.assumptions.debt_repayment_pct,
        )

        # Step 3: Statements
        income_statement = IncomeStatement.construct(year, projection, solution)
        cash_flow_statement = CashFlowStatement.construct(year, projection, solution)

        dividends = solution.dividends
        retained_earnings = (
            opening.retained_earnings_cumulative + solution.net_income - dividends
        )
        shareholders_equity = (
            opening.shareholders_equity + solution.net_income - dividends
        )

        current_debt, long_term_debt = self.split_debt(solution.closing_debt)

        balance_sheet = BalanceSheet.construct_from_components(
            year=year,
            cash=cash_flow_statement.ending_cash,
            accounts_receivable=projection.receivables,
            inventory=projection.inventory,
            ppe_net=projection.ppe_net,
            accounts_payable=projection.payables,
            current_debt=current_debt,
            long_term_debt=long_term_debt,
            shareholders_equity=shareholders_equity,
            retained_earnings_cumulative=retained_earnings,
        )

        # Step 4: Carry closing balances forward
        closing_state = PeriodState(
            revenue=projection.revenue,
            receivables=projection.receivables,
            inventory=projection.inventory,
            payables=projection.payables,
            ppe_net=projection.ppe_net,
            total_debt=solution.closing_debt,
            cash=solution.ending_cash,
            shareholders_equity=shareholders_equity,
            retained_earnings_cumulative=retained_earnings,
        )

        logger.debug(
            "Year %d: revenue=%.2f net_income=%.2f debt=%.2f cash=%.2f",
            year, projection.revenue, solution.net_income,
            solution.closing_debt, solution.ending_cash
        )

        return PeriodStatements(
            year=year,
            income_statement=income_statement,
            balance_sheet=balance_sheet,
            cash_flow_statement=cash_flow_statement,
            projection=projection,
            solution=solution,
            closing_state=closing_state,
        )

    def split_debt(self, total_debt: float) -> Tuple[float, float]:
        """
        Split closing debt into current and long-term portions.

        The current portion is next year's scheduled repayment, capped at
        the total outstanding.

        Args:
            total_debt: Closing debt balance

        Returns:
            Tuple of (current_debt, long_term_debt)
        """
        current_debt = min(
            total_debt * self.assumptions.debt_repayment_pct,
            total_debt
        )
        return current_debt, total_debt - current_debt

