# src/corp_finance/financial_statements/balance_sheet.py
"""
Balance Sheet Construction

Builds the closing balance sheet for one projected year. Cash is taken
from the solved financing waterfall (never re-derived), so it ties to the
cash-flow statement by construction; assets equal liabilities plus equity
up to floating-point noise whenever the base year balanced.
"""

from dataclasses import dataclass, asdict
from typing import Dict, Tuple

from ..constants import BALANCE_TOLERANCE


@dataclass(frozen=True)
class BalanceSheet:
    """Balance sheet for a single projected year."""
    year: int

    # Assets
    cash: float
    accounts_receivable: float
    inventory: float
    total_current_assets: float
    ppe_net: float
    total_assets: float

    # Liabilities
    accounts_payable: float
    current_debt: float
    total_current_liabilities: float
    long_term_debt: float
    total_debt: float
    total_liabilities: float

    # Equity
    shareholders_equity: float
    retained_earnings_cumulative: float
    total_liabilities_and_equity: float

    @classmethod
    def construct_from_components(
        cls,
        year: int,
        cash: float,
        accounts_receivable: float,
        inventory: float,
        ppe_net: float,
        accounts_payable: float,
        current_debt: float,
        long_term_debt: float,
        shareholders_equity: float,
        retained_earnings_cumulative: float
    ) -> 'BalanceSheet':
        """
        Construct balance sheet from components.

        Args:
            year: Projection year (1-based)
            All other arguments are closing line items

        Returns:
            BalanceSheet with subtotals filled in
        """
        total_current_assets = cash + accounts_receivable + inventory
        total_assets = total_current_assets + ppe_net

        total_current_liabilities = accounts_payable + current_debt
        total_liabilities = total_current_liabilities + long_term_debt

        return cls(
            year=year,
            cash=cash,
            accounts_receivable=accounts_receivable,
            inventory=inventory,
            total_current_assets=total_current_assets,
            ppe_net=ppe_net,
            total_assets=total_assets,
            accounts_payable=accounts_payable,
            current_debt=current_debt,
            total_current_liabilities=total_current_liabilities,
            long_term_debt=long_term_debt,
            total_debt=current_debt + long_term_debt,
            total_liabilities=total_liabilities,
            shareholders_equity=shareholders_equity,
            retained_earnings_cumulative=retained_earnings_cumulative,
            total_liabilities_and_equity=total_liabilities + shareholders_equity,
        )

    @property
    def balance_check(self) -> float:
        """Assets minus liabilities and equity."""
        return self.total_assets - self.total_liabilities_and_equity

    def to_dict(self) -> Dict[str, float]:
        """
        Convert balance sheet to dictionary format.

        Returns:
            Dictionary with all balance sheet items
        """
        return asdict(self)

    def validate(self, tolerance: float = BALANCE_TOLERANCE) -> Tuple[bool, float]:
        """
        Validate that balance sheet balances.

        Args:
            tolerance: Maximum acceptable imbalance

        Returns:
            Tuple of (is_balanced, imbalance_amount)
        """
        imbalance = self.balance_check
        return abs(imbalance) < tolerance, imbalance

