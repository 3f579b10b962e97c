# src/corp_finance/core/period_projector.py
"""
Period Projector

Projects the pre-financing part of one year: the income statement down
to EBIT, the working-capital schedule and the PP&E roll-forward.

Nothing here depends on interest, debt or cash, so the projection can be
computed once per year before the circular financing loop runs.
"""

from dataclasses import dataclass

from ..constants import DAYS_IN_YEAR
from .model_inputs import ModelAssumptions, PeriodState


@dataclass(frozen=True)
class PeriodProjection:
    """Pre-financing results for one projected year."""
    # Income statement (pre-interest)
    revenue: float
    cogs: float
    gross_profit: float
    sga: float
    rnd: float
    total_opex: float
    ebitda: float
    depreciation: float
    ebit: float

    # Working capital (closing balances and changes vs opening)
    receivables: float
    inventory: float
    payables: float
    change_in_receivables: float
    change_in_inventory: float
    change_in_payables: float

    # Fixed assets
    capex: float
    ppe_net: float

    @property
    def working_capital_cash_flow(self) -> float:
        """
        Net cash effect of working capital movements.

        Increases in receivables and inventory use cash; increases in
        payables provide it.
        """
        return (
            -self.change_in_receivables
            - self.change_in_inventory
            + self.change_in_payables
        )


def project_period(
    opening: PeriodState,
    assumptions: ModelAssumptions,
    growth_rate: float
) -> PeriodProjection:
    """
    Project the operating side of one year.

    Args:
        opening: Balances at the start of the year
        assumptions: Margin, day-count and capex policy
        growth_rate: Revenue growth for this year

    Returns:
        PeriodProjection with EBIT, working capital and PP&E
    """
    # Income statement
    revenue = opening.revenue * (1 + growth_rate)
    cogs = revenue * assumptions.cogs_pct
    gross_profit = revenue - cogs
    sga = revenue * assumptions.sga_pct
    rnd = revenue * assumptions.rnd_pct
    total_opex = sga + rnd
    ebitda = gross_profit - total_opex

    # D&A runs on the opening PP&E balance
    depreciation = opening.ppe_net * assumptions.da_pct
    ebit = ebitda - depreciation

    # Working capital
    receivables = revenue * assumptions.dso_days / DAYS_IN_YEAR
    inventory = cogs * assumptions.dio_days / DAYS_IN_YEAR
    payables = cogs * assumptions.dpo_days / DAYS_IN_YEAR

    # PP&E roll-forward
    capex = revenue * assumptions.capex_pct
    ppe_net = opening.ppe_net - depreciation + capex

    return PeriodProjection(
        revenue=revenue,
        cogs=cogs,
        gross_profit=gross_profit,
        sga=sga,
        rnd=rnd,
        total_opex=total_opex,
        ebitda=ebitda,
        depreciation=depreciation,
        ebit=ebit,
        receivables=receivables,
        inventory=inventory,
        payables=payables,
        change_in_receivables=receivables - opening.receivables,
        change_in_inventory=inventory - opening.inventory,
        change_in_payables=payables - opening.payables,
        capex=capex,
        ppe_net=ppe_net,
    )
