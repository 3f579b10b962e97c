"""Tests for the pre-financing period projection."""

import pytest

from corp_finance.core.model_inputs import PeriodState
from corp_finance.core.period_projector import project_period


class TestProjectPeriod:
    """Test revenue-to-EBIT, working capital and PP&E projection."""

    def test_income_statement_lines(self, opening_state, assumptions):
        """Year-1 lines follow from revenue growth and margins."""
        projection = project_period(opening_state, assumptions, 0.10)

        assert projection.revenue == pytest.approx(1100.0)
        assert projection.cogs == pytest.approx(660.0)
        assert projection.gross_profit == pytest.approx(440.0)
        assert projection.sga == pytest.approx(110.0)
        assert projection.rnd == pytest.approx(55.0)
        assert projection.total_opex == pytest.approx(165.0)
        assert projection.ebitda == pytest.approx(275.0)

    def test_depreciation_uses_opening_ppe(self, opening_state, assumptions):
        """D&A is charged on the opening PP&E, not on revenue."""
        projection = project_period(opening_state, assumptions, 0.10)

        assert projection.depreciation == pytest.approx(50.0)
        assert projection.ebit == pytest.approx(225.0)

    def test_ppe_roll_forward(self, opening_state, assumptions):
        """Closing PP&E = opening - D&A + capex."""
        projection = project_period(opening_state, assumptions, 0.10)

        assert projection.capex == pytest.approx(88.0)
        assert projection.ppe_net == pytest.approx(538.0)

    def test_working_capital_balances(self, opening_state, assumptions):
        """Receivables run on revenue, inventory and payables on COGS."""
        projection = project_period(opening_state, assumptions, 0.10)

        assert projection.receivables == pytest.approx(1100 * 30 / 365)
        assert projection.inventory == pytest.approx(660 * 40 / 365)
        assert projection.payables == pytest.approx(660 * 35 / 365)
        assert projection.change_in_receivables == pytest.approx(1100 * 30 / 365 - 80)
        assert projection.change_in_inventory == pytest.approx(660 * 40 / 365 - 60)
        assert projection.change_in_payables == pytest.approx(660 * 35 / 365 - 50)

    def test_working_capital_cash_flow_sign(self, opening_state, assumptions):
        """Growing receivables and inventory consume cash; payables supply it."""
        projection = project_period(opening_state, assumptions, 0.10)

        expected = (
            -projection.change_in_receivables
            - projection.change_in_inventory
            + projection.change_in_payables
        )
        assert projection.working_capital_cash_flow == pytest.approx(expected)
        assert projection.working_capital_cash_flow < 0

    def test_negative_growth(self, opening_state, assumptions):
        """A shrinking year releases working capital."""
        projection = project_period(opening_state, assumptions, -0.50)

        assert projection.revenue == pytest.approx(500.0)
        assert projection.change_in_receivables < 0

    def test_zero_revenue_state(self, assumptions):
        """Zero revenue projects zero operating lines without errors."""
        opening = PeriodState(
            revenue=0.0, receivables=0.0, inventory=0.0, payables=0.0,
            ppe_net=100.0, total_debt=0.0, cash=0.0, shareholders_equity=100.0,
        )
        projection = project_period(opening, assumptions, 0.25)

        assert projection.revenue == 0.0
        assert projection.ebitda == 0.0
        assert projection.ebit == pytest.approx(-10.0)
