"""Tests for the interest / debt / cash circularity solver."""

import pytest

from corp_finance.core.circularity_solver import CircularitySolver, solve_financing


@pytest.fixture
def interest_free_solver():
    """Solver with no interest so each pass is easy to check by hand."""
    return CircularitySolver(
        interest_rate=0.0,
        tax_rate=0.25,
        dividend_payout_ratio=0.0,
        min_cash_balance=50.0,
    )


class TestFinancingPass:
    """Test one pass of the financing waterfall."""

    def test_excess_cash_sweeps_debt(self, interest_free_solver):
        """Cash above the minimum prepays debt."""
        result = interest_free_solver.financing_pass(
            interest_expense=0.0, ebit=100.0, depreciation=10.0,
            working_capital_cash_flow=0.0, capex=20.0,
            opening_debt=100.0, opening_cash=50.0, scheduled_repayment=10.0,
        )

        assert result.net_income == pytest.approx(75.0)
        assert result.cash_from_operations == pytest.approx(85.0)
        assert result.extra_paydown == pytest.approx(55.0)
        assert result.new_debt == 0.0
        assert result.ending_cash == pytest.approx(50.0)
        assert result.closing_debt == pytest.approx(35.0)
        assert result.total_debt_repayment == pytest.approx(65.0)

    def test_shortfall_draws_revolver(self, interest_free_solver):
        """Cash below the minimum is topped up with new debt."""
        result = interest_free_solver.financing_pass(
            interest_expense=0.0, ebit=0.0, depreciation=0.0,
            working_capital_cash_flow=0.0, capex=100.0,
            opening_debt=0.0, opening_cash=50.0, scheduled_repayment=0.0,
        )

        assert result.new_debt == pytest.approx(100.0)
        assert result.extra_paydown == 0.0
        assert result.ending_cash == pytest.approx(50.0)
        assert result.closing_debt == pytest.approx(100.0)

    def test_sweep_capped_at_remaining_debt(self):
        """Excess beyond the outstanding debt stays in cash."""
        solver = CircularitySolver(
            interest_rate=0.0, tax_rate=0.0,
            dividend_payout_ratio=0.0, min_cash_balance=0.0,
        )
        result = solver.financing_pass(
            interest_expense=0.0, ebit=1000.0, depreciation=0.0,
            working_capital_cash_flow=0.0, capex=0.0,
            opening_debt=100.0, opening_cash=0.0, scheduled_repayment=10.0,
        )

        assert result.extra_paydown == pytest.approx(90.0)
        assert result.closing_debt == 0.0
        assert result.ending_cash == pytest.approx(900.0)

    def test_loss_pays_no_tax_or_dividends(self):
        """Negative pre-tax income is untaxed and pays no dividend."""
        solver = CircularitySolver(
            interest_rate=0.0, tax_rate=0.25,
            dividend_payout_ratio=0.5, min_cash_balance=0.0,
        )
        result = solver.financing_pass(
            interest_expense=20.0, ebit=-100.0, depreciation=0.0,
            working_capital_cash_flow=0.0, capex=0.0,
            opening_debt=0.0, opening_cash=500.0, scheduled_repayment=0.0,
        )

        assert result.ebt == pytest.approx(-120.0)
        assert result.taxes == 0.0
        assert result.net_income == pytest.approx(-120.0)
        assert result.dividends == 0.0

    def test_dividends_follow_payout_ratio(self):
        """Dividends are the payout share of positive net income."""
        solver = CircularitySolver(
            interest_rate=0.0, tax_rate=0.0,
            dividend_payout_ratio=0.4, min_cash_balance=0.0,
        )
        result = solver.financing_pass(
            interest_expense=0.0, ebit=200.0, depreciation=0.0,
            working_capital_cash_flow=0.0, capex=0.0,
            opening_debt=0.0, opening_cash=0.0, scheduled_repayment=0.0,
        )

        assert result.dividends == pytest.approx(80.0)


class TestSolve:
    """Test the iterated solve."""

    def test_interest_consistent_with_average_debt(self):
        """Reported interest matches the average of opening and closing debt."""
        solver = CircularitySolver(
            interest_rate=0.05, tax_rate=0.25,
            dividend_payout_ratio=0.3, min_cash_balance=50.0,
        )
        result = solver.solve(
            ebit=225.0, depreciation=50.0, working_capital_cash_flow=-9.45,
            capex=88.0, opening_debt=400.0, opening_cash=100.0,
            scheduled_repayment=20.0,
        )

        implied = (400.0 + result.closing_debt) / 2 * 0.05
        assert result.interest_expense == pytest.approx(implied, abs=1e-6)
        assert result.residual < 1e-6
        assert result.iterations == 5

    def test_zero_iterations_uses_opening_debt_interest(self):
        """With no rounds the seed interest is reported."""
        solver = CircularitySolver(
            interest_rate=0.05, tax_rate=0.25,
            dividend_payout_ratio=0.3, min_cash_balance=50.0, iterations=0,
        )
        result = solver.solve(
            ebit=225.0, depreciation=50.0, working_capital_cash_flow=0.0,
            capex=88.0, opening_debt=400.0, opening_cash=100.0,
            scheduled_repayment=20.0,
        )

        assert result.interest_expense == pytest.approx(20.0)
        assert result.iterations == 0

    def test_zero_debt_zero_interest(self):
        """No debt and no draw means no interest."""
        result = solve_financing(
            ebit=100.0, depreciation=10.0, working_capital_cash_flow=0.0,
            capex=10.0, opening_debt=0.0, opening_cash=100.0,
            debt_repayment_pct=0.0, interest_rate=0.08, tax_rate=0.25,
            dividend_payout_ratio=0.3, min_cash_balance=0.0,
        )

        assert result.interest_expense == 0.0
        assert result.closing_debt == 0.0

    def test_revolver_draw_is_charged_interest(self):
        """Interest includes half of the year's revolver draw."""
        result = solve_financing(
            ebit=0.0, depreciation=0.0, working_capital_cash_flow=0.0,
            capex=100.0, opening_debt=0.0, opening_cash=0.0,
            debt_repayment_pct=0.0, interest_rate=0.10, tax_rate=0.0,
            dividend_payout_ratio=0.0, min_cash_balance=0.0,
        )

        assert result.new_debt > 100.0
        assert result.interest_expense == pytest.approx(
            result.closing_debt / 2 * 0.10, abs=1e-6
        )

    def test_scheduled_repayment_from_percentage(self):
        """The functional form derives the scheduled repayment from debt."""
        result = solve_financing(
            ebit=0.0, depreciation=0.0, working_capital_cash_flow=0.0,
            capex=0.0, opening_debt=200.0, opening_cash=1000.0,
            debt_repayment_pct=0.10, interest_rate=0.0, tax_rate=0.0,
            dividend_payout_ratio=0.0, min_cash_balance=1000.0,
        )

        assert result.scheduled_repayment == pytest.approx(20.0)

    def test_rejects_negative_iterations(self):
        """Round count must be non-negative."""
        with pytest.raises(ValueError):
            CircularitySolver(0.05, 0.25, 0.3, 0.0, iterations=-1)

    def test_rejects_negative_min_cash(self):
        """Cash floor must be non-negative."""
        with pytest.raises(ValueError):
            CircularitySolver(0.05, 0.25, 0.3, -1.0)
