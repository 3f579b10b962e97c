"""Tests for growth helpers and the projection summary."""

import pytest

from corp_finance import build_three_statement_model, sample_input
from corp_finance.models.summary import build_summary
from corp_finance.utils import compound_growth_rate, integer_power, nth_root, safe_divide


class TestGrowthHelpers:
    """Test safe division, n-th root and CAGR."""

    def test_safe_divide(self):
        assert safe_divide(10.0, 4.0) == pytest.approx(2.5)
        assert safe_divide(10.0, 0.0) == 0.0

    def test_integer_power(self):
        assert integer_power(2.0, 10) == pytest.approx(1024.0)
        assert integer_power(3.5, 0) == 1.0

    @pytest.mark.parametrize("value,n,expected", [
        (8.0, 3, 2.0),
        (1.259712, 3, 1.08),
        (2.0, 1, 2.0),
        (0.25, 2, 0.5),
        (1.0, 7, 1.0),
        (1.2 ** 20, 20, 1.2),
        (1.3 ** 15, 15, 1.3),
        (1.3 ** 30, 30, 1.3),
        (0.5 ** 10, 10, 0.5),
        (1e12, 2, 1e6),
    ])
    def test_nth_root(self, value, n, expected):
        """Newton iteration converges to the real root."""
        assert nth_root(value, n) == pytest.approx(expected, rel=1e-9)

    def test_nth_root_rejects_bad_arguments(self):
        with pytest.raises(ValueError):
            nth_root(8.0, 0)
        with pytest.raises(ValueError):
            nth_root(-8.0, 3)

    def test_cagr(self):
        """Three years of 10%, 8%, 6% compound to about 8%."""
        assert compound_growth_rate(1000.0, 1259.28, 3) == pytest.approx(0.0799, abs=1e-4)

    def test_cagr_decline(self):
        assert compound_growth_rate(1000.0, 810.0, 2) == pytest.approx(-0.10)

    @pytest.mark.parametrize("rate,periods", [
        (0.20, 20),
        (0.30, 12),
        (0.30, 15),
        (0.05, 25),
        (-0.15, 15),
    ])
    def test_cagr_long_horizons(self, rate, periods):
        """Constant growth is recovered over long horizons."""
        ending = 1000.0 * (1 + rate) ** periods

        assert compound_growth_rate(1000.0, ending, periods) == pytest.approx(rate, abs=1e-9)

    @pytest.mark.parametrize("beginning,ending,periods", [
        (0.0, 100.0, 3),
        (100.0, 0.0, 3),
        (-100.0, 100.0, 3),
        (100.0, 200.0, 0),
    ])
    def test_cagr_degenerate_inputs(self, beginning, ending, periods):
        """Degenerate inputs give zero growth instead of raising."""
        assert compound_growth_rate(beginning, ending, periods) == 0.0


class TestBuildSummary:
    """Test aggregation over a projected series."""

    def test_empty_series(self):
        summary = build_summary(1000.0, [], [], [])

        assert summary.total_years == 0
        assert summary.revenue_cagr == 0.0
        assert summary.cumulative_fcf == 0.0

    def test_averages(self, base_input):
        result = build_three_statement_model(base_input).result
        summary = build_summary(
            base_input.base_revenue,
            result.income_statements,
            result.balance_sheets,
            result.cash_flow_statements,
        )

        margins = [s.ebitda_margin for s in result.income_statements]
        net_margins = [s.net_margin for s in result.income_statements]
        assert summary.avg_ebitda_margin == pytest.approx(sum(margins) / 3)
        assert summary.avg_net_margin == pytest.approx(sum(net_margins) / 3)
        assert isinstance(summary.avg_ebitda_margin, float)

        last_is = result.income_statements[-1]
        last_bs = result.balance_sheets[-1]
        assert summary.ending_leverage == pytest.approx(last_bs.total_debt / last_is.ebitda)

    def test_to_dict(self, base_input):
        summary = build_three_statement_model(base_input).result.summary

        assert set(summary.to_dict()) == {
            'total_years', 'revenue_cagr', 'avg_ebitda_margin', 'avg_net_margin',
            'ending_debt', 'ending_leverage', 'cumulative_fcf',
        }

    def test_revenue_cagr_twenty_years(self):
        """Twenty years of 20% growth summarise to a 20% CAGR."""
        output = build_three_statement_model(
            sample_input(revenue_growth_rates=[0.20] * 20)
        )

        assert output.result.summary.total_years == 20
        assert output.result.summary.revenue_cagr == pytest.approx(0.20, abs=1e-9)
