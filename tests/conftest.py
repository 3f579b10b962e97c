"""Pytest configuration and shared fixtures."""

import pytest

from corp_finance.config import SAMPLE_INPUT, sample_input
from corp_finance.core.model_inputs import ModelAssumptions, PeriodState


@pytest.fixture
def sample_data():
    """Return a fresh copy of the reference scenario as a plain dict."""
    data = dict(SAMPLE_INPUT)
    data['revenue_growth_rates'] = list(SAMPLE_INPUT['revenue_growth_rates'])
    return data


@pytest.fixture
def base_input():
    """Return the reference three-year scenario."""
    return sample_input()


@pytest.fixture
def assumptions(base_input):
    """Return the policy view of the reference scenario."""
    return ModelAssumptions.from_input(base_input)


@pytest.fixture
def opening_state(base_input):
    """Return the opening balances of the reference scenario."""
    return PeriodState.opening(base_input)


# Scenarios whose base year balances (assets == liabilities + equity)
BALANCED_SCENARIOS = {
    'reference': {},
    'high_growth': {
        'revenue_growth_rates': [0.25, 0.20, 0.15, 0.10, 0.08],
        'capex_pct': 0.12,
    },
    'deleveraging': {
        'base_debt': 800.0,
        'base_cash': 500.0,
        'debt_repayment_pct': 0.10,
        'dividend_payout_ratio': 0.0,
        'min_cash_balance': 20.0,
    },
    'revolver': {
        'revenue_growth_rates': [0.10, 0.10, 0.10],
        'capex_pct': 0.25,
        'debt_repayment_pct': 0.15,
        'dividend_payout_ratio': 0.50,
        'min_cash_balance': 100.0,
    },
    'zero_debt': {
        'base_debt': 0.0,
        'base_equity': 690.0,
        'debt_repayment_pct': 0.0,
        'min_cash_balance': 0.0,
    },
    'zero_growth': {
        'revenue_growth_rates': [0.0, 0.0, 0.0, 0.0],
    },
    'full_payout': {
        'dividend_payout_ratio': 1.0,
    },
    'shrinking': {
        'revenue_growth_rates': [-0.20, -0.30, -0.10],
    },
}


@pytest.fixture(params=sorted(BALANCED_SCENARIOS))
def balanced_scenario(request):
    """Return (name, input) for each scenario with a balanced base year."""
    return request.param, sample_input(**BALANCED_SCENARIOS[request.param])
