# src/corp_finance/core/model_inputs.py
"""
Model Inputs and Carried State

Data structures consumed by the three-statement engine:

- ThreeStatementInput: the full, serialisable input of one model run
- ModelAssumptions: the operating and financing policy applied every year
- PeriodState: closing balances of one period, opening balances of the next
"""

import math
from dataclasses import dataclass, asdict, fields
from typing import Any, Dict, Mapping, Tuple

from ..exceptions import InvalidInputError


@dataclass(frozen=True)
class ThreeStatementInput:
    """Full input of a linked three-statement model run."""

    # Base year snapshot
    base_revenue: float
    base_cash: float
    base_receivables: float
    base_inventory: float
    base_payables: float
    base_ppe: float
    base_debt: float
    base_equity: float

    # One growth rate per projected year
    revenue_growth_rates: Tuple[float, ...]

    # Operating margins (fractions of revenue, D&A of prior PP&E)
    cogs_pct: float
    sga_pct: float
    rnd_pct: float
    da_pct: float

    # Financing and tax
    interest_rate: float
    tax_rate: float

    # Working capital day counts
    dso_days: float
    dio_days: float
    dpo_days: float

    # Policies
    capex_pct: float
    debt_repayment_pct: float
    dividend_payout_ratio: float
    min_cash_balance: float

    @property
    def n_years(self) -> int:
        """Number of projected years."""
        return len(self.revenue_growth_rates)

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert the input to a JSON-friendly dictionary.

        Returns:
            Dictionary keyed by field name, growth rates as a list
        """
        data = asdict(self)
        data['revenue_growth_rates'] = list(self.revenue_growth_rates)
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'ThreeStatementInput':
        """
        Build an input from a mapping such as parsed JSON or YAML.

        Args:
            data: Mapping with exactly the input field names

        Returns:
            ThreeStatementInput

        Raises:
            InvalidInputError: On missing, unknown or non-numeric fields
        """
        if not isinstance(data, Mapping):
            raise InvalidInputError(
                'input', f"Expected a mapping, got {type(data).__name__}"
            )

        expected = [f.name for f in fields(cls)]
        unknown = sorted(set(data) - set(expected))
        if unknown:
            raise InvalidInputError(unknown[0], "Unknown input field")

        values = {}
        for name in expected:
            if name not in data:
                raise InvalidInputError(name, "Missing required field")
            raw = data[name]
            if name == 'revenue_growth_rates':
                if isinstance(raw, (str, bytes)) or not hasattr(raw, '__iter__'):
                    raise InvalidInputError(name, "Must be a list of growth rates")
                values[name] = tuple(_to_float(name, item) for item in raw)
            else:
                values[name] = _to_float(name, raw)

        return cls(**values)


def _to_float(field: str, value: Any) -> float:
    # bool is an int subclass; True/False are never meaningful amounts
    if isinstance(value, bool):
        raise InvalidInputError(field, f"Expected a number, got {value!r}")
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise InvalidInputError(field, f"Expected a number, got {value!r}") from None
    if math.isnan(number):
        raise InvalidInputError(field, "Value must not be NaN")
    return number


@dataclass(frozen=True)
class ModelAssumptions:
    """
    Operating and financing policy applied in every projected year.

    Percentages are fractions in [0, 1]; day counts are on a 365-day year.
    """
    cogs_pct: float
    sga_pct: float
    rnd_pct: float
    da_pct: float
    interest_rate: float
    tax_rate: float
    dso_days: float
    dio_days: float
    dpo_days: float
    capex_pct: float
    debt_repayment_pct: float
    dividend_payout_ratio: float
    min_cash_balance: float

    @classmethod
    def from_input(cls, model_input: ThreeStatementInput) -> 'ModelAssumptions':
        """Extract the policy view of a model input."""
        return cls(**{
            f.name: getattr(model_input, f.name) for f in fields(cls)
        })


@dataclass(frozen=True)
class PeriodState:
    """
    Balances carried from one period to the next.

    Closing values of period t are the opening values of period t+1.
    Instances are immutable; the statement builder returns a new state
    for every period.
    """
    revenue: float
    receivables: float
    inventory: float
    payables: float
    ppe_net: float
    total_debt: float
    cash: float
    shareholders_equity: float
    retained_earnings_cumulative: float = 0.0

    @classmethod
    def opening(cls, model_input: ThreeStatementInput) -> 'PeriodState':
        """
        Create the opening state from the base-year snapshot.

        Args:
            model_input: Validated model input

        Returns:
            PeriodState for the start of year 1
        """
        return cls(
            revenue=model_input.base_revenue,
            receivables=model_input.base_receivables,
            inventory=model_input.base_inventory,
            payables=model_input.base_payables,
            ppe_net=model_input.base_ppe,
            total_debt=model_input.base_debt,
            cash=model_input.base_cash,
            shareholders_equity=model_input.base_equity,
            retained_earnings_cumulative=0.0,
        )

    @property
    def total_assets(self) -> float:
        return self.cash + self.receivables + self.inventory + self.ppe_net

    @property
    def total_liabilities_and_equity(self) -> float:
        return self.payables + self.total_debt + self.shareholders_equity

    @property
    def balance_gap(self) -> float:
        """Assets minus liabilities and equity."""
        return self.total_assets - self.total_liabilities_and_equity
