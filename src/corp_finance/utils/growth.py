# src/corp_finance/utils/growth.py
"""
Growth Rate Utilities

Compound growth and ratio helpers used by the projection summary.

The n-th root is found with Newton's method on x^n = ratio using only
multiplication and division, so the result does not depend on the
platform's fractional power implementation.
"""

import math

from ..constants import CAGR_FLOOR, CAGR_ITERATIONS


def safe_divide(numerator: float, denominator: float) -> float:
    """
    Divide, returning 0.0 instead of raising when the denominator is zero.

    Args:
        numerator: Dividend
        denominator: Divisor

    Returns:
        numerator / denominator, or 0.0 for a zero denominator
    """
    if denominator == 0:
        return 0.0
    return numerator / denominator


def integer_power(base: float, exponent: int) -> float:
    """Raise ``base`` to a non-negative integer power by repeated multiplication."""
    result = 1.0
    for _ in range(exponent):
        result *= base
    return result


def newton_seed(value: float, n: int) -> float:
    """
    Starting point for the n-th root of ``value``, never below the root.

    Two upper bounds are combined and the smaller one is used:

    - Bernoulli: (1 + (value - 1)/n)^n >= value, tight for ratios near 1
    - Binary exponent: value < 2^e gives root < 2^ceil(e/n), tight for
      large or tiny ratios

    Starting above the root makes Newton descend monotonically.
    """
    bernoulli = 1 + (value - 1) / n

    _, exponent = math.frexp(value)
    binary = math.ldexp(1.0, -((-exponent) // n))

    return min(bernoulli, binary)


def nth_root(
    value: float,
    n: int,
    iterations: int = CAGR_ITERATIONS
) -> float:
    """
    Calculate the n-th root of a positive value with Newton's method.

    Iteration:
        x_{k+1} = x_k * (1 - 1/n) + value / (n * x_k^(n-1))

    The seed comes from ``newton_seed``. An iterate that drops to zero or
    below is clamped to a small positive floor so the next step stays
    defined; a power that overflows halves the iterate instead.

    Args:
        value: Positive number to take the root of
        n: Root degree (positive integer)
        iterations: Fixed number of Newton rounds

    Returns:
        Approximation of value ** (1 / n)

    Examples:
        >>> round(nth_root(1.259712, 3), 6)
        1.08
        >>> round(nth_root(1.2 ** 20, 20), 9)
        1.2
    """
    if n <= 0:
        raise ValueError(f"Root degree must be positive, got {n}")
    if value <= 0:
        raise ValueError(f"Value must be positive, got {value}")

    x = newton_seed(value, n)
    for _ in range(iterations):
        x_pow_nm1 = integer_power(x, n - 1)
        denominator = n * x_pow_nm1
        if denominator == 0:
            break
        if math.isinf(denominator):
            x = x / 2
            continue

        x = x * (1 - 1 / n) + value / denominator

        if x <= 0:
            x = CAGR_FLOOR

    return x


def compound_growth_rate(
    beginning_value: float,
    ending_value: float,
    periods: int
) -> float:
    """
    Calculate compound annual growth rate (CAGR).

    Formula: CAGR = (ending_value / beginning_value)^(1/periods) - 1

    Degenerate inputs (non-positive values or periods) give 0.0 rather
    than an error, since a summary line should never abort a projection.

    Args:
        beginning_value: Starting value
        ending_value: Ending value
        periods: Number of periods

    Returns:
        Compound growth rate

    Examples:
        >>> round(compound_growth_rate(1000, 1259.28, 3), 4)
        0.0799
    """
    if beginning_value <= 0 or ending_value <= 0 or periods <= 0:
        return 0.0

    return nth_root(ending_value / beginning_value, periods) - 1
