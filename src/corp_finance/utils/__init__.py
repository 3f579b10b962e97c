# src/corp_finance/utils/__init__.py
"""
Utility Functions Module

Numeric helpers shared by the statement engine.
"""

from .growth import (
    safe_divide,
    integer_power,
    nth_root,
    compound_growth_rate,
)

__all__ = [
    'safe_divide',
    'integer_power',
    'nth_root',
    'compound_growth_rate',
]
