# src/corp_finance/models/__init__.py
"""
Financial Models Module
"""

from .financial_model import (
    FinancialModel,
    ThreeStatementOutput,
    build_three_statement_model,
)
from .summary import ProjectionSummary, build_summary
from .diagnostics import base_year_warnings, period_warnings

__all__ = [
    'FinancialModel',
    'ThreeStatementOutput',
    'build_three_statement_model',
    'ProjectionSummary',
    'build_summary',
    'base_year_warnings',
    'period_warnings',
]
