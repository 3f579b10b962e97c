# src/corp_finance/reporting/__init__.py
"""
Reporting Module

Console, JSON and CSV rendering of model output.
"""

from .statement_printer import (
    OUTPUT_FORMATS,
    fmt_currency,
    fmt_line_item,
    format_output,
    statement_frame,
)

__all__ = [
    'OUTPUT_FORMATS',
    'fmt_currency',
    'fmt_line_item',
    'format_output',
    'statement_frame',
]
