# src/corp_finance/reporting/statement_printer.py
"""
statement_printer.py

Render a three-statement projection as JSON, console tables or CSV.
"""

import io
import json
from typing import Optional

import numpy as np
import pandas as pd

from ..core.metadata import ComputationOutput
from ..models.financial_model import STATEMENT_NAMES, ThreeStatementOutput

OUTPUT_FORMATS = ('json', 'table', 'csv')

STATEMENT_TITLES = {
    'income_statements': 'INCOME STATEMENT',
    'balance_sheets': 'BALANCE SHEET',
    'cash_flow_statements': 'CASH FLOW STATEMENT',
}


# Abbreviations for large amounts: (threshold, suffix, decimals)
CURRENCY_UNITS = (
    (1e9, 'B', 2),
    (1e6, 'M', 1),
)


def fmt_currency(val: Optional[float]) -> str:
    """
    Format a money amount, abbreviating millions and billions.

    Args:
        val: Amount (None or non-finite values render as N/A)

    Returns:
        String such as "$1,100.00", "-$2.5M" or "$3.00B"
    """
    if val is None or not np.isfinite(val):
        return "N/A"

    sign = "-" if val < 0 else ""
    magnitude = abs(val)
    for threshold, suffix, decimals in CURRENCY_UNITS:
        if magnitude >= threshold:
            return f"{sign}${magnitude / threshold:,.{decimals}f}{suffix}"
    return f"{sign}${magnitude:,.2f}"


def fmt_line_item(name: str, val: float) -> str:
    """Margins print as percentages, every other line item as money."""
    if name.endswith('_margin'):
        return f"{val:.1%}"
    return fmt_currency(val)


def statement_frame(result: ThreeStatementOutput, statement: str) -> pd.DataFrame:
    """
    One statement as a line-item x year frame.

    Args:
        result: Model output
        statement: One of STATEMENT_NAMES

    Returns:
        DataFrame with line items as rows and 'Year N' columns
    """
    df = result.to_dataframe(statement)
    if df.empty:
        return df
    df = df.T
    df.columns = [f"Year {year}" for year in df.columns]
    return df


def render_json(output: ComputationOutput) -> str:
    return json.dumps(output.to_dict(), indent=2)


def render_table(output: ComputationOutput) -> str:
    """
    Render statements, summary, warnings and methodology for the console.
    """
    result = output.result
    buffer = io.StringIO()

    for name in STATEMENT_NAMES:
        title = STATEMENT_TITLES[name]
        buffer.write(f"\n{'─'*70}\n{title:^70}\n{'─'*70}\n")
        frame = statement_frame(result, name)
        formatted = frame.apply(
            lambda row: row.map(lambda v: fmt_line_item(row.name, v)), axis=1
        )
        buffer.write(formatted.to_string())
        buffer.write("\n")

    if result.summary is not None:
        buffer.write(f"\n{'─'*70}\n{'PROJECTION SUMMARY':^70}\n{'─'*70}\n")
        summary = result.summary
        rows = [
            ('Total years', f"{summary.total_years}"),
            ('Revenue CAGR', f"{summary.revenue_cagr:.2%}"),
            ('Avg EBITDA margin', f"{summary.avg_ebitda_margin:.2%}"),
            ('Avg net margin', f"{summary.avg_net_margin:.2%}"),
            ('Ending debt', fmt_currency(summary.ending_debt)),
            ('Ending leverage', f"{summary.ending_leverage:.2f}x"),
            ('Cumulative FCF', fmt_currency(summary.cumulative_fcf)),
        ]
        for label, value in rows:
            buffer.write(f"  {label:<24} {value:>16}\n")

    if output.warnings:
        buffer.write("\nWarnings:\n")
        for warning in output.warnings:
            buffer.write(f"  - {warning}\n")

    buffer.write(f"\nMethodology: {output.methodology}\n")
    return buffer.getvalue()


def render_csv(output: ComputationOutput) -> str:
    """
    Render each statement as a CSV block (one row per year) followed by
    the summary as field,value pairs.
    """
    result = output.result
    blocks = []

    for name in STATEMENT_NAMES:
        df = result.to_dataframe(name)
        blocks.append(f"# {name}\n" + df.to_csv())

    if result.summary is not None:
        summary = pd.Series(result.summary.to_dict(), name='value')
        summary.index.name = 'field'
        blocks.append("# summary\n" + summary.to_csv())

    return "\n".join(blocks)


def format_output(output: ComputationOutput, fmt: str = 'json') -> str:
    """
    Render a model run in the requested format.

    Args:
        output: Result of build_three_statement_model
        fmt: 'json', 'table' or 'csv'

    Returns:
        Rendered text
    """
    if fmt == 'json':
        return render_json(output)
    if fmt == 'table':
        return render_table(output)
    if fmt == 'csv':
        return render_csv(output)
    raise ValueError(f"Unknown output format '{fmt}', expected one of {OUTPUT_FORMATS}")
