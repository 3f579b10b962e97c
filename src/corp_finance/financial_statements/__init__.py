# src/corp_finance/financial_statements/__init__.py
"""
Financial Statements Module

This module builds the linked income statement, balance sheet and cash
flow statement for each projected period.
"""

from .income_statement import IncomeStatement
from .balance_sheet import BalanceSheet
from .cash_flow_statement import CashFlowStatement
from .statement_builder import StatementBuilder, PeriodStatements

__all__ = [
    'IncomeStatement',
    'BalanceSheet',
    'CashFlowStatement',
    'StatementBuilder',
    'PeriodStatements',
]
