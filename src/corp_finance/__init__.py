"""
Corporate Finance Models

A linked three-statement financial model: income statement, balance
sheet and cash flow statement projected jointly over N years, with the
interest <-> debt <-> cash flow circularity resolved by fixed-point
iteration.

Main Components:
- Input validation
- Period Projector (revenue to EBIT, working capital, PP&E)
- Circularity Solver (interest, revolver and debt sweep)
- Statement Builder (IS, BS, CF per period)
- Projection Summary and diagnostics
"""

__version__ = "1.0.0"

from corp_finance.exceptions import (
    CorpFinanceError,
    InvalidInputError,
    FinancialImpossibilityError,
)
from corp_finance.core.model_inputs import ThreeStatementInput, ModelAssumptions, PeriodState
from corp_finance.core.circularity_solver import CircularitySolver
from corp_finance.core.metadata import ComputationOutput

from corp_finance.financial_statements.income_statement import IncomeStatement
from corp_finance.financial_statements.balance_sheet import BalanceSheet
from corp_finance.financial_statements.cash_flow_statement import CashFlowStatement
from corp_finance.financial_statements.statement_builder import StatementBuilder

from corp_finance.models.financial_model import (
    FinancialModel,
    ThreeStatementOutput,
    build_three_statement_model,
)
from corp_finance.models.summary import ProjectionSummary
from corp_finance.config import load_model_input, sample_input

__all__ = [
    # Entry points
    'build_three_statement_model',
    'FinancialModel',
    'load_model_input',
    'sample_input',

    # Inputs and state
    'ThreeStatementInput',
    'ModelAssumptions',
    'PeriodState',

    # Components
    'CircularitySolver',
    'StatementBuilder',

    # Outputs
    'IncomeStatement',
    'BalanceSheet',
    'CashFlowStatement',
    'ProjectionSummary',
    'ThreeStatementOutput',
    'ComputationOutput',

    # Errors
    'CorpFinanceError',
    'InvalidInputError',
    'FinancialImpossibilityError',
]
