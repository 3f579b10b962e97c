# src/corp_finance/core/__init__.py
"""
Core Three-Statement Components

Inputs, validation, the per-period operating projection and the
circular financing solver.
"""

from .model_inputs import ThreeStatementInput, ModelAssumptions, PeriodState
from .validation import validate_input
from .period_projector import PeriodProjection, project_period
from .circularity_solver import CircularitySolver, CircularSolution, solve_financing
from .metadata import ComputationMetadata, ComputationOutput, with_metadata

__all__ = [
    'ThreeStatementInput',
    'ModelAssumptions',
    'PeriodState',
    'validate_input',
    'PeriodProjection',
    'project_period',
    'CircularitySolver',
    'CircularSolution',
    'solve_financing',
    'ComputationMetadata',
    'ComputationOutput',
    'with_metadata',
]
