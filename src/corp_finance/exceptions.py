# src/corp_finance/exceptions.py
"""
Exceptions raised by the corporate finance models.

Both concrete errors subclass ``ValueError`` so callers that only guard
against bad arguments keep working.
"""


class CorpFinanceError(Exception):
    """Base class for all model errors."""


class InvalidInputError(CorpFinanceError, ValueError):
    """A single input field failed validation."""

    def __init__(self, field: str, reason: str):
        self.field = field
        self.reason = reason
        super().__init__(f"Invalid input for '{field}': {reason}")


class FinancialImpossibilityError(CorpFinanceError, ValueError):
    """Inputs are individually valid but describe an impossible business."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Financial impossibility: {reason}")
