"""
Exception hierarchy for PyRREF.

All exceptions inherit from PyRREFError to allow catching any
library-specific error.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PyRREFError(Exception):
    """Base exception for all PyRREF errors."""
    pass


class ValidationError(PyRREFError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect or inconsistent.

    Raised for non-2D input, jagged rows, and matrices with zero rows
    or zero columns.
    """
    pass


class IndexConflictError(PyRREFError):
    """
    Two-row operation was asked to act on a single row.

    Swap and combine need two distinct rows. Requesting the same row
    twice is a caller bug; the matrix is left unchanged.

    Attributes:
        operation: Name of the row operation ('swap' or 'combine')
        row: The row index that was passed twice
    """

    def __init__(self, message: str, operation: str, row: int):
        super().__init__(message)
        self.operation = operation
        self.row = row
