"""
Core infrastructure for PyRREF.

Shared abstractions used by the linear-system domain.

Key components:
    matrix: MatrixStore with elementary row operations
    protocols: Backend protocol
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    timing: Section timer
    precision: Storage dtype and tolerance tiers
"""

from pyrref.core.matrix import MatrixStore
from pyrref.core.protocols import Backend
from pyrref.core.result import Result
from pyrref.core.exceptions import (
    PyRREFError,
    ValidationError,
    DimensionError,
    IndexConflictError,
)

__all__ = [
    # Matrix
    "MatrixStore",
    # Protocols
    "Backend",
    # Result
    "Result",
    # Exceptions
    "PyRREFError",
    "ValidationError",
    "DimensionError",
    "IndexConflictError",
]
