"""
Linear systems: Gauss-Jordan reduction and solution classification.

Public API:
    solve(M) / solve(A, b) -> LinearSystemSolution
    rref(M) -> (reduced matrix, pivot columns)

Example:
    >>> from pyrref.linsys import solve
    >>> result = solve([[1, 1, 2], [0, 0, 1]])
    >>> result.kind
    <SolutionKind.NONE: 'none'>
"""

from pyrref.linsys.design import SystemDesign
from pyrref.linsys.solution import (
    SolutionKind,
    Classification,
    ReductionParams,
    LinearSystemSolution,
)
from pyrref.linsys.solvers import solve, rref
from pyrref.linsys._gauss_jordan import gauss_jordan
from pyrref.linsys._classify import classify

__all__ = [
    "solve",
    "rref",
    "gauss_jordan",
    "classify",
    "SystemDesign",
    "SolutionKind",
    "Classification",
    "ReductionParams",
    "LinearSystemSolution",
]
