"""
Solver dispatch for linear systems.

This module provides solve() and rref() (public API) and backend selection.
"""

from typing import Literal
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pyrref.linsys.design import SystemDesign
from pyrref.linsys.solution import LinearSystemSolution
from pyrref.linsys.backends.cpu import CPUGaussJordanBackend


BackendChoice = Literal['auto', 'cpu', 'cpu_gauss_jordan']


def solve(
    matrix: ArrayLike | SystemDesign,
    b: ArrayLike | None = None,
    *,
    backend: BackendChoice = 'auto',
) -> LinearSystemSolution:
    """
    Reduce a linear system to RREF and classify its solution set.

    The input is either an augmented matrix [A | b] whose last column is
    the right-hand side, a coefficient matrix A together with b, or a
    prebuilt SystemDesign. The caller's data is never modified.

    Args:
        matrix: Augmented matrix (R x C), coefficient matrix (R x C-1)
            when b is given, or a SystemDesign
        b: Right-hand side (R,). Omit when matrix is already augmented.
        backend: Computational backend to use:
            - 'auto': Best available (currently the CPU backend)
            - 'cpu' / 'cpu_gauss_jordan': Gauss-Jordan in float32

    Returns:
        LinearSystemSolution with classification, reduced matrix, pivots

    Raises:
        ValidationError: If inputs are non-numeric or non-finite
        DimensionError: If inputs are jagged, empty or inconsistent
        ValueError: If backend is unknown or b is passed with a design

    Example:
        >>> from pyrref import solve
        >>> result = solve([[2, 1, -1, 8], [-3, -1, 2, -11], [-2, 1, 2, -3]])
        >>> result.classification
        Unique([2.0, 3.0, -1.0])
        >>> print(result.summary())
    """
    design = _ensure_design(matrix, b)
    backend_impl = _get_backend(backend)
    result = backend_impl.solve(design)
    return LinearSystemSolution(_result=result, _design=design)


def rref(
    matrix: ArrayLike | SystemDesign,
) -> tuple[NDArray[np.float32], tuple[int, ...]]:
    """
    Reduced row-echelon form of a matrix.

    Args:
        matrix: Any non-empty 2D numeric array-like

    Returns:
        (reduced matrix as float32 array, pivot columns)
    """
    solution = solve(matrix)
    return solution.reduced_matrix.copy(), solution.pivot_columns


def _ensure_design(
    matrix: ArrayLike | SystemDesign,
    b: ArrayLike | None,
) -> SystemDesign:
    """Convert raw arrays to SystemDesign if needed."""
    if isinstance(matrix, SystemDesign):
        if b is not None:
            raise ValueError("b must not be given together with a SystemDesign")
        return matrix
    if b is None:
        return SystemDesign.from_augmented(matrix)
    return SystemDesign.from_arrays(matrix, b)


def _get_backend(choice: BackendChoice) -> CPUGaussJordanBackend:
    """
    Select and instantiate the appropriate backend.

    Raises:
        ValueError: If unknown backend specified
    """
    if choice in ('auto', 'cpu', 'cpu_gauss_jordan'):
        return CPUGaussJordanBackend()
    raise ValueError(f"Unknown backend: {choice!r}")
