"""
Linear System Design.

Design holds a validated augmented matrix [A | b]. The last column is the
right-hand side; every other column is a coefficient column.
"""

from __future__ import annotations

from dataclasses import dataclass
import warnings
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pyrref.core.matrix import MatrixStore
from pyrref.core.precision import MATRIX_DTYPE
from pyrref.core.validation import (
    check_array,
    check_rectangular,
    check_1d,
    check_2d,
    check_nonempty,
    check_finite,
    check_dtype_range,
    check_consistent_length,
)


@dataclass(frozen=True)
class SystemDesign:
    """
    Augmented matrix specification for a linear system.

    Immutable after construction. Each call to to_store() hands out a
    fresh MatrixStore, so a design can be reduced any number of times.

    Construction:
        SystemDesign.from_augmented(M)    # M = [A | b], shape (R, C)
        SystemDesign.from_arrays(A, b)    # A (R, C-1), b (R,)
    """
    _store: MatrixStore
    _warnings: tuple[str, ...] = ()

    @classmethod
    def from_augmented(cls, matrix: ArrayLike) -> SystemDesign:
        """Build Design from a row-major augmented matrix."""
        check_rectangular(matrix, 'matrix')
        arr = check_array(matrix, 'matrix')
        return cls._build(arr, 'matrix')

    @classmethod
    def from_arrays(cls, A: ArrayLike, b: ArrayLike) -> SystemDesign:
        """Build Design from a coefficient matrix and a right-hand side."""
        check_rectangular(A, 'A')
        A = check_array(A, 'A')
        b = check_array(b, 'b')

        if A.ndim == 1:
            A = A.reshape(-1, 1)
        if b.ndim == 2 and b.shape[1] == 1:
            b = b.ravel()

        check_2d(A, 'A')
        check_1d(b, 'b')
        check_consistent_length(A, b, names=('A', 'b'))

        return cls._build(np.column_stack([A, b]), 'A|b')

    @classmethod
    def _build(cls, arr: NDArray, name: str) -> SystemDesign:
        """Internal builder with validation."""
        check_2d(arr, name)
        check_nonempty(arr, name)
        check_finite(arr, name)
        check_dtype_range(arr, MATRIX_DTYPE, name)

        notes: list[str] = []
        narrowed = arr.astype(MATRIX_DTYPE)
        if arr.dtype != MATRIX_DTYPE and not np.array_equal(narrowed.astype(arr.dtype), arr):
            n_rounded = int(np.sum(narrowed.astype(arr.dtype) != arr))
            msg = (
                f"{name}: {n_rounded} value(s) not exactly representable in "
                f"{np.dtype(MATRIX_DTYPE).name}; rounded on conversion"
            )
            warnings.warn(msg, UserWarning, stacklevel=3)
            notes.append(msg)

        return cls(_store=MatrixStore(narrowed), _warnings=tuple(notes))

    # === Properties ===

    @property
    def augmented(self) -> NDArray[np.float32]:
        """Copy of the augmented matrix (R x C)."""
        return self._store.to_array()

    @property
    def shape(self) -> tuple[int, int]:
        return self._store.shape

    @property
    def n_equations(self) -> int:
        """Number of rows R."""
        return self._store.num_rows

    @property
    def n_unknowns(self) -> int:
        """Number of coefficient columns, C - 1."""
        return self._store.num_cols - 1

    @property
    def warnings(self) -> tuple[str, ...]:
        """Conversion notes recorded while building the design."""
        return self._warnings

    def to_store(self) -> MatrixStore:
        """Fresh mutable copy of the augmented matrix."""
        return self._store.copy()
