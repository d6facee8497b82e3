"""
Fixed-shape single-precision matrix with elementary row operations.

MatrixStore is the only mutable object in PyRREF. After construction its
contents change exclusively through the three elementary row operations
(swap, scale, combine) or through explicit point/row writes by the caller.
Its shape never changes.

Usage:
    from pyrref.core.matrix import MatrixStore

    m = MatrixStore([[2, 1, -1, 8], [-3, -1, 2, -11]])
    m.swap(0, 1)
    m.scale(0, 0.5)
    m.combine(1, -2.0, 0)      # R1 <- R1 - 2 R0
    m[1, 3]                    # point access
    list(m.iter_column(0))     # lazy column
"""

from __future__ import annotations

import operator
from typing import Any, Iterator

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pyrref.core.exceptions import IndexConflictError
from pyrref.core.precision import MATRIX_DTYPE
from pyrref.core.validation import (
    check_array,
    check_rectangular,
    check_2d,
    check_nonempty,
    check_finite,
    check_dtype_range,
)


class MatrixStore:
    """
    R x C float32 matrix, row-major, shape fixed at construction.

    Construction validates once (numeric, rectangular, 2D, finite,
    R >= 1 and C >= 1). Afterwards every index is bounds-checked and
    an out-of-range index raises IndexError.

    Args:
        rows: Row-major nested sequence or 2D array. Always copied.

    Raises:
        ValidationError: Non-numeric or non-finite input
        DimensionError: Jagged rows, non-2D input, or an empty dimension
    """

    __slots__ = ('_data',)

    def __init__(self, rows: ArrayLike):
        check_rectangular(rows, 'rows')
        arr = check_array(rows, 'rows')
        check_2d(arr, 'rows')
        check_nonempty(arr, 'rows')
        check_finite(arr, 'rows')
        check_dtype_range(arr, MATRIX_DTYPE, 'rows')
        self._data: NDArray[np.float32] = np.array(arr, dtype=MATRIX_DTYPE, order='C')

    @classmethod
    def from_rows(cls, rows: ArrayLike) -> MatrixStore:
        """Build a MatrixStore from a row-major nested sequence."""
        return cls(rows)

    # === Shape ===

    @property
    def num_rows(self) -> int:
        return self._data.shape[0]

    @property
    def num_cols(self) -> int:
        return self._data.shape[1]

    @property
    def shape(self) -> tuple[int, int]:
        return (self.num_rows, self.num_cols)

    # === Access ===

    def __getitem__(self, index: tuple[int, int]) -> np.float32:
        row, col = index
        return self._data[self._row_index(row), self._col_index(col)]

    def __setitem__(self, index: tuple[int, int], value: float) -> None:
        row, col = index
        self._data[self._row_index(row), self._col_index(col)] = value

    def row(self, i: int) -> NDArray[np.float32]:
        """
        Row i as a writable view of length C.

        Writes through the view change the matrix.
        """
        return self._data[self._row_index(i)]

    def iter_column(self, j: int) -> Iterator[np.float32]:
        """
        Lazily yield column j, top row first.

        Single pass; call again to restart.
        """
        j = self._col_index(j)
        for row in self._data:
            yield row[j]

    def column(self, j: int) -> NDArray[np.float32]:
        """Column j as a fresh array of length R."""
        return self._data[:, self._col_index(j)].copy()

    def to_array(self) -> NDArray[np.float32]:
        """Copy of the full matrix as an (R, C) float32 array."""
        return self._data.copy()

    def copy(self) -> MatrixStore:
        return MatrixStore(self._data)

    # === Elementary row operations ===

    def swap(self, i: int, j: int) -> None:
        """
        R_i <-> R_j

        Raises:
            IndexConflictError: If i == j (matrix unchanged)
        """
        i, j = self._distinct_rows('swap', i, j)
        self._data[[i, j]] = self._data[[j, i]]

    def scale(self, i: int, factor: float) -> None:
        """R_i <- factor * R_i. Any factor is accepted, zero included."""
        self._data[self._row_index(i)] *= MATRIX_DTYPE(factor)

    def combine(self, i: int, factor: float, j: int) -> None:
        """
        R_i <- R_i + factor * R_j

        factor * R_j is computed in full before R_i is written.

        Raises:
            IndexConflictError: If i == j (matrix unchanged)
        """
        i, j = self._distinct_rows('combine', i, j)
        self._data[i] += MATRIX_DTYPE(factor) * self._data[j]

    # === Index checks ===

    def _row_index(self, i: Any) -> int:
        i = operator.index(i)
        if not 0 <= i < self.num_rows:
            raise IndexError(f"row index {i} out of range for {self.num_rows} rows")
        return i

    def _col_index(self, j: Any) -> int:
        j = operator.index(j)
        if not 0 <= j < self.num_cols:
            raise IndexError(f"column index {j} out of range for {self.num_cols} columns")
        return j

    def _distinct_rows(self, operation: str, i: Any, j: Any) -> tuple[int, int]:
        i, j = self._row_index(i), self._row_index(j)
        if i == j:
            raise IndexConflictError(
                f"{operation}: rows must be distinct, got row {i} twice",
                operation=operation,
                row=i,
            )
        return i, j

    # === Dunder ===

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MatrixStore):
            return NotImplemented
        return self.shape == other.shape and bool(np.array_equal(self._data, other._data))

    __hash__ = None  # mutable

    def __repr__(self) -> str:
        return f"MatrixStore({self._data.tolist()!r})"
