"""
Gauss-Jordan reduction to reduced row-echelon form.

Drives a MatrixStore through elementary row operations only. Zero tests
are exact (``entry != 0.0``); there is no pivoting strategy beyond taking
the first non-zero entry, so any non-zero value, however small, is a pivot.

The invariant checks below are ``assert`` statements and vanish under
``python -O``.
"""

import numpy as np

from pyrref.core.matrix import MatrixStore


def find_pivot(
    store: MatrixStore,
    start_row: int,
    start_col: int,
) -> tuple[int, int] | None:
    """
    Locate the next pivot.

    Scans columns left to right from start_col, and within each column rows
    from start_row down, for the first entry that is exactly non-zero.

    Returns:
        (pivot_row, pivot_col), or None if every remaining entry is zero
    """
    for col in range(start_col, store.num_cols):
        hits = np.flatnonzero(store.column(col)[start_row:] != 0.0)
        if hits.size:
            return start_row + int(hits[0]), col
    return None


def gauss_jordan(store: MatrixStore) -> tuple[int, ...]:
    """
    Reduce store to RREF in place.

    Each iteration finds a pivot, swaps it into the current row, scales it
    to 1 and clears its column in every other row (above and below). The
    column search never moves left, so the pivot columns come out strictly
    increasing.

    Args:
        store: Matrix to reduce. Mutated in place.

    Returns:
        Pivot columns in the order found.
    """
    n_rows, n_cols = store.shape
    current_row = 0
    current_col = 0
    pivot_columns: list[int] = []

    while True:
        found = find_pivot(store, current_row, current_col)
        if found is None:
            break
        pivot_row, current_col = found
        pivot_columns.append(current_col)

        assert pivot_row >= current_row
        assert store[pivot_row, current_col] != 0.0

        if pivot_row != current_row:
            store.swap(current_row, pivot_row)

        store.scale(current_row, 1.0 / store[current_row, current_col])
        # x * (1/x) can land one ulp away from 1 in float32
        store[current_row, current_col] = 1.0

        for i in range(n_rows):
            if i == current_row:
                continue
            store.combine(i, -store[i, current_col], current_row)
            assert store[i, current_col] == 0.0

        if current_row == n_rows - 1 or current_col == n_cols - 1:
            break
        current_row += 1

    return tuple(pivot_columns)
