"""
Solution-set classification of a reduced augmented matrix.
"""

from collections.abc import Sequence

from pyrref.core.matrix import MatrixStore
from pyrref.linsys.solution import Classification


def missing_column(pivot_columns: Sequence[int], n_cols: int) -> int | None:
    """
    The single column in 0..n_cols-1 that is not a pivot column.

    Pivot columns are distinct and below n_cols, so when exactly one is
    missing it equals the sum of 0..n_cols-1 minus the sum of the pivots.

    Returns:
        The missing column, or None unless exactly n_cols - 1 pivots exist
    """
    if len(pivot_columns) != n_cols - 1:
        return None
    return n_cols * (n_cols - 1) // 2 - sum(pivot_columns)


def classify(store: MatrixStore, pivot_columns: Sequence[int]) -> Classification:
    """
    Classify the system represented by a reduced augmented matrix.

    Rules, in order:
        1. The augmented column (C-1) is the last pivot: some row reads
           0 = 1, so there is no solution.
        2. Every coefficient column is a pivot and only the augmented
           column is not: unique solution, read off the augmented column.
        3. Otherwise at least one coefficient column is free: infinitely
           many solutions.

    Pure: store is only read.

    Args:
        store: Matrix in RREF, as left by gauss_jordan()
        pivot_columns: Pivot columns returned by gauss_jordan()

    Returns:
        Classification
    """
    last_col = store.num_cols - 1

    if pivot_columns and pivot_columns[-1] == last_col:
        return Classification.none()

    if missing_column(pivot_columns, store.num_cols) == last_col:
        return Classification.unique(store.column(last_col))

    return Classification.many()
