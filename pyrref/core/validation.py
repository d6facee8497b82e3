"""
Input validation utilities for PyRREF.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

from collections.abc import Sequence
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pyrref.core.exceptions import ValidationError, DimensionError


def check_rectangular(rows: ArrayLike, name: str) -> None:
    """
    Verify a nested sequence has rows of equal length.

    Arrays are rectangular by construction and pass through. Inputs whose
    rows are not sequences are left for check_2d to reject.

    Args:
        rows: Row-major nested sequence
        name: Parameter name for error messages

    Raises:
        DimensionError: If rows have different lengths
    """
    if isinstance(rows, np.ndarray) or not isinstance(rows, Sequence):
        return
    if not all(isinstance(row, (Sequence, np.ndarray)) for row in rows):
        return

    lengths = [len(row) for row in rows]
    if len(set(lengths)) > 1:
        raise DimensionError(
            f"{name}: jagged rows, lengths {sorted(set(lengths))} "
            f"(every row must have the same number of columns)"
        )


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Validate and convert input to numpy array.

    Accepts any array-like and converts to numpy array. Rejects inputs
    that result in object dtype (indicating mixed types or non-numeric data).

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with floating dtype

    Raises:
        ValidationError: If input cannot be converted to numeric array
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    if result.dtype == np.bool_ or not np.issubdtype(result.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    if np.issubdtype(result.dtype, np.complexfloating):
        raise ValidationError(
            f"{name}: complex dtype {result.dtype}, expected real numbers"
        )

    if not np.issubdtype(result.dtype, np.floating):
        result = result.astype(np.float64)

    return result


def check_finite(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array contains no NaN or Inf values.

    Args:
        array: Array to check
        name: Parameter name for error messages

    Raises:
        ValidationError: If array contains non-finite values
    """
    if not np.all(np.isfinite(array)):
        n_nan = int(np.sum(np.isnan(array)))
        n_inf = int(np.sum(np.isinf(array)))
        raise ValidationError(
            f"{name}: contains non-finite values ({n_nan} NaN, {n_inf} Inf)"
        )


def check_ndim(array: NDArray[np.floating[Any]], ndim: int, name: str) -> None:
    """
    Verify array has exactly the specified number of dimensions.

    Raises:
        DimensionError: If array has wrong number of dimensions
    """
    if array.ndim != ndim:
        raise DimensionError(
            f"{name}: expected {ndim}D array, got {array.ndim}D with shape {array.shape}"
        )


def check_1d(array: NDArray[np.floating[Any]], name: str) -> None:
    """Verify array is 1-dimensional."""
    check_ndim(array, 1, name)


def check_2d(array: NDArray[np.floating[Any]], name: str) -> None:
    """Verify array is 2-dimensional."""
    check_ndim(array, 2, name)


def check_nonempty(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify every dimension of the array is at least 1.

    Args:
        array: Array to check
        name: Parameter name for error messages

    Raises:
        DimensionError: If any dimension is zero
    """
    if 0 in array.shape:
        raise DimensionError(
            f"{name}: every dimension must be positive, got shape {array.shape}"
        )


def check_consistent_length(
    *arrays: NDArray[np.floating[Any]],
    names: tuple[str, ...]
) -> None:
    """
    Verify all arrays have the same length (first dimension).

    Raises:
        ValueError: If number of names doesn't match number of arrays
        DimensionError: If arrays have inconsistent lengths
    """
    if len(arrays) != len(names):
        raise ValueError(
            f"Number of arrays ({len(arrays)}) must match number of names ({len(names)})"
        )

    if len(arrays) < 2:
        return

    lengths = [arr.shape[0] for arr in arrays]
    if len(set(lengths)) > 1:
        details = ", ".join(f"{name}={length}" for name, length in zip(names, lengths))
        raise DimensionError(f"Inconsistent lengths: {details}")


def check_dtype_range(array: NDArray[np.floating[Any]], dtype: type, name: str) -> None:
    """
    Verify every value fits in the target floating dtype without overflow.

    Args:
        array: Array to check (already finite)
        dtype: Target floating dtype
        name: Parameter name for error messages

    Raises:
        ValidationError: If any magnitude exceeds the dtype's maximum
    """
    limit = float(np.finfo(dtype).max)
    largest = float(np.max(np.abs(array))) if array.size else 0.0
    if largest > limit:
        raise ValidationError(
            f"{name}: magnitude {largest:g} overflows {np.dtype(dtype).name} "
            f"(max {limit:g})"
        )
