"""
Input validation utilities for pydensela.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - No default handling of edge cases
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import numbers

import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any

from pydensela.core.exceptions import ValidationError, DimensionError


def check_numeric(
    array: ArrayLike,
    name: str,
    dtype: Any = None,
) -> NDArray[Any]:
    """
    Validate and convert input to a numeric numpy array.

    The element type is preserved (integer matrices stay integer). Rejects
    inputs that result in object dtype or any non-numeric dtype, including
    booleans.

    Args:
        array: Input to validate
        name: Parameter name for error messages
        dtype: Optional target dtype; must itself be numeric

    Returns:
        numpy.ndarray with numeric dtype

    Raises:
        ValidationError: If input cannot be converted to a numeric array
    """
    if dtype is not None:
        check_numeric_dtype(dtype, name)
    try:
        result = np.asarray(array, dtype=dtype)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    # np.bool_ is not a subtype of np.number, so this also rejects booleans
    if not np.issubdtype(result.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    return result


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.inexact[Any]]:
    """
    Validate and convert input to an inexact (floating or complex) array.

    Used at the boundary of algorithms that divide: integer input is
    promoted to float64, floating and complex dtypes pass through.

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with floating or complex dtype

    Raises:
        ValidationError: If input cannot be converted to numeric array
    """
    result = check_numeric(array, name)

    # Ensure floating point for division
    if not np.issubdtype(result.dtype, np.inexact):
        result = result.astype(np.float64)

    return result


def check_numeric_dtype(dtype: Any, name: str) -> np.dtype:
    """
    Verify a dtype specification names a numeric element type.

    Raises:
        ValidationError: If dtype is not understood or not numeric
    """
    try:
        resolved = np.dtype(dtype)
    except TypeError as e:
        raise ValidationError(f"{name}: invalid dtype {dtype!r}: {e}") from e
    if not np.issubdtype(resolved, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {resolved}, expected a numeric element type"
        )
    return resolved


def check_scalar(value: Any, name: str) -> None:
    """
    Verify value is a numeric scalar (bools excluded).

    Raises:
        ValidationError: If value is not a number
    """
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, (numbers.Number, np.number)):
        raise ValidationError(
            f"{name}: expected a numeric scalar, got {type(value).__name__}"
        )


def check_dimension(value: Any, name: str) -> int:
    """
    Verify value is a non-negative integer size.

    Returns:
        The size as a plain int

    Raises:
        ValidationError: If value is not an integer or is negative
    """
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, (numbers.Integral, np.integer)):
        raise ValidationError(
            f"{name}: expected a non-negative integer, got {type(value).__name__}"
        )
    if value < 0:
        raise ValidationError(f"{name}: must be non-negative, got {value}")
    return int(value)


def check_finite(array: NDArray[Any], name: str) -> None:
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


def check_ndim(array: NDArray[Any], ndim: int, name: str) -> None:
    """
    Verify array has exactly the specified number of dimensions.

    Args:
        array: Array to check
        ndim: Required number of dimensions
        name: Parameter name for error messages

    Raises:
        DimensionError: If array has wrong number of dimensions
    """
    if array.ndim != ndim:
        raise DimensionError(
            f"{name}: expected {ndim}D array, got {array.ndim}D with shape {array.shape}"
        )


def check_1d(array: NDArray[Any], name: str) -> None:
    """Verify array is 1-dimensional."""
    check_ndim(array, 1, name)


def check_2d(array: NDArray[Any], name: str) -> None:
    """Verify array is 2-dimensional."""
    check_ndim(array, 2, name)


def check_square(array: NDArray[Any], name: str) -> None:
    """
    Verify a 2D array is square.

    Raises:
        DimensionError: If the number of rows differs from the number of columns
    """
    rows, cols = array.shape
    if rows != cols:
        raise DimensionError(
            f"{name}: expected a square matrix, got shape ({rows}, {cols})"
        )


def check_consistent_length(
    *arrays: NDArray[Any],
    names: tuple[str, ...]
) -> None:
    """
    Verify all arrays have the same length (first dimension).

    Args:
        *arrays: Arrays to check
        names: Parameter names for error messages (must match number of arrays)

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


def check_not_empty(items: Any, name: str) -> None:
    """
    Verify a sequence has at least one element.

    Raises:
        ValidationError: If the sequence is empty
    """
    if len(items) == 0:
        raise ValidationError(f"{name}: must contain at least one element")
