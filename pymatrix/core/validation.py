"""
Input validation utilities for pymatrix.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.array on array-likes)
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import numbers
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymatrix.core.exceptions import (
    DimensionError,
    InvalidDimensionError,
    MalformedMatrixError,
    ShapeMismatchError,
    ValidationError,
)


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.float64]:
    """
    Validate and copy input into a float64 numpy array.

    Accepts any array-like and always returns a fresh array, so the caller's
    data is never aliased. Rejects object, non-numeric and complex dtypes.

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        New numpy.ndarray with dtype float64

    Raises:
        MalformedMatrixError: If nested sequences have inconsistent lengths
        ValidationError: If input cannot be converted to a real numeric array
    """
    try:
        result = np.array(array)
    except ValueError as e:
        # numpy refuses ragged nested sequences
        row_lengths = _row_lengths(array)
        if row_lengths is not None and len(set(row_lengths)) > 1:
            raise MalformedMatrixError(
                f"{name}: rows have inconsistent lengths {list(row_lengths)}",
                row_lengths=row_lengths,
            ) from e
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e
    except TypeError as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        if result.ndim == 1 and any(_is_sequence(item) for item in result):
            raise MalformedMatrixError(
                f"{name}: rows have inconsistent lengths",
                row_lengths=_row_lengths(array),
            )
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    if np.issubdtype(result.dtype, np.complexfloating):
        raise ValidationError(f"{name}: complex dtype {result.dtype}, expected real data")

    # Reject non-numeric dtypes (strings, bytes, datetime, etc.)
    if not (np.issubdtype(result.dtype, np.number) or result.dtype == np.bool_):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    return result.astype(np.float64, copy=False)


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


def check_positive_dimension(value: Any, name: str) -> int:
    """
    Verify a requested container size is a positive integer.

    Args:
        value: Requested length, row count or column count
        name: Parameter name for error messages

    Returns:
        The size as a plain int

    Raises:
        InvalidDimensionError: If value is not an integer or is <= 0
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise InvalidDimensionError(
            f"{name}: expected a positive integer, got {type(value).__name__} {value!r}",
            requested=value,
        )
    if value <= 0:
        raise InvalidDimensionError(f"{name}: must be > 0, got {value}", requested=int(value))
    return int(value)


def check_rectangular(row_lengths: tuple[int, ...], name: str) -> None:
    """
    Verify every row has the same length.

    Raises:
        MalformedMatrixError: If row lengths differ
    """
    if len(set(row_lengths)) > 1:
        raise MalformedMatrixError(
            f"{name}: rows have inconsistent lengths {list(row_lengths)}",
            row_lengths=row_lengths,
        )


def check_same_length(
    left: NDArray[np.floating[Any]],
    right: NDArray[np.floating[Any]],
    operation: str,
) -> None:
    """
    Verify two 1D operands have the same number of elements.

    Raises:
        ShapeMismatchError: If lengths differ
    """
    if left.shape[0] != right.shape[0]:
        raise ShapeMismatchError(
            f"{operation}: vector lengths differ ({left.shape[0]} vs {right.shape[0]})",
            operation=operation,
            left_shape=(1, left.shape[0]),
            right_shape=(1, right.shape[0]),
        )


def check_same_shape(
    left_shape: tuple[int, int],
    right_shape: tuple[int, int],
    operation: str,
) -> None:
    """
    Verify two operands have identical (rows, cols).

    Raises:
        ShapeMismatchError: If shapes differ
    """
    if left_shape != right_shape:
        raise ShapeMismatchError(
            f"{operation}: shapes differ ({left_shape[0]}x{left_shape[1]} vs "
            f"{right_shape[0]}x{right_shape[1]})",
            operation=operation,
            left_shape=left_shape,
            right_shape=right_shape,
        )


def check_inner_dimensions(
    left_shape: tuple[int, int],
    right_shape: tuple[int, int],
    operation: str,
) -> None:
    """
    Verify left column count equals right row count.

    Raises:
        ShapeMismatchError: If inner dimensions differ
    """
    if left_shape[1] != right_shape[0]:
        raise ShapeMismatchError(
            f"{operation}: inner dimensions differ "
            f"({left_shape[0]}x{left_shape[1]} @ {right_shape[0]}x{right_shape[1]})",
            operation=operation,
            left_shape=left_shape,
            right_shape=right_shape,
        )


def check_scalar(c: Any, name: str) -> float:
    """
    Verify a scalar is a real number and return it as a float.

    Non-finite values are accepted; IEEE-754 arithmetic applies.

    Raises:
        ValidationError: If c is not a real number
    """
    if isinstance(c, (bool, np.bool_)) or not isinstance(c, numbers.Real):
        raise ValidationError(f"{name}: expected a real number, got {type(c).__name__}")
    return float(c)


def _is_sequence(item: Any) -> bool:
    return isinstance(item, (list, tuple, np.ndarray))


def _row_lengths(array: Any) -> tuple[int, ...] | None:
    try:
        return tuple(len(row) if _is_sequence(row) else 0 for row in array)
    except TypeError:
        return None
