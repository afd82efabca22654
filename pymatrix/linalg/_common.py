"""
Shared helpers for the container types.
"""

from __future__ import annotations

import math
import numbers
import warnings
from typing import Any

import numpy as np

from pymatrix.core.exceptions import (
    DimensionError,
    InvalidDimensionError,
    ValidationError,
)
from pymatrix.core.validation import check_scalar


def prepare_scalar(c: Any, operation: str) -> float:
    """
    Validate a scaling factor and warn if it is not finite.

    Non-finite factors are legal; the warning flags that every element of
    the result will be NaN or infinite.
    """
    value = check_scalar(c, f"{operation}: c")
    if not math.isfinite(value):
        warnings.warn(
            f"{operation}: scaling by non-finite value {value}; "
            f"result elements will be NaN or infinite",
            RuntimeWarning,
            stacklevel=3,
        )
    return value


def supports_capability(capabilities: frozenset[str], capability: Any) -> bool:
    """Membership test that returns False for anything that is not a known string."""
    if not isinstance(capability, str):
        return False
    return capability in capabilities


def require_same_kind(left: Any, right: Any, operation: str) -> None:
    """
    Verify both operands are the same container type.

    Raises:
        ValidationError: If right is not an instance of left's type
    """
    if not isinstance(right, type(left)):
        raise ValidationError(
            f"{operation}: expected {type(left).__name__} operand, "
            f"got {type(right).__name__}"
        )


def is_scale_factor(c: Any) -> bool:
    """True if c can be used as the scalar operand of `*`."""
    return isinstance(c, numbers.Real)


def check_storage(data: Any, shape_rank: int, owner: str) -> None:
    """
    Verify backing storage handed to a container constructor.

    Storage must be a non-empty float64 ndarray of the owner's rank.

    Raises:
        ValidationError: If data is not a float64 ndarray
        DimensionError: If data has the wrong number of dimensions
        InvalidDimensionError: If data has no elements
    """
    if not isinstance(data, np.ndarray) or data.dtype != np.float64:
        raise ValidationError(
            f"{owner}: storage must be a float64 ndarray, got {type(data).__name__}"
        )
    if data.ndim != shape_rank:
        raise DimensionError(
            f"{owner}: expected {shape_rank}D storage, got {data.ndim}D with shape {data.shape}"
        )
    if data.size == 0:
        raise InvalidDimensionError(
            f"{owner}: needs at least 1 element, got shape {data.shape}",
            requested=data.shape,
        )
