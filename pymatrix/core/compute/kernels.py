"""
Sequential-accumulation reduction kernels.

Floating-point addition is not associative, so the order in which a sum is
accumulated changes the result at the bit level. numpy.sum uses pairwise
summation and numpy.dot defers to BLAS, neither of which fixes an order.

Every reduction here accumulates left to right, index 0..n-1, into a single
accumulator. np.add.accumulate is defined as the running prefix sum
out[i] = out[i-1] + x[i], which pins exactly that order while keeping the
loop in C. The last prefix is the total.
"""

from __future__ import annotations

import math
from typing import Any

import numpy as np
from numpy.typing import NDArray


def sequential_sum(values: NDArray[np.floating[Any]]) -> float:
    """
    Left-to-right sum of a 1D array.

    Args:
        values: 1D float64 array

    Returns:
        Sum as a Python float. 0.0 for an empty array.
    """
    if values.shape[0] == 0:
        return 0.0
    # same result as a loop seeded with 0.0, which turns a -0.0 total into 0.0
    return float(np.add.accumulate(values)[-1] + 0.0)


def sequential_dot(
    a: NDArray[np.floating[Any]],
    b: NDArray[np.floating[Any]],
) -> float:
    """
    Inner product accumulated left to right.

    Element-wise products are exact per element and commutative, so
    sequential_dot(a, b) == sequential_dot(b, a) bit for bit.

    Args:
        a: 1D float64 array
        b: 1D float64 array of the same length

    Returns:
        sum(a[i] * b[i] for i in 0..n-1) as a Python float
    """
    return sequential_sum(a * b)


def sequential_norm(values: NDArray[np.floating[Any]]) -> float:
    """
    Euclidean norm: sqrt of the left-to-right sum of squares.

    Identical to math.sqrt(sequential_dot(values, values)).
    """
    return math.sqrt(sequential_dot(values, values))
