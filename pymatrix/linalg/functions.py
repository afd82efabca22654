"""
Functional API over the container types.

Each function accepts containers and forwards to the matching method, after
checking that the operands are of a kind the operation is defined for.

    shape(x)          (rows, cols) of any container
    scale(x, c)       in-place scalar multiplication, returns None
    scaled(x, c)      pure scalar multiplication
    add(a, b)         vectors or matrices
    minus(a, b)       vectors or matrices
    dot(a, b)         vectors only
    cross(a, b)       vectors only
    length(a)         vectors only
    transpose(x)      any container
    matmul(a, b)      matrices only
"""

from __future__ import annotations

from typing import Union

from pymatrix.core.capabilities import (
    CAPABILITY_SHAPED,
    CAPABILITY_SCALABLE,
    CAPABILITY_VECTOR_OPS,
    CAPABILITY_MATRIX_OPS,
)
from pymatrix.core.exceptions import ValidationError
from pymatrix.linalg._common import require_same_kind
from pymatrix.linalg.matrix import Matrix
from pymatrix.linalg.vector import ColumnVector, RowVector

Container = Union[RowVector, ColumnVector, Matrix]
VectorOrMatrix = Union[RowVector, Matrix]


def _require(x, capability: str, operation: str) -> None:
    supports = getattr(x, 'supports', None)
    if supports is None or not supports(capability):
        raise ValidationError(
            f"{operation}: not defined for {type(x).__name__}"
        )


def shape(x: Container) -> tuple[int, int]:
    """(rows, cols) of a vector or matrix."""
    _require(x, CAPABILITY_SHAPED, 'shape')
    return x.shape


def scale(x: VectorOrMatrix, c: float) -> None:
    """Multiply every element of x by c in place."""
    _require(x, CAPABILITY_SCALABLE, 'scale')
    x.mul(c)


def scaled(x: VectorOrMatrix, c: float) -> VectorOrMatrix:
    """Return a copy of x with every element multiplied by c."""
    _require(x, CAPABILITY_SCALABLE, 'scaled')
    return x.scaled(c)


def add(a: VectorOrMatrix, b: VectorOrMatrix) -> VectorOrMatrix:
    """Element-wise sum of two vectors or two matrices of the same shape."""
    if not isinstance(a, (RowVector, Matrix)):
        raise ValidationError(f"add: not defined for {type(a).__name__}")
    require_same_kind(a, b, 'add')
    return a.add(b)


def minus(a: VectorOrMatrix, b: VectorOrMatrix) -> VectorOrMatrix:
    """Element-wise difference of two vectors or two matrices of the same shape."""
    if not isinstance(a, (RowVector, Matrix)):
        raise ValidationError(f"minus: not defined for {type(a).__name__}")
    require_same_kind(a, b, 'minus')
    return a.minus(b)


def dot(a: RowVector, b: RowVector) -> float:
    _require(a, CAPABILITY_VECTOR_OPS, 'dot')
    return a.dot(b)


def cross(a: RowVector, b: RowVector) -> RowVector:
    _require(a, CAPABILITY_VECTOR_OPS, 'cross')
    return a.cross(b)


def length(a: RowVector) -> float:
    _require(a, CAPABILITY_VECTOR_OPS, 'length')
    return a.length()


def transpose(x: Container) -> Container:
    """
    Transpose any container.

    RowVector -> ColumnVector, ColumnVector -> RowVector, Matrix -> Matrix.
    """
    if not isinstance(x, (RowVector, ColumnVector, Matrix)):
        raise ValidationError(f"transpose: not defined for {type(x).__name__}")
    return x.transpose()


def matmul(a: Matrix, b: Matrix) -> Matrix:
    _require(a, CAPABILITY_MATRIX_OPS, 'matmul')
    return a.matmul(b)
