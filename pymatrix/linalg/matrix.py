"""
Matrix: dense r×c float64 matrix.

Construction:
    Matrix.zeros(r, c)
    Matrix.from_array([[1.0, 2.0], [3.0, 4.0]])
    Matrix.from_rows(row_a, row_b)

Rectangularity is enforced at construction: ragged input raises
MalformedMatrixError. Storage is a 2D array owned by the matrix, so no
later operation can change the width of a single row.

Matrix multiplication is built on RowVector.dot, so every output cell is
accumulated left to right exactly like a vector inner product.
"""

from __future__ import annotations

import operator
from dataclasses import dataclass
from typing import Any, Iterator

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymatrix.core.capabilities import (
    CAPABILITY_SHAPED,
    CAPABILITY_SCALABLE,
    CAPABILITY_MATRIX_OPS,
)
from pymatrix.core.compute.tolerances import FP64, ToleranceTier
from pymatrix.core.exceptions import InvalidDimensionError, ValidationError
from pymatrix.core.validation import (
    check_array,
    check_inner_dimensions,
    check_ndim,
    check_positive_dimension,
    check_rectangular,
    check_same_shape,
)
from pymatrix.linalg._common import (
    check_storage,
    is_scale_factor,
    prepare_scalar,
    require_same_kind,
    supports_capability,
)
from pymatrix.linalg.vector import RowVector


@dataclass(eq=False, repr=False)
class Matrix:
    """
    An r×c matrix of float64 values.

    Construct via zeros(), from_array() or from_rows(), not directly.

    Indexing:
        m[i, j]  -> float
        m[i]     -> RowVector copy of row i
        m[i, j] = value

    m[i] is a copy, so m[i][j] = value changes the copy and leaves the
    matrix as it was. Write elements with m[i, j] = value.
    """
    _data: NDArray[np.float64]

    _CAPABILITIES = frozenset({
        CAPABILITY_SHAPED,
        CAPABILITY_SCALABLE,
        CAPABILITY_MATRIX_OPS,
    })

    __hash__ = None  # mutable
    __array_ufunc__ = None  # numpy scalars defer to __rmul__

    def __post_init__(self):
        check_storage(self._data, 2, "Matrix")

    @classmethod
    def zeros(cls, r: int, c: int) -> Matrix:
        """
        Build an r×c matrix of zeros.

        Raises:
            InvalidDimensionError: If r <= 0 or c <= 0
        """
        r = check_positive_dimension(r, 'r')
        c = check_positive_dimension(c, 'c')
        return cls(np.zeros((r, c), dtype=np.float64))

    @classmethod
    def from_array(cls, rows: ArrayLike) -> Matrix:
        """
        Build a matrix from a 2D array-like of real numbers.

        The input is copied; later changes to it do not affect the matrix.

        Raises:
            MalformedMatrixError: If rows have different lengths
            ValidationError: If values are not real numbers
            DimensionError: If input is not two-dimensional
            InvalidDimensionError: If there are no rows or no columns
        """
        data = check_array(rows, 'rows')
        if data.size == 0:
            raise InvalidDimensionError(
                f"rows: a matrix needs at least 1 row and 1 column, got shape {data.shape}",
                requested=data.shape,
            )
        check_ndim(data, 2, 'rows')
        return cls(data)

    @classmethod
    def from_rows(cls, *rows: RowVector) -> Matrix:
        """
        Stack row vectors into a matrix.

        Raises:
            InvalidDimensionError: If no rows are given
            MalformedMatrixError: If the rows have different lengths
        """
        if not rows:
            raise InvalidDimensionError("from_rows: need at least 1 row, got 0", requested=0)
        for i, row in enumerate(rows):
            if not isinstance(row, RowVector):
                raise ValidationError(
                    f"from_rows: row {i} is {type(row).__name__}, expected RowVector"
                )
        check_rectangular(tuple(len(row) for row in rows), 'rows')
        return cls(np.vstack([row.to_numpy() for row in rows]))

    # --- Shape and container protocol ---

    @property
    def shape(self) -> tuple[int, int]:
        """(rows, cols)."""
        r, c = self._data.shape
        return (r, c)

    def __len__(self) -> int:
        return self._data.shape[0]

    def __getitem__(self, index: int | tuple[int, int]) -> float | RowVector:
        if isinstance(index, tuple):
            i, j = index
            return float(self._data[operator.index(i), operator.index(j)])
        return self.row(index)

    def __setitem__(self, index: tuple[int, int], value: float) -> None:
        i, j = index
        self._data[operator.index(i), operator.index(j)] = value

    def __iter__(self) -> Iterator[RowVector]:
        for i in range(len(self)):
            yield self.row(i)

    def __repr__(self) -> str:
        return f"Matrix({self._data.tolist()!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and bool(np.array_equal(self._data, other._data))

    def supports(self, capability: str) -> bool:
        return supports_capability(self._CAPABILITIES, capability)

    def row(self, i: int) -> RowVector:
        """Copy of row i as a RowVector."""
        return RowVector(self._data[operator.index(i)].copy())

    def column(self, j: int) -> RowVector:
        """Copy of column j, gathered top to bottom, as a RowVector."""
        return RowVector(self._data[:, operator.index(j)].copy())

    def to_numpy(self) -> NDArray[np.float64]:
        """Copy of the elements as a 2D array."""
        return self._data.copy()

    def tolist(self) -> list[list[float]]:
        return self._data.tolist()

    def copy(self) -> Matrix:
        return Matrix(self._data.copy())

    def allclose(self, other: Matrix, *, tolerance: ToleranceTier = FP64) -> bool:
        """
        Approximate element-wise equality under a tolerance tier.

        Raises:
            ShapeMismatchError: If shapes differ
        """
        require_same_kind(self, other, 'allclose')
        check_same_shape(self.shape, other.shape, 'allclose')
        return tolerance.allclose(self._data, other._data)

    # --- Scalar multiplication ---

    def mul(self, c: float) -> None:
        """Multiply every element by c in place."""
        c = prepare_scalar(c, 'mul')
        self._data *= c

    def scaled(self, c: float) -> Matrix:
        """Return a new matrix with every element multiplied by c."""
        c = prepare_scalar(c, 'scaled')
        return Matrix(self._data * c)

    # --- Matrix operations ---

    def add(self, other: Matrix) -> Matrix:
        """
        Element-wise sum.

        Raises:
            ShapeMismatchError: If shapes differ
        """
        require_same_kind(self, other, 'add')
        check_same_shape(self.shape, other.shape, 'add')
        return Matrix(self._data + other._data)

    def minus(self, other: Matrix) -> Matrix:
        """
        Element-wise difference self - other.

        Raises:
            ShapeMismatchError: If shapes differ
        """
        require_same_kind(self, other, 'minus')
        check_same_shape(self.shape, other.shape, 'minus')
        return Matrix(self._data - other._data)

    def matmul(self, other: Matrix) -> Matrix:
        """
        Matrix product self @ other.

        Cell (i, j) is self.row(i).dot(other.column(j)).

        Raises:
            ShapeMismatchError: If self's column count differs from other's
                row count
        """
        require_same_kind(self, other, 'matmul')
        check_inner_dimensions(self.shape, other.shape, 'matmul')

        r1, c2 = self.shape[0], other.shape[1]
        result = np.zeros((r1, c2), dtype=np.float64)
        columns = [other.column(j) for j in range(c2)]
        for i in range(r1):
            left = self.row(i)
            for j, right in enumerate(columns):
                result[i, j] = left.dot(right)
        return Matrix(result)

    def transpose(self) -> Matrix:
        """The c×r matrix with cell (i, j) = self[j, i]."""
        return Matrix(self._data.T.copy())

    # --- Operators ---

    def __add__(self, other: Any) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: Any) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.minus(other)

    def __matmul__(self, other: Any) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.matmul(other)

    def __mul__(self, c: Any) -> Matrix:
        if not is_scale_factor(c):
            return NotImplemented
        return self.scaled(c)

    __rmul__ = __mul__

    def __imul__(self, c: Any) -> Matrix:
        if not is_scale_factor(c):
            return NotImplemented
        self.mul(c)
        return self

    def __neg__(self) -> Matrix:
        return Matrix(-self._data)
