"""
RowVector and ColumnVector containers.

A RowVector is a 1×n vector backed by a contiguous float64 array that it
owns exclusively. A ColumnVector is the n×1 result of transposing a
RowVector; it is never constructed directly.

Construction:
    RowVector.zeros(n)
    RowVector.from_array([1.0, 2.0, 3.0])
    row.transpose()  # -> ColumnVector

Every operation except mul() leaves its operands untouched and returns a
freshly allocated result. Shape checks run before anything is allocated.
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
    CAPABILITY_VECTOR_OPS,
)
from pymatrix.core.compute.kernels import sequential_dot, sequential_norm
from pymatrix.core.compute.tolerances import FP64, ToleranceTier
from pymatrix.core.exceptions import (
    DimensionError,
    InvalidDimensionError,
    UnsupportedDimensionError,
)
from pymatrix.core.validation import (
    check_array,
    check_ndim,
    check_positive_dimension,
    check_same_length,
    check_same_shape,
)
from pymatrix.linalg._common import (
    check_storage,
    is_scale_factor,
    prepare_scalar,
    require_same_kind,
    supports_capability,
)

CROSS_DIMENSIONS = (2, 3)


@dataclass(eq=False, repr=False)
class RowVector:
    """
    A 1×n vector of float64 values.

    Construct via zeros() or from_array(), not directly. The length is fixed
    at construction; elements may be reassigned through indexing or scaled
    in place with mul().
    """
    _data: NDArray[np.float64]

    _CAPABILITIES = frozenset({
        CAPABILITY_SHAPED,
        CAPABILITY_SCALABLE,
        CAPABILITY_VECTOR_OPS,
    })

    __hash__ = None  # mutable
    __array_ufunc__ = None  # numpy scalars defer to __rmul__

    def __post_init__(self):
        check_storage(self._data, 1, "RowVector")

    @classmethod
    def zeros(cls, n: int) -> RowVector:
        """
        Build a vector of n zeros.

        Raises:
            InvalidDimensionError: If n <= 0
        """
        n = check_positive_dimension(n, 'n')
        return cls(np.zeros(n, dtype=np.float64))

    @classmethod
    def from_array(cls, values: ArrayLike) -> RowVector:
        """
        Build a vector from a 1D array-like of real numbers.

        The input is copied; later changes to it do not affect the vector.

        Raises:
            ValidationError: If values are not real numbers
            DimensionError: If values are not one-dimensional
            InvalidDimensionError: If values are empty
        """
        data = check_array(values, 'values')
        check_ndim(data, 1, 'values')
        if data.shape[0] == 0:
            raise InvalidDimensionError(
                "values: a row vector needs at least 1 element, got 0",
                requested=0,
            )
        return cls(data)

    # --- Shape and container protocol ---

    @property
    def shape(self) -> tuple[int, int]:
        """(1, n)."""
        return (1, self._data.shape[0])

    def __len__(self) -> int:
        return self._data.shape[0]

    def __getitem__(self, index: int) -> float:
        return float(self._data[operator.index(index)])

    def __setitem__(self, index: int, value: float) -> None:
        self._data[operator.index(index)] = value

    def __iter__(self) -> Iterator[float]:
        return iter(self._data.tolist())

    def __repr__(self) -> str:
        return f"RowVector({self._data.tolist()!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RowVector):
            return NotImplemented
        return self.shape == other.shape and bool(np.array_equal(self._data, other._data))

    def supports(self, capability: str) -> bool:
        return supports_capability(self._CAPABILITIES, capability)

    def to_numpy(self) -> NDArray[np.float64]:
        """Copy of the elements as a 1D array."""
        return self._data.copy()

    def tolist(self) -> list[float]:
        return self._data.tolist()

    def copy(self) -> RowVector:
        return RowVector(self._data.copy())

    def allclose(self, other: RowVector, *, tolerance: ToleranceTier = FP64) -> bool:
        """
        Approximate element-wise equality under a tolerance tier.

        Raises:
            ShapeMismatchError: If lengths differ
        """
        require_same_kind(self, other, 'allclose')
        check_same_shape(self.shape, other.shape, 'allclose')
        return tolerance.allclose(self._data, other._data)

    # --- Scalar multiplication ---

    def mul(self, c: float) -> None:
        """Multiply every element by c in place."""
        c = prepare_scalar(c, 'mul')
        self._data *= c

    def scaled(self, c: float) -> RowVector:
        """Return a new vector with every element multiplied by c."""
        c = prepare_scalar(c, 'scaled')
        return RowVector(self._data * c)

    # --- Vector operations ---

    def add(self, other: RowVector) -> RowVector:
        """
        Element-wise sum.

        Raises:
            ShapeMismatchError: If lengths differ
        """
        require_same_kind(self, other, 'add')
        check_same_length(self._data, other._data, 'add')
        return RowVector(self._data + other._data)

    def minus(self, other: RowVector) -> RowVector:
        """
        Element-wise difference self - other.

        Raises:
            ShapeMismatchError: If lengths differ
        """
        require_same_kind(self, other, 'minus')
        check_same_length(self._data, other._data, 'minus')
        return RowVector(self._data - other._data)

    def dot(self, other: RowVector) -> float:
        """
        Inner product, accumulated left to right over indices 0..n-1.

        Raises:
            ShapeMismatchError: If lengths differ
        """
        require_same_kind(self, other, 'dot')
        check_same_length(self._data, other._data, 'dot')
        return sequential_dot(self._data, other._data)

    def cross(self, other: RowVector) -> RowVector:
        """
        Cross product, defined for 2- and 3-element vectors.

        2-element inputs are treated as lying in the z=0 plane; the result
        is always a 3-element vector.

        Raises:
            ShapeMismatchError: If lengths differ
            UnsupportedDimensionError: If the length is not 2 or 3
        """
        require_same_kind(self, other, 'cross')
        check_same_length(self._data, other._data, 'cross')
        dim = len(self)
        if dim not in CROSS_DIMENSIONS:
            raise UnsupportedDimensionError(
                f"cross: only defined for vectors of length 2 or 3, got {dim}",
                operation='cross',
                dimension=dim,
                supported=CROSS_DIMENSIONS,
            )

        a, b = self._data, other._data
        result = np.zeros(3, dtype=np.float64)
        if dim == 2:
            result[2] = a[0] * b[1] - a[1] * b[0]
        else:
            result[0] = a[1] * b[2] - a[2] * b[1]
            result[1] = a[2] * b[0] - a[0] * b[2]
            result[2] = a[0] * b[1] - a[1] * b[0]
        return RowVector(result)

    def length(self) -> float:
        """Euclidean norm, equal to sqrt(self.dot(self))."""
        return sequential_norm(self._data)

    def transpose(self) -> ColumnVector:
        """The n×1 column vector holding the same elements."""
        return ColumnVector(self._data.reshape(-1, 1).copy())

    # --- Operators ---

    def __add__(self, other: Any) -> RowVector:
        if not isinstance(other, RowVector):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: Any) -> RowVector:
        if not isinstance(other, RowVector):
            return NotImplemented
        return self.minus(other)

    def __mul__(self, c: Any) -> RowVector:
        if not is_scale_factor(c):
            return NotImplemented
        return self.scaled(c)

    __rmul__ = __mul__

    def __imul__(self, c: Any) -> RowVector:
        if not is_scale_factor(c):
            return NotImplemented
        self.mul(c)
        return self

    def __neg__(self) -> RowVector:
        return RowVector(-self._data)


@dataclass(eq=False, repr=False)
class ColumnVector:
    """
    An n×1 vector of float64 values.

    Produced only by RowVector.transpose(). Supports shape queries,
    element access and transposing back to a RowVector.
    """
    _data: NDArray[np.float64]

    _CAPABILITIES = frozenset({CAPABILITY_SHAPED})

    __hash__ = None
    __array_ufunc__ = None

    def __post_init__(self):
        check_storage(self._data, 2, "ColumnVector")
        if self._data.shape[1] != 1:
            raise DimensionError(
                f"ColumnVector: expected (n, 1) storage, got shape {self._data.shape}"
            )

    @property
    def shape(self) -> tuple[int, int]:
        """(n, 1)."""
        return (self._data.shape[0], 1)

    def __len__(self) -> int:
        return self._data.shape[0]

    def __getitem__(self, index: int) -> float:
        return float(self._data[operator.index(index), 0])

    def __iter__(self) -> Iterator[float]:
        return iter(self._data[:, 0].tolist())

    def __repr__(self) -> str:
        return f"ColumnVector({self._data.tolist()!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ColumnVector):
            return NotImplemented
        return self.shape == other.shape and bool(np.array_equal(self._data, other._data))

    def supports(self, capability: str) -> bool:
        return supports_capability(self._CAPABILITIES, capability)

    def to_numpy(self) -> NDArray[np.float64]:
        """Copy of the elements as an (n, 1) array."""
        return self._data.copy()

    def tolist(self) -> list[list[float]]:
        return self._data.tolist()

    def transpose(self) -> RowVector:
        """The 1×n row vector holding the same elements."""
        return RowVector(self._data[:, 0].copy())
