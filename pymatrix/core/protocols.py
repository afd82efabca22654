"""
Core protocols for pymatrix.

These define the capability contracts shared by the containers. We use
Protocol (structural typing) rather than ABC (nominal typing), but every
container also declares its contracts explicitly through supports().

Contracts:
    Shaped:    shape
    Scalable:  mul (in place), scaled (pure)
    VecMat:    Shaped + Scalable, shared by vectors and matrices
    VectorOps: row-vector only operations
    MatrixOps: matrix only operations

These are classification only. No operation dispatches on them.
"""

from __future__ import annotations

from typing import Protocol, TypeVar, runtime_checkable

V = TypeVar('V')  # Concrete row-vector type
M = TypeVar('M')  # Concrete matrix type


@runtime_checkable
class Shaped(Protocol):
    """Anything that reports its dimensions as (rows, cols)."""

    @property
    def shape(self) -> tuple[int, int]:
        """(rows, cols), derived from current storage."""
        ...

    def supports(self, capability: str) -> bool:
        """
        Check if this container supports a given capability.

        Note:
            Unknown capabilities MUST return False, never raise.
        """
        ...


@runtime_checkable
class Scalable(Protocol):
    """Scalar multiplication, both in place and pure."""

    def mul(self, c: float) -> None:
        """Multiply every element by c, mutating the receiver."""
        ...

    def scaled(self, c: float):
        """Return a new container with every element multiplied by c."""
        ...


@runtime_checkable
class VecMat(Shaped, Scalable, Protocol):
    """Operations shared by row vectors and matrices."""
    ...


@runtime_checkable
class VectorOps(Protocol[V]):
    """
    Row-vector operations.

    Binary operations require operands of equal length and raise
    ShapeMismatchError otherwise.
    """

    def add(self, other: V) -> V: ...

    def minus(self, other: V) -> V: ...

    def dot(self, other: V) -> float: ...

    def cross(self, other: V) -> V: ...

    def length(self) -> float: ...

    def transpose(self): ...


@runtime_checkable
class MatrixOps(Protocol[M]):
    """
    Matrix operations.

    add/minus require identical shapes; matmul requires the left operand's
    column count to equal the right operand's row count.
    """

    def add(self, other: M) -> M: ...

    def minus(self, other: M) -> M: ...

    def matmul(self, other: M) -> M: ...

    def transpose(self) -> M: ...
