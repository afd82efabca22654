"""
Exception hierarchy for pymatrix.

All exceptions inherit from PyMatrixError to allow catching any
library-specific error. Shape-related failures inherit from DimensionError.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Raised before any result is allocated or any operand is mutated
"""


class PyMatrixError(Exception):
    """Base exception for all pymatrix errors."""
    pass


class ValidationError(PyMatrixError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks (non-numeric
    data, wrong container kind).
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect or inconsistent.

    Raised when an input has the wrong number of dimensions or when
    operand shapes are inconsistent.
    """
    pass


class InvalidDimensionError(DimensionError):
    """
    Requested container size is not positive.

    Raised by constructors when a length, row count or column count is <= 0.

    Attributes:
        requested: The offending (rows, cols) or length as requested
    """

    def __init__(
        self,
        message: str,
        requested: tuple[int, ...] | int | None = None,
    ):
        super().__init__(message)
        self.requested = requested


class ShapeMismatchError(DimensionError):
    """
    Operand shapes are incompatible for a binary operation.

    Attributes:
        operation: Name of the operation ('add', 'dot', 'matmul', ...)
        left_shape: (rows, cols) of the left operand
        right_shape: (rows, cols) of the right operand
    """

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        left_shape: tuple[int, int] | None = None,
        right_shape: tuple[int, int] | None = None,
    ):
        super().__init__(message)
        self.operation = operation
        self.left_shape = left_shape
        self.right_shape = right_shape


class UnsupportedDimensionError(DimensionError):
    """
    Operation is not defined for the operands' dimension.

    Raised by the cross product when vector length is neither 2 nor 3.

    Attributes:
        operation: Name of the operation
        dimension: Actual vector length
        supported: Lengths the operation accepts
    """

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        dimension: int | None = None,
        supported: tuple[int, ...] = (),
    ):
        super().__init__(message)
        self.operation = operation
        self.dimension = dimension
        self.supported = supported


class MalformedMatrixError(DimensionError):
    """
    Matrix input is not rectangular.

    Attributes:
        row_lengths: Length of every input row, if available
    """

    def __init__(
        self,
        message: str,
        row_lengths: tuple[int, ...] | None = None,
    ):
        super().__init__(message)
        self.row_lengths = row_lengths
