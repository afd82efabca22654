"""
pymatrix: small dense linear algebra for Python.

Row vectors, column vectors and dense matrices of float64 values with
shape-checked arithmetic, scalar scaling, dot and cross products,
transpose and matrix multiplication.

Submodules:
    linalg: RowVector, ColumnVector, Matrix and the functional API
    core: Exceptions, capability contracts, validation, numeric kernels
"""

__version__ = "0.1.0"

from pymatrix.linalg import (
    RowVector,
    ColumnVector,
    Matrix,
    shape,
    scale,
    scaled,
    add,
    minus,
    dot,
    cross,
    length,
    transpose,
    matmul,
)
from pymatrix.core.exceptions import (
    PyMatrixError,
    ValidationError,
    DimensionError,
    InvalidDimensionError,
    ShapeMismatchError,
    UnsupportedDimensionError,
    MalformedMatrixError,
)

__all__ = [
    "__version__",
    # Containers
    "RowVector",
    "ColumnVector",
    "Matrix",
    # Functions
    "shape",
    "scale",
    "scaled",
    "add",
    "minus",
    "dot",
    "cross",
    "length",
    "transpose",
    "matmul",
    # Exceptions
    "PyMatrixError",
    "ValidationError",
    "DimensionError",
    "InvalidDimensionError",
    "ShapeMismatchError",
    "UnsupportedDimensionError",
    "MalformedMatrixError",
]
