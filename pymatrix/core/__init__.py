"""
Core infrastructure for pymatrix.

This module provides shared abstractions and utilities used by the
container types in pymatrix.linalg.

Key components:
    protocols: Shaped, Scalable, VecMat, VectorOps, MatrixOps contracts
    capabilities: Capability string constants
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Sequential kernels and tolerance tiers
"""

from pymatrix.core.protocols import (
    Shaped,
    Scalable,
    VecMat,
    VectorOps,
    MatrixOps,
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
    # Protocols
    "Shaped",
    "Scalable",
    "VecMat",
    "VectorOps",
    "MatrixOps",
    # Exceptions
    "PyMatrixError",
    "ValidationError",
    "DimensionError",
    "InvalidDimensionError",
    "ShapeMismatchError",
    "UnsupportedDimensionError",
    "MalformedMatrixError",
]
