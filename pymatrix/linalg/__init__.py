"""
Dense vector and matrix containers.

Public API:
    RowVector     - 1×n vector
    ColumnVector  - n×1 vector (from RowVector.transpose())
    Matrix        - r×c matrix
    shape, scale, scaled, add, minus, dot, cross, length, transpose, matmul
                  - functional forms of the container methods
"""

from pymatrix.linalg.vector import RowVector, ColumnVector
from pymatrix.linalg.matrix import Matrix
from pymatrix.linalg.functions import (
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

__all__ = [
    "RowVector",
    "ColumnVector",
    "Matrix",
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
]
