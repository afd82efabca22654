"""
Tests for capability contracts and capability strings.

Capabilities are classification only: each container declares what it
supports and satisfies the matching Protocols structurally.
"""

import pytest

from pymatrix import ColumnVector, Matrix, RowVector
from pymatrix.core.capabilities import (
    ALL_CAPABILITIES,
    CAPABILITY_MATRIX_OPS,
    CAPABILITY_SCALABLE,
    CAPABILITY_SHAPED,
    CAPABILITY_VECTOR_OPS,
)
from pymatrix.core.protocols import (
    MatrixOps,
    Scalable,
    Shaped,
    VecMat,
    VectorOps,
)


@pytest.fixture
def containers():
    row = RowVector.from_array([1.0, 2.0, 3.0])
    return {
        'row': row,
        'column': row.transpose(),
        'matrix': Matrix.zeros(2, 2),
    }


class TestSupports:

    @pytest.mark.parametrize("name, expected", [
        ('row', {CAPABILITY_SHAPED, CAPABILITY_SCALABLE, CAPABILITY_VECTOR_OPS}),
        ('column', {CAPABILITY_SHAPED}),
        ('matrix', {CAPABILITY_SHAPED, CAPABILITY_SCALABLE, CAPABILITY_MATRIX_OPS}),
    ])
    def test_declared_capabilities(self, containers, name, expected):
        x = containers[name]
        supported = {cap for cap in ALL_CAPABILITIES if x.supports(cap)}
        assert supported == expected

    @pytest.mark.parametrize("capability", ['gpu_native', '', None, 3, ['shaped']])
    def test_unknown_capability_is_false(self, containers, capability):
        for x in containers.values():
            assert x.supports(capability) is False


class TestProtocols:

    def test_everything_is_shaped(self, containers):
        for x in containers.values():
            assert isinstance(x, Shaped)

    def test_vectors_and_matrices_are_vecmat(self, containers):
        assert isinstance(containers['row'], VecMat)
        assert isinstance(containers['matrix'], VecMat)
        assert not isinstance(containers['column'], Scalable)

    def test_vector_ops(self, containers):
        assert isinstance(containers['row'], VectorOps)
        assert not isinstance(containers['matrix'], VectorOps)

    def test_matrix_ops(self, containers):
        assert isinstance(containers['matrix'], MatrixOps)
        assert not isinstance(containers['row'], MatrixOps)

    def test_column_vector_has_no_arithmetic(self):
        column = RowVector.zeros(2).transpose()
        assert isinstance(column, ColumnVector)
        assert not isinstance(column, VectorOps)
