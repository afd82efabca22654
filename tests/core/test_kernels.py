"""
Tests for sequential-accumulation kernels.

The kernels must reproduce a plain left-to-right Python loop bit for bit,
including inputs where numpy's pairwise summation would differ.
"""

import math

import numpy as np
import pytest

from pymatrix.core.compute.kernels import (
    sequential_dot,
    sequential_norm,
    sequential_sum,
)


def _loop_sum(values):
    total = 0.0
    for v in values:
        total += float(v)
    return total


def _loop_dot(a, b):
    total = 0.0
    for x, y in zip(a, b):
        total += float(x) * float(y)
    return total


class TestSequentialSum:

    def test_empty_is_zero(self):
        assert sequential_sum(np.array([], dtype=np.float64)) == 0.0

    def test_simple(self):
        assert sequential_sum(np.array([1.0, 2.0, 3.0])) == 6.0

    def test_order_is_left_to_right(self):
        """1e16 absorbs each 1.0 when added first; a reordered sum would not."""
        values = np.array([1e16] + [1.0] * 8 + [-1e16])
        assert sequential_sum(values) == _loop_sum(values) == 0.0

    def test_matches_loop_on_random_data(self, rng):
        values = rng.standard_normal(1000) * 10.0 ** rng.integers(-8, 8, size=1000)
        assert sequential_sum(values) == _loop_sum(values)

    def test_negative_zero_total_is_positive_zero(self):
        result = sequential_sum(np.array([-0.0, -0.0]))
        assert result == 0.0
        assert math.copysign(1.0, result) == 1.0

    def test_returns_python_float(self):
        assert type(sequential_sum(np.array([1.0]))) is float

    def test_nan_propagates(self):
        assert math.isnan(sequential_sum(np.array([1.0, np.nan, 2.0])))


class TestSequentialDot:

    def test_simple(self):
        assert sequential_dot(np.array([1.0, 2.0, 3.0]), np.array([4.0, 5.0, 6.0])) == 32.0

    def test_matches_loop(self, rng):
        a = rng.standard_normal(500) * 1e6
        b = rng.standard_normal(500) * 1e-6
        assert sequential_dot(a, b) == _loop_dot(a, b)

    def test_commutative_bitwise(self, rng):
        a = rng.standard_normal(257)
        b = rng.standard_normal(257)
        assert sequential_dot(a, b) == sequential_dot(b, a)


class TestSequentialNorm:

    def test_pythagorean(self):
        assert sequential_norm(np.array([3.0, 4.0])) == 5.0

    def test_zero_vector(self):
        assert sequential_norm(np.zeros(4)) == 0.0

    def test_equals_sqrt_of_dot(self, rng):
        v = rng.standard_normal(33)
        assert sequential_norm(v) == math.sqrt(sequential_dot(v, v))

    @pytest.mark.parametrize("bad", [np.inf, -np.inf])
    def test_infinite_element(self, bad):
        assert sequential_norm(np.array([1.0, bad])) == math.inf
