"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from pymatrix import Matrix, RowVector


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def random_vectors(rng):
    """Two random 7-element vectors with mixed magnitudes."""
    a = rng.standard_normal(7) * 10.0 ** rng.integers(-6, 6, size=7)
    b = rng.standard_normal(7) * 10.0 ** rng.integers(-6, 6, size=7)
    return RowVector.from_array(a), RowVector.from_array(b)


@pytest.fixture
def square_pair():
    """A = [[1,2],[3,4]], B = [[5,6],[7,8]]."""
    A = Matrix.from_array([[1, 2], [3, 4]])
    B = Matrix.from_array([[5, 6], [7, 8]])
    return A, B
