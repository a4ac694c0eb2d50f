"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from pymatrix import Matrix


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def square():
    """3x3 float matrix with distinct values 1..9, row-major."""
    return Matrix.from_rows([[1.0, 2.0, 3.0], [4.0, 5.0, 6.0], [7.0, 8.0, 9.0]])


@pytest.fixture
def random_matrix(rng):
    """Random 4x5 float64 matrix."""
    return Matrix.from_array(rng.standard_normal((4, 5)))


@pytest.fixture
def int_matrix():
    """2x3 int64 matrix."""
    return Matrix.from_rows([[1, -2, 3], [-4, 5, -6]])
