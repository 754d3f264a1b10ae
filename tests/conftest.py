"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from pylinalg import Matrix, Vector


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def rect_2x3():
    """The 2x3 matrix [[1, 2, 3], [4, 5, 6]]."""
    return Matrix([[1, 2, 3], [4, 5, 6]])


@pytest.fixture
def square_3x3():
    """The 3x3 matrix [[1, 2, 3], [4, 5, 6], [7, 8, 9]]."""
    return Matrix([[1, 2, 3], [4, 5, 6], [7, 8, 9]])


@pytest.fixture
def random_int_matrix(rng):
    """Factory for random integer matrices (exact arithmetic)."""
    def make(rows, cols):
        return Matrix.from_array(rng.integers(-9, 10, size=(rows, cols)))
    return make


@pytest.fixture
def random_float_matrix(rng):
    """Factory for random standard-normal float matrices."""
    def make(rows, cols):
        return Matrix.from_array(rng.standard_normal((rows, cols)))
    return make


@pytest.fixture
def random_float_vector(rng):
    """Factory for random standard-normal float vectors."""
    def make(n):
        return Vector.from_array(rng.standard_normal(n))
    return make
