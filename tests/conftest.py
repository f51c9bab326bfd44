"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from pymatrix import Matrix
from pymatrix.core.config import reset_config


@pytest.fixture(autouse=True)
def _default_config():
    """Every test starts and ends with the default configuration."""
    reset_config()
    yield
    reset_config()


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def int_square():
    """4x4 integer matrix used by the editing and derivation tests."""
    return Matrix.from_rows([
        [32, -2, 0, 1],
        [4, 12, 5, 3],
        [3, 4, 52, 3],
        [-4, 5, -27, 6],
    ])


@pytest.fixture
def well_conditioned(rng):
    """Diagonally dominant float64 4x4 matrix (comfortably invertible)."""
    n = 4
    A = rng.standard_normal((n, n)) + n * np.eye(n)
    return Matrix.from_rows(A)


@pytest.fixture
def simple_2x2():
    """The [[1, 2], [3, 4]] scenario matrix (int64)."""
    return Matrix.from_rows([[1, 2], [3, 4]])
