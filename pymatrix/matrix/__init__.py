"""
Dense matrix value type.

Public API:
    Matrix: rows x cols matrix over an integer or floating dtype
    identity(n, dtype) -> Matrix

Example:
    >>> from pymatrix.matrix import Matrix
    >>> m = Matrix.from_rows([[1, 2], [3, 4]])
    >>> m.determinant()
    >>> m.astype(float).inverse().to_list()
"""

from numpy.typing import DTypeLike

from pymatrix.core.precision import DEFAULT_DTYPE
from pymatrix.matrix.matrix import Matrix


def identity(n: int, dtype: DTypeLike = DEFAULT_DTYPE) -> Matrix:
    """n x n identity matrix of the given dtype."""
    return Matrix.identity(n, dtype=dtype)


__all__ = [
    "Matrix",
    "identity",
]
