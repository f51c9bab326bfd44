"""
Cofactor (Laplace) expansion kernels.

Operate on square 2-D NumPy grids and keep the grid dtype throughout, so an
integer matrix yields an exact integer determinant up to overflow, which
wraps as in the array arithmetic. Validation is the caller's job; these
functions assume a square grid and in-range indices.

The expansion along the first row recurses into n minors of order n-1, so
the cost is O(n!). Acceptable for the small matrices this library targets,
not for anything larger than about 10x10.

References:
    Strang, G. (2016). Introduction to Linear Algebra, 5th ed., ch. 5.
"""

from __future__ import annotations

from typing import Any

import numpy as np
from numpy.typing import NDArray


def minor_grid(grid: NDArray[Any], row: int, col: int) -> NDArray[Any]:
    """Submatrix with row `row` and column `col` removed."""
    return np.delete(np.delete(grid, row, axis=0), col, axis=1)


def _apply_sign(value: np.generic, row: int, col: int) -> np.generic:
    # (-1)^(row+col)
    if (row + col) % 2 == 0:
        return value
    return np.negative(value)


def cofactor(grid: NDArray[Any], row: int, col: int) -> np.generic:
    """Signed minor determinant (-1)^(row+col) * det(minor(row, col))."""
    with np.errstate(over='ignore'):
        return _apply_sign(determinant(minor_grid(grid, row, col)), row, col)


def determinant(grid: NDArray[Any]) -> np.generic:
    """
    Determinant by Laplace expansion along the first row.

    Parameters
    ----------
    grid : NDArray
        (n, n) square grid.

    Returns
    -------
    np.generic
        Determinant as a scalar of the grid dtype. The 0x0 grid has
        determinant 0 (an expansion over no columns). Integer overflow
        wraps silently, as it does in the array arithmetic.
    """
    n = grid.shape[0]
    scalar = grid.dtype.type

    if n == 1:
        return grid[0, 0]

    with np.errstate(over='ignore'):
        if n == 2:
            return grid[0, 0] * grid[1, 1] - grid[0, 1] * grid[1, 0]

        total = scalar(0)
        for j in range(n):
            total += grid[0, j] * cofactor(grid, 0, j)
        return total


def adjoint(grid: NDArray[Any]) -> NDArray[Any]:
    """
    Adjugate: transpose of the cofactor matrix.

    The 1x1 adjugate is [[1]] and the 2x2 one uses the closed form
    [[d, -b], [-c, a]].
    """
    n = grid.shape[0]

    if n == 0:
        return grid.copy()
    if n == 1:
        return np.ones((1, 1), dtype=grid.dtype)
    if n == 2:
        a, b = grid[0, 0], grid[0, 1]
        c, d = grid[1, 0], grid[1, 1]
        with np.errstate(over='ignore'):
            return np.array(
                [[d, np.negative(b)], [np.negative(c), a]],
                dtype=grid.dtype,
            )

    cofactors = np.empty_like(grid)
    for i in range(n):
        for j in range(n):
            cofactors[i, j] = cofactor(grid, i, j)
    return np.ascontiguousarray(cofactors.T)
