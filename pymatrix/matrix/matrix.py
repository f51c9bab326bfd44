"""
Dense matrix value type.

A Matrix owns one contiguous 1-D NumPy buffer holding rows*cols elements in
row-major order: element (r, c) sits at offset r*cols + c. The element
dtype is fixed at construction and restricted to built-in integer and
floating types.

Semantics follow value types rather than NumPy views:
    - copy() and copy.copy() give independent storage
    - release()/take() transfer storage and leave the source as a valid
      empty matrix
    - accessors return copies, never views into the buffer

Every operation validates all of its arguments before writing anything,
so a call that raises leaves the matrix exactly as it was.

Determinant, adjoint and inverse use Laplace (cofactor) expansion, which is
O(n!) in the matrix order. A RuntimeWarning is emitted from the order set
by MatrixConfig.expansion_warning_order onwards.
"""

from __future__ import annotations

import logging
import warnings
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, DTypeLike, NDArray

from pymatrix.core.config import get_config
from pymatrix.core.exceptions import (
    DivisionByZeroError,
    InvalidArgumentError,
    SingularMatrixError,
)
from pymatrix.core.precision import (
    DEFAULT_DTYPE,
    are_equal,
    is_exact_zero,
    max_element_count,
    truncate_divide,
)
from pymatrix.core.validation import (
    check_dtype,
    check_index,
    check_inner_dimensions,
    check_integer,
    check_length,
    check_same_dtype,
    check_same_shape,
    check_scalar,
    check_shape,
    check_square,
    check_values,
)
from pymatrix.matrix import _cofactor

logger = logging.getLogger(__name__)


def _check_matrix(value: Any, name: str) -> None:
    if not isinstance(value, Matrix):
        raise InvalidArgumentError(
            f"{name}: expected a Matrix, got {type(value).__name__}"
        )


def _warn_if_expensive(operation: str, order: int) -> None:
    threshold = get_config().expansion_warning_order
    if threshold and order >= threshold:
        warnings.warn(
            f"{operation}: cofactor expansion of a {order}x{order} matrix "
            f"takes O(n!) operations",
            RuntimeWarning,
            stacklevel=3,
        )


class Matrix:
    """
    Dense rows x cols matrix over an integer or floating point dtype.

    Construction:
        Matrix(dtype=...)                    empty 0x0 matrix
        Matrix(rows, cols, dtype=...)        zero-filled
        Matrix.full(rows, cols, value)       every element set to value
        Matrix.from_flat(rows, cols, values) row-major flat sequence
        Matrix.from_rows([[...], [...]])     nested rows
        Matrix.identity(n)                   n x n identity

    Operators:
        ==            relative-epsilon equality (exact for integers)
        + - @         elementwise add/subtract, matrix product
        * /           scalar or matrix operand; A / B is A * B.inverse()
        ** k          matrix power (negative k uses the inverse)
        -A            multiplication by -1

    Examples:
        >>> m = Matrix.from_rows([[1, 2], [3, 4]])
        >>> m.determinant()
        np.int64(-2)
        >>> m.astype(float).inverse().to_list()
        [[-2.0, 1.0], [1.5, -0.5]]
    """

    __slots__ = ('_rows', '_cols', '_data')

    # Mutable value type
    __hash__ = None  # type: ignore[assignment]

    # Make NumPy defer to our reflected operators (np.float64(2) * m)
    __array_ufunc__ = None

    def __init__(self, rows: int = 0, cols: int = 0, *, dtype: DTypeLike = DEFAULT_DTYPE):
        dt = check_dtype(dtype, 'dtype')
        rows, cols = check_shape(rows, cols, dt)
        self._rows = rows
        self._cols = cols
        self._data = np.zeros(rows * cols, dtype=dt)

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def _wrap(cls, rows: int, cols: int, data: NDArray[Any]) -> Matrix:
        """Adopt an already validated flat buffer without copying it."""
        obj = cls.__new__(cls)
        obj._rows = rows
        obj._cols = cols
        obj._data = data
        return obj

    @classmethod
    def full(
        cls,
        rows: int,
        cols: int,
        value: Any,
        dtype: DTypeLike | None = None,
    ) -> Matrix:
        """
        Matrix with every element set to value.

        Args:
            rows: Row count
            cols: Column count
            value: Fill value
            dtype: Element dtype; inferred from value when None

        Raises:
            InvalidShapeError: If (rows, cols) is not a valid shape
            InvalidArgumentError: If value is not a numeric scalar
        """
        if dtype is None:
            dtype = check_values(value, 'value').dtype
        dt = check_dtype(dtype, 'dtype')
        rows, cols = check_shape(rows, cols, dt)
        fill = check_scalar(value, dt, 'value')
        return cls._wrap(rows, cols, np.full(rows * cols, fill, dtype=dt))

    @classmethod
    def from_flat(
        cls,
        rows: int,
        cols: int,
        values: ArrayLike,
        dtype: DTypeLike | None = None,
    ) -> Matrix:
        """
        Matrix from a flat sequence in row-major order.

        Args:
            rows: Row count
            cols: Column count
            values: Exactly rows*cols numbers
            dtype: Element dtype; inferred from values when None

        Raises:
            InvalidShapeError: If (rows, cols) is not a valid shape
            InvalidArgumentError: If len(values) != rows*cols or values are
                not numeric
        """
        arr = check_values(values, 'values', dtype)
        dt = check_dtype(arr.dtype, 'dtype')
        rows, cols = check_shape(rows, cols, dt)
        if arr.ndim != 1 or arr.shape[0] != rows * cols:
            raise InvalidArgumentError(
                f"values: expected a flat sequence of {rows * cols} elements "
                f"for a {rows}x{cols} matrix, got shape {arr.shape}"
            )
        return cls._wrap(rows, cols, arr.copy())

    @classmethod
    def from_rows(
        cls,
        nested: ArrayLike,
        dtype: DTypeLike | None = None,
    ) -> Matrix:
        """
        Matrix from a sequence of rows (or a 2-D array).

        The row count is the outer length and the column count the length of
        the first row; every other row must have the same length. An empty
        outer sequence gives the empty matrix.

        Raises:
            InvalidArgumentError: On ragged rows or non-numeric elements
            InvalidShapeError: If the rows are empty ([[]])
        """
        if not isinstance(nested, np.ndarray):
            try:
                nested = [list(row) for row in nested]
            except TypeError as e:
                raise InvalidArgumentError(
                    f"rows: expected a sequence of row sequences: {e}"
                ) from e
            if nested:
                width = len(nested[0])
                for i, row in enumerate(nested):
                    if len(row) != width:
                        raise InvalidArgumentError(
                            f"rows: row {i} has {len(row)} elements, "
                            f"expected {width} like row 0"
                        )

        arr = check_values(nested, 'rows', dtype)
        if arr.ndim == 1 and arr.shape[0] == 0:
            return cls(0, 0, dtype=arr.dtype)
        if arr.ndim != 2:
            raise InvalidArgumentError(
                f"rows: expected 2-D nested rows, got {arr.ndim}-D with shape {arr.shape}"
            )

        dt = check_dtype(arr.dtype, 'dtype')
        rows, cols = check_shape(arr.shape[0], arr.shape[1], dt)
        return cls._wrap(rows, cols, arr.reshape(-1).copy())

    @classmethod
    def identity(cls, n: int, dtype: DTypeLike = DEFAULT_DTYPE) -> Matrix:
        """n x n identity matrix."""
        result = cls(n, n, dtype=dtype)
        result.set_identity()
        return result

    # ------------------------------------------------------------------
    # Copy and move
    # ------------------------------------------------------------------

    def copy(self) -> Matrix:
        """Deep copy with independent storage."""
        return self._wrap(self._rows, self._cols, self._data.copy())

    def __copy__(self) -> Matrix:
        return self.copy()

    def __deepcopy__(self, memo: dict[int, Any]) -> Matrix:
        return self.copy()

    def _reset(self) -> None:
        self._rows = 0
        self._cols = 0
        self._data = np.zeros(0, dtype=self._data.dtype)

    def _commit(self, result: Matrix) -> None:
        self._rows = result._rows
        self._cols = result._cols
        self._data = result._data

    def release(self) -> Matrix:
        """
        Move this matrix's storage into a new matrix.

        Afterwards self is the empty 0x0 matrix of the same dtype and remains
        fully usable.
        """
        moved = self._wrap(self._rows, self._cols, self._data)
        self._reset()
        return moved

    def take(self, other: Matrix) -> Matrix:
        """
        Move assignment: adopt other's storage and empty other.

        Taking from self is a no-op.

        Raises:
            InvalidArgumentError: If other is not a Matrix of the same dtype
        """
        _check_matrix(other, 'other')
        if other is not self:
            check_same_dtype(self.dtype, other.dtype, 'take')
            self._commit(other)
            other._reset()
        return self

    def assign(self, other: Matrix) -> Matrix:
        """
        Copy assignment: replace shape and contents with a copy of other.

        Assigning a matrix to itself is a no-op.

        Raises:
            InvalidArgumentError: If other is not a Matrix of the same dtype
        """
        _check_matrix(other, 'other')
        if other is not self:
            check_same_dtype(self.dtype, other.dtype, 'assign')
            self._commit(other.copy())
        return self

    def astype(self, dtype: DTypeLike) -> Matrix:
        """Copy converted to another supported dtype."""
        dt = check_dtype(dtype, 'dtype')
        return self._wrap(self._rows, self._cols, self._data.astype(dt))

    # ------------------------------------------------------------------
    # Element access
    # ------------------------------------------------------------------

    def _grid(self) -> NDArray[Any]:
        # 2-D view onto the flat buffer
        return self._data.reshape(self._rows, self._cols)

    def __getitem__(self, key: tuple[int, int]) -> Any:
        """Unchecked access m[row, col]; the caller guarantees the indices."""
        row, col = key
        return self._data[row * self._cols + col]

    def __setitem__(self, key: tuple[int, int], value: Any) -> None:
        row, col = key
        self._data[row * self._cols + col] = value

    def at(self, row: int, col: int) -> Any:
        """
        Checked element read.

        Raises:
            OutOfRangeError: Unless 0 <= row < rows and 0 <= col < cols
        """
        row = check_index(row, self._rows, 'row')
        col = check_index(col, self._cols, 'col')
        return self._data[row * self._cols + col]

    def set_at(self, row: int, col: int, value: Any) -> None:
        """
        Checked element write; value is converted to the matrix dtype.

        Raises:
            OutOfRangeError: Unless 0 <= row < rows and 0 <= col < cols
        """
        row = check_index(row, self._rows, 'row')
        col = check_index(col, self._cols, 'col')
        self._data[row * self._cols + col] = check_scalar(value, self.dtype, 'value')

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    @property
    def shape(self) -> tuple[int, int]:
        return (self._rows, self._cols)

    @property
    def dtype(self) -> np.dtype:
        return self._data.dtype

    @property
    def element_count(self) -> int:
        """Number of stored elements, rows*cols."""
        return int(self._data.shape[0])

    @property
    def max_rows(self) -> int:
        """Largest element count the dtype can address."""
        return max_element_count(self.dtype)

    @property
    def max_cols(self) -> int:
        """Column ceiling for the current row count."""
        if self._rows == 0:
            return self.max_rows
        return self.max_rows // self._rows

    def is_square(self) -> bool:
        return self._rows == self._cols

    def is_zero(self) -> bool:
        """True when every element equals zero (the empty matrix included)."""
        return self.equals(Matrix(self._rows, self._cols, dtype=self.dtype))

    def to_list(self) -> list[list[Any]]:
        """Nested Python lists, one per row."""
        return self._grid().tolist()

    def to_numpy(self) -> NDArray[Any]:
        """2-D array copy of the contents."""
        return self._grid().copy()

    def __repr__(self) -> str:
        return f"Matrix({self.to_list()!r}, dtype={self.dtype})"

    # ------------------------------------------------------------------
    # Equality
    # ------------------------------------------------------------------

    def equals(self, other: Matrix) -> bool:
        """
        Shape and elementwise numerical equality.

        Floating point elements compare with |a-b| <= max(|a|,|b|) * eps,
        integer elements exactly. See pymatrix.core.precision.are_equal.
        """
        _check_matrix(other, 'other')
        if other is self:
            return True
        if self.shape != other.shape:
            return False
        return bool(np.all(are_equal(self._data, other._data)))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.equals(other)

    # ------------------------------------------------------------------
    # Scalar arithmetic
    # ------------------------------------------------------------------

    def imul(self, value: Any) -> Matrix:
        """Multiply every element by value in place."""
        scalar = check_scalar(value, self.dtype, 'value')
        np.multiply(self._data, scalar, out=self._data)
        return self

    def mul(self, value: Any) -> Matrix:
        """Elementwise product with a scalar."""
        return self.copy().imul(value)

    def idiv(self, value: Any) -> Matrix:
        """
        Divide every element by value in place.

        Integer matrices truncate toward zero.

        Raises:
            DivisionByZeroError: If value converts to an exact zero
        """
        scalar = check_scalar(value, self.dtype, 'value')
        if is_exact_zero(scalar):
            raise DivisionByZeroError(f"div: matrix division by zero (value={value!r})")
        self._data = truncate_divide(self._data, scalar, self.dtype)
        return self

    def div(self, value: Any) -> Matrix:
        """Elementwise quotient by a scalar."""
        return self.copy().idiv(value)

    def neg(self) -> Matrix:
        """Multiplication by -1."""
        return self.mul(-1)

    # ------------------------------------------------------------------
    # Matrix-matrix arithmetic
    # ------------------------------------------------------------------

    def _check_operand(self, other: Any, operation: str) -> None:
        _check_matrix(other, operation)
        check_same_dtype(self.dtype, other.dtype, operation)

    def add(self, other: Matrix) -> Matrix:
        """
        Elementwise sum.

        Raises:
            ShapeMismatchError: Unless both shapes are identical
        """
        self._check_operand(other, 'add')
        check_same_shape(self.shape, other.shape, 'add')
        return self._wrap(self._rows, self._cols, self._data + other._data)

    def sub(self, other: Matrix) -> Matrix:
        """
        Elementwise difference.

        Raises:
            ShapeMismatchError: Unless both shapes are identical
        """
        self._check_operand(other, 'sub')
        check_same_shape(self.shape, other.shape, 'sub')
        return self._wrap(self._rows, self._cols, self._data - other._data)

    def matmul(self, other: Matrix) -> Matrix:
        """
        Matrix product, shape (self.rows, other.cols).

        Raises:
            ShapeMismatchError: Unless self.cols == other.rows
        """
        self._check_operand(other, 'matmul')
        check_inner_dimensions(self.shape, other.shape)
        product = np.matmul(self._grid(), other._grid())
        return self._wrap(self._rows, other._cols, product.reshape(-1))

    def matdiv(self, other: Matrix) -> Matrix:
        """
        self * other.inverse().

        Raises:
            NotSquareError: If other is not square
            SingularMatrixError: If other has a zero determinant
            ShapeMismatchError: Unless self.cols == other.rows
        """
        self._check_operand(other, 'matdiv')
        return self.matmul(other.inverse())

    def iadd(self, other: Matrix) -> Matrix:
        self._commit(self.add(other))
        return self

    def isub(self, other: Matrix) -> Matrix:
        self._commit(self.sub(other))
        return self

    def imatmul(self, other: Matrix) -> Matrix:
        self._commit(self.matmul(other))
        return self

    def imatdiv(self, other: Matrix) -> Matrix:
        self._commit(self.matdiv(other))
        return self

    # Operator sugar over the named methods

    def __add__(self, other: Any) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.add(other)

    def __iadd__(self, other: Any) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.iadd(other)

    def __sub__(self, other: Any) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.sub(other)

    def __isub__(self, other: Any) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.isub(other)

    def __mul__(self, other: Any) -> Matrix:
        if isinstance(other, Matrix):
            return self.matmul(other)
        return self.mul(other)

    def __rmul__(self, other: Any) -> Matrix:
        return self.mul(other)

    def __imul__(self, other: Any) -> Matrix:
        if isinstance(other, Matrix):
            return self.imatmul(other)
        return self.imul(other)

    def __matmul__(self, other: Any) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.matmul(other)

    def __imatmul__(self, other: Any) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.imatmul(other)

    def __truediv__(self, other: Any) -> Matrix:
        if isinstance(other, Matrix):
            return self.matdiv(other)
        return self.div(other)

    def __itruediv__(self, other: Any) -> Matrix:
        if isinstance(other, Matrix):
            return self.imatdiv(other)
        return self.idiv(other)

    def __neg__(self) -> Matrix:
        return self.neg()

    def __pos__(self) -> Matrix:
        return self.copy()

    def __pow__(self, power: int) -> Matrix:
        result = self.copy()
        result.pow(power)
        return result

    def __ipow__(self, power: int) -> Matrix:
        self.pow(power)
        return self

    # ------------------------------------------------------------------
    # Structural editing
    # ------------------------------------------------------------------

    def _line(self, values: ArrayLike, expected: int, name: str) -> NDArray[Any]:
        arr = check_values(values, name, self.dtype)
        check_length(arr, expected, name)
        return arr

    def set_identity(self) -> None:
        """
        Ones on the main diagonal, zeros elsewhere.

        Raises:
            NotSquareError: If the matrix is not square
        """
        check_square(self.shape, 'set_identity')
        data = np.zeros_like(self._data)
        data[::self._rows + 1] = 1
        self._data = data

    def set_zero(self) -> None:
        self._data = np.zeros_like(self._data)

    def set_diag(self, values: ArrayLike) -> None:
        """
        Zero the matrix and write values along the main diagonal.

        Raises:
            NotSquareError: If the matrix is not square
            SizeMismatchError: If len(values) != rows
        """
        check_square(self.shape, 'set_diag')
        diag = self._line(values, self._rows, 'values')
        data = np.zeros_like(self._data)
        data[::self._rows + 1] = diag
        self._data = data

    def set_row(self, row: int, values: Any) -> None:
        """
        Fill a row with a scalar, or overwrite it with cols values.

        Raises:
            SizeMismatchError: If a sequence does not have cols elements
            OutOfRangeError: Unless 0 <= row < rows
        """
        if np.ndim(values) == 0:
            row = check_index(row, self._rows, 'row')
            line = check_scalar(values, self.dtype, 'values')
        else:
            line = self._line(values, self._cols, 'values')
            row = check_index(row, self._rows, 'row')
        self._grid()[row, :] = line

    def set_col(self, col: int, values: Any) -> None:
        """
        Fill a column with a scalar, or overwrite it with rows values.

        Raises:
            SizeMismatchError: If a sequence does not have rows elements
            OutOfRangeError: Unless 0 <= col < cols
        """
        if np.ndim(values) == 0:
            col = check_index(col, self._cols, 'col')
            line = check_scalar(values, self.dtype, 'values')
        else:
            line = self._line(values, self._rows, 'values')
            col = check_index(col, self._cols, 'col')
        self._grid()[:, col] = line

    def get_row(self, row: int) -> NDArray[Any]:
        """Copy of one row as a 1-D array."""
        row = check_index(row, self._rows, 'row')
        return self._grid()[row, :].copy()

    def get_col(self, col: int) -> NDArray[Any]:
        """Copy of one column as a 1-D array."""
        col = check_index(col, self._cols, 'col')
        return self._grid()[:, col].copy()

    def swap_row(self, lhs_row: int, rhs_row: int) -> None:
        lhs_row = check_index(lhs_row, self._rows, 'lhs_row')
        rhs_row = check_index(rhs_row, self._rows, 'rhs_row')
        if lhs_row != rhs_row:
            grid = self._grid()
            grid[[lhs_row, rhs_row], :] = grid[[rhs_row, lhs_row], :]

    def swap_col(self, lhs_col: int, rhs_col: int) -> None:
        lhs_col = check_index(lhs_col, self._cols, 'lhs_col')
        rhs_col = check_index(rhs_col, self._cols, 'rhs_col')
        if lhs_col != rhs_col:
            grid = self._grid()
            grid[:, [lhs_col, rhs_col]] = grid[:, [rhs_col, lhs_col]]

    def mult_row(self, row: int, value: Any) -> None:
        row = check_index(row, self._rows, 'row')
        scalar = check_scalar(value, self.dtype, 'value')
        self._grid()[row, :] *= scalar

    def mult_col(self, col: int, value: Any) -> None:
        col = check_index(col, self._cols, 'col')
        scalar = check_scalar(value, self.dtype, 'value')
        self._grid()[:, col] *= scalar

    def add_row(self, lhs_row: int, rhs_row: int, value: Any) -> None:
        """
        row[lhs_row] += value * row[rhs_row].

        With lhs_row == rhs_row the row is scaled by value + 1. A value of
        exactly zero leaves the matrix untouched.
        """
        lhs_row = check_index(lhs_row, self._rows, 'lhs_row')
        rhs_row = check_index(rhs_row, self._rows, 'rhs_row')
        scalar = check_scalar(value, self.dtype, 'value')
        if is_exact_zero(scalar):
            return
        if lhs_row == rhs_row:
            self.mult_row(lhs_row, scalar + 1)
            return
        grid = self._grid()
        grid[lhs_row, :] += scalar * grid[rhs_row, :]

    def add_col(self, lhs_col: int, rhs_col: int, value: Any) -> None:
        """
        col[lhs_col] += value * col[rhs_col].

        With lhs_col == rhs_col the column is scaled by value + 1. A value of
        exactly zero leaves the matrix untouched.
        """
        lhs_col = check_index(lhs_col, self._cols, 'lhs_col')
        rhs_col = check_index(rhs_col, self._cols, 'rhs_col')
        scalar = check_scalar(value, self.dtype, 'value')
        if is_exact_zero(scalar):
            return
        if lhs_col == rhs_col:
            self.mult_col(lhs_col, scalar + 1)
            return
        grid = self._grid()
        grid[:, lhs_col] += scalar * grid[:, rhs_col]

    def transpose(self) -> None:
        """Transpose in place: swap rows/cols and re-lay-out the buffer."""
        self._data = np.ascontiguousarray(self._grid().T).reshape(-1)
        self._rows, self._cols = self._cols, self._rows

    def transposed(self) -> Matrix:
        result = self.copy()
        result.transpose()
        return result

    @property
    def T(self) -> Matrix:
        return self.transposed()

    # ------------------------------------------------------------------
    # Linear-algebra derivations
    # ------------------------------------------------------------------

    def minor(self, row: int, col: int) -> Matrix:
        """
        (n-1) x (n-1) submatrix without row `row` and column `col`.

        Raises:
            NotSquareError: If the matrix is not square
            OutOfRangeError: If row or col is out of range
        """
        check_square(self.shape, 'minor')
        row = check_index(row, self._rows, 'row')
        col = check_index(col, self._cols, 'col')
        n = self._rows - 1
        sub = _cofactor.minor_grid(self._grid(), row, col)
        return self._wrap(n, n, sub.reshape(-1).copy())

    def cofactor(self, row: int, col: int) -> Any:
        """(-1)^(row+col) * minor(row, col).determinant()."""
        check_square(self.shape, 'cofactor')
        row = check_index(row, self._rows, 'row')
        col = check_index(col, self._cols, 'col')
        _warn_if_expensive('cofactor', self._rows - 1)
        return _cofactor.cofactor(self._grid(), row, col)

    def determinant(self) -> Any:
        """
        Determinant by Laplace expansion along the first row.

        Exact for integer dtypes (up to overflow of the dtype). Runs in
        O(n!) time.

        Raises:
            NotSquareError: If the matrix is not square
        """
        check_square(self.shape, 'determinant')
        _warn_if_expensive('determinant', self._rows)
        logger.debug("determinant of %dx%d %s matrix", self._rows, self._cols, self.dtype)
        return _cofactor.determinant(self._grid())

    def adjoint(self) -> Matrix:
        """
        Adjugate (transposed cofactor matrix).

        Raises:
            NotSquareError: If the matrix is not square
        """
        check_square(self.shape, 'adjoint')
        _warn_if_expensive('adjoint', self._rows)
        adj = _cofactor.adjoint(self._grid())
        return self._wrap(self._rows, self._cols, adj.reshape(-1))

    def inverse(self) -> Matrix:
        """
        adjoint() / determinant().

        Integer matrices keep their dtype, so entries are truncated toward
        zero; convert with astype(float) first for a fractional inverse.

        Raises:
            NotSquareError: If the matrix is not square
            SingularMatrixError: If the determinant is exactly zero
        """
        check_square(self.shape, 'inverse')
        _warn_if_expensive('inverse', self._rows)
        grid = self._grid()
        det = _cofactor.determinant(grid)
        logger.debug("inverse of %dx%d matrix, determinant=%r", self._rows, self._cols, det)
        if is_exact_zero(det):
            raise SingularMatrixError(
                f"inverse: {self._rows}x{self._cols} matrix has zero determinant",
                determinant=det,
                shape=self.shape,
            )
        adj = self._wrap(self._rows, self._cols, _cofactor.adjoint(grid).reshape(-1))
        return adj.idiv(det)

    def pow(self, power: int) -> None:
        """
        Raise to an integer power in place.

        power == 0 gives the identity, power > 0 repeated multiplication by
        the original matrix, power < 0 the product of |power| inverses. The
        inverse is recomputed for every factor.

        Raises:
            NotSquareError: If the matrix is not square
            SingularMatrixError: If power < 0 and the matrix is singular
        """
        power = check_integer(power, 'power')
        check_square(self.shape, 'pow')
        logger.debug("pow(%d) of %dx%d matrix", power, self._rows, self._cols)

        if power == 0:
            self.set_identity()
            return

        if power > 0:
            result = self.copy()
            for _ in range(1, power):
                result = result.matmul(self)
        else:
            result = self.inverse()
            for _ in range(1, -power):
                result = result.matmul(self.inverse())
        self._commit(result)
