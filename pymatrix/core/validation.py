"""
Input validation utilities for pymatrix.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent. Every matrix operation runs its
validators before touching storage, so a failed call never leaves a matrix
half-modified.

Design principles:
    - No silent type coercion except the documented conversion to the
      matrix dtype (the same conversion an assignment would perform)
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import operator

import numpy as np
from numpy.typing import ArrayLike, DTypeLike, NDArray
from typing import Any

from pymatrix.core.exceptions import (
    InvalidArgumentError,
    InvalidShapeError,
    NotSquareError,
    OutOfRangeError,
    ShapeMismatchError,
    SizeMismatchError,
)
from pymatrix.core.precision import SUPPORTED_KINDS, is_supported_dtype, max_element_count


def check_dtype(dtype: DTypeLike, name: str) -> np.dtype:
    """
    Validate that dtype is a supported scalar type.

    Args:
        dtype: Requested dtype
        name: Parameter name for error messages

    Returns:
        The normalized numpy.dtype

    Raises:
        InvalidArgumentError: If dtype is not a built-in integer or float type
    """
    if not is_supported_dtype(dtype):
        raise InvalidArgumentError(
            f"{name}: unsupported matrix dtype {dtype!r}, "
            f"expected a signed/unsigned integer or floating point type"
        )
    return np.dtype(dtype)


def check_integer(value: Any, name: str) -> int:
    """
    Verify value is an integer (Python int or NumPy integer).

    Raises:
        InvalidArgumentError: If value is not integral
    """
    if isinstance(value, (bool, np.bool_)):
        raise InvalidArgumentError(f"{name}: expected an integer, got bool {value!r}")
    try:
        return operator.index(value)
    except TypeError as e:
        raise InvalidArgumentError(
            f"{name}: expected an integer, got {type(value).__name__} {value!r}"
        ) from e


def check_shape(rows: Any, cols: Any, dtype: DTypeLike) -> tuple[int, int]:
    """
    Validate a (rows, cols) pair for construction.

    Either both dimensions are zero (the empty matrix), or rows is positive,
    cols is positive and rows*cols stays below the addressable capacity of
    the dtype.

    Args:
        rows: Requested row count
        cols: Requested column count
        dtype: Element dtype (fixes the capacity ceiling)

    Returns:
        (rows, cols) as Python ints

    Raises:
        InvalidArgumentError: If a dimension is not an integer
        InvalidShapeError: If the pair is not a valid shape
    """
    rows = check_integer(rows, 'rows')
    cols = check_integer(cols, 'cols')
    max_rows = max_element_count(dtype)

    if rows < 0 or rows >= max_rows:
        raise InvalidShapeError(
            f"rows: {rows} outside the valid range [0, {max_rows})",
            rows=rows, cols=cols
        )

    if rows == 0:
        if cols != 0:
            raise InvalidShapeError(
                f"cols: must be 0 when rows is 0, got {cols}",
                rows=rows, cols=cols
            )
        return rows, cols

    max_cols = max_rows // rows
    if cols <= 0 or cols >= max_cols:
        raise InvalidShapeError(
            f"cols: {cols} outside the valid range (0, {max_cols}) for rows={rows}",
            rows=rows, cols=cols
        )
    return rows, cols


def check_values(
    values: ArrayLike,
    name: str,
    dtype: DTypeLike | None = None,
) -> NDArray[Any]:
    """
    Validate and convert a sequence of matrix elements to a numpy array.

    Rejects ragged nesting and inputs whose elements are not integers or
    floats. When dtype is given the values are converted to it.

    Args:
        values: Input to validate (list, tuple, ndarray, ...)
        name: Parameter name for error messages
        dtype: Target dtype, or None to keep the inferred one

    Returns:
        numpy.ndarray with a supported dtype

    Raises:
        InvalidArgumentError: If values are ragged or non-numeric
    """
    try:
        result = np.asarray(values)
    except (ValueError, TypeError) as e:
        raise InvalidArgumentError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise InvalidArgumentError(
            f"{name}: converted to object dtype, indicating ragged rows or non-numeric data"
        )

    # An empty sequence carries no element type of its own
    if result.size > 0 and result.dtype.kind not in SUPPORTED_KINDS:
        raise InvalidArgumentError(
            f"{name}: non-numeric dtype {result.dtype}, expected integer or floating data"
        )

    if dtype is not None:
        result = result.astype(check_dtype(dtype, 'dtype'))
    elif result.size == 0 and result.dtype.kind not in SUPPORTED_KINDS:
        result = result.astype(np.float64)

    return result


def check_scalar(value: Any, dtype: np.dtype, name: str) -> np.generic:
    """
    Validate a scalar operand and convert it to the matrix dtype.

    The conversion follows assignment semantics: a float given to an integer
    matrix is truncated, and a negative value given to an unsigned matrix
    wraps.

    Args:
        value: Scalar to validate
        dtype: Matrix dtype
        name: Parameter name for error messages

    Returns:
        NumPy scalar of dtype

    Raises:
        InvalidArgumentError: If value is not a single integer or float
    """
    if np.ndim(value) != 0:
        raise InvalidArgumentError(
            f"{name}: expected a scalar, got array of shape {np.shape(value)}"
        )
    arr = check_values(value, name)
    if arr.size == 0:
        raise InvalidArgumentError(f"{name}: expected a scalar, got {value!r}")
    with np.errstate(invalid='ignore', over='ignore'):
        return arr.astype(dtype)[()]


def check_index(index: Any, extent: int, name: str) -> int:
    """
    Verify index lies in [0, extent).

    Args:
        index: Index to check
        extent: Number of valid positions
        name: Parameter name for error messages

    Returns:
        index as a Python int

    Raises:
        InvalidArgumentError: If index is not an integer
        OutOfRangeError: If index is negative or >= extent
    """
    index = check_integer(index, name)
    if index < 0 or index >= extent:
        raise OutOfRangeError(
            f"{name}: index {index} out of range [0, {extent})",
            index=index, extent=extent
        )
    return index


def check_length(values: NDArray[Any], expected: int, name: str) -> None:
    """
    Verify a 1-D argument has exactly the expected length.

    Raises:
        SizeMismatchError: If the argument is not 1-D or has the wrong length
    """
    if values.ndim != 1 or values.shape[0] != expected:
        actual = values.shape[0] if values.ndim == 1 else int(values.size)
        raise SizeMismatchError(
            f"{name}: expected {expected} values, got shape {values.shape}",
            expected=expected, actual=actual
        )


def check_square(shape: tuple[int, int], name: str) -> None:
    """
    Verify a shape is square.

    Raises:
        NotSquareError: If rows != cols
    """
    if shape[0] != shape[1]:
        raise NotSquareError(
            f"{name}: square matrix required, got {shape[0]}x{shape[1]}",
            shape=shape
        )


def check_same_shape(
    lhs_shape: tuple[int, int],
    rhs_shape: tuple[int, int],
    operation: str,
) -> None:
    """
    Verify two operands have identical shapes (elementwise operations).

    Raises:
        ShapeMismatchError: If the shapes differ
    """
    if lhs_shape != rhs_shape:
        raise ShapeMismatchError(
            f"{operation}: operand shapes differ, "
            f"{lhs_shape[0]}x{lhs_shape[1]} vs {rhs_shape[0]}x{rhs_shape[1]}",
            lhs_shape=lhs_shape, rhs_shape=rhs_shape
        )


def check_inner_dimensions(
    lhs_shape: tuple[int, int],
    rhs_shape: tuple[int, int],
) -> None:
    """
    Verify lhs.cols == rhs.rows for a matrix product.

    Raises:
        ShapeMismatchError: If the inner dimensions differ
    """
    if lhs_shape[1] != rhs_shape[0]:
        raise ShapeMismatchError(
            f"matmul: lhs has {lhs_shape[1]} columns but rhs has {rhs_shape[0]} rows",
            lhs_shape=lhs_shape, rhs_shape=rhs_shape
        )


def check_same_dtype(lhs: np.dtype, rhs: np.dtype, operation: str) -> None:
    """
    Verify two operands share a dtype.

    Raises:
        InvalidArgumentError: If the dtypes differ
    """
    if lhs != rhs:
        raise InvalidArgumentError(
            f"{operation}: operand dtypes differ ({lhs} vs {rhs}); "
            f"convert one operand with astype() first"
        )
