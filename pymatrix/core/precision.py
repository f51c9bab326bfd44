"""
Numerical precision constants and utilities.

Provides the scalar dtype discipline (which NumPy dtypes a matrix may hold),
machine epsilon, the relative-epsilon equality rule, truncating integer
division and the capacity ceilings used by shape validation.
"""

import numpy as np
from numpy.typing import ArrayLike, DTypeLike, NDArray
from typing import Any


# NumPy dtype kinds a matrix may hold: signed int, unsigned int, float
SUPPORTED_KINDS: frozenset[str] = frozenset({'i', 'u', 'f'})

# Dtype used when none is given and none can be inferred
DEFAULT_DTYPE = np.dtype(np.float64)


def is_supported_dtype(dtype: DTypeLike) -> bool:
    """
    Check whether a dtype is a built-in integer or real floating type.

    bool, complex, object, string and datetime dtypes are not supported.
    """
    try:
        dt = np.dtype(dtype)
    except TypeError:
        return False
    return dt.kind in SUPPORTED_KINDS


def machine_epsilon(dtype: DTypeLike = np.float64) -> float:
    """
    Get machine epsilon for a given floating dtype.

    Args:
        dtype: NumPy dtype or type

    Returns:
        Machine epsilon for the dtype
    """
    return float(np.finfo(dtype).eps)


def max_element_count(dtype: DTypeLike) -> int:
    """
    Maximum number of elements of this dtype a flat buffer can address.

    Mirrors the usual max_size of a contiguous container: the largest
    signed pointer difference divided by the element size.
    """
    return int(np.iinfo(np.intp).max // np.dtype(dtype).itemsize)


def are_equal(a: ArrayLike, b: ArrayLike) -> NDArray[np.bool_]:
    """
    Elementwise numerical equality.

    Floating point values compare equal when

        |a - b| <= max(|a|, |b|) * eps

    with eps the machine epsilon of the common dtype. There is no absolute
    tolerance, so a tiny nonzero value is never equal to zero. Integers
    compare exactly, including signed against unsigned 64-bit values that
    NumPy would otherwise promote to float64.

    Args:
        a: First value(s)
        b: Second value(s)

    Returns:
        Boolean array (or numpy bool for scalars)
    """
    a = np.asarray(a)
    b = np.asarray(b)
    common = np.result_type(a, b)

    if a.dtype.kind in 'iu' and b.dtype.kind in 'iu' and common.kind == 'f':
        # int64 vs uint64 has no common integer type
        signed, unsigned = (a, b) if a.dtype.kind == 'i' else (b, a)
        return (signed >= 0) & (signed.astype(np.uint64) == unsigned)

    if common.kind != 'f':
        return a == b

    a = a.astype(common, copy=False)
    b = b.astype(common, copy=False)
    eps = machine_epsilon(common)
    with np.errstate(invalid='ignore', over='ignore'):
        return np.abs(a - b) <= np.maximum(np.abs(a), np.abs(b)) * eps


def is_exact_zero(value: Any) -> bool:
    """Exact comparison against the scalar zero (no epsilon)."""
    return bool(value == 0)


def truncate_divide(
    numerator: NDArray[Any],
    divisor: Any,
    dtype: DTypeLike
) -> NDArray[Any]:
    """
    Divide keeping the dtype of the matrix.

    Floating dtypes use true division. Integer dtypes truncate the quotient
    toward zero, so -7 / 2 == -3 rather than the floor result -4. The
    quotient is derived from floor division so the dtype minimum, whose
    absolute value does not fit, divides exactly.

    Args:
        numerator: Array of values to divide
        divisor: Nonzero scalar already converted to dtype
        dtype: Result dtype

    Returns:
        Array of quotients in dtype
    """
    dt = np.dtype(dtype)
    if dt.kind == 'f':
        return np.true_divide(numerator, divisor).astype(dt, copy=False)

    with np.errstate(over='ignore'):
        quotient = np.floor_divide(numerator, divisor)
        inexact = np.remainder(numerator, divisor) != 0
    negative = (numerator < 0) != (divisor < 0)
    quotient = quotient + (inexact & negative).astype(dt)
    return quotient.astype(dt, copy=False)
