"""
Exception hierarchy for pymatrix.

All exceptions inherit from PyMatrixError so callers can catch any
library-specific error in one place. Validation failures (bad shapes,
indices, lengths) derive from ValidationError; failures that only show up
while computing (zero divisors, singular matrices) derive from NumericalError.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PyMatrixError(Exception):
    """Base exception for all pymatrix errors."""
    pass


class ValidationError(PyMatrixError):
    """
    Input validation failed.

    Raised when a user-provided argument fails a check before any
    element of a matrix is touched.
    """
    pass


class InvalidShapeError(ValidationError):
    """
    Row or column count is not a valid matrix shape.

    Raised at construction when a dimension is negative, exceeds the
    addressable capacity of the dtype, or when exactly one of the two
    dimensions is zero.

    Attributes:
        rows: Requested row count
        cols: Requested column count
    """

    def __init__(
        self,
        message: str,
        rows: int | None = None,
        cols: int | None = None
    ):
        super().__init__(message)
        self.rows = rows
        self.cols = cols


class InvalidArgumentError(ValidationError):
    """
    An argument has the wrong length, structure or element type.

    Raised for flat sequences whose length differs from rows*cols, ragged
    nested rows, non-numeric dtypes, and operands of different dtypes.
    """
    pass


class OutOfRangeError(ValidationError, IndexError):
    """
    Index outside the valid range [0, extent).

    Attributes:
        index: The offending index
        extent: Number of valid positions along that axis
    """

    def __init__(
        self,
        message: str,
        index: int | None = None,
        extent: int | None = None
    ):
        super().__init__(message)
        self.index = index
        self.extent = extent


class SizeMismatchError(ValidationError):
    """
    A line or diagonal argument does not match the matrix dimension.

    Attributes:
        expected: Required length
        actual: Length that was supplied
    """

    def __init__(
        self,
        message: str,
        expected: int | None = None,
        actual: int | None = None
    ):
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class DimensionError(ValidationError):
    """
    Matrix dimensions are incorrect or inconsistent for an operation.
    """
    pass


class ShapeMismatchError(DimensionError):
    """
    Operand shapes are incompatible.

    Raised by addition and subtraction unless both shapes are identical,
    and by multiplication unless lhs.cols == rhs.rows.

    Attributes:
        lhs_shape: Shape of the left operand
        rhs_shape: Shape of the right operand
    """

    def __init__(
        self,
        message: str,
        lhs_shape: tuple[int, int] | None = None,
        rhs_shape: tuple[int, int] | None = None
    ):
        super().__init__(message)
        self.lhs_shape = lhs_shape
        self.rhs_shape = rhs_shape


class NotSquareError(DimensionError):
    """
    A square-only operation was invoked on a non-square matrix.

    Attributes:
        shape: Shape of the offending matrix
    """

    def __init__(self, message: str, shape: tuple[int, int] | None = None):
        super().__init__(message)
        self.shape = shape


class NumericalError(PyMatrixError):
    """
    Numerical computation failed.

    Base class for errors arising from the values of the operands rather
    than their shapes.
    """
    pass


class DivisionByZeroError(NumericalError, ZeroDivisionError):
    """Scalar division by an exact zero."""
    pass


class SingularMatrixError(NumericalError):
    """
    Matrix has a zero determinant and cannot be inverted.

    Attributes:
        determinant: The determinant that was found to be zero
        shape: Shape of the matrix
    """

    def __init__(
        self,
        message: str,
        determinant: float | int | None = None,
        shape: tuple[int, int] | None = None
    ):
        super().__init__(message)
        self.determinant = determinant
        self.shape = shape
