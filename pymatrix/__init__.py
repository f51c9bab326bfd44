"""
pymatrix: a small dense-matrix value type for Python.

Row-major storage over NumPy integer and floating dtypes, with shape-checked
arithmetic, row/column editing and cofactor-expansion linear algebra
(determinant, adjoint, inverse, integer powers).

Submodules:
    matrix: the Matrix type
    core: exceptions, validation, precision rules, configuration
"""

import logging

__version__ = "0.1.0"

from pymatrix.core import (
    MatrixConfig,
    config_context,
    get_config,
    set_config,
    PyMatrixError,
    ValidationError,
    InvalidShapeError,
    InvalidArgumentError,
    OutOfRangeError,
    SizeMismatchError,
    DimensionError,
    ShapeMismatchError,
    NotSquareError,
    NumericalError,
    DivisionByZeroError,
    SingularMatrixError,
)
from pymatrix.matrix import Matrix, identity

# Library logging: applications decide where records go
logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    "Matrix",
    "identity",
    "MatrixConfig",
    "config_context",
    "get_config",
    "set_config",
    "PyMatrixError",
    "ValidationError",
    "InvalidShapeError",
    "InvalidArgumentError",
    "OutOfRangeError",
    "SizeMismatchError",
    "DimensionError",
    "ShapeMismatchError",
    "NotSquareError",
    "NumericalError",
    "DivisionByZeroError",
    "SingularMatrixError",
]
