"""
Core infrastructure for pymatrix.

This module provides the shared pieces the Matrix type is built on.

Key components:
    exceptions: Exception hierarchy
    validation: Input validators
    precision: Scalar dtype discipline, epsilon equality, integer division
    config: Library-wide settings
"""

from pymatrix.core.config import MatrixConfig, config_context, get_config, set_config
from pymatrix.core.exceptions import (
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

__all__ = [
    # Config
    "MatrixConfig",
    "config_context",
    "get_config",
    "set_config",
    # Exceptions
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
