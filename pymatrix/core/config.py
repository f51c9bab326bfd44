"""
Library-wide configuration.

A single frozen MatrixConfig holds the settings that are not part of any
individual matrix. Replace it with set_config() or override it for a block
with config_context():

    with config_context(expansion_warning_order=12):
        det = big.determinant()
"""

from contextlib import contextmanager
from dataclasses import dataclass, fields, replace
from typing import Any, Iterator

from pymatrix.core.exceptions import ValidationError


@dataclass(frozen=True)
class MatrixConfig:
    """
    Settings shared by every matrix.

    Attributes:
        expansion_warning_order: Matrix order from which determinant,
            adjoint, inverse and negative pow emit a RuntimeWarning, since
            Laplace expansion costs O(n!) operations. 0 disables the warning.
    """
    expansion_warning_order: int = 9


DEFAULT_CONFIG = MatrixConfig()

_active: MatrixConfig = DEFAULT_CONFIG


def _validated(config: MatrixConfig) -> MatrixConfig:
    order = config.expansion_warning_order
    if isinstance(order, bool) or not isinstance(order, int) or order < 0:
        raise ValidationError(
            f"expansion_warning_order: expected a non-negative int, got {order!r}"
        )
    return config


def get_config() -> MatrixConfig:
    """Return the active configuration."""
    return _active


def set_config(**overrides: Any) -> MatrixConfig:
    """
    Replace fields of the active configuration.

    Args:
        **overrides: MatrixConfig field names and their new values

    Returns:
        The previous configuration, so callers can restore it

    Raises:
        ValidationError: On unknown fields or invalid values
    """
    global _active
    known = {f.name for f in fields(MatrixConfig)}
    unknown = sorted(set(overrides) - known)
    if unknown:
        raise ValidationError(
            f"unknown config field(s) {unknown}, expected one of {sorted(known)}"
        )
    previous = _active
    _active = _validated(replace(_active, **overrides))
    return previous


def reset_config() -> None:
    """Restore DEFAULT_CONFIG."""
    global _active
    _active = DEFAULT_CONFIG


@contextmanager
def config_context(**overrides: Any) -> Iterator[MatrixConfig]:
    """
    Temporarily override configuration fields.

    Yields:
        The configuration active inside the block
    """
    global _active
    previous = set_config(**overrides)
    try:
        yield _active
    finally:
        _active = previous
