"""Utilities: logging setup, scalar and vector validation."""

from .logging import setup_logging
from .vectors import as_real, as_vector3, as_unit_vector3

__all__ = [
    'setup_logging',
    'as_real',
    'as_vector3',
    'as_unit_vector3',
]
