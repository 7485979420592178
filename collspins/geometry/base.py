"""
Shared parameter checks for position generators.

Every generator returns positions relative to an emitter sitting at the
origin, so the origin itself is never part of the returned array.
"""

import math
from numbers import Integral, Real
from typing import List, Sequence

import numpy as np

from ..core.errors import InvalidGeometryError


def check_length(value, name: str) -> float:
    """
    Return ``value`` as float, requiring a finite non-zero real length.

    A negative length mirrors the arrangement through the origin. Zero
    would put spins on the origin.
    """
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidGeometryError(f"{name} must be a real number, got {value!r}")
    if not math.isfinite(value):
        raise InvalidGeometryError(f"{name} must be finite, got {value}")
    if value == 0:
        raise InvalidGeometryError(f"{name} must be non-zero")
    return float(value)


def check_count(value, name: str, minimum: int = 1) -> int:
    """Return ``value`` as int, requiring an integer of at least ``minimum``."""
    if isinstance(value, bool) or not isinstance(value, Integral):
        raise InvalidGeometryError(f"{name} must be an integer, got {value!r}")
    if value < minimum:
        raise InvalidGeometryError(f"{name} must be at least {minimum}, got {value}")
    return int(value)


def to_array(positions: Sequence[List[float]]) -> np.ndarray:
    """Stack positions into an (n, 3) float array."""
    if len(positions) == 0:
        return np.zeros((0, 3))
    return np.array(positions, dtype=float)
