"""Small helpers for validating scalars and freezing 3D vectors."""

from numbers import Real

import numpy as np

from ..core.errors import ConstructionError


def as_real(value, name: str) -> float:
    """Return ``value`` as float, rejecting booleans and non-numbers."""
    if isinstance(value, bool) or not isinstance(value, Real):
        raise ConstructionError(f"{name} must be a real number, got {value!r}")
    return float(value)


def as_vector3(values, name: str = "vector") -> np.ndarray:
    """
    Convert ``values`` to a read-only float array of shape (3,).

    Raises
    ------
    ConstructionError
        If ``values`` is not a finite real 3-vector.
    """
    try:
        vector = np.array(values, dtype=float)
    except (TypeError, ValueError) as exc:
        raise ConstructionError(f"{name} must be a real 3-vector, got {values!r}") from exc

    if vector.shape != (3,):
        raise ConstructionError(
            f"{name} must be a real 3-vector, got shape {vector.shape}"
        )
    if not np.all(np.isfinite(vector)):
        raise ConstructionError(f"{name} must be finite, got {vector}")

    vector.flags.writeable = False
    return vector


def as_unit_vector3(values, name: str = "vector") -> np.ndarray:
    """Like :func:`as_vector3` but normalized to unit length."""
    vector = as_vector3(values, name)
    norm = np.linalg.norm(vector)
    if norm == 0:
        raise ConstructionError(f"{name} must have non-zero norm")

    unit = vector / norm
    unit.flags.writeable = False
    return unit
