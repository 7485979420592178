"""
Explicit settings for effective-interaction calculations.

Shape functions and the summation engine take an ``InteractionSettings``
instead of reading module-level globals.
"""

from dataclasses import dataclass, field
import dataclasses

import numpy as np

from ..core.errors import ConstructionError
from ..utils.vectors import as_real, as_unit_vector3, as_vector3
from .defaults import ORIGIN, E_Z, REFERENCE_GAMMA


@dataclass(frozen=True, eq=False)
class InteractionSettings:
    """
    Reference point, polarization and kernel rate for effective sums.

    Attributes
    ----------
    origin : np.ndarray, shape (3,)
        Position of the reference emitter
    polarization : np.ndarray, shape (3,)
        Polarization axis for "orthogonal" shapes, normalized on construction
    gamma : float
        Single-spin decay rate passed to the kernel
    """
    origin: np.ndarray = field(default=ORIGIN)
    polarization: np.ndarray = field(default=E_Z)
    gamma: float = REFERENCE_GAMMA

    def __post_init__(self):
        object.__setattr__(self, "origin", as_vector3(self.origin, "origin"))
        object.__setattr__(self, "polarization",
                           as_unit_vector3(self.polarization, "polarization"))

        gamma = as_real(self.gamma, "gamma")
        if not gamma > 0:
            raise ConstructionError("gamma must be positive")
        object.__setattr__(self, "gamma", gamma)

    def replace(self, **changes) -> "InteractionSettings":
        """Return a new validated instance with ``changes`` applied."""
        return dataclasses.replace(self, **changes)

    def __repr__(self) -> str:
        return (f"InteractionSettings(origin={self.origin.tolist()}, "
                f"polarization={self.polarization.tolist()}, "
                f"gamma={self.gamma})")


DEFAULT_SETTINGS = InteractionSettings()


def resolve_settings(settings=None) -> InteractionSettings:
    """Return ``settings`` or the module defaults when ``None``."""
    if settings is None:
        return DEFAULT_SETTINGS
    if not isinstance(settings, InteractionSettings):
        raise TypeError("settings must be an InteractionSettings instance")
    return settings
