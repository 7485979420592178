"""
System value objects: spins, spin collections and cavity modes.

This module defines the four plain data containers used throughout the
package:

- Spin: a single two-level emitter at a point in R3
- SpinCollection: many spins sharing a polarization axis and decay rate
- CavityMode: a single truncated cavity mode
- CavitySpinCollection: a cavity mode coupled to a spin collection

All of them are immutable and validated on construction. They share no
behavior, so there is no common base class.
"""

import logging
from dataclasses import dataclass
from numbers import Integral
from typing import Dict, Iterable, Sequence, Tuple, Union

import numpy as np

from ..config.defaults import (
    SPIN_DELTA,
    COLLECTION_GAMMA,
    CAVITY_DELTA,
    CAVITY_ETA,
    CAVITY_KAPPA,
)
from ..utils.vectors import as_real, as_unit_vector3, as_vector3
from .errors import ConstructionError, DimensionMismatchError

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class Spin:
    """
    A single spin.

    A spin is defined by its position and its detuning from the main
    transition frequency.

    Parameters
    ----------
    position : array_like, shape (3,)
        A point in R3 (units of the transition wavelength)
    delta : float, optional
        Detuning (default: 0.0)

    Examples
    --------
    >>> spin = Spin([0.5, 0.0, 0.0], delta=0.1)
    >>> spin.position
    array([0.5, 0. , 0. ])
    """
    position: np.ndarray
    delta: float = SPIN_DELTA

    def __post_init__(self):
        object.__setattr__(self, "position", as_vector3(self.position, "position"))
        object.__setattr__(self, "delta", as_real(self.delta, "delta"))

    def to_dict(self) -> Dict:
        return {'position': self.position.tolist(), 'delta': self.delta}

    def __repr__(self) -> str:
        return f"Spin(position={self.position.tolist()}, delta={self.delta})"


@dataclass(frozen=True, eq=False)
class SpinCollection:
    """
    A system consisting of many spins.

    Parameters
    ----------
    spins : Sequence[Spin]
        The spins, in a fixed order. The order only matters for
        reproducibility of floating-point sums.
    polarization : array_like, shape (3,)
        Polarization axis. Normalized to unit length on construction.
    gamma : float, optional
        Decay rate, shared by all spins (default: 1.0)

    Notes
    -----
    Use :meth:`from_positions` to build a collection straight from a list
    of coordinates.

    Examples
    --------
    >>> collection = SpinCollection.from_positions(
    ...     [[1.0, 0.0, 0.0], [0.0, 1.0, 0.0]],
    ...     polarization=[0.0, 0.0, 2.0]
    ... )
    >>> collection.polarization
    array([0., 0., 1.])
    >>> len(collection)
    2
    """
    spins: Tuple[Spin, ...]
    polarization: np.ndarray
    gamma: float = COLLECTION_GAMMA

    def __post_init__(self):
        spins = tuple(self.spins)
        for i, spin in enumerate(spins):
            if not isinstance(spin, Spin):
                raise ConstructionError(
                    f"spins[{i}] must be a Spin instance, got {type(spin).__name__}"
                )

        gamma = as_real(self.gamma, "gamma")
        if gamma <= 0:
            raise ConstructionError("gamma must be positive")

        object.__setattr__(self, "spins", spins)
        object.__setattr__(self, "polarization",
                           as_unit_vector3(self.polarization, "polarization"))
        object.__setattr__(self, "gamma", gamma)

    @classmethod
    def from_spins(cls,
                   spins: Iterable[Spin],
                   polarization,
                   gamma: float = COLLECTION_GAMMA) -> 'SpinCollection':
        """Create a collection from already constructed spins."""
        return cls(tuple(spins), polarization, gamma)

    @classmethod
    def from_positions(cls,
                       positions: Iterable,
                       polarization,
                       delta: float = SPIN_DELTA,
                       gamma: float = COLLECTION_GAMMA) -> 'SpinCollection':
        """
        Create a SpinCollection without explicitly creating single spins.

        Parameters
        ----------
        positions : Iterable of array_like
            Positions of all single spins
        polarization : array_like, shape (3,)
            Polarization axis
        delta : float, optional
            Detuning, identical for all spins (default: 0.0)
        gamma : float, optional
            Decay rate, shared by all spins (default: 1.0)
        """
        spins = tuple(Spin(p, delta=delta) for p in positions)
        return cls(spins, polarization, gamma)

    @property
    def positions(self) -> np.ndarray:
        """Spin positions as an array of shape (N, 3)."""
        if not self.spins:
            return np.zeros((0, 3))
        return np.array([spin.position for spin in self.spins])

    @property
    def deltas(self) -> np.ndarray:
        """Spin detunings as an array of shape (N,)."""
        return np.array([spin.delta for spin in self.spins], dtype=float)

    def __len__(self) -> int:
        return len(self.spins)

    def to_dict(self) -> Dict:
        return {
            'spins': [spin.to_dict() for spin in self.spins],
            'polarization': self.polarization.tolist(),
            'gamma': self.gamma,
        }

    def __repr__(self) -> str:
        return (f"SpinCollection(N={len(self.spins)}, "
                f"polarization={self.polarization.tolist()}, "
                f"gamma={self.gamma})")


@dataclass(frozen=True, eq=False)
class CavityMode:
    """
    A single mode in a cavity.

    Parameters
    ----------
    cutoff : int
        Highest Fock state retained (truncation of the Hilbert space)
    delta : float, optional
        Detuning (default: 0.0)
    eta : float, optional
        Pump strength (default: 0.0)
    kappa : float, optional
        Decay rate (default: 0.0)
    """
    cutoff: int
    delta: float = CAVITY_DELTA
    eta: float = CAVITY_ETA
    kappa: float = CAVITY_KAPPA

    def __post_init__(self):
        if isinstance(self.cutoff, bool) or not isinstance(self.cutoff, Integral):
            raise ConstructionError(f"cutoff must be an integer, got {self.cutoff!r}")
        if self.cutoff <= 0:
            raise ConstructionError("cutoff must be positive")

        object.__setattr__(self, "cutoff", int(self.cutoff))
        object.__setattr__(self, "delta", as_real(self.delta, "delta"))
        object.__setattr__(self, "eta", as_real(self.eta, "eta"))
        object.__setattr__(self, "kappa", as_real(self.kappa, "kappa"))

    def to_dict(self) -> Dict:
        return {
            'cutoff': self.cutoff,
            'delta': self.delta,
            'eta': self.eta,
            'kappa': self.kappa,
        }

    def __repr__(self) -> str:
        return (f"CavityMode(cutoff={self.cutoff}, delta={self.delta}, "
                f"eta={self.eta}, kappa={self.kappa})")


@dataclass(frozen=True, eq=False)
class CavitySpinCollection:
    """
    A cavity mode coupled to many spins.

    Parameters
    ----------
    cavity : CavityMode
        The cavity mode
    spincollection : SpinCollection
        The coupled spins
    g : float or Sequence[float]
        Coupling strength between the i-th spin and the cavity mode.
        A single number gives identical coupling for all spins.

    Raises
    ------
    DimensionMismatchError
        If a sequence ``g`` does not have one entry per spin
    """
    cavity: CavityMode
    spincollection: SpinCollection
    g: Union[float, Sequence[float], np.ndarray]

    def __post_init__(self):
        if not isinstance(self.cavity, CavityMode):
            raise ConstructionError("cavity must be a CavityMode instance")
        if not isinstance(self.spincollection, SpinCollection):
            raise ConstructionError("spincollection must be a SpinCollection instance")

        n_spins = len(self.spincollection.spins)
        if np.ndim(self.g) == 0:
            g = np.full(n_spins, as_real(self.g, "g"))
        else:
            try:
                g = np.array(self.g, dtype=float)
            except (TypeError, ValueError) as exc:
                raise ConstructionError(
                    f"g must contain real numbers, got {self.g!r}"
                ) from exc
            if g.ndim != 1 or len(g) != n_spins:
                raise DimensionMismatchError(
                    f"g has {g.size} entries but the collection has {n_spins} spins"
                )

        g.flags.writeable = False
        object.__setattr__(self, "g", g)
        logger.debug("Coupled %d spins to cavity with cutoff %d",
                     n_spins, self.cavity.cutoff)

    def to_dict(self) -> Dict:
        return {
            'cavity': self.cavity.to_dict(),
            'spincollection': self.spincollection.to_dict(),
            'g': self.g.tolist(),
        }

    def __repr__(self) -> str:
        return (f"CavitySpinCollection(cavity={self.cavity!r}, "
                f"spincollection={self.spincollection!r})")
