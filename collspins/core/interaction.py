"""
Dipole-dipole interaction kernels.

Frequency shift (Omega) and collective decay (Gamma) between two point
dipoles with a common polarization axis, radiating into free space.

Conventions
-----------
Positions are measured in units of the transition wavelength, so the
wave number is k0 = 2π and ξ = k0 |a - b|. With c² the squared cosine
between the separation and the polarization:

    Ω = 3/4 γ [-(1 - c²) cos ξ/ξ + (1 - 3c²)(sin ξ/ξ² + cos ξ/ξ³)]
    Γ = 3/2 γ [ (1 - c²) sin ξ/ξ + (1 - 3c²)(cos ξ/ξ² - sin ξ/ξ³)]

For coincident points Ω = 0 and Γ = γ (the single-spin limit).
"""

import numpy as np

from .system import SpinCollection

K0 = 2 * np.pi


def _geometry(a: np.ndarray, b: np.ndarray, polarization: np.ndarray):
    """Return (ξ, cos²θ) for the pair, or None if the points coincide."""
    rij = np.asarray(a, dtype=float) - np.asarray(b, dtype=float)
    rij_norm = np.linalg.norm(rij)
    if rij_norm == 0:
        return None

    mu = np.asarray(polarization, dtype=float)
    mu = mu / np.linalg.norm(mu)
    costheta2 = (np.dot(rij, mu) / rij_norm) ** 2
    return K0 * rij_norm, costheta2


def omega_kernel(a, b, polarization, gamma: float) -> float:
    """
    Dipole-dipole frequency shift between spins at ``a`` and ``b``.

    Parameters
    ----------
    a, b : array_like, shape (3,)
        Positions of the two spins
    polarization : array_like, shape (3,)
        Common polarization axis (normalized internally)
    gamma : float
        Single-spin decay rate

    Returns
    -------
    omega : float
        Zero if the points coincide.
    """
    geometry = _geometry(a, b, polarization)
    if geometry is None:
        return 0.0

    xi, c2 = geometry
    return float(3. / 4 * gamma * (
        -(1 - c2) * np.cos(xi) / xi
        + (1 - 3 * c2) * (np.sin(xi) / xi**2 + np.cos(xi) / xi**3)
    ))


def gamma_kernel(a, b, polarization, gamma: float) -> float:
    """
    Collective decay rate between spins at ``a`` and ``b``.

    Same arguments as :func:`omega_kernel`. Returns ``gamma`` itself if the
    points coincide.
    """
    geometry = _geometry(a, b, polarization)
    if geometry is None:
        return float(gamma)

    xi, c2 = geometry
    return float(3. / 2 * gamma * (
        (1 - c2) * np.sin(xi) / xi
        + (1 - 3 * c2) * (np.cos(xi) / xi**2 - np.sin(xi) / xi**3)
    ))


def _kernel_matrix(kernel, collection: SpinCollection) -> np.ndarray:
    n = len(collection.spins)
    positions = collection.positions
    matrix = np.zeros((n, n))
    for i in range(n):
        for j in range(n):
            matrix[i, j] = kernel(positions[i], positions[j],
                                  collection.polarization, collection.gamma)
    return matrix


def omega_matrix(collection: SpinCollection) -> np.ndarray:
    """
    Matrix of dipole-dipole frequency shifts for all spin pairs.

    Uses the collection's own decay rate. The result is symmetric with a
    zero diagonal.
    """
    return _kernel_matrix(omega_kernel, collection)


def gamma_matrix(collection: SpinCollection) -> np.ndarray:
    """
    Matrix of collective decay rates for all spin pairs.

    Uses the collection's own decay rate, which also fills the diagonal.
    """
    return _kernel_matrix(gamma_kernel, collection)
