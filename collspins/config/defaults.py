"""
Central defaults for :mod:`collspins`.

Positions are measured in units of the transition wavelength and rates in
units of the single-spin decay rate.
"""

# --- Reference emitter ---
ORIGIN = (0.0, 0.0, 0.0)  # Position of the implicit reference emitter
E_Z = (0.0, 0.0, 1.0)  # Out-of-plane polarization for "orthogonal" shapes
REFERENCE_GAMMA = 1.0  # Single-spin decay rate used by the kernel

# --- Spin / cavity defaults ---
SPIN_DELTA = 0.0  # Detuning of a single spin
COLLECTION_GAMMA = 1.0  # Decay rate shared by a spin collection
CAVITY_DELTA = 0.0  # Cavity detuning
CAVITY_ETA = 0.0  # Pump strength
CAVITY_KAPPA = 0.0  # Cavity decay rate

# --- Supported options ---
SUPPORTED_SHAPES = [
    "triangle",
    "square",
    "rectangle",
    "polygon",
    "cube",
    "box",
    "chain",
    "square_lattice",
    "hexagonal_lattice",
    "cubic_lattice",
    "tetragonal_lattice",
    "hexagonal_lattice3d",
]

__all__ = [
    "ORIGIN",
    "E_Z",
    "REFERENCE_GAMMA",
    "SPIN_DELTA",
    "COLLECTION_GAMMA",
    "CAVITY_DELTA",
    "CAVITY_ETA",
    "CAVITY_KAPPA",
    "SUPPORTED_SHAPES",
]
