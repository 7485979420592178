"""
Effective Interactions Demo

This example demonstrates the main building blocks:
- SpinCollection built from generated positions
- effective_interactions around a reference spin
- Named shape shortcuts and their convergence with lattice size
- CavitySpinCollection with uniform coupling
"""

import logging

import numpy as np

from collspins import (
    CavityMode,
    CavitySpinCollection,
    InteractionSettings,
    SpinCollection,
    chain,
    effective_interactions,
    hexagonallattice_orthogonal,
    polygon_orthogonal,
    setup_logging,
)
from collspins.geometry import hexagonal_lattice_positions


def example_collection():
    """Example 1: generic collection built from positions."""
    print("="*60)
    print("Example 1: Hexagonal patch around a reference spin")
    print("="*60)

    positions = hexagonal_lattice_positions(a=0.3, N=3)
    collection = SpinCollection.from_positions(positions, polarization=[0, 0, 1])
    print(f"\n{collection}")

    omega_eff, gamma_eff = effective_interactions(collection)
    print(f"  omega_eff = {omega_eff:+.6f}")
    print(f"  gamma_eff = {gamma_eff:+.6f}")


def example_polygons():
    """Example 2: regular polygons with growing vertex count."""
    print("\n" + "="*60)
    print("Example 2: Regular polygons, side length 0.2")
    print("="*60)

    for N in (3, 4, 6, 10):
        omega_eff, gamma_eff = polygon_orthogonal(N, 0.2)
        print(f"  N={N:2d}: omega={omega_eff:+.5f}, gamma={gamma_eff:+.5f}")


def example_convergence():
    """Example 3: truncated lattice sums for increasing N."""
    print("\n" + "="*60)
    print("Example 3: Convergence of the hexagonal lattice sum")
    print("="*60)

    for N in (5, 10, 20, 40):
        omega_eff, gamma_eff = hexagonallattice_orthogonal(0.3, N)
        print(f"  N={N:3d}: omega={omega_eff:+.5f}, gamma={gamma_eff:+.5f}")


def example_chain_angles():
    """Example 4: chain with tilted dipoles and a different kernel rate."""
    print("\n" + "="*60)
    print("Example 4: Chain, polarization angle sweep")
    print("="*60)

    settings = InteractionSettings(gamma=2.0)
    for theta in np.linspace(0, np.pi / 2, 4):
        omega_eff, gamma_eff = chain(0.25, theta, 50, settings=settings)
        print(f"  theta={theta:.3f}: omega={omega_eff:+.5f}, gamma={gamma_eff:+.5f}")


def example_cavity():
    """Example 5: spins coupled to a cavity mode."""
    print("\n" + "="*60)
    print("Example 5: Cavity coupled to a square")
    print("="*60)

    collection = SpinCollection.from_positions(
        [[0.2, 0, 0], [0, 0.2, 0], [0.2, 0.2, 0]], polarization=[0, 0, 1])
    system = CavitySpinCollection(CavityMode(cutoff=5, kappa=0.5), collection, g=0.1)
    print(f"\n{system}")
    print(f"  g = {system.g}")


if __name__ == "__main__":
    setup_logging(level=logging.INFO)

    example_collection()
    example_polygons()
    example_convergence()
    example_chain_angles()
    example_cavity()
