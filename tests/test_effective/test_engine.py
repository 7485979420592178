"""
Unit tests for the effective-interaction summation engine.

Tests:
- Empty collections
- Exact agreement with a manual kernel sum
- Reference rate and origin handling
- Determinism
"""

import logging

import numpy as np
import pytest
from collspins.config import InteractionSettings
from collspins.core import SpinCollection, omega_kernel, gamma_kernel
from collspins.effective import effective_interactions
from collspins.geometry import triangle_positions, hexagonal_lattice_positions


def _manual_sum(positions, polarization, gamma=1.0, origin=(0.0, 0.0, 0.0)):
    origin = np.array(origin, dtype=float)
    omega, decay = 0.0, 0.0
    for position in positions:
        omega += omega_kernel(origin, position, polarization, gamma)
        decay += gamma_kernel(origin, position, polarization, gamma)
    return omega, decay


class TestEffectiveInteractionsBasics:
    """Test basic behavior of the summation."""

    def test_empty_collection(self):
        """Test that no spins give exactly zero."""
        empty = SpinCollection.from_positions([], [0, 0, 1])

        assert effective_interactions(empty) == (0.0, 0.0)

    def test_single_spin_equals_kernel(self):
        position = np.array([0.25, 0.1, 0.0])
        collection = SpinCollection.from_positions([position], [0, 0, 1])
        origin = np.zeros(3)
        e_z = np.array([0.0, 0.0, 1.0])

        omega, decay = effective_interactions(collection)

        assert omega == omega_kernel(origin, position, e_z, 1.0)
        assert decay == gamma_kernel(origin, position, e_z, 1.0)

    def test_triangle_matches_manual_sum_exactly(self):
        """Test the two-term triangle sum is bit-identical to a manual sum."""
        positions = triangle_positions(0.3)
        collection = SpinCollection.from_positions(positions, [0, 0, 1])

        assert effective_interactions(collection) == _manual_sum(
            collection.positions, collection.polarization)

    def test_returns_floats(self):
        collection = SpinCollection.from_positions([[0.5, 0.0, 0.0]], [0, 0, 1])
        omega, decay = effective_interactions(collection)

        assert type(omega) is float
        assert type(decay) is float

    def test_wrong_type_raises(self):
        with pytest.raises(TypeError, match="SpinCollection"):
            effective_interactions([[1.0, 0.0, 0.0]])


class TestReferenceRate:
    """Test which decay rate is passed to the kernel."""

    def test_collection_gamma_ignored(self):
        """Test the collection's own rate does not enter the sum."""
        positions = [[0.3, 0.0, 0.0], [0.0, 0.4, 0.0]]
        slow = SpinCollection.from_positions(positions, [0, 0, 1], gamma=1.0)
        fast = SpinCollection.from_positions(positions, [0, 0, 1], gamma=5.0)

        assert effective_interactions(slow) == effective_interactions(fast)

    def test_settings_gamma_scales_result(self):
        """Test the kernel rate is taken from the settings."""
        positions = [[0.3, 0.0, 0.0], [0.0, 0.4, 0.0]]
        collection = SpinCollection.from_positions(positions, [0, 0, 1])

        base = effective_interactions(collection)
        scaled = effective_interactions(collection, InteractionSettings(gamma=2.0))

        assert np.allclose(scaled, 2 * np.array(base))

    def test_spin_at_origin_uses_coincident_kernel(self):
        """Test a spin on the reference point contributes (0, gamma)."""
        collection = SpinCollection.from_positions([[0.0, 0.0, 0.0]], [0, 0, 1])

        assert effective_interactions(collection) == (0.0, 1.0)


class TestReferenceOrigin:
    """Test a displaced reference point."""

    def test_shifted_origin(self):
        """Test shifting origin and spins together leaves the result unchanged."""
        positions = hexagonal_lattice_positions(0.4, 2)
        shift = np.array([1.5, -0.5, 2.0])

        base = effective_interactions(
            SpinCollection.from_positions(positions, [0, 0, 1]))
        shifted = effective_interactions(
            SpinCollection.from_positions(positions + shift, [0, 0, 1]),
            InteractionSettings(origin=shift))

        assert np.allclose(base, shifted)


class TestDeterminism:
    """Test reproducibility of the sequential sum."""

    def test_repeated_calls_identical(self):
        positions = hexagonal_lattice_positions(0.37, 6)
        collection = SpinCollection.from_positions(positions, [0.1, 0.2, 1.0])

        assert effective_interactions(collection) == effective_interactions(collection)

    def test_reordering_changes_at_most_rounding(self):
        """Test the result does not depend on order beyond float rounding."""
        positions = hexagonal_lattice_positions(0.37, 6)
        forward = SpinCollection.from_positions(positions, [0, 0, 1])
        backward = SpinCollection.from_positions(positions[::-1], [0, 0, 1])

        assert np.allclose(effective_interactions(forward),
                           effective_interactions(backward), rtol=1e-12, atol=1e-12)


class TestEngineLogging:
    """Test debug output."""

    def test_debug_message(self, caplog):
        collection = SpinCollection.from_positions(triangle_positions(0.3), [0, 0, 1])

        with caplog.at_level(logging.DEBUG, logger="collspins.effective.engine"):
            effective_interactions(collection)

        assert "Summed 2 kernel terms" in caplog.text


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
