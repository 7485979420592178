"""
Configuration for collspins.

- defaults: plain constants (reference point, polarization, rates)
- settings: validated InteractionSettings passed to calculations
"""

from .defaults import (
    ORIGIN,
    E_Z,
    REFERENCE_GAMMA,
    SUPPORTED_SHAPES,
)
from .settings import InteractionSettings, DEFAULT_SETTINGS, resolve_settings

__all__ = [
    'ORIGIN',
    'E_Z',
    'REFERENCE_GAMMA',
    'SUPPORTED_SHAPES',
    'InteractionSettings',
    'DEFAULT_SETTINGS',
    'resolve_settings',
]
