"""
Exceptions raised while building systems and geometries.

All errors derive from ValueError so callers that only care about
"bad input" can keep catching the built-in type.
"""


class ConstructionError(ValueError):
    """Raised when a system value object receives invalid input."""


class DimensionMismatchError(ConstructionError):
    """Raised when per-spin data does not match the number of spins."""


class InvalidGeometryError(ValueError):
    """Raised when shape parameters describe a degenerate geometry."""
