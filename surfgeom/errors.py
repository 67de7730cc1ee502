"""Exceptions raised by the surfgeom samplers.

Every failure is an input-validation failure detected before any numeric
work starts.  All classes derive from :class:`GeometryError`, itself a
:class:`ValueError`, so callers may catch either.
"""

from __future__ import annotations

from typing import Any, Optional, Tuple

__all__ = [
    "GeometryError",
    "DimensionError",
    "DegenerateAxis",
    "SegmentTooShort",
    "DegenerateNormal",
    "RangeError",
]


class GeometryError(ValueError):
    """Base class for invalid solid descriptors."""


class DimensionError(GeometryError):
    """A vector argument does not have 3 components, or mesh arrays disagree in shape."""

    def __init__(
        self,
        name: str,
        shape: Tuple[int, ...],
        message: Optional[str] = None,
    ) -> None:
        self.name = name
        self.shape = tuple(shape)
        if message is None:
            message = f"{name} must have exactly 3 components (got shape {self.shape})"
        super().__init__(message)


class DegenerateAxis(GeometryError):
    """The two points defining an axis coincide."""


class SegmentTooShort(DegenerateAxis):
    """The a-to-b segment has squared length at or below machine epsilon."""

    def __init__(self, a: Any, b: Any, length_squared: float) -> None:
        self.a = a
        self.b = b
        self.length_squared = length_squared
        super().__init__(
            f"a-to-b segment is too short (|b - a|^2 = {length_squared:g})"
        )


class DegenerateNormal(GeometryError):
    """A plane normal has a near-zero z-component."""

    def __init__(self, normal: Any, tolerance: float) -> None:
        self.normal = normal
        self.tolerance = tolerance
        super().__init__(
            "the z-component of the normal vector cannot be zero "
            f"(|n_z| < {tolerance:g})"
        )


class RangeError(GeometryError):
    """A division count or exponent is below its allowed minimum."""

    def __init__(
        self,
        name: str,
        value: Any,
        minimum: Any,
        message: Optional[str] = None,
    ) -> None:
        self.name = name
        self.value = value
        self.minimum = minimum
        if message is None:
            message = f"{name} must be greater than or equal to {minimum} (got {value})"
        super().__init__(message)
