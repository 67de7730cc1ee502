"""Shared vector helpers used by the frame builder and the solid samplers.

This module provides:

* **Type alias**: :data:`_F`
* **Vector constructor**: :func:`vec3`
* **Math helpers**: :func:`length`, :func:`dot`, :func:`dot2`, :func:`cross`
* **Input coercion**: :func:`as_vec3`

Not meant to be imported directly by end users — import from
``surfgeom`` instead.
"""

from __future__ import annotations

from typing import Sequence, Union

import numpy as np
import numpy.typing as npt

from .errors import DimensionError

# ---------------------------------------------------------------------------
# Type alias
# ---------------------------------------------------------------------------
_F = npt.NDArray[np.floating]
_VecLike = Union[Sequence[float], _F]

__all__ = [
    "_F", "_VecLike",
    "vec3",
    "length", "dot", "dot2", "cross",
    "as_vec3",
]


# ===========================================================================
# Vector constructor
# ===========================================================================

def vec3(x: _F, y: _F, z: _F) -> _F:
    """Stack *x*, *y*, *z* into a ``(..., 3)`` array."""
    x, y, z = np.broadcast_arrays(x, y, z)
    return np.stack([x, y, z], axis=-1)


# ===========================================================================
# Math helpers
# ===========================================================================

def length(v: _F) -> _F:
    """Euclidean length along the last axis."""
    return np.linalg.norm(v, axis=-1)


def dot(a: _F, b: _F) -> _F:
    """Dot product along the last axis."""
    return np.sum(a * b, axis=-1)


def dot2(a: _F) -> _F:
    """Squared length: ``dot(a, a)``."""
    return dot(a, a)


def cross(a: _F, b: _F) -> _F:
    """Cross product along the last axis."""
    return np.cross(a, b)


# ===========================================================================
# Input coercion
# ===========================================================================

def as_vec3(v: _VecLike, name: str) -> _F:
    """Return *v* as a float64 ``(3,)`` array.

    Raises :class:`~surfgeom.errors.DimensionError` naming *name* when *v*
    is not a flat sequence of exactly three numbers.
    """
    arr = np.asarray(v, dtype=np.float64)
    if arr.ndim != 1 or arr.shape[0] != 3:
        raise DimensionError(name, arr.shape)
    return arr
