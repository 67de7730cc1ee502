"""Right-handed orthonormal frames aligned with a line segment."""

from __future__ import annotations

import logging
from typing import NamedTuple

import numpy as np

from . import config
from ._common import _F, _VecLike, as_vec3, cross, dot, dot2
from .errors import SegmentTooShort

logger = logging.getLogger(__name__)

__all__ = ["Frame", "aligned_system"]


class Frame(NamedTuple):
    """Orthonormal basis ``(e0, e1, e2)`` with ``e2 = e0 x e1``."""

    e0: _F
    e1: _F
    e2: _F

    def as_matrix(self) -> _F:
        """3x3 matrix whose columns are ``e0``, ``e1``, ``e2``."""
        return np.column_stack([self.e0, self.e1, self.e2])

    def to_world(self, origin: _VecLike, u: _F, v: _F, w: _F) -> _F:
        """Map local coordinates ``(u, v, w)`` to world points ``(..., 3)``.

        ``origin + u*e0 + v*e1 + w*e2``, broadcast over *u*, *v*, *w*.
        """
        o = np.asarray(origin, dtype=np.float64)
        u, v, w = np.broadcast_arrays(
            np.asarray(u, dtype=np.float64),
            np.asarray(v, dtype=np.float64),
            np.asarray(w, dtype=np.float64),
        )
        return (
            o
            + u[..., None] * self.e0
            + v[..., None] * self.e1
            + w[..., None] * self.e2
        )


def aligned_system(a: _VecLike, b: _VecLike) -> Frame:
    """Return a frame whose first axis runs from *a* towards *b*.

    A single Gram-Schmidt step seeded with ``n + (1, 0, 0)``, or with
    ``n + (0, 1, 0)`` when ``n = b - a`` is parallel to the x-axis, so the
    seed is never parallel to ``n``.  "Parallel" is judged relative to
    ``|n|`` (see :data:`~surfgeom.config.PARALLEL_TOLERANCE`), and ``e1`` is
    re-orthogonalised once against ``e0`` to remove rounding left by the
    projection.

    Raises
    ------
    DimensionError
        If *a* or *b* is not a 3-vector.
    SegmentTooShort
        If ``|b - a|^2`` is at or below machine epsilon.
    """
    a = as_vec3(a, "a")
    b = as_vec3(b, "b")
    n = b - a
    nn = float(dot2(n))
    if nn <= config.EPSILON:
        raise SegmentTooShort(a, b, nn)

    norm = np.sqrt(nn)
    tol = config.PARALLEL_TOLERANCE * norm
    seed = np.zeros(3)
    if abs(n[1]) <= tol and abs(n[2]) <= tol:
        seed[1] = 1.0
        logger.debug("aligned_system: axis parallel to x, seeding along y")
    else:
        seed[0] = 1.0

    # (n + seed) - n*((n + seed).n)/nn == seed - n*(seed.n)/nn, without
    # adding |n| to a unit vector first
    q = seed - n * (dot(seed, n) / nn)
    e0 = n / norm
    e1 = q / np.sqrt(dot2(q))
    e1 = e1 - e0 * dot(e1, e0)
    e1 = e1 / np.sqrt(dot2(e1))
    e2 = cross(e0, e1)
    return Frame(e0, e1, e2)
