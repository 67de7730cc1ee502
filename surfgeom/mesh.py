"""The :class:`Mesh` value produced by every sampler."""

from __future__ import annotations

from typing import Iterator, Tuple

import numpy as np

from ._common import _F, vec3
from .errors import DimensionError

__all__ = ["Mesh"]


class Mesh:
    """Structured grid of 3-D points stored as three same-shaped 2-D arrays.

    ``(x[i, j], y[i, j], z[i, j])`` is one sampled point.  Rows index the
    outer (angular / perimeter) parameter, columns the inner (axial / polar)
    one.  The arrays are read-only; a mesh is never modified after creation.

    A mesh unpacks like a tuple, so ``x, y, z = mesh`` works and the three
    arrays can go straight to ``Axes3D.plot_surface``.
    """

    __slots__ = ("_x", "_y", "_z")

    def __init__(self, x: _F, y: _F, z: _F) -> None:
        x = np.array(x, dtype=np.float64)
        y = np.array(y, dtype=np.float64)
        z = np.array(z, dtype=np.float64)
        if x.ndim != 2:
            raise DimensionError("x", x.shape, f"x must be a 2-D array (got shape {x.shape})")
        for name, arr in (("y", y), ("z", z)):
            if arr.shape != x.shape:
                raise DimensionError(
                    name, arr.shape,
                    f"{name} must have the same shape as x {x.shape} (got {arr.shape})",
                )
        for arr in (x, y, z):
            arr.flags.writeable = False
        self._x = x
        self._y = y
        self._z = z

    @property
    def x(self) -> _F:
        return self._x

    @property
    def y(self) -> _F:
        return self._y

    @property
    def z(self) -> _F:
        return self._z

    @property
    def shape(self) -> Tuple[int, int]:
        """``(rows, cols)`` shared by ``x``, ``y`` and ``z``."""
        return self._x.shape  # type: ignore[return-value]

    def points(self) -> _F:
        """All points stacked as a ``(rows, cols, 3)`` array."""
        return vec3(self._x, self._y, self._z)

    def bounds(self) -> Tuple[Tuple[float, float], Tuple[float, float], Tuple[float, float]]:
        """``((xmin, xmax), (ymin, ymax), (zmin, zmax))`` over all points."""
        return tuple(  # type: ignore[return-value]
            (float(a.min()), float(a.max())) for a in (self._x, self._y, self._z)
        )

    def __iter__(self) -> Iterator[_F]:
        return iter((self._x, self._y, self._z))

    def __len__(self) -> int:
        return 3

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Mesh):
            return NotImplemented
        return all(np.array_equal(a, b) for a, b in zip(self, other))

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        rows, cols = self.shape
        return f"Mesh(shape=({rows}, {cols}))"
