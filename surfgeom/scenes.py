"""Composite scenes assembled from several independent sampler calls.

Each function returns an ordered ``{label: Mesh}`` dictionary, ready to be
handed to a renderer one mesh at a time.
"""

from __future__ import annotations

from typing import Dict, Sequence

import numpy as np

from .mesh import Mesh
from .solids import (
    draw_cylinder,
    draw_hemisphere,
    draw_plane_nzz,
    draw_sphere,
    draw_superquadric,
)

__all__ = ["aligned_cylinders", "superquadric_gallery", "cap_and_cup"]

# Axis directions from the origin: coordinate axes, face diagonals, space diagonal
_DIRECTIONS = {
    "x": (1.0, 0.0, 0.0),
    "y": (0.0, 1.0, 0.0),
    "z": (0.0, 0.0, 1.0),
    "xy": (1.0, 1.0, 0.0),
    "yz": (0.0, 1.0, 1.0),
    "xz": (1.0, 0.0, 1.0),
    "xyz": (1.0, 1.0, 1.0),
}


def aligned_cylinders(
    radius: float = 0.1,
    ndiv_axis: int = 1,
    ndiv_perimeter: int = 20,
) -> Dict[str, Mesh]:
    """Thin cylinders from the origin along the axes and diagonals of the unit cube."""
    origin = np.zeros(3)
    return {
        label: draw_cylinder(origin, direction, radius, ndiv_axis, ndiv_perimeter)
        for label, direction in _DIRECTIONS.items()
    }


def superquadric_gallery(n_alpha: int = 40, n_theta: int = 20) -> Dict[str, Mesh]:
    """Star, pyramid, cube and sphere on four corners of a 2x2x2 box."""
    full = (-180.0, 180.0, -90.0, 90.0)
    unit = (1.0, 1.0, 1.0)
    return {
        "star": draw_superquadric((-1.0, -1.0, -1.0), unit, (0.5, 0.5, 0.5), *full, n_alpha, n_theta),
        "pyramid": draw_superquadric((1.0, -1.0, -1.0), unit, (1.0, 1.0, 1.0), *full, n_alpha, n_theta),
        "cube": draw_superquadric((-1.0, 1.0, 1.0), unit, (4.0, 4.0, 4.0), *full, n_alpha, n_theta),
        "sphere": draw_sphere((1.0, 1.0, 1.0), 1.0, n_alpha, n_theta),
    }


def cap_and_cup(
    center: Sequence[float] = (-1.0, -1.0, -1.0),
    r: float = 0.5,
    n: int = 10,
) -> Dict[str, Mesh]:
    """A dome and a bowl sharing *center*, next to a tilted plane."""
    return {
        "plane": draw_plane_nzz((-1.0, 1.0, 1.0), (1.0, -1.0, 1.0), -1.0, 1.0, -1.0, 1.0, 3, 3),
        "cap": draw_hemisphere(center, r, -180.0, 180.0, n, n, cup=False),
        "cup": draw_hemisphere(center, r, -180.0, 180.0, n, n, cup=True),
    }
