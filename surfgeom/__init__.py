"""
surfgeom — Parametric Surface Geometry
======================================

Turns compact geometric descriptions (an axis, a radius, a centre,
exponents, angular ranges) into structured rectangular meshes of 3-D points,
ready for a surface / wireframe renderer such as matplotlib's ``Axes3D``.

Implemented features
--------------------
- Shape functions: :func:`sign`, :func:`suq_sin`, :func:`suq_cos`
- Grid sampling: :func:`linspace`, :func:`generate2d`, :func:`generate3d`
- Frames: :func:`aligned_system`, :class:`Frame`
- Solids: :func:`draw_cylinder`, :func:`draw_plane_nzz`,
  :func:`draw_hemisphere`, :func:`draw_superquadric`, :func:`draw_sphere`
- Composite scenes: :mod:`surfgeom.scenes`

Quick start
-----------

::

    import matplotlib.pyplot as plt
    from surfgeom import draw_cylinder, draw_sphere

    tube = draw_cylinder((0, 0, 0), (1, 1, 1), 0.1, 1, 20)
    ball = draw_sphere((1, 1, 1), 0.3, 40, 20)

    ax = plt.figure().add_subplot(projection="3d")
    ax.plot_surface(*tube)
    ax.plot_wireframe(*ball)
"""

import logging

from .errors import (
    GeometryError,
    DimensionError,
    DegenerateAxis,
    SegmentTooShort,
    DegenerateNormal,
    RangeError,
)
from .shape_functions import sign, suq_sin, suq_cos
from .grid import linspace, generate2d, generate3d
from .frame import Frame, aligned_system
from .mesh import Mesh
from .solids import (
    draw_cylinder,
    draw_plane_nzz,
    draw_hemisphere,
    draw_superquadric,
    draw_sphere,
)
from .logging_config import setup_logging

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    # Errors
    "GeometryError",
    "DimensionError",
    "DegenerateAxis",
    "SegmentTooShort",
    "DegenerateNormal",
    "RangeError",

    # Shape functions
    "sign",
    "suq_sin",
    "suq_cos",

    # Grid utilities
    "linspace",
    "generate2d",
    "generate3d",

    # Frames
    "Frame",
    "aligned_system",

    # Meshes and solids
    "Mesh",
    "draw_cylinder",
    "draw_plane_nzz",
    "draw_hemisphere",
    "draw_superquadric",
    "draw_sphere",

    # Logging
    "setup_logging",
]
