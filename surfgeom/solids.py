"""Parametric samplers for canonical solids.

Each sampler validates its descriptor, then evaluates a closed-form
parametrisation over a 2-D index grid and returns a :class:`~surfgeom.mesh.Mesh`.

Implemented solids
------------------
- :func:`draw_cylinder`     — cylinder around an arbitrary a-to-b axis
- :func:`draw_plane_nzz`    — plane whose normal has a non-zero z component
- :func:`draw_hemisphere`   — dome (``cup=False``) or bowl (``cup=True``)
- :func:`draw_superquadric` — sphere, super-ellipsoid, box-like and star-like shapes
- :func:`draw_sphere`       — superquadric with exponents (2, 2, 2) over the full range

Angles are given in degrees.  Division counts are numbers of intervals, so a
parameter with ``n`` divisions is sampled at ``n + 1`` points.  Every sampler
is a pure function: it either returns a complete mesh or raises a
:class:`~surfgeom.errors.GeometryError` before any numeric work.
"""

from __future__ import annotations

import logging
from typing import Tuple

import numpy as np

from . import config
from ._common import _F, _VecLike, as_vec3, length
from .errors import DegenerateNormal, RangeError
from .frame import aligned_system
from .grid import generate3d
from .mesh import Mesh
from .shape_functions import suq_cos, suq_sin

logger = logging.getLogger(__name__)

__all__ = [
    "draw_cylinder",
    "draw_plane_nzz",
    "draw_hemisphere",
    "draw_superquadric",
    "draw_sphere",
]


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _check_min(name: str, value: int, minimum: int) -> None:
    if value < minimum:
        raise RangeError(name, value, minimum)


def _check_angular_divisions(n_alpha: int, n_theta: int) -> None:
    _check_min("n_alpha", n_alpha, config.MIN_NDIV_ANGLE)
    _check_min("n_theta", n_theta, config.MIN_NDIV_ANGLE)


def _angle_grid(
    alpha_min: float,
    alpha_max: float,
    theta_min: float,
    theta_max: float,
    n_alpha: int,
    n_theta: int,
) -> Tuple[_F, _F]:
    """``(A, T)`` of shape ``(n_alpha + 1, n_theta + 1)``, in radians."""
    a_min, a_max = np.deg2rad(alpha_min), np.deg2rad(alpha_max)
    t_min, t_max = np.deg2rad(theta_min), np.deg2rad(theta_max)
    d_alpha = (a_max - a_min) / n_alpha
    d_theta = (t_max - t_min) / n_theta
    alpha = a_min + np.arange(n_alpha + 1) * d_alpha
    theta = t_min + np.arange(n_theta + 1) * d_theta
    A, T = np.meshgrid(alpha, theta, indexing="ij")
    return A, T


# ===========================================================================
# Samplers
# ===========================================================================

def draw_cylinder(
    a: _VecLike,
    b: _VecLike,
    radius: float,
    ndiv_axis: int,
    ndiv_perimeter: int,
) -> Mesh:
    """Sample a cylinder whose centred axis runs from *a* to *b*.

    Parameters
    ----------
    a, b:
        Two points on the cylinder axis.
    radius:
        Cylinder radius.
    ndiv_axis:
        Divisions along the axis (``>= 1``).
    ndiv_perimeter:
        Divisions around the cross-sectional circle (``>= 3``).

    Returns
    -------
    Mesh
        Shape ``(ndiv_perimeter + 1, ndiv_axis + 1)``.  The last row repeats
        the first (angle ``2*pi``) so the surface closes without a seam.
    """
    a = as_vec3(a, "a")
    b = as_vec3(b, "b")
    _check_min("ndiv_axis", ndiv_axis, config.MIN_NDIV_AXIS)
    _check_min("ndiv_perimeter", ndiv_perimeter, config.MIN_NDIV_PERIMETER)
    frame = aligned_system(a, b)

    height = float(length(b - a))
    u = np.arange(ndiv_axis + 1) * (height / ndiv_axis)
    v = np.arange(ndiv_perimeter + 1) * (2.0 * np.pi / ndiv_perimeter)
    V, U = np.meshgrid(v, u, indexing="ij")

    p = frame.to_world(a, U, radius * np.sin(V), radius * np.cos(V))
    mesh = Mesh(p[..., 0], p[..., 1], p[..., 2])
    logger.debug("draw_cylinder: %s", mesh)
    return mesh


def draw_plane_nzz(
    p: _VecLike,
    n: _VecLike,
    xmin: float,
    xmax: float,
    ymin: float,
    ymax: float,
    nx: int,
    ny: int,
) -> Mesh:
    """Sample a plane whose normal *n* has a non-zero z component.

    The plane passes through *p* and is written as ``z = f(x, y)``; with
    ``n = (0, 0, 1)`` it is horizontal.

    Parameters
    ----------
    p:
        Point on the plane.
    n:
        Normal vector (need not be unit).
    xmin, xmax, ymin, ymax:
        Limits of the sampled region.
    nx, ny:
        Divisions along x and y (``>= 2``).

    Returns
    -------
    Mesh
        Shape ``(ny + 1, nx + 1)``, laid out as in :func:`~surfgeom.grid.generate3d`.
    """
    p = as_vec3(p, "p")
    n = as_vec3(n, "n")
    if abs(n[2]) < config.NORMAL_Z_TOLERANCE:
        raise DegenerateNormal(n, config.NORMAL_Z_TOLERANCE)
    _check_min("nx", nx, config.MIN_NDIV_PLANE)
    _check_min("ny", ny, config.MIN_NDIV_PLANE)

    d = -n[0] * p[0] - n[1] * p[1] - n[2] * p[2]

    def calc_z(x: _F, y: _F) -> _F:
        return (-d - n[0] * x - n[1] * y) / n[2]

    X, Y, Z = generate3d(xmin, xmax, ymin, ymax, nx + 1, ny + 1, calc_z, vectorized=True)
    mesh = Mesh(X, Y, Z)
    logger.debug("draw_plane_nzz: %s", mesh)
    return mesh


def draw_hemisphere(
    c: _VecLike,
    r: float,
    alpha_min: float,
    alpha_max: float,
    n_alpha: int,
    n_theta: int,
    cup: bool,
) -> Mesh:
    """Sample a hemisphere centred at *c*.

    The azimuth ``alpha`` spans ``[alpha_min, alpha_max]`` degrees; the polar
    angle ``theta`` always spans ``[0, 90]`` degrees.  ``cup=True`` opens the
    hemisphere upwards like a bowl (points below *c*); ``cup=False`` gives a
    dome.

    Returns
    -------
    Mesh
        Shape ``(n_alpha + 1, n_theta + 1)``.
    """
    c = as_vec3(c, "c")
    _check_angular_divisions(n_alpha, n_theta)

    A, T = _angle_grid(alpha_min, alpha_max, 0.0, 90.0, n_alpha, n_theta)
    s = -1.0 if cup else 1.0
    x = c[0] + r * np.cos(A) * np.sin(T)
    y = c[1] + r * np.sin(A) * np.sin(T)
    z = c[2] + s * r * np.cos(T)
    mesh = Mesh(x, y, z)
    logger.debug("draw_hemisphere: %s cup=%s", mesh, cup)
    return mesh


def draw_superquadric(
    c: _VecLike,
    r: _VecLike,
    k: _VecLike,
    alpha_min: float,
    alpha_max: float,
    theta_min: float,
    theta_max: float,
    n_alpha: int,
    n_theta: int,
) -> Mesh:
    """Sample a superquadric (sphere, super-ellipsoid, box-like, star-like).

    Parameters
    ----------
    c:
        Centre ``(cx, cy, cz)``.
    r:
        Radii ``(rx, ry, rz)``.
    k:
        Exponents ``(kx, ky, kz)``, each ``>= 0``.  ``k = 2`` is an
        ellipsoid, larger values approach a box, smaller values a star.
    alpha_min, alpha_max:
        Azimuth range in degrees, typically within ``[-180, 180]``.
    theta_min, theta_max:
        Elevation range in degrees, typically within ``[-90, 90]``.
    n_alpha, n_theta:
        Divisions along alpha and theta (``>= 2``).

    Returns
    -------
    Mesh
        Shape ``(n_alpha + 1, n_theta + 1)``.

    Reference: https://en.wikipedia.org/wiki/Superquadrics
    """
    c = as_vec3(c, "c")
    r = as_vec3(r, "r")
    k = as_vec3(k, "k")
    _check_angular_divisions(n_alpha, n_theta)
    # signbit also rejects -0.0, whose exponent 2/k would be -inf
    if np.any(np.signbit(k) | np.isnan(k)):
        raise RangeError("k", tuple(k.tolist()), 0.0,
                         f"exponents k must be non-negative (got {tuple(k.tolist())})")

    # k == 0 gives an infinite exponent, i.e. the limiting star shape
    with np.errstate(divide="ignore"):
        aa, bb, cc = np.divide(2.0, k)

    A, T = _angle_grid(alpha_min, alpha_max, theta_min, theta_max, n_alpha, n_theta)
    x = c[0] + r[0] * suq_cos(T, aa) * suq_cos(A, aa)
    y = c[1] + r[1] * suq_cos(T, bb) * suq_sin(A, bb)
    z = c[2] + r[2] * suq_sin(T, cc)
    mesh = Mesh(x, y, z)
    logger.debug("draw_superquadric: %s k=%s", mesh, tuple(k.tolist()))
    return mesh


def draw_sphere(c: _VecLike, r: float, n_alpha: int, n_theta: int) -> Mesh:
    """Sample a full sphere of radius *r* centred at *c*.

    Same as :func:`draw_superquadric` with radii ``(r, r, r)``, exponents
    ``(2, 2, 2)``, ``alpha`` in ``[-180, 180]`` and ``theta`` in ``[-90, 90]``.
    """
    c = as_vec3(c, "c")
    _check_angular_divisions(n_alpha, n_theta)
    return draw_superquadric(
        c, (r, r, r), (2.0, 2.0, 2.0), -180.0, 180.0, -90.0, 90.0, n_alpha, n_theta
    )
