"""Uniform 1-D and 2-D grid generation over closed intervals."""

from __future__ import annotations

import logging
from typing import Callable, Tuple

import numpy as np

from ._common import _F
from .errors import RangeError

logger = logging.getLogger(__name__)

_CalcZ = Callable[[float, float], float]

__all__ = ["linspace", "generate2d", "generate3d"]


def linspace(start: float, stop: float, count: int) -> _F:
    """Return *count* evenly spaced values over the closed interval ``[start, stop]``.

    ``count == 0`` gives an empty array and ``count == 1`` gives ``[start]``.
    For ``count >= 2`` the first value is exactly *start* and the last is
    exactly *stop*; interior values are ``start + i * step`` with
    ``step = (stop - start) / (count - 1)``.
    """
    if count < 0:
        raise RangeError("count", count, 0)
    res = np.empty(count, dtype=np.float64)
    if count == 0:
        return res
    res[0] = start
    if count == 1:
        return res
    step = (stop - start) / (count - 1)
    res[1:-1] = start + np.arange(1, count - 1) * step
    res[-1] = stop
    return res


def _axes(
    xmin: float, xmax: float, ymin: float, ymax: float, nx: int, ny: int
) -> Tuple[_F, _F]:
    if nx < 0:
        raise RangeError("nx", nx, 0)
    if ny < 0:
        raise RangeError("ny", ny, 0)
    # linspace collapses a single-sample axis onto its minimum
    xs = linspace(xmin, xmax, nx)
    ys = linspace(ymin, ymax, ny)
    return np.meshgrid(xs, ys, indexing="xy")


def generate2d(
    xmin: float,
    xmax: float,
    ymin: float,
    ymax: float,
    nx: int,
    ny: int,
) -> Tuple[_F, _F]:
    """Generate 2-D points as in a meshgrid.

    Parameters
    ----------
    xmin, xmax:
        Range along x.
    ymin, ymax:
        Range along y.
    nx, ny:
        Number of points along x and y.  An axis with a single point sits at
        its minimum; an axis with zero points yields empty arrays.

    Returns
    -------
    tuple of numpy.ndarray
        ``(X, Y)``, each of shape ``(ny, nx)``.  Row *i* holds a fixed y,
        column *j* a fixed x.
    """
    X, Y = _axes(xmin, xmax, ymin, ymax, nx, ny)
    return X, Y


def generate3d(
    xmin: float,
    xmax: float,
    ymin: float,
    ymax: float,
    nx: int,
    ny: int,
    calc_z: _CalcZ,
    *,
    vectorized: bool = False,
) -> Tuple[_F, _F, _F]:
    """Generate 3-D points ``z = calc_z(x, y)`` over a meshgrid.

    *calc_z* must be a pure function of ``(x, y)``; the evaluation order over
    grid points is unspecified.  With ``vectorized=True`` it is called once
    with the full ``X`` and ``Y`` arrays instead of once per point.

    Returns
    -------
    tuple of numpy.ndarray
        ``(X, Y, Z)``, each of shape ``(ny, nx)``.
    """
    X, Y = _axes(xmin, xmax, ymin, ymax, nx, ny)
    if vectorized:
        Z = np.broadcast_to(np.asarray(calc_z(X, Y), dtype=np.float64), X.shape).copy()
    else:
        Z = np.vectorize(calc_z, otypes=[np.float64])(X, Y)
    logger.debug("generate3d: sampled %dx%d grid", ny, nx)
    return X, Y, Z
