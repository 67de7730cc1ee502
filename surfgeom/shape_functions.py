"""Signed and signed-power trigonometric primitives.

``suq_sin`` and ``suq_cos`` generalise the unit-circle parametrisation
``(cos w, sin w)`` to superquadric cross-sections::

    suq_sin(w; k) = sign(sin w) * |sin w| ** k
    suq_cos(w; k) = sign(cos w) * |cos w| ** k

``k = 2`` gives an ellipse, ``k -> 0`` approaches a box and ``k > 2`` a
four-pointed star.  They are the ``f(w; m)`` and ``g(w; m)`` auxiliary
functions from https://en.wikipedia.org/wiki/Superquadrics

With ``k = 0`` the power is 1 everywhere, but ``sign`` still forces an
exact 0 where the sine or cosine is exactly 0.

All functions accept scalars or arrays and broadcast like numpy ufuncs.
"""

from __future__ import annotations

from typing import Union

import numpy as np

from ._common import _F

_Real = Union[float, _F]

__all__ = ["sign", "suq_sin", "suq_cos"]


def sign(x: _Real) -> _Real:
    """-1 where *x* < 0, 0 where *x* == 0, +1 where *x* > 0."""
    return np.sign(x)


def suq_sin(x: _Real, k: _Real) -> _Real:
    """Superquadric sine: ``sign(sin x) * |sin x| ** k``."""
    s = np.sin(x)
    return sign(s) * np.power(np.abs(s), k)


def suq_cos(x: _Real, k: _Real) -> _Real:
    """Superquadric cosine: ``sign(cos x) * |cos x| ** k``."""
    c = np.cos(x)
    return sign(c) * np.power(np.abs(c), k)
