"""Numeric tolerances and division-count minimums shared by the samplers."""

import sys

# Machine epsilon for float64; threshold for degenerate axes.
EPSILON: float = sys.float_info.epsilon

# Minimum |n_z| for a plane to be expressible as z = f(x, y).
NORMAL_Z_TOLERANCE: float = 1e-10

MIN_NDIV_AXIS: int = 1
MIN_NDIV_PERIMETER: int = 3
MIN_NDIV_ANGLE: int = 2
MIN_NDIV_PLANE: int = 2

# An axis counts as parallel to x when |n_y| and |n_z| are both within
# this fraction of |n|.
PARALLEL_TOLERANCE: float = EPSILON ** 0.5
