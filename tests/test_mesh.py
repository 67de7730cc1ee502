"""Tests for surfgeom.mesh."""

import numpy as np
import numpy.testing as npt
import pytest

from surfgeom import DimensionError, Mesh, generate2d


def _mesh() -> Mesh:
    x, y = generate2d(0.0, 1.0, -1.0, 1.0, 3, 2)
    return Mesh(x, y, x + y)


class TestMesh:
    def test_shape(self):
        assert _mesh().shape == (2, 3)

    def test_unpacks_to_three_arrays(self):
        x, y, z = _mesh()
        npt.assert_array_equal(x, [[0.0, 0.5, 1.0], [0.0, 0.5, 1.0]])
        npt.assert_array_equal(y, [[-1.0, -1.0, -1.0], [1.0, 1.0, 1.0]])
        npt.assert_array_equal(z, x + y)

    def test_points(self):
        m = _mesh()
        p = m.points()
        assert p.shape == (2, 3, 3)
        npt.assert_array_equal(p[1, 2], [m.x[1, 2], m.y[1, 2], m.z[1, 2]])

    def test_bounds(self):
        (xlo, xhi), (ylo, yhi), (zlo, zhi) = _mesh().bounds()
        assert (xlo, xhi) == (0.0, 1.0)
        assert (ylo, yhi) == (-1.0, 1.0)
        assert (zlo, zhi) == (-1.0, 2.0)

    def test_read_only(self):
        m = _mesh()
        with pytest.raises(ValueError):
            m.x[0, 0] = 5.0

    def test_input_is_copied(self):
        x = np.zeros((2, 2))
        m = Mesh(x, x, x)
        x[0, 0] = 9.0
        assert m.x[0, 0] == 0.0

    def test_mismatched_shapes_raise(self):
        with pytest.raises(DimensionError, match="z"):
            Mesh(np.zeros((2, 2)), np.zeros((2, 2)), np.zeros((2, 3)))

    def test_not_a_matrix_raises(self):
        with pytest.raises(DimensionError, match="x"):
            Mesh(np.zeros(4), np.zeros(4), np.zeros(4))

    def test_equality(self):
        assert _mesh() == _mesh()
        other = Mesh(np.ones((2, 3)), np.ones((2, 3)), np.ones((2, 3)))
        assert _mesh() != other

    def test_repr(self):
        assert repr(_mesh()) == "Mesh(shape=(2, 3))"
