"""Tests for surfgeom.frame."""

import numpy as np
import numpy.testing as npt
import pytest

from surfgeom import DegenerateAxis, DimensionError, Frame, SegmentTooShort, aligned_system

TOL = 1e-14


def _check_orthonormal(frame: Frame) -> None:
    e0, e1, e2 = frame
    for e in frame:
        npt.assert_allclose(np.linalg.norm(e), 1.0, atol=TOL)
    npt.assert_allclose(np.dot(e0, e1), 0.0, atol=TOL)
    npt.assert_allclose(np.dot(e1, e2), 0.0, atol=TOL)
    npt.assert_allclose(np.dot(e0, e2), 0.0, atol=TOL)
    npt.assert_allclose(np.cross(e0, e1), e2, atol=TOL)


class TestAlignedSystem:
    def test_x_axis_gives_canonical_basis(self):
        e0, e1, e2 = aligned_system([-1.0, 0.0, 0.0], [8.0, 0.0, 0.0])
        npt.assert_allclose(e0, [1.0, 0.0, 0.0], atol=TOL)
        npt.assert_allclose(e1, [0.0, 1.0, 0.0], atol=TOL)
        npt.assert_allclose(e2, [0.0, 0.0, 1.0], atol=TOL)

    def test_negative_x_axis(self):
        frame = aligned_system([0.0, 0.0, 0.0], [-2.0, 0.0, 0.0])
        npt.assert_allclose(frame.e0, [-1.0, 0.0, 0.0], atol=TOL)
        _check_orthonormal(frame)

    @pytest.mark.parametrize(
        "a, b",
        [
            ([0.0, 0.0, 0.0], [0.0, 1.0, 0.0]),
            ([0.0, 0.0, 0.0], [0.0, 0.0, 1.0]),
            ([0.0, 0.0, 0.0], [1.0, 1.0, 1.0]),
            ([1.0, 2.0, 3.0], [-4.0, 0.5, 7.0]),
            ([0.0, 0.0, 0.0], [-1.0, -1.0, 0.0]),
            ([0.3, -0.2, 0.1], [0.3, -0.2, 5.0]),
        ],
    )
    def test_orthonormal_right_handed(self, a, b):
        frame = aligned_system(a, b)
        _check_orthonormal(frame)
        n = np.subtract(b, a)
        npt.assert_allclose(frame.e0, n / np.linalg.norm(n), atol=TOL)

    @pytest.mark.parametrize("t", [0.01, 0.5, 2.0, 1000.0])
    def test_e0_independent_of_scale(self, t):
        a = np.array([1.0, -2.0, 0.5])
        b = np.array([3.0, 1.0, -1.0])
        ref = aligned_system(a, b)
        scaled = aligned_system(a, a + t * (b - a))
        npt.assert_allclose(scaled.e0, ref.e0, atol=TOL)

    @pytest.mark.parametrize(
        "b",
        [
            [1000.0, 1e-10, 0.0],
            [7.0, 1e-12, 0.0],
            [1.0, 1e-9, 1e-9],
            [-3.0, 0.0, 2e-8],
            [1.0, 1e-7, 0.0],
        ],
    )
    def test_nearly_along_x_is_orthonormal(self, b):
        frame = aligned_system([0.0, 0.0, 0.0], b)
        _check_orthonormal(frame)
        npt.assert_allclose(frame.e0, np.array(b) / np.linalg.norm(b), atol=TOL)

    @pytest.mark.parametrize("scale", [1e-6, 1.0, 1e3, 1e8])
    @pytest.mark.parametrize("tilt", [1e-4, 1e-7, 1e-9, 1e-12, 1e-17])
    @pytest.mark.parametrize("axis", [0, 1, 2])
    def test_near_coordinate_axes(self, axis, tilt, scale):
        n = np.full(3, tilt)
        n[axis] = 1.0
        frame = aligned_system([0.5, -0.25, 2.0], np.array([0.5, -0.25, 2.0]) + scale * n)
        _check_orthonormal(frame)

    def test_coincident_points_raise(self):
        with pytest.raises(SegmentTooShort, match="a-to-b segment is too short"):
            aligned_system([1.0, 1.0, 1.0], [1.0, 1.0, 1.0])

    def test_segment_too_short_is_degenerate_axis(self):
        with pytest.raises(DegenerateAxis):
            aligned_system([0.0, 0.0, 0.0], [1e-9, 0.0, 0.0])

    def test_error_payload(self):
        with pytest.raises(SegmentTooShort) as info:
            aligned_system([0.0, 0.0, 0.0], [0.0, 0.0, 0.0])
        assert info.value.length_squared == 0.0

    def test_wrong_dimension(self):
        with pytest.raises(DimensionError, match="a must have exactly 3 components"):
            aligned_system([0.0, 0.0], [1.0, 0.0, 0.0])
        with pytest.raises(DimensionError, match="b must have exactly 3 components"):
            aligned_system([0.0, 0.0, 0.0], [1.0, 0.0, 0.0, 0.0])


class TestFrame:
    def test_as_matrix_is_rotation(self):
        m = aligned_system([0.0, 0.0, 0.0], [1.0, 2.0, 3.0]).as_matrix()
        npt.assert_allclose(m.T @ m, np.eye(3), atol=TOL)
        npt.assert_allclose(np.linalg.det(m), 1.0, atol=1e-12)

    def test_to_world(self):
        frame = aligned_system([-1.0, 0.0, 0.0], [8.0, 0.0, 0.0])
        p = frame.to_world([1.0, 1.0, 1.0], 2.0, 3.0, 4.0)
        npt.assert_allclose(p, [3.0, 4.0, 5.0], atol=TOL)

    def test_to_world_broadcasts(self):
        frame = aligned_system([0.0, 0.0, 0.0], [0.0, 0.0, 1.0])
        u = np.zeros((2, 3))
        p = frame.to_world([0.0, 0.0, 0.0], u, 1.0, 0.0)
        assert p.shape == (2, 3, 3)
