"""Tests for surfgeom.scenes."""

import numpy as np
import numpy.testing as npt

from surfgeom import Mesh
from surfgeom.scenes import aligned_cylinders, cap_and_cup, superquadric_gallery


class TestAlignedCylinders:
    def test_labels_and_shapes(self):
        scene = aligned_cylinders(radius=0.05, ndiv_axis=2, ndiv_perimeter=10)
        assert list(scene) == ["x", "y", "z", "xy", "yz", "xz", "xyz"]
        for mesh in scene.values():
            assert isinstance(mesh, Mesh)
            assert mesh.shape == (11, 3)

    def test_cylinders_start_at_origin(self):
        for mesh in aligned_cylinders().values():
            centre = mesh.points()[:-1, 0].mean(axis=0)
            npt.assert_allclose(centre, 0.0, atol=1e-14)


class TestSuperquadricGallery:
    def test_four_solids(self):
        scene = superquadric_gallery(n_alpha=8, n_theta=4)
        assert set(scene) == {"star", "pyramid", "cube", "sphere"}
        for mesh in scene.values():
            assert mesh.shape == (9, 5)

    def test_sphere_centre(self):
        sphere = superquadric_gallery(n_alpha=8, n_theta=4)["sphere"]
        (xlo, xhi), (ylo, yhi), (zlo, zhi) = sphere.bounds()
        npt.assert_allclose([zlo, zhi], [0.0, 2.0], atol=1e-14)


class TestCapAndCup:
    def test_cap_mirrors_cup(self):
        scene = cap_and_cup(center=(0.0, 0.0, 0.0), r=1.0, n=4)
        npt.assert_array_equal(scene["cap"].x, scene["cup"].x)
        npt.assert_array_equal(scene["cap"].z, -scene["cup"].z)
        assert scene["plane"].shape == (4, 4)

    def test_default_centre(self):
        scene = cap_and_cup()
        assert np.isclose(scene["cap"].z.max(), -0.5)
        assert np.isclose(scene["cup"].z.min(), -1.5)
