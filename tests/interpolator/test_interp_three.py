"""
Tests for Interp3D against scipy's RegularGridInterpolator and against
the generic N-D path.
"""
import numpy as np
import pytest
from scipy.interpolate import RegularGridInterpolator

from ninterp import Extrapolate, Interp3D, InterpND, Nearest, ShapeMismatchError

RTOL = 1e-12
ATOL = 1e-12


class TestInterp3D:
    def test_matches_scipy(self, grid3d, random_points):
        grid, values = grid3d
        interp = Interp3D(*grid, values)
        ref = RegularGridInterpolator(tuple(grid), values)
        points = random_points(grid, 100)
        got = [interp.interpolate(p) for p in points]
        np.testing.assert_allclose(got, ref(points), rtol=RTOL, atol=ATOL)

    def test_matches_generic(self, grid3d, random_points):
        grid, values = grid3d
        special = Interp3D(*grid, values, extrapolate=Extrapolate.enable())
        generic = InterpND(grid, values, extrapolate=Extrapolate.enable())
        for p in random_points(grid, 100, margin=0.2):
            np.testing.assert_allclose(special.interpolate(p), generic.interpolate(p), rtol=RTOL, atol=ATOL)

    def test_trilinear_function_exact(self):
        x = np.array([0.0, 0.5, 2.0])
        y = np.array([-1.0, 1.0])
        z = np.array([0.0, 1.0, 3.0, 4.0])
        X, Y, Z = np.meshgrid(x, y, z, indexing="ij")
        interp = Interp3D(x, y, z, X * Y * Z + X - Z)
        for p in [(0.25, 0.0, 0.5), (1.9, -0.3, 3.3), (2.0, 1.0, 4.0)]:
            expected = p[0] * p[1] * p[2] + p[0] - p[2]
            np.testing.assert_allclose(interp.interpolate(p), expected, rtol=1e-10, atol=1e-10)

    def test_nearest_matches_scipy(self, grid3d, random_points):
        grid, values = grid3d
        interp = Interp3D(*grid, values, strategy=Nearest())
        ref = RegularGridInterpolator(tuple(grid), values, method="nearest")
        points = random_points(grid, 100)
        np.testing.assert_array_equal([interp.interpolate(p) for p in points], ref(points))

    def test_wrong_ndim(self, grid3d):
        grid, values = grid3d
        with pytest.raises(ShapeMismatchError):
            Interp3D(*grid, values[..., 0])

    def test_axes(self, grid3d):
        grid, values = grid3d
        interp = Interp3D(*grid, values)
        np.testing.assert_array_equal(interp.z, grid[2])
        assert interp.values.shape == values.shape
