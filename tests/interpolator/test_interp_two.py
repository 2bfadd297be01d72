"""
Tests for Interp2D: the unit-square average of Scenario C, bilinear
extension, per-axis extrapolation and length-1 axes.
"""
import numpy as np
import pytest

from ninterp import (
    Extrapolate,
    IncompatibleExtrapolateError,
    Interp2D,
    InterpND,
    Linear,
    Nearest,
    OutOfRangeError,
    RightNearest,
    ShapeMismatchError,
)

RTOL = 1e-12
ATOL = 1e-12


class TestInterp2D:
    def test_unit_square_average(self, unit_square):
        interp = Interp2D(*unit_square, strategy=Linear(), extrapolate=Extrapolate.error())
        assert interp.interpolate([0.5, 0.5]) == 1.0

    def test_plane_exact(self, rng):
        x = np.sort(rng.uniform(0.0, 5.0, 7))
        y = np.sort(rng.uniform(-1.0, 1.0, 5))
        X, Y = np.meshgrid(x, y, indexing="ij")
        interp = Interp2D(x, y, 3.0 * X - 2.0 * Y + 1.0)
        for px, py in zip(rng.uniform(x[0], x[-1], 20), rng.uniform(y[0], y[-1], 20)):
            np.testing.assert_allclose(interp.interpolate([px, py]), 3.0 * px - 2.0 * py + 1.0, rtol=1e-10, atol=1e-10)

    def test_enable_extension(self):
        interp = Interp2D([0.0, 1.0], [0.0, 1.0], [[2.0, 4.0], [4.0, 16.0]], extrapolate=Extrapolate.enable())
        assert interp.interpolate([1.5, -0.5]) == -3.5

    def test_error_reports_both_axes(self, unit_square):
        interp = Interp2D(*unit_square)
        with pytest.raises(OutOfRangeError) as exc:
            interp.interpolate([2.0, -1.0])
        assert [(v.dimension, v.side.value) for v in exc.value.violations] == [(0, "upper"), (1, "lower")]

    def test_clamp_one_axis(self, unit_square):
        interp = Interp2D(*unit_square, extrapolate=Extrapolate.clamp())
        # x clamps to 1, y stays at 0.5
        assert interp.interpolate([5.0, 0.5]) == 1.5

    def test_fill_any_axis(self, unit_square):
        interp = Interp2D(*unit_square, extrapolate=Extrapolate.fill(99.0))
        assert interp.interpolate([0.5, 1.5]) == 99.0

    def test_nearest(self, unit_square):
        interp = Interp2D(*unit_square, strategy=Nearest())
        assert interp.interpolate([0.51, 0.49]) == 1.0
        interp.set_strategy(RightNearest())
        assert interp.interpolate([0.1, 0.1]) == 2.0

    def test_length_one_axis(self):
        interp = Interp2D([0.0, 1.0], [5.0], [[1.0], [3.0]])
        assert interp.interpolate([0.5, 5.0]) == 2.0
        with pytest.raises(OutOfRangeError):
            interp.interpolate([0.5, 6.0])
        interp.set_extrapolate(Extrapolate.clamp())
        assert interp.interpolate([0.5, 6.0]) == 2.0
        with pytest.raises(IncompatibleExtrapolateError):
            interp.set_extrapolate(Extrapolate.enable())

    def test_shape_mismatch(self):
        with pytest.raises(ShapeMismatchError):
            Interp2D([0.0, 1.0], [0.0, 1.0, 2.0], np.zeros((2, 2)))
        with pytest.raises(ShapeMismatchError):
            Interp2D([0.0, 1.0], [0.0, 1.0], np.zeros(2))

    def test_matches_generic(self, rng, random_points):
        x = np.sort(rng.uniform(0.0, 1.0, 6))
        y = np.sort(rng.uniform(0.0, 1.0, 4))
        f = rng.normal(size=(6, 4))
        special = Interp2D(x, y, f, extrapolate=Extrapolate.enable())
        generic = InterpND([x, y], f, extrapolate=Extrapolate.enable())
        for p in random_points([x, y], 50, margin=0.3):
            np.testing.assert_allclose(special.interpolate(p), generic.interpolate(p), rtol=RTOL, atol=ATOL)

    def test_axes(self, unit_square):
        interp = Interp2D(*unit_square)
        np.testing.assert_array_equal(interp.x, unit_square[0])
        np.testing.assert_array_equal(interp.y, unit_square[1])
        assert interp.ndim() == 2
