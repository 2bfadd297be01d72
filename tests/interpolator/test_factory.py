"""Tests for make_interpolator dispatch by number of grid axes."""
import numpy as np
import pytest

from ninterp import (
    Extrapolate,
    Interp0D,
    Interp1D,
    Interp2D,
    Interp3D,
    InterpND,
    Interpolator,
    Nearest,
    ShapeMismatchError,
    make_interpolator,
)


class TestMakeInterpolator:
    @pytest.mark.parametrize("ndim, cls", [
        (1, Interp1D),
        (2, Interp2D),
        (3, Interp3D),
        (4, InterpND),
        (5, InterpND),
    ])
    def test_dispatch(self, ndim, cls):
        grid = [np.array([0.0, 1.0])] * ndim
        interp = make_interpolator(grid, np.ones((2,) * ndim))
        assert type(interp) is cls
        assert interp.ndim() == ndim
        assert interp.interpolate([0.5] * ndim) == 1.0

    def test_zero_dim(self):
        interp = make_interpolator([], [0.5])
        assert type(interp) is Interp0D
        assert interp.interpolate([]) == 0.5

    def test_zero_dim_too_many_values(self):
        with pytest.raises(ShapeMismatchError):
            make_interpolator([], [0.5, 1.0])

    def test_passes_configuration(self, scenario_a):
        x, f = scenario_a
        interp = make_interpolator([x], f, strategy=Nearest(), extrapolate=Extrapolate.clamp(), owned=False)
        assert interp.strategy == Nearest()
        assert interp.extrapolate == Extrapolate.clamp()
        assert not interp.data.owned
        assert interp.interpolate([-5.0]) == 0.0

    def test_heterogeneous_collection(self, scenario_a, unit_square):
        interps = [
            make_interpolator([], 2.0),
            make_interpolator([scenario_a[0]], scenario_a[1]),
            make_interpolator(unit_square[:2], unit_square[2]),
        ]
        assert all(isinstance(i, Interpolator) for i in interps)
        results = [i.interpolate([0.5] * i.ndim()) for i in interps]
        assert results == [2.0, 0.5, 1.0]
