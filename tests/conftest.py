# tests/conftest.py -- shared grids for the ninterp test suite
import numpy as np
import pytest


@pytest.fixture
def scenario_a():
    """axis=[0,1,2,3], values=[0,1,4,9] (samples of x**2)."""
    return np.array([0.0, 1.0, 2.0, 3.0]), np.array([0.0, 1.0, 4.0, 9.0])


@pytest.fixture
def unit_square():
    """x=[0,1], y=[0,1], values=[[0,1],[1,2]] (samples of x+y)."""
    return np.array([0.0, 1.0]), np.array([0.0, 1.0]), np.array([[0.0, 1.0], [1.0, 2.0]])


@pytest.fixture
def rng():
    return np.random.default_rng(0)


def _nonuniform_axis(rng, n, lo, hi):
    """Strictly increasing axis with both endpoints and random interior points."""
    inner = np.sort(rng.uniform(lo, hi, size=n - 2))
    return np.concatenate(([lo], inner, [hi]))


@pytest.fixture
def grid3d(rng):
    """Non-uniform 3-D grid with random values."""
    grid = [
        _nonuniform_axis(rng, 5, 0.0, 1.0),
        _nonuniform_axis(rng, 6, -2.0, 3.0),
        _nonuniform_axis(rng, 4, 10.0, 12.0),
    ]
    values = rng.normal(size=tuple(len(g) for g in grid))
    return grid, values


@pytest.fixture
def grid4d(rng):
    """Non-uniform 4-D grid with random values."""
    grid = [
        _nonuniform_axis(rng, 4, 0.0, 1.0),
        _nonuniform_axis(rng, 3, -1.0, 1.0),
        _nonuniform_axis(rng, 5, 0.0, 10.0),
        _nonuniform_axis(rng, 3, 2.0, 4.0),
    ]
    values = rng.normal(size=tuple(len(g) for g in grid))
    return grid, values


@pytest.fixture
def random_points(rng):
    """Draw *n* random points inside the grid box widened by *margin* of each span."""

    def draw(grid, n, margin=0.0):
        lo = np.array([g[0] for g in grid])
        hi = np.array([g[-1] for g in grid])
        span = hi - lo
        return rng.uniform(lo - margin * span, hi + margin * span, size=(n, len(grid)))

    return draw
