"""
Pick an interpolator class from the number of grid axes.
"""

from typing import Sequence

import numpy as np

from ninterp.core.errors import ShapeMismatchError
from ninterp.core.extrapolate import Extrapolate
from ninterp.interpolator.base import Interpolator
from ninterp.interpolator.n import InterpND
from ninterp.interpolator.one import Interp1D
from ninterp.interpolator.three import Interp3D
from ninterp.interpolator.two import Interp2D
from ninterp.interpolator.zero import Interp0D
from ninterp.strategy import Linear


def make_interpolator(grid: Sequence, values, strategy=Linear, extrapolate=Extrapolate(), owned: bool = True) -> Interpolator:
    """
    Build the interpolator matching ``len(grid)``.

    ======  ===========
    axes    class
    ======  ===========
    0       Interp0D
    1       Interp1D
    2       Interp2D
    3       Interp3D
    >= 4    InterpND
    ======  ===========

    For 0 axes *values* must hold a single element and the strategy and
    extrapolate arguments are ignored.

    Raises
    ------
    ShapeMismatchError
        0 axes with more or fewer than one value.
    """
    grid = list(grid)
    n = len(grid)
    if n == 0:
        arr = np.asarray(values, dtype=np.float64)
        if arr.size != 1:
            raise ShapeMismatchError(f"0-D data requires a single value, got values of shape {arr.shape}")
        return Interp0D(arr.reshape(())[()])
    kwargs = dict(strategy=strategy, extrapolate=extrapolate, owned=owned)
    if n == 1:
        return Interp1D(grid[0], values, **kwargs)
    if n == 2:
        return Interp2D(grid[0], grid[1], values, **kwargs)
    if n == 3:
        return Interp3D(grid[0], grid[1], grid[2], values, **kwargs)
    return InterpND(grid, values, **kwargs)
