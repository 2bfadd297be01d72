"""1-dimensional interpolation."""

import numpy as np

from ninterp.core.extrapolate import Extrapolate
from ninterp.interpolator.grid import GridInterpolator
from ninterp.strategy import Linear


class Interp1D(GridInterpolator):
    """
    Interpolator over samples ``f_x[i] = f(x[i])``.

    Parameters
    ----------
    x : array_like
        Strictly increasing coordinates.
    f_x : array_like
        1D values, ``len(f_x) == len(x)``.
    strategy, extrapolate, owned
        See :class:`~ninterp.interpolator.grid.GridInterpolator`.

    Examples
    --------
    >>> interp = Interp1D([0.0, 1.0, 2.0], [0.0, 3.0, 6.0])
    >>> interp.interpolate([1.75])
    5.25
    >>> interp.set_strategy("nearest")
    >>> interp.interpolate([1.75])
    6.0
    """

    fixed_ndim = 1

    def __init__(self, x, f_x, strategy=Linear, extrapolate=Extrapolate(), owned: bool = True):
        super().__init__([x], f_x, strategy=strategy, extrapolate=extrapolate, owned=owned)

    @property
    def x(self) -> np.ndarray:
        return self._data.axis(0)
