"""2-dimensional interpolation."""

import numpy as np

from ninterp.core.extrapolate import Extrapolate
from ninterp.interpolator.grid import GridInterpolator
from ninterp.strategy import Linear


class Interp2D(GridInterpolator):
    """
    Interpolator over samples ``f_xy[i, j] = f(x[i], y[j])``.

    Parameters
    ----------
    x, y : array_like
        Strictly increasing coordinates.
    f_xy : array_like
        2D values of shape ``(len(x), len(y))``.
    strategy, extrapolate, owned
        See :class:`~ninterp.interpolator.grid.GridInterpolator`.
    """

    fixed_ndim = 2

    def __init__(self, x, y, f_xy, strategy=Linear, extrapolate=Extrapolate(), owned: bool = True):
        super().__init__([x, y], f_xy, strategy=strategy, extrapolate=extrapolate, owned=owned)

    @property
    def x(self) -> np.ndarray:
        return self._data.axis(0)

    @property
    def y(self) -> np.ndarray:
        return self._data.axis(1)
