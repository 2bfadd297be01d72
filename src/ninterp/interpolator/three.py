"""3-dimensional interpolation."""

import numpy as np

from ninterp.core.extrapolate import Extrapolate
from ninterp.interpolator.grid import GridInterpolator
from ninterp.strategy import Linear


class Interp3D(GridInterpolator):
    """
    Interpolator over samples ``f_xyz[i, j, k] = f(x[i], y[j], z[k])``.

    Parameters
    ----------
    x, y, z : array_like
        Strictly increasing coordinates.
    f_xyz : array_like
        3D values of shape ``(len(x), len(y), len(z))``.
    strategy, extrapolate, owned
        See :class:`~ninterp.interpolator.grid.GridInterpolator`.
    """

    fixed_ndim = 3

    def __init__(self, x, y, z, f_xyz, strategy=Linear, extrapolate=Extrapolate(), owned: bool = True):
        super().__init__([x, y, z], f_xyz, strategy=strategy, extrapolate=extrapolate, owned=owned)

    @property
    def x(self) -> np.ndarray:
        return self._data.axis(0)

    @property
    def y(self) -> np.ndarray:
        return self._data.axis(1)

    @property
    def z(self) -> np.ndarray:
        return self._data.axis(2)
