"""Multilinear interpolation."""

from ninterp.core.logger import get_logger
from ninterp.strategy.base import Strategy
from ninterp.strategy.kernels import linear_1d, linear_2d, linear_3d, linear_nd

log = get_logger(__name__)


class Linear(Strategy):
    """
    Blend the ``2^N`` corners of the bracketing cell.

    Offsets outside ``[0, 1]`` are used as-is, extending the boundary
    cell linearly, so this is the strategy that supports
    ``Extrapolate.ENABLE``.

    Examples
    --------
    >>> from ninterp import Interp1D
    >>> Interp1D([0.0, 1.0, 2.0, 3.0], [0.0, 1.0, 4.0, 9.0]).interpolate([2.5])
    6.5
    """

    tag = "linear"
    allow_extrapolate = True

    def interpolate(self, point, brackets, data):
        f = data.values
        n = f.ndim
        if n == 1:
            (a,) = brackets
            return float(linear_1d(f, a.index, a.offset))
        if n == 2:
            a, b = brackets
            return float(linear_2d(f, a.index, a.offset, b.index, b.offset))
        if n == 3:
            a, b, c = brackets
            return float(linear_3d(f, a.index, a.offset, b.index, b.offset, c.index, c.offset))
        return linear_nd(f, brackets)

    def interpolate_nd(self, point, brackets, data):
        log.debug3("generic linear blend over %d axes", data.ndim)
        return linear_nd(data.values, brackets)
