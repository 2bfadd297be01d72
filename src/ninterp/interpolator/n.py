"""N-dimensional interpolation on the generic corner path."""

from ninterp.core.extrapolate import Resolved
from ninterp.interpolator.grid import GridInterpolator


class InterpND(GridInterpolator):
    """
    Interpolator of any dimensionality, including 0.

    Takes the same arguments as
    :class:`~ninterp.interpolator.grid.GridInterpolator`. Queries go
    through :meth:`Strategy.interpolate_nd`, which for the built-in
    strategies loops over the ``2^N`` cell corners instead of using the
    1/2/3-D kernels.

    Examples
    --------
    >>> interp = InterpND([[0.0, 1.0], [0.0, 1.0]], [[0.0, 1.0], [1.0, 2.0]])
    >>> interp.interpolate([0.5, 0.5])
    1.0
    """

    def _evaluate(self, resolved: Resolved) -> float:
        return self._strategy.interpolate_nd(resolved.point, resolved.brackets, self._data)
