"""0-dimensional (constant) interpolation."""

from typing import Sequence

from ninterp.core.errors import PointLengthMismatchError
from ninterp.interpolator.base import Interpolator


class Interp0D(Interpolator):
    """
    Constant-value interpolator.

    Lets a constant sit alongside 1/2/3/N-D interpolators behind the
    :class:`Interpolator` interface. Queries take an empty point.

    Parameters
    ----------
    value : float
        Value returned by every query.

    Examples
    --------
    >>> Interp0D(0.5).interpolate([])
    0.5
    """

    def __init__(self, value: float):
        self.value = float(value)

    def ndim(self) -> int:
        return 0

    def validate(self) -> None:
        """Nothing to check."""

    def interpolate(self, point: Sequence[float]) -> float:
        if len(point) != 0:
            raise PointLengthMismatchError(0, len(point))
        return self.value

    def set_strategy(self, strategy) -> None:
        """Ignored: a constant has no strategy."""

    def set_extrapolate(self, extrapolate) -> None:
        """Ignored: a constant is never out of range."""

    def __eq__(self, other) -> bool:
        if not isinstance(other, Interp0D):
            return NotImplemented
        return self.value == other.value

    __hash__ = None

    def __repr__(self) -> str:
        return f"Interp0D({self.value!r})"
