"""
Interpolation over a validated rectilinear grid.

:class:`GridInterpolator` binds an :class:`~ninterp.core.data.InterpData`,
a :class:`~ninterp.strategy.Strategy` and an
:class:`~ninterp.core.extrapolate.Extrapolate` setting. A query runs:

1. point length check,
2. refusal while the data awaits re-validation,
3. per-axis location and extrapolate resolution,
4. strategy evaluation on the specialized or the generic path.

Subclasses fix the dimensionality and pick the evaluation path.
"""

from typing import Optional, Sequence, Tuple

import numpy as np

from ninterp.core.data import InterpData
from ninterp.core.errors import PointLengthMismatchError, ShapeMismatchError, UnvalidatedError
from ninterp.core.extrapolate import Extrapolate, ExtrapolateKind, Resolved, check_extrapolate, resolve
from ninterp.core.logger import get_logger
from ninterp.interpolator.base import Interpolator
from ninterp.strategy import Linear, Strategy, as_strategy

log = get_logger(__name__)


class GridInterpolator(Interpolator):
    """
    Interpolator over an N-dimensional rectilinear grid.

    Parameters
    ----------
    grid : sequence of array_like
        One strictly increasing coordinate array per dimension.
    values : array_like
        Values at every grid vertex, ``values.shape[d] == len(grid[d])``.
    strategy : Strategy, type or str
        Interpolation strategy (default :class:`~ninterp.strategy.Linear`).
    extrapolate : Extrapolate or str
        Out-of-range policy (default ERROR).
    owned : bool
        Copy the inputs (True) or borrow them (False).

    Raises
    ------
    ValidationError
        Grid or values violate a dataset invariant.
    IncompatibleExtrapolateError
        ENABLE paired with a strategy or grid that cannot extrapolate.
    """

    #: Fixed dimensionality, None for any
    fixed_ndim: Optional[int] = None

    def __init__(self, grid: Sequence, values, strategy=Linear, extrapolate=Extrapolate(), owned: bool = True):
        self._bind(InterpData(grid, values, owned=owned), as_strategy(strategy), Extrapolate.coerce(extrapolate))

    @classmethod
    def from_data(cls, data: InterpData, strategy=Linear, extrapolate=Extrapolate()) -> "GridInterpolator":
        """Build an interpolator around existing (validated) *data* without copying it."""
        interp = cls.__new__(cls)
        interp._bind(data, as_strategy(strategy), Extrapolate.coerce(extrapolate))
        return interp

    def _bind(self, data: InterpData, strategy: Strategy, extrapolate: Extrapolate) -> None:
        if self.fixed_ndim is not None and data.ndim != self.fixed_ndim:
            raise ShapeMismatchError(
                f"{type(self).__name__} requires {self.fixed_ndim}-D data, got {data.ndim}-D"
            )
        check_extrapolate(strategy, extrapolate, data)
        if data.is_valid:
            strategy.init(data)
        self._data = data
        self._strategy = strategy
        self._extrapolate = extrapolate
        log.debug("%s bound: %r, %r, %s", type(self).__name__, data, strategy, extrapolate.kind.value)

    # ---------------- Interpolator --------------------
    def ndim(self) -> int:
        return self._data.ndim

    def validate(self) -> None:
        """
        Re-validate the data, then the strategy / extrapolate pairing.

        Required after any edit made through :meth:`set_axis`,
        :meth:`set_values` or :meth:`set_value`.
        """
        self._data.validate()
        check_extrapolate(self._strategy, self._extrapolate, self._data)
        self._strategy.init(self._data)

    def interpolate(self, point: Sequence[float]) -> float:
        """
        Evaluate at *point*.

        Raises
        ------
        PointLengthMismatchError
            ``len(point) != ndim()``.
        UnvalidatedError
            The data was edited and :meth:`validate` has not run since.
        InvalidPointError
            A coordinate is NaN, or infinite under WRAP or ENABLE.
        OutOfRangeError
            Out-of-range point under ``Extrapolate.ERROR``.
        """
        n = self._data.ndim
        if len(point) != n:
            raise PointLengthMismatchError(n, len(point))
        if not self._data.is_valid:
            raise UnvalidatedError()
        resolved = resolve(self._data, point, self._extrapolate)
        if resolved.filled:
            return self._extrapolate.fill_value
        log.debug3("point %s -> brackets %s", resolved.point, resolved.brackets)
        return self._evaluate(resolved)

    def _evaluate(self, resolved: Resolved) -> float:
        return self._strategy.interpolate(resolved.point, resolved.brackets, self._data)

    def set_strategy(self, strategy) -> None:
        strategy = as_strategy(strategy)
        check_extrapolate(strategy, self._extrapolate, self._data)
        if self._data.is_valid:
            strategy.init(self._data)
        self._strategy = strategy
        log.debug("strategy set to %r", strategy)

    def set_extrapolate(self, extrapolate) -> None:
        extrapolate = Extrapolate.coerce(extrapolate)
        check_extrapolate(self._strategy, extrapolate, self._data)
        self._extrapolate = extrapolate
        log.debug("extrapolate set to %s", extrapolate.kind.value)

    # ---------------- Accessors --------------------
    @property
    def data(self) -> InterpData:
        return self._data

    @property
    def strategy(self) -> Strategy:
        return self._strategy

    @property
    def extrapolate(self) -> Extrapolate:
        return self._extrapolate

    @property
    def grid(self) -> Tuple[np.ndarray, ...]:
        return self._data.grid

    @property
    def values(self) -> np.ndarray:
        return self._data.values

    def set_axis(self, dim: int, axis) -> None:
        self._data.set_axis(dim, axis)

    def set_values(self, values) -> None:
        self._data.set_values(values)

    def set_value(self, index, value: float) -> None:
        self._data.set_value(index, value)

    # ---------------- Ownership --------------------
    def view(self) -> "GridInterpolator":
        """Same configuration over a borrowed view of this interpolator's data."""
        return self._with_data(self._data.view())

    def into_owned(self) -> "GridInterpolator":
        """Same configuration over an owned copy of this interpolator's data."""
        return self._with_data(self._data.into_owned())

    def _with_data(self, data: InterpData) -> "GridInterpolator":
        clone = type(self).__new__(type(self))
        clone._data = data
        clone._strategy = self._strategy
        clone._extrapolate = self._extrapolate
        return clone

    # ---------------- Dunder --------------------
    def __eq__(self, other) -> bool:
        if type(self) is not type(other):
            return NotImplemented
        return (
            self._data == other._data
            and self._strategy == other._strategy
            and self._extrapolate == other._extrapolate
        )

    __hash__ = None

    def __repr__(self) -> str:
        ex = self._extrapolate
        policy = f"fill({ex.fill_value!r})" if ex.kind is ExtrapolateKind.FILL else ex.kind.value
        return (
            f"{type(self).__name__}(shape={self._data.shape}, strategy={self._strategy!r}, "
            f"extrapolate={policy}, owned={self._data.owned})"
        )
