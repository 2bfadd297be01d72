"""
Extrapolation policy for query points beyond the grid.

Each axis of a query point is checked independently against
``[axis[0], axis[-1]]``; the interpolator-wide :class:`Extrapolate`
setting decides what happens to the out-of-range axes:

==========  =============================================================
ERROR       raise :class:`~ninterp.core.errors.OutOfRangeError`
FILL        return the configured fill value, skipping the strategy
CLAMP       snap the coordinate to the nearest axis boundary
WRAP        map the coordinate periodically into the axis range
ENABLE      keep the out-of-range offset (linear extension)
==========  =============================================================
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple, Sequence, Tuple

from ninterp.core.data import InterpData
from ninterp.core.errors import (
    IncompatibleExtrapolateError,
    InvalidPointError,
    OutOfRangeError,
    Side,
    Violation,
)
from ninterp.core.locator import Bracket, locate
from ninterp.core.logger import get_logger

log = get_logger(__name__)


class ExtrapolateKind(str, Enum):
    ERROR = "error"
    FILL = "fill"
    CLAMP = "clamp"
    WRAP = "wrap"
    ENABLE = "enable"


@dataclass(frozen=True)
class Extrapolate:
    """
    Out-of-range behavior of an interpolator.

    Attributes
    ----------
    kind : ExtrapolateKind
        Selected policy.
    fill_value : float
        Value returned for out-of-range points when ``kind`` is FILL;
        ignored otherwise.

    Examples
    --------
    >>> Extrapolate.clamp()
    Extrapolate(kind=<ExtrapolateKind.CLAMP: 'clamp'>, fill_value=nan)
    >>> Extrapolate.fill(0.0).fill_value
    0.0
    """
    kind: ExtrapolateKind = ExtrapolateKind.ERROR
    fill_value: float = math.nan

    def __post_init__(self):
        object.__setattr__(self, "kind", ExtrapolateKind(self.kind))
        object.__setattr__(self, "fill_value", float(self.fill_value))

    # ---------------- Constructors --------------------
    @classmethod
    def error(cls) -> "Extrapolate":
        return cls(ExtrapolateKind.ERROR)

    @classmethod
    def fill(cls, value: float) -> "Extrapolate":
        return cls(ExtrapolateKind.FILL, value)

    @classmethod
    def clamp(cls) -> "Extrapolate":
        return cls(ExtrapolateKind.CLAMP)

    @classmethod
    def wrap(cls) -> "Extrapolate":
        return cls(ExtrapolateKind.WRAP)

    @classmethod
    def enable(cls) -> "Extrapolate":
        return cls(ExtrapolateKind.ENABLE)

    @classmethod
    def coerce(cls, obj) -> "Extrapolate":
        """
        Normalize *obj* to an :class:`Extrapolate`.

        Accepts an :class:`Extrapolate`, an :class:`ExtrapolateKind`, a
        case-insensitive kind name (``"clamp"``), or ``None`` for the
        default (ERROR). FILL needs a value, so it can only be given as
        an :class:`Extrapolate` instance.
        """
        if obj is None:
            return cls()
        if isinstance(obj, Extrapolate):
            return obj
        if isinstance(obj, str) and not isinstance(obj, ExtrapolateKind):
            obj = obj.lower()
        kind = ExtrapolateKind(obj)
        if kind is ExtrapolateKind.FILL:
            raise ValueError("Extrapolate FILL requires a value; use Extrapolate.fill(value)")
        return cls(kind)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Extrapolate):
            return NotImplemented
        if self.kind is not other.kind:
            return False
        if self.kind is not ExtrapolateKind.FILL:
            return True
        # NaN fill values compare equal to each other.
        return self.fill_value == other.fill_value or (
            math.isnan(self.fill_value) and math.isnan(other.fill_value)
        )

    def __hash__(self) -> int:
        if self.kind is ExtrapolateKind.FILL and not math.isnan(self.fill_value):
            return hash((self.kind, self.fill_value))
        return hash(self.kind)


def wrap(x: float, lower: float, upper: float) -> float:
    """
    Wrap *x* periodically into ``[lower, upper)``.

    The period is the axis span ``upper - lower``; the two endpoints are
    identified, so ``upper`` itself maps to ``lower``. A zero span maps
    everything onto ``lower``.
    """
    span = upper - lower
    if span == 0.0:
        return lower
    out = lower + math.fmod(x - lower, span)
    if out < lower:
        out += span
    if out >= upper:
        out = lower
    return out


def check_extrapolate(strategy, extrapolate: Extrapolate, data: InterpData) -> None:
    """
    Check that *strategy* and *extrapolate* can be used together on *data*.

    Raises
    ------
    IncompatibleExtrapolateError
        ENABLE with a strategy that cannot extrapolate, or ENABLE with an
        axis of fewer than two coordinates.
    """
    if extrapolate.kind is not ExtrapolateKind.ENABLE:
        return
    if not getattr(strategy, "allow_extrapolate", False):
        raise IncompatibleExtrapolateError(
            f"Extrapolate.ENABLE is not applicable to strategy {strategy!r}; "
            f"only strategies that allow extrapolation (Linear) support it"
        )
    for dim, axis in enumerate(data.grid):
        if axis.shape[0] < 2:
            raise IncompatibleExtrapolateError(
                f"at least 2 data points are required for extrapolation: dim {dim}"
            )


class Resolved(NamedTuple):
    """Outcome of applying the extrapolate policy to a query point.

    ``filled`` is True when the query short-circuits to the fill value;
    ``point`` and ``brackets`` are empty in that case.
    """
    filled: bool
    point: Tuple[float, ...]
    brackets: Tuple[Bracket, ...]


def resolve(data: InterpData, point: Sequence[float], extrapolate: Extrapolate) -> Resolved:
    """
    Locate *point* on *data*, applying *extrapolate* to out-of-range axes.

    Parameters
    ----------
    data : InterpData
        Validated dataset.
    point : sequence of float
        Query point with ``len(point) == data.ndim``.
    extrapolate : Extrapolate
        Active policy.

    Returns
    -------
    Resolved
        Effective point and one :class:`Bracket` per axis, or
        ``filled=True`` under FILL when any axis is out of range.

    Raises
    ------
    InvalidPointError
        A coordinate is NaN, or infinite under WRAP or ENABLE.
    OutOfRangeError
        Under ERROR, listing every out-of-range axis.
    """
    coords = [float(x) for x in point]
    kind = extrapolate.kind
    for dim, x in enumerate(coords):
        if math.isnan(x):
            raise InvalidPointError(f"point[{dim}] is NaN")
        # no period or slope reaches an infinite coordinate
        if math.isinf(x) and kind in (ExtrapolateKind.WRAP, ExtrapolateKind.ENABLE):
            raise InvalidPointError(f"point[{dim}] = {x} cannot be resolved under {kind.value}")
    effective = []
    brackets = []
    violations = []
    for dim, (axis, x) in enumerate(zip(data.grid, coords)):
        lower = float(axis[0])
        upper = float(axis[-1])
        if lower <= x <= upper:
            effective.append(x)
            brackets.append(Bracket(*locate(axis, x)))
            continue
        side = Side.LOWER if x < lower else Side.UPPER
        if kind is ExtrapolateKind.FILL:
            log.debug3("point[%d] = %r out of range; filling", dim, x)
            return Resolved(True, (), ())
        if kind is ExtrapolateKind.ERROR:
            violations.append(Violation(dim, side, x, lower, upper))
            continue
        if kind is ExtrapolateKind.CLAMP:
            x = lower if side is Side.LOWER else upper
        elif kind is ExtrapolateKind.WRAP:
            x = wrap(x, lower, upper)
        effective.append(x)
        brackets.append(Bracket(*locate(axis, x)))
    if violations:
        raise OutOfRangeError(violations)
    return Resolved(False, tuple(effective), tuple(brackets))
