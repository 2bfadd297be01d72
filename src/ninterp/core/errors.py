"""
Exception hierarchy for grid validation, configuration and queries.

Every exception derives from :class:`NinterpError`, so callers can catch
the whole family with one clause or pick out a single defect.

Validation errors carry the offending ``dimension``; out-of-range errors
carry every violating axis in ``violations``.
"""

from enum import Enum
from typing import NamedTuple, Sequence


class NinterpError(Exception):
    """Base class for all ninterp errors."""


# ---------------------------------------------------------------------------
# Data validation
# ---------------------------------------------------------------------------

class ValidationError(NinterpError, ValueError):
    """Grid axes and values violate a dataset invariant.

    Parameters
    ----------
    message : str
        Description of the defect.
    dimension : int, optional
        Index of the offending axis, or ``None`` when the defect is not
        tied to one axis.
    """

    def __init__(self, message: str, dimension: int | None = None):
        super().__init__(message)
        self.dimension = dimension


class ShapeMismatchError(ValidationError):
    """Axis count or axis length does not match the values array."""


class EmptyAxisError(ValidationError):
    """An axis has no coordinates."""


class NonMonotonicAxisError(ValidationError):
    """An axis is not sorted in increasing order (or holds NaN)."""


class DuplicateCoordinateError(ValidationError):
    """An axis repeats a coordinate."""


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------

class ConfigurationError(NinterpError, ValueError):
    """Strategy / extrapolate settings cannot be used together."""


class IncompatibleExtrapolateError(ConfigurationError):
    """Extrapolate.ENABLE paired with a strategy or grid that cannot extrapolate."""


class SerializationError(ConfigurationError):
    """Interpolator cannot be converted to or from a structured record."""


# ---------------------------------------------------------------------------
# Queries
# ---------------------------------------------------------------------------

class InterpError(NinterpError):
    """A query could not be evaluated."""


class PointLengthMismatchError(InterpError):
    """Query point length differs from the interpolator dimensionality."""

    def __init__(self, expected: int, got: int):
        super().__init__(
            f"supplied point should have length {expected} for {expected}-D "
            f"interpolation, got length {got}"
        )
        self.expected = expected
        self.got = got


class UnvalidatedError(InterpError):
    """Dataset was mutated and has not been re-validated."""

    def __init__(self, message: str = "interpolator data changed; call validate() before interpolating"):
        super().__init__(message)


class InvalidPointError(InterpError):
    """Query point holds a NaN coordinate, or an infinite one the policy cannot resolve."""


class Side(str, Enum):
    """Which end of an axis a coordinate fell beyond."""
    LOWER = "lower"
    UPPER = "upper"


class Violation(NamedTuple):
    """One out-of-range axis of a query point."""
    dimension: int
    side: Side
    value: float
    lower: float
    upper: float


class OutOfRangeError(InterpError):
    """Query point lies outside the grid and the policy is Extrapolate.ERROR.

    Attributes
    ----------
    violations : tuple of Violation
        Every axis that was out of range, in dimension order.
    dimension : int
        Dimension of the first violation.
    side : Side
        Side of the first violation.
    """

    def __init__(self, violations: Sequence[Violation]):
        violations = tuple(violations)
        lines = "".join(
            f"\n    point[{v.dimension}] = {v.value!r} is "
            f"{'below' if v.side is Side.LOWER else 'above'} "
            f"grid[{v.dimension}] range [{v.lower!r}, {v.upper!r}]"
            for v in violations
        )
        super().__init__(f"attempted to interpolate at point beyond grid data:{lines}")
        self.violations = violations
        self.dimension = violations[0].dimension
        self.side = violations[0].side
