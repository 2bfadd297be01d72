"""
Strategy interface.

A strategy turns a located query point into a value. The interpolator
locates every coordinate, applies its extrapolate policy, then hands the
strategy:

* ``point``: the effective coordinates (after clamping or wrapping),
* ``brackets``: one :class:`~ninterp.core.locator.Bracket` per axis,
* ``data``: the validated :class:`~ninterp.core.data.InterpData`.

Subclass :class:`Strategy` to plug in custom behavior. Custom strategies
have no ``tag`` and cannot be serialized.
"""

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from ninterp.core.data import InterpData
from ninterp.core.locator import Bracket


class Strategy(ABC):
    """
    Base class of interpolation strategies.

    Attributes
    ----------
    tag : str or None
        Serialization tag of built-in strategies; None for custom ones.
    allow_extrapolate : bool
        True if :meth:`interpolate` handles offsets outside ``[0, 1]``.
        Only such strategies may be paired with ``Extrapolate.ENABLE``.
    """

    tag: Optional[str] = None
    allow_extrapolate: bool = False

    def init(self, data: InterpData) -> None:
        """Hook run when the strategy is bound to *data* or the data is re-validated."""

    @abstractmethod
    def interpolate(self, point: Sequence[float], brackets: Sequence[Bracket], data: InterpData) -> float:
        """Evaluate at *point* on the dimension-specialized path."""

    def interpolate_nd(self, point: Sequence[float], brackets: Sequence[Bracket], data: InterpData) -> float:
        """Evaluate at *point* on the generic N-dimensional path."""
        return self.interpolate(point, brackets, data)

    def __eq__(self, other) -> bool:
        if type(self) is not type(other):
            return NotImplemented
        if self.tag is None:
            return self is other
        return True

    def __hash__(self) -> int:
        if self.tag is None:
            return id(self)
        return hash(type(self))

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
