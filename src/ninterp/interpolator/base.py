"""
Capability shared by every interpolator.

Interpolators of different dimensionality (including the 0-D constant)
can be stored side by side and queried through this interface.
"""

from abc import ABC, abstractmethod
from typing import Sequence


class Interpolator(ABC):
    """Abstract interpolator: query, validation and configuration."""

    @abstractmethod
    def ndim(self) -> int:
        """Number of coordinates a query point must have."""

    @abstractmethod
    def validate(self) -> None:
        """Re-check the data and the strategy / extrapolate pairing."""

    @abstractmethod
    def interpolate(self, point: Sequence[float]) -> float:
        """Evaluate at *point*."""

    @abstractmethod
    def set_strategy(self, strategy) -> None:
        """Replace the strategy, rejecting an incompatible pairing."""

    @abstractmethod
    def set_extrapolate(self, extrapolate) -> None:
        """Replace the extrapolate setting, rejecting an incompatible pairing."""

    def __call__(self, point: Sequence[float]) -> float:
        return self.interpolate(point)
