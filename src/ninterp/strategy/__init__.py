"""Interpolation strategies: Linear, Nearest, LeftNearest, RightNearest and custom ones."""

from . import kernels
from .base import Strategy
from .linear import Linear
from .nearest import LeftNearest, Nearest, RightNearest
from .registry import STRATEGIES, as_strategy

__all__ = [
    "kernels",
    "Strategy",
    "Linear",
    "Nearest",
    "LeftNearest",
    "RightNearest",
    "STRATEGIES",
    "as_strategy",
]
