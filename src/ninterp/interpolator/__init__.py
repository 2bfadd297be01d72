"""Interpolator facade: 0/1/2/3-D specialized and N-D generic interpolators."""

from .base import Interpolator
from .grid import GridInterpolator
from .zero import Interp0D
from .one import Interp1D
from .two import Interp2D
from .three import Interp3D
from .n import InterpND
from .factory import make_interpolator

__all__ = [
    "Interpolator",
    "GridInterpolator",
    "Interp0D",
    "Interp1D",
    "Interp2D",
    "Interp3D",
    "InterpND",
    "make_interpolator",
]
