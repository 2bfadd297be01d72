"""
ninterp: interpolation on N-dimensional rectilinear grids.

Linear, nearest, left-nearest and right-nearest strategies (plus custom
ones) with configurable out-of-range behavior, specialized for 1, 2 and
3 dimensions and generic for any N.
"""

# Import main sub-packages
from . import core
from . import strategy
from . import interpolator
from . import serde

from .core.data import InterpData
from .core.errors import (
    ConfigurationError,
    DuplicateCoordinateError,
    EmptyAxisError,
    IncompatibleExtrapolateError,
    InterpError,
    InvalidPointError,
    NinterpError,
    NonMonotonicAxisError,
    OutOfRangeError,
    PointLengthMismatchError,
    SerializationError,
    ShapeMismatchError,
    UnvalidatedError,
    ValidationError,
)
from .core.extrapolate import Extrapolate, ExtrapolateKind
from .interpolator import (
    Interp0D,
    Interp1D,
    Interp2D,
    Interp3D,
    InterpND,
    Interpolator,
    make_interpolator,
)
from .strategy import LeftNearest, Linear, Nearest, RightNearest, Strategy

__version__ = "0.1.0"

__all__ = [
    "core",
    "strategy",
    "interpolator",
    "serde",
    "InterpData",
    "Extrapolate",
    "ExtrapolateKind",
    "Strategy",
    "Linear",
    "Nearest",
    "LeftNearest",
    "RightNearest",
    "Interpolator",
    "Interp0D",
    "Interp1D",
    "Interp2D",
    "Interp3D",
    "InterpND",
    "make_interpolator",
    "NinterpError",
    "ValidationError",
    "ShapeMismatchError",
    "EmptyAxisError",
    "NonMonotonicAxisError",
    "DuplicateCoordinateError",
    "ConfigurationError",
    "IncompatibleExtrapolateError",
    "SerializationError",
    "InterpError",
    "PointLengthMismatchError",
    "UnvalidatedError",
    "InvalidPointError",
    "OutOfRangeError",
]
