"""Grid data model, bracketing search, extrapolation policy and errors."""

# Import modules themselves (allows: from ninterp.core import locator)
from . import logger
from . import errors
from . import locator
from . import data
from . import extrapolate

__all__ = [
    "logger",
    "errors",
    "locator",
    "data",
    "extrapolate",
]
