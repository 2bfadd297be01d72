"""
Lookup of built-in strategies by tag.
"""

from typing import Dict, Type

from ninterp.core.errors import ConfigurationError
from ninterp.strategy.base import Strategy
from ninterp.strategy.linear import Linear
from ninterp.strategy.nearest import LeftNearest, Nearest, RightNearest

STRATEGIES: Dict[str, Type[Strategy]] = {
    cls.tag: cls for cls in (Linear, Nearest, LeftNearest, RightNearest)
}


def as_strategy(obj) -> Strategy:
    """
    Normalize *obj* to a :class:`Strategy` instance.

    Parameters
    ----------
    obj : Strategy, type or str
        A strategy instance (returned as-is), a :class:`Strategy`
        subclass (instantiated without arguments) or the tag of a
        built-in strategy, e.g. ``"left_nearest"``.

    Raises
    ------
    ConfigurationError
        Unknown tag.
    TypeError
        *obj* is none of the above.
    """
    if isinstance(obj, Strategy):
        return obj
    if isinstance(obj, type) and issubclass(obj, Strategy):
        return obj()
    if isinstance(obj, str):
        try:
            return STRATEGIES[obj.lower()]()
        except KeyError:
            raise ConfigurationError(
                f"unknown strategy {obj!r}; expected one of {sorted(STRATEGIES)}"
            ) from None
    raise TypeError(f"expected a Strategy instance, subclass or tag, got {type(obj).__name__}")
