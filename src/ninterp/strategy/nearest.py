"""
Single-corner strategies.

Each picks one endpoint of the bracketing segment per axis and returns
the stored value at the resulting grid vertex:

* :class:`Nearest`: the closer endpoint, the lower one on a tie,
* :class:`LeftNearest`: the lower endpoint,
* :class:`RightNearest`: the upper endpoint.

A query exactly on a grid vertex returns that vertex's value for all
three. Selected indices are clamped to the axis.
"""

from ninterp.strategy.base import Strategy


def _clip(index: int, n: int) -> int:
    return min(max(index, 0), n - 1)


class _VertexStrategy(Strategy):
    """Shared lookup; subclasses choose the endpoint on each axis."""

    def choose(self, index: int, offset: float) -> int:
        raise NotImplementedError

    def interpolate(self, point, brackets, data):
        f = data.values
        if f.ndim == 0:
            return float(f[()])
        vertex = tuple(
            _clip(self.choose(b.index, b.offset), n) if n > 1 else 0
            for b, n in zip(brackets, f.shape)
        )
        return float(f[vertex])


class Nearest(_VertexStrategy):
    """Nearest grid vertex; a point halfway along a segment takes the lower endpoint."""

    tag = "nearest"

    def choose(self, index, offset):
        return index if offset <= 0.5 else index + 1


class LeftNearest(_VertexStrategy):
    """Lower endpoint of the bracketing segment."""

    tag = "left_nearest"

    def choose(self, index, offset):
        # only the last coordinate of an axis reports t == 1
        return index + 1 if offset >= 1.0 else index


class RightNearest(_VertexStrategy):
    """Upper endpoint of the bracketing segment."""

    tag = "right_nearest"

    def choose(self, index, offset):
        return index if offset <= 0.0 else index + 1
