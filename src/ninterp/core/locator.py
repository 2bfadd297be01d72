"""
Bracketing search on sorted coordinate axes.

For a query ``x`` the locator finds the segment ``[axis[i], axis[i+1]]``
holding it and the fractional offset ``t`` of ``x`` inside that segment.
Points beyond either end keep the boundary segment and report ``t < 0``
or ``t > 1`` so callers can detect (and optionally perform) extrapolation.
"""

from typing import NamedTuple, Sequence, Tuple

import numpy as np
from numba import njit


class Bracket(NamedTuple):
    """Segment index and fractional offset of one coordinate."""
    index: int
    offset: float


@njit(cache=True)
def locate(axis, x):
    """
    Find the bracketing segment of *x* on a strictly increasing axis.

    Finds the index i such that axis[i] <= x < axis[i+1] (0-based), with
    the last coordinate belonging to the last segment.

    Parameters
    ----------
    axis : ndarray
        Strictly increasing 1D float64 array, length >= 1
    x : float
        Value to locate

    Returns
    -------
    index : int
        Segment index in ``[0, len(axis) - 2]`` (0 for a length-1 axis)
    t : float
        ``(x - axis[i]) / (axis[i+1] - axis[i])``; outside ``[0, 1]``
        when *x* is outside the axis range, 0 for a length-1 axis

    Notes
    -----
    Binary search for the first coordinate strictly greater than *x*,
    then the segment index is clamped into the valid range.
    """
    n = axis.shape[0]
    if n < 2:
        return 0, 0.0
    lo = 0
    hi = n
    while lo < hi:
        mid = (lo + hi) // 2
        if axis[mid] <= x:
            lo = mid + 1
        else:
            hi = mid
    i = lo - 1
    if i < 0:
        i = 0
    elif i > n - 2:
        i = n - 2
    t = (x - axis[i]) / (axis[i + 1] - axis[i])
    return i, t


def locate_point(grid: Sequence[np.ndarray], point: Sequence[float]) -> Tuple[Bracket, ...]:
    """Locate every coordinate of *point* on the matching axis of *grid*."""
    return tuple(Bracket(*locate(axis, float(x))) for axis, x in zip(grid, point))
