"""
Multilinear blend kernels.

The 1, 2 and 3-D kernels are ``numba``-compiled nested blends: a 2-D
query is two 1-D blends along x followed by one along y, a 3-D query two
2-D blends followed by one along z. The generic kernel evaluates the
same weighted sum over all ``2^N`` corners of the bracketing cell with
numpy and is used for N >= 4 and for the generic interpolator path.

Every kernel takes the per-axis segment index ``i`` and offset ``t`` from
:func:`ninterp.core.locator.locate`. Offsets outside ``[0, 1]`` give a
linear extension of the boundary cell. An axis of length 1 contributes a
single coordinate: its upper index equals its lower index.
"""

import itertools
from functools import lru_cache
from typing import Sequence

import numpy as np
from numba import njit

from ninterp.core.locator import Bracket


@njit(cache=True)
def _upper(n, i):
    if n > 1:
        return i + 1
    return i


@njit(cache=True)
def linear_1d(f, i, t):
    """
    Linear blend of a 1D array.

    Parameters
    ----------
    f : ndarray
        1D real array of grid values
    i : int
        Segment index along x
    t : float
        Fractional offset inside segment ``i``

    Returns
    -------
    float
        ``f[i] * (1 - t) + f[i+1] * t``
    """
    i1 = _upper(f.shape[0], i)
    return f[i] * (1.0 - t) + f[i1] * t


@njit(cache=True)
def linear_2d(f, i, ti, j, tj):
    """
    Bilinear blend of a 2D array.

    Parameters
    ----------
    f : ndarray
        2D real array of grid values, indexed ``f[x, y]``
    i, j : int
        Segment indices along x and y
    ti, tj : float
        Fractional offsets along x and y

    Returns
    -------
    float
        Interpolated value
    """
    i1 = _upper(f.shape[0], i)
    j1 = _upper(f.shape[1], j)
    f1 = f[i, j] * (1.0 - ti) + f[i1, j] * ti
    f2 = f[i, j1] * (1.0 - ti) + f[i1, j1] * ti
    return f1 * (1.0 - tj) + f2 * tj


@njit(cache=True)
def linear_3d(f, i, ti, j, tj, k, tk):
    """
    Trilinear blend of a 3D array.

    Parameters
    ----------
    f : ndarray
        3D real array of grid values, indexed ``f[x, y, z]``
    i, j, k : int
        Segment indices along x, y and z
    ti, tj, tk : float
        Fractional offsets along x, y and z

    Returns
    -------
    float
        Interpolated value
    """
    i1 = _upper(f.shape[0], i)
    j1 = _upper(f.shape[1], j)
    k1 = _upper(f.shape[2], k)
    c00 = f[i, j, k] * (1.0 - ti) + f[i1, j, k] * ti
    c10 = f[i, j1, k] * (1.0 - ti) + f[i1, j1, k] * ti
    c01 = f[i, j, k1] * (1.0 - ti) + f[i1, j, k1] * ti
    c11 = f[i, j1, k1] * (1.0 - ti) + f[i1, j1, k1] * ti
    f1 = c00 * (1.0 - tj) + c10 * tj
    f2 = c01 * (1.0 - tj) + c11 * tj
    return f1 * (1.0 - tk) + f2 * tk


@lru_cache(maxsize=None)
def corners(ndim: int) -> np.ndarray:
    """Boolean ``(2**ndim, ndim)`` table of cell corners; True selects the upper endpoint."""
    table = np.array(list(itertools.product((False, True), repeat=ndim)), dtype=bool)
    table = table.reshape(2**ndim, ndim)
    table.flags.writeable = False
    return table


def linear_nd(f: np.ndarray, brackets: Sequence[Bracket]) -> float:
    """
    Multilinear blend over every corner of the bracketing cell.

    Corner ``c`` gets weight ``prod_d (t_d if c_d else 1 - t_d)``.

    Parameters
    ----------
    f : ndarray
        N-dimensional array of grid values
    brackets : sequence of Bracket
        One ``(index, offset)`` pair per axis of *f*

    Returns
    -------
    float
        Interpolated value; the stored scalar for 0-D *f*
    """
    n = f.ndim
    if n == 0:
        return float(f[()])
    lo = np.fromiter((b.index for b in brackets), dtype=np.intp, count=n)
    t = np.fromiter((b.offset for b in brackets), dtype=np.float64, count=n)
    hi = np.minimum(lo + 1, np.asarray(f.shape, dtype=np.intp) - 1)
    table = corners(n)
    weights = np.prod(np.where(table, t, 1.0 - t), axis=1)
    index = np.where(table, hi, lo)
    return float(np.dot(weights, f[tuple(index.T)]))
