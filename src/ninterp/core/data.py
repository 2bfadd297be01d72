"""
Rectilinear grid dataset.

An :class:`InterpData` holds one coordinate axis per dimension and an
N-dimensional array of values sampled at every lattice corner. The
dataset either owns its buffers (copies made at construction) or borrows
arrays kept alive by the caller; validation and interpolation are the
same in both cases.

The stored arrays are exposed read-only. Edits go through
:meth:`InterpData.set_axis`, :meth:`InterpData.set_values` and
:meth:`InterpData.set_value`, which clear the validity flag; queries are
refused until :meth:`InterpData.validate` succeeds again.
"""

from typing import Sequence, Tuple

import numpy as np

from ninterp.core.errors import (
    DuplicateCoordinateError,
    EmptyAxisError,
    NonMonotonicAxisError,
    ShapeMismatchError,
)
from ninterp.core.logger import get_logger

log = get_logger(__name__)

dp = np.float64


def _as_buffer(arr, owned: bool) -> np.ndarray:
    """Return a read-only float64 array, copied when *owned*."""
    if owned:
        out = np.array(arr, dtype=dp, copy=True)
    else:
        # A view keeps the caller's array writeable while ours is not.
        out = np.asarray(arr, dtype=dp).view()
    out.flags.writeable = False
    return out


class InterpData:
    """
    Validated coordinate grid and values for N-dimensional interpolation.

    Parameters
    ----------
    grid : sequence of array_like
        One 1D coordinate array per dimension, each strictly increasing.
        Empty for 0-dimensional data.
    values : array_like
        N-dimensional array with ``values.shape[d] == len(grid[d])``.
        For 0-dimensional data a scalar or single-element array.
    owned : bool
        Copy the inputs (True) or borrow them (False). Borrowing avoids a
        copy when the inputs are already float64 arrays; the caller keeps
        them alive and calls :meth:`validate` after editing them.

    Raises
    ------
    ValidationError
        The first failing check; see :meth:`validate`.
    """

    def __init__(self, grid: Sequence, values, owned: bool = True):
        self._owned = bool(owned)
        self._grid = [_as_buffer(g, owned) for g in grid]
        if not self._grid:
            values = np.asarray(values, dtype=dp)
            if values.size != 1:
                raise ShapeMismatchError(
                    f"0-D data requires a single value, got values of shape {values.shape}"
                )
            values = values.reshape(())
        self._values = _as_buffer(values, owned)
        self._valid = False
        self.validate()

    # ---------------- Validation --------------------
    def validate(self) -> None:
        """
        Check every dataset invariant and mark the data valid.

        Checks run in order: (a) shape (axis count and each axis length
        against the values array), (b) non-empty axes, (c) monotonicity,
        (d) uniqueness. The first failure is raised and the data stays
        invalid.

        Raises
        ------
        ShapeMismatchError, EmptyAxisError, NonMonotonicAxisError, DuplicateCoordinateError
        """
        self._valid = False
        n = len(self._grid)
        if self._values.ndim != n:
            raise ShapeMismatchError(
                f"grid has {n} axes but values array is {self._values.ndim}-D "
                f"(shape {self._values.shape})"
            )
        for dim, axis in enumerate(self._grid):
            if axis.ndim != 1:
                raise ShapeMismatchError(f"grid[{dim}] must be 1-D, got shape {axis.shape}", dim)
            if axis.shape[0] != self._values.shape[dim]:
                raise ShapeMismatchError(
                    f"grid[{dim}] has {axis.shape[0]} coordinates but values has "
                    f"{self._values.shape[dim]} entries along dim {dim}",
                    dim,
                )
        for dim, axis in enumerate(self._grid):
            if axis.shape[0] == 0:
                raise EmptyAxisError(f"supplied grid coordinates cannot be empty: dim {dim}", dim)
            if np.isnan(axis).any():
                raise NonMonotonicAxisError(f"grid[{dim}] contains NaN coordinates", dim)
            steps = np.diff(axis)
            if (steps < 0).any():
                i = int(np.flatnonzero(steps < 0)[0])
                raise NonMonotonicAxisError(
                    f"supplied coordinates must be sorted: dim {dim}, "
                    f"grid[{dim}][{i + 1}] = {axis[i + 1]!r} < grid[{dim}][{i}] = {axis[i]!r}",
                    dim,
                )
            if (steps == 0).any():
                i = int(np.flatnonzero(steps == 0)[0])
                raise DuplicateCoordinateError(
                    f"supplied coordinates must be non-repeating: dim {dim}, "
                    f"grid[{dim}][{i}] == grid[{dim}][{i + 1}] == {axis[i]!r}",
                    dim,
                )
        self._valid = True
        log.debug("validated %d-D data with shape %s", n, self._values.shape)

    @property
    def is_valid(self) -> bool:
        """True after a successful :meth:`validate` with no edit since."""
        return self._valid

    def _invalidate(self, what: str) -> None:
        self._valid = False
        log.debug("%s changed; data requires validation", what)

    # ---------------- Accessors --------------------
    @property
    def owned(self) -> bool:
        """True if the buffers were copied at construction."""
        return self._owned

    @property
    def ndim(self) -> int:
        """Number of dimensions (axes)."""
        return len(self._grid)

    @property
    def shape(self) -> Tuple[int, ...]:
        """Shape of the values array."""
        return self._values.shape

    @property
    def grid(self) -> Tuple[np.ndarray, ...]:
        """Read-only coordinate axes."""
        return tuple(self._grid)

    @property
    def values(self) -> np.ndarray:
        """Read-only values array."""
        return self._values

    @values.setter
    def values(self, values) -> None:
        self.set_values(values)

    def axis(self, dim: int) -> np.ndarray:
        """Read-only coordinate axis *dim*."""
        return self._grid[dim]

    def bounds(self, dim: int) -> Tuple[float, float]:
        """First and last coordinate of axis *dim*."""
        axis = self._grid[dim]
        return float(axis[0]), float(axis[-1])

    def set_axis(self, dim: int, axis) -> None:
        """Replace coordinate axis *dim*; the data must be re-validated."""
        self._grid[dim] = _as_buffer(axis, self._owned)
        self._invalidate(f"grid[{dim}]")

    def set_values(self, values) -> None:
        """Replace the values array; the data must be re-validated."""
        if not self._grid and np.size(values) == 1:
            values = np.asarray(values, dtype=dp).reshape(())
        self._values = _as_buffer(values, self._owned)
        self._invalidate("values")

    def set_value(self, index, value: float) -> None:
        """
        Replace a single stored value; the data must be re-validated.

        Owned data is edited in place. Borrowed data gets a private copy of
        the values array first so the caller's buffer is left untouched.
        """
        if self._owned:
            self._values.flags.writeable = True
            try:
                self._values[index] = value
            finally:
                self._values.flags.writeable = False
        else:
            log.debug("set_value on borrowed data copies the values array")
            values = np.array(self._values, dtype=dp, copy=True)
            values[index] = value
            values.flags.writeable = False
            self._values = values
        self._invalidate(f"values[{index}]")

    # ---------------- Ownership --------------------
    def view(self) -> "InterpData":
        """Return data borrowing this dataset's buffers."""
        return self._clone(owned=False)

    def into_owned(self) -> "InterpData":
        """Return data owning copies of this dataset's buffers."""
        return self._clone(owned=True)

    def _clone(self, owned: bool) -> "InterpData":
        clone = InterpData.__new__(InterpData)
        clone._owned = owned
        clone._grid = [_as_buffer(g, owned) for g in self._grid]
        clone._values = _as_buffer(self._values, owned)
        clone._valid = self._valid
        return clone

    # ---------------- Dunder --------------------
    def __eq__(self, other) -> bool:
        if not isinstance(other, InterpData):
            return NotImplemented
        return (
            len(self._grid) == len(other._grid)
            and all(np.array_equal(a, b) for a, b in zip(self._grid, other._grid))
            and np.array_equal(self._values, other._values)
        )

    def __repr__(self) -> str:
        kind = "owned" if self._owned else "borrowed"
        return f"InterpData(ndim={self.ndim}, shape={self.shape}, {kind}, valid={self._valid})"
