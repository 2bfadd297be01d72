"""
Structured records of interpolators.

A record is a plain ``dict`` of lists, strings and floats:

.. code-block:: python

    {
        "type": "Interp2D",
        "grid": [[0.0, 1.0], [0.0, 1.0]],
        "values": [[0.0, 1.0], [1.0, 2.0]],
        "strategy": "linear",
        "extrapolate": {"kind": "fill", "fill_value": 0.0},
    }

``Interp0D`` records hold ``{"type": "Interp0D", "value": ...}`` only.
Records are JSON-encoded by :func:`dumps` / :func:`loads`.

Only built-in strategies have a tag; interpolators with a custom strategy
cannot be recorded.
"""

import json
from typing import Any, Dict

import numpy as np

from ninterp.core.errors import SerializationError
from ninterp.core.extrapolate import Extrapolate, ExtrapolateKind
from ninterp.core.logger import get_logger
from ninterp.interpolator import GridInterpolator, Interp0D, Interp1D, Interp2D, Interp3D, Interpolator, InterpND
from ninterp.strategy import STRATEGIES

log = get_logger(__name__)

_GRID_TYPES = {cls.__name__: cls for cls in (Interp1D, Interp2D, Interp3D, InterpND)}


class JSONNumpyEncoder(json.JSONEncoder):
    """Encode numpy arrays and scalars as plain JSON lists and numbers."""

    def default(self, obj):
        if isinstance(obj, np.ndarray):
            return obj.tolist()
        if isinstance(obj, np.generic):
            return obj.item()
        return super().default(obj)


# ---------------------------------------------------------------------------
# Records
# ---------------------------------------------------------------------------

def to_record(interp: Interpolator) -> Dict[str, Any]:
    """
    Convert *interp* to a record.

    Raises
    ------
    SerializationError
        Custom strategy, or an interpolator type without a record form.
    """
    if isinstance(interp, Interp0D):
        return {"type": "Interp0D", "value": interp.value}
    if not isinstance(interp, GridInterpolator) or type(interp).__name__ not in _GRID_TYPES:
        raise SerializationError(f"cannot serialize {type(interp).__name__}")
    tag = interp.strategy.tag
    if tag is None or tag not in STRATEGIES:
        raise SerializationError(f"custom strategy {interp.strategy!r} cannot be serialized")
    ex = interp.extrapolate
    return {
        "type": type(interp).__name__,
        "grid": [axis.tolist() for axis in interp.grid],
        "values": interp.values.tolist(),
        "strategy": tag,
        "extrapolate": {"kind": ex.kind.value, "fill_value": ex.fill_value},
    }


def _extrapolate_from(record: Dict[str, Any]) -> Extrapolate:
    setting = record.get("extrapolate", {"kind": "error"})
    if isinstance(setting, str):
        setting = {"kind": setting}
    kind = ExtrapolateKind(setting["kind"])
    return Extrapolate(kind, setting.get("fill_value", float("nan")))


def from_record(record: Dict[str, Any], owned: bool = True) -> Interpolator:
    """
    Rebuild an interpolator from a record made by :func:`to_record`.

    The data is validated as on direct construction.

    Raises
    ------
    SerializationError
        Unknown type, strategy tag or extrapolate kind, or missing fields.
    ValidationError
        The recorded grid and values are not a valid dataset.
    """
    if not isinstance(record, dict):
        raise SerializationError(f"record must be a dict, got {type(record).__name__}")
    kind = record.get("type")
    if kind != "Interp0D" and kind not in _GRID_TYPES:
        raise SerializationError(f"unknown interpolator type {kind!r}")
    tag = record.get("strategy")
    if kind != "Interp0D" and tag not in STRATEGIES:
        raise SerializationError(f"unknown strategy tag {tag!r}")
    try:
        if kind == "Interp0D":
            return Interp0D(record["value"])
        extrapolate = _extrapolate_from(record)
        grid = [np.asarray(axis, dtype=np.float64) for axis in record["grid"]]
        values = np.asarray(record["values"], dtype=np.float64)
    except (KeyError, TypeError, ValueError) as exc:
        raise SerializationError(f"malformed {kind} record: {exc}") from exc
    cls = _GRID_TYPES[kind]
    log.debug("rebuilding %s from record", kind)
    if cls is InterpND:
        return InterpND(grid, values, strategy=tag, extrapolate=extrapolate, owned=owned)
    if len(grid) != cls.fixed_ndim:
        raise SerializationError(f"{kind} record needs {cls.fixed_ndim} axes, got {len(grid)}")
    return cls(*grid, values, strategy=tag, extrapolate=extrapolate, owned=owned)


# ---------------------------------------------------------------------------
# JSON
# ---------------------------------------------------------------------------

def dumps(interp: Interpolator, **kwargs) -> str:
    """JSON-encode the record of *interp*; *kwargs* go to :func:`json.dumps`."""
    return json.dumps(to_record(interp), cls=JSONNumpyEncoder, **kwargs)


def loads(text: str) -> Interpolator:
    """Decode JSON *text* and rebuild the interpolator."""
    try:
        record = json.loads(text)
    except json.JSONDecodeError as exc:
        raise SerializationError(f"invalid JSON record: {exc}") from exc
    return from_record(record)
