"""
Tests for interpolator records and their JSON encoding.
"""
import json
import math

import numpy as np
import pytest

from ninterp import (
    Extrapolate,
    Interp0D,
    Interp1D,
    Interp2D,
    Interp3D,
    InterpND,
    SerializationError,
    Strategy,
    ValidationError,
)
from ninterp.serde import JSONNumpyEncoder, dumps, from_record, loads, to_record


class Half(Strategy):
    def interpolate(self, point, brackets, data):
        return 0.5


@pytest.fixture
def interp2d(unit_square):
    return Interp2D(*unit_square, strategy="nearest", extrapolate=Extrapolate.fill(-1.0))


class TestRecord:
    def test_fields(self, interp2d):
        record = to_record(interp2d)
        assert record == {
            "type": "Interp2D",
            "grid": [[0.0, 1.0], [0.0, 1.0]],
            "values": [[0.0, 1.0], [1.0, 2.0]],
            "strategy": "nearest",
            "extrapolate": {"kind": "fill", "fill_value": -1.0},
        }

    def test_zero_dim(self):
        assert to_record(Interp0D(0.5)) == {"type": "Interp0D", "value": 0.5}
        assert from_record({"type": "Interp0D", "value": 0.5}) == Interp0D(0.5)

    @pytest.mark.parametrize("strategy", ["linear", "nearest", "left_nearest", "right_nearest"])
    def test_strategies(self, scenario_a, strategy):
        interp = Interp1D(*scenario_a, strategy=strategy)
        restored = from_record(to_record(interp))
        assert restored == interp
        assert restored.interpolate([1.5]) == interp.interpolate([1.5])

    @pytest.mark.parametrize("extrapolate", [
        Extrapolate.error(),
        Extrapolate.fill(3.0),
        Extrapolate.clamp(),
        Extrapolate.wrap(),
        Extrapolate.enable(),
    ])
    def test_extrapolate_kinds(self, scenario_a, extrapolate):
        interp = Interp1D(*scenario_a, extrapolate=extrapolate)
        assert from_record(to_record(interp)).extrapolate == extrapolate

    def test_three_and_n_dims(self, grid3d, grid4d):
        for interp in (Interp3D(*grid3d[0], grid3d[1]), InterpND(*grid4d), InterpND([], 1.5)):
            restored = from_record(to_record(interp))
            assert type(restored) is type(interp)
            assert restored == interp

    def test_borrowed_restore(self, interp2d):
        assert not from_record(to_record(interp2d), owned=False).data.owned

    def test_custom_strategy(self, scenario_a):
        with pytest.raises(SerializationError, match="custom strategy"):
            to_record(Interp1D(*scenario_a, strategy=Half()))

    def test_not_an_interpolator(self):
        with pytest.raises(SerializationError):
            to_record(object())


class TestMalformed:
    @pytest.fixture
    def record(self, interp2d):
        return to_record(interp2d)

    def test_not_a_dict(self):
        with pytest.raises(SerializationError):
            from_record([1, 2])

    def test_unknown_type(self, record):
        record["type"] = "Interp7D"
        with pytest.raises(SerializationError, match="unknown interpolator type"):
            from_record(record)

    def test_unknown_strategy(self, record):
        record["strategy"] = "cubic"
        with pytest.raises(SerializationError, match="unknown strategy tag"):
            from_record(record)

    def test_unknown_extrapolate(self, record):
        record["extrapolate"] = {"kind": "mirror"}
        with pytest.raises(SerializationError):
            from_record(record)

    def test_missing_grid(self, record):
        del record["grid"]
        with pytest.raises(SerializationError, match="malformed"):
            from_record(record)

    def test_wrong_axis_count(self, record):
        record["grid"] = [[0.0, 1.0]]
        record["values"] = [0.0, 1.0]
        with pytest.raises(SerializationError, match="needs 2 axes"):
            from_record(record)

    def test_invalid_data(self, record):
        record["grid"][0] = [1.0, 0.0]
        with pytest.raises(ValidationError):
            from_record(record)


class TestJSON:
    def test_round_trip(self, interp2d):
        text = dumps(interp2d)
        assert json.loads(text)["type"] == "Interp2D"
        restored = loads(text)
        assert restored == interp2d
        assert restored.interpolate([5.0, 5.0]) == -1.0

    def test_nan_fill_value(self, scenario_a):
        interp = Interp1D(*scenario_a, extrapolate=Extrapolate.fill(math.nan))
        restored = loads(dumps(interp))
        assert math.isnan(restored.extrapolate.fill_value)
        assert restored == interp

    def test_kwargs_forwarded(self, interp2d):
        assert "\n" in dumps(interp2d, indent=2)

    def test_numpy_encoder(self):
        text = json.dumps({"a": np.arange(3.0), "b": np.int64(4)}, cls=JSONNumpyEncoder)
        assert json.loads(text) == {"a": [0.0, 1.0, 2.0], "b": 4}

    def test_invalid_json(self):
        with pytest.raises(SerializationError, match="invalid JSON"):
            loads("{not json")
