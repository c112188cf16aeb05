import logging

import pytest

from tuya_fancoil import DataPointId, DataPointMapManager, ValueKind, supported_models
from tuya_fancoil.datapoint_maps.datapoint_map_manager import MODEL_MAPS


@pytest.fixture
def basic_manager():
    return DataPointMapManager("fancoil")


@pytest.fixture
def extended_manager():
    return DataPointMapManager("TYBAC-006")


def test_supported_models_excludes_default():
    assert supported_models() == ["TYBAC-006", "fancoil"]


def test_every_model_map_loads():
    for model in MODEL_MAPS:
        manager = DataPointMapManager(model)
        assert manager.get_all_datapoints(), f"no data points for {model}"


def test_basic_map_contents(basic_manager):
    assert set(basic_manager.get_all_datapoints()) == {
        "onOff",
        "targetTemperature",
        "currentTemperature",
        "thermostatMode",
        "fanMode",
        "valveStatus",
    }
    # the "model" marker is not a data point
    assert "model" not in basic_manager.get_all_datapoints()


def test_extended_map_overrides_thermostat_mode(extended_manager):
    entry = extended_manager.get_by_dp(DataPointId.THERMOSTAT_MODE)
    assert entry["values"][2] == "fan_only"
    assert extended_manager.map_names[-1] == "datapoint_map_fancoil_extended"


def test_lookup_by_plain_int_and_capability(extended_manager):
    assert extended_manager.get_by_dp(40)["capability"] == "child_lock"
    assert extended_manager.get_by_capability("child_lock")["kind"] is ValueKind.BOOL
    assert extended_manager.get_by_dp(9999) is None
    assert extended_manager.get_by_capability("fan_speed") is None


def test_fan_speed_inputs(basic_manager):
    assert sorted(basic_manager.get_fan_speed_inputs()) == [
        "fan_mode",
        "measure_temperature",
        "target_temperature",
        "thermostat_mode",
        "valve_status",
    ]


def test_capability_values(basic_manager, extended_manager):
    assert basic_manager.get_capability_values("thermostat_mode") == ["cool", "heat"]
    assert extended_manager.get_capability_values("thermostat_mode") == [
        "cool",
        "heat",
        "fan_only",
    ]
    assert basic_manager.get_capability_values("target_temperature") == []


def test_settable_values(basic_manager, extended_manager):
    assert basic_manager.get_settable_values("thermostat_mode") == ["cool", "heat", "off"]
    # "off" would be sent as ordinal 2, which is fan only on this model
    assert extended_manager.get_settable_values("thermostat_mode") == [
        "cool",
        "heat",
        "fan_only",
    ]
    assert basic_manager.get_settable_values("fan_mode") == ["low", "medium", "high", "auto"]
    assert basic_manager.get_settable_values("target_temperature") == []


def test_valve_polarity_is_explicit(basic_manager):
    entry = basic_manager.get_by_capability("valve_status")
    assert entry["values"] == {0: "open", 1: "closed"}


def test_unknown_model_falls_back_to_default(caplog):
    with caplog.at_level(logging.WARNING):
        manager = DataPointMapManager("TS0601")
    assert manager.model_id == "TS0601"
    assert manager.map_names == MODEL_MAPS["default"]
    assert "No data point map for model TS0601" in caplog.text


def test_map_names_are_copies(basic_manager):
    basic_manager.map_names.append("bogus")
    assert "bogus" not in MODEL_MAPS["fancoil"]


def test_merged_map_is_independent_of_module(basic_manager):
    basic_manager.get_all_datapoints()["fanMode"]["values"][0] = "changed"
    assert DataPointMapManager("fancoil").get_by_dp(28)["values"][0] == "low"
