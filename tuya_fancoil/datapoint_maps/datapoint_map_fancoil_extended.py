"""
Data points of the TYBAC-006 fan-coil thermostat.

Adds "fan only" as thermostat mode 2 and exposes the settings and limits the
basic map leaves out. Weekly schedules (dp 106-112) are not mapped.
"""
from ..const import (
    CAP_CHILD_LOCK,
    CAP_ECO_MODE,
    CAP_MANUAL_MODE,
    CAP_MAX_TEMPERATURE,
    CAP_MAX_TEMPERATURE_LIMIT,
    CAP_MIN_TEMPERATURE,
    CAP_MIN_TEMPERATURE_LIMIT,
    CAP_THERMOSTAT_MODE,
    MODE_COOL,
    MODE_FAN_ONLY,
    MODE_HEAT,
    MODE_OFF,
    SETTING_DEADZONE_TEMPERATURE,
    SETTING_TEMPERATURE_CALIBRATION,
    DataPointId,
    ValueKind,
)

DATAPOINT_MAP = {
    "model": "TYBAC-006",
    "thermostatMode": {
        "dp": DataPointId.THERMOSTAT_MODE,
        "capability": CAP_THERMOSTAT_MODE,
        "kind": ValueKind.ENUM,
        "convert": "lookup",
        "values": {0: MODE_COOL, 1: MODE_HEAT, 2: MODE_FAN_ONLY},
        "fallback": MODE_OFF,
        "encode_fallback": 2,
        "writable": True,
        "fan_speed_input": True,
    },
    "ecoMode": {
        "dp": DataPointId.ECO_MODE,
        "capability": CAP_ECO_MODE,
        "kind": ValueKind.BOOL,
        "convert": "bool",
        "writable": True,
        "fan_speed_input": False,
    },
    "maxTemperature": {
        "dp": DataPointId.MAX_TEMPERATURE,
        "capability": CAP_MAX_TEMPERATURE,
        "kind": ValueKind.VALUE,
        "convert": "decidegree",
        "writable": False,
        "fan_speed_input": False,
    },
    "minTemperature": {
        "dp": DataPointId.MIN_TEMPERATURE,
        "capability": CAP_MIN_TEMPERATURE,
        "kind": ValueKind.VALUE,
        "convert": "decidegree",
        "writable": False,
        "fan_speed_input": False,
    },
    "temperatureCalibration": {
        "dp": DataPointId.TEMPERATURE_CALIBRATION,
        "capability": SETTING_TEMPERATURE_CALIBRATION,
        "kind": ValueKind.VALUE,
        "convert": "raw",
        "writable": True,
        "setting": True,
        "fan_speed_input": False,
    },
    "childLock": {
        "dp": DataPointId.CHILD_LOCK,
        "capability": CAP_CHILD_LOCK,
        "kind": ValueKind.BOOL,
        "convert": "bool",
        "writable": True,
        "fan_speed_input": False,
    },
    "manualMode": {
        "dp": DataPointId.MANUAL_MODE,
        "capability": CAP_MANUAL_MODE,
        "kind": ValueKind.BOOL,
        "convert": "bool",
        "writable": False,
        "fan_speed_input": False,
    },
    "deadzoneTemperature": {
        "dp": DataPointId.DEADZONE_TEMPERATURE,
        "capability": SETTING_DEADZONE_TEMPERATURE,
        "kind": ValueKind.VALUE,
        "convert": "raw",
        "writable": True,
        "setting": True,
        "fan_speed_input": False,
    },
    "minTemperatureLimit": {
        "dp": DataPointId.MIN_TEMPERATURE_LIMIT,
        "capability": CAP_MIN_TEMPERATURE_LIMIT,
        "kind": ValueKind.VALUE,
        "convert": "decidegree",
        "writable": False,
        "fan_speed_input": False,
    },
    "maxTemperatureLimit": {
        "dp": DataPointId.MAX_TEMPERATURE_LIMIT,
        "capability": CAP_MAX_TEMPERATURE_LIMIT,
        "kind": ValueKind.VALUE,
        "convert": "decidegree",
        "writable": False,
        "fan_speed_input": False,
    },
}
