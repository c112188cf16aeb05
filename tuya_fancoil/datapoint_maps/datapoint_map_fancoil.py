"""Data points of the basic fan-coil thermostat firmware."""
from ..const import (
    CAP_FAN_MODE,
    CAP_THERMOSTAT_MODE,
    CAP_VALVE_STATUS,
    FAN_AUTO,
    FAN_HIGH,
    FAN_LOW,
    FAN_MEDIUM,
    MODE_COOL,
    MODE_HEAT,
    MODE_OFF,
    VALVE_CLOSED,
    VALVE_OPEN,
    DataPointId,
    ValueKind,
)

DATAPOINT_MAP = {
    "model": "fancoil",
    "thermostatMode": {
        "dp": DataPointId.THERMOSTAT_MODE,
        "capability": CAP_THERMOSTAT_MODE,
        "kind": ValueKind.ENUM,
        "convert": "lookup",
        "values": {0: MODE_COOL, 1: MODE_HEAT},
        "fallback": MODE_OFF,
        "encode_fallback": 2,
        "writable": True,
        "fan_speed_input": True,
    },
    "fanMode": {
        "dp": DataPointId.FAN_MODE,
        "capability": CAP_FAN_MODE,
        "kind": ValueKind.ENUM,
        "convert": "lookup",
        "values": {0: FAN_LOW, 1: FAN_MEDIUM, 2: FAN_HIGH, 3: FAN_AUTO},
        "fallback": FAN_AUTO,
        "encode_fallback": 3,
        "writable": True,
        "fan_speed_input": True,
    },
    "valveStatus": {
        "dp": DataPointId.VALVE_STATUS,
        "capability": CAP_VALVE_STATUS,
        "kind": ValueKind.ENUM,
        "convert": "lookup",
        # 0: relay on (valve open), 1: relay off (valve closed)
        "values": {0: VALVE_OPEN, 1: VALVE_CLOSED},
        "fallback": VALVE_OPEN,
        "writable": False,
        "fan_speed_input": True,
    },
}
