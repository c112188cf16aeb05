"""Constants for the Tuya fan-coil thermostat library."""
from __future__ import annotations

from enum import Enum, IntEnum
from typing import Final


class DataPointId(IntEnum):
    """Tuya data points exposed by the fan-coil thermostat firmware."""

    ON_OFF = 1
    THERMOSTAT_MODE = 2
    ECO_MODE = 4
    TARGET_TEMPERATURE = 16
    MAX_TEMPERATURE = 19
    CURRENT_TEMPERATURE = 24
    MIN_TEMPERATURE = 26
    TEMPERATURE_CALIBRATION = 27
    FAN_MODE = 28
    VALVE_STATUS = 36
    CHILD_LOCK = 40
    MANUAL_MODE = 101
    DEADZONE_TEMPERATURE = 103
    MIN_TEMPERATURE_LIMIT = 104
    MAX_TEMPERATURE_LIMIT = 105


class ValueKind(str, Enum):
    """Tuya data point value encodings."""

    BOOL = "bool"
    ENUM = "enum"
    VALUE = "value"


# Capabilities
CAP_ONOFF: Final = "onoff"
CAP_THERMOSTAT_MODE: Final = "thermostat_mode"
CAP_TARGET_TEMPERATURE: Final = "target_temperature"
CAP_MEASURE_TEMPERATURE: Final = "measure_temperature"
CAP_FAN_MODE: Final = "fan_mode"
CAP_VALVE_STATUS: Final = "valve_status"
CAP_FAN_SPEED: Final = "fan_speed"
CAP_ECO_MODE: Final = "eco_mode"
CAP_CHILD_LOCK: Final = "child_lock"
CAP_MANUAL_MODE: Final = "manual_mode"
CAP_MIN_TEMPERATURE: Final = "min_temperature"
CAP_MAX_TEMPERATURE: Final = "max_temperature"
CAP_MIN_TEMPERATURE_LIMIT: Final = "min_temperature_limit"
CAP_MAX_TEMPERATURE_LIMIT: Final = "max_temperature_limit"

# Settings
SETTING_TEMPERATURE_CALIBRATION: Final = "temperature_calibration"
SETTING_DEADZONE_TEMPERATURE: Final = "deadzone_temperature"

# Thermostat modes
MODE_COOL: Final = "cool"
MODE_HEAT: Final = "heat"
MODE_OFF: Final = "off"
MODE_FAN_ONLY: Final = "fan_only"

# Fan modes / speeds
FAN_OFF: Final = "off"
FAN_LOW: Final = "low"
FAN_MEDIUM: Final = "medium"
FAN_HIGH: Final = "high"
FAN_AUTO: Final = "auto"

FAN_MODES: Final = [FAN_LOW, FAN_MEDIUM, FAN_HIGH, FAN_AUTO]
FAN_SPEEDS: Final = [FAN_OFF, FAN_LOW, FAN_MEDIUM, FAN_HIGH]

# Valve states
VALVE_OPEN: Final = "open"
VALVE_CLOSED: Final = "closed"

# Decidegree scaling used by temperature data points
DECIDEGREE_FACTOR: Final = 10

# Temperature difference thresholds (decidegrees) for the auto fan speed buckets
FAN_SPEED_THRESHOLDS: Final = (
    (5, FAN_OFF),
    (15, FAN_LOW),
    (25, FAN_MEDIUM),
)

# Model ids
MODEL_DEFAULT: Final = "default"
MODEL_FANCOIL: Final = "fancoil"
MODEL_TYBAC_006: Final = "TYBAC-006"
