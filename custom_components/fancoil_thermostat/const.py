"""Constants for the Fan-Coil Thermostat integration."""
from __future__ import annotations

from typing import Final

from homeassistant.components.climate import HVACMode

from tuya_fancoil.const import (
    MODE_COOL,
    MODE_FAN_ONLY,
    MODE_HEAT,
    MODE_OFF,
)

# Domain
DOMAIN: Final = "fancoil_thermostat"

# Config entry keys
CONF_MODEL: Final = "model"
CONF_BASE_TOPIC: Final = "base_topic"
CONF_LOG_LEVEL: Final = "log_level"

DEFAULT_NAME: Final = "Fan-Coil Thermostat"
DEFAULT_BASE_TOPIC: Final = "tuya/fancoil"

# MQTT topics, relative to the base topic
TOPIC_DATAPOINT: Final = "{base}/datapoint"
TOPIC_DATAPOINT_SET: Final = "{base}/datapoint/set"

# Temperature range and precision
MIN_TEMP: Final = 5
MAX_TEMP: Final = 35
TEMP_STEP: Final = 0.5
PRECISION: Final = 0.1

# Platforms
PLATFORMS: Final = ["climate", "sensor", "binary_sensor", "switch", "number"]

# Thermostat mode mapping: device capability -> Home Assistant
HVAC_MODE_MAP: Final[dict[str, HVACMode]] = {
    MODE_COOL: HVACMode.COOL,
    MODE_HEAT: HVACMode.HEAT,
    MODE_OFF: HVACMode.OFF,
    MODE_FAN_ONLY: HVACMode.FAN_ONLY,
}

# Reverse mapping: Home Assistant -> device capability
HVAC_MODE_REVERSE_MAP: Final[dict[HVACMode, str]] = {
    v: k for k, v in HVAC_MODE_MAP.items()
}

# Log levels for config
LOG_LEVELS: Final = {
    "Error": "error",
    "Warning": "warning",
    "Info": "info",
    "Debug": "debug",
}
