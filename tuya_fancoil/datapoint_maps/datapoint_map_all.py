"""
Module docstring for DATAPOINT_MAP (all models).

Purpose
-------
This module-level mapping defines the Tuya data points shared by every
supported fan-coil thermostat model. Model-specific modules are merged on top
of it by the DataPointMapManager; an entry with the same name in a later map
replaces the earlier one.

Top-level structure
-------------------
DATAPOINT_MAP : dict
  - "model": str
    Model identifier for the map.
  - <datapoint_name>: dict
    Metadata describing how to translate the data point.

Data point metadata fields
--------------------------
- dp : int
  Tuya data point id.

- capability : str
  Name of the capability (or setting) the data point maps to.

- kind : ValueKind
  Encoding used when writing the data point to the device.

- convert : str
  Converter name, one of "raw", "bool", "decidegree", "lookup".

- values : dict[int, str]
  For "lookup" only. Ordinal to string table. Polarity is always stated here,
  never implied (e.g. valve status 1 is "closed").

- fallback : str
  For "lookup" only. Capability value for ordinals missing from "values".

- encode_fallback : int
  For "lookup" only. Ordinal written for strings missing from "values".

- writable : bool
  Whether a capability change is sent to the device. Capabilities that are
  present but not writable are observed and logged only.

- setting : bool
  True for device settings (calibration, deadzone) rather than capabilities.

- fan_speed_input : bool
  Whether an inbound update of this data point triggers the derived fan
  speed recomputation.

Operational notes
-----------------
- Treat DATAPOINT_MAP as read-only configuration at runtime; extend by adding
  new entries following the same schema.
"""
from ..const import (
    CAP_MEASURE_TEMPERATURE,
    CAP_ONOFF,
    CAP_TARGET_TEMPERATURE,
    DataPointId,
    ValueKind,
)

DATAPOINT_MAP = {
    "model": "all",
    "onOff": {
        "dp": DataPointId.ON_OFF,
        "capability": CAP_ONOFF,
        "kind": ValueKind.BOOL,
        "convert": "bool",
        # Remote on/off is not supported by the firmware
        "writable": False,
        "fan_speed_input": False,
    },
    "targetTemperature": {
        "dp": DataPointId.TARGET_TEMPERATURE,
        "capability": CAP_TARGET_TEMPERATURE,
        "kind": ValueKind.VALUE,
        "convert": "decidegree",
        "writable": True,
        "fan_speed_input": True,
    },
    "currentTemperature": {
        "dp": DataPointId.CURRENT_TEMPERATURE,
        "capability": CAP_MEASURE_TEMPERATURE,
        "kind": ValueKind.VALUE,
        "convert": "decidegree",
        "writable": False,
        "fan_speed_input": True,
    },
}
