"""Tuya data point translation for Zigbee fan-coil thermostats."""

from .const import DataPointId, ValueKind
from .datapoint_maps.datapoint_map_manager import DataPointMapManager, supported_models
from .dispatcher import CapabilityDispatcher
from .exceptions import (
    DataPointDecodeError,
    DataPointEncodeError,
    DataPointWriteError,
    TuyaFanCoilError,
    UnknownCapabilityError,
)
from .host import CapabilityStore, DeviceTransport
from .models import CapabilityUpdate, DeviceWrite
from .translator import DataPointTranslator, compute_fan_speed

__version__ = "0.1.0"

__all__ = [
    "CapabilityDispatcher",
    "CapabilityStore",
    "CapabilityUpdate",
    "DataPointDecodeError",
    "DataPointEncodeError",
    "DataPointId",
    "DataPointMapManager",
    "DataPointTranslator",
    "DataPointWriteError",
    "DeviceTransport",
    "DeviceWrite",
    "TuyaFanCoilError",
    "UnknownCapabilityError",
    "ValueKind",
    "compute_fan_speed",
    "supported_models",
]
