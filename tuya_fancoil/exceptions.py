"""
Tuya Fan-Coil Exceptions

Exception hierarchy for data point translation errors.
"""


class TuyaFanCoilError(Exception):
    """Base exception for the fan-coil translator."""

    pass


class DataPointDecodeError(TuyaFanCoilError):
    """Raw data point value cannot be converted to a capability value."""

    pass


class DataPointEncodeError(TuyaFanCoilError):
    """Capability value cannot be encoded for the device."""

    pass


class DataPointWriteError(TuyaFanCoilError):
    """Sending a data point write to the device failed."""

    pass


class UnknownCapabilityError(TuyaFanCoilError):
    """Capability is not known for this device model."""

    pass
