"""
Tuya data point translator for fan-coil thermostats.

Translates inbound (data point, raw value) pairs into capability updates and
outbound capability changes into data point writes, using the per-model table
selected by the DataPointMapManager. Also derives the effective fan speed,
which the device does not report, from the current capability values.
"""
from __future__ import annotations

import logging
from typing import Any, Callable

from .const import (
    CAP_FAN_MODE,
    CAP_FAN_SPEED,
    CAP_MEASURE_TEMPERATURE,
    CAP_TARGET_TEMPERATURE,
    CAP_THERMOSTAT_MODE,
    CAP_VALVE_STATUS,
    DECIDEGREE_FACTOR,
    FAN_AUTO,
    FAN_HIGH,
    FAN_LOW,
    FAN_MEDIUM,
    FAN_OFF,
    FAN_SPEED_THRESHOLDS,
    MODE_COOL,
    MODE_HEAT,
    VALVE_CLOSED,
)
from .converters import decode_value, encode_value
from .datapoint_maps.datapoint_map_manager import DataPointMapManager
from .dispatcher import CapabilityDispatcher
from .exceptions import (
    DataPointDecodeError,
    DataPointWriteError,
    UnknownCapabilityError,
)
from .host import CapabilityStore, DeviceTransport
from .models import CapabilityUpdate, DeviceWrite

_LOGGER = logging.getLogger(__name__)


def compute_fan_speed(
    fan_mode: Any,
    thermostat_mode: Any,
    valve_status: Any,
    target_temperature: Any,
    measured_temperature: Any,
) -> str:
    """Infer the current fan speed from observable capability values.

    A fixed fan mode is reported as is. In auto mode the fan only runs while
    heating or cooling with the valve open, and its speed follows the distance
    between target and measured temperature:

        < 0.5   off
        < 1.5   low
        < 2.5   medium
        >= 2.5  high

    Missing or malformed inputs yield "off".
    """
    if fan_mode in (FAN_LOW, FAN_MEDIUM, FAN_HIGH):
        return fan_mode
    if fan_mode != FAN_AUTO:
        return FAN_OFF
    if thermostat_mode not in (MODE_HEAT, MODE_COOL):
        return FAN_OFF
    if valve_status == VALVE_CLOSED:
        # valve closed means the relay is off, so no airflow
        return FAN_OFF

    # compare in whole decidegrees, as reported by the device
    try:
        diff = abs(
            round(float(target_temperature) * DECIDEGREE_FACTOR)
            - round(float(measured_temperature) * DECIDEGREE_FACTOR)
        )
    except (TypeError, ValueError, OverflowError):
        return FAN_OFF

    for limit, speed in FAN_SPEED_THRESHOLDS:
        if diff < limit:
            return speed
    return FAN_HIGH


class DataPointTranslator:
    """Bidirectional translation between Tuya data points and capabilities.

    The translator holds no capability state of its own. Every read goes to
    the host's capability store at the moment it is needed.

    Attributes:
        map_manager: Data point table for the device model.
        store: Host capability store.
        transport: Host transport used for outbound writes.
    """

    def __init__(
        self,
        map_manager: DataPointMapManager,
        store: CapabilityStore,
        transport: DeviceTransport | None = None,
    ) -> None:
        """Initialize the translator.

        Args:
            map_manager: Data point table for the device model.
            store: Capability store to read from and write to.
            transport: Transport for outbound writes. Without one, outbound
                changes are translated and stored but never sent.
        """
        self.map_manager = map_manager
        self.store = store
        self.transport = transport

    @property
    def model_id(self) -> str:
        """Model id the data point table was selected for."""
        return self.map_manager.model_id

    # ------------------------------------------------------------------
    # Inbound
    # ------------------------------------------------------------------

    def translate_incoming(self, dp: int, raw_value: Any) -> CapabilityUpdate | None:
        """Translate a decoded data point into a capability update.

        Returns:
            The capability update, or None for an unrecognized data point.

        Raises:
            DataPointDecodeError: If the raw value cannot be converted.
        """
        entry = self.map_manager.get_by_dp(dp)
        if entry is None:
            return None
        value = decode_value(raw_value, entry)
        return CapabilityUpdate(
            capability=entry["capability"],
            value=value,
            dp=int(entry["dp"]),
            setting=entry.get("setting", False),
        )

    async def async_handle_device_message(self, dp: int, raw_value: Any) -> None:
        """Apply an inbound data point to the capability store.

        Never raises: unknown data points, undecodable values and store
        failures are logged and the message is dropped.
        """
        try:
            update = self.translate_incoming(dp, raw_value)
        except DataPointDecodeError as err:
            _LOGGER.warning("Ignoring data point %s: %s", dp, err)
            return

        if update is None:
            _LOGGER.debug("Data point %s: %s (not mapped)", dp, raw_value)
            return

        _LOGGER.debug(
            "Data point %s received: %s -> %s=%s",
            dp,
            raw_value,
            update.capability,
            update.value,
        )
        await self._async_store(update.capability, update.value)

        entry = self.map_manager.get_by_dp(dp)
        if entry.get("fan_speed_input"):
            await self.async_update_fan_speed()

    # ------------------------------------------------------------------
    # Outbound
    # ------------------------------------------------------------------

    def translate_outgoing(self, capability: str, value: Any) -> DeviceWrite | None:
        """Translate a capability change into a data point write.

        Returns:
            The write to send, or None for capabilities that are observed but
            never transmitted (on/off, measured temperature).

        Raises:
            UnknownCapabilityError: If the model has no such capability.
            DataPointEncodeError: If the value cannot be encoded.
        """
        entry = self.map_manager.get_by_capability(capability)
        if entry is None:
            raise UnknownCapabilityError(
                f"Capability {capability} is not supported by model {self.model_id}"
            )
        if not entry.get("writable"):
            return None
        return DeviceWrite(
            dp=int(entry["dp"]),
            value=encode_value(value, entry),
            kind=entry["kind"],
        )

    async def async_handle_capability_change(self, capability: str, value: Any) -> None:
        """Send a user capability change to the device.

        The new value is stored optimistically once the write has been handed
        to the transport; the device's own report later confirms or corrects
        it.

        Raises:
            UnknownCapabilityError: If the model has no such capability.
            DataPointEncodeError: If the value cannot be encoded.
            DataPointWriteError: If the transport fails.
        """
        write = self.translate_outgoing(capability, value)
        if write is None:
            _LOGGER.info("%s changed to %s (not sent to device)", capability, value)
            return

        if self.transport is not None:
            try:
                await self.transport.async_write_datapoint(
                    write.dp, write.value, write.kind
                )
            except Exception as err:
                raise DataPointWriteError(
                    f"Failed to write data point {write.dp} for {capability}: {err}"
                ) from err
        _LOGGER.info(
            "%s set to %s (dp %s = %s)", capability, value, write.dp, write.value
        )

        await self._async_store(capability, value)
        if capability in self.map_manager.get_fan_speed_inputs():
            await self.async_update_fan_speed()

    def register_listeners(
        self, dispatcher: CapabilityDispatcher
    ) -> list[Callable[[], None]]:
        """Register change handlers for every capability of the model.

        Returns:
            The unsubscribe callables.
        """
        unsubscribers = []
        for entry in self.map_manager.get_all_datapoints().values():
            capability = entry["capability"]
            unsubscribers.append(
                dispatcher.register(capability, self._make_listener(capability))
            )
        return unsubscribers

    def _make_listener(self, capability: str):
        async def listener(value: Any) -> None:
            await self.async_handle_capability_change(capability, value)

        return listener

    # ------------------------------------------------------------------
    # Derived fan speed
    # ------------------------------------------------------------------

    def get_fan_speed(self) -> str:
        """Compute the fan speed from the current capability values."""
        read = self.store.get_capability_value
        return compute_fan_speed(
            read(CAP_FAN_MODE),
            read(CAP_THERMOSTAT_MODE),
            read(CAP_VALVE_STATUS),
            read(CAP_TARGET_TEMPERATURE),
            read(CAP_MEASURE_TEMPERATURE),
        )

    async def async_update_fan_speed(self) -> None:
        """Recompute the fan speed and write it to the store."""
        fan_speed = self.get_fan_speed()
        _LOGGER.debug("Calculated fan speed: %s", fan_speed)
        await self._async_store(CAP_FAN_SPEED, fan_speed)

    async def _async_store(self, capability: str, value: Any) -> None:
        """Write a capability value, logging instead of raising on failure."""
        try:
            await self.store.async_set_capability_value(capability, value)
        except Exception as err:
            _LOGGER.error("Failed to forward %s to capability store: %s", capability, err)
