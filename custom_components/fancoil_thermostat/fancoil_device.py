"""Fan-Coil Thermostat device module.

This module connects one Tuya fan-coil thermostat to Home Assistant. Decoded
data points arrive as JSON on the MQTT topic ``<base>/datapoint``; writes are
published to ``<base>/datapoint/set``. The data point translation itself lives
in the ``tuya_fancoil`` library.
"""
from __future__ import annotations

import json
import logging
from typing import Any, Callable

from homeassistant.components import mqtt
from homeassistant.components.mqtt.models import ReceiveMessage
from homeassistant.core import HomeAssistant, callback

from tuya_fancoil import (
    CapabilityDispatcher,
    DataPointMapManager,
    DataPointTranslator,
    ValueKind,
)

from .const import TOPIC_DATAPOINT, TOPIC_DATAPOINT_SET
from .coordinator import FanCoilCoordinator

_LOGGER = logging.getLogger(__name__)


class MqttDataPointTransport:
    """Publishes data point writes for the host's Tuya bridge."""

    def __init__(self, hass: HomeAssistant, base_topic: str) -> None:
        """Initialize the transport.

        Args:
            hass: The Home Assistant instance.
            base_topic: MQTT base topic of the device.
        """
        self.hass = hass
        self.topic = TOPIC_DATAPOINT_SET.format(base=base_topic)

    async def async_write_datapoint(
        self, dp: int, value: Any, kind: ValueKind
    ) -> None:
        """Publish a data point write."""
        payload = json.dumps({"dp": dp, "value": value, "type": kind.value})
        _LOGGER.debug("Publishing %s to %s", payload, self.topic)
        await mqtt.async_publish(self.hass, self.topic, payload, qos=1, retain=False)


class FanCoilDevice:
    """Represents one fan-coil thermostat.

    Attributes:
        name: Device name.
        model: Model id used to select the data point table.
        base_topic: MQTT base topic of the device.
        coordinator: Capability store shared with the entities.
        translator: Data point translator for the model.
        dispatcher: Routes entity capability changes to the translator.
    """

    def __init__(
        self,
        hass: HomeAssistant,
        coordinator: FanCoilCoordinator,
        name: str,
        model: str,
        base_topic: str,
    ) -> None:
        """Initialize the device.

        Note: Call async_initialize() to start listening for data points.
        """
        self.hass = hass
        self.name = name
        self.model = model
        self.base_topic = base_topic.rstrip("/")
        self.coordinator = coordinator

        self.map_manager = DataPointMapManager(model)
        self.transport = MqttDataPointTransport(hass, self.base_topic)
        self.translator = DataPointTranslator(
            self.map_manager, coordinator, self.transport
        )
        self.dispatcher = CapabilityDispatcher()
        self._unsubscribers: list[Callable[[], None]] = []

    @property
    def unique_id(self) -> str:
        """Return a stable identifier for the device."""
        return self.base_topic.replace("/", "_")

    def supports(self, capability: str) -> bool:
        """Return True if the model maps the capability."""
        return self.map_manager.get_by_capability(capability) is not None

    async def async_initialize(self) -> None:
        """Register capability listeners and subscribe to the data point topic."""
        self._unsubscribers.extend(self.translator.register_listeners(self.dispatcher))

        @callback
        def datapoint_received(msg: ReceiveMessage) -> None:
            """Handle a decoded data point from the bridge."""
            try:
                payload = json.loads(msg.payload)
                dp = int(payload["dp"])
                value = payload["value"]
            except (json.JSONDecodeError, KeyError, TypeError, ValueError):
                _LOGGER.debug("Invalid data point message on %s: %s", msg.topic, msg.payload)
                return

            self.hass.async_create_task(
                self.translator.async_handle_device_message(dp, value)
            )

        topic = TOPIC_DATAPOINT.format(base=self.base_topic)
        self._unsubscribers.append(
            await mqtt.async_subscribe(self.hass, topic, datapoint_received, qos=1)
        )
        _LOGGER.info(
            "Listening for %s data points on %s (maps: %s)",
            self.model,
            topic,
            ", ".join(self.map_manager.map_names),
        )

    async def async_set_capability(self, capability: str, value: Any) -> None:
        """Request a capability change from an entity."""
        await self.dispatcher.async_dispatch(capability, value)

    async def async_shutdown(self) -> None:
        """Unsubscribe from MQTT and drop the capability listeners."""
        while self._unsubscribers:
            self._unsubscribers.pop()()
