"""Binary sensor platform for the Fan-Coil Thermostat."""
from __future__ import annotations

import logging
from dataclasses import dataclass

from homeassistant.components.binary_sensor import (
    BinarySensorDeviceClass,
    BinarySensorEntity,
    BinarySensorEntityDescription,
)
from homeassistant.config_entries import ConfigEntry
from homeassistant.core import HomeAssistant
from homeassistant.helpers.entity_platform import AddEntitiesCallback

from tuya_fancoil.const import CAP_MANUAL_MODE, CAP_ONOFF

from .const import DOMAIN
from .coordinator import FanCoilCoordinator
from .entity import FanCoilBaseEntity
from .fancoil_device import FanCoilDevice

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, kw_only=True)
class FanCoilBinarySensorEntityDescription(BinarySensorEntityDescription):
    """Describes a fan-coil binary sensor entity."""

    pass


# On/off is reported by the device but cannot be switched remotely
BINARY_SENSORS: tuple[FanCoilBinarySensorEntityDescription, ...] = (
    FanCoilBinarySensorEntityDescription(
        key=CAP_ONOFF,
        translation_key="power",
        name="Power",
        device_class=BinarySensorDeviceClass.POWER,
        icon="mdi:power",
    ),
    FanCoilBinarySensorEntityDescription(
        key=CAP_MANUAL_MODE,
        translation_key=CAP_MANUAL_MODE,
        name="Manual mode",
        icon="mdi:hand-back-right",
    ),
)


async def async_setup_entry(
    hass: HomeAssistant,
    config_entry: ConfigEntry,
    async_add_entities: AddEntitiesCallback,
) -> None:
    """Set up fan-coil binary sensors."""
    entry_data = hass.data[DOMAIN][config_entry.entry_id]
    device: FanCoilDevice = entry_data["device"]

    async_add_entities(
        FanCoilBinarySensor(entry_data["coordinator"], device, description)
        for description in BINARY_SENSORS
        if device.supports(description.key)
    )


class FanCoilBinarySensor(FanCoilBaseEntity, BinarySensorEntity):
    """Binary sensor for a boolean capability."""

    entity_description: FanCoilBinarySensorEntityDescription

    def __init__(
        self,
        coordinator: FanCoilCoordinator,
        device: FanCoilDevice,
        description: FanCoilBinarySensorEntityDescription,
    ) -> None:
        """Initialize the binary sensor."""
        super().__init__(coordinator, device, description.name, description.key)
        self.entity_description = description

    @property
    def is_on(self) -> bool | None:
        """Return true if the capability is set."""
        value = self.capability_value(self.entity_description.key)
        return None if value is None else bool(value)
