"""Fan-Coil Thermostat Sensor Platform.

This module provides sensor entities for the derived fan speed, the valve
state and the temperature limits reported by the thermostat.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from homeassistant.components.sensor import (
    SensorDeviceClass,
    SensorEntity,
    SensorEntityDescription,
)
from homeassistant.config_entries import ConfigEntry
from homeassistant.const import EntityCategory, UnitOfTemperature
from homeassistant.core import HomeAssistant
from homeassistant.helpers.entity_platform import AddEntitiesCallback

from tuya_fancoil.const import (
    CAP_FAN_SPEED,
    CAP_MAX_TEMPERATURE_LIMIT,
    CAP_MIN_TEMPERATURE_LIMIT,
    CAP_VALVE_STATUS,
    FAN_SPEEDS,
    VALVE_CLOSED,
    VALVE_OPEN,
)

from .const import DOMAIN
from .coordinator import FanCoilCoordinator
from .entity import FanCoilBaseEntity
from .fancoil_device import FanCoilDevice

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, kw_only=True)
class FanCoilSensorEntityDescription(SensorEntityDescription):
    """Describes a fan-coil sensor entity."""

    always_available: bool = False


SENSORS: tuple[FanCoilSensorEntityDescription, ...] = (
    # Derived, not reported by the device
    FanCoilSensorEntityDescription(
        key=CAP_FAN_SPEED,
        translation_key=CAP_FAN_SPEED,
        name="Fan speed",
        device_class=SensorDeviceClass.ENUM,
        options=FAN_SPEEDS,
        icon="mdi:fan",
        always_available=True,
    ),
    FanCoilSensorEntityDescription(
        key=CAP_VALVE_STATUS,
        translation_key=CAP_VALVE_STATUS,
        name="Valve",
        device_class=SensorDeviceClass.ENUM,
        options=[VALVE_OPEN, VALVE_CLOSED],
        icon="mdi:valve",
    ),
    FanCoilSensorEntityDescription(
        key=CAP_MIN_TEMPERATURE_LIMIT,
        translation_key=CAP_MIN_TEMPERATURE_LIMIT,
        name="Minimum temperature limit",
        device_class=SensorDeviceClass.TEMPERATURE,
        native_unit_of_measurement=UnitOfTemperature.CELSIUS,
        entity_category=EntityCategory.DIAGNOSTIC,
    ),
    FanCoilSensorEntityDescription(
        key=CAP_MAX_TEMPERATURE_LIMIT,
        translation_key=CAP_MAX_TEMPERATURE_LIMIT,
        name="Maximum temperature limit",
        device_class=SensorDeviceClass.TEMPERATURE,
        native_unit_of_measurement=UnitOfTemperature.CELSIUS,
        entity_category=EntityCategory.DIAGNOSTIC,
    ),
)


async def async_setup_entry(
    hass: HomeAssistant,
    config_entry: ConfigEntry,
    async_add_entities: AddEntitiesCallback,
) -> None:
    """Set up fan-coil sensors from a config entry.

    Args:
        hass: The Home Assistant instance.
        config_entry: The config entry being set up.
        async_add_entities: Callback to add entities.
    """
    entry_data = hass.data[DOMAIN][config_entry.entry_id]
    device: FanCoilDevice = entry_data["device"]
    coordinator: FanCoilCoordinator = entry_data["coordinator"]

    entities = [
        FanCoilSensor(coordinator, device, description)
        for description in SENSORS
        if description.always_available or device.supports(description.key)
    ]
    _LOGGER.debug("Adding %d sensors for %s", len(entities), device.model)
    async_add_entities(entities)


class FanCoilSensor(FanCoilBaseEntity, SensorEntity):
    """Sensor showing a single capability value."""

    entity_description: FanCoilSensorEntityDescription

    def __init__(
        self,
        coordinator: FanCoilCoordinator,
        device: FanCoilDevice,
        description: FanCoilSensorEntityDescription,
    ) -> None:
        """Initialize the sensor."""
        super().__init__(coordinator, device, description.name, description.key)
        self.entity_description = description

    @property
    def native_value(self) -> Any:
        """Return the capability value."""
        return self.capability_value(self.entity_description.key)
