"""Fan-Coil Thermostat Number Entity Platform.

Number entities for the integer settings of the extended thermostat firmware
(temperature calibration, deadzone).
"""
from __future__ import annotations

import logging
from typing import Any

from homeassistant.components.number import NumberEntity, NumberMode
from homeassistant.config_entries import ConfigEntry
from homeassistant.const import EntityCategory, UnitOfTemperature
from homeassistant.core import HomeAssistant
from homeassistant.helpers.entity_platform import AddEntitiesCallback

from tuya_fancoil.const import (
    SETTING_DEADZONE_TEMPERATURE,
    SETTING_TEMPERATURE_CALIBRATION,
)

from .const import DOMAIN
from .coordinator import FanCoilCoordinator
from .entity import FanCoilBaseEntity
from .fancoil_device import FanCoilDevice

_LOGGER = logging.getLogger(__name__)

# Device settings written as plain integers
NUMBERS: dict[str, dict[str, Any]] = {
    SETTING_TEMPERATURE_CALIBRATION: {
        "name": "Temperature calibration",
        "min": -9,
        "max": 9,
        "step": 1,
        "unit": UnitOfTemperature.CELSIUS,
        "icon": "mdi:thermometer-lines",
    },
    SETTING_DEADZONE_TEMPERATURE: {
        "name": "Deadzone temperature",
        "min": 1,
        "max": 5,
        "step": 1,
        "unit": UnitOfTemperature.CELSIUS,
        "icon": "mdi:thermometer-minus",
    },
}


async def async_setup_entry(
    hass: HomeAssistant,
    config_entry: ConfigEntry,
    async_add_entities: AddEntitiesCallback,
) -> None:
    """Set up fan-coil number entities from a config entry."""
    entry_data = hass.data[DOMAIN][config_entry.entry_id]
    device: FanCoilDevice = entry_data["device"]
    entities: list[FanCoilNumber] = []
    for setting, entry in NUMBERS.items():
        if device.supports(setting):
            _LOGGER.debug("Creating FanCoilNumber for %s", setting)
            entities.append(
                FanCoilNumber(entry_data["coordinator"], device, setting, entry)
            )

    async_add_entities(entities)


class FanCoilNumber(FanCoilBaseEntity, NumberEntity):
    """Representation of a fan-coil setting."""

    _attr_entity_category = EntityCategory.CONFIG
    _attr_mode = NumberMode.BOX

    def __init__(
        self,
        coordinator: FanCoilCoordinator,
        device: FanCoilDevice,
        setting: str,
        entry: dict[str, Any],
    ) -> None:
        """Initialize the number entity.

        Args:
            coordinator: The capability store coordinator.
            device: The fan-coil device instance.
            setting: Setting name in the data point table.
            entry: Entity parameters from NUMBERS.
        """
        super().__init__(coordinator, device, entry["name"], setting)
        self._setting = setting
        self._attr_native_min_value = float(entry["min"])
        self._attr_native_max_value = float(entry["max"])
        self._attr_native_step = float(entry.get("step", 1))
        self._attr_native_unit_of_measurement = entry.get("unit")
        self._attr_icon = entry.get("icon") or "mdi:eye"

    @property
    def native_value(self) -> float | None:
        """Return the current value of the setting."""
        return self.capability_value(self._setting)

    async def async_set_native_value(self, value: float) -> None:
        """Write a new value for the setting."""
        await self.async_set_capability(self._setting, int(value))
