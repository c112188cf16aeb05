"""Fan-Coil Thermostat Switch Entity Platform.

This module provides switch entities for the boolean settings of the
extended thermostat firmware (eco mode, child lock).
"""
from __future__ import annotations

import logging
from typing import Any

from homeassistant.components.switch import SwitchEntity
from homeassistant.config_entries import ConfigEntry
from homeassistant.const import EntityCategory
from homeassistant.core import HomeAssistant
from homeassistant.helpers.entity_platform import AddEntitiesCallback

from tuya_fancoil.const import CAP_CHILD_LOCK, CAP_ECO_MODE

from .const import DOMAIN
from .coordinator import FanCoilCoordinator
from .entity import FanCoilBaseEntity
from .fancoil_device import FanCoilDevice

_LOGGER = logging.getLogger(__name__)

# capability -> (name, icon)
SWITCHES: dict[str, tuple[str, str]] = {
    CAP_ECO_MODE: ("Eco mode", "mdi:leaf"),
    CAP_CHILD_LOCK: ("Child lock", "mdi:lock"),
}


async def async_setup_entry(
    hass: HomeAssistant,
    config_entry: ConfigEntry,
    async_add_entities: AddEntitiesCallback,
) -> None:
    """Set up fan-coil switch entities from a config entry.

    Args:
        hass: The Home Assistant instance.
        config_entry: The config entry being set up.
        async_add_entities: Callback to add entities.
    """
    entry_data = hass.data[DOMAIN][config_entry.entry_id]
    device: FanCoilDevice = entry_data["device"]
    entities: list[FanCoilSwitch] = []

    for capability, (name, icon) in SWITCHES.items():
        if not device.supports(capability):
            continue
        _LOGGER.debug("Creating switch for %s", capability)
        entities.append(
            FanCoilSwitch(entry_data["coordinator"], device, capability, name, icon)
        )

    async_add_entities(entities)


class FanCoilSwitch(FanCoilBaseEntity, SwitchEntity):
    """Switch writing a boolean data point."""

    _attr_entity_category = EntityCategory.CONFIG

    def __init__(
        self,
        coordinator: FanCoilCoordinator,
        device: FanCoilDevice,
        capability: str,
        name: str,
        icon: str,
    ) -> None:
        """Initialize the switch.

        Args:
            coordinator: The capability store coordinator.
            device: The fan-coil device instance.
            capability: Capability written by the switch.
            name: Entity name.
            icon: Entity icon.
        """
        super().__init__(coordinator, device, name, capability)
        self._capability = capability
        self._attr_icon = icon

    @property
    def is_on(self) -> bool | None:
        """Return whether the switch is currently on."""
        value = self.capability_value(self._capability)
        return None if value is None else bool(value)

    async def async_turn_on(self, **kwargs: Any) -> None:
        """Turn on the switch."""
        await self.async_set_capability(self._capability, True)

    async def async_turn_off(self, **kwargs: Any) -> None:
        """Turn off the switch."""
        await self.async_set_capability(self._capability, False)
