"""Capability store for the Fan-Coil Thermostat."""
from __future__ import annotations

import logging
from typing import Any

from homeassistant.config_entries import ConfigEntry
from homeassistant.core import HomeAssistant
from homeassistant.helpers.update_coordinator import DataUpdateCoordinator

from .const import DOMAIN

_LOGGER = logging.getLogger(__name__)


class FanCoilCoordinator(DataUpdateCoordinator[dict[str, Any]]):
    """Holds the last known capability values of one thermostat.

    The device pushes its data points, so there is no polling interval;
    every stored value is published to the entities right away.
    """

    config_entry: ConfigEntry

    def __init__(self, hass: HomeAssistant, entry: ConfigEntry) -> None:
        """Initialize the coordinator."""
        super().__init__(
            hass,
            _LOGGER,
            name=f"{DOMAIN}_{entry.entry_id}",
            update_interval=None,
        )
        self.entry = entry
        self.data = {}

    def get_capability_value(self, name: str) -> Any:
        """Return the last known value of a capability."""
        return (self.data or {}).get(name)

    async def async_set_capability_value(self, name: str, value: Any) -> None:
        """Store a capability value and notify the entities."""
        _LOGGER.debug("Capability %s = %s", name, value)
        self.async_set_updated_data({**(self.data or {}), name: value})
