"""Tuya Fan-Coil Thermostat Integration for Home Assistant.

This integration exposes Zigbee fan-coil thermostats that speak the Tuya data
point protocol (TYBAC-006 family) as climate, sensor, switch and number
entities. Data points are exchanged with the Zigbee bridge over MQTT.
"""
from __future__ import annotations

import logging

from homeassistant.config_entries import ConfigEntry
from homeassistant.const import CONF_NAME
from homeassistant.core import HomeAssistant
from homeassistant.helpers import device_registry as dr

from .const import (
    CONF_BASE_TOPIC,
    CONF_LOG_LEVEL,
    CONF_MODEL,
    DEFAULT_NAME,
    DOMAIN,
    PLATFORMS,
)
from .coordinator import FanCoilCoordinator
from .fancoil_device import FanCoilDevice

_LOGGER = logging.getLogger(__name__)


async def async_setup_entry(hass: HomeAssistant, config_entry: ConfigEntry) -> bool:
    """Set up a fan-coil thermostat from a config entry.

    Args:
        hass: The Home Assistant instance.
        config_entry: The config entry to set up.

    Returns:
        True if setup was successful.
    """
    # Configure logging level for the integration and the translator library
    log_level_str = config_entry.data.get(CONF_LOG_LEVEL, "info")
    log_level = getattr(logging, log_level_str.upper(), logging.INFO)
    logging.getLogger(__package__).setLevel(log_level)
    logging.getLogger("tuya_fancoil").setLevel(log_level)
    _LOGGER.info("Log level set to: %s", log_level_str)

    hass.data.setdefault(DOMAIN, {})

    data = config_entry.data
    coordinator = FanCoilCoordinator(hass, config_entry)
    device = FanCoilDevice(
        hass,
        coordinator,
        name=data.get(CONF_NAME, DEFAULT_NAME),
        model=data[CONF_MODEL],
        base_topic=data[CONF_BASE_TOPIC],
    )
    await device.async_initialize()

    # Register device in Home Assistant device registry
    dev_reg = dr.async_get(hass)
    device_entry = dev_reg.async_get_or_create(
        config_entry_id=config_entry.entry_id,
        identifiers={(DOMAIN, device.unique_id)},
        name=device.name,
        manufacturer="Tuya",
        model=device.model,
    )
    _LOGGER.debug("Device registry entry created/updated: %s", device_entry.id)

    hass.data[DOMAIN][config_entry.entry_id] = {
        "device": device,
        "coordinator": coordinator,
    }

    # Forward setup to platforms
    await hass.config_entries.async_forward_entry_setups(config_entry, PLATFORMS)

    return True


async def async_unload_entry(hass: HomeAssistant, entry: ConfigEntry) -> bool:
    """Unload a config entry.

    Args:
        hass: The Home Assistant instance.
        entry: The config entry to unload.

    Returns:
        True if unload was successful.
    """
    unload_ok = await hass.config_entries.async_unload_platforms(entry, PLATFORMS)
    if unload_ok:
        entry_data = hass.data[DOMAIN].pop(entry.entry_id, None)
        if entry_data:
            await entry_data["device"].async_shutdown()
    return unload_ok
