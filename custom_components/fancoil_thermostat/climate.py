"""
Climate Platform for the Fan-Coil Thermostat integration.

Maps the thermostat_mode, fan_mode, target_temperature and
measure_temperature capabilities onto a single climate entity.
"""
from __future__ import annotations

import logging
from typing import Any

from homeassistant.components.climate import (
    ClimateEntity,
    ClimateEntityFeature,
    HVACAction,
    HVACMode,
)
from homeassistant.config_entries import ConfigEntry
from homeassistant.const import ATTR_TEMPERATURE, UnitOfTemperature
from homeassistant.core import HomeAssistant
from homeassistant.exceptions import HomeAssistantError
from homeassistant.helpers.entity_platform import AddEntitiesCallback

from tuya_fancoil.const import (
    CAP_FAN_MODE,
    CAP_FAN_SPEED,
    CAP_MAX_TEMPERATURE,
    CAP_MEASURE_TEMPERATURE,
    CAP_MIN_TEMPERATURE,
    CAP_TARGET_TEMPERATURE,
    CAP_THERMOSTAT_MODE,
    CAP_VALVE_STATUS,
    FAN_MODES,
    FAN_OFF,
    MODE_COOL,
    MODE_FAN_ONLY,
    MODE_HEAT,
    VALVE_CLOSED,
)

from .const import (
    DOMAIN,
    HVAC_MODE_MAP,
    HVAC_MODE_REVERSE_MAP,
    MAX_TEMP,
    MIN_TEMP,
    PRECISION,
    TEMP_STEP,
)
from .coordinator import FanCoilCoordinator
from .entity import FanCoilBaseEntity
from .fancoil_device import FanCoilDevice

_LOGGER = logging.getLogger(__name__)


async def async_setup_entry(
    hass: HomeAssistant,
    config_entry: ConfigEntry,
    async_add_entities: AddEntitiesCallback,
) -> None:
    """Set up the fan-coil climate entity."""
    entry_data = hass.data[DOMAIN][config_entry.entry_id]
    async_add_entities(
        [FanCoilClimate(entry_data["coordinator"], entry_data["device"])]
    )


class FanCoilClimate(FanCoilBaseEntity, ClimateEntity):
    """Climate entity for a Tuya fan-coil thermostat."""

    _attr_temperature_unit = UnitOfTemperature.CELSIUS
    _attr_target_temperature_step = TEMP_STEP
    _attr_precision = PRECISION
    _attr_fan_modes = FAN_MODES
    _attr_supported_features = (
        ClimateEntityFeature.TARGET_TEMPERATURE | ClimateEntityFeature.FAN_MODE
    )

    def __init__(self, coordinator: FanCoilCoordinator, device: FanCoilDevice) -> None:
        """Initialize the climate entity."""
        super().__init__(coordinator, device, None, "climate")

        modes = device.map_manager.get_settable_values(CAP_THERMOSTAT_MODE)
        self._attr_hvac_modes = [HVAC_MODE_MAP[mode] for mode in modes]

    @property
    def current_temperature(self) -> float | None:
        """Return the measured room temperature."""
        return self.capability_value(CAP_MEASURE_TEMPERATURE)

    @property
    def target_temperature(self) -> float | None:
        """Return the target temperature."""
        return self.capability_value(CAP_TARGET_TEMPERATURE)

    @property
    def min_temp(self) -> float:
        """Return the lowest settable target temperature."""
        value = self.capability_value(CAP_MIN_TEMPERATURE)
        return float(value) if value is not None else MIN_TEMP

    @property
    def max_temp(self) -> float:
        """Return the highest settable target temperature."""
        value = self.capability_value(CAP_MAX_TEMPERATURE)
        return float(value) if value is not None else MAX_TEMP

    @property
    def hvac_mode(self) -> HVACMode | None:
        """Return the current operating mode."""
        mode = self.capability_value(CAP_THERMOSTAT_MODE)
        if mode is None:
            return None
        return HVAC_MODE_MAP.get(mode, HVACMode.OFF)

    @property
    def hvac_action(self) -> HVACAction | None:
        """Derive the running action from mode, valve and fan speed."""
        mode = self.capability_value(CAP_THERMOSTAT_MODE)
        if mode is None:
            return None
        if mode == MODE_FAN_ONLY:
            return HVACAction.FAN
        if mode not in (MODE_HEAT, MODE_COOL):
            return HVACAction.OFF
        if self.capability_value(CAP_VALVE_STATUS) == VALVE_CLOSED:
            return HVACAction.IDLE
        if self.capability_value(CAP_FAN_SPEED) == FAN_OFF:
            return HVACAction.IDLE
        return HVACAction.HEATING if mode == MODE_HEAT else HVACAction.COOLING

    @property
    def fan_mode(self) -> str | None:
        """Return the configured fan mode."""
        return self.capability_value(CAP_FAN_MODE)

    @property
    def extra_state_attributes(self) -> dict[str, Any]:
        """Return the derived fan speed and valve state."""
        return {
            CAP_FAN_SPEED: self.capability_value(CAP_FAN_SPEED),
            CAP_VALVE_STATUS: self.capability_value(CAP_VALVE_STATUS),
        }

    async def async_set_temperature(self, **kwargs: Any) -> None:
        """Set target temperature."""
        if (temperature := kwargs.get(ATTR_TEMPERATURE)) is not None:
            await self.async_set_capability(CAP_TARGET_TEMPERATURE, temperature)

    async def async_set_hvac_mode(self, hvac_mode: HVACMode) -> None:
        """Set the operating mode."""
        mode = HVAC_MODE_REVERSE_MAP.get(hvac_mode)
        if mode is None or hvac_mode not in self.hvac_modes:
            raise HomeAssistantError(
                f"HVAC mode {hvac_mode} is not supported by model {self._device.model}"
            )
        await self.async_set_capability(CAP_THERMOSTAT_MODE, mode)

    async def async_set_fan_mode(self, fan_mode: str) -> None:
        """Set the fan mode."""
        if fan_mode in FAN_MODES:
            await self.async_set_capability(CAP_FAN_MODE, fan_mode)
