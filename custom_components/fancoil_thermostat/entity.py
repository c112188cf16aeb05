"""Base entity for the Fan-Coil Thermostat integration."""
from __future__ import annotations

from typing import TYPE_CHECKING, Any

from homeassistant.exceptions import HomeAssistantError
from homeassistant.helpers.device_registry import DeviceInfo
from homeassistant.helpers.update_coordinator import CoordinatorEntity

from tuya_fancoil import TuyaFanCoilError

from .const import DOMAIN
from .coordinator import FanCoilCoordinator

if TYPE_CHECKING:
    from .fancoil_device import FanCoilDevice


class FanCoilBaseEntity(CoordinatorEntity[FanCoilCoordinator]):
    """Base class for fan-coil entities with common functionality."""

    _attr_has_entity_name = True

    def __init__(
        self,
        coordinator: FanCoilCoordinator,
        device: FanCoilDevice,
        name: str | None,
        unique_id_suffix: str,
    ) -> None:
        """Initialize the base entity.

        Args:
            coordinator: The capability store coordinator.
            device: The fan-coil device instance.
            name: The entity name.
            unique_id_suffix: Suffix for the unique ID.
        """
        super().__init__(coordinator)
        self._device = device
        self._attr_name = name
        self._attr_unique_id = f"{device.unique_id}_{unique_id_suffix}"

    @property
    def device_info(self) -> DeviceInfo:
        """Return device information for device registry."""
        return DeviceInfo(
            identifiers={(DOMAIN, self._device.unique_id)},
            name=self._device.name,
            manufacturer="Tuya",
            model=self._device.model,
        )

    def capability_value(self, capability: str) -> Any:
        """Return the last known value of a capability."""
        return self.coordinator.get_capability_value(capability)

    async def async_set_capability(self, capability: str, value: Any) -> None:
        """Send a capability change to the device."""
        try:
            await self._device.async_set_capability(capability, value)
        except TuyaFanCoilError as err:
            raise HomeAssistantError(str(err)) from err
