"""Interfaces the host runtime provides to the translator."""
from __future__ import annotations

from typing import Any, Protocol

from .const import ValueKind


class CapabilityStore(Protocol):
    """Last-known capability values, owned by the host."""

    def get_capability_value(self, name: str) -> Any:
        """Return the current value of a capability, or None when unset."""

    async def async_set_capability_value(self, name: str, value: Any) -> None:
        """Store a new capability value."""


class DeviceTransport(Protocol):
    """Sends encoded data point writes to the device."""

    async def async_write_datapoint(
        self, dp: int, value: Any, kind: ValueKind
    ) -> None:
        """Write a data point value using the given encoding."""
