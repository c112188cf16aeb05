"""Data models for the Tuya fan-coil library."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .const import ValueKind


@dataclass(frozen=True)
class CapabilityUpdate:
    """A capability value decoded from an inbound data point."""

    capability: str
    value: Any
    dp: int
    setting: bool = False


@dataclass(frozen=True)
class DeviceWrite:
    """An encoded data point write to send to the device."""

    dp: int
    value: Any
    kind: ValueKind
