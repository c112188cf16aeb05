"""
Pytest configuration for fan-coil translator tests.
"""
from typing import Any

import pytest

from tuya_fancoil import (
    DataPointMapManager,
    DataPointTranslator,
    ValueKind,
)


class FakeCapabilityStore:
    """In-memory capability store recording every write."""

    def __init__(self, values: dict[str, Any] | None = None):
        self.values = dict(values or {})
        self.writes: list[tuple[str, Any]] = []

    def get_capability_value(self, name: str) -> Any:
        return self.values.get(name)

    async def async_set_capability_value(self, name: str, value: Any) -> None:
        self.writes.append((name, value))
        self.values[name] = value


class FailingCapabilityStore(FakeCapabilityStore):
    """Store that rejects writes to the given capabilities."""

    def __init__(self, failing: set[str], values: dict[str, Any] | None = None):
        super().__init__(values)
        self.failing = failing

    async def async_set_capability_value(self, name: str, value: Any) -> None:
        if name in self.failing:
            raise RuntimeError(f"capability {name} is not registered")
        await super().async_set_capability_value(name, value)


class FakeTransport:
    """Transport collecting data point writes instead of sending them."""

    def __init__(self, fail: bool = False):
        self.sent: list[tuple[int, Any, ValueKind]] = []
        self.fail = fail

    async def async_write_datapoint(self, dp: int, value: Any, kind: ValueKind) -> None:
        if self.fail:
            raise ConnectionError("device not reachable")
        self.sent.append((dp, value, kind))


@pytest.fixture
def store():
    """Empty capability store."""
    return FakeCapabilityStore()


@pytest.fixture
def transport():
    """Recording transport."""
    return FakeTransport()


@pytest.fixture
def translator(store, transport):
    """Translator for the basic fan-coil firmware."""
    return DataPointTranslator(DataPointMapManager("fancoil"), store, transport)


@pytest.fixture
def extended_translator(store, transport):
    """Translator for the TYBAC-006 firmware."""
    return DataPointTranslator(DataPointMapManager("TYBAC-006"), store, transport)
