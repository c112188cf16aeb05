import pytest

from tuya_fancoil import CapabilityDispatcher, UnknownCapabilityError


async def test_dispatch_in_registration_order():
    dispatcher = CapabilityDispatcher()
    calls = []

    async def first(value):
        calls.append(("first", value))

    async def second(value):
        calls.append(("second", value))

    dispatcher.register("fan_mode", first)
    dispatcher.register("fan_mode", second)
    await dispatcher.async_dispatch("fan_mode", "low")

    assert calls == [("first", "low"), ("second", "low")]


async def test_unsubscribe():
    dispatcher = CapabilityDispatcher()
    calls = []

    async def handler(value):
        calls.append(value)

    unsubscribe = dispatcher.register("onoff", handler)
    assert dispatcher.has_listener("onoff")

    unsubscribe()
    unsubscribe()
    assert not dispatcher.has_listener("onoff")
    assert dispatcher.capabilities == []


async def test_dispatch_without_listener_raises():
    dispatcher = CapabilityDispatcher()
    with pytest.raises(UnknownCapabilityError):
        await dispatcher.async_dispatch("target_temperature", 21.0)


async def test_handler_error_propagates():
    dispatcher = CapabilityDispatcher()

    async def handler(value):
        raise ValueError("rejected")

    dispatcher.register("fan_mode", handler)
    with pytest.raises(ValueError):
        await dispatcher.async_dispatch("fan_mode", "high")
