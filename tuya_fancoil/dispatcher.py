"""Capability change subscription and dispatch."""
from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from typing import Any

from .exceptions import UnknownCapabilityError

_LOGGER = logging.getLogger(__name__)

CapabilityHandler = Callable[[Any], Awaitable[None]]


class CapabilityDispatcher:
    """Routes capability change requests to the handlers registered for them.

    Handlers of one capability run in registration order. There is no ordering
    between different capabilities.
    """

    def __init__(self) -> None:
        """Initialize an empty dispatcher."""
        self._handlers: dict[str, list[CapabilityHandler]] = {}

    def register(
        self, capability: str, handler: CapabilityHandler
    ) -> Callable[[], None]:
        """Register a handler for a capability.

        Args:
            capability: Capability name.
            handler: Coroutine function called with the new value.

        Returns:
            Callable that removes the handler again.
        """
        self._handlers.setdefault(capability, []).append(handler)
        _LOGGER.debug("Registered listener for %s", capability)

        def unsubscribe() -> None:
            handlers = self._handlers.get(capability, [])
            if handler in handlers:
                handlers.remove(handler)
            if not handlers:
                self._handlers.pop(capability, None)

        return unsubscribe

    def has_listener(self, capability: str) -> bool:
        """Return True if a handler is registered for the capability."""
        return bool(self._handlers.get(capability))

    @property
    def capabilities(self) -> list[str]:
        """Capabilities that have at least one handler."""
        return list(self._handlers)

    async def async_dispatch(self, capability: str, value: Any) -> None:
        """Deliver a capability change to its handlers.

        Raises:
            UnknownCapabilityError: If no handler is registered.
        """
        handlers = self._handlers.get(capability)
        if not handlers:
            raise UnknownCapabilityError(f"No listener for capability {capability}")
        for handler in list(handlers):
            await handler(value)
