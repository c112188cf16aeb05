"""Config flow for the Fan-Coil Thermostat integration.

This module handles the configuration flow for adding a Tuya fan-coil
thermostat whose data points are bridged over MQTT.
"""
from __future__ import annotations

import logging
from typing import Any

import voluptuous as vol
from homeassistant import config_entries
from homeassistant.const import CONF_NAME
from homeassistant.data_entry_flow import FlowResult

from tuya_fancoil import supported_models

from .const import (
    CONF_BASE_TOPIC,
    CONF_LOG_LEVEL,
    CONF_MODEL,
    DEFAULT_BASE_TOPIC,
    DEFAULT_NAME,
    DOMAIN,
    LOG_LEVELS,
)

_LOGGER = logging.getLogger(__name__)


class FanCoilConfigFlow(config_entries.ConfigFlow, domain=DOMAIN):
    """Config flow for a Tuya fan-coil thermostat.

    This flow asks for:
    1. Device name
    2. Device model (selects the data point table)
    3. MQTT base topic of the bridged device
    4. Log level
    """

    VERSION = 1

    async def async_step_user(
        self, user_input: dict[str, Any] | None = None
    ) -> FlowResult:
        """Handle the user step.

        Args:
            user_input: User form input, if any.

        Returns:
            Form result or created config entry.
        """
        errors: dict[str, str] = {}

        if user_input is not None:
            base_topic = user_input[CONF_BASE_TOPIC].strip().rstrip("/")
            if not base_topic or "#" in base_topic or "+" in base_topic:
                errors[CONF_BASE_TOPIC] = "invalid_topic"
            else:
                await self.async_set_unique_id(base_topic)
                self._abort_if_unique_id_configured()
                user_input[CONF_BASE_TOPIC] = base_topic
                _LOGGER.debug("Creating entry for %s", base_topic)
                return self.async_create_entry(
                    title=user_input[CONF_NAME], data=user_input
                )

        models = supported_models()
        schema = vol.Schema(
            {
                vol.Required(CONF_NAME, default=DEFAULT_NAME): str,
                vol.Required(CONF_MODEL, default=models[0]): vol.In(models),
                vol.Required(CONF_BASE_TOPIC, default=DEFAULT_BASE_TOPIC): str,
                vol.Optional(CONF_LOG_LEVEL, default="info"): vol.In(
                    {value: label for label, value in LOG_LEVELS.items()}
                ),
            }
        )
        return self.async_show_form(step_id="user", data_schema=schema, errors=errors)
