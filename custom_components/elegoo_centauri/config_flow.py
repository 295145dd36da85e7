"""Config flow for the Elegoo Centauri integration."""

from __future__ import annotations

import asyncio
import contextlib
import logging
from typing import Any

from sdcp_lib import (
    DiscoveredPrinter,
    Event,
    PrinterSession,
    SessionConfig,
    async_discover,
)
import voluptuous as vol

from homeassistant.config_entries import (
    ConfigEntry,
    ConfigFlow,
    ConfigFlowResult,
    OptionsFlow,
)
from homeassistant.const import CONF_HOST, CONF_PORT
from homeassistant.core import callback
from homeassistant.helpers import config_validation as cv
from homeassistant.helpers.aiohttp_client import async_get_clientsession

from .const import (
    CONF_KEEPALIVE,
    CONF_MAINBOARD_ID,
    CONF_POLL_INTERVAL,
    CONF_RECONNECT_DELAY,
    DEFAULT_KEEPALIVE,
    DEFAULT_POLL_INTERVAL,
    DEFAULT_RECONNECT_DELAY,
    DISCOVERY_TIMEOUT,
    DOMAIN,
)

_LOGGER = logging.getLogger(__name__)

CONF_PRINTER = "printer"
PROBE_TIMEOUT = 3.0
MANUAL_ENTRY = "manual"

STEP_MANUAL_DATA_SCHEMA = vol.Schema(
    {
        vol.Required(CONF_HOST): cv.string,
        vol.Optional(CONF_PORT): vol.All(vol.Coerce(int), vol.Range(min=1, max=65535)),
    }
)


class ElegooConfigFlow(ConfigFlow, domain=DOMAIN):
    """Handle a config flow for Elegoo SDCP printers."""

    VERSION = 1
    MINOR_VERSION = 1

    def __init__(self) -> None:
        """Initialize the flow."""
        self._discovered: dict[str, DiscoveredPrinter] = {}

    @staticmethod
    @callback
    def async_get_options_flow(config_entry: ConfigEntry) -> OptionsFlow:
        """Return the options flow handler."""
        return ElegooOptionsFlow()

    async def async_step_user(
        self, user_input: dict[str, Any] | None = None
    ) -> ConfigFlowResult:
        """Scan the network first; fall back to manual entry."""
        configured = {
            entry.data.get(CONF_HOST) for entry in self._async_current_entries()
        }
        printers = await async_discover(timeout_s=DISCOVERY_TIMEOUT)
        self._discovered = {
            printer.host: printer
            for printer in printers
            if printer.host not in configured
        }
        if not self._discovered:
            return await self.async_step_manual()
        return await self.async_step_pick()

    async def async_step_pick(
        self, user_input: dict[str, Any] | None = None
    ) -> ConfigFlowResult:
        """Let the user choose one of the discovered printers."""
        if user_input is not None:
            host = user_input[CONF_PRINTER]
            if host == MANUAL_ENTRY:
                return await self.async_step_manual()
            printer = self._discovered[host]
            return await self._async_create_printer_entry(
                host=host,
                port=None,
                title=printer.title,
                mainboard_id=printer.mainboard_id or None,
            )

        choices = {
            host: f"{printer.title} ({host})"
            for host, printer in self._discovered.items()
        }
        choices[MANUAL_ENTRY] = "Enter address manually"
        return self.async_show_form(
            step_id="pick",
            data_schema=vol.Schema({vol.Required(CONF_PRINTER): vol.In(choices)}),
        )

    async def async_step_manual(
        self, user_input: dict[str, Any] | None = None
    ) -> ConfigFlowResult:
        """Handle a manually entered printer address."""
        errors: dict[str, str] = {}
        if user_input is not None:
            host = user_input[CONF_HOST].strip()
            port = user_input.get(CONF_PORT)
            self._async_abort_entries_match({CONF_HOST: host})
            mainboard_id = await self._async_probe(host, port)
            if mainboard_id is None:
                errors["base"] = "cannot_connect"
            else:
                return await self._async_create_printer_entry(
                    host=host,
                    port=port,
                    title=host,
                    mainboard_id=mainboard_id or None,
                )

        return self.async_show_form(
            step_id="manual",
            data_schema=STEP_MANUAL_DATA_SCHEMA,
            errors=errors,
        )

    async def _async_probe(self, host: str, port: int | None) -> str | None:
        """Open and close one session. Returns the mainboard id ("" if unknown), or None."""
        session = PrinterSession(
            SessionConfig(host=host, port=port),
            client_session=async_get_clientsession(self.hass),
        )
        identified = asyncio.Event()

        def _on_event(event: Event) -> None:
            if session.mainboard_id:
                identified.set()

        unsubscribe = session.subscribe(_on_event)
        try:
            if not await session.async_connect():
                _LOGGER.debug("Probe of %s failed: %s", host, session.last_error)
                return None
            # The first status reply carries the mainboard id.
            with contextlib.suppress(TimeoutError):
                async with asyncio.timeout(PROBE_TIMEOUT):
                    await identified.wait()
            return session.mainboard_id
        finally:
            unsubscribe()
            await session.async_shutdown()

    async def _async_create_printer_entry(
        self,
        *,
        host: str,
        port: int | None,
        title: str,
        mainboard_id: str | None,
    ) -> ConfigFlowResult:
        await self.async_set_unique_id(mainboard_id or host)
        self._abort_if_unique_id_configured(updates={CONF_HOST: host})
        data: dict[str, Any] = {CONF_HOST: host}
        if port is not None:
            data[CONF_PORT] = port
        if mainboard_id:
            data[CONF_MAINBOARD_ID] = mainboard_id
        return self.async_create_entry(title=title, data=data)


class ElegooOptionsFlow(OptionsFlow):
    """Tune polling, reconnect and keep-alive behavior."""

    async def async_step_init(
        self, user_input: dict[str, Any] | None = None
    ) -> ConfigFlowResult:
        if user_input is not None:
            return self.async_create_entry(data=user_input)

        options = self.config_entry.options
        schema = vol.Schema(
            {
                vol.Required(
                    CONF_POLL_INTERVAL,
                    default=options.get(CONF_POLL_INTERVAL, DEFAULT_POLL_INTERVAL),
                ): vol.All(vol.Coerce(int), vol.Range(min=1, max=3600)),
                vol.Required(
                    CONF_RECONNECT_DELAY,
                    default=options.get(CONF_RECONNECT_DELAY, DEFAULT_RECONNECT_DELAY),
                ): vol.All(vol.Coerce(int), vol.Range(min=1, max=3600)),
                vol.Required(
                    CONF_KEEPALIVE,
                    default=options.get(CONF_KEEPALIVE, DEFAULT_KEEPALIVE),
                ): cv.boolean,
            }
        )
        return self.async_show_form(step_id="init", data_schema=schema)
