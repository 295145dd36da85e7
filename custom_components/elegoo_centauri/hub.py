"""Hub wrapper for the SDCP printer session lifecycle."""

from __future__ import annotations

from collections.abc import Callable
import logging
from typing import Any

from sdcp_lib import (
    CommandAcknowledged,
    CommandOutcome,
    ConnectionStateChanged,
    DeviceState,
    Event,
    Intent,
    NotConnected,
    PrinterController,
    PrinterSession,
    SessionConfig,
)

from homeassistant.core import HomeAssistant, callback
from homeassistant.exceptions import HomeAssistantError
from homeassistant.helpers.aiohttp_client import async_get_clientsession

_LOGGER = logging.getLogger(__name__)


class ElegooHub:
    """Manage a single printer session and its command facade."""

    def __init__(
        self,
        hass: HomeAssistant,
        host: str,
        port: int | None,
        *,
        poll_interval: float,
        reconnect_delay: float,
        keepalive: bool,
    ) -> None:
        """Initialize the hub wrapper."""
        self._hass = hass
        self._host = host
        self._session = PrinterSession(
            SessionConfig(
                host=host,
                port=port,
                poll_interval_s=poll_interval,
                reconnect_delay_s=reconnect_delay,
                keepalive_enabled=keepalive,
            ),
            client_session=async_get_clientsession(hass),
        )
        self._controller = PrinterController(self._session)
        self._last_outcome: CommandOutcome | None = None
        self._unavailable_logged = False
        self._unsubscribe = self._session.subscribe(self._handle_event)

    @property
    def session(self) -> PrinterSession:
        """Return the underlying session."""
        return self._session

    @property
    def host(self) -> str:
        return self._host

    @property
    def is_connected(self) -> bool:
        """Return if the printer connection is up."""
        return self._session.is_connected

    @property
    def mainboard_id(self) -> str | None:
        return self._session.mainboard_id or None

    @property
    def last_outcome(self) -> CommandOutcome | None:
        """Return the outcome of the most recently acknowledged command."""
        return self._last_outcome

    def snapshot(self) -> DeviceState:
        """Return the latest normalized printer state."""
        return self._session.device_state

    def subscribe(self, callback: Callable[[Event], None]) -> Callable[[], None]:
        """Subscribe to session events."""
        return self._session.subscribe(callback)

    async def async_start(self) -> bool:
        """Open the connection; the session retries on its own if this fails."""
        return await self._session.async_connect()

    async def async_stop(self) -> None:
        """Shut the session down for good."""
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None
        await self._session.async_shutdown()

    async def async_handle_intent(
        self, intent: Intent | str, *args: Any
    ) -> CommandOutcome | None:
        """Run a printer intent and raise if the printer could not take it."""
        try:
            outcome = await self._controller.async_dispatch(intent, *args)
        except ValueError as err:
            raise HomeAssistantError(str(err)) from err
        if isinstance(outcome, NotConnected):
            raise HomeAssistantError(
                f"Printer {self._host} is not connected ({outcome.reason})"
            )
        return outcome

    @callback
    def _handle_event(self, event: Event) -> None:
        if isinstance(event, CommandAcknowledged):
            self._last_outcome = event.outcome
            return
        if isinstance(event, ConnectionStateChanged):
            if event.connected:
                if self._unavailable_logged:
                    _LOGGER.info("Printer %s connection restored", self._host)
                    self._unavailable_logged = False
            elif not self._unavailable_logged:
                _LOGGER.info("Printer %s connection lost", self._host)
                self._unavailable_logged = True
