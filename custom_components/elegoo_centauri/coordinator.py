"""Data update coordinator for the Elegoo Centauri integration."""

from __future__ import annotations

from collections.abc import Callable
import logging

from sdcp_lib import (
    CommandAcknowledged,
    ConnectionStateChanged,
    DeviceState,
    DeviceStateChanged,
    Event,
    SdcpError,
)

from homeassistant.config_entries import ConfigEntry
from homeassistant.core import HomeAssistant, callback
from homeassistant.helpers.update_coordinator import DataUpdateCoordinator, UpdateFailed

from .const import DOMAIN
from .hub import ElegooHub

_LOGGER = logging.getLogger(__name__)


class ElegooDataUpdateCoordinator(DataUpdateCoordinator[DeviceState]):
    """Push-driven coordinator: the session tells us when state changes."""

    def __init__(
        self,
        hass: HomeAssistant,
        hub: ElegooHub,
        entry: ConfigEntry,
    ) -> None:
        """Initialize the coordinator."""
        super().__init__(hass, _LOGGER, name=DOMAIN, config_entry=entry)
        self._hub = hub
        self._unsubscribe: Callable[[], None] | None = None

    async def async_start(self) -> None:
        """Subscribe to hub events and seed the current state."""
        if self._unsubscribe is not None:
            self._unsubscribe()
        self._unsubscribe = self._hub.subscribe(self._handle_event)
        self.async_set_updated_data(self._hub.snapshot())

    async def async_stop(self) -> None:
        """Stop receiving hub events."""
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    async def _async_update_data(self) -> DeviceState:
        """Ask the printer for fresh status; the answer arrives as an event."""
        if self._hub.is_connected:
            try:
                await self._hub.session.async_request_status()
            except SdcpError as err:
                raise UpdateFailed(f"Status request failed: {err}") from err
        return self._hub.snapshot()

    @callback
    def _handle_event(self, event: Event) -> None:
        """Process a session event on the Home Assistant loop."""
        if isinstance(event, DeviceStateChanged):
            _LOGGER.debug(
                "Printer state changed: %s",
                ", ".join(update.path for update in event.updates),
            )
            self.async_set_updated_data(event.state)
            return
        if isinstance(event, (ConnectionStateChanged, CommandAcknowledged)):
            # Availability and last-command sensors read the hub directly.
            self.async_update_listeners()
