"""Diagnostics support for Elegoo Centauri printers."""

from __future__ import annotations

from typing import Any

from homeassistant.components.diagnostics import async_redact_data
from homeassistant.config_entries import ConfigEntry
from homeassistant.const import CONF_HOST
from homeassistant.core import HomeAssistant

from .const import CONF_MAINBOARD_ID, DATA_HUB, DOMAIN
from .hub import ElegooHub

TO_REDACT = {CONF_HOST, CONF_MAINBOARD_ID}


async def async_get_config_entry_diagnostics(
    hass: HomeAssistant, entry: ConfigEntry
) -> dict[str, Any]:
    """Return diagnostics for a config entry."""
    data = hass.data.get(DOMAIN, {}).get(entry.entry_id)
    hub: ElegooHub | None = data.get(DATA_HUB) if data else None
    if hub is None:
        return {
            "entry": async_redact_data(dict(entry.data), TO_REDACT),
            "options": dict(entry.options),
            "session": None,
        }

    session = hub.session
    last_error = session.last_error
    outcome = hub.last_outcome
    return {
        "entry": async_redact_data(dict(entry.data), TO_REDACT),
        "options": dict(entry.options),
        "session": {
            "state": session.state.value,
            "connect_attempt": session.connect_attempt,
            "last_error": repr(last_error) if last_error is not None else None,
            "reconnect_pending": session.reconnect_pending,
            "pending_requests": session.pending_requests,
            "mainboard_id_known": bool(session.mainboard_id),
        },
        "last_command": (
            {
                "type": type(outcome).__name__,
                "command": outcome.command,
                "ok": outcome.ok,
            }
            if outcome is not None
            else None
        ),
        "device_state": session.device_state.flatten(),
    }
