"""Set up the Elegoo Centauri integration."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

_VENDOR_PATH = Path(__file__).resolve().parent / "vendor" / "sdcp"
if _VENDOR_PATH.exists() and str(_VENDOR_PATH) not in sys.path:
    sys.path.insert(0, str(_VENDOR_PATH))

from homeassistant.config_entries import ConfigEntry
from homeassistant.const import CONF_HOST, CONF_PORT, Platform
from homeassistant.core import HomeAssistant

from .const import (
    CONF_KEEPALIVE,
    CONF_POLL_INTERVAL,
    CONF_RECONNECT_DELAY,
    DATA_COORDINATOR,
    DATA_HUB,
    DEFAULT_KEEPALIVE,
    DEFAULT_POLL_INTERVAL,
    DEFAULT_RECONNECT_DELAY,
    DOMAIN,
)
from .coordinator import ElegooDataUpdateCoordinator
from .hub import ElegooHub

_LOGGER = logging.getLogger(__name__)

PLATFORMS: list[Platform] = [
    Platform.BINARY_SENSOR,
    Platform.BUTTON,
    Platform.LIGHT,
    Platform.NUMBER,
    Platform.SENSOR,
]


async def async_setup_entry(hass: HomeAssistant, entry: ConfigEntry) -> bool:
    """Set up an Elegoo printer from a config entry."""
    host = entry.data[CONF_HOST]
    options = entry.options
    hub = ElegooHub(
        hass,
        host,
        entry.data.get(CONF_PORT),
        poll_interval=options.get(CONF_POLL_INTERVAL, DEFAULT_POLL_INTERVAL),
        reconnect_delay=options.get(CONF_RECONNECT_DELAY, DEFAULT_RECONNECT_DELAY),
        keepalive=options.get(CONF_KEEPALIVE, DEFAULT_KEEPALIVE),
    )
    coordinator = ElegooDataUpdateCoordinator(hass, hub, entry)
    await coordinator.async_start()

    # The session keeps retrying on its own; entities stay unavailable until then.
    if not await hub.async_start():
        _LOGGER.warning(
            "Printer at %s is not reachable yet (%s); retrying in the background",
            host,
            hub.session.last_error,
        )

    hass.data.setdefault(DOMAIN, {})[entry.entry_id] = {
        DATA_HUB: hub,
        DATA_COORDINATOR: coordinator,
    }
    entry.async_on_unload(entry.add_update_listener(_async_update_listener))
    await hass.config_entries.async_forward_entry_setups(entry, PLATFORMS)
    return True


async def async_unload_entry(hass: HomeAssistant, entry: ConfigEntry) -> bool:
    """Unload an Elegoo printer config entry."""
    unload_ok = await hass.config_entries.async_unload_platforms(entry, PLATFORMS)
    data = hass.data.get(DOMAIN, {}).pop(entry.entry_id, None)
    if data is not None:
        coordinator: ElegooDataUpdateCoordinator | None = data.get(DATA_COORDINATOR)
        hub: ElegooHub | None = data.get(DATA_HUB)
        if coordinator is not None:
            await coordinator.async_stop()
        if hub is not None:
            await hub.async_stop()
    return unload_ok


async def _async_update_listener(hass: HomeAssistant, entry: ConfigEntry) -> None:
    """Reload the entry so new session options take effect."""
    await hass.config_entries.async_reload(entry.entry_id)
