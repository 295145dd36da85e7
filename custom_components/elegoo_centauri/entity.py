"""Shared entity helpers for the Elegoo Centauri integration."""

from __future__ import annotations

from homeassistant.config_entries import ConfigEntry
from homeassistant.const import CONF_HOST
from homeassistant.helpers.device_registry import DeviceInfo
from homeassistant.helpers.update_coordinator import CoordinatorEntity

from .const import CONF_MAINBOARD_ID, DEFAULT_MODEL, DOMAIN, MANUFACTURER
from .coordinator import ElegooDataUpdateCoordinator
from .hub import ElegooHub


def unique_base(entry: ConfigEntry) -> str:
    """Return the stable unique ID base for this config entry."""
    if entry.unique_id:
        return entry.unique_id
    mainboard_id = entry.data.get(CONF_MAINBOARD_ID)
    if mainboard_id:
        return str(mainboard_id)
    return entry.data[CONF_HOST]


def build_unique_id(base: str, domain: str, key: str) -> str:
    """Build a stable unique ID in <base>:<domain>:<key> format."""
    return f"{base}:{domain}:{key}"


def device_info_for_entry(hub: ElegooHub, entry: ConfigEntry) -> DeviceInfo:
    """Build device info for entities tied to a config entry."""
    mainboard_id = entry.data.get(CONF_MAINBOARD_ID) or hub.mainboard_id
    return DeviceInfo(
        identifiers={(DOMAIN, unique_base(entry))},
        name=entry.title,
        manufacturer=MANUFACTURER,
        model=DEFAULT_MODEL,
        serial_number=mainboard_id,
    )


class ElegooEntity(CoordinatorEntity[ElegooDataUpdateCoordinator]):
    """Base class for printer entities; unavailable while disconnected."""

    _attr_has_entity_name = True

    def __init__(
        self,
        coordinator: ElegooDataUpdateCoordinator,
        hub: ElegooHub,
        entry: ConfigEntry,
        platform: str,
        key: str,
    ) -> None:
        super().__init__(coordinator)
        self._hub = hub
        self._entry = entry
        self._attr_unique_id = build_unique_id(unique_base(entry), platform, key)
        self._attr_device_info = device_info_for_entry(hub, entry)

    @property
    def available(self) -> bool:
        """Return if the entity is available."""
        return self._hub.is_connected and self.coordinator.data is not None
