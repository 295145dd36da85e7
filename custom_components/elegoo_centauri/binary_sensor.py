"""Binary sensors for the Elegoo Centauri integration."""

from __future__ import annotations

from homeassistant.components.binary_sensor import (
    BinarySensorDeviceClass,
    BinarySensorEntity,
)
from homeassistant.config_entries import ConfigEntry
from homeassistant.const import EntityCategory
from homeassistant.core import HomeAssistant
from homeassistant.helpers.entity_platform import AddConfigEntryEntitiesCallback

from .const import DATA_COORDINATOR, DATA_HUB, DOMAIN
from .coordinator import ElegooDataUpdateCoordinator
from .entity import ElegooEntity
from .hub import ElegooHub


async def async_setup_entry(
    hass: HomeAssistant,
    entry: ConfigEntry,
    async_add_entities: AddConfigEntryEntitiesCallback,
) -> None:
    """Set up the printer connection sensor from a config entry."""
    data = hass.data[DOMAIN][entry.entry_id]
    hub: ElegooHub = data[DATA_HUB]
    coordinator: ElegooDataUpdateCoordinator = data[DATA_COORDINATOR]
    async_add_entities([ElegooConnectionSensor(coordinator, hub, entry)])


class ElegooConnectionSensor(ElegooEntity, BinarySensorEntity):
    """On while the websocket session is CONNECTED."""

    _attr_device_class = BinarySensorDeviceClass.CONNECTIVITY
    _attr_entity_category = EntityCategory.DIAGNOSTIC
    _attr_translation_key = "connection"

    def __init__(
        self,
        coordinator: ElegooDataUpdateCoordinator,
        hub: ElegooHub,
        entry: ConfigEntry,
    ) -> None:
        super().__init__(coordinator, hub, entry, "binary_sensor", "connection")

    @property
    def available(self) -> bool:
        return True

    @property
    def is_on(self) -> bool:
        return self._hub.is_connected
