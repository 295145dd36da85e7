"""Chamber light (with RGB strip) for Elegoo printers."""

from __future__ import annotations

import logging
from typing import Any

from sdcp_lib import Intent

from homeassistant.components.light import ATTR_RGB_COLOR, ColorMode, LightEntity
from homeassistant.config_entries import ConfigEntry
from homeassistant.core import HomeAssistant
from homeassistant.helpers.entity_platform import AddConfigEntryEntitiesCallback

from .const import DATA_COORDINATOR, DATA_HUB, DOMAIN
from .coordinator import ElegooDataUpdateCoordinator
from .entity import ElegooEntity
from .hub import ElegooHub

_LOGGER = logging.getLogger(__name__)

_DEFAULT_RGB = (255, 255, 255)


async def async_setup_entry(
    hass: HomeAssistant,
    entry: ConfigEntry,
    async_add_entities: AddConfigEntryEntitiesCallback,
) -> None:
    """Set up the chamber light from a config entry."""
    data = hass.data[DOMAIN][entry.entry_id]
    hub: ElegooHub = data[DATA_HUB]
    coordinator: ElegooDataUpdateCoordinator = data[DATA_COORDINATOR]
    async_add_entities([ElegooChamberLight(coordinator, hub, entry)])


class ElegooChamberLight(ElegooEntity, LightEntity):
    """Representation of the chamber light."""

    _attr_color_mode = ColorMode.RGB
    _attr_supported_color_modes = {ColorMode.RGB}
    _attr_translation_key = "chamber_light"

    def __init__(
        self,
        coordinator: ElegooDataUpdateCoordinator,
        hub: ElegooHub,
        entry: ConfigEntry,
    ) -> None:
        """Initialize the light entity."""
        super().__init__(coordinator, hub, entry, "light", "chamber")

    @property
    def is_on(self) -> bool:
        """Return if the chamber light is on."""
        return self.coordinator.data.lighting.chamber

    @property
    def rgb_color(self) -> tuple[int, int, int]:
        return self.coordinator.data.lighting.rgb

    async def async_turn_on(self, **kwargs: Any) -> None:
        """Turn the light on, optionally with a new RGB color."""
        rgb = tuple(int(c) for c in kwargs.get(ATTR_RGB_COLOR, self.rgb_color))
        if not any(rgb):
            rgb = _DEFAULT_RGB
        _LOGGER.debug("Turning chamber light on with rgb=%s", rgb)
        await self._hub.async_handle_intent(Intent.SET_LIGHT, True, rgb)

    async def async_turn_off(self, **kwargs: Any) -> None:
        """Turn the light off, keeping the current RGB color."""
        await self._hub.async_handle_intent(Intent.SET_LIGHT, False, self.rgb_color)
