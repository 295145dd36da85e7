"""Buttons for print job control."""

from __future__ import annotations

from dataclasses import dataclass

from sdcp_lib import Intent

from homeassistant.components.button import ButtonEntity, ButtonEntityDescription
from homeassistant.config_entries import ConfigEntry
from homeassistant.core import HomeAssistant
from homeassistant.helpers.entity_platform import AddConfigEntryEntitiesCallback

from .const import DATA_COORDINATOR, DATA_HUB, DOMAIN
from .coordinator import ElegooDataUpdateCoordinator
from .entity import ElegooEntity
from .hub import ElegooHub


@dataclass(frozen=True, slots=True, kw_only=True)
class ElegooButtonDescription(ButtonEntityDescription):
    """Describe a printer button."""

    intent: Intent


BUTTONS: tuple[ElegooButtonDescription, ...] = (
    ElegooButtonDescription(key="pause", translation_key="pause", intent=Intent.PAUSE),
    ElegooButtonDescription(key="resume", translation_key="resume", intent=Intent.RESUME),
    ElegooButtonDescription(key="cancel", translation_key="cancel", intent=Intent.CANCEL),
    ElegooButtonDescription(
        key="refresh", translation_key="refresh", intent=Intent.REFRESH
    ),
)


async def async_setup_entry(
    hass: HomeAssistant,
    entry: ConfigEntry,
    async_add_entities: AddConfigEntryEntitiesCallback,
) -> None:
    """Set up printer buttons from a config entry."""
    data = hass.data[DOMAIN][entry.entry_id]
    hub: ElegooHub = data[DATA_HUB]
    coordinator: ElegooDataUpdateCoordinator = data[DATA_COORDINATOR]
    async_add_entities(
        ElegooButton(coordinator, hub, entry, description) for description in BUTTONS
    )


class ElegooButton(ElegooEntity, ButtonEntity):
    """Send one print job intent when pressed."""

    entity_description: ElegooButtonDescription

    def __init__(
        self,
        coordinator: ElegooDataUpdateCoordinator,
        hub: ElegooHub,
        entry: ConfigEntry,
        description: ElegooButtonDescription,
    ) -> None:
        super().__init__(coordinator, hub, entry, "button", description.key)
        self.entity_description = description

    async def async_press(self) -> None:
        await self._hub.async_handle_intent(self.entity_description.intent)
