"""Target temperature controls for the nozzle and heated bed."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from sdcp_lib import DeviceState, Intent
from sdcp_lib.codes import MAX_BED_TEMP, MAX_NOZZLE_TEMP

from homeassistant.components.number import (
    NumberDeviceClass,
    NumberEntity,
    NumberEntityDescription,
    NumberMode,
)
from homeassistant.config_entries import ConfigEntry
from homeassistant.const import UnitOfTemperature
from homeassistant.core import HomeAssistant
from homeassistant.helpers.entity_platform import AddConfigEntryEntitiesCallback

from .const import DATA_COORDINATOR, DATA_HUB, DOMAIN
from .coordinator import ElegooDataUpdateCoordinator
from .entity import ElegooEntity
from .hub import ElegooHub


@dataclass(frozen=True, slots=True, kw_only=True)
class ElegooNumberDescription(NumberEntityDescription):
    """Describe a target temperature control."""

    intent: Intent
    value_fn: Callable[[DeviceState], float]


NUMBERS: tuple[ElegooNumberDescription, ...] = (
    ElegooNumberDescription(
        key="nozzle_target_control",
        translation_key="nozzle_target_control",
        device_class=NumberDeviceClass.TEMPERATURE,
        native_unit_of_measurement=UnitOfTemperature.CELSIUS,
        native_min_value=0,
        native_max_value=MAX_NOZZLE_TEMP,
        native_step=1,
        mode=NumberMode.BOX,
        intent=Intent.SET_NOZZLE_TARGET,
        value_fn=lambda state: state.temperatures.nozzle.target,
    ),
    ElegooNumberDescription(
        key="bed_target_control",
        translation_key="bed_target_control",
        device_class=NumberDeviceClass.TEMPERATURE,
        native_unit_of_measurement=UnitOfTemperature.CELSIUS,
        native_min_value=0,
        native_max_value=MAX_BED_TEMP,
        native_step=1,
        mode=NumberMode.BOX,
        intent=Intent.SET_BED_TARGET,
        value_fn=lambda state: state.temperatures.bed.target,
    ),
)


async def async_setup_entry(
    hass: HomeAssistant,
    entry: ConfigEntry,
    async_add_entities: AddConfigEntryEntitiesCallback,
) -> None:
    """Set up target temperature controls from a config entry."""
    data = hass.data[DOMAIN][entry.entry_id]
    hub: ElegooHub = data[DATA_HUB]
    coordinator: ElegooDataUpdateCoordinator = data[DATA_COORDINATOR]
    async_add_entities(
        ElegooTargetNumber(coordinator, hub, entry, description)
        for description in NUMBERS
    )


class ElegooTargetNumber(ElegooEntity, NumberEntity):
    """A heater target; the printer reports the applied value back in Status."""

    entity_description: ElegooNumberDescription

    def __init__(
        self,
        coordinator: ElegooDataUpdateCoordinator,
        hub: ElegooHub,
        entry: ConfigEntry,
        description: ElegooNumberDescription,
    ) -> None:
        super().__init__(coordinator, hub, entry, "number", description.key)
        self.entity_description = description

    @property
    def native_value(self) -> float:
        return self.entity_description.value_fn(self.coordinator.data)

    async def async_set_native_value(self, value: float) -> None:
        await self._hub.async_handle_intent(self.entity_description.intent, value)
