"""Sensors for the Elegoo Centauri integration."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

from sdcp_lib import DeviceState, format_duration

from homeassistant.components.sensor import (
    SensorDeviceClass,
    SensorEntity,
    SensorEntityDescription,
    SensorStateClass,
)
from homeassistant.config_entries import ConfigEntry
from homeassistant.const import (
    PERCENTAGE,
    EntityCategory,
    UnitOfLength,
    UnitOfTemperature,
)
from homeassistant.core import HomeAssistant
from homeassistant.helpers.entity_platform import AddConfigEntryEntitiesCallback

from .const import DATA_COORDINATOR, DATA_HUB, DOMAIN
from .coordinator import ElegooDataUpdateCoordinator
from .entity import ElegooEntity
from .hub import ElegooHub


@dataclass(frozen=True, slots=True, kw_only=True)
class ElegooSensorDescription(SensorEntityDescription):
    """Describe a printer sensor."""

    key: str
    value_fn: Callable[[ElegooHub, DeviceState], Any]


def _temperature(key: str, value_fn: Callable[[DeviceState], float]) -> ElegooSensorDescription:
    return ElegooSensorDescription(
        key=key,
        translation_key=key,
        device_class=SensorDeviceClass.TEMPERATURE,
        state_class=SensorStateClass.MEASUREMENT,
        native_unit_of_measurement=UnitOfTemperature.CELSIUS,
        value_fn=lambda hub, state: value_fn(state),
    )


def _fan(key: str, value_fn: Callable[[DeviceState], int]) -> ElegooSensorDescription:
    return ElegooSensorDescription(
        key=key,
        translation_key=key,
        state_class=SensorStateClass.MEASUREMENT,
        native_unit_of_measurement=PERCENTAGE,
        value_fn=lambda hub, state: value_fn(state),
    )


def _axis(key: str, value_fn: Callable[[DeviceState], float]) -> ElegooSensorDescription:
    return ElegooSensorDescription(
        key=key,
        translation_key=key,
        entity_category=EntityCategory.DIAGNOSTIC,
        native_unit_of_measurement=UnitOfLength.MILLIMETERS,
        value_fn=lambda hub, state: value_fn(state),
    )


def _last_command(hub: ElegooHub, state: DeviceState) -> str | None:
    outcome = hub.last_outcome
    if outcome is None:
        return None
    if outcome.ok:
        return "success"
    return getattr(outcome, "reason", None) or f"code {getattr(outcome, 'code', '?')}"


SENSORS: tuple[ElegooSensorDescription, ...] = (
    _temperature("nozzle_temperature", lambda s: s.temperatures.nozzle.actual),
    _temperature("nozzle_target", lambda s: s.temperatures.nozzle.target),
    _temperature("bed_temperature", lambda s: s.temperatures.bed.actual),
    _temperature("bed_target", lambda s: s.temperatures.bed.target),
    _temperature("chamber_temperature", lambda s: s.temperatures.chamber.actual),
    _fan("model_fan", lambda s: s.fans.model),
    _fan("auxiliary_fan", lambda s: s.fans.auxiliary),
    _fan("chamber_fan", lambda s: s.fans.chamber),
    ElegooSensorDescription(
        key="print_status",
        translation_key="print_status",
        value_fn=lambda hub, state: state.print_job.status,
    ),
    ElegooSensorDescription(
        key="print_status_code",
        translation_key="print_status_code",
        entity_category=EntityCategory.DIAGNOSTIC,
        entity_registry_enabled_default=False,
        value_fn=lambda hub, state: state.print_job.status_code,
    ),
    ElegooSensorDescription(
        key="progress",
        translation_key="progress",
        state_class=SensorStateClass.MEASUREMENT,
        native_unit_of_measurement=PERCENTAGE,
        value_fn=lambda hub, state: state.print_job.progress,
    ),
    ElegooSensorDescription(
        key="current_layer",
        translation_key="current_layer",
        value_fn=lambda hub, state: state.print_job.current_layer,
    ),
    ElegooSensorDescription(
        key="total_layers",
        translation_key="total_layers",
        value_fn=lambda hub, state: state.print_job.total_layers,
    ),
    ElegooSensorDescription(
        key="print_speed",
        translation_key="print_speed",
        native_unit_of_measurement=PERCENTAGE,
        value_fn=lambda hub, state: state.print_job.speed_pct,
    ),
    ElegooSensorDescription(
        key="filename",
        translation_key="filename",
        value_fn=lambda hub, state: state.print_job.filename or None,
    ),
    ElegooSensorDescription(
        key="elapsed_time",
        translation_key="elapsed_time",
        value_fn=lambda hub, state: format_duration(state.print_job.elapsed_s),
    ),
    ElegooSensorDescription(
        key="remaining_time",
        translation_key="remaining_time",
        value_fn=lambda hub, state: format_duration(state.print_job.remaining_s),
    ),
    ElegooSensorDescription(
        key="total_time",
        translation_key="total_time",
        value_fn=lambda hub, state: format_duration(state.print_job.total_s),
    ),
    _axis("position_x", lambda s: s.position.x),
    _axis("position_y", lambda s: s.position.y),
    _axis("position_z", lambda s: s.position.z),
    _axis("z_offset", lambda s: s.position.z_offset),
    ElegooSensorDescription(
        key="last_update",
        translation_key="last_update",
        device_class=SensorDeviceClass.TIMESTAMP,
        entity_category=EntityCategory.DIAGNOSTIC,
        value_fn=lambda hub, state: state.last_update,
    ),
    ElegooSensorDescription(
        key="last_command",
        translation_key="last_command",
        entity_category=EntityCategory.DIAGNOSTIC,
        value_fn=_last_command,
    ),
)


async def async_setup_entry(
    hass: HomeAssistant,
    entry: ConfigEntry,
    async_add_entities: AddConfigEntryEntitiesCallback,
) -> None:
    """Set up printer sensors from a config entry."""
    data = hass.data[DOMAIN][entry.entry_id]
    hub: ElegooHub = data[DATA_HUB]
    coordinator: ElegooDataUpdateCoordinator = data[DATA_COORDINATOR]
    async_add_entities(
        ElegooSensor(coordinator, hub, entry, description) for description in SENSORS
    )


class ElegooSensor(ElegooEntity, SensorEntity):
    """Representation of a printer telemetry sensor."""

    entity_description: ElegooSensorDescription

    def __init__(
        self,
        coordinator: ElegooDataUpdateCoordinator,
        hub: ElegooHub,
        entry: ConfigEntry,
        description: ElegooSensorDescription,
    ) -> None:
        """Initialize the sensor."""
        super().__init__(coordinator, hub, entry, "sensor", description.key)
        self.entity_description = description

    @property
    def native_value(self) -> Any:
        """Return the current value."""
        return self.entity_description.value_fn(self._hub, self.coordinator.data)
