"""Persisted panel options.

:class:`PanelOptions` is the single configuration value owned by the
surrounding panel. It is frozen; every edit goes through one of the
copy-on-write helpers below, which return a new ``PanelOptions`` with
new ``sensors``/``mappings`` tuples. Entries that are not touched keep
their index, so index-based sensor identity survives edits.
"""

from __future__ import annotations

from pydantic import Field

from imageit.models._base import ImageItBaseModel
from imageit.models.mapping import Mapping
from imageit.models.sensor import Sensor


def _check_index(items: tuple, index: int, kind: str) -> None:
    if not 0 <= index < len(items):
        raise IndexError(f"{kind} index {index} out of range (0..{len(items) - 1})")


class PanelOptions(ImageItBaseModel):
    """Panel configuration.

    Parameters
    ----------
    image_url : str
        Background image URL.
    force_image_refresh : bool
        Append a uniqueness token to ``image_url`` on every refresh.
    lock_sensors : bool
        When ``True`` sensors cannot be dragged.
    sensors_text_size : float
        Global sensor text-size scale.
    sensors : tuple of Sensor
        Ordered sensors; order is render (z-) order.
    mappings : tuple of Mapping
        Ordered mapping definitions referenced by id.
    """

    image_url: str = ""
    force_image_refresh: bool = False
    lock_sensors: bool = False
    sensors_text_size: float = Field(default=10.0, ge=0)
    sensors: tuple[Sensor, ...] = ()
    mappings: tuple[Mapping, ...] = ()

    @property
    def sensors_draggable(self) -> bool:
        return not self.lock_sensors

    def mappings_by_id(self) -> dict[str, Mapping]:
        """Index mappings by id; the first definition of a duplicated id wins."""
        index: dict[str, Mapping] = {}
        for mapping in self.mappings:
            index.setdefault(mapping.id, mapping)
        return index

    # ------------------------------------------------------------------
    # Sensors
    # ------------------------------------------------------------------

    def replace_sensor(self, index: int, sensor: Sensor) -> PanelOptions:
        _check_index(self.sensors, index, "sensor")
        sensors = self.sensors[:index] + (sensor,) + self.sensors[index + 1 :]
        return self.model_copy(update={"sensors": sensors})

    def add_sensor(self, sensor: Sensor) -> PanelOptions:
        return self.model_copy(update={"sensors": (*self.sensors, sensor)})

    def remove_sensor(self, index: int) -> PanelOptions:
        _check_index(self.sensors, index, "sensor")
        return self.model_copy(update={"sensors": self.sensors[:index] + self.sensors[index + 1 :]})

    # ------------------------------------------------------------------
    # Mappings
    # ------------------------------------------------------------------

    def add_mapping(self, mapping: Mapping) -> PanelOptions:
        return self.model_copy(update={"mappings": (*self.mappings, mapping)})

    def replace_mapping(self, index: int, mapping: Mapping) -> PanelOptions:
        _check_index(self.mappings, index, "mapping")
        mappings = self.mappings[:index] + (mapping,) + self.mappings[index + 1 :]
        return self.model_copy(update={"mappings": mappings})

    def remove_mapping(self, index: int) -> PanelOptions:
        """Remove a mapping definition.

        Sensors keep their ``mapping_ids``; a reference to the removed id
        becomes a stale key that evaluation skips.
        """
        _check_index(self.mappings, index, "mapping")
        return self.model_copy(update={"mappings": self.mappings[:index] + self.mappings[index + 1 :]})
