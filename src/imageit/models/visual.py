"""Resolved presentation of a sensor after mapping evaluation."""

from __future__ import annotations

from imageit.models._base import ImageItBaseModel
from imageit.models.mapping import MappingValues
from imageit.models.sensor import Sensor


class VisualState(ImageItBaseModel):
    """Color, icon and blink state handed to the renderer.

    ``mapping_id`` names the mapping that supplied the overrides, or is
    ``None`` when the sensor's static style stands.
    """

    background_color: str
    font_color: str
    bold: bool = False
    icon_name: str | None = None
    value_blink: bool = False
    background_blink: bool = False
    visible: bool = True
    mapping_id: str | None = None

    @classmethod
    def from_sensor(cls, sensor: Sensor) -> VisualState:
        """The sensor's static style, unmodified."""
        return cls(
            background_color=sensor.background_color,
            font_color=sensor.font_color,
            bold=sensor.bold,
            icon_name=sensor.icon_name,
            value_blink=sensor.value_blink,
            background_blink=sensor.background_blink,
            visible=sensor.visible,
        )

    def with_overrides(self, overrides: MappingValues, *, mapping_id: str) -> VisualState:
        update = overrides.model_dump(exclude_none=True)
        update["mapping_id"] = mapping_id
        return self.model_copy(update=update)
