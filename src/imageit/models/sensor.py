"""Sensor configuration model."""

from __future__ import annotations

from typing import Any

from pydantic import Field, field_validator

from imageit._normalize import clamp_percent
from imageit.models._base import ImageItBaseModel


class Position(ImageItBaseModel):
    """Sensor position in percent of the rendered image box.

    Both axes are clamped into ``[0, 100]`` whenever a position is
    constructed, so an out-of-range coordinate can never be stored.
    """

    x: float = 50.0
    y: float = 50.0

    @field_validator("x", "y", mode="before")
    @classmethod
    def _clamp(cls, value: Any) -> float:
        return clamp_percent(value)


class QuerySpec(ImageItBaseModel):
    """Field selection for a sensor.

    Parameters
    ----------
    id : str
        Field name to match. Empty matches any field. The sentinel
        ``"app"`` selects the label-based lookup path.
    alias : str
        Label value (sentinel path) or display-title substring
        (general path).
    """

    id: str = ""
    alias: str = ""


class Sensor(ImageItBaseModel):
    """A positioned overlay widget bound to one telemetry value.

    Sensors are identified by their index in ``PanelOptions.sensors``.
    ``mapping_ids`` are lookup keys into ``PanelOptions.mappings``; their
    order is evaluation precedence.
    """

    name: str = "Name"
    query: QuerySpec = Field(default_factory=QuerySpec)
    position: Position = Field(default_factory=Position)
    mapping_ids: tuple[str, ...] = ()
    visible: bool = True
    background_color: str = "#000"
    font_color: str = "#FFF"
    bold: bool = False
    icon_name: str | None = None
    unit: str | None = None
    decimals: int | None = Field(default=None, ge=0, le=20)
    value_blink: bool = False
    background_blink: bool = False
    link: str = ""

    def with_position(self, position: Position) -> Sensor:
        """Return a copy of this sensor at *position*."""
        return self.model_copy(update={"position": position})
