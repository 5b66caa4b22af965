"""Position model: pixel drags ↔ image-relative percentages.

Positions are stored in percent of the rendered image box so a panel
looks the same at any size. All functions here are copy-on-write; the
input sensor and options are never modified.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from imageit._constants import PERCENT_MAX
from imageit.exceptions import ImageBoundsError, ImageNotMeasuredError
from imageit.image import ImageBounds
from imageit.models.options import PanelOptions
from imageit.models.sensor import Position, Sensor


@dataclass(frozen=True)
class PixelDelta:
    """Drag displacement in rendered pixels."""

    dx: float = 0.0
    dy: float = 0.0

    @property
    def is_zero(self) -> bool:
        return self.dx == 0 and self.dy == 0


def _require_bounds(bounds: ImageBounds | None) -> ImageBounds:
    if bounds is None:
        raise ImageNotMeasuredError("background image has not been measured yet")
    return bounds


def _axis_percent(pixels: float, dimension: float, axis: str, bounds: ImageBounds) -> float:
    if not math.isfinite(pixels):
        raise ImageBoundsError(
            f"{axis} drag delta must be finite, got {pixels}",
            width=bounds.width,
            height=bounds.height,
        )
    if pixels == 0:
        return 0.0
    if dimension <= 0:
        raise ImageBoundsError(
            f"cannot convert a {axis} drag against an empty image box",
            width=bounds.width,
            height=bounds.height,
        )
    return pixels / dimension * PERCENT_MAX


def delta_to_percent(delta: PixelDelta, bounds: ImageBounds | None) -> tuple[float, float]:
    """Convert a pixel delta to a ``(dx%, dy%)`` delta.

    Raises
    ------
    ImageNotMeasuredError
        If *bounds* is ``None``.
    ImageBoundsError
        If a non-zero delta is applied along an empty image axis, or
        either component of *delta* is NaN or infinite.
    """
    measured = _require_bounds(bounds)
    return (
        _axis_percent(delta.dx, measured.width, "horizontal", measured),
        _axis_percent(delta.dy, measured.height, "vertical", measured),
    )


def apply_drag(sensor: Sensor, delta: PixelDelta, bounds: ImageBounds | None) -> Sensor:
    """Return *sensor* moved by *delta*, each axis clamped to ``[0, 100]``.

    A zero delta returns *sensor* itself. Whether dragging is allowed at
    all (``PanelOptions.lock_sensors``) is the caller's decision.
    """
    dx_pct, dy_pct = delta_to_percent(delta, bounds)
    if delta.is_zero:
        return sensor
    moved = Position(x=sensor.position.x + dx_pct, y=sensor.position.y + dy_pct)
    return sensor.with_position(moved)


def apply_drag_at(options: PanelOptions, index: int, delta: PixelDelta, bounds: ImageBounds | None) -> PanelOptions:
    """Return new options with the sensor at *index* dragged by *delta*."""
    if not 0 <= index < len(options.sensors):
        raise IndexError(f"sensor index {index} out of range")
    sensor = options.sensors[index]
    moved = apply_drag(sensor, delta, bounds)
    if moved is sensor:
        return options
    return options.replace_sensor(index, moved)


def to_pixels(position: Position, bounds: ImageBounds | None) -> tuple[float, float]:
    """Pixel offset of *position* from the image's top-left corner."""
    measured = _require_bounds(bounds)
    return (
        position.x / PERCENT_MAX * measured.width,
        position.y / PERCENT_MAX * measured.height,
    )
