from __future__ import annotations

import math

import pytest

from imageit.exceptions import ImageBoundsError, ImageNotMeasuredError
from imageit.image import ImageBounds
from imageit.models.options import PanelOptions
from imageit.models.sensor import Position, Sensor
from imageit.position import PixelDelta, apply_drag, apply_drag_at, delta_to_percent, to_pixels

BOUNDS = ImageBounds(width=400, height=200)


def test_delta_is_converted_relative_to_image_size() -> None:
    assert delta_to_percent(PixelDelta(dx=40, dy=20), BOUNDS) == (10.0, 10.0)


def test_drag_moves_sensor() -> None:
    sensor = Sensor(position=Position(x=20, y=30))
    moved = apply_drag(sensor, PixelDelta(dx=-40, dy=50), BOUNDS)
    assert moved.position == Position(x=10, y=55)


def test_drag_clamps_to_upper_bound() -> None:
    sensor = Sensor(position=Position(x=95, y=95))
    moved = apply_drag(sensor, PixelDelta(dx=40, dy=20), BOUNDS)
    assert moved.position == Position(x=100, y=100)


def test_drag_clamps_to_lower_bound() -> None:
    sensor = Sensor(position=Position(x=5, y=1))
    moved = apply_drag(sensor, PixelDelta(dx=-400, dy=-1000), BOUNDS)
    assert moved.position == Position(x=0, y=0)


@pytest.mark.parametrize("dx", [-10_000, -123.4, -1, 0, 0.5, 77, 10_000])
@pytest.mark.parametrize("dy", [-5_000, -3, 0, 2.25, 9_999])
def test_positions_stay_in_range(dx: float, dy: float) -> None:
    moved = apply_drag(Sensor(position=Position(x=50, y=50)), PixelDelta(dx=dx, dy=dy), BOUNDS)
    assert 0 <= moved.position.x <= 100
    assert 0 <= moved.position.y <= 100


def test_zero_delta_is_noop() -> None:
    sensor = Sensor(name="still", position=Position(x=12.5, y=87.5))
    assert apply_drag(sensor, PixelDelta(), BOUNDS) == sensor


def test_drag_does_not_mutate_input() -> None:
    sensor = Sensor(position=Position(x=10, y=10))
    apply_drag(sensor, PixelDelta(dx=100, dy=100), BOUNDS)
    assert sensor.position == Position(x=10, y=10)


def test_unmeasured_image_is_rejected() -> None:
    with pytest.raises(ImageNotMeasuredError):
        apply_drag(Sensor(), PixelDelta(dx=1, dy=1), None)


def test_empty_image_axis_is_rejected() -> None:
    with pytest.raises(ImageBoundsError):
        apply_drag(Sensor(), PixelDelta(dx=1), ImageBounds(width=0, height=100))


@pytest.mark.parametrize("delta", [PixelDelta(dx=math.nan), PixelDelta(dy=math.inf), PixelDelta(dx=-math.inf)])
def test_non_finite_delta_is_rejected(delta: PixelDelta) -> None:
    sensor = Sensor(position=Position(x=50, y=50))
    with pytest.raises(ImageBoundsError):
        apply_drag(sensor, delta, ImageBounds(width=100, height=100))
    assert sensor.position == Position(x=50, y=50)


def test_empty_axis_without_movement_is_allowed() -> None:
    moved = apply_drag(Sensor(position=Position(x=10, y=10)), PixelDelta(dy=50), ImageBounds(width=0, height=100))
    assert moved.position == Position(x=10, y=60)


def test_apply_drag_at_replaces_only_that_sensor() -> None:
    first, second = Sensor(name="a"), Sensor(name="b", position=Position(x=0, y=0))
    options = PanelOptions(sensors=(first, second))

    updated = apply_drag_at(options, 1, PixelDelta(dx=40, dy=20), BOUNDS)

    assert updated.sensors[0] is first
    assert updated.sensors[1].position == Position(x=10, y=10)
    assert options.sensors[1].position == Position(x=0, y=0)


def test_apply_drag_at_zero_delta_returns_same_options() -> None:
    options = PanelOptions(sensors=(Sensor(),))
    assert apply_drag_at(options, 0, PixelDelta(), BOUNDS) is options


def test_apply_drag_at_bad_index() -> None:
    with pytest.raises(IndexError):
        apply_drag_at(PanelOptions(), 0, PixelDelta(dx=1), BOUNDS)


def test_to_pixels() -> None:
    assert to_pixels(Position(x=25, y=50), BOUNDS) == (100.0, 100.0)
    with pytest.raises(ImageNotMeasuredError):
        to_pixels(Position(), None)
