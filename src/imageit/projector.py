"""Sensor projection: frames + options → one view per sensor.

This is the composition root of the refresh path. For every configured
sensor it runs query matching and value resolution, evaluates the
sensor's mappings and packages the result for the renderer. Nothing
here mutates its inputs.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from imageit.config import ImageItConfig
from imageit.display import DisplayOptions, format_value
from imageit.mappings import evaluate_sensor
from imageit.models.frames import DataFrame
from imageit.models.mapping import Mapping as MappingRule
from imageit.models.options import PanelOptions
from imageit.models.sensor import Position, Sensor
from imageit.models.visual import VisualState
from imageit.reduce import resolve_value
from imageit.templating import ReplaceVariables, make_replacer

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SensorView:
    """Everything the renderer needs to draw one sensor.

    Parameters
    ----------
    index : int
        Position of the sensor in ``PanelOptions.sensors``.
    sensor : Sensor
        The configured sensor (unchanged).
    name : str
        Sensor name with dashboard variables interpolated.
    link : str
        Sensor link with dashboard variables interpolated.
    value : float or None
        Resolved value; ``None`` when unresolved.
    text : str
        ``value`` formatted with the sensor's unit and decimals.
    visual : VisualState
        Colors, icon and blink flags after mapping evaluation.
    draggable : bool
        Whether the renderer should allow dragging this sensor.
    """

    index: int
    sensor: Sensor
    name: str
    link: str
    value: float | None
    text: str
    visual: VisualState
    draggable: bool

    @property
    def position(self) -> Position:
        return self.sensor.position

    @property
    def resolved(self) -> bool:
        return self.value is not None


def project_sensor(
    index: int,
    sensor: Sensor,
    frames: Sequence[DataFrame],
    options: PanelOptions,
    *,
    config: ImageItConfig,
    display: DisplayOptions | None,
    replace_variables: ReplaceVariables,
    mapping_index: Mapping[str, MappingRule],
) -> SensorView:
    value = resolve_value(frames, sensor.query, display, config=config)
    visual = evaluate_sensor(sensor, value, mapping_index)
    text = format_value(
        value,
        unit=sensor.unit,
        decimals=sensor.decimals,
        no_value=config.unresolved_text,
    ).formatted
    view = SensorView(
        index=index,
        sensor=sensor,
        name=replace_variables(sensor.name),
        link=replace_variables(sensor.link),
        value=value,
        text=text,
        visual=visual,
        draggable=options.sensors_draggable,
    )
    if config.trace_enabled:
        _logger.debug(
            "Sensor %d %r: query=%r value=%r mapping=%r",
            index,
            view.name,
            sensor.query.model_dump(),
            value,
            visual.mapping_id,
        )
    return view


def project_sensors(
    frames: Sequence[DataFrame],
    options: PanelOptions,
    *,
    config: ImageItConfig | None = None,
    display: DisplayOptions | None = None,
    variables: Mapping[str, Any] | None = None,
    replace_variables: ReplaceVariables | None = None,
) -> tuple[SensorView, ...]:
    """Project every sensor of *options* against *frames*, in sensor order.

    Pass either *variables* (a name → value mapping) or a host-provided
    *replace_variables* callable; the callable wins when both are given.
    """
    config = config or ImageItConfig()
    replacer = replace_variables or make_replacer(variables)
    mapping_index = options.mappings_by_id()
    return tuple(
        project_sensor(
            index,
            sensor,
            frames,
            options,
            config=config,
            display=display,
            replace_variables=replacer,
            mapping_index=mapping_index,
        )
        for index, sensor in enumerate(options.sensors)
    )
