"""Mapping evaluation: turn a resolved value into a visual state."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping as MappingABC, Sequence

from imageit.models.mapping import Mapping
from imageit.models.sensor import Sensor
from imageit.models.visual import VisualState

_logger = logging.getLogger(__name__)


def resolve_mappings(
    mappings: Sequence[Mapping] | MappingABC[str, Mapping],
    mapping_ids: Iterable[str],
) -> list[Mapping]:
    """Look up *mapping_ids* in order, dropping ids with no definition.

    *mappings* may be a sequence (first definition of an id wins) or a
    prebuilt ``{id: Mapping}`` index. Duplicate ids are kept.
    """
    index: MappingABC[str, Mapping]
    if isinstance(mappings, MappingABC):
        index = mappings
    else:
        by_id: dict[str, Mapping] = {}
        for mapping in mappings:
            by_id.setdefault(mapping.id, mapping)
        index = by_id

    resolved: list[Mapping] = []
    for mapping_id in mapping_ids:
        mapping = index.get(mapping_id)
        if mapping is None:
            _logger.debug("Skipping unknown mapping id %r", mapping_id)
            continue
        resolved.append(mapping)
    return resolved


def first_match(value: float | None, mappings: Iterable[Mapping]) -> Mapping | None:
    """First mapping whose condition holds for *value*; nothing matches ``None``."""
    if value is None:
        return None
    for mapping in mappings:
        if mapping.matches(value):
            return mapping
    return None


def evaluate(
    value: float | None,
    mappings: Sequence[Mapping] | MappingABC[str, Mapping],
    mapping_ids: Iterable[str],
    *,
    static: VisualState | Sensor | None = None,
) -> VisualState:
    """Evaluate *mapping_ids* against *value*; first match wins.

    *static* is the style that stands when no mapping matches; a
    :class:`Sensor` is converted with :meth:`VisualState.from_sensor`.
    Without it, a neutral default style is used.
    """
    if isinstance(static, Sensor):
        base = VisualState.from_sensor(static)
    elif static is None:
        base = VisualState.from_sensor(Sensor())
    else:
        base = static

    matched = first_match(value, resolve_mappings(mappings, mapping_ids))
    if matched is None:
        return base
    return base.with_overrides(matched.values, mapping_id=matched.id)


def evaluate_sensor(
    sensor: Sensor,
    value: float | None,
    mappings: Sequence[Mapping] | MappingABC[str, Mapping],
) -> VisualState:
    return evaluate(value, mappings, sensor.mapping_ids, static=sensor)
