"""Query matching: locate the frame and field a sensor reads from."""

from __future__ import annotations

from collections.abc import Iterator, Sequence

from imageit.models.frames import DataField, DataFrame
from imageit.models.sensor import QuerySpec


def name_matches(query: QuerySpec, field: DataField) -> bool:
    """``True`` when *field* is selected by ``query.id`` (empty id selects any)."""
    return not query.id or query.id == field.name


def label_matches(query: QuerySpec, field: DataField, label_key: str) -> bool:
    """``True`` when *field* carries labels and ``labels[label_key]`` equals the alias.

    An empty alias accepts any labelled field.
    """
    if field.labels is None:
        return False
    return not query.alias or field.labels.get(label_key) == query.alias


def iter_matching_frames(frames: Sequence[DataFrame], query: QuerySpec) -> Iterator[DataFrame]:
    """Yield, in order, every frame holding at least one name-matching field."""
    for frame in frames:
        if any(name_matches(query, field) for field in frame.fields):
            yield frame


def find_frame(frames: Sequence[DataFrame], query: QuerySpec) -> DataFrame | None:
    return next(iter_matching_frames(frames, query), None)


def match_field(frames: Sequence[DataFrame], query: QuerySpec) -> DataField | None:
    """Return the first field, scanning frames then fields in order, selected by *query*.

    ``None`` when nothing matches; that is an unresolved sensor, not an error.
    """
    for frame in frames:
        for field in frame.fields:
            if name_matches(query, field):
                return field
    return None
