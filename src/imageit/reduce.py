"""Value resolution: one current value per sensor per refresh.

Two mutually exclusive paths, selected by the query id:

* **label path** (``query.id == config.sentinel_query_id``): the raw last
  element of the first field that matches by name *and* carries a
  ``config.label_key`` label equal to ``query.alias``.
* **general path**: every numeric field of the first matching frame is
  reduced and formatted; the first display value whose title contains
  ``query.alias`` supplies the number.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from imageit._normalize import safe_float
from imageit.config import ImageItConfig
from imageit.display import DisplayOptions, get_field_display_values
from imageit.matching import find_frame, label_matches, name_matches
from imageit.models.frames import DataField, DataFrame
from imageit.models.sensor import QuerySpec

_logger = logging.getLogger(__name__)

_DEFAULT_CONFIG = ImageItConfig()


def last_raw_value(field: DataField) -> float | None:
    """Last element of *field*'s values; ``None`` for an empty or null tail."""
    if not field.values:
        return None
    return safe_float(field.values[-1])


def find_labelled_field(
    frames: Sequence[DataFrame],
    query: QuerySpec,
    *,
    label_key: str,
) -> DataField | None:
    frame = find_frame(frames, query)
    if frame is None:
        return None
    for field in frame.fields:
        if name_matches(query, field) and label_matches(query, field, label_key):
            return field
    return None


def resolve_labelled(frames: Sequence[DataFrame], query: QuerySpec, *, label_key: str) -> float | None:
    field = find_labelled_field(frames, query, label_key=label_key)
    if field is None:
        _logger.debug("No labelled field for query id=%r %s=%r", query.id, label_key, query.alias)
        return None
    return last_raw_value(field)


def resolve_reduced(
    frames: Sequence[DataFrame],
    query: QuerySpec,
    *,
    display: DisplayOptions | None = None,
    reducer: str = "last",
) -> float | None:
    frame = find_frame(frames, query)
    if frame is None:
        _logger.debug("No frame matches query id=%r", query.id)
        return None
    for display_value in get_field_display_values(frame, reducer=reducer, options=display):
        # An empty alias is a substring of every title.
        if display_value.title and query.alias in display_value.title:
            return display_value.numeric
    _logger.debug("No display title contains alias %r", query.alias)
    return None


def resolve_value(
    frames: Sequence[DataFrame],
    query: QuerySpec,
    display: DisplayOptions | None = None,
    *,
    config: ImageItConfig | None = None,
) -> float | None:
    """Resolve the current value for *query*, or ``None`` when unresolved."""
    config = config or _DEFAULT_CONFIG
    if query.id == config.sentinel_query_id:
        return resolve_labelled(frames, query, label_key=config.label_key)
    return resolve_reduced(frames, query, display=display, reducer=config.reducer)
