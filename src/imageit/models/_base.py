"""Base model for persisted panel configuration and telemetry frames.

Every imageit model inherits from :class:`ImageItBaseModel` which
provides:

* ``alias_generator=to_camel`` so the dashboard's camelCase keys
  (``mappingIds``, ``backgroundColor``) map to snake_case fields.
* ``frozen=True``: configuration is only ever replaced, never mutated.
* A ``model_validator(mode="before")`` that drops ``None`` values and
  applies legacy key aliases so the field default is used.
"""

from __future__ import annotations

from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, model_validator
from pydantic.alias_generators import to_camel


class ImageItBaseModel(BaseModel):
    """Base for imageit models.

    Handles:
    * camelCase → snake_case via ``alias_generator=to_camel``
    * ``None`` values → dropped so the field default is used instead
    * Renamed persisted keys via ``_KEY_ALIASES``
    """

    _KEY_ALIASES: ClassVar[dict[str, str]] = {}
    """Per-model ``{old_key: new_key}`` renames applied before validation."""

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
        alias_generator=to_camel,
    )

    @staticmethod
    def _clean_dict(values: dict[str, Any], aliases: dict[str, str] | None = None) -> dict[str, Any]:
        """Drop ``None`` values and apply key aliases on *values*."""
        working = dict(values)
        if aliases:
            for old_key, new_key in aliases.items():
                if old_key in working and new_key not in working:
                    working[new_key] = working.pop(old_key)
        return {key: value for key, value in working.items() if value is not None}

    @model_validator(mode="before")
    @classmethod
    def _clean_none_values(cls, values: Any) -> Any:
        if not isinstance(values, dict):
            return values
        aliases: dict[str, str] = getattr(cls, "_KEY_ALIASES", {})
        return ImageItBaseModel._clean_dict(values, aliases)
