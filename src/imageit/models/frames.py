"""Telemetry frame models.

A refresh delivers a sequence of :class:`DataFrame`, each holding
:class:`DataField` columns whose values are in arrival order.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import Field, model_validator

from imageit._normalize import is_numeric
from imageit.models._base import ImageItBaseModel


class FieldType(StrEnum):
    NUMBER = "number"
    TIME = "time"
    STRING = "string"
    BOOLEAN = "boolean"
    OTHER = "other"


def infer_field_type(values: Any) -> FieldType:
    """Guess a field type from its non-null values.

    A field with no non-null values is treated as numeric so that an
    all-null series still produces a (null) display value.
    """
    present = [value for value in values or () if value is not None]
    if not present:
        return FieldType.NUMBER
    if all(isinstance(value, bool) for value in present):
        return FieldType.BOOLEAN
    if all(is_numeric(value) for value in present):
        return FieldType.NUMBER
    if all(isinstance(value, str) for value in present):
        return FieldType.STRING
    return FieldType.OTHER


class FieldConfig(ImageItBaseModel):
    """Per-field display configuration.

    Parameters
    ----------
    unit : str or None
        Display unit id (e.g. ``"celsius"``) or free-form suffix.
    decimals : int or None
        Fixed number of decimals; ``None`` keeps the value's own precision.
    display_name : str or None
        Overrides the field's display title.
    """

    unit: str | None = None
    decimals: int | None = Field(default=None, ge=0, le=20)
    display_name: str | None = None


class DataField(ImageItBaseModel):
    """One column of a data frame.

    ``labels`` is ``None`` when the field carries no labels at all; an
    empty mapping still counts as carrying labels.
    """

    name: str
    type: FieldType = FieldType.NUMBER
    labels: dict[str, str] | None = None
    values: tuple[Any, ...] = ()
    config: FieldConfig = Field(default_factory=FieldConfig)

    @model_validator(mode="before")
    @classmethod
    def _infer_type(cls, values: Any) -> Any:
        if not isinstance(values, dict) or values.get("type") is not None:
            return values
        merged = dict(values)
        merged["type"] = infer_field_type(values.get("values"))
        return merged

    @property
    def has_labels(self) -> bool:
        return self.labels is not None


class DataFrame(ImageItBaseModel):
    """A single series: an ordered set of fields."""

    name: str | None = None
    ref_id: str | None = None
    fields: tuple[DataField, ...] = ()

    @property
    def length(self) -> int:
        return max((len(field.values) for field in self.fields), default=0)
