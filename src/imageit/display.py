"""Display processing: reduce fields and format numbers for the renderer."""

from __future__ import annotations

import math
from dataclasses import dataclass

from pydantic import Field

from imageit._constants import unit_affixes
from imageit.calcs import ReducerId, reduce_values
from imageit.models._base import ImageItBaseModel
from imageit.models.frames import DataField, DataFrame, FieldType


class DisplayOptions(ImageItBaseModel):
    """Panel-wide display defaults.

    Values set here take precedence over the per-field ``FieldConfig``
    supplied with the data.
    """

    unit: str | None = None
    decimals: int | None = Field(default=None, ge=0, le=20)
    display_name: str | None = None


@dataclass(frozen=True)
class DisplayValue:
    """One reduced, formatted field value."""

    title: str
    numeric: float | None
    text: str
    prefix: str = ""
    suffix: str = ""

    @property
    def formatted(self) -> str:
        return f"{self.prefix}{self.text}{self.suffix}"


def format_number(value: float, decimals: int | None = None) -> str:
    """Format *value* with fixed *decimals*, or at most two when unset."""
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if decimals is not None:
        return f"{value:.{decimals}f}"
    if float(value).is_integer():
        return str(int(value))
    return f"{value:.2f}".rstrip("0").rstrip(".")


def format_value(
    value: float | None,
    *,
    unit: str | None = None,
    decimals: int | None = None,
    title: str = "",
    no_value: str = "",
) -> DisplayValue:
    """Build a :class:`DisplayValue` for *value*; ``None`` renders as *no_value*."""
    if value is None:
        return DisplayValue(title=title, numeric=None, text=no_value)
    prefix, suffix = unit_affixes(unit)
    return DisplayValue(
        title=title,
        numeric=value,
        text=format_number(value, decimals),
        prefix=prefix,
        suffix=suffix,
    )


def field_display_name(field: DataField, options: DisplayOptions | None = None) -> str:
    """Title of a field: explicit display name, else name plus ``{k="v"}`` labels."""
    if options is not None and options.display_name:
        return options.display_name
    if field.config.display_name:
        return field.config.display_name
    if not field.labels:
        return field.name
    labels = ", ".join(f'{key}="{value}"' for key, value in field.labels.items())
    return f"{field.name} {{{labels}}}"


def get_field_display_values(
    frame: DataFrame,
    *,
    reducer: ReducerId | str = ReducerId.LAST,
    options: DisplayOptions | None = None,
) -> list[DisplayValue]:
    """Reduce every numeric field of *frame* to one display value, in field order."""
    options = options or DisplayOptions()
    results: list[DisplayValue] = []
    for field in frame.fields:
        if field.type != FieldType.NUMBER:
            continue
        unit = options.unit if options.unit is not None else field.config.unit
        decimals = options.decimals if options.decimals is not None else field.config.decimals
        results.append(
            format_value(
                reduce_values(field.values, reducer),
                unit=unit,
                decimals=decimals,
                title=field_display_name(field, options),
            )
        )
    return results
