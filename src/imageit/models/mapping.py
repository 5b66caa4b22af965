"""Mapping rule models.

A :class:`Mapping` pairs a value condition with the visual overrides
applied when the condition holds. Conditions are tagged on ``kind``:

* ``exact``: ``value == compare_to``
* ``threshold``: ``value <operator> compare_to``
* ``range``: ``low <= value <= high``, either bound may be open
* ``default``: any resolved value
"""

from __future__ import annotations

import operator as _op
from collections.abc import Callable
from enum import StrEnum
from typing import Annotated, Any, ClassVar, Literal

from pydantic import Field, field_validator, model_validator

from imageit.models._base import ImageItBaseModel


class ComparisonOperator(StrEnum):
    EQ = "eq"
    NE = "ne"
    LT = "lt"
    LE = "le"
    GT = "gt"
    GE = "ge"


# Persisted panels store operators as symbols or upper-case names.
_OPERATOR_ALIASES: dict[str, ComparisonOperator] = {
    "=": ComparisonOperator.EQ,
    "==": ComparisonOperator.EQ,
    "!=": ComparisonOperator.NE,
    "<>": ComparisonOperator.NE,
    "<": ComparisonOperator.LT,
    "<=": ComparisonOperator.LE,
    ">": ComparisonOperator.GT,
    ">=": ComparisonOperator.GE,
}

_OPERATOR_FUNCS: dict[ComparisonOperator, Callable[[float, float], bool]] = {
    ComparisonOperator.EQ: _op.eq,
    ComparisonOperator.NE: _op.ne,
    ComparisonOperator.LT: _op.lt,
    ComparisonOperator.LE: _op.le,
    ComparisonOperator.GT: _op.gt,
    ComparisonOperator.GE: _op.ge,
}


def parse_operator(value: Any) -> Any:
    """Map ``"<="``, ``"LE"`` or ``"le"`` to :class:`ComparisonOperator`.

    Unrecognised input is returned unchanged so validation reports it.
    """
    if not isinstance(value, str):
        return value
    token = value.strip()
    if token in _OPERATOR_ALIASES:
        return _OPERATOR_ALIASES[token]
    return token.lower()


class ExactCondition(ImageItBaseModel):
    kind: Literal["exact"] = "exact"
    compare_to: float

    def matches(self, value: float) -> bool:
        return value == self.compare_to


class ThresholdCondition(ImageItBaseModel):
    kind: Literal["threshold"] = "threshold"
    operator: ComparisonOperator = ComparisonOperator.EQ
    compare_to: float

    @field_validator("operator", mode="before")
    @classmethod
    def _parse_operator(cls, value: Any) -> Any:
        return parse_operator(value)

    def matches(self, value: float) -> bool:
        return _OPERATOR_FUNCS[self.operator](value, self.compare_to)


class RangeCondition(ImageItBaseModel):
    """Inclusive range; a missing bound leaves that side open."""

    kind: Literal["range"] = "range"
    low: float | None = None
    high: float | None = None

    @model_validator(mode="after")
    def _check_bounds(self) -> RangeCondition:
        if self.low is not None and self.high is not None and self.low > self.high:
            raise ValueError(f"range low ({self.low}) must not exceed high ({self.high})")
        return self

    def matches(self, value: float) -> bool:
        if self.low is not None and value < self.low:
            return False
        return not (self.high is not None and value > self.high)


class DefaultCondition(ImageItBaseModel):
    kind: Literal["default"] = "default"

    def matches(self, value: float) -> bool:
        return True


MappingCondition = Annotated[
    ExactCondition | ThresholdCondition | RangeCondition | DefaultCondition,
    Field(discriminator="kind"),
]


class MappingValues(ImageItBaseModel):
    """Visual overrides applied by a matching mapping.

    ``None`` leaves the sensor's static attribute in place.
    """

    _KEY_ALIASES: ClassVar[dict[str, str]] = {
        "isSensorVisible": "visible",
    }

    font_color: str | None = None
    background_color: str | None = None
    bold: bool | None = None
    icon_name: str | None = None
    value_blink: bool | None = None
    background_blink: bool | None = None
    visible: bool | None = None


class Mapping(ImageItBaseModel):
    """A condition plus the overrides it applies.

    Parameters
    ----------
    id : str
        Stable identifier referenced from ``Sensor.mapping_ids``.
    description : str
        Free-form label shown in the editor.
    condition : MappingCondition
        Tagged condition evaluated against the sensor's value.
    values : MappingValues
        Overrides applied when ``condition`` matches.
    """

    id: str
    description: str = ""
    condition: MappingCondition = Field(default_factory=DefaultCondition)
    values: MappingValues = Field(default_factory=MappingValues)

    @model_validator(mode="before")
    @classmethod
    def _upgrade_legacy_condition(cls, values: Any) -> Any:
        """Accept ``{operator, compareTo}`` at top level as a threshold."""
        if not isinstance(values, dict) or "condition" in values:
            return values
        if "compareTo" not in values and "compare_to" not in values:
            return values
        merged = dict(values)
        compare_to = merged.pop("compareTo", merged.pop("compare_to", None))
        operator = merged.pop("operator", None) or ComparisonOperator.EQ
        # An "isSensorVisible" flag lived next to the operator in old panels.
        if "isSensorVisible" in merged:
            overrides = dict(merged.get("values") or {})
            overrides.setdefault("isSensorVisible", merged.pop("isSensorVisible"))
            merged["values"] = overrides
        # An unfinished rule without a comparison value keeps the default condition.
        if compare_to is not None:
            merged["condition"] = {"kind": "threshold", "operator": operator, "compareTo": compare_to}
        return merged

    def matches(self, value: float) -> bool:
        return self.condition.matches(value)
