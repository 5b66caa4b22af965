"""Data models for panel configuration, telemetry frames and visual state."""

from imageit.models._base import ImageItBaseModel
from imageit.models.frames import DataField, DataFrame, FieldConfig, FieldType, infer_field_type
from imageit.models.mapping import (
    ComparisonOperator,
    DefaultCondition,
    ExactCondition,
    Mapping,
    MappingCondition,
    MappingValues,
    RangeCondition,
    ThresholdCondition,
)
from imageit.models.options import PanelOptions
from imageit.models.sensor import Position, QuerySpec, Sensor
from imageit.models.visual import VisualState

__all__ = [
    "ComparisonOperator",
    "DataField",
    "DataFrame",
    "DefaultCondition",
    "ExactCondition",
    "FieldConfig",
    "FieldType",
    "ImageItBaseModel",
    "Mapping",
    "MappingCondition",
    "MappingValues",
    "PanelOptions",
    "Position",
    "QuerySpec",
    "RangeCondition",
    "Sensor",
    "ThresholdCondition",
    "VisualState",
    "infer_field_type",
]
