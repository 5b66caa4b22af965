"""Tests for pydantic model parsing of panel options and frames."""

from __future__ import annotations

import math

import pytest
from pydantic import ValidationError

from imageit.models.frames import DataField, DataFrame, FieldType, infer_field_type
from imageit.models.mapping import (
    ComparisonOperator,
    DefaultCondition,
    ExactCondition,
    Mapping,
    MappingValues,
    RangeCondition,
    ThresholdCondition,
)
from imageit.models.options import PanelOptions
from imageit.models.sensor import Position, QuerySpec, Sensor

# ------------------------------------------------------------------
# Position
# ------------------------------------------------------------------


class TestPosition:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            (-5, 0.0),
            (0, 0.0),
            (42.5, 42.5),
            (100, 100.0),
            (250, 100.0),
            (math.inf, 100.0),
            (-math.inf, 0.0),
            (math.nan, 0.0),
        ],
    )
    def test_axes_are_clamped(self, raw: float, expected: float) -> None:
        position = Position(x=raw, y=raw)
        assert position.x == expected
        assert position.y == expected

    def test_position_is_frozen(self) -> None:
        position = Position(x=1, y=2)
        with pytest.raises(ValidationError):
            position.x = 3  # type: ignore[misc]


# ------------------------------------------------------------------
# Sensor / PanelOptions
# ------------------------------------------------------------------


class TestPanelOptions:
    SAMPLE: dict = {
        "imageUrl": "https://example.com/plant.png",
        "forceImageRefresh": True,
        "lockSensors": False,
        "sensorsTextSize": 12,
        "sensors": [
            {
                "name": "Boiler $room",
                "query": {"id": "temp", "alias": "boiler"},
                "position": {"x": 10, "y": 120},
                "mappingIds": ["hot", "gone"],
                "backgroundColor": "#111",
                "fontColor": "#eee",
                "bold": True,
                "iconName": "fire",
                "unit": "celsius",
                "decimals": 1,
                "valueBlink": False,
                "backgroundBlink": True,
                "link": "https://example.com/$room",
                "visible": True,
            }
        ],
        "mappings": [
            {
                "id": "hot",
                "description": "too hot",
                "condition": {"kind": "threshold", "operator": "gt", "compareTo": 80},
                "values": {"fontColor": "red", "valueBlink": True},
            }
        ],
    }

    def test_parses_camel_case_payload(self) -> None:
        options = PanelOptions.model_validate(self.SAMPLE)

        assert options.image_url == "https://example.com/plant.png"
        assert options.force_image_refresh is True
        assert options.sensors_text_size == 12
        sensor = options.sensors[0]
        assert sensor.query == QuerySpec(id="temp", alias="boiler")
        assert sensor.mapping_ids == ("hot", "gone")
        assert sensor.position == Position(x=10, y=100)
        assert sensor.background_blink is True
        assert options.mappings[0].values.font_color == "red"

    def test_dump_round_trips_with_aliases(self) -> None:
        options = PanelOptions.model_validate(self.SAMPLE)
        dumped = options.model_dump(by_alias=True)

        assert dumped["sensors"][0]["mappingIds"] == ("hot", "gone")
        assert PanelOptions.model_validate(dumped) == options

    def test_none_values_fall_back_to_defaults(self) -> None:
        sensor = Sensor.model_validate({"name": "A", "unit": None, "bold": None, "query": None})
        assert sensor.bold is False
        assert sensor.query == QuerySpec()

    def test_sensors_draggable_follows_lock_flag(self) -> None:
        assert PanelOptions(lock_sensors=False).sensors_draggable is True
        assert PanelOptions(lock_sensors=True).sensors_draggable is False

    def test_replace_sensor_is_copy_on_write(self) -> None:
        first, second = Sensor(name="first"), Sensor(name="second")
        options = PanelOptions(sensors=(first, second))
        replacement = Sensor(name="replaced")

        updated = options.replace_sensor(1, replacement)

        assert updated is not options
        assert options.sensors == (first, second)
        assert updated.sensors == (first, replacement)
        assert updated.sensors[0] is first

    def test_add_and_remove_keep_order(self) -> None:
        a, b, c = Sensor(name="a"), Sensor(name="b"), Sensor(name="c")
        options = PanelOptions(sensors=(a, b))

        added = options.add_sensor(c)
        removed = added.remove_sensor(0)

        assert [s.name for s in added.sensors] == ["a", "b", "c"]
        assert [s.name for s in removed.sensors] == ["b", "c"]
        assert [s.name for s in options.sensors] == ["a", "b"]

    def test_replace_sensor_rejects_bad_index(self) -> None:
        with pytest.raises(IndexError):
            PanelOptions(sensors=(Sensor(),)).replace_sensor(3, Sensor())

    def test_remove_mapping_leaves_sensor_references(self) -> None:
        options = PanelOptions(
            sensors=(Sensor(mapping_ids=("m1",)),),
            mappings=(Mapping(id="m1"), Mapping(id="m2")),
        )

        updated = options.remove_mapping(0)

        assert [m.id for m in updated.mappings] == ["m2"]
        assert updated.sensors[0].mapping_ids == ("m1",)

    def test_mappings_by_id_prefers_first_definition(self) -> None:
        first = Mapping(id="dup", description="first")
        options = PanelOptions(mappings=(first, Mapping(id="dup", description="second")))
        assert options.mappings_by_id()["dup"] is first


# ------------------------------------------------------------------
# Mapping
# ------------------------------------------------------------------


class TestMapping:
    def test_condition_kinds_are_discriminated(self) -> None:
        kinds = {
            "exact": ({"kind": "exact", "compareTo": 1}, ExactCondition),
            "threshold": ({"kind": "threshold", "operator": "lt", "compareTo": 1}, ThresholdCondition),
            "range": ({"kind": "range", "low": 0, "high": 5}, RangeCondition),
            "default": ({"kind": "default"}, DefaultCondition),
        }
        for payload, cls in kinds.values():
            mapping = Mapping.model_validate({"id": "m", "condition": payload})
            assert isinstance(mapping.condition, cls)

    def test_missing_condition_defaults_to_match_all(self) -> None:
        assert isinstance(Mapping(id="m").condition, DefaultCondition)

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("=", ComparisonOperator.EQ),
            ("!=", ComparisonOperator.NE),
            ("<", ComparisonOperator.LT),
            ("<=", ComparisonOperator.LE),
            (">", ComparisonOperator.GT),
            (">=", ComparisonOperator.GE),
            ("GE", ComparisonOperator.GE),
            ("ne", ComparisonOperator.NE),
        ],
    )
    def test_operator_spellings(self, raw: str, expected: ComparisonOperator) -> None:
        condition = ThresholdCondition.model_validate({"operator": raw, "compareTo": 0})
        assert condition.operator == expected

    def test_unknown_operator_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ThresholdCondition.model_validate({"operator": "~", "compareTo": 0})

    def test_legacy_mapping_is_upgraded(self) -> None:
        mapping = Mapping.model_validate(
            {
                "id": "legacy",
                "operator": ">=",
                "compareTo": "30",
                "isSensorVisible": False,
                "values": {"fontColor": "orange", "backgroundBlink": True},
            }
        )

        assert mapping.condition == ThresholdCondition(operator=ComparisonOperator.GE, compare_to=30)
        assert mapping.values == MappingValues(font_color="orange", background_blink=True, visible=False)

    def test_legacy_mapping_without_compare_value_keeps_default(self) -> None:
        mapping = Mapping.model_validate({"id": "draft", "operator": ">", "compareTo": None, "values": {"bold": True}})

        assert isinstance(mapping.condition, DefaultCondition)
        assert mapping.values == MappingValues(bold=True)

    def test_unfinished_legacy_mapping_does_not_block_panel(self) -> None:
        options = PanelOptions.model_validate(
            {
                "sensors": [{"name": "temp", "mappingIds": ["draft"]}],
                "mappings": [{"id": "draft", "operator": "=", "compareTo": None}],
            }
        )

        assert len(options.sensors) == 1
        assert options.mappings[0].id == "draft"

    def test_range_bounds_must_be_ordered(self) -> None:
        with pytest.raises(ValidationError):
            RangeCondition(low=10, high=1)

    def test_open_range(self) -> None:
        assert RangeCondition(low=5).matches(1e9)
        assert not RangeCondition(low=5).matches(4.9)
        assert RangeCondition(high=5).matches(-1e9)
        assert RangeCondition(low=1, high=2).matches(2)


# ------------------------------------------------------------------
# Frames
# ------------------------------------------------------------------


class TestFrames:
    def test_field_type_inferred_from_values(self) -> None:
        assert DataField(name="v", values=(1, 2.5, None)).type == FieldType.NUMBER
        assert DataField(name="s", values=("a", "b")).type == FieldType.STRING
        assert DataField(name="b", values=(True, False)).type == FieldType.BOOLEAN
        assert DataField(name="t", type="time", values=(1, 2)).type == FieldType.TIME

    def test_all_null_field_counts_as_number(self) -> None:
        assert infer_field_type([None, None]) == FieldType.NUMBER

    def test_labels_absent_vs_empty(self) -> None:
        assert DataField(name="a").has_labels is False
        assert DataField(name="a", labels={}).has_labels is True

    def test_frame_parses_nested_config(self) -> None:
        frame = DataFrame.model_validate(
            {
                "refId": "A",
                "fields": [{"name": "temp", "values": [1, 2], "config": {"unit": "celsius", "decimals": 2}}],
            }
        )
        assert frame.ref_id == "A"
        assert frame.fields[0].config.unit == "celsius"
        assert frame.length == 2
