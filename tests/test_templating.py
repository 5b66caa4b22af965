from __future__ import annotations

import pytest

from imageit.templating import interpolate, make_replacer

VARIABLES = {"room": "kitchen", "hosts": ["a", "b"], "floor": 2}


@pytest.mark.parametrize(
    ("template", "expected"),
    [
        ("Temp $room", "Temp kitchen"),
        ("Temp ${room}", "Temp kitchen"),
        ("Temp ${room:raw}", "Temp kitchen"),
        ("Temp [[room]]", "Temp kitchen"),
        ("/d/plant?var-host=$hosts", "/d/plant?var-host=a,b"),
        ("Floor $floor", "Floor 2"),
        ("$unknown stays", "$unknown stays"),
        ("no variables", "no variables"),
        ("", ""),
    ],
)
def test_interpolate(template: str, expected: str) -> None:
    assert interpolate(template, VARIABLES) == expected


def test_interpolate_without_variables_is_identity() -> None:
    assert interpolate("Temp $room", {}) == "Temp $room"


def test_make_replacer() -> None:
    replace = make_replacer({"room": "garage"})
    assert replace("${room}/$room") == "garage/garage"
    assert make_replacer(None)("$room") == "$room"
