#!/usr/bin/env python3
"""Project a panel's sensors against a telemetry snapshot.

Reads persisted panel options (camelCase JSON, as stored by the
dashboard) and a JSON list of data frames, then prints each sensor's
resolved value and visual state. Handy for checking mappings offline.

Usage
-----
::

    python scripts/render_panel.py --options panel.json --frames frames.json

Options::

    --options FILE       Panel options JSON (required)
    --frames FILE        JSON list of data frames (required)
    --var NAME=VALUE     Dashboard variable for name/link templates (repeatable)
    --json               Output as machine-readable JSON
    -v, --verbose        Enable DEBUG logging
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

# Allow running from the repo root without installing the package.
_repo = Path(__file__).resolve().parent.parent
_src = _repo / "src"
if _src.is_dir():
    sys.path.insert(0, str(_src))

from pydantic import TypeAdapter, ValidationError  # noqa: E402

from imageit import DataFrame, ImageItConfig, PanelOptions, SensorView, project_sensors  # noqa: E402

_FRAMES = TypeAdapter(list[DataFrame])


def _parse_vars(pairs: list[str]) -> dict[str, str]:
    variables: dict[str, str] = {}
    for pair in pairs:
        name, sep, value = pair.partition("=")
        if not sep or not name:
            raise SystemExit(f"--var expects NAME=VALUE, got {pair!r}")
        variables[name] = value
    return variables


def _view_to_dict(view: SensorView) -> dict[str, Any]:
    return {
        "index": view.index,
        "name": view.name,
        "link": view.link,
        "value": view.value,
        "text": view.text,
        "position": view.position.model_dump(),
        "visual": view.visual.model_dump(by_alias=True),
    }


def _format_view(view: SensorView) -> str:
    visual = view.visual
    flags = [
        flag
        for flag, enabled in (
            ("bold", visual.bold),
            ("value-blink", visual.value_blink),
            ("background-blink", visual.background_blink),
            ("hidden", not visual.visible),
        )
        if enabled
    ]
    lines = [
        f"[{view.index}] {view.name}",
        f"    value: {view.text or '<unresolved>'}",
        f"    at: x={view.position.x:.1f}% y={view.position.y:.1f}%",
        f"    colors: font={visual.font_color} background={visual.background_color}",
        f"    mapping: {visual.mapping_id or '-'}",
    ]
    if visual.icon_name:
        lines.append(f"    icon: {visual.icon_name}")
    if flags:
        lines.append(f"    flags: {', '.join(flags)}")
    return "\n".join(lines)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Project image panel sensors against data frames")
    parser.add_argument("--options", required=True, type=Path, help="Panel options JSON file")
    parser.add_argument("--frames", required=True, type=Path, help="Data frames JSON file")
    parser.add_argument("--var", action="append", default=[], metavar="NAME=VALUE", help="Dashboard variable")
    parser.add_argument("--json", action="store_true", help="Output as JSON")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable DEBUG logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        options = PanelOptions.model_validate_json(args.options.read_text(encoding="utf-8"))
        frames = _FRAMES.validate_json(args.frames.read_text(encoding="utf-8"))
    except (OSError, ValidationError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    config = ImageItConfig.from_env(trace_enabled=args.verbose)
    views = project_sensors(frames, options, config=config, variables=_parse_vars(args.var))

    if args.json:
        print(json.dumps([_view_to_dict(view) for view in views], indent=2))
    else:
        for view in views:
            print(_format_view(view))
    return 0


if __name__ == "__main__":
    sys.exit(main())
