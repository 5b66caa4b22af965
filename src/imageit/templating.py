"""Dashboard variable interpolation for sensor names and links.

Supported forms: ``$name``, ``${name}``, ``${name:format}`` and
``[[name]]``. The format modifier is accepted and ignored. References to
unknown variables are left in place.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Mapping, Sequence
from typing import Any

_VARIABLE_RE = re.compile(
    r"\$(?P<plain>\w+)"
    r"|\$\{(?P<braced>\w+)(?::[^}]*)?\}"
    r"|\[\[(?P<bracket>\w+)(?::[^\]]*)?\]\]"
)

ReplaceVariables = Callable[[str], str]


def _render(value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, Sequence):
        return ",".join(_render(item) for item in value)
    return str(value)


def interpolate(template: str, variables: Mapping[str, Any]) -> str:
    """Replace variable references in *template* with values from *variables*."""
    if not template or not variables:
        return template

    def _substitute(match: re.Match[str]) -> str:
        name = match.group("plain") or match.group("braced") or match.group("bracket")
        if name not in variables:
            return match.group(0)
        return _render(variables[name])

    return _VARIABLE_RE.sub(_substitute, template)


def make_replacer(variables: Mapping[str, Any] | None) -> ReplaceVariables:
    """Bind *variables* into a ``replace_variables(text)`` callable."""
    if not variables:
        return lambda text: text
    bound = dict(variables)
    return lambda text: interpolate(text, bound)
