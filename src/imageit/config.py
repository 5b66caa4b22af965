"""Engine configuration for imageit."""

from __future__ import annotations

import dataclasses
import os
from typing import Any

from imageit._constants import DEFAULT_LABEL_KEY, DEFAULT_TEXT_SIZE_DIVISOR, SENTINEL_QUERY_ID
from imageit.calcs import ReducerId
from imageit.exceptions import ImageItConfigError


def _env_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "y", "on"}:
        return True
    if normalized in {"0", "false", "no", "n", "off"}:
        return False
    return default


def _env_float(env_key: str, value: str) -> float:
    try:
        return float(value)
    except ValueError as exc:
        raise ImageItConfigError(f"{env_key} must be a number, got {value!r}") from exc


@dataclasses.dataclass(frozen=True)
class ImageItConfig:
    """Engine configuration.

    Parameters
    ----------
    sentinel_query_id : str
        Query id that switches value resolution to the label-based
        lookup path. Defaults to ``"app"``.
    label_key : str
        Label compared against ``QuerySpec.alias`` on the label-based
        path. Defaults to ``"tile"``.
    unresolved_text : str
        Text rendered for a sensor whose value could not be resolved.
    text_size_divisor : float
        Sensor font size in pixels is ``sensors_text_size * image_width
        / text_size_divisor``.
    reducer : str
        Reducer id used by the general resolution path
        (see :class:`imageit.calcs.ReducerId`).
    trace_enabled : bool
        Emit a DEBUG record for every projected sensor.
    """

    sentinel_query_id: str = SENTINEL_QUERY_ID
    label_key: str = DEFAULT_LABEL_KEY
    unresolved_text: str = ""
    text_size_divisor: float = DEFAULT_TEXT_SIZE_DIVISOR
    reducer: str = "last"
    trace_enabled: bool = False

    def __post_init__(self) -> None:
        if self.text_size_divisor <= 0:
            raise ImageItConfigError(f"text_size_divisor must be positive, got {self.text_size_divisor}")
        try:
            ReducerId(self.reducer)
        except ValueError as exc:
            raise ImageItConfigError(f"unknown reducer {self.reducer!r}") from exc

    @classmethod
    def from_env(cls, **overrides: Any) -> ImageItConfig:
        """Create configuration from ``IMAGEIT_*`` environment variables.

        Explicit keyword arguments override environment values.

        Raises
        ------
        ImageItConfigError
            When a numeric variable cannot be parsed or a value is invalid.
        """
        env = os.environ

        _ENV_CONFIG_MAP = {
            "IMAGEIT_SENTINEL_QUERY_ID": "sentinel_query_id",
            "IMAGEIT_LABEL_KEY": "label_key",
            "IMAGEIT_UNRESOLVED_TEXT": "unresolved_text",
            "IMAGEIT_REDUCER": "reducer",
        }
        config_kwargs: dict[str, Any] = {}
        for env_key, field_name in _ENV_CONFIG_MAP.items():
            val = env.get(env_key)
            if val is not None:
                config_kwargs[field_name] = val

        divisor_env = env.get("IMAGEIT_TEXT_SIZE_DIVISOR")
        if divisor_env is not None and "text_size_divisor" not in overrides:
            config_kwargs["text_size_divisor"] = _env_float("IMAGEIT_TEXT_SIZE_DIVISOR", divisor_env)

        if "trace_enabled" not in overrides:
            config_kwargs["trace_enabled"] = _env_bool(env.get("IMAGEIT_TRACE_ENABLED"), False)

        config_kwargs.update(overrides)

        return cls(**config_kwargs)
