"""Internal constants shared across the library."""

#: Query id that selects the label-based lookup path.
SENTINEL_QUERY_ID = "app"
#: Label key compared against ``QuerySpec.alias`` on the sentinel path.
DEFAULT_LABEL_KEY = "tile"

PERCENT_MIN = 0.0
PERCENT_MAX = 100.0

# font-size = sensorsTextSize * imageWidth / 50 / 10
DEFAULT_TEXT_SIZE_DIVISOR = 500.0

# ------------------------------------------------------------------
# Display units  (unit id → (prefix, suffix))
# ------------------------------------------------------------------

UNIT_AFFIXES: dict[str, tuple[str, str]] = {
    "none": ("", ""),
    "short": ("", ""),
    "percent": ("", "%"),
    "celsius": ("", "°C"),
    "fahrenheit": ("", "°F"),
    "kelvin": ("", "K"),
    "humidity": ("", "%H"),
    "pressurehpa": ("", " hPa"),
    "pressurebar": ("", " bar"),
    "volt": ("", " V"),
    "amp": ("", " A"),
    "watt": ("", " W"),
    "kwatt": ("", " kW"),
    "kwatth": ("", " kWh"),
    "lux": ("", " lx"),
    "ppm": ("", " ppm"),
    "rpm": ("", " rpm"),
    "currencyUSD": ("$", ""),
    "currencyEUR": ("€", ""),
}


def unit_affixes(unit: str | None) -> tuple[str, str]:
    """Return the ``(prefix, suffix)`` rendered around a value for *unit*.

    Unknown unit ids are treated as a literal suffix separated by a
    space, so a free-form unit such as ``"m³/h"`` still renders.
    """
    if not unit:
        return "", ""
    affixes = UNIT_AFFIXES.get(unit)
    if affixes is not None:
        return affixes
    return "", f" {unit}"
