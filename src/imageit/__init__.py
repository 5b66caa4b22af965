"""imageit - Sensor overlay engine for image-based telemetry dashboards."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("imageit")
except PackageNotFoundError:
    __version__ = "0+local"
from imageit.calcs import ReducerId, reduce_values
from imageit.config import ImageItConfig
from imageit.display import DisplayOptions, DisplayValue, format_value, get_field_display_values
from imageit.exceptions import ImageBoundsError, ImageItConfigError, ImageItError, ImageNotMeasuredError
from imageit.image import ImageBounds, ImageLoadEvent, UniqueIdFactory, resolve_image_url
from imageit.mappings import evaluate, evaluate_sensor, resolve_mappings
from imageit.matching import find_frame, match_field
from imageit.models import (
    DataField,
    DataFrame,
    FieldConfig,
    FieldType,
    Mapping,
    MappingValues,
    PanelOptions,
    Position,
    QuerySpec,
    Sensor,
    VisualState,
)
from imageit.panel import ImageItPanel
from imageit.position import PixelDelta, apply_drag, apply_drag_at, delta_to_percent, to_pixels
from imageit.projector import SensorView, project_sensors
from imageit.reduce import resolve_value
from imageit.templating import interpolate

__all__ = [
    "__version__",
    "DataField",
    "DataFrame",
    "DisplayOptions",
    "DisplayValue",
    "FieldConfig",
    "FieldType",
    "ImageBounds",
    "ImageBoundsError",
    "ImageItConfig",
    "ImageItConfigError",
    "ImageItError",
    "ImageItPanel",
    "ImageLoadEvent",
    "ImageNotMeasuredError",
    "Mapping",
    "MappingValues",
    "PanelOptions",
    "PixelDelta",
    "Position",
    "QuerySpec",
    "ReducerId",
    "Sensor",
    "SensorView",
    "UniqueIdFactory",
    "VisualState",
    "apply_drag",
    "apply_drag_at",
    "delta_to_percent",
    "evaluate",
    "evaluate_sensor",
    "find_frame",
    "format_value",
    "get_field_display_values",
    "interpolate",
    "match_field",
    "project_sensors",
    "reduce_values",
    "resolve_image_url",
    "resolve_mappings",
    "resolve_value",
    "to_pixels",
]
