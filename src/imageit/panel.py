"""Panel controller.

:class:`ImageItPanel` owns the current :class:`PanelOptions` snapshot
and the image measurement, and wires refresh, image-load, resize and
drag events to the pure engine functions. Every configuration change is
a full replacement value handed to ``on_options_change``.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping, Sequence
from typing import Any

from imageit.config import ImageItConfig
from imageit.display import DisplayOptions
from imageit.image import ImageBounds, ImageLoadEvent, UniqueIdFactory, resolve_image_url, scaled_font_size
from imageit.models.frames import DataFrame
from imageit.models.options import PanelOptions
from imageit.position import PixelDelta, apply_drag_at
from imageit.projector import SensorView, project_sensors
from imageit.templating import ReplaceVariables

_logger = logging.getLogger(__name__)


class ImageItPanel:
    """Stateful shell around the sensor engine for one panel instance.

    Parameters
    ----------
    options
        Initial panel options.
    config
        Engine configuration; defaults to :class:`ImageItConfig`.
    display
        Panel-wide display defaults (unit/decimals) for value reduction.
    on_options_change
        Called with the new options after every accepted drag.
    token_factory
        Produces cache-busting tokens when ``force_image_refresh`` is set.
    """

    def __init__(
        self,
        options: PanelOptions,
        *,
        config: ImageItConfig | None = None,
        display: DisplayOptions | None = None,
        on_options_change: Callable[[PanelOptions], None] | None = None,
        token_factory: Callable[[], str] | None = None,
    ) -> None:
        self._options = options
        self._config = config or ImageItConfig()
        self._display = display
        self._on_options_change = on_options_change
        self._token_factory = token_factory or UniqueIdFactory()
        self._bounds: ImageBounds | None = None
        self._image_url = self._next_image_url()

    @property
    def options(self) -> PanelOptions:
        return self._options

    @property
    def bounds(self) -> ImageBounds | None:
        """Measured image box, ``None`` until the image has loaded."""
        return self._bounds

    @property
    def image_url(self) -> str:
        return self._image_url

    @property
    def font_size_px(self) -> float | None:
        return scaled_font_size(self._options.sensors_text_size, self._bounds, self._config.text_size_divisor)

    def _next_image_url(self) -> str:
        if not self._options.force_image_refresh:
            return self._options.image_url
        return resolve_image_url(self._options.image_url, force_refresh=True, token=self._token_factory())

    def update_options(self, options: PanelOptions) -> None:
        """Adopt options edited outside the panel (e.g. by the editor)."""
        url_changed = (options.image_url, options.force_image_refresh) != (
            self._options.image_url,
            self._options.force_image_refresh,
        )
        self._options = options
        if url_changed:
            self._image_url = self._next_image_url()

    def refresh(
        self,
        frames: Sequence[DataFrame],
        *,
        variables: Mapping[str, Any] | None = None,
        replace_variables: ReplaceVariables | None = None,
    ) -> tuple[SensorView, ...]:
        """Handle a data refresh: renew the image URL and project all sensors."""
        self._image_url = self._next_image_url()
        return project_sensors(
            frames,
            self._options,
            config=self._config,
            display=self._display,
            variables=variables,
            replace_variables=replace_variables,
        )

    def handle_image_load(self, event: ImageLoadEvent) -> None:
        self._set_bounds(event.bounds)

    def handle_resize(self, width: float, height: float) -> None:
        """Re-measure after the panel was resized; ignored before the first load."""
        if self._bounds is None:
            return
        self._set_bounds(ImageBounds(width=width, height=height))

    def _set_bounds(self, bounds: ImageBounds) -> None:
        if bounds != self._bounds:
            _logger.debug("Image measured at %sx%s", bounds.width, bounds.height)
        self._bounds = bounds

    def drag(self, index: int, delta: PixelDelta) -> PanelOptions | None:
        """Apply a completed drag of sensor *index*.

        Returns the new options, or ``None`` when sensors are locked or
        the drag did not move the sensor.

        Raises
        ------
        ImageNotMeasuredError
            If the image has not been measured yet.
        """
        if not self._options.sensors_draggable:
            _logger.debug("Ignoring drag of sensor %d: sensors are locked", index)
            return None
        updated = apply_drag_at(self._options, index, delta, self._bounds)
        if updated is self._options:
            return None
        self._options = updated
        if self._on_options_change is not None:
            self._on_options_change(updated)
        return updated
