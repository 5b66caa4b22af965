"""Background image source and measurement.

The image's rendered box is only known after the host has loaded and
laid it out. Until then the panel holds ``None`` ("not yet measured"),
which is distinct from a measured but empty ``ImageBounds(0, 0)``.
"""

from __future__ import annotations

import itertools

from pydantic import Field

from imageit.exceptions import ImageItConfigError
from imageit.models._base import ImageItBaseModel


class ImageBounds(ImageItBaseModel):
    """Rendered size of the background image in pixels."""

    width: float = Field(ge=0)
    height: float = Field(ge=0)

    @property
    def is_empty(self) -> bool:
        return self.width == 0 or self.height == 0


class ImageLoadEvent(ImageItBaseModel):
    """Typed image-load payload: the two measured dimensions."""

    width: float = Field(ge=0)
    height: float = Field(ge=0)

    @property
    def bounds(self) -> ImageBounds:
        return ImageBounds(width=self.width, height=self.height)


class UniqueIdFactory:
    """Monotonic cache-busting tokens (``"1"``, ``"2"``, ...), optionally prefixed."""

    def __init__(self, prefix: str = "") -> None:
        self._prefix = prefix
        self._counter = itertools.count(1)

    def __call__(self) -> str:
        return f"{self._prefix}{next(self._counter)}"


def resolve_image_url(url: str, *, force_refresh: bool, token: str | None = None) -> str:
    """Return *url*, suffixed with a uniqueness token when *force_refresh* is set."""
    if not force_refresh or not url:
        return url
    if token is None:
        raise ImageItConfigError("a token is required when force_refresh is set")
    separator = "&" if "?" in url else "?"
    return f"{url}{separator}{token}"


def scaled_font_size(text_size: float, bounds: ImageBounds | None, divisor: float) -> float | None:
    """Sensor font size scaled with the image width; ``None`` until measured."""
    if bounds is None:
        return None
    return text_size * bounds.width / divisor
