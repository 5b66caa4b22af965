"""Custom exception hierarchy for imageit."""

from __future__ import annotations


class ImageItError(Exception):
    """Base exception for all imageit errors."""


class ImageItConfigError(ImageItError):
    """Invalid or missing configuration."""


class ImageBoundsError(ImageItError):
    """Image bounds cannot be used to convert pixels to percentages.

    Raised when a drag is applied against a measured but empty
    (zero-width or zero-height) image box.
    """

    def __init__(
        self,
        message: str,
        *,
        width: float | None = None,
        height: float | None = None,
    ) -> None:
        self.width = width
        self.height = height
        super().__init__(message)


class ImageNotMeasuredError(ImageBoundsError):
    """A drag was attempted before the background image was measured.

    The rendered bounding box is only known once the image has loaded.
    Converting pixel deltas before that would yield NaN or infinite
    percentages, so the position model rejects the call instead.
    """
