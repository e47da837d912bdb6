"""A write target that collects a rendered chart as an image."""

from __future__ import annotations

import io
from typing import Optional

from PIL import Image

__all__ = ["ImageWriter"]


class ImageWriter:
    """Collects either a raw image or encoded PNG bytes and yields an image."""

    def __init__(self) -> None:
        self._rgba: Optional[Image.Image] = None
        self._contents = io.BytesIO()

    def write(self, buffer: bytes) -> int:
        """Append encoded image bytes; return the number written."""
        return self._contents.write(buffer)

    def set_rgba(self, image: Image.Image) -> None:
        """Store a raw image, which takes precedence over written bytes."""
        self._rgba = image

    def image(self) -> Image.Image:
        """Return the raw image if set, otherwise decode the written PNG bytes."""
        if self._rgba is not None:
            return self._rgba
        data = self._contents.getvalue()
        if data:
            decoded = Image.open(io.BytesIO(data), formats=["PNG"])
            decoded.load()
            return decoded
        raise ValueError("no valid sources for image data, cannot continue")