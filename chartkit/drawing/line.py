"""Aliased line drawing onto Pillow images with Bresenham's algorithm."""

from __future__ import annotations

from itertools import pairwise
from typing import Any

from chartkit.drawing.color import Color

__all__ = ["bresenham", "polyline_bresenham"]


def _pixel_value(img: Any, color: Any) -> Any:
    if not isinstance(color, Color):
        return color
    if img.mode == "RGBA":
        return (color.r, color.g, color.b, color.a)
    if img.mode == "RGB":
        return (color.r, color.g, color.b)
    raise ValueError(f"cannot draw a Color on an image of mode {img.mode!r}")


def _set_pixel(img: Any, x: int, y: int, value: Any) -> None:
    width, height = img.size
    if 0 <= x < width and 0 <= y < height:
        img.putpixel((x, y), value)


def bresenham(img: Any, color: Any, x0: int, y0: int, x1: int, y1: int) -> None:
    """Draw a line from (x0, y0) to (x1, y1); points outside the image are skipped."""
    value = _pixel_value(img, color)
    dx = abs(x1 - x0)
    dy = abs(y1 - y0)
    sx = 1 if x0 < x1 else -1
    sy = 1 if y0 < y1 else -1
    err = dx - dy
    while True:
        _set_pixel(img, x0, y0, value)
        if x0 == x1 and y0 == y1:
            return
        e2 = 2 * err
        if e2 > -dy:
            err -= dy
            x0 += sx
        if e2 < dx:
            err += dx
            y0 += sy


def polyline_bresenham(img: Any, color: Any, *args: float) -> None:
    """Draw connected segments through points given as flat x, y coordinates."""
    if len(args) % 2:
        raise ValueError("polyline coordinates must come in x, y pairs")
    points = [(int(x + 0.5), int(y + 0.5)) for x, y in zip(args[0::2], args[1::2])]
    for (x0, y0), (x1, y1) in pairwise(points):
        bresenham(img, color, x0, y0, x1, y1)