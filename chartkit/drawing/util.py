"""Unit conversions and distance helpers."""

from __future__ import annotations

import math

__all__ = ["pixels_to_points", "points_to_pixels", "distance", "vector_distance"]


def pixels_to_points(dpi: float, pixels: float) -> float:
    """Convert a pixel count to typographic points at a given DPI."""
    return (pixels * 72.0) / dpi


def points_to_pixels(dpi: float, points: float) -> float:
    """Convert typographic points to pixels at a given DPI."""
    return (points * dpi) / 72.0


def distance(x1: float, y1: float, x2: float, y2: float) -> float:
    """Euclidean distance between two points."""
    return vector_distance(x2 - x1, y2 - y1)


def vector_distance(dx: float, dy: float) -> float:
    """Length of a vector."""
    return math.sqrt(dx * dx + dy * dy)