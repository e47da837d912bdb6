"""Drawing style enumerations and style records."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, Optional

from chartkit.drawing.color import Color

__all__ = [
    "DEFAULT_DPI",
    "FillRule",
    "LineCap",
    "LineJoin",
    "Valign",
    "Halign",
    "ScalingPolicy",
    "ImageFilter",
    "StrokeStyle",
    "SolidFillStyle",
    "TextStyle",
    "ImageScaling",
]

DEFAULT_DPI = 96.0


class FillRule(IntEnum):
    """How the inside of a shape is determined."""

    EVEN_ODD = 0
    WINDING = 1


class LineCap(IntEnum):
    """Shape of line extremities."""

    ROUND = 0
    BUTT = 1
    SQUARE = 2


class LineJoin(IntEnum):
    """Shape of the joint between segments."""

    BEVEL = 0
    ROUND = 1
    MITER = 2


class Valign(IntEnum):
    """Vertical text alignment."""

    TOP = 0
    CENTER = 1
    BOTTOM = 2
    BASELINE = 3


class Halign(IntEnum):
    """Horizontal text alignment."""

    LEFT = 0
    CENTER = 1
    RIGHT = 2


class ScalingPolicy(IntEnum):
    """How an image is scaled into a target rectangle."""

    NONE = 0
    STRETCH = 1
    WIDTH = 2
    HEIGHT = 3
    FIT = 4
    SAME_AREA = 5
    FILL = 6


class ImageFilter(IntEnum):
    """Resampling filter used when drawing images."""

    LINEAR = 0
    BILINEAR = 1
    BICUBIC = 2


@dataclass
class StrokeStyle:
    """Attributes used when stroking a path; an empty dash draws a plain line."""

    color: Optional[Color] = None
    width: float = 0.0
    line_cap: LineCap = LineCap.ROUND
    line_join: LineJoin = LineJoin.BEVEL
    dash_offset: float = 0.0
    dash: list[float] = field(default_factory=list)


@dataclass
class SolidFillStyle:
    """Attributes for a solid fill."""

    color: Optional[Color] = None
    fill_rule: FillRule = FillRule.EVEN_ODD


@dataclass
class TextStyle:
    """Attributes used when drawing text."""

    color: Optional[Color] = None
    size: float = 0.0
    font: Any = None
    halign: Halign = Halign.LEFT
    valign: Valign = Valign.TOP


@dataclass
class ImageScaling:
    """Placement and scaling of an image."""

    halign: Halign = Halign.LEFT
    valign: Valign = Valign.TOP
    width: float = 0.0
    height: float = 0.0
    scaling_policy: ScalingPolicy = ScalingPolicy.NONE