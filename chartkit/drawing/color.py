"""RGBA colours and parsing of CSS-style colour strings."""

from __future__ import annotations

import math
import re
import struct
from dataclasses import dataclass

__all__ = [
    "Color",
    "COLOR_TRANSPARENT",
    "COLOR_WHITE",
    "COLOR_BLACK",
    "COLOR_RED",
    "COLOR_GREEN",
    "COLOR_BLUE",
    "COLOR_SILVER",
    "COLOR_MAROON",
    "COLOR_PURPLE",
    "COLOR_FUCHSIA",
    "COLOR_LIME",
    "COLOR_OLIVE",
    "COLOR_YELLOW",
    "COLOR_NAVY",
    "COLOR_TEAL",
    "COLOR_AQUA",
    "parse_color",
    "color_from_rgba",
    "color_from_rgb",
    "color_from_hex",
    "color_from_known",
    "color_from_alpha_mixed_rgba",
    "color_channel_from_float",
]


@dataclass(frozen=True)
class Color:
    """A straight (not premultiplied) 8-bit RGBA colour."""

    r: int = 0
    g: int = 0
    b: int = 0
    a: int = 0

    def __post_init__(self) -> None:
        for name in ("r", "g", "b", "a"):
            value = getattr(self, name)
            if not isinstance(value, int) or not 0 <= value <= 255:
                raise ValueError(f"channel {name} must be an int in 0..255, got {value!r}")

    def rgba(self) -> tuple[int, int, int, int]:
        """Return the colour as alpha-premultiplied 16-bit channels."""
        fa = self.a / 255.0

        def widen(channel: float) -> int:
            value = int(channel)
            return value | (value << 8)

        return (
            widen(self.r * fa),
            widen(self.g * fa),
            widen(self.b * fa),
            widen(self.a),
        )

    def is_zero(self) -> bool:
        """True when every channel is zero, i.e. the colour was never set."""
        return self.r == 0 and self.g == 0 and self.b == 0 and self.a == 0

    def is_transparent(self) -> bool:
        """True when the alpha channel is zero."""
        return self.a == 0

    def with_alpha(self, a: int) -> Color:
        """Return a copy of the colour with the given alpha."""
        return Color(self.r, self.g, self.b, a)

    def equals(self, other: Color) -> bool:
        """True when all four channels match."""
        return (self.r, self.g, self.b, self.a) == (other.r, other.g, other.b, other.a)

    def average_with(self, other: Color) -> Color:
        """Average the colour channels (8-bit arithmetic), keeping this alpha."""
        return Color(
            ((self.r + other.r) & 0xFF) >> 1,
            ((self.g + other.g) & 0xFF) >> 1,
            ((self.b + other.b) & 0xFF) >> 1,
            self.a,
        )

    def __str__(self) -> str:
        fa = self.a / 255.0
        return f"rgba({self.r},{self.g},{self.b},{fa:.1f})"


COLOR_TRANSPARENT = Color(255, 255, 255, 0)
COLOR_WHITE = Color(255, 255, 255, 255)
COLOR_BLACK = Color(0, 0, 0, 255)
COLOR_RED = Color(255, 0, 0, 255)
COLOR_GREEN = Color(0, 128, 0, 255)
COLOR_BLUE = Color(0, 0, 255, 255)
COLOR_SILVER = Color(192, 192, 192, 255)
COLOR_MAROON = Color(128, 0, 0, 255)
COLOR_PURPLE = Color(128, 0, 128, 255)
COLOR_FUCHSIA = Color(255, 0, 255, 255)
COLOR_LIME = Color(0, 255, 0, 255)
COLOR_OLIVE = Color(128, 128, 0, 255)
COLOR_YELLOW = Color(255, 255, 0, 255)
COLOR_NAVY = Color(0, 0, 128, 255)
COLOR_TEAL = Color(0, 128, 128, 255)
COLOR_AQUA = Color(0, 255, 255, 255)

_KNOWN_COLORS = {
    "transparent": COLOR_TRANSPARENT,
    "white": COLOR_WHITE,
    "black": COLOR_BLACK,
    "red": COLOR_RED,
    "blue": COLOR_BLUE,
    "green": COLOR_GREEN,
    "silver": COLOR_SILVER,
    "maroon": COLOR_MAROON,
    "purple": COLOR_PURPLE,
    "fuchsia": COLOR_FUCHSIA,
    "lime": COLOR_LIME,
    "olive": COLOR_OLIVE,
    "yellow": COLOR_YELLOW,
    "navy": COLOR_NAVY,
    "teal": COLOR_TEAL,
    "aqua": COLOR_AQUA,
}

_RGBA_EXPR = re.compile(r"rgba\((?P<R>.+),(?P<G>.+),(?P<B>.+),(?P<A>.+)\)", re.DOTALL)
_RGB_EXPR = re.compile(r"rgb\((?P<R>.+),(?P<G>.+),(?P<B>.+)\)", re.DOTALL)
_INT_EXPR = re.compile(r"[+-]?[0-9]+")
_INT16_MIN, _INT16_MAX = -(1 << 15), (1 << 15) - 1


def _parse_channel(text: str) -> int:
    """Parse a decimal channel value; unparsable text yields 0."""
    text = text.strip()
    if not _INT_EXPR.fullmatch(text):
        return 0
    value = min(max(int(text), _INT16_MIN), _INT16_MAX)
    return value & 0xFF


def _parse_alpha(text: str) -> int:
    """Parse a 0..1 alpha fraction into an 8-bit channel; unparsable text yields 0."""
    text = text.strip()
    if "_" in text:
        return 0
    try:
        value = float(text)
    except ValueError:
        return 0
    if math.isnan(value):
        return 0
    value = min(max(value, 0.0), 1.0)
    value = struct.unpack("f", struct.pack("f", value))[0]
    return int(value * 255) & 0xFF


def _parse_hex(text: str) -> int:
    try:
        value = int(text, 16) if re.fullmatch(r"[+-]?[0-9a-fA-F]+", text) else 0
    except ValueError:
        value = 0
    return min(max(value, _INT16_MIN), _INT16_MAX) & 0xFF


def parse_color(raw_color: str) -> Color:
    """Parse ``rgba()``, ``rgb()``, ``#hex`` or a known colour name."""
    if raw_color.startswith("rgba"):
        return color_from_rgba(raw_color)
    if raw_color.startswith("rgb"):
        return color_from_rgb(raw_color)
    if raw_color.startswith("#"):
        return color_from_hex(raw_color)
    return color_from_known(raw_color)


def color_from_rgba(rgba: str) -> Color:
    """Build a colour from a CSS ``rgba(r, g, b, a)`` expression."""
    match = _RGBA_EXPR.search(rgba)
    if match is None:
        return Color()
    return Color(
        _parse_channel(match["R"]),
        _parse_channel(match["G"]),
        _parse_channel(match["B"]),
        _parse_alpha(match["A"]),
    )


def color_from_rgb(rgb: str) -> Color:
    """Build an opaque colour from a CSS ``rgb(r, g, b)`` expression."""
    match = _RGB_EXPR.search(rgb)
    if match is None:
        return Color(a=255)
    return Color(
        _parse_channel(match["R"]),
        _parse_channel(match["G"]),
        _parse_channel(match["B"]),
        255,
    )


def color_from_hex(hex_string: str) -> Color:
    """Build an opaque colour from a 3- or 6-digit hex code, with or without ``#``."""
    hex_string = hex_string.removeprefix("#")
    if len(hex_string) == 3:
        r, g, b = (_parse_hex(ch) * 0x11 & 0xFF for ch in hex_string)
    elif len(hex_string) >= 6:
        r, g, b = (_parse_hex(hex_string[i : i + 2]) for i in (0, 2, 4))
    else:
        raise ValueError(f"invalid hex colour: {hex_string!r}")
    return Color(r, g, b, 255)


def color_from_known(known: str) -> Color:
    """Return a basic named colour; unknown names give the zero colour."""
    return _KNOWN_COLORS.get(known.lower(), Color())


def color_from_alpha_mixed_rgba(r: int, g: int, b: int, a: int) -> Color:
    """Undo alpha premultiplication of 16-bit channels."""
    fa = a / 255.0
    if fa == 0:
        raise ValueError("alpha must be non-zero to unmix channels")
    return Color(
        int(r / fa) & 0xFF,
        int(g / fa) & 0xFF,
        int(b / fa) & 0xFF,
        (a | (a >> 8)) & 0xFF,
    )


def color_channel_from_float(v: float) -> int:
    """Map a 0..1 float to an 8-bit channel value."""
    return int(v * 255) & 0xFF