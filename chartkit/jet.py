"""The jet colour map."""

from __future__ import annotations

from chartkit.drawing.color import Color, color_channel_from_float

__all__ = ["jet"]


def jet(v: float, vmin: float, vmax: float) -> Color:
    """Map ``v`` in [vmin, vmax] to a blue-cyan-yellow-red colour; ``v`` is clamped."""
    dv = vmax - vmin
    if dv == 0:
        raise ValueError("vmin and vmax must differ")
    v = min(max(v, vmin), vmax)
    r, g, b = 255, 255, 255
    if v < vmin + 0.25 * dv:
        r = 0
        g = color_channel_from_float(4 * (v - vmin) / dv)
    elif v < vmin + 0.5 * dv:
        r = 0
        b = color_channel_from_float(1 + 4 * (vmin + 0.25 * dv - v) / dv)
    elif v < vmin + 0.75 * dv:
        r = color_channel_from_float(4 * (v - vmin - 0.5 * dv) / dv)
        b = 0
    else:
        g = color_channel_from_float(1 + 4 * (vmin + 0.75 * dv - v) / dv)
        b = 0
    return Color(r, g, b, 255)