"""Vector paths made of moves, lines, curves and arcs."""

from __future__ import annotations

import math
from enum import IntEnum

__all__ = ["PathComponent", "Path"]


class PathComponent(IntEnum):
    """Kind of a path command; each consumes a fixed number of coordinates."""

    MOVE_TO = 0
    LINE_TO = 1
    QUAD_CURVE_TO = 2
    CUBIC_CURVE_TO = 3
    ARC_TO = 4
    CLOSE = 5

    @property
    def arity(self) -> int:
        """Number of coordinates the command uses."""
        return _ARITY[self]


_ARITY = {
    PathComponent.MOVE_TO: 2,
    PathComponent.LINE_TO: 2,
    PathComponent.QUAD_CURVE_TO: 4,
    PathComponent.CUBIC_CURVE_TO: 6,
    PathComponent.ARC_TO: 6,
    PathComponent.CLOSE: 0,
}

_LABELS = {
    PathComponent.MOVE_TO: "MoveTo",
    PathComponent.LINE_TO: "LineTo",
    PathComponent.QUAD_CURVE_TO: "QuadCurveTo",
    PathComponent.CUBIC_CURVE_TO: "CubicCurveTo",
    PathComponent.ARC_TO: "ArcTo",
}


class Path:
    """A sequence of path commands with their flat coordinate list."""

    def __init__(self) -> None:
        self.components: list[PathComponent] = []
        self.points: list[float] = []
        self._x = 0.0
        self._y = 0.0

    def _append(self, component: PathComponent, *points: float) -> None:
        self.components.append(component)
        self.points.extend(points)

    def _ensure_started(self) -> None:
        if not self.components:
            self.move_to(0.0, 0.0)

    def last_point(self) -> tuple[float, float]:
        """The current point of the current sub-path."""
        return self._x, self._y

    def move_to(self, x: float, y: float) -> None:
        """Start a new sub-path at (x, y)."""
        self._append(PathComponent.MOVE_TO, x, y)
        self._x, self._y = x, y

    def line_to(self, x: float, y: float) -> None:
        """Add a straight line to (x, y)."""
        self._ensure_started()
        self._append(PathComponent.LINE_TO, x, y)
        self._x, self._y = x, y

    def quad_curve_to(self, cx: float, cy: float, x: float, y: float) -> None:
        """Add a quadratic Bezier curve."""
        self._ensure_started()
        self._append(PathComponent.QUAD_CURVE_TO, cx, cy, x, y)
        self._x, self._y = x, y

    def cubic_curve_to(
        self, cx1: float, cy1: float, cx2: float, cy2: float, x: float, y: float
    ) -> None:
        """Add a cubic Bezier curve."""
        self._ensure_started()
        self._append(PathComponent.CUBIC_CURVE_TO, cx1, cy1, cx2, cy2, x, y)
        self._x, self._y = x, y

    def arc_to(
        self, cx: float, cy: float, rx: float, ry: float, start_angle: float, delta: float
    ) -> None:
        """Add an elliptical arc around (cx, cy), joined to the path by a line."""
        end_angle = start_angle + delta
        if delta >= 0:
            while end_angle < start_angle:
                end_angle += math.pi * 2.0
        else:
            while start_angle < end_angle:
                start_angle += math.pi * 2.0
        start_x = cx + math.cos(start_angle) * rx
        start_y = cy + math.sin(start_angle) * ry
        if self.components:
            self.line_to(start_x, start_y)
        else:
            self.move_to(start_x, start_y)
        self._append(PathComponent.ARC_TO, cx, cy, rx, ry, start_angle, delta)
        self._x = cx + math.cos(end_angle) * rx
        self._y = cy + math.sin(end_angle) * ry

    def close(self) -> None:
        """Close the current sub-path."""
        self._append(PathComponent.CLOSE)

    def copy(self) -> Path:
        """Return an independent copy."""
        dest = Path()
        dest.components = list(self.components)
        dest.points = list(self.points)
        dest._x, dest._y = self._x, self._y
        return dest

    def clear(self) -> None:
        """Remove every command; the last point is kept."""
        self.components.clear()
        self.points.clear()

    def is_empty(self) -> bool:
        """True when the path has no commands."""
        return not self.components

    def __str__(self) -> str:
        lines = []
        i = 0
        for component in self.components:
            if component is PathComponent.CLOSE:
                lines.append("Close\n")
                continue
            n = component.arity
            coords = ", ".join(f"{v:f}" for v in self.points[i : i + n])
            lines.append(f"{_LABELS[component]}: {coords}\n")
            i += n
        return "".join(lines)