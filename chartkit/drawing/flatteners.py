"""Segment consumers and conversion of paths into straight segments."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable

from chartkit.drawing.curve import trace_arc, trace_cubic, trace_quad
from chartkit.drawing.matrix import Matrix
from chartkit.drawing.path import Path, PathComponent

__all__ = ["Flattener", "DemuxFlattener", "Transformer", "SegmentedPath", "flatten"]


@runtime_checkable
class Flattener(Protocol):
    """Receives straight segments."""

    def move_to(self, x: float, y: float) -> None:
        """Start a new line at (x, y)."""

    def line_to(self, x: float, y: float) -> None:
        """Draw a line from the current position to (x, y)."""

    def line_join(self) -> None:
        """Mark a join between segments."""

    def close(self) -> None:
        """Close the current polygon."""

    def end(self) -> None:
        """Finish the current line so caps can be drawn."""


@dataclass
class DemuxFlattener:
    """Forwards every call to each of several flatteners."""

    flatteners: list[Flattener] = field(default_factory=list)

    def move_to(self, x: float, y: float) -> None:
        for flattener in self.flatteners:
            flattener.move_to(x, y)

    def line_to(self, x: float, y: float) -> None:
        for flattener in self.flatteners:
            flattener.line_to(x, y)

    def line_join(self) -> None:
        for flattener in self.flatteners:
            flattener.line_join()

    def close(self) -> None:
        for flattener in self.flatteners:
            flattener.close()

    def end(self) -> None:
        for flattener in self.flatteners:
            flattener.end()


@dataclass
class Transformer:
    """Applies a matrix to points before handing them on."""

    tr: Matrix
    flattener: Flattener

    def move_to(self, x: float, y: float) -> None:
        self.flattener.move_to(*self.tr.transform_point(x, y))

    def line_to(self, x: float, y: float) -> None:
        self.flattener.line_to(*self.tr.transform_point(x, y))

    def line_join(self) -> None:
        self.flattener.line_join()

    def close(self) -> None:
        self.flattener.close()

    def end(self) -> None:
        self.flattener.end()


@dataclass
class SegmentedPath:
    """Collects every point it receives as a flat coordinate list.

    Besides the points it records, as indices into ``points``, where joins
    were marked, where polygons were closed and where lines were ended.
    """

    points: list[float] = field(default_factory=list)
    joins: list[int] = field(default_factory=list)
    closes: list[int] = field(default_factory=list)
    ends: list[int] = field(default_factory=list)

    def move_to(self, x: float, y: float) -> None:
        self.points.extend((x, y))

    def line_to(self, x: float, y: float) -> None:
        self.points.extend((x, y))

    def line_join(self) -> None:
        self.joins.append(len(self.points))

    def close(self) -> None:
        self.closes.append(len(self.points))

    def end(self) -> None:
        self.ends.append(len(self.points))


def flatten(path: Path, flattener: Flattener, scale: float) -> None:
    """Feed a path to a flattener, turning curves and arcs into straight segments."""
    pts = path.points
    start_x = start_y = 0.0
    i = 0
    for component in path.components:
        if component is PathComponent.MOVE_TO:
            x, y = pts[i], pts[i + 1]
            start_x, start_y = x, y
            if i != 0:
                flattener.end()
            flattener.move_to(x, y)
            i += 2
        elif component is PathComponent.LINE_TO:
            flattener.line_to(pts[i], pts[i + 1])
            flattener.line_join()
            i += 2
        elif component is PathComponent.QUAD_CURVE_TO:
            trace_quad(flattener, pts[i - 2 : i + 4], 0.5)
            flattener.line_to(pts[i + 2], pts[i + 3])
            i += 4
        elif component is PathComponent.CUBIC_CURVE_TO:
            trace_cubic(flattener, pts[i - 2 : i + 6], 0.5)
            flattener.line_to(pts[i + 4], pts[i + 5])
            i += 6
        elif component is PathComponent.ARC_TO:
            x, y = trace_arc(flattener, *pts[i : i + 6], scale)
            flattener.line_to(x, y)
            i += 6
        elif component is PathComponent.CLOSE:
            flattener.line_to(start_x, start_y)
            flattener.close()
    flattener.end()