"""A graphic context that keeps drawing state on a save/restore stack."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any

from chartkit.drawing.color import COLOR_BLACK, COLOR_WHITE, Color
from chartkit.drawing.matrix import Matrix, identity_matrix
from chartkit.drawing.path import Path
from chartkit.drawing.styles import FillRule, LineCap, LineJoin

__all__ = ["ContextState", "StackGraphicContext"]


@dataclass
class ContextState:
    """The drawing state in effect: transform, current path and style."""

    tr: Matrix = field(default_factory=identity_matrix)
    path: Path = field(default_factory=Path)
    line_width: float = 1.0
    dash: list[float] = field(default_factory=list)
    dash_offset: float = 0.0
    stroke_color: Color = COLOR_BLACK
    fill_color: Color = COLOR_WHITE
    fill_rule: FillRule = FillRule.EVEN_ODD
    cap: LineCap = LineCap.ROUND
    join: LineJoin = LineJoin.ROUND
    font_size_points: float = 10.0
    font: Any = None
    scale: float = 0.0

    def copy(self) -> ContextState:
        """Return a copy whose transform, path and dash are independent."""
        return replace(
            self, tr=self.tr.copy(), path=self.path.copy(), dash=list(self.dash)
        )


class StackGraphicContext:
    """Holds the current drawing state and a stack of saved states."""

    def __init__(self) -> None:
        self._state = ContextState()
        self._saved: list[ContextState] = []

    @property
    def current(self) -> ContextState:
        """The state in effect."""
        return self._state

    @property
    def matrix_transform(self) -> Matrix:
        """The current transformation matrix."""
        return self._state.tr

    @matrix_transform.setter
    def matrix_transform(self, tr: Matrix) -> None:
        self._state.tr = tr

    def compose_matrix_transform(self, tr: Matrix) -> None:
        """Compose ``tr`` into the current transform."""
        self._state.tr.compose(tr)

    def rotate(self, angle: float) -> None:
        """Rotate the current transform by ``angle`` radians."""
        self._state.tr.rotate(angle)

    def translate(self, tx: float, ty: float) -> None:
        """Translate the current transform."""
        self._state.tr.translate(tx, ty)

    def scale(self, sx: float, sy: float) -> None:
        """Scale the current transform."""
        self._state.tr.scale(sx, sy)

    def set_line_dash(self, dash: list[float], dash_offset: float) -> None:
        """Set the dash pattern and its offset; an empty pattern draws solid lines."""
        self._state.dash = list(dash) if dash else []
        self._state.dash_offset = dash_offset

    def begin_path(self) -> None:
        """Start a new, empty path."""
        self._state.path.clear()

    def is_empty(self) -> bool:
        """True when the current path has no commands."""
        return self._state.path.is_empty()

    def last_point(self) -> tuple[float, float]:
        """The last point of the current path."""
        return self._state.path.last_point()

    def move_to(self, x: float, y: float) -> None:
        self._state.path.move_to(x, y)

    def line_to(self, x: float, y: float) -> None:
        self._state.path.line_to(x, y)

    def quad_curve_to(self, cx: float, cy: float, x: float, y: float) -> None:
        self._state.path.quad_curve_to(cx, cy, x, y)

    def cubic_curve_to(
        self, cx1: float, cy1: float, cx2: float, cy2: float, x: float, y: float
    ) -> None:
        self._state.path.cubic_curve_to(cx1, cy1, cx2, cy2, x, y)

    def arc_to(
        self, cx: float, cy: float, rx: float, ry: float, start_angle: float, delta: float
    ) -> None:
        self._state.path.arc_to(cx, cy, rx, ry, start_angle, delta)

    def close(self) -> None:
        self._state.path.close()

    def save(self) -> None:
        """Push a copy of the current state; later changes affect only the copy."""
        self._saved.append(self._state)
        self._state = self._state.copy()

    def restore(self) -> None:
        """Return to the most recently saved state; does nothing when none is saved."""
        if self._saved:
            self._state = self._saved.pop()