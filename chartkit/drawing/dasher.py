"""Splitting of lines into dashes."""

from __future__ import annotations

from collections.abc import Sequence

from chartkit.drawing.flatteners import Flattener
from chartkit.drawing.util import distance

__all__ = ["DashVertexConverter"]


class DashVertexConverter:
    """Cuts incoming lines into dashes and gaps before passing them on.

    Even entries of ``dash`` are drawn lengths, odd entries are gaps.
    """

    def __init__(self, dash: Sequence[float], dash_offset: float, flattener: Flattener) -> None:
        dash = [float(v) for v in dash]
        if not dash:
            raise ValueError("dash pattern must not be empty")
        if any(v < 0 for v in dash) or sum(dash) <= 0:
            raise ValueError("dash lengths must be non-negative with a positive total")
        self.dash = dash
        self.dash_offset = dash_offset
        self.next = flattener
        self._current = 0
        self._x = 0.0
        self._y = 0.0
        self._distance = 0.0

    def _advance(self) -> None:
        self._current = (self._current + 1) % len(self.dash)

    def _emit(self, x: float, y: float) -> None:
        if self._current % 2 == 0:
            self.next.line_to(x, y)
        else:
            self.next.end()
            self.next.move_to(x, y)

    def move_to(self, x: float, y: float) -> None:
        self.next.move_to(x, y)
        self._x, self._y = x, y
        self._distance = self.dash_offset
        self._current = 0

    def line_to(self, x: float, y: float) -> None:
        rest = self.dash[self._current] - self._distance
        while rest < 0:
            self._distance -= self.dash[self._current]
            self._advance()
            rest = self.dash[self._current] - self._distance
        d = distance(self._x, self._y, x, y)
        while d >= rest:
            k = rest / d if d else 0.0
            lx = self._x + k * (x - self._x)
            ly = self._y + k * (y - self._y)
            self._emit(lx, ly)
            d -= rest
            self._x, self._y = lx, ly
            self._advance()
            rest = self.dash[self._current]
        self._distance = d
        self._emit(x, y)
        if self._distance >= self.dash[self._current]:
            self._distance -= self.dash[self._current]
            self._advance()
        self._x, self._y = x, y

    def line_join(self) -> None:
        self.next.line_join()

    def close(self) -> None:
        self.next.close()

    def end(self) -> None:
        self.next.end()