"""Grid lines drawn across the chart canvas."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, Protocol

__all__ = ["GridLine", "generate_grid_lines"]


class _Tick(Protocol):
    value: float


@dataclass
class GridLine:
    """A major or minor line at a value on an axis."""

    value: float = 0.0
    is_minor: bool = False
    style: Any = None

    @property
    def major(self) -> bool:
        return not self.is_minor

    @property
    def minor(self) -> bool:
        return self.is_minor


def generate_grid_lines(
    ticks: Sequence[_Tick], major_style: Any, minor_style: Any
) -> list[GridLine]:
    """Make alternating major and minor lines at every tick but the first and last."""
    if len(ticks) < 3:
        return []
    return [
        GridLine(
            value=tick.value,
            is_minor=bool(i % 2),
            style=minor_style if i % 2 else major_style,
        )
        for i, tick in enumerate(ticks[1:-1])
    ]