"""A series drawn as a histogram, bounded at zero."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Protocol

__all__ = ["HistogramSeries"]


class _ValuesProvider(Protocol):
    def __len__(self) -> int: ...

    def get_values(self, index: int) -> tuple[float, float]: ...


@dataclass
class HistogramSeries:
    """Wraps a series so each value is drawn as a bar from zero."""

    inner_series: Optional[_ValuesProvider] = None
    name: str = ""
    style: Any = None
    y_axis: int = 0

    def _inner(self) -> _ValuesProvider:
        if self.inner_series is None:
            raise ValueError("histogram series requires inner_series to be set")
        return self.inner_series

    def __len__(self) -> int:
        return len(self._inner())

    def get_values(self, index: int) -> tuple[float, float]:
        """The inner series' point at ``index``."""
        return self._inner().get_values(index)

    def get_bounded_values(self, index: int) -> tuple[float, float, float]:
        """Return (x, upper, lower): positive values go up from zero, others down."""
        x, y = self._inner().get_values(index)
        if y > 0:
            return x, y, 0.0
        return x, 0.0, y

    def validate(self) -> None:
        """Raise ValueError when the series cannot be drawn."""
        self._inner()