"""Exponential moving average over another series."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional, Protocol

__all__ = ["DEFAULT_EMA_PERIOD", "EMASeries"]

DEFAULT_EMA_PERIOD = 12


class _ValuesProvider(Protocol):
    def __len__(self) -> int: ...

    def get_values(self, index: int) -> tuple[float, float]: ...


@dataclass
class EMASeries:
    """A series whose values are the exponential moving average of an inner series."""

    inner_series: Optional[_ValuesProvider] = None
    period: int = 0
    name: str = ""
    style: Any = None
    y_axis: int = 0
    _cache: list[float] = field(default_factory=list, init=False, repr=False)

    @property
    def effective_period(self) -> int:
        """The window size, defaulting when the period is unset."""
        return self.period or DEFAULT_EMA_PERIOD

    @property
    def sigma(self) -> float:
        """The smoothing factor."""
        return 2.0 / (float(self.effective_period) + 1)

    def _inner(self) -> _ValuesProvider:
        if self.inner_series is None:
            raise ValueError("ema series requires inner_series to be set")
        return self.inner_series

    def __len__(self) -> int:
        return len(self._inner())

    def _values(self) -> list[float]:
        if not self._cache:
            inner = self._inner()
            sigma = self.sigma
            cache: list[float] = []
            for index in range(len(inner)):
                _, y = inner.get_values(index)
                cache.append(y if not cache else (y - cache[-1]) * sigma + cache[-1])
            self._cache = cache
        return self._cache

    def get_values(self, index: int) -> tuple[float, float]:
        """The x of the inner series and the moving average at ``index``."""
        if self.inner_series is None:
            return 0.0, 0.0
        cache = self._values()
        x, _ = self.inner_series.get_values(index)
        return x, cache[index]

    def get_first_values(self) -> tuple[float, float]:
        """The first point of the series."""
        if self.inner_series is None:
            return 0.0, 0.0
        cache = self._values()
        x, _ = self.inner_series.get_values(0)
        return x, cache[0]

    def get_last_values(self) -> tuple[float, float]:
        """The last point of the series."""
        if self.inner_series is None:
            return 0.0, 0.0
        cache = self._values()
        last = len(self.inner_series) - 1
        x, _ = self.inner_series.get_values(last)
        return x, cache[last]

    def validate(self) -> None:
        """Raise ValueError when the series cannot be drawn."""
        self._inner()