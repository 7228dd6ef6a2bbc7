"""Containers for line and arrow data, kept in priority order."""

from __future__ import annotations

import bisect
from dataclasses import dataclass, field
from typing import Iterator, Mapping

import numpy as np

Style = dict[str, float]


@dataclass
class LineData:
    """One plotted line series; ``y`` has one column per curve."""

    priority: int
    x: np.ndarray
    y: np.ndarray
    style: Style = field(default_factory=dict)


@dataclass
class ArrowData:
    """One set of arrows at (x, y) with direction (u, v)."""

    priority: int
    x: np.ndarray
    y: np.ndarray
    u: np.ndarray
    v: np.ndarray
    style: Style = field(default_factory=dict)


def _vector(values) -> np.ndarray:
    return np.array(values, dtype=float).reshape(-1)


def _insert_by_priority(items: list, item) -> None:
    bisect.insort_right(items, item, key=lambda d: d.priority)


class LineDataSet:
    """Line series, iterated in ascending priority (insertion order on ties)."""

    def __init__(self) -> None:
        self._items: list[LineData] = []
        self._has_data = False

    def add(self, priority: int, x, y, style: Mapping[str, float] | None) -> LineData:
        y_arr = np.array(y, dtype=float)
        if y_arr.ndim <= 1:
            y_arr = y_arr.reshape(-1, 1)
        item = LineData(int(priority), _vector(x), y_arr, dict(style or {}))
        _insert_by_priority(self._items, item)
        if item.x.size > 0:
            self._has_data = True
        return item

    def has_data(self) -> bool:
        """True once any series with at least one point was added."""
        return self._has_data

    def __iter__(self) -> Iterator[LineData]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)


class ArrowDataSet:
    """Arrow sets, iterated in ascending priority (insertion order on ties)."""

    def __init__(self) -> None:
        self._items: list[ArrowData] = []
        self._has_data = False

    def add(self, priority: int, x, y, u, v,
            style: Mapping[str, float] | None) -> ArrowData:
        item = ArrowData(int(priority), _vector(x), _vector(y), _vector(u),
                         _vector(v), dict(style or {}))
        _insert_by_priority(self._items, item)
        if item.x.size > 0:
            self._has_data = True
        return item

    def has_data(self) -> bool:
        """True once any arrow set with at least one point was added."""
        return self._has_data

    def __iter__(self) -> Iterator[ArrowData]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)