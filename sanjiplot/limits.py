"""Axis limits, zoom history and data-to-pixel scalings."""

from __future__ import annotations

import math
import sys
from dataclasses import dataclass
from enum import Enum

import numpy as np

_MAX = sys.float_info.max


@dataclass(frozen=True)
class ScalingsAndLimits:
    """Visible data range of a plot and the data-to-pixel factors."""

    xplot_min: float
    xplot_max: float
    yplot_min: float
    yplot_max: float
    dx_to_px: float
    dy_to_px: float


@dataclass
class AxesLimits:
    """One entry of the axes-limits history."""

    xmin: float = _MAX
    xmax: float = -_MAX
    ymin: float = _MAX
    ymax: float = -_MAX


class AxesRatio(Enum):
    NONE = "none"
    EQUAL = "equal"


def _div(a: float, b: float) -> float:
    """Floating-point division with IEEE results for a zero divisor."""
    try:
        return a / b
    except ZeroDivisionError:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)


def _fit(lo: float, hi: float, extent: float, scale: float,
         lo_set: bool, hi_set: bool) -> tuple[float, float]:
    if lo_set:
        hi = lo + _div(extent, scale)
    elif hi_set:
        lo = hi - _div(extent, scale)
    else:
        lo = (hi + lo) / 2.0 - _div(extent / 2.0, scale)
        # The upper bound is computed from the already shifted lower bound.
        hi = (hi + lo) / 2.0 + _div(extent / 2.0, scale)
    return lo, hi


class LimitsInfo:
    """Tracks data extents, user-fixed limits and a history of zoom levels."""

    def __init__(self) -> None:
        self.xmin_value = _MAX
        self.xmax_value = -_MAX
        self.ymin_value = _MAX
        self.ymax_value = -_MAX
        self.xmin_set = False
        self.xmax_set = False
        self.ymin_set = False
        self.ymax_set = False
        self.axes_ratio = AxesRatio.NONE
        self._history: list[AxesLimits] = [AxesLimits()]
        self._index = 0

    @property
    def current(self) -> AxesLimits:
        return self._history[self._index]

    @property
    def history_index(self) -> int:
        return self._index

    @property
    def history_size(self) -> int:
        return len(self._history)

    @property
    def xmin(self) -> float:
        return self.current.xmin

    @xmin.setter
    def xmin(self, value: float) -> None:
        self.current.xmin = float(value)

    @property
    def xmax(self) -> float:
        return self.current.xmax

    @xmax.setter
    def xmax(self, value: float) -> None:
        self.current.xmax = float(value)

    @property
    def ymin(self) -> float:
        return self.current.ymin

    @ymin.setter
    def ymin(self, value: float) -> None:
        self.current.ymin = float(value)

    @property
    def ymax(self) -> float:
        return self.current.ymax

    @ymax.setter
    def ymax(self, value: float) -> None:
        self.current.ymax = float(value)

    def scalings_and_limits(self, plot_width_px: float,
                            plot_height_px: float) -> ScalingsAndLimits:
        """Return the visible range and scalings for a plot of the given size."""
        w = float(plot_width_px)
        h = float(plot_height_px)
        x_both = self.xmin_set and self.xmax_set
        y_both = self.ymin_set and self.ymax_set
        equal = self.axes_ratio is AxesRatio.EQUAL

        xmin, xmax, ymin, ymax = self.xmin, self.xmax, self.ymin, self.ymax
        xmean = (xmax + xmin) / 2.0
        ymean = (ymax + ymin) / 2.0
        dx = _div(w, xmax - xmin)
        dy = _div(h, ymax - ymin)

        if x_both and y_both:
            if equal:
                if dx > dy:
                    dx = dy
                    xmin = xmean - _div(w / 2.0, dx)
                    xmax = xmean + _div(w / 2.0, dx)
                elif dx < dy:
                    dy = dx
                    ymin = ymean - _div(h / 2.0, dy)
                    ymax = ymean + _div(h / 2.0, dy)
                dx = dy = min(dx, dy)
        elif x_both:
            if equal:
                dy = dx
                ymin, ymax = _fit(ymin, ymax, h, dy, self.ymin_set, self.ymax_set)
        elif y_both:
            if equal:
                dx = dy
                xmin, xmax = _fit(xmin, xmax, w, dx, self.xmin_set, self.xmax_set)
        elif equal:
            dx = dy = min(dx, dy)
            xmin, xmax = _fit(xmin, xmax, w, dx, self.xmin_set, self.xmax_set)
            ymin, ymax = _fit(ymin, ymax, h, dy, self.ymin_set, self.ymax_set)

        return ScalingsAndLimits(xmin, xmax, ymin, ymax, dx, dy)

    def update_limits(self, x, y) -> None:
        """Widen the limits that are not fixed so the data fits with a small margin."""
        x = np.asarray(x, dtype=float)
        y = np.asarray(y, dtype=float)
        xmin = min(float(x.min()), self.xmin_value)
        xmax = max(float(x.max()), self.xmax_value)
        ymin = min(float(y.min()), self.ymin_value)
        ymax = max(float(y.max()), self.ymax_value)

        if not self.xmin_set:
            self.xmin = xmin - 0.025 * (xmax - xmin)
        if not self.xmax_set:
            self.xmax = xmax + 0.025 * (xmax - xmin)
        if not self.ymin_set:
            self.ymin = ymin - 0.025 * (ymax - ymin)
        if not self.ymax_set:
            self.ymax = ymax + 0.025 * (ymax - ymin)

        self.xmin_value = min(self.xmin_value, xmin)
        self.xmax_value = max(self.xmax_value, xmax)
        self.ymin_value = min(self.ymin_value, ymin)
        self.ymax_value = max(self.ymax_value, ymax)

    def add_axes_limits(self, xmin: float, xmax: float,
                        ymin: float, ymax: float) -> None:
        """Step forward in the history to a new set of limits."""
        limits = AxesLimits(float(xmin), float(xmax), float(ymin), float(ymax))
        if self._index < len(self._history) - 1:
            self._index += 1
            self._history[self._index] = limits
        else:
            self._history.append(limits)
            self._index += 1

    def back(self) -> None:
        """Go to the previous limits, if any."""
        if self._index > 0:
            self._index -= 1

    def forward(self) -> None:
        """Go to the next limits, if any."""
        if self._index < len(self._history) - 1:
            self._index += 1

    def home(self) -> None:
        """Go back to the original limits."""
        self._index = 0