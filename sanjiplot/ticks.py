"""Tick placement, tick labels and rendering of the horizontal and vertical tick areas."""

from __future__ import annotations

import functools
import math
from dataclasses import dataclass
from typing import Iterator

from PIL import Image, ImageDraw, ImageFont

from .colors import WHITE, split_rgb
from .limits import LimitsInfo, ScalingsAndLimits

TICK_HEIGHT = 11
TICK_WIDTH = 11
X_MARGIN = 2
Y_MARGIN = 2
NUM_DIGITS = 5

_LINE_COLOR = (171, 171, 171)
_TICK_COLOR = (0, 0, 0)


@dataclass(frozen=True)
class FontMetrics:
    """Metrics of the fixed-width font used for tick labels."""

    char_width: int = 8
    height: int = 16

    def text_width(self, text: str) -> int:
        """Width in pixels of the widest line of ``text``."""
        return self.char_width * max((len(line) for line in text.splitlines()), default=0)


@dataclass(frozen=True)
class TickLabel:
    """One tick: its data value, label text, pixel position and label box.

    ``rect`` is ``(left, top, width, height)`` of the label; ``shown`` tells
    whether the label fits inside the tick area.
    """

    value: float
    text: str
    position: int
    shown: bool
    rect: tuple[int, int, int, int]


def format_tick_label(value: float) -> str:
    """Format a tick value with about five significant digits."""
    value = float(value)
    if value == 0.0:
        return "0"
    exp = math.log10(abs(value))
    if 0.0 <= exp < NUM_DIGITS:
        precision = NUM_DIGITS - int(math.floor(exp)) - 1
        return f"%.{precision}g" % value
    if exp < 0.0 and abs(exp) < NUM_DIGITS - 1:
        return f"%.{NUM_DIGITS - 1}g" % value
    return f"%.{NUM_DIGITS - 1}e" % value


def _cdiv(a: int, b: int) -> int:
    """Integer division truncating toward zero."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b > 0) else -q


def tick_multiplier(lo: float, hi: float, length_px: int, min_px_per_tick: int) -> float:
    """Return the multiplier ``m`` so that ticks lie at integer multiples of ``1/m``.

    The ticks are as dense as possible while keeping at least
    ``min_px_per_tick`` pixels per tick over ``length_px`` pixels.
    """
    if lo == hi:
        return 1.0
    if not (math.isfinite(lo) and math.isfinite(hi)):
        raise ValueError("tick range must be finite")
    length = int(length_px)
    min_px = int(min_px_per_tick)
    if min_px <= 0:
        raise ValueError("min_px_per_tick must be positive")
    if length < min_px:
        raise ValueError("length_px is smaller than min_px_per_tick")

    mult = 1.0
    mult10 = 1.0
    px_per_tick = -1
    while True:
        scale = mult * mult10
        count = math.floor(scale * hi) - math.ceil(scale * lo) + 1
        if count != 0:
            px_per_tick = _cdiv(length, count)
        mult *= 2.0
        if mult >= 10.0:
            mult = 1.0
            mult10 *= 10.0
        if not (px_per_tick == -1 or px_per_tick >= min_px):
            break
    mult *= mult10

    while px_per_tick < min_px:
        mult /= 2.0
        count = math.floor(mult * hi) - math.ceil(mult * lo) + 1
        if count != 0:
            px_per_tick = _cdiv(length, count)
    return mult


def _tick_values(first: float, last: float, mult: float, slack: float,
                 snap_zero: bool) -> Iterator[float]:
    x = first
    while True:
        yield x
        nxt = (x * mult + 1.0) / mult
        if snap_zero and abs(nxt) < 1e-17:
            nxt = 0.0
        if nxt <= x:
            return
        x = nxt
        if not x <= last + slack:
            return


def _finite(s: ScalingsAndLimits) -> bool:
    return all(math.isfinite(v) for v in (s.xplot_min, s.xplot_max, s.yplot_min,
                                          s.yplot_max, s.dx_to_px, s.dy_to_px))


@functools.lru_cache(maxsize=1)
def _font():
    return ImageFont.load_default()


class _TicksArea:
    def __init__(self, limits_info: LimitsInfo, metrics: FontMetrics | None = None) -> None:
        self.limits_info = limits_info
        self.metrics = metrics or FontMetrics()
        self.background_color = WHITE

    def _canvas(self, width: int, height: int) -> tuple[Image.Image, ImageDraw.ImageDraw]:
        image = Image.new("RGB", (int(width), int(height)), split_rgb(self.background_color))
        return image, ImageDraw.Draw(image)


class HTicksArea(_TicksArea):
    """The tick area below the plot, showing x-axis ticks."""

    def height(self) -> int:
        """Height in pixels the area needs."""
        return self.metrics.height + 2 * Y_MARGIN + TICK_HEIGHT

    def min_width(self) -> int:
        """Width of the widest possible label; no ticks are drawn below it."""
        return self.metrics.text_width("-0." + "0" * (NUM_DIGITS - 1) + "e-100")

    def ticks(self, width: int, plot_width: int, plot_height: int) -> list[TickLabel]:
        """Ticks for an area ``width`` pixels wide above a plot of the given size."""
        width = int(width)
        min_width = self.min_width()
        if width < min_width:
            return []
        s = self.limits_info.scalings_and_limits(plot_width, plot_height)
        if not _finite(s):
            return []
        lo, hi = s.xplot_min, s.xplot_max
        if lo == hi:
            mult = 1.0
            first = last = lo
        else:
            mult = tick_multiplier(lo, hi, width, min_width)
            first = math.ceil(mult * lo) / mult
            last = math.floor(mult * hi) / mult
        x_mid = int(plot_width) // 2
        text_height = self.metrics.height

        labels = []
        for x in _tick_values(first, last, mult, 0.0, snap_zero=False):
            text = format_tick_label(x)
            text_width = self.metrics.text_width(text)
            position = x_mid if lo == hi else int((x - lo) * s.dx_to_px)
            half = text_width // 2
            shown = position - half >= 0 and position + half < width
            rect = (position - half, TICK_HEIGHT, text_width, text_height + 2 * Y_MARGIN)
            labels.append(TickLabel(x, text, position, shown, rect))
        return labels

    def render(self, width: int, height: int, plot_width: int,
               plot_height: int) -> Image.Image:
        """Draw the tick area into a new RGB image."""
        image, draw = self._canvas(width, height)
        if int(width) < self.min_width():
            return image
        axis_y = (TICK_HEIGHT - 1) // 2
        draw.line([(0, axis_y), (int(width) - 1, axis_y)], fill=_LINE_COLOR)
        for tick in self.ticks(width, plot_width, plot_height):
            draw.line([(tick.position, 0), (tick.position, TICK_HEIGHT - 1)], fill=_TICK_COLOR)
            if tick.shown:
                left, top, _, _ = tick.rect
                draw.text((left, top + Y_MARGIN), tick.text, fill=_TICK_COLOR, font=_font())
        return image


class VTicksArea(_TicksArea):
    """The tick area left of the plot, showing y-axis ticks."""

    x_margin = X_MARGIN
    y_margin = Y_MARGIN

    def __init__(self, limits_info: LimitsInfo, metrics: FontMetrics | None = None) -> None:
        super().__init__(limits_info, metrics)
        self.last_width = -1

    def min_height(self) -> int:
        """Height below which no ticks are drawn."""
        return self.metrics.height + 2 * Y_MARGIN

    def max_label_width(self, plot_area_width: int, plot_area_height: int) -> int:
        """Width needed for the widest label, margins included, for a plot of that size."""
        s = self.limits_info.scalings_and_limits(plot_area_width, plot_area_height)
        if not _finite(s):
            return 2 * X_MARGIN
        lo, hi = s.yplot_min, s.yplot_max
        mult = 1.0 if lo == hi else tick_multiplier(lo, hi, int(plot_area_height),
                                                     self.metrics.height)
        first = math.ceil(mult * lo) / mult
        last = math.floor(mult * hi) / mult
        widest = max(self.metrics.text_width(format_tick_label(y))
                     for y in _tick_values(first, last, mult, 0.0, snap_zero=False))
        return widest + 2 * X_MARGIN

    def ticks(self, height: int, plot_width: int, plot_height: int) -> list[TickLabel]:
        """Ticks for an area ``height`` pixels high beside a plot of the given size."""
        height = int(height)
        if height < self.min_height():
            return []
        s = self.limits_info.scalings_and_limits(plot_width, plot_height)
        if not _finite(s):
            return []
        lo, hi = s.yplot_min, s.yplot_max
        if lo == hi:
            mult = 1.0
            first = last = lo
        else:
            mult = tick_multiplier(lo, hi, height, self.metrics.height)
            first = math.ceil(mult * lo) / mult
            last = math.floor(mult * hi) / mult
        y_mid = int(plot_height) // 2
        text_height = self.metrics.height
        half = (text_height - 2) // 2 if text_height % 2 == 0 else (text_height - 1) // 2

        labels = []
        for y in _tick_values(first, last, mult, 0.1 / mult, snap_zero=True):
            text = format_tick_label(y)
            text_width = self.metrics.text_width(text)
            position = y_mid if lo == hi else int((hi - y) * s.dy_to_px)
            shown = position - half >= 0 and position + half < height
            rect = (0, position - half, text_width + 2 * X_MARGIN, text_height)
            labels.append(TickLabel(y, text, position, shown, rect))
        return labels

    def render(self, width: int, height: int, plot_width: int,
               plot_height: int) -> Image.Image:
        """Draw the tick area into a new RGB image."""
        image, draw = self._canvas(width, height)
        if int(height) < self.min_height():
            return image
        width = int(width)
        axis_x = width - (TICK_WIDTH + 1) // 2
        draw.line([(axis_x, 0), (axis_x, int(height) - 1)], fill=_LINE_COLOR)
        for tick in self.ticks(height, plot_width, plot_height):
            draw.line([(width - TICK_WIDTH, tick.position), (width - 1, tick.position)],
                      fill=_TICK_COLOR)
            if tick.shown:
                left, top, _, _ = tick.rect
                draw.text((left + X_MARGIN, top), tick.text, fill=_TICK_COLOR, font=_font())
        return image