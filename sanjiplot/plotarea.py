"""The plot area: draws line series, arrows and images, and handles zoom selection."""

from __future__ import annotations

import cmath
import math
from itertools import pairwise
from typing import Sequence

import numpy as np
from PIL import Image, ImageDraw

from .colors import BLACK, TURBO, WHITE, split_rgb
from .limits import AxesRatio, LimitsInfo, ScalingsAndLimits
from .plotdata import ArrowDataSet, LineDataSet

Point = tuple[float, float]

DOT_RADIUS = 4

TAIL_WIDTH = 0.2
TAIL_LENGTH = 0.7
HEAD_WIDTH = 0.4
HEAD_LENGTH = 0.3

_BASE_TAIL = (
    complex(0.0, -0.5 * TAIL_WIDTH),
    complex(TAIL_LENGTH, -0.5 * TAIL_WIDTH),
    complex(TAIL_LENGTH, 0.5 * TAIL_WIDTH),
    complex(0.0, 0.5 * TAIL_WIDTH),
)
_BASE_HEAD = (
    complex(0.0, -0.5 * HEAD_WIDTH),
    complex(HEAD_LENGTH, 0.0),
    complex(0.0, 0.5 * HEAD_WIDTH),
)

# Pixel coordinates are clamped to this range before drawing.
_COORD_LIMIT = 1 << 20

# Polynomial approximation of the Turbo colour map.
_TURBO_RED = (0.13572138, 4.61539260, -42.66032258, 132.13108234, -152.94239396, 59.28637943)
_TURBO_GREEN = (0.09140261, 2.19418839, 4.84296658, -14.18503333, 4.27729857, 2.82956604)
_TURBO_BLUE = (0.10667330, 12.64194608, -60.58204836, 110.36276771, -89.90310912, 27.34824973)


def _div(a: float, b: float) -> float:
    try:
        return a / b
    except ZeroDivisionError:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)


def _log10(value: float) -> float:
    if value == 0:
        return -math.inf
    if value < 0 or math.isnan(value):
        return math.nan
    return math.log10(value)


def _turbo_rgb(value: float) -> tuple[int, int, int]:
    t = min(1.0, max(0.0, value))
    t = min(255, math.floor(t * 256.0)) / 255.0
    powers = [t ** k for k in range(6)]

    def channel(coeffs: Sequence[float]) -> int:
        c = min(1.0, max(0.0, sum(p * k for p, k in zip(powers, coeffs))))
        return min(255, math.floor(c * 256.0))

    return channel(_TURBO_RED), channel(_TURBO_GREEN), channel(_TURBO_BLUE)


def to_pixel(s: ScalingsAndLimits, x_mid: int, y_mid: int, x: float, y: float,
             fixed_scale: float | None = None) -> tuple[int, int]:
    """Convert data coordinates to pixel coordinates.

    With ``fixed_scale`` the given factor is used for both axes and the point
    is placed relative to the middle of the area.  Otherwise the scalings in
    ``s`` are used; a degenerate axis maps to its middle pixel.
    """
    if fixed_scale is not None:
        return (int(x_mid + (x - s.xplot_min) * fixed_scale),
                int(y_mid + (s.yplot_max - y) * fixed_scale))
    x_px = x_mid if s.xplot_min == s.xplot_max else int((x - s.xplot_min) * s.dx_to_px)
    y_px = y_mid if s.yplot_min == s.yplot_max else int((s.yplot_max - y) * s.dy_to_px)
    return x_px, y_px


def arrow_polygons(x: float, y: float, u: float, v: float,
                   arrow_length: float | None = None,
                   center: bool = False) -> tuple[list[Point], list[Point]]:
    """Corners of an arrow's head (3 points) and tail (4 points) in data coordinates.

    The arrow starts at ``(x, y)`` and points along ``(u, v)``.  Its length is
    ``arrow_length`` or, if that is None, the length of ``(u, v)``.  With
    ``center`` the arrow is shifted back by half of its unit shape.
    """
    length = math.hypot(u, v) if arrow_length is None else float(arrow_length)
    rot = cmath.exp(1j * math.atan2(v, u))
    shift = 0.5 if center else 0.0
    tail = [(c - shift) * rot * length for c in _BASE_TAIL]
    head_offset = rot * TAIL_LENGTH * length
    head = [head_offset + (c - shift) * rot * length for c in _BASE_HEAD]
    origin = complex(x, y)
    return ([((origin + c).real, (origin + c).imag) for c in head],
            [((origin + c).real, (origin + c).imag) for c in tail])


def _style_char(style, key: str) -> str | None:
    if key not in style:
        return None
    value = style[key]
    if isinstance(value, str):
        return value
    return chr(int(value))


def _clip(point: tuple[int, int]) -> tuple[int, int]:
    return (max(-_COORD_LIMIT, min(_COORD_LIMIT, point[0])),
            max(-_COORD_LIMIT, min(_COORD_LIMIT, point[1])))


def _as_image(data) -> Image.Image:
    if isinstance(data, Image.Image):
        data = np.asarray(data)
    arr = np.asarray(data)
    channels = arr.shape[2] if arr.ndim == 3 else 1
    if channels not in (3, 4):
        raise ValueError(f"image has {channels} channels; 3 or 4 are supported")
    return Image.fromarray(np.ascontiguousarray(arr, dtype=np.uint8))


def _dotted_line(draw: ImageDraw.ImageDraw, start: tuple[int, int],
                 end: tuple[int, int], fill) -> None:
    length = math.hypot(end[0] - start[0], end[1] - start[1])
    steps = int(length // 3)
    for k in range(steps + 1):
        t = 0.0 if steps == 0 else k * 3.0 / length
        draw.point((round(start[0] + t * (end[0] - start[0])),
                    round(start[1] + t * (end[1] - start[1]))), fill=fill)


class PlotArea:
    """The area that shows the data, plus the rubber-band zoom selection."""

    def __init__(self, limits_info: LimitsInfo,
                 line_data: LineDataSet | None = None,
                 arrow_data: ArrowDataSet | None = None,
                 image=None) -> None:
        self.limits_info = limits_info
        self.line_data = line_data
        self.arrow_data = arrow_data
        self.image = None if image is None else _as_image(image)
        self.background_color = WHITE
        self.selection_start: tuple[int, int] = (0, 0)
        self.selection_end: tuple[int, int] = (0, 0)
        self.selection_active = False

    # Rendering

    def render(self, width: int, height: int) -> Image.Image:
        """Draw the plot area into a new RGB image of the given size."""
        width, height = int(width), int(height)
        canvas = Image.new("RGB", (width, height), split_rgb(self.background_color))
        draw = ImageDraw.Draw(canvas)
        s = self.limits_info.scalings_and_limits(width, height)

        if self.line_data is not None:
            self._draw_lines(draw, width, height, s)
        if self.arrow_data is not None:
            self._draw_arrows(draw, width, height, s)
        if self.image is not None:
            self._draw_image(canvas, width, height)
        if self.selection_active:
            self._draw_selection(draw)
        return canvas

    @staticmethod
    def _pixel(s: ScalingsAndLimits, width: int, height: int, x: float, y: float,
               fixed_scale: float | None = None) -> tuple[int, int] | None:
        try:
            return _clip(to_pixel(s, width // 2, height // 2, x, y, fixed_scale))
        except (ValueError, OverflowError):
            return None

    def _draw_lines(self, draw: ImageDraw.ImageDraw, width: int, height: int,
                    s: ScalingsAndLimits) -> None:
        for series in self.line_data:
            fill = split_rgb(int(series.style.get("color", BLACK)))
            line_style = _style_char(series.style, "line_style")
            count = series.x.size

            if line_style == "o":
                if count == 1:
                    raise ValueError("a single data point cannot be drawn")
                for xv, row in zip(series.x, series.y):
                    for yv in row:
                        p = self._pixel(s, width, height, xv, yv)
                        if p is not None:
                            draw.ellipse([p[0] - DOT_RADIUS, p[1] - DOT_RADIUS,
                                          p[0] + DOT_RADIUS, p[1] + DOT_RADIUS], fill=fill)
                continue

            if line_style not in (None, "-", "."):
                raise ValueError(f"'{line_style}' is not a valid 'line_style'")
            if count == 1:
                raise ValueError("a single data point cannot be drawn as a line")
            dotted = line_style == "."
            for (x0, x1), (r0, r1) in zip(pairwise(series.x), pairwise(series.y)):
                for y0, y1 in zip(r0, r1):
                    a = self._pixel(s, width, height, x0, y0)
                    b = self._pixel(s, width, height, x1, y1)
                    if a is None or b is None:
                        continue
                    if dotted:
                        _dotted_line(draw, a, b, fill)
                    else:
                        draw.line([a, b], fill=fill)

    def _draw_arrows(self, draw: ImageDraw.ImageDraw, width: int, height: int,
                     s: ScalingsAndLimits) -> None:
        for arrows in self.arrow_data:
            style = arrows.style
            use_colormap = "use_colormap" in style
            fill = split_rgb(int(style.get("color", BLACK)))
            if use_colormap:
                for key in ("colormap", "min", "max"):
                    if key not in style:
                        raise ValueError(f"Must provide argument '{key}' when using "
                                         "the option 'use_colormap' for 'quiver'.")
                if int(style["colormap"]) != TURBO:
                    raise ValueError("Currently 'quiver' supports only the colormap 'TURBO'.")
                log_scale = "use_logscale" in style
                lo = float(style["min"])
                hi = float(style["max"])
            fixed = arrows.x.size <= 1
            center = "center_arrows" in style

            for xv, yv, uv, vv in zip(arrows.x, arrows.y, arrows.u, arrows.v):
                data_length = math.hypot(uv, vv)
                if use_colormap or "arrow_length" in style:
                    if "arrow_length" not in style:
                        raise ValueError("Must provide argument 'arrow_length' when using "
                                         "the option 'use_colormap' for 'quiver'.")
                    length = float(style["arrow_length"])
                else:
                    length = data_length
                head, tail = arrow_polygons(xv, yv, uv, vv, length, center)

                if use_colormap:
                    if log_scale:
                        level = _div(_log10(data_length) - _log10(lo),
                                     _log10(hi) - _log10(lo))
                    else:
                        level = _div(data_length - lo, hi - lo)
                    fill = _turbo_rgb(level)

                scale = None
                if fixed:
                    if length == 0:
                        continue
                    scale = min(0.2 * height / length, 0.2 * width / length)
                for polygon in (head, tail):
                    points = [self._pixel(s, width, height, px, py, scale)
                              for px, py in polygon]
                    if None not in points:
                        draw.polygon(points, fill=fill)

    def _draw_image(self, canvas: Image.Image, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            return
        scaled = self.image.resize((width, height))
        if scaled.mode == "RGBA":
            canvas.paste(scaled.convert("RGB"), (0, 0), scaled)
        else:
            canvas.paste(scaled.convert("RGB"), (0, 0))

    def _draw_selection(self, draw: ImageDraw.ImageDraw) -> None:
        color = tuple(c - 128 if c > 127 else c + 128
                      for c in split_rgb(self.background_color))
        (sx, sy), (ex, ey) = self.selection_start, self.selection_end
        draw.line([(sx, sy), (sx, ey)], fill=color)
        draw.line([(sx, ey), (ex, ey)], fill=color)
        draw.line([(ex, ey), (ex, sy)], fill=color)
        draw.line([(ex, sy), (sx, sy)], fill=color)

    # Mouse interaction

    def press(self, x: int, y: int) -> None:
        """Start a zoom selection at the given pixel."""
        self.selection_start = (int(x), int(y))
        self.selection_end = self.selection_start
        self.selection_active = True

    def move(self, x: int, y: int) -> None:
        """Move the open corner of the zoom selection."""
        self.selection_end = (int(x), int(y))

    def release(self, x: int, y: int, width: int, height: int) -> bool:
        """Finish the selection in an area of the given size.

        Returns True if the selection had an area and new axes limits were
        added to the history.
        """
        self.selection_end = (int(x), int(y))
        self.selection_active = False

        (sx, sy), (ex, ey) = self.selection_start, self.selection_end
        diff_x = abs(sx - ex)
        diff_y = abs(sy - ey)
        if diff_x == 0 or diff_y == 0:
            return False

        li = self.limits_info
        equal = li.axes_ratio is AxesRatio.EQUAL
        x_range = li.xmax - li.xmin
        y_range = li.ymax - li.ymin
        x_to_px = _div(float(width), x_range)
        y_to_px = _div(float(height), y_range)
        if equal:
            if x_to_px >= y_to_px:
                x_to_px = y_to_px
                ymax = li.ymax
                xmin = li.xmin - max(_div(float(width), x_to_px) - x_range, 0.0) / 2.0
            else:
                y_to_px = x_to_px
                xmin = li.xmin
                ymax = li.ymax + max(_div(float(height), y_to_px) - y_range, 0.0) / 2.0
        else:
            xmin = li.xmin
            ymax = li.ymax

        x_sel_low = xmin + _div(min(sx, ex), x_to_px)
        x_sel_high = xmin + _div(max(sx, ex), x_to_px)
        y_sel_low = ymax - _div(max(sy, ey), y_to_px)
        y_sel_high = ymax - _div(min(sy, ey), y_to_px)

        if equal:
            sel_x_to_px = _div(diff_x, x_sel_high - x_sel_low)
            sel_y_to_px = _div(diff_y, y_sel_high - y_sel_low)
            if sel_x_to_px >= sel_y_to_px:
                x_mean = (x_sel_low + x_sel_high) / 2.0
                half = _div(0.5 * diff_x, sel_y_to_px)
                li.add_axes_limits(x_mean - half, x_mean + half, y_sel_low, y_sel_high)
            else:
                y_mean = (y_sel_low + y_sel_high) / 2.0
                half = _div(0.5 * diff_y, sel_x_to_px)
                li.add_axes_limits(x_sel_low, x_sel_high, y_mean - half, y_mean + half)
        else:
            li.add_axes_limits(x_sel_low, x_sel_high, y_sel_low, y_sel_high)
        return True