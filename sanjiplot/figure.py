"""Figures that collect line and arrow data, and the registry that numbers them."""

from __future__ import annotations

import os
from typing import Mapping

import numpy as np
from PIL import Image

from .limits import AxesRatio, LimitsInfo
from .plotdata import ArrowDataSet, LineDataSet
from .renderarea import RenderArea

_WHITE = (255, 255, 255)


class Figure:
    """A single figure window holding one plot.

    Limits, data containers and the render area are created by the first
    call to :meth:`plot` or :meth:`quiver`; until then the setters have no
    effect.
    """

    def __init__(self, name: str = "", index: int = 0) -> None:
        self.index = int(index)
        self.name = name if name else str(self.index)
        self.limits_info: LimitsInfo | None = None
        self.line_data: LineDataSet | None = None
        self.arrow_data: ArrowDataSet | None = None
        self.render_area: RenderArea | None = None

    def __repr__(self) -> str:
        return f"Figure(name={self.name!r}, index={self.index})"

    def _ensure_data(self) -> LimitsInfo:
        if self.limits_info is None:
            self.limits_info = LimitsInfo()
            self.line_data = LineDataSet()
            self.arrow_data = ArrowDataSet()
        return self.limits_info

    def _ensure_render_area(self) -> None:
        if self.render_area is None and self.line_data is not None:
            self.render_area = RenderArea(self.limits_info, self.line_data, self.arrow_data)

    def plot(self, x, y, style: Mapping[str, float] | None = None, priority: int = 0) -> None:
        """Add a line series; ``y`` has one row per ``x`` value and one column per curve."""
        x_arr = np.asarray(x, dtype=float).reshape(-1)
        y_arr = np.asarray(y, dtype=float)
        if y_arr.ndim == 0:
            y_arr = y_arr.reshape(1)
        if x_arr.shape[0] != y_arr.shape[0]:
            raise ValueError("Figure.plot: x.rows() != y.rows()")
        if x_arr.size == 0:
            raise ValueError("Figure.plot: no data to plot")

        limits = self._ensure_data()
        limits.update_limits(x_arr, y_arr)
        self.line_data.add(priority, x_arr, y_arr, style)
        self._ensure_render_area()

    def quiver(self, x, y, u, v, style: Mapping[str, float] | None = None,
               priority: int = 0) -> None:
        """Add arrows at ``(x, y)`` pointing along ``(u, v)``."""
        style = dict(style or {})
        x_arr, y_arr, u_arr, v_arr = (np.asarray(a, dtype=float).reshape(-1)
                                      for a in (x, y, u, v))
        for label, other in (("y", y_arr), ("u", u_arr), ("v", v_arr)):
            if x_arr.shape[0] != other.shape[0]:
                raise ValueError(f"Figure.quiver: x.rows() != {label}.rows()")
        if x_arr.size == 0:
            raise ValueError("Figure.quiver: no data to plot")

        limits = self._ensure_data()

        use_colormap = "use_colormap" in style
        if use_colormap and "arrow_length" not in style:
            raise ValueError("Must provide argument 'arrow_length' when using the option "
                             "'use_colormap' for 'quiver'.")
        arrow_length = float(style.get("arrow_length", -1.0))

        if use_colormap or arrow_length > 0.0:
            phi = np.arctan2(v_arr, u_arr)
            du = np.cos(phi) * arrow_length
            dv = np.sin(phi) * arrow_length
        else:
            du, dv = u_arr, v_arr
        tips_x = x_arr + du
        tips_y = y_arr + dv
        xmin, xmax = float(tips_x.min()), float(tips_x.max())
        ymin, ymax = float(tips_y.min()), float(tips_y.max())

        if not limits.xmin_set and xmin < limits.xmin:
            limits.xmin = xmin - 0.025 * (xmax - xmin)
        if not limits.xmax_set and xmax > limits.xmax:
            limits.xmax = xmax + 0.025 * (xmax - xmin)
        if not limits.ymin_set and ymin < limits.ymin:
            limits.ymin = ymin - 0.025 * (ymax - ymin)
        if not limits.ymax_set and ymax > limits.ymax:
            limits.ymax = ymax + 0.025 * (ymax - ymin)

        self.arrow_data.add(priority, x_arr, y_arr, u_arr, v_arr, style)
        self._ensure_render_area()

    def set_axes_ratio(self, axes_ratio: str) -> None:
        """Use ``"equal"`` to give both axes the same scale; other values are ignored."""
        if self.render_area is not None and axes_ratio == "equal":
            self.limits_info.axes_ratio = AxesRatio.EQUAL

    def set_xmin(self, xmin: float) -> None:
        if self.render_area is not None:
            self.limits_info.xmin = xmin
            self.limits_info.xmin_set = True

    def set_xmax(self, xmax: float) -> None:
        if self.render_area is not None:
            self.limits_info.xmax = xmax
            self.limits_info.xmax_set = True

    def set_ymin(self, ymin: float) -> None:
        if self.render_area is not None:
            self.limits_info.ymin = ymin
            self.limits_info.ymin_set = True

    def set_ymax(self, ymax: float) -> None:
        if self.render_area is not None:
            self.limits_info.ymax = ymax
            self.limits_info.ymax_set = True

    def set_plot_background_color(self, color: int) -> None:
        if self.render_area is not None:
            self.render_area.plot_area.background_color = int(color)

    def set_xticks_background_color(self, color: int) -> None:
        if self.render_area is not None and self.render_area.tick_area_x is not None:
            self.render_area.tick_area_x.background_color = int(color)

    def set_yticks_background_color(self, color: int) -> None:
        if self.render_area is not None and self.render_area.tick_area_y is not None:
            self.render_area.tick_area_y.background_color = int(color)

    def render(self, width: int = 800, height: int = 600) -> Image.Image:
        """Draw the figure into a new RGB image; an empty figure is plain white."""
        width, height = int(width), int(height)
        if self.render_area is None:
            return Image.new("RGB", (width, height), _WHITE)
        return self.render_area.render(width, height)

    def save(self, path: str | os.PathLike, width: int = 800, height: int = 600) -> None:
        """Render the figure and write it to ``path``; the suffix picks the format."""
        self.render(width, height).save(path)


class FigureRegistry:
    """Hands out figure numbers, reusing the lowest free one, and tracks the current figure."""

    def __init__(self, capacity: int = 10) -> None:
        self._free: list[bool] = [True] * max(1, int(capacity))
        self._figures: dict[int, Figure] = {}
        self._current = -1

    @property
    def figures(self) -> list[Figure]:
        return [self._figures[i] for i in sorted(self._figures)]

    def new_figure(self, name: str = "") -> Figure:
        """Create a figure on the lowest free number and make it current."""
        try:
            index = self._free.index(True)
        except ValueError:
            index = len(self._free)
            self._free.extend([True] * len(self._free))
        self._free[index] = False
        fig = Figure(name, index)
        self._figures[index] = fig
        self._current = index
        return fig

    def current(self) -> Figure | None:
        """The most recently created figure, or None if there is none."""
        return self._figures.get(self._current)