"""Lays out the plot area, the tick areas and the navigation bar."""

from __future__ import annotations

from dataclasses import dataclass

from PIL import Image

from .limits import LimitsInfo
from .plotarea import PlotArea
from .plotdata import ArrowDataSet, LineDataSet
from .plotui import PlotUI
from .ticks import NUM_DIGITS, TICK_WIDTH, FontMetrics, HTicksArea, VTicksArea

PLOT_UI_WIDTH = 90
MIN_PLOT_UI_WIDTH = 30
PLOT_UI_HEIGHT = 21
MIN_PLOT_UI_HEIGHT = 7

_WHITE = (255, 255, 255)


@dataclass(frozen=True)
class Layout:
    """Sizes of the parts of a render area.

    The y-tick area sits left, the plot area right of it with the x-tick area
    below.  ``ui_rect`` is ``(left, top, width, height)`` of the navigation
    bar, or None when it does not fit.
    """

    plot_width: int
    plot_height: int
    xtick_height: int
    ytick_width: int
    ui_rect: tuple[int, int, int, int] | None


class RenderArea:
    """Either an image view, or a data plot with tick areas and navigation."""

    def __init__(self, limits_info: LimitsInfo,
                 line_data: LineDataSet | None = None,
                 arrow_data: ArrowDataSet | None = None,
                 image=None,
                 metrics: FontMetrics | None = None) -> None:
        self.limits_info = limits_info
        self.metrics = metrics or FontMetrics()
        self.layout: Layout | None = None
        if image is not None:
            self.line_data = None
            self.arrow_data = None
            self.plot_area = PlotArea(limits_info, image=image)
            self.tick_area_x: HTicksArea | None = None
            self.tick_area_y: VTicksArea | None = None
            self.plot_ui: PlotUI | None = None
        else:
            self.line_data = line_data
            self.arrow_data = arrow_data
            self.plot_area = PlotArea(limits_info, line_data, arrow_data)
            self.tick_area_x = HTicksArea(limits_info, self.metrics)
            self.tick_area_y = VTicksArea(limits_info, self.metrics)
            self.plot_ui = PlotUI(limits_info)

    def _has_data(self) -> bool:
        return ((self.line_data is not None and self.line_data.has_data())
                or (self.arrow_data is not None and self.arrow_data.has_data()))

    def update_content(self, width: int, height: int) -> Layout | None:
        """Compute the layout for a render area of the given size.

        Returns None when there is no data to lay out.
        """
        if not self._has_data():
            return None
        width, height = int(width), int(height)
        xticks, yticks = self.tick_area_x, self.tick_area_y

        if height <= xticks.height():
            plot_height = height
            xtick_height = 0
        else:
            xtick_height = xticks.height()
            plot_height = height - xtick_height

        if plot_height >= yticks.min_height():
            if yticks.last_width == -1:
                widest = self.metrics.text_width("-0." + "0" * (NUM_DIGITS - 1) + "e-100")
                width_guess = width - widest - TICK_WIDTH - 2 * yticks.x_margin
            else:
                width_guess = width - yticks.last_width
            ytick_width = yticks.max_label_width(width_guess, plot_height) + TICK_WIDTH
        else:
            ytick_width = 0

        plot_width = width - ytick_width
        yticks.last_width = ytick_width

        if plot_width >= MIN_PLOT_UI_WIDTH and plot_height >= MIN_PLOT_UI_HEIGHT:
            ui_width = min(PLOT_UI_WIDTH, plot_width)
            ui_height = min(PLOT_UI_HEIGHT, plot_height)
            ui_rect = (width - ui_width, 0, ui_width, ui_height)
        else:
            ui_rect = None

        self.layout = Layout(plot_width, plot_height, xtick_height, ytick_width, ui_rect)
        return self.layout

    def render(self, width: int, height: int) -> Image.Image:
        """Draw the whole render area into a new RGB image of the given size."""
        width, height = int(width), int(height)
        layout = self.update_content(width, height)
        if layout is None:
            return self.plot_area.render(width, height)

        canvas = Image.new("RGB", (width, height), _WHITE)
        pw, ph = layout.plot_width, layout.plot_height
        if layout.ytick_width > 0 and ph > 0:
            canvas.paste(self.tick_area_y.render(layout.ytick_width, ph, pw, ph), (0, 0))
        if pw > 0 and ph > 0:
            canvas.paste(self.plot_area.render(pw, ph), (layout.ytick_width, 0))
        if layout.xtick_height > 0 and pw > 0:
            canvas.paste(self.tick_area_x.render(pw, layout.xtick_height, pw, ph),
                         (layout.ytick_width, ph))
        if layout.ui_rect is not None:
            left, top, ui_w, ui_h = layout.ui_rect
            canvas.paste(self.plot_ui.render(ui_w, ui_h), (left, top))
        return canvas