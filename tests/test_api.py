import numpy as np
import pytest

from sanjiplot import api
from sanjiplot.colors import BLACK, RED
from sanjiplot.limits import AxesRatio


@pytest.fixture(autouse=True)
def fresh():
    api.init()


def test_init_leaves_no_figure():
    api.figure("a")
    api.init()
    assert api.current_figure() is None
    assert api.figure("").name == "0"


def test_plot_empty_creates_nothing():
    api.plot([], [])
    assert api.current_figure() is None


def test_plot_creates_figure():
    x = np.linspace(0, 9, 10)
    api.plot(x, x, {"line_style": "o"})
    fig = api.current_figure()
    assert fig.name == "0"
    assert len(fig.line_data) == 1


def test_figure_switches_current():
    first = api.figure("Simple data")
    api.plot([0, 1], [0, 1])
    second = api.figure("Other data")
    api.plot([0, 6], [-2, -2])
    api.plot([0, 6], [-2.2, -2.2])
    assert api.current_figure() is second
    assert len(first.line_data) == 1
    assert len(second.line_data) == 2
    assert second.index == 1


def test_quiver_flags_added_to_style():
    api.quiver([0.0], [0.0], [1.0], [0.0], {"color": RED}, flags=["center_arrows"])
    arrows = list(api.current_figure().arrow_data)
    assert arrows[0].style == {"color": RED, "center_arrows": 1.0}
    assert arrows[0].priority == 0


def test_quiver_empty_creates_nothing():
    api.quiver([], [], [], [])
    assert api.current_figure() is None


def test_limits_setters():
    api.plot([0, 1], [0, 1])
    api.set_xlimits(-2.0, 3.0)
    api.set_ylimits(-4.0, 5.0)
    li = api.current_figure().limits_info
    assert (li.xmin, li.xmax, li.ymin, li.ymax) == (-2.0, 3.0, -4.0, 5.0)
    assert li.xmin_set and li.xmax_set and li.ymin_set and li.ymax_set


def test_single_setters_and_ratio():
    api.plot([0, 1], [0, 1])
    api.set_xmin(-1.0)
    api.set_ymax(7.0)
    api.set_axes_ratio("equal")
    li = api.current_figure().limits_info
    assert li.xmin == -1.0 and li.ymax == 7.0
    assert not li.xmax_set and not li.ymin_set
    assert li.axes_ratio is AxesRatio.EQUAL


def test_background_setters():
    api.plot([0, 1], [0, 1])
    api.set_plot_background_color(BLACK)
    api.set_xticks_background_color(RED)
    api.set_yticks_background_color(RED)
    area = api.current_figure().render_area
    assert area.plot_area.background_color == BLACK
    assert area.tick_area_x.background_color == RED
    assert area.tick_area_y.background_color == RED


def test_setters_without_figure_do_nothing():
    api.set_xmin(1.0)
    api.set_xlimits(0.0, 1.0)
    api.set_plot_background_color(BLACK)
    assert api.current_figure() is None