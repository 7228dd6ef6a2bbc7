import numpy as np
import pytest
from PIL import Image

from sanjiplot.colors import BLACK, BLUE, RED
from sanjiplot.figure import Figure, FigureRegistry
from sanjiplot.limits import AxesRatio, LimitsInfo


def test_default_name_is_index():
    assert Figure("", 3).name == "3"
    assert Figure("Simple data", 3).name == "Simple data"


def test_plot_rows_mismatch_raises():
    fig = Figure()
    with pytest.raises(ValueError):
        fig.plot([0, 1, 2], [0, 1], {}, 0)


def test_plot_limits_match_limits_info():
    x = np.linspace(0, 9, 10)
    y = np.linspace(0.1, 1, 10)
    fig = Figure()
    fig.plot(x, y, {"line_style": "o"}, 0)
    expected = LimitsInfo()
    expected.update_limits(x, y)
    got = fig.limits_info
    assert (got.xmin, got.xmax, got.ymin, got.ymax) == (
        expected.xmin, expected.xmax, expected.ymin, expected.ymax)
    assert got.xmin < 0.0 and got.xmax > 9.0


def test_plot_sorted_by_priority():
    fig = Figure()
    x = np.linspace(0, 1, 5)
    fig.plot(x, np.sin(x), {"color": RED}, 10)
    fig.plot(x, np.cos(x), {"color": BLUE}, 2)
    assert [d.priority for d in fig.line_data] == [2, 10]
    assert [d.style["color"] for d in fig.line_data] == [BLUE, RED]


def test_setters_ignored_before_data():
    fig = Figure()
    fig.set_xmin(-1.0)
    fig.set_axes_ratio("equal")
    assert fig.limits_info is None
    assert fig.render_area is None


def test_setters_after_plot():
    fig = Figure()
    fig.plot([0, 6], [-2, -2], {}, 0)
    fig.set_xmin(-1.0)
    fig.set_ymax(5.0)
    assert fig.limits_info.xmin == -1.0
    assert fig.limits_info.xmin_set
    assert fig.limits_info.ymax == 5.0
    assert fig.limits_info.ymax_set
    assert not fig.limits_info.xmax_set


def test_axes_ratio():
    fig = Figure()
    fig.plot([0, 1], [0, 1], {}, 0)
    fig.set_axes_ratio("other")
    assert fig.limits_info.axes_ratio is AxesRatio.NONE
    fig.set_axes_ratio("equal")
    assert fig.limits_info.axes_ratio is AxesRatio.EQUAL


def test_quiver_mismatch_raises():
    fig = Figure()
    with pytest.raises(ValueError):
        fig.quiver([0, 1], [0, 1], [1], [0, 0], {}, 0)


def test_quiver_colormap_needs_arrow_length():
    fig = Figure()
    with pytest.raises(ValueError):
        fig.quiver([0], [0], [1], [0], {"use_colormap": 1}, 0)


def test_quiver_single_arrow_limits_at_tip():
    fig = Figure()
    fig.quiver([0.0], [0.0], [1.0], [0.0], {}, 0)
    li = fig.limits_info
    assert (li.xmin, li.xmax, li.ymin, li.ymax) == (1.0, 1.0, 0.0, 0.0)
    assert len(fig.arrow_data) == 1
    assert fig.arrow_data.has_data()


def test_quiver_arrow_length_normalises():
    fig = Figure()
    fig.quiver([0.0], [0.0], [3.0], [4.0], {"arrow_length": 1.0}, 0)
    assert fig.limits_info.xmin == pytest.approx(0.6)
    assert fig.limits_info.ymin == pytest.approx(0.8)


def test_background_colors():
    fig = Figure()
    fig.plot([0, 1], [0, 1], {}, 0)
    fig.set_plot_background_color(BLACK)
    fig.set_xticks_background_color(RED)
    fig.set_yticks_background_color(BLUE)
    assert fig.render_area.plot_area.background_color == BLACK
    assert fig.render_area.tick_area_x.background_color == RED
    assert fig.render_area.tick_area_y.background_color == BLUE


def test_render_empty_is_white():
    img = Figure().render(40, 30)
    assert img.size == (40, 30)
    assert img.getextrema() == ((255, 255), (255, 255), (255, 255))


def test_render_with_data(tmp_path):
    fig = Figure()
    fig.plot([0.0, 1.0, 2.0], [0.0, 1.0, 4.0], {}, 0)
    img = fig.render(320, 240)
    assert img.size == (320, 240)
    assert min(lo for lo, _ in img.getextrema()) < 255
    path = tmp_path / "fig.png"
    fig.save(path, 320, 240)
    with Image.open(path) as saved:
        assert saved.size == (320, 240)


def test_registry_numbers_and_current():
    reg = FigureRegistry()
    assert reg.current() is None
    a = reg.new_figure("")
    b = reg.new_figure("Other data")
    assert (a.index, a.name) == (0, "0")
    assert (b.index, b.name) == (1, "Other data")
    assert reg.current() is b
    assert reg.figures == [a, b]


def test_registry_grows():
    reg = FigureRegistry(2)
    figs = [reg.new_figure("") for _ in range(3)]
    assert [f.index for f in figs] == [0, 1, 2]
    assert reg.current() is figs[2]