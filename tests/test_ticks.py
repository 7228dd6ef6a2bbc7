import math

import pytest

from sanjiplot.colors import RED, split_rgb
from sanjiplot.limits import LimitsInfo
from sanjiplot.ticks import (
    FontMetrics,
    HTicksArea,
    VTicksArea,
    format_tick_label,
    tick_multiplier,
)


def _limits(x, y):
    info = LimitsInfo()
    info.update_limits(x, y)
    return info


def test_text_width_counts_characters():
    metrics = FontMetrics()
    assert metrics.text_width("abc") == 3 * metrics.char_width
    assert metrics.text_width("") == 0
    assert metrics.text_width("ab\nabcd") == 4 * metrics.char_width


def test_format_zero():
    assert format_tick_label(0.0) == "0"


def test_format_small_uses_exponent():
    assert format_tick_label(1e-5) == "1.0000e-05"


def test_format_plain_value():
    assert format_tick_label(2.5) == "2.5"


@pytest.mark.parametrize("value", [0.001, 0.3, 1.0, 7.25, 42.0, 999.0, -3.5, 1234.5, 1e7, -2e-9])
def test_format_round_trips_approximately(value):
    text = format_tick_label(value)
    assert math.isclose(float(text), value, rel_tol=1e-3)


def test_multiplier_for_degenerate_range():
    assert tick_multiplier(2.0, 2.0, 100, 10) == 1.0


def test_multiplier_rejects_too_short_axis():
    with pytest.raises(ValueError):
        tick_multiplier(0.0, 1.0, 5, 10)


def test_multiplier_rejects_non_finite():
    with pytest.raises(ValueError):
        tick_multiplier(0.0, math.inf, 100, 10)


@pytest.mark.parametrize("lo,hi,length,min_px", [
    (0.0, 1.0, 300, 16),
    (-0.25, 10.25, 400, 96),
    (-1000.0, 5000.0, 500, 20),
    (0.001, 0.002, 200, 16),
])
def test_multiplier_keeps_ticks_apart(lo, hi, length, min_px):
    mult = tick_multiplier(lo, hi, length, min_px)
    count = math.floor(mult * hi) - math.ceil(mult * lo) + 1
    assert mult > 0
    assert count >= 1
    assert length // count >= min_px


def test_hticks_height_and_min_width():
    metrics = FontMetrics()
    area = HTicksArea(LimitsInfo(), metrics)
    assert area.height() == metrics.height + 2 * 2 + 11
    assert area.min_width() == metrics.text_width("-0.0000e-100")


def test_hticks_empty_when_too_narrow():
    area = HTicksArea(_limits([0, 10], [0, 1]))
    assert area.ticks(area.min_width() - 1, 400, 300) == []


def test_hticks_are_ordered_and_in_range():
    info = _limits([0, 10], [0, 1])
    area = HTicksArea(info)
    ticks = area.ticks(400, 400, 300)
    assert len(ticks) >= 1
    values = [t.value for t in ticks]
    positions = [t.position for t in ticks]
    assert values == sorted(values)
    assert positions == sorted(positions)
    assert all(info.xmin <= v <= info.xmax for v in values)
    for tick in ticks:
        assert tick.text == format_tick_label(tick.value)
        if tick.shown:
            left, top, w, _ = tick.rect
            assert left >= 0
            assert left + w <= 400 + 1
            assert top == 11


def test_hticks_spacing_respects_min_width():
    area = HTicksArea(_limits([0, 10], [0, 1]))
    ticks = area.ticks(400, 400, 300)
    gaps = [b.position - a.position for a, b in zip(ticks, ticks[1:])]
    assert all(gap >= area.min_width() - 1 for gap in gaps)


def test_hticks_render_uses_background_color():
    area = HTicksArea(_limits([0, 10], [0, 1]))
    area.background_color = RED
    image = area.render(400, 100, 400, 300)
    assert image.size == (400, 100)
    assert image.getpixel((399, 99)) == split_rgb(RED)


def test_hticks_render_draws_ticks():
    area = HTicksArea(_limits([0, 10], [0, 1]))
    image = area.render(400, area.height(), 400, 300)
    ticks = area.ticks(400, 400, 300)
    inside = [t for t in ticks if 0 <= t.position < 400]
    assert inside
    assert image.getpixel((inside[0].position, 0)) == (0, 0, 0)


def test_vticks_min_height():
    metrics = FontMetrics()
    area = VTicksArea(LimitsInfo(), metrics)
    assert area.min_height() == metrics.height + 2 * 2
    assert area.last_width == -1


def test_vticks_empty_when_too_low():
    area = VTicksArea(_limits([0, 10], [0, 1]))
    assert area.ticks(area.min_height() - 1, 400, 300) == []


def test_vticks_are_ordered():
    info = _limits([0, 10], [0, 1])
    area = VTicksArea(info)
    ticks = area.ticks(300, 400, 300)
    assert len(ticks) >= 2
    values = [t.value for t in ticks]
    positions = [t.position for t in ticks]
    assert values == sorted(values)
    assert positions == sorted(positions, reverse=True)
    assert "0" in [t.text for t in ticks]
    gaps = [a.position - b.position for a, b in zip(ticks, ticks[1:])]
    assert all(gap >= area.metrics.height - 1 for gap in gaps)


def test_vticks_max_label_width_matches_a_label():
    area = VTicksArea(_limits([0, 10], [0, 1]))
    ticks = area.ticks(300, 400, 300)
    widest = area.max_label_width(400, 300)
    widths = {area.metrics.text_width(t.text) for t in ticks}
    assert widest - 2 * 2 in widths
    assert widest - 2 * 2 == max(w for w in widths if w <= widest - 4)


def test_vticks_render_draws_ticks():
    area = VTicksArea(_limits([0, 10], [0, 1]))
    image = area.render(60, 300, 400, 300)
    ticks = [t for t in area.ticks(300, 400, 300) if 0 <= t.position < 300]
    assert image.size == (60, 300)
    assert ticks
    assert image.getpixel((59, ticks[0].position)) == (0, 0, 0)