import pytest

from sanjiplot.colors import (
    BLACK,
    BLUE,
    GRAY,
    RED,
    WHITE,
    hsv_to_rgb,
    split_rgb,
)


def test_zero_saturation_full_value_is_white():
    assert hsv_to_rgb(0.3, 0.0, 1.0) == WHITE


def test_zero_value_is_black():
    assert hsv_to_rgb(0.6, 0.8, 0.0) == BLACK


def test_half_value_gray_truncates_like_source():
    assert hsv_to_rgb(0.7, 0.0, 0.5) == GRAY


def test_pure_red_hue():
    assert hsv_to_rgb(0.0, 1.0, 1.0) == 0xFF0000


def test_hue_one_wraps_to_zero():
    assert hsv_to_rgb(1.0, 1.0, 1.0) == hsv_to_rgb(0.0, 1.0, 1.0)


def test_cyan_hue():
    assert hsv_to_rgb(0.5, 1.0, 1.0) == 0x00FFFF


@pytest.mark.parametrize("h", [i / 12 for i in range(12)])
def test_result_fits_in_24_bits(h):
    color = hsv_to_rgb(h, 0.75, 0.9)
    assert 0 <= color <= 0xFFFFFF


def test_split_white():
    assert split_rgb(WHITE) == (0xFF, 0xFF, 0xFF)


def test_split_black():
    assert split_rgb(BLACK) == (0, 0, 0)


@pytest.mark.parametrize("color", [RED, BLUE, GRAY])
def test_split_round_trip(color):
    r, g, b = split_rgb(color)
    assert (r << 16) | (g << 8) | b == color