"""Named colours and colour conversion helpers.

Colours are packed as ``0xRRGGBB`` integers.
"""

from __future__ import annotations

BLACK = 0x000000
WHITE = 0xFFFFFF
BLUE = 0x1F77B4
ORANGE = 0xFF7F0E
GREEN = 0x2CA02C
RED = 0xD62728
PURPLE = 0x9467BD
BROWN = 0x8C564B
PINK = 0xE377C2
GRAY = 0x7F7F7F
OLIVE = 0xBCBD22
CYAN = 0x17BECF

# Named colour maps
TURBO = 1


def _pack(r: float, g: float, b: float) -> int:
    return (
        (int(r * 0xFF0000) & 0xFF0000)
        + (int(g * 0xFF00) & 0xFF00)
        + (int(b * 0xFF) & 0xFF)
    )


def hsv_to_rgb(h: float, s: float, v: float) -> int:
    """Convert HSV (each component in [0, 1]) to a packed ``0xRRGGBB`` colour."""
    if s <= 0.0:
        return _pack(v, v, v)

    hh = h * 360.0
    if hh >= 360.0:
        hh = 0.0
    hh /= 60.0
    sector = int(hh)
    ff = hh - sector
    p = v * (1.0 - s)
    q = v * (1.0 - s * ff)
    t = v * (1.0 - s * (1.0 - ff))

    if sector == 0:
        rgb = (v, t, p)
    elif sector == 1:
        rgb = (q, v, p)
    elif sector == 2:
        rgb = (p, v, t)
    elif sector == 3:
        rgb = (p, q, v)
    elif sector == 4:
        rgb = (t, p, v)
    else:
        rgb = (v, p, q)
    return _pack(*rgb)


def split_rgb(color: int) -> tuple[int, int, int]:
    """Split a packed ``0xRRGGBB`` colour into its red, green and blue bytes."""
    color = int(color)
    return (color >> 16) & 0xFF, (color >> 8) & 0xFF, color & 0xFF