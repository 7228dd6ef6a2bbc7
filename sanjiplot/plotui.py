"""The small navigation bar on top of the plot: home, back and forward."""

from __future__ import annotations

from enum import Enum

from PIL import Image, ImageDraw

from .colors import WHITE, split_rgb
from .limits import LimitsInfo

SEPARATOR_COLOR = (158, 158, 158)
ICON_COLOR = (100, 100, 100)
FRAME_COLOR = (128, 128, 128)


class Button(Enum):
    INVALID = "invalid"
    HOME = "home"
    BACKWARD = "backward"
    FORWARD = "forward"


class PlotUI:
    """Three buttons that move through the zoom history of a ``LimitsInfo``."""

    def __init__(self, limits_info: LimitsInfo) -> None:
        self.limits_info = limits_info
        self.background_color = WHITE
        self.pressed: Button | None = None

    def button_at(self, x: int, y: int, width: int, height: int) -> Button:
        """Return the button under pixel ``(x, y)`` of a bar of the given size."""
        width, height = int(width), int(height)
        limit_x1 = width // 3
        limit_x2 = 2 * width // 3
        if not 0 <= y < height:
            return Button.INVALID
        if 0 <= x < limit_x1:
            return Button.HOME
        if limit_x1 < x < limit_x2:
            return Button.BACKWARD
        if limit_x2 < x < width:
            return Button.FORWARD
        return Button.INVALID

    def press(self, x: int, y: int, width: int, height: int) -> Button:
        """Remember which button the mouse went down on."""
        self.pressed = self.button_at(x, y, width, height)
        return self.pressed

    def release(self, x: int, y: int, width: int, height: int) -> Button | None:
        """Act on the button if it is the one that was pressed.

        Returns the button acted upon, or None if press and release differ.
        """
        button = self.button_at(x, y, width, height)
        if button is not self.pressed:
            return None
        if button is Button.HOME:
            self.limits_info.home()
        elif button is Button.BACKWARD:
            self.limits_info.back()
        elif button is Button.FORWARD:
            self.limits_info.forward()
        return button

    def render(self, width: int, height: int) -> Image.Image:
        """Draw the bar into a new RGB image of the given size."""
        width, height = max(0, int(width)), max(0, int(height))
        image = Image.new("RGB", (width, height), split_rgb(self.background_color))
        if width == 0 or height == 0:
            return image
        draw = ImageDraw.Draw(image)

        x1 = width // 3
        x2 = 2 * width // 3
        draw.line([(x1, 0), (x1, height)], fill=SEPARATOR_COLOR)
        draw.line([(x2, 0), (x2, height)], fill=SEPARATOR_COLOR)

        self._draw_home(draw, width, height)
        self._draw_chevrons(draw, width, height)

        draw.rectangle([0, 0, width - 1, height - 1], outline=FRAME_COLOR)
        return image

    @staticmethod
    def _draw_home(draw: ImageDraw.ImageDraw, width: int, height: int) -> None:
        cell = width // 3
        tip_x = int(0.5 * cell)
        tip_y = int(0.2 * height)
        start_x = tip_x - int(0.25 * cell)
        end_x = tip_x + int(0.25 * cell)
        roof_y = int(0.45 * height)
        inset = int(0.15 * (end_x - start_x))
        wall_left = start_x + inset
        wall_right = end_x - inset
        floor_y = int(0.8 * height)

        draw.line([(start_x, roof_y), (tip_x, tip_y)], fill=ICON_COLOR)
        draw.line([(end_x, roof_y), (tip_x, tip_y)], fill=ICON_COLOR)
        draw.line([(start_x, roof_y), (end_x, roof_y)], fill=ICON_COLOR)
        if floor_y - 1 >= roof_y + 1:
            draw.line([(wall_left, roof_y + 1), (wall_left, floor_y - 1)], fill=ICON_COLOR)
            draw.line([(wall_right, roof_y + 1), (wall_right, floor_y - 1)], fill=ICON_COLOR)
        draw.line([(wall_left, floor_y), (wall_right, floor_y)], fill=ICON_COLOR)

    @staticmethod
    def _draw_chevrons(draw: ImageDraw.ImageDraw, width: int, height: int) -> None:
        icon_height = 1 + 2 * int(height * 0.25)
        center_y = int(0.5 * height)
        top_y = center_y - (icon_height - 1) // 2
        bottom_y = center_y + (icon_height - 1) // 2

        back_cell = max(0, 2 * width // 3 - width // 3 - 1)
        base = width // 3 + int(back_cell * 0.5)
        left = base - int(back_cell * 0.15)
        right = base + int(back_cell * 0.15)
        draw.line([(right, top_y), (left, center_y)], fill=ICON_COLOR)
        draw.line([(left, center_y), (right, bottom_y)], fill=ICON_COLOR)

        fwd_cell = max(0, width - 2 * width // 3 - 1)
        base = 2 * width // 3 + int(fwd_cell * 0.5)
        left = base - int(fwd_cell * 0.15)
        right = base + int(fwd_cell * 0.15)
        draw.line([(left, top_y), (right, center_y)], fill=ICON_COLOR)
        draw.line([(right, center_y), (left, bottom_y)], fill=ICON_COLOR)