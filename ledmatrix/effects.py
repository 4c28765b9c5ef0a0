"""A frame buffer for matrix animations and the base class for patterns."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ledmatrix.color import BLACK, RGB


@dataclass
class Drawable:
    """Something that draws animation frames onto a display."""

    name: str = ""
    display: Any = None

    def is_runnable(self) -> bool:
        return False

    def is_playlist(self) -> bool:
        return False

    def draw_frame(self) -> int:
        """Draw one frame and return the delay in milliseconds before the next."""
        if self.display is not None:
            self.display.fill_screen(0)
        return 0

    def start(self) -> None:
        """Called when the pattern becomes active."""

    def stop(self) -> None:
        """Called when the pattern stops being active."""


class Effects:
    """A width by height pixel buffer with one spare slot for off-screen writes.

    Index 0 of ``leds`` is never shown; any coordinate outside the matrix maps
    onto it, so drawing code may write past the edges without checks.
    """

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("width and height must be positive")
        self.width = width
        self.height = height
        self.leds: list[RGB] = [BLACK] * (width * height + 1)

    @property
    def center_x(self) -> int:
        return self.width // 2

    @property
    def center_y(self) -> int:
        return self.height // 2

    def xy(self, x: int, y: int) -> int:
        """Buffer index of a pixel; 0 (the spare slot) when off the matrix."""
        if not 0 <= x < self.width or not 0 <= y < self.height:
            return 0
        return y * self.width + x + 1

    def set_pixel(self, x: int, y: int, color: RGB) -> None:
        self.leds[self.xy(x, y)] = color

    def get_pixel(self, x: int, y: int) -> RGB:
        return self.leds[self.xy(x, y)]

    def show_frame(self, display: Any) -> None:
        """Copy every visible pixel of the buffer to the display."""
        for y in range(self.height):
            for x in range(self.width):
                colour = self.leds[self.xy(x, y)]
                display.draw_pixel_rgb888(x, y, colour.r, colour.g, colour.b)

    def dim_all(self, value: int) -> None:
        """Scale the brightness of the whole buffer down to value/256."""
        self.leds = [colour.nscale8(value) for colour in self.leds]

    def clear_frame(self) -> None:
        self.leds = [BLACK] * len(self.leds)

    def bresenham_line(self, x0: int, y0: int, x1: int, y1: int, color: RGB) -> None:
        """Add a colour onto every pixel of the line between two points."""
        dx = abs(x1 - x0)
        sx = 1 if x0 < x1 else -1
        dy = -abs(y1 - y0)
        sy = 1 if y0 < y1 else -1
        err = dx + dy
        while True:
            index = self.xy(x0, y0)
            self.leds[index] = self.leds[index] + color
            if x0 == x1 and y0 == y1:
                break
            e2 = 2 * err
            if e2 > dy:
                err += dy
                x0 += sx
            if e2 < dx:
                err += dx
                y0 += sy