"""A maze that grows cell by cell using the growing-tree algorithm."""

from __future__ import annotations

import random
from enum import IntFlag
from typing import Any, Callable

from ledmatrix.color import RGB
from ledmatrix.effects import Drawable, Effects


class Direction(IntFlag):
    """Passage directions out of a maze cell; a cell's walls are a union of these."""

    NONE = 0
    UP = 1
    DOWN = 2
    LEFT = 4
    RIGHT = 8

    @property
    def offset(self) -> tuple[int, int]:
        """Step (dx, dy) taken when moving this way; anything else moves right."""
        if self is Direction.UP:
            return 0, -1
        if self is Direction.DOWN:
            return 0, 1
        if self is Direction.LEFT:
            return -1, 0
        return 1, 0

    @property
    def opposite(self) -> Direction:
        """The direction pointing back; anything but up, down or left gives left."""
        if self is Direction.UP:
            return Direction.DOWN
        if self is Direction.DOWN:
            return Direction.UP
        if self is Direction.LEFT:
            return Direction.RIGHT
        return Direction.LEFT

    def move(self, x: int, y: int) -> tuple[int, int]:
        dx, dy = self.offset
        return x + dx, y + dy


_DIRECTIONS = (Direction.UP, Direction.DOWN, Direction.LEFT, Direction.RIGHT)


def _grey(index: int) -> RGB:
    return RGB(index, index, index)


class MazePattern(Drawable):
    """Draws a maze on a half-resolution grid, two display pixels per cell.

    Cells sit on even pixel coordinates and the passages between them on the
    pixel in between; walls are the pixels that are never drawn.
    """

    ALGORITHM_COUNT = 1

    def __init__(
        self,
        effects: Effects,
        color_for: Callable[[int], RGB] | None = None,
        rng: random.Random | None = None,
    ) -> None:
        super().__init__(name="Maze")
        self.effects = effects
        self.color_for = color_for if color_for is not None else _grey
        self.rng = rng if rng is not None else random.Random()
        self.width = effects.width // 2
        self.height = effects.height // 2
        self.grid: list[list[Direction]] = self._empty_grid()
        self.cells: list[tuple[int, int]] = []
        self.directions: list[Direction] = list(_DIRECTIONS)
        self.algorithm = 0
        self.hue = 0
        self.hue_offset = 0

    def _empty_grid(self) -> list[list[Direction]]:
        return [[Direction.NONE] * self.width for _ in range(self.height)]

    def _shuffle_directions(self) -> None:
        dirs = self.directions
        for a in range(len(dirs)):
            r = self.rng.randrange(a, len(dirs))
            dirs[a], dirs[r] = dirs[r], dirs[a]

    def _choose_color(self, index: int) -> RGB:
        if self.algorithm == 1:
            colour = self.color_for(self.hue)
            self.hue = (self.hue + 1) & 0xFF
            return colour
        return self.color_for((index + self.hue_offset) & 0xFF)

    def _choose_index(self, count: int) -> int:
        if self.algorithm == 1:
            return self.rng.randrange(count)
        return count - 1

    def _in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def start(self) -> None:
        """Clear the frame and forget any maze in progress."""
        self.effects.clear_frame()
        self.cells = []
        self.hue = 0

    def draw_next_cell(self) -> None:
        """Carve one passage from the chosen cell, or retire it if it is boxed in."""
        if not self.cells:
            return
        index = self._choose_index(len(self.cells))
        px, py = self.cells[index]
        image_x, image_y = px * 2, py * 2

        self._shuffle_directions()
        colour = self._choose_color(index)

        for direction in self.directions:
            nx, ny = direction.move(px, py)
            if self._in_bounds(nx, ny) and self.grid[ny][nx] == Direction.NONE:
                self.grid[py][px] |= direction
                self.grid[ny][nx] |= direction.opposite
                passage_x, passage_y = direction.move(image_x, image_y)
                self.effects.set_pixel(passage_x, passage_y, colour)
                self.cells.append((nx, ny))
                return

        self.effects.set_pixel(image_x, image_y, colour)
        del self.cells[index]

    def generate(self) -> None:
        """Keep growing until at most one open cell is left."""
        while len(self.cells) > 1:
            self.draw_next_cell()

    def _reset(self) -> None:
        self.effects.clear_frame()
        self.grid = self._empty_grid()
        x = self.rng.randrange(self.width)
        y = self.rng.randrange(self.height)
        self.cells = [(x, y)]
        self.hue = 0
        self.hue_offset = self.rng.randrange(0, 256)

    def draw_frame(self, display: Any) -> int:
        """Advance the maze by one step and show it; starts a new maze when done."""
        if not self.cells:
            self._reset()

        self.draw_next_cell()

        if not self.cells:
            self.algorithm += 1
            if self.algorithm >= self.ALGORITHM_COUNT:
                self.algorithm = 0
            return 0

        self.effects.show_frame(display)
        return 0