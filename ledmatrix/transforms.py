"""Whole-frame transformations that work in place on an Effects buffer."""

from __future__ import annotations

from ledmatrix.effects import Effects


def _add_into(effects: Effects, target: int, source: int) -> None:
    leds = effects.leds
    leds[target] = leds[target] + leds[source]


def _dim(effects: Effects, index: int, scale: int) -> None:
    leds = effects.leds
    leds[index] = leds[index].nscale8(scale)


def caleidoscope1(effects: Effects) -> None:
    """Copy the top-left quadrant onto the other three quadrants."""
    xy, leds = effects.xy, effects.leds
    w, h = effects.width, effects.height
    for x in range(effects.center_x):
        for y in range(effects.center_y):
            source = leds[xy(x, y)]
            leds[xy(w - 1 - x, y)] = source
            leds[xy(w - 1 - x, h - 1 - y)] = source
            leds[xy(x, h - 1 - y)] = source


def caleidoscope2(effects: Effects) -> None:
    """Mirror the top-left quadrant onto the other three quadrants."""
    xy, leds = effects.xy, effects.leds
    w, h = effects.width, effects.height
    for x in range(effects.center_x):
        for y in range(effects.center_y):
            leds[xy(w - 1 - x, y)] = leds[xy(y, x)]
            leds[xy(x, h - 1 - y)] = leds[xy(y, x)]
            leds[xy(w - 1 - x, h - 1 - y)] = leds[xy(x, y)]


def caleidoscope3(effects: Effects) -> None:
    """Copy one diagonal triangle of the top-left area onto the other."""
    xy, leds = effects.xy, effects.leds
    h = effects.height
    x = 0
    while x <= effects.center_x and x < h:
        y = 0
        while y <= x and y < h:
            leds[xy(x, y)] = leds[xy(y, x)]
            y += 1
        x += 1


def caleidoscope4(effects: Effects) -> None:
    """Like caleidoscope3, but across the other diagonal."""
    xy, leds = effects.xy, effects.leds
    cx, cy = effects.center_x, effects.center_y
    for x in range(cx + 1):
        for y in range(cy - x + 1):
            leds[xy(cy - y, cx - x)] = leds[xy(x, y)]


def spiral_stream(effects: Effects, x: int, y: int, r: int, dimm: int) -> None:
    """Twist a square of radius r around (x, y) counter-clockwise, dimming it."""
    xy = effects.xy
    for d in range(r, -1, -1):
        for i in range(x - d, x + d + 1):
            target = xy(i, y - d)
            _add_into(effects, target, xy(i + 1, y - d))
            _dim(effects, target, dimm)
        for i in range(y - d, y + d + 1):
            target = xy(x + d, i)
            _add_into(effects, target, xy(x + d, i + 1))
            _dim(effects, target, dimm)
        for i in range(x + d, x - d - 1, -1):
            target = xy(i, y + d)
            _add_into(effects, target, xy(i - 1, y + d))
            _dim(effects, target, dimm)
        for i in range(y + d, y - d - 1, -1):
            target = xy(x - d, i)
            _add_into(effects, target, xy(x - d, i - 1))
            _dim(effects, target, dimm)


def expand(effects: Effects, center_x: int, center_y: int, radius: int, dimm: int) -> None:
    """Push the contents of a circle outwards by one pixel, dimming the rim."""
    if radius == 0:
        return
    xy, leds = effects.xy, effects.leds
    current = radius
    while current > 0:
        a, b = radius, 0
        error = 1 - a
        next_a, next_b = current - 2, 0
        next_error = 1 - next_a
        while a >= b:
            moves = (
                ((a, b), (next_a, next_b)),
                ((b, a), (next_b, next_a)),
                ((-a, b), (-next_a, next_b)),
                ((-b, a), (-next_b, next_a)),
                ((-a, -b), (-next_a, -next_b)),
                ((-b, -a), (-next_b, -next_a)),
                ((a, -b), (next_a, -next_b)),
                ((b, -a), (next_b, -next_a)),
            )
            for (tx, ty), (sx, sy) in moves:
                leds[xy(tx + center_x, ty + center_y)] = leds[xy(sx + center_x, sy + center_y)]
            for (tx, ty), _ in moves:
                _dim(effects, xy(tx + center_x, ty + center_y), dimm)

            b += 1
            if error < 0:
                error += 2 * b + 1
            else:
                a -= 1
                error += 2 * (b - a + 1)

            next_b += 1
            if next_error < 0:
                next_error += 2 * next_b + 1
            else:
                next_a -= 1
                next_error += 2 * (next_b - next_a + 1)
        current -= 1


def stream_right(
    effects: Effects,
    scale: int,
    from_x: int = 0,
    to_x: int | None = None,
    from_y: int = 0,
    to_y: int | None = None,
) -> None:
    """Give everything a fading tail towards the right."""
    to_x = effects.width if to_x is None else to_x
    to_y = effects.height if to_y is None else to_y
    xy = effects.xy
    for x in range(from_x + 1, to_x):
        for y in range(from_y, to_y):
            target = xy(x, y)
            _add_into(effects, target, xy(x - 1, y))
            _dim(effects, target, scale)
    for y in range(from_y, to_y):
        _dim(effects, xy(0, y), scale)


def stream_left(
    effects: Effects,
    scale: int,
    from_x: int | None = None,
    to_x: int = 0,
    from_y: int = 0,
    to_y: int | None = None,
) -> None:
    """Give everything a fading tail towards the left."""
    from_x = effects.width if from_x is None else from_x
    to_y = effects.height if to_y is None else to_y
    xy = effects.xy
    for x in range(to_x, from_x):
        for y in range(from_y, to_y):
            target = xy(x, y)
            _add_into(effects, target, xy(x + 1, y))
            _dim(effects, target, scale)
    for y in range(from_y, to_y):
        _dim(effects, xy(0, y), scale)


def stream_down(effects: Effects, scale: int) -> None:
    """Give everything a fading tail downwards."""
    xy = effects.xy
    for x in range(effects.width):
        for y in range(1, effects.height):
            target = xy(x, y)
            _add_into(effects, target, xy(x, y - 1))
            _dim(effects, target, scale)
    for x in range(effects.width):
        _dim(effects, xy(x, 0), scale)


def stream_up(effects: Effects, scale: int) -> None:
    """Give everything a fading tail upwards."""
    xy = effects.xy
    for x in range(effects.width):
        for y in range(effects.height - 2, -1, -1):
            target = xy(x, y)
            _add_into(effects, target, xy(x, y + 1))
            _dim(effects, target, scale)
    for x in range(effects.width):
        _dim(effects, xy(x, effects.height - 1), scale)


def move_down(effects: Effects) -> None:
    """Shift every row down by one; the top row stays as it was."""
    vertical_move_from(effects, 0, effects.height - 1)


def vertical_move_from(effects: Effects, start: int, end: int) -> None:
    """Shift rows start..end down by one, overwriting row end."""
    xy, leds = effects.xy, effects.leds
    for y in range(end, start, -1):
        for x in range(effects.width):
            leds[xy(x, y)] = leds[xy(x, y - 1)]


def copy_rect(effects: Effects, x0: int, y0: int, x1: int, y1: int, x2: int, y2: int) -> None:
    """Copy the rectangle (x0, y0)-(x1, y1) so its corner lands on (x2, y2)."""
    xy, leds = effects.xy, effects.leds
    for y in range(y0, y1 + 1):
        for x in range(x0, x1 + 1):
            leds[xy(x + x2 - x0, y + y2 - y0)] = leds[xy(x, y)]


def move_x(effects: Effects, delta: int) -> None:
    """Shift each row left delta times, feeding its first pixel in at the right."""
    xy, leds = effects.xy, effects.leds
    width = effects.width
    for y in range(effects.height):
        first = leds[xy(0, y)]
        for _ in range(delta):
            for x in range(width):
                leds[xy(x, y)] = leds[xy(x + 1, y)]
            leds[xy(width - 1, y)] = first


def move_y(effects: Effects, delta: int) -> None:
    """Shift each column up delta times, feeding its top pixel in at the bottom."""
    xy, leds = effects.xy, effects.leds
    height = effects.height
    for x in range(effects.width):
        first = leds[xy(x, 0)]
        for _ in range(delta):
            for y in range(height):
                leds[xy(x, y)] = leds[xy(x, y + 1)]
            leds[xy(x, height - 1)] = first