import pytest

from ledmatrix.color import BLACK, RGB, WHITE
from ledmatrix.effects import Effects
from ledmatrix.transforms import (
    caleidoscope1,
    caleidoscope2,
    caleidoscope3,
    caleidoscope4,
    copy_rect,
    expand,
    move_down,
    move_x,
    move_y,
    spiral_stream,
    stream_down,
    stream_left,
    stream_right,
    stream_up,
    vertical_move_from,
)


def gradient(width=8, height=8):
    effects = Effects(width, height)
    for y in range(height):
        for x in range(width):
            effects.set_pixel(x, y, RGB(x * 20, y * 20, 5))
    return effects


def snapshot(effects):
    return {
        (x, y): effects.get_pixel(x, y)
        for y in range(effects.height)
        for x in range(effects.width)
    }


def test_caleidoscope1_copies_quadrant():
    e = gradient()
    before = snapshot(e)
    caleidoscope1(e)
    for x in range(4):
        for y in range(4):
            assert e.get_pixel(x, y) == before[(x, y)]
            assert e.get_pixel(7 - x, y) == before[(x, y)]
            assert e.get_pixel(7 - x, 7 - y) == before[(x, y)]
            assert e.get_pixel(x, 7 - y) == before[(x, y)]


def test_caleidoscope2_mirrors_opposite_corner():
    e = gradient()
    before = snapshot(e)
    caleidoscope2(e)
    for x in range(4):
        for y in range(4):
            assert e.get_pixel(7 - x, 7 - y) == before[(x, y)]
            assert e.get_pixel(7 - x, y) == before[(y, x)]


def test_caleidoscope3_makes_triangle_symmetric():
    e = gradient()
    caleidoscope3(e)
    for x in range(5):
        for y in range(x + 1):
            assert e.get_pixel(x, y) == e.get_pixel(y, x)


def test_caleidoscope4_touches_only_top_left_block():
    e = gradient()
    before = snapshot(e)
    caleidoscope4(e)
    assert e.get_pixel(4, 4) == before[(0, 0)]
    for (x, y), colour in before.items():
        if x > 4 or y > 4:
            assert e.get_pixel(x, y) == colour


def test_stream_down_propagates_full_column():
    e = Effects(6, 5)
    e.set_pixel(2, 0, WHITE)
    stream_down(e, 255)
    assert all(e.get_pixel(2, y) == WHITE for y in range(5))
    assert all(e.get_pixel(1, y) == BLACK for y in range(5))


def test_stream_up_propagates_full_column():
    e = Effects(6, 5)
    e.set_pixel(3, 4, WHITE)
    stream_up(e, 255)
    assert all(e.get_pixel(3, y) == WHITE for y in range(5))
    assert all(e.get_pixel(4, y) == BLACK for y in range(5))


def test_stream_right_propagates_full_row():
    e = Effects(6, 5)
    e.set_pixel(0, 3, WHITE)
    stream_right(e, 255)
    assert all(e.get_pixel(x, 3) == WHITE for x in range(6))
    assert all(e.get_pixel(x, 2) == BLACK for x in range(6))


def test_stream_left_moves_one_step():
    e = Effects(6, 5)
    e.set_pixel(5, 3, WHITE)
    stream_left(e, 255)
    assert e.get_pixel(4, 3) == WHITE
    assert e.get_pixel(0, 3) == BLACK


def test_stream_with_zero_scale_blanks_everything():
    e = gradient()
    stream_down(e, 0)
    assert all(colour == BLACK for colour in snapshot(e).values())


def test_move_down_shifts_rows():
    e = gradient()
    before = snapshot(e)
    move_down(e)
    for x in range(8):
        assert e.get_pixel(x, 0) == before[(x, 0)]
        for y in range(1, 8):
            assert e.get_pixel(x, y) == before[(x, y - 1)]


def test_vertical_move_from_limits_range():
    e = gradient()
    before = snapshot(e)
    vertical_move_from(e, 2, 5)
    for x in range(8):
        for y in (0, 1, 2, 6, 7):
            assert e.get_pixel(x, y) == before[(x, y)]
        for y in (3, 4, 5):
            assert e.get_pixel(x, y) == before[(x, y - 1)]


def test_copy_rect_duplicates_region():
    e = gradient()
    before = snapshot(e)
    copy_rect(e, 0, 0, 1, 1, 5, 5)
    for dx in range(2):
        for dy in range(2):
            assert e.get_pixel(5 + dx, 5 + dy) == before[(dx, dy)]
    assert e.get_pixel(0, 0) == before[(0, 0)]


@pytest.mark.parametrize("width,height", [(8, 8), (5, 3)])
def test_move_x_by_one_rotates_rows(width, height):
    e = gradient(width, height)
    before = snapshot(e)
    move_x(e, 1)
    for y in range(height):
        for x in range(width):
            assert e.get_pixel(x, y) == before[((x + 1) % width, y)]


def test_move_y_by_one_rotates_columns():
    e = gradient(4, 6)
    before = snapshot(e)
    move_y(e, 1)
    for x in range(4):
        for y in range(6):
            assert e.get_pixel(x, y) == before[(x, (y + 1) % 6)]


def test_move_x_zero_is_identity():
    e = gradient()
    before = snapshot(e)
    move_x(e, 0)
    assert snapshot(e) == before


def test_spiral_stream_with_zero_dimm_blacks_square():
    e = Effects(9, 9)
    e.leds = [WHITE] * len(e.leds)
    spiral_stream(e, 4, 4, 1, 0)
    for x in range(3, 6):
        for y in range(3, 6):
            assert e.get_pixel(x, y) == BLACK
    assert e.get_pixel(0, 0) == WHITE


def test_expand_zero_radius_changes_nothing():
    e = gradient()
    before = snapshot(e)
    expand(e, 4, 4, 0, 0)
    assert snapshot(e) == before


def test_expand_keeps_uniform_frame_at_full_brightness():
    e = Effects(9, 9)
    e.leds = [WHITE] * len(e.leds)
    expand(e, 4, 4, 2, 255)
    assert all(colour == WHITE for colour in snapshot(e).values())


def test_expand_dims_rim():
    e = Effects(9, 9)
    e.leds = [WHITE] * len(e.leds)
    expand(e, 4, 4, 2, 0)
    assert e.get_pixel(6, 4) == BLACK
    assert e.get_pixel(0, 0) == WHITE