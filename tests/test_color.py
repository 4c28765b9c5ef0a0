import pytest

from ledmatrix.color import BLACK, RGB, WHITE


def test_default_is_black():
    assert RGB() == BLACK
    assert tuple(RGB()) == (0, 0, 0)


@pytest.mark.parametrize("channels", [(-1, 0, 0), (0, 256, 0), (0, 0, 300)])
def test_channel_out_of_range_rejected(channels):
    with pytest.raises(ValueError):
        RGB(*channels)


def test_nscale8_full_keeps_colour():
    colour = RGB(10, 200, 255)
    assert colour.nscale8(255) == colour


def test_nscale8_zero_gives_black():
    assert RGB(10, 200, 255).nscale8(0) == BLACK


@pytest.mark.parametrize("scale", [1, 64, 128, 200, 254])
def test_nscale8_never_brightens(scale):
    colour = RGB(17, 128, 255)
    dimmed = colour.nscale8(scale)
    assert all(d <= c for d, c in zip(dimmed, colour))


def test_nscale8_is_monotonic():
    colour = WHITE
    values = [colour.nscale8(s).r for s in range(256)]
    assert values == sorted(values)


def test_nscale8_rejects_bad_scale():
    with pytest.raises(ValueError):
        RGB(1, 2, 3).nscale8(256)


def test_add_saturates():
    assert RGB(200, 100, 255) + RGB(100, 100, 1) == RGB(255, 200, 255)


def test_add_is_commutative_and_black_is_identity():
    a = RGB(12, 34, 56)
    b = RGB(90, 200, 3)
    assert a + b == b + a
    assert a + BLACK == a


def test_add_with_non_colour_is_type_error():
    with pytest.raises(TypeError):
        RGB(1, 2, 3) + 5


def test_colours_are_immutable():
    colour = RGB(1, 2, 3)
    with pytest.raises(AttributeError):
        colour.r = 9
    assert colour.r == 1
    assert tuple(colour) == (1, 2, 3)