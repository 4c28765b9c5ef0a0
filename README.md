# ledmatrix

Tools for mapping and animating grids of LED matrix panels, in pure Python with
no dependencies.

## Modules

- `ledmatrix.virtual_panel`: `VirtualMatrixPanel` presents a grid of physical
  panels, wired as one chain, as a single virtual canvas.
  `get_coords(x, y)` turns a virtual pixel into a `VirtualCoords` position on
  the chain (`(-1, -1)` when the pixel is off the canvas). The cable layout is
  picked with `ChainType` (for example `ChainType.CHAIN_TOP_RIGHT_DOWN` or the
  zig-zag `ChainType.CHAIN_BOTTOM_LEFT_UP_ZZ`), and four-scan panels with
  `set_scan_rate(ScanRate.FOUR_SCAN_32PX_HIGH)` and the other `ScanRate` members.
  `set_rotation(0..3)` rotates the canvas by quarter turns and swaps `width` and
  `height` for 1 and 3; `set_zoom_factor(1..4)` makes `draw_pixel` draw a square
  block per pixel, and other values are ignored. `draw_pixel`,
  `draw_pixel_rgb888`, `fill_screen`, `fill_screen_rgb888`, `clear_screen` and
  `flip_dma_buffer` are passed on to the display object you supply, which must
  offer methods of the same names.
- `ledmatrix.color`: `RGB`, an immutable colour whose channels are checked to be
  in 0..255. `+` adds channel by channel and clamps at 255; `nscale8(scale)`
  dims to `scale/256`. `BLACK` and `WHITE` are provided.
- `ledmatrix.effects`: `Effects(width, height)` is a pixel buffer (`leds`) with
  one spare slot at index 0 that catches every write outside the matrix. It has
  `xy`, `set_pixel`, `get_pixel`, `dim_all`, `clear_frame`, `bresenham_line`
  (adds a colour along a line) and `show_frame(display)`, which sends each
  pixel to `display.draw_pixel_rgb888`. `Drawable` is the base class for
  patterns, with `draw_frame`, `start` and `stop`.
- `ledmatrix.transforms`: in-place operations on an `Effects` buffer:
  `caleidoscope1` to `caleidoscope4`, `spiral_stream`, `expand`,
  `stream_right`, `stream_left`, `stream_down`, `stream_up`, `move_down`,
  `vertical_move_from`, `copy_rect`, `move_x` and `move_y`.
- `ledmatrix.boid`: `Vector` (immutable, with `mag`, `normalized`, `limited`,
  `dist` and arithmetic operators) and `Boid`, a flocking agent with `run`,
  `flock`, `separate`, `align`, `cohesion`, `seek`, `arrive`, `repel_force`,
  `wrap_around_borders`, `avoid_borders` and `bounce_off_borders`. Pass a
  `random.Random` as `rng` for repeatable starting velocities.
- `ledmatrix.attractor`: `Attractor(x, y, mass=10.0, g=0.5)`, whose
  `attract(boid)` returns a gravitational pull with the distance clamped to 5..32.
- `ledmatrix.maze`: `MazePattern(effects, color_for=None, rng=None)` grows a
  maze one step per `draw_frame(display)` call on a half-resolution grid, and
  starts a new one when it is finished. `generate()` runs until at most one open
  cell is left. Without `color_for`, cells are drawn in grey.

## Install

```
pip install .
pip install ".[test]"   # with pytest
```

## Example

```python
from ledmatrix.virtual_panel import VirtualMatrixPanel, ChainType


class PrintDisplay:
    def draw_pixel(self, x, y, color):
        print("pixel", x, y, color)

    def draw_pixel_rgb888(self, x, y, r, g, b):
        print("rgb", x, y, r, g, b)

    def fill_screen(self, color): ...
    def fill_screen_rgb888(self, r, g, b): ...
    def clear_screen(self): ...
    def flip_dma_buffer(self): ...


display = PrintDisplay()
panel = VirtualMatrixPanel(display, 2, 2, 64, 32, ChainType.CHAIN_TOP_RIGHT_DOWN)
coords = panel.get_coords(10, 40)
panel.draw_pixel(10, 40, 0xFFFF)
```

```python
from ledmatrix.effects import Effects
from ledmatrix.color import RGB
from ledmatrix import transforms

fx = Effects(32, 32)
fx.set_pixel(3, 4, RGB(255, 0, 0))
transforms.stream_down(fx, 200)
fx.show_frame(display)
```

## What it does not do

The package does not talk to any panel hardware: there is no driver, DMA
buffer or pin configuration. Every drawing call goes to a display object you
provide. There is no text or font drawing, no colour palettes, and no
playlist or main loop for running patterns.