"""Map a virtual canvas of chained LED panels onto one physical chain."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Protocol


class ScanRate(IntEnum):
    """How many rows a physical panel updates in parallel."""

    NORMAL_TWO_SCAN = 0
    NORMAL_ONE_SIXTEEN = 1
    FOUR_SCAN_32PX_HIGH = 2
    FOUR_SCAN_16PX_HIGH = 3
    FOUR_SCAN_64PX_HIGH = 4


class ChainType(IntEnum):
    """Cable layout of the panels, seen from the LED side of the display."""

    CHAIN_NONE = 0
    CHAIN_TOP_LEFT_DOWN = 1
    CHAIN_TOP_RIGHT_DOWN = 2
    CHAIN_BOTTOM_LEFT_UP = 3
    CHAIN_BOTTOM_RIGHT_UP = 4
    CHAIN_TOP_LEFT_DOWN_ZZ = 5
    CHAIN_TOP_RIGHT_DOWN_ZZ = 6
    CHAIN_BOTTOM_RIGHT_UP_ZZ = 7
    CHAIN_BOTTOM_LEFT_UP_ZZ = 8


@dataclass(frozen=True)
class VirtualCoords:
    """A position on the physical chain; (-1, -1) marks an invalid pixel."""

    x: int = -1
    y: int = -1

    @property
    def valid(self) -> bool:
        return self.x >= 0 and self.y >= 0


INVALID = VirtualCoords(-1, -1)


class Display(Protocol):
    """The operations the underlying chain of panels has to offer."""

    def draw_pixel(self, x: int, y: int, color: int) -> None: ...

    def draw_pixel_rgb888(self, x: int, y: int, r: int, g: int, b: int) -> None: ...

    def fill_screen(self, color: int) -> None: ...

    def fill_screen_rgb888(self, r: int, g: int, b: int) -> None: ...

    def clear_screen(self) -> None: ...

    def flip_dma_buffer(self) -> None: ...


def _int16(value: int) -> int:
    value &= 0xFFFF
    return value - 0x10000 if value >= 0x8000 else value


class VirtualMatrixPanel:
    """A grid of panels presented as one canvas, drawn through a single chain."""

    def __init__(
        self,
        display: Display,
        vmodule_rows: int,
        vmodule_cols: int,
        panel_res_x: int,
        panel_res_y: int,
        chain_type: ChainType = ChainType.CHAIN_NONE,
    ) -> None:
        self.display = display
        self.chain_type = ChainType(chain_type)
        self.scan_rate = ScanRate.NORMAL_TWO_SCAN
        self.panel_res_x = panel_res_x
        self.panel_res_y = panel_res_y
        self.vmodule_rows = vmodule_rows
        self.vmodule_cols = vmodule_cols
        self.virtual_res_x = vmodule_cols * panel_res_x
        self.virtual_res_y = vmodule_rows * panel_res_y
        # Last x index of the whole chain as the DMA engine sees it.
        self.dma_res_x = panel_res_x * vmodule_rows * vmodule_cols - 1
        self.width = self.virtual_res_x
        self.height = self.virtual_res_y
        self.rotation = 0
        self._rotate = 0
        self._scale_factor = 0

    @property
    def zoom_factor(self) -> int:
        return self._scale_factor

    def get_coords(self, x: int, y: int) -> VirtualCoords:
        """Translate a virtual pixel into its position on the physical chain."""
        if x < 0 or x >= self.width or y < 0 or y >= self.height:
            return INVALID

        vres_x, vres_y = self.virtual_res_x, self.virtual_res_y
        if self._rotate == 1:
            x, y = y, vres_y - 1 - x
        elif self._rotate == 2:
            x, y = vres_x - 1 - x, vres_y - 1 - y
        elif self._rotate == 3:
            x, y = vres_x - 1 - y, x

        px, py = self.panel_res_x, self.panel_res_y
        rows = self.vmodule_rows
        row = y // py

        def upright(r: int) -> tuple[int, int]:
            return (rows - (r + 1)) * vres_x + x, y % py

        def inverted(r: int) -> tuple[int, int]:
            return self.dma_res_x - x - r * vres_x, py - 1 - (y % py)

        chain = self.chain_type
        if chain is ChainType.CHAIN_TOP_RIGHT_DOWN:
            cx, cy = inverted(row) if row % 2 == 1 else upright(row)
        elif chain is ChainType.CHAIN_TOP_LEFT_DOWN:
            cx, cy = inverted(row) if row % 2 == 0 else upright(row)
        elif chain in (ChainType.CHAIN_TOP_RIGHT_DOWN_ZZ, ChainType.CHAIN_TOP_LEFT_DOWN_ZZ):
            cx, cy = upright(row)
        elif chain is ChainType.CHAIN_BOTTOM_LEFT_UP:
            row = rows - row - 1
            cx, cy = upright(row) if row % 2 == 1 else inverted(row)
        elif chain is ChainType.CHAIN_BOTTOM_RIGHT_UP:
            row = rows - row - 1
            cx, cy = upright(row) if row % 2 == 0 else inverted(row)
        elif chain in (ChainType.CHAIN_BOTTOM_LEFT_UP_ZZ, ChainType.CHAIN_BOTTOM_RIGHT_UP_ZZ):
            cx, cy = upright(rows - row - 1)
        else:
            cx, cy = x, y

        rate = self.scan_rate
        if rate in (ScanRate.FOUR_SCAN_32PX_HIGH, ScanRate.FOUR_SCAN_64PX_HIGH):
            if rate is ScanRate.FOUR_SCAN_64PX_HIGH and (y & 8) != ((y & 16) >> 1):
                y = ((y & 0b11000) ^ 0b11000) + (y & 0b11100111)
            if (y & 8) == 0:
                cx += (cx // px + 1) * px
            else:
                cx += (cx // px) * px
            cy = (y >> 4) * 8 + (y & 0b111)
        elif rate is ScanRate.FOUR_SCAN_16PX_HIGH:
            if (y & 8) == 0:
                cx += (px >> 2) * (((cx & 0xFFF0) >> 4) + 1)
            else:
                cx += (px >> 2) * ((cx & 0xFFF0) >> 4)
            if y < 32:
                cy = (y >> 4) * 8 + (y & 0b111)
            else:
                cy = ((y - 32) >> 4) * 8 + (y & 0b111)
                cx += 256

        return VirtualCoords(_int16(cx), _int16(cy))

    def draw_pixel(self, x: int, y: int, color: int) -> None:
        """Draw one virtual pixel, as a block of pixels when zoomed."""
        scale = self._scale_factor
        if scale > 1:
            start_x = _int16(x * scale)
            start_y = _int16(y * scale)
            for dx in range(scale):
                for dy in range(scale):
                    c = self.get_coords(start_x + dx, start_y + dy)
                    self.display.draw_pixel(c.x, c.y, color)
        else:
            c = self.get_coords(x, y)
            self.display.draw_pixel(c.x, c.y, color)

    def draw_pixel_rgb888(self, x: int, y: int, r: int, g: int, b: int) -> None:
        c = self.get_coords(x, y)
        self.display.draw_pixel_rgb888(c.x, c.y, r, g, b)

    def fill_screen(self, color: int) -> None:
        self.display.fill_screen(color)

    def fill_screen_rgb888(self, r: int, g: int, b: int) -> None:
        self.display.fill_screen_rgb888(r, g, b)

    def clear_screen(self) -> None:
        self.display.clear_screen()

    def flip_dma_buffer(self) -> None:
        self.display.flip_dma_buffer()

    def set_rotation(self, rotate: int) -> None:
        """Rotate the canvas by quarter turns; width and height follow."""
        if 0 <= rotate < 4:
            self._rotate = rotate
        self.rotation = rotate & 3
        if self.rotation in (0, 2):
            self.width, self.height = self.virtual_res_x, self.virtual_res_y
        else:
            self.width, self.height = self.virtual_res_y, self.virtual_res_x

    def set_scan_rate(self, rate: ScanRate) -> None:
        self.scan_rate = ScanRate(rate)

    def set_zoom_factor(self, scale: int) -> None:
        """Set the zoom; values outside 1 to 4 are ignored."""
        if 0 < scale < 5:
            self._scale_factor = scale