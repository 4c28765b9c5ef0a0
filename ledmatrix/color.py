"""24-bit colour values with saturating, 8-bit style arithmetic."""

from __future__ import annotations

from dataclasses import dataclass


def _check_channel(name: str, value: int) -> None:
    if not 0 <= value <= 255:
        raise ValueError(f"{name} channel must be within 0..255, got {value}")


@dataclass(frozen=True, slots=True)
class RGB:
    """An immutable red/green/blue colour, each channel 0..255."""

    r: int = 0
    g: int = 0
    b: int = 0

    def __post_init__(self) -> None:
        _check_channel("red", self.r)
        _check_channel("green", self.g)
        _check_channel("blue", self.b)

    def nscale8(self, scale: int) -> RGB:
        """Return this colour dimmed to scale/256; 255 keeps it, 0 makes black."""
        if not 0 <= scale <= 255:
            raise ValueError(f"scale must be within 0..255, got {scale}")
        factor = scale + 1
        return RGB(
            (self.r * factor) >> 8,
            (self.g * factor) >> 8,
            (self.b * factor) >> 8,
        )

    def __add__(self, other: object) -> RGB:
        """Add channel by channel, clamping each at 255."""
        if not isinstance(other, RGB):
            return NotImplemented
        return RGB(
            min(self.r + other.r, 255),
            min(self.g + other.g, 255),
            min(self.b + other.b, 255),
        )

    def __iter__(self):
        yield self.r
        yield self.g
        yield self.b


BLACK = RGB(0, 0, 0)
WHITE = RGB(255, 255, 255)