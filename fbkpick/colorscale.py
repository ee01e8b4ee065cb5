"""A 512-entry colour scale mapping values onto a blue-green-red ramp."""

from __future__ import annotations

PALETTE_SIZE = 512

Color = tuple[int, int, int]


def build_palette() -> list[Color]:
    """The 512 (red, green, blue) colours from black through blue, green to red."""
    palette: list[Color] = []
    palette.extend((0, 0, int(j * 2.5)) for j in range(0, 100))
    palette.extend((0, int((j - 100) * 2.5), 255) for j in range(100, 200))
    palette.extend((0, 255, int((300 - j) * 2.5)) for j in range(200, 300))
    palette.extend((int((j - 300) * 2.5), 255, 0) for j in range(300, 400))
    palette.extend((255, (512 - j) * 2, 0) for j in range(400, PALETTE_SIZE))
    return palette


class ColorScale:
    """Maps values in a range onto the palette, clamping outside values."""

    def __init__(self):
        self.palette = build_palette()
        self.min_value = 0.0
        self.max_value = float(PALETTE_SIZE)
        self.scale = 1.0

    def set_range(self, min_value: float, max_value: float) -> None:
        if max_value == min_value:
            raise ValueError("colour range must not be empty")
        self.min_value = min_value
        self.max_value = max_value
        self.scale = len(self.palette) / (max_value - min_value)

    def color(self, value: float) -> Color:
        low, high = sorted((self.min_value, self.max_value))
        value = min(max(value, low), high)
        index = int((value - self.min_value) * self.scale)
        index = min(max(index, 0), len(self.palette) - 1)
        return self.palette[index]