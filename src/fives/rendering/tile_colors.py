import math
from typing import Tuple

from fives.constants import TILE_BASE, TILE_COLORS, TILE_DARKEN_FACTOR

Color = Tuple[int, int, int]


def tile_color(value: int) -> Color:
    """Palette color for a tile value.

    The palette index advances with every doubling and wraps after six
    entries; each completed wrap darkens the color by TILE_DARKEN_FACTOR.
    """
    if value <= 0:
        raise ValueError(f"empty cells have no tile color (value={value})")
    index = (int(math.log2(value)) - 1) % len(TILE_COLORS)
    cycles = int(math.log2(value / TILE_BASE)) // len(TILE_COLORS)
    scale = TILE_DARKEN_FACTOR ** cycles
    r, g, b = TILE_COLORS[index]
    return int(r * scale), int(g * scale), int(b * scale)
