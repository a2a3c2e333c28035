"""Conversion of hex tiles to world positions and board layout."""

from __future__ import annotations

import math

from .hexcoord import HexCoord, hex_range
from .vector import Vec3

DEFAULT_RADIUS = 50
DEFAULT_HEX_SIZE = 100.0


def hex_to_world(coord: HexCoord, hex_size: float = DEFAULT_HEX_SIZE) -> Vec3:
    """World position of the centre of a flat-topped hex tile."""
    x = hex_size * 1.5 * coord.q
    y = hex_size * math.sqrt(3.0) * (coord.r + coord.q / 2.0)
    return Vec3(x, y, 0.0)


def generate_map(radius: int = DEFAULT_RADIUS, hex_size: float = DEFAULT_HEX_SIZE) -> list[Vec3]:
    """World positions of every tile of a hexagonal board of ``radius``."""
    return [hex_to_world(coord, hex_size) for coord in hex_range(radius)]