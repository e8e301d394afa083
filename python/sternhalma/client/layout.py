"""Screen geometry shared by the graphical client.

Pixel positions are relative to the board centre; the window code adds the
centre offset itself.
"""

from __future__ import annotations

import math
from typing import Dict, Tuple

from ..game.board import CellState, Spot
from ..game.sides import Side
from ..hexcoord import HexCoord


SIN_30_DEG = 0.5
COS_30_DEG = math.sqrt(3) / 2
SIDE = 22.0

Color = Tuple[int, int, int]


def _rgb(value: int) -> Color:
    return ((value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF)


SIDE_COLORS: Dict[Side, Color] = {
    Side.A: _rgb(0xEE1133),
    Side.B: _rgb(0xFFE122),
    Side.C: _rgb(0xEE22CC),
    Side.D: _rgb(0x22EE55),
    Side.E: _rgb(0x2255FF),
    Side.F: _rgb(0xAA22FF),
}
EMPTY_COLOR = _rgb(0xEEEEEE)


def spot_color(state: CellState) -> Color:
    if state is Spot.EMPTY:
        return EMPTY_COLOR
    return SIDE_COLORS[state]


def hex_to_pixel(coord: HexCoord, side: float = SIDE) -> Tuple[float, float]:
    """Centre of the hexagon for ``coord``, with ``side`` the hexagon edge."""

    x = side * COS_30_DEG * (2 * coord.horz + coord.slant)
    y = coord.slant * (side * SIN_30_DEG + side)
    return x, y


def pixel_to_hex(x: float, y: float, side: float = SIDE) -> HexCoord:
    """Return the cell whose hexagon contains the point ``(x, y)``."""

    horz = (math.sqrt(3) / 3 * x - y / 3) / side
    slant = (2 / 3 * y) / side
    return cube_round(horz, slant)


def cube_round(horz: float, slant: float) -> HexCoord:
    # Round all three cube axes, then rebuild the worst one from the others
    depth = -horz - slant

    rh = round(horz)
    rs = round(slant)
    rd = round(depth)

    h_diff = abs(rh - horz)
    s_diff = abs(rs - slant)
    d_diff = abs(rd - depth)

    if h_diff > s_diff and h_diff > d_diff:
        rh = -rs - rd
    elif s_diff > d_diff:
        rs = -rh - rd

    return HexCoord(int(rh), int(rs))


def ideal_radius(side: float = SIDE) -> float:
    return side * COS_30_DEG * 0.85
