"""Triangular regions and the six-pointed star built from them.

The star is one large tip-up triangle of side 13 (its three corners are three
of the star's points) plus three tip-down triangles of side 4 appended on the
remaining edges. That gives the traditional 121-hole board centred on
:data:`~sternhalma.hexcoord.ORIGIN`.
"""

from __future__ import annotations

from typing import Dict, FrozenSet, List

from .hexcoord import HexCoord


BOARD_SIZE = 13
TIP_SIZE = 4

CENTRAL_ROOT = HexCoord(4, -8)
OUTER_ROOTS = (HexCoord(-4, -1), HexCoord(5, -1), HexCoord(-4, 8))

# Starting tip of each side, by side ordinal. Even sides use tip-up
# triangles inside the central region, odd sides the appended points.
TIP_ROOTS: Dict[int, HexCoord] = {
    0: HexCoord(4, -8),
    1: HexCoord(5, -1),
    2: HexCoord(4, 1),
    3: HexCoord(-4, 8),
    4: HexCoord(-5, 1),
    5: HexCoord(-4, -1),
}


def triangle_size(size: int) -> int:
    return size * (size + 1) // 2


def triangle_tip_up(root: HexCoord, size: int) -> List[HexCoord]:
    """Cells of a triangle whose vertex is ``root`` and which widens by one
    cell per row while ``slant`` increases, growing towards negative ``horz``.
    """

    cells: List[HexCoord] = []
    for row in range(size):
        slant = root.slant + row
        for step in range(row + 1):
            cells.append(HexCoord(root.horz - step, slant))
    return cells


def triangle_tip_down(root: HexCoord, size: int) -> List[HexCoord]:
    """Mirror image of :func:`triangle_tip_up`: rows go towards negative
    ``slant`` and widen towards positive ``horz``.
    """

    cells: List[HexCoord] = []
    for row in range(size):
        slant = root.slant - row
        for step in range(row + 1):
            cells.append(HexCoord(root.horz + step, slant))
    return cells


def star_cells() -> List[HexCoord]:
    # Central triangle first, then the three outer points
    cells = triangle_tip_up(CENTRAL_ROOT, BOARD_SIZE)
    for root in OUTER_ROOTS:
        cells.extend(triangle_tip_down(root, TIP_SIZE))
    return cells


def starting_tip(ordinal: int) -> List[HexCoord]:
    """Return the ten cells a side starts on, given the side's ordinal."""

    root = TIP_ROOTS[ordinal % 6]
    if ordinal % 2 == 0:
        return triangle_tip_up(root, TIP_SIZE)
    return triangle_tip_down(root, TIP_SIZE)


STAR_CELLS: FrozenSet[HexCoord] = frozenset(star_cells())
