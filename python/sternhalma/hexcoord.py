"""Axial coordinates for the star board.

Cells are addressed by two integers, ``horz`` along the horizontal rows and
``slant`` down the slanted axis. The implicit third cube axis is
``-horz - slant`` and only matters for distance and rounding.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple


@dataclass(frozen=True)
class HexCoord:
    """A single cell address on the hex grid.

    Attributes
    ----------
    horz:
        Position along the horizontal axis.
    slant:
        Position along the slanted axis; it grows towards the bottom of the
        board as drawn by the clients.
    """

    horz: int
    slant: int

    def __add__(self, other: HexCoord) -> HexCoord:
        return HexCoord(self.horz + other.horz, self.slant + other.slant)

    def __sub__(self, other: HexCoord) -> HexCoord:
        return HexCoord(self.horz - other.horz, self.slant - other.slant)

    def __neg__(self) -> HexCoord:
        return HexCoord(-self.horz, -self.slant)

    def __mul__(self, factor: int) -> HexCoord:
        return HexCoord(self.horz * factor, self.slant * factor)

    __rmul__ = __mul__

    def __str__(self) -> str:
        return f"{self.horz},{self.slant}"

    @property
    def depth(self) -> int:
        # third cube axis
        return -self.horz - self.slant

    def neighbors(self) -> List[HexCoord]:
        """Return the six adjacent cells in :data:`UNIT_OFFSETS` order."""

        return [self + offset for offset in UNIT_OFFSETS]

    def jump_neighbors(self) -> List[HexCoord]:
        """Return the six landing cells reached by hopping over a neighbor."""

        return [self + offset * 2 for offset in UNIT_OFFSETS]

    def distance(self, other: HexCoord) -> int:
        delta = self - other
        return (abs(delta.horz) + abs(delta.slant) + abs(delta.depth)) // 2

    def rotated(self) -> HexCoord:
        """Rotate 60 degrees clockwise (as drawn) about the origin."""

        return HexCoord(-self.slant, self.horz + self.slant)


ORIGIN = HexCoord(0, 0)

# fmt: off
UNIT_OFFSETS: Tuple[HexCoord, ...] = (
    HexCoord(1, 0),
    HexCoord(1, -1),
    HexCoord(0, -1),
    HexCoord(-1, 0),
    HexCoord(-1, 1),
    HexCoord(0, 1),
)
# fmt: on
