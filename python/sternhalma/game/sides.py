"""The six sides of the star and how player counts map onto them."""

from __future__ import annotations

import logging
from enum import IntEnum
from typing import Dict, FrozenSet, List

from ..hexcoord import HexCoord
from ..shapes import starting_tip


LOG = logging.getLogger("sternhalma.sides")


class Side(IntEnum):
    """A player slot, numbered clockwise from the top point of the star."""

    A = 0
    B = 1
    C = 2
    D = 3
    E = 4
    F = 5

    def forward(self) -> Side:
        return Side((self.value + 1) % 6)

    def opposite(self) -> Side:
        return Side((self.value + 3) % 6)

    @classmethod
    def all(cls) -> List[Side]:
        return [cls(value) for value in range(6)]

    @property
    def label(self) -> str:
        return self.name

    def starting_tip(self) -> List[HexCoord]:
        return starting_tip(self.value)

    def target_tip(self) -> List[HexCoord]:
        # A side finishes on the tip it faces
        return starting_tip(self.opposite().value)


DEFAULT_PLAYER_COUNT = 2

PLAYER_LAYOUTS: Dict[int, FrozenSet[Side]] = {
    2: frozenset({Side.A, Side.D}),
    3: frozenset({Side.A, Side.C, Side.E}),
    4: frozenset({Side.A, Side.B, Side.D, Side.E}),
    6: frozenset(Side.all()),
}


def sides_for_player_count(player_count: int) -> FrozenSet[Side]:
    """Resolve a player count to its canonical set of sides.

    Unsupported counts fall back to the two-player layout instead of being
    rejected.
    """

    layout = PLAYER_LAYOUTS.get(player_count)
    if layout is None:
        LOG.warning(
            "Unsupported player count %r; using %d players",
            player_count,
            DEFAULT_PLAYER_COUNT,
        )
        return PLAYER_LAYOUTS[DEFAULT_PLAYER_COUNT]
    return layout
