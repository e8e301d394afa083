from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterable, List, Optional, Set, Union

from ..hexcoord import UNIT_OFFSETS, HexCoord
from ..shapes import star_cells
from .sides import Side, sides_for_player_count


LOG = logging.getLogger("sternhalma.board")


class Spot(Enum):
    EMPTY = "empty"


# A cell holds either Spot.EMPTY or the Side whose piece sits on it
CellState = Union[Spot, Side]


@dataclass
class MoveResult:
    legal: bool
    error: Optional[str] = None


class Board:
    """Star board: fixed cell set, occupancy, sides in play and the turn.

    The key set of :attr:`cells` is generated once and never changes; writes
    to coordinates outside it are ignored and reads return ``None``.
    """

    def __init__(self, active_sides: Iterable[Side] = ()) -> None:
        self.cells: Dict[HexCoord, CellState] = {coord: Spot.EMPTY for coord in star_cells()}
        self.active_sides: Set[Side] = set(active_sides)
        self.turn: Side = Side.A

    @classmethod
    def create(cls, player_count: int) -> Board:
        board = cls(sides_for_player_count(player_count))
        board.setup()
        return board

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------
    def setup(self) -> None:
        # Fill active tips, clear inactive ones so stale pieces never linger
        for side in Side.all():
            fill: CellState = side if side in self.active_sides else Spot.EMPTY
            for coord in side.starting_tip():
                self.cells[coord] = fill

        if not self.active_sides:
            LOG.warning("Setup with no active sides; turn stays at %s", self.turn.label)
            return

        self.turn = min(self.active_sides)
        LOG.debug(
            "Board set up for sides %s, %s to move",
            ",".join(side.label for side in sorted(self.active_sides)),
            self.turn.label,
        )

    def clear_all(self) -> None:
        for coord in self.cells:
            self.cells[coord] = Spot.EMPTY

    # ------------------------------------------------------------------
    # Cell access
    # ------------------------------------------------------------------
    def get(self, coord: HexCoord) -> Optional[CellState]:
        return self.cells.get(coord)

    def put(self, coord: HexCoord, side: Side) -> None:
        if coord in self.cells:
            self.cells[coord] = side

    def clear(self, coord: HexCoord) -> None:
        if coord in self.cells:
            self.cells[coord] = Spot.EMPTY

    def exchange(self, first: HexCoord, second: HexCoord) -> None:
        if first not in self.cells or second not in self.cells:
            return
        self.cells[first], self.cells[second] = self.cells[second], self.cells[first]

    def is_occupied(self, coord: HexCoord) -> bool:
        state = self.cells.get(coord)
        return state is not None and state is not Spot.EMPTY

    def is_empty(self, coord: HexCoord) -> bool:
        return self.cells.get(coord) is Spot.EMPTY

    def snapshot(self) -> Dict[HexCoord, CellState]:
        return dict(self.cells)

    def pieces(self, side: Side) -> List[HexCoord]:
        return [coord for coord, state in self.cells.items() if state is side]

    def has_finished(self, side: Side) -> bool:
        return all(self.cells[coord] is side for coord in side.target_tip())

    # ------------------------------------------------------------------
    # Move validation
    # ------------------------------------------------------------------
    def is_legal_move(self, start: HexCoord, end: HexCoord) -> bool:
        return self._check_move(start, end) is None

    def move(self, start: HexCoord, end: HexCoord) -> MoveResult:
        # Validate and apply a move, reporting why it was refused
        error = self._check_move(start, end)
        if error is not None:
            LOG.debug("Rejected move %s -> %s: %s", start, end, error)
            return MoveResult(legal=False, error=error)

        self.exchange(start, end)
        LOG.debug("Moved %s -> %s", start, end)
        return MoveResult(legal=True)

    def make_move(self, start: HexCoord, end: HexCoord) -> bool:
        return self.move(start, end).legal

    def jump_path(self, start: HexCoord, end: HexCoord) -> Optional[List[HexCoord]]:
        """Return the shortest chain of landing cells from ``start`` to ``end``.

        The returned list starts with ``start`` and ends with ``end``. ``None``
        means no sequence of jumps connects the two cells.
        """

        if not self.is_occupied(start) or not self.is_empty(end):
            return None

        came_from = self._jump_search(start, end)
        if end not in came_from:
            return None

        path = [end]
        while path[-1] != start:
            path.append(came_from[path[-1]])
        path.reverse()
        return path

    def reachable(self, start: HexCoord) -> Set[HexCoord]:
        """Every destination the piece on ``start`` may legally move to."""

        if not self.is_occupied(start):
            return set()

        targets = {coord for coord in start.neighbors() if self.is_empty(coord)}
        targets.update(self._jump_search(start))
        return targets

    def _check_move(self, start: HexCoord, end: HexCoord) -> Optional[str]:
        origin = self.get(start)
        target = self.get(end)
        if origin is None or target is None:
            return "absent_coordinate"
        if origin is Spot.EMPTY:
            return "empty_origin"
        if target is not Spot.EMPTY:
            return "occupied_target"

        if end in start.neighbors():
            return None

        if end not in self._jump_search(start, end):
            return "unreachable"
        return None

    def _jump_search(
        self,
        start: HexCoord,
        end: Optional[HexCoord] = None,
    ) -> Dict[HexCoord, HexCoord]:
        """Breadth-first search over jump centers.

        Returns a mapping from every landing cell found to the center it was
        reached from. The search stops early once ``end`` is found. Any piece
        may be hopped over, whichever side it belongs to.
        """

        came_from: Dict[HexCoord, HexCoord] = {}
        visited = {start}
        frontier = deque([start])

        while frontier:
            center = frontier.popleft()
            for offset in UNIT_OFFSETS:
                hopped = center + offset
                landing = center + offset * 2
                if landing in visited:
                    continue
                if not self.is_occupied(hopped) or not self.is_empty(landing):
                    continue

                visited.add(landing)
                came_from[landing] = center
                if landing == end:
                    return came_from
                frontier.append(landing)

        return came_from

    # ------------------------------------------------------------------
    # Turn rotation
    # ------------------------------------------------------------------
    def advance_turn(self) -> None:
        if not self.active_sides:
            raise ValueError("Cannot advance the turn without active sides")

        side = self.turn.forward()
        while side not in self.active_sides:
            side = side.forward()
        self.turn = side
