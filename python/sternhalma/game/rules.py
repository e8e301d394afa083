"""Game flow built on top of :mod:`sternhalma.game.board`."""

from __future__ import annotations

import logging
from enum import Enum
from typing import List

from ..hexcoord import HexCoord
from .board import Board, MoveResult, Spot
from .sides import Side


LOG = logging.getLogger("sternhalma.rules")

MIN_SIDES = 2


class Phase(Enum):
    START = "start"
    GAME_SETUP = "game_setup"
    GAME_PLAY = "game_play"

    def next(self) -> Phase:
        if self is Phase.START:
            return Phase.GAME_SETUP
        if self is Phase.GAME_SETUP:
            return Phase.GAME_PLAY
        raise ValueError("Game play is the last phase")

    def previous(self) -> Phase:
        if self is Phase.GAME_PLAY:
            return Phase.GAME_SETUP
        if self is Phase.GAME_SETUP:
            return Phase.START
        raise ValueError("Start is the first phase")


class GameRules:
    """Owns the board and walks it through configuration and play."""

    def __init__(self, player_count: int = 3) -> None:
        self.board = Board.create(player_count)
        self.phase = Phase.START
        self.finish_order: List[Side] = []
        self._played = False

    @property
    def turn(self) -> Side:
        return self.board.turn

    def toggle_side(self, side: Side, checked: bool) -> bool:
        if self.phase is not Phase.GAME_SETUP:
            return False

        if checked:
            self.board.active_sides.add(side)
        else:
            self.board.active_sides.discard(side)
        return True

    def next_phase(self) -> bool:
        if self.phase is Phase.GAME_PLAY:
            return False

        if self.phase is Phase.GAME_SETUP:
            if len(self.board.active_sides) < MIN_SIDES:
                LOG.warning("Need at least %d sides to start, have %d", MIN_SIDES, len(self.board.active_sides))
                return False
            # Pieces moved during an earlier game would survive setup
            if self._played:
                self.board.clear_all()
                self._played = False
            self.board.setup()
            self.finish_order = []

        self.phase = self.phase.next()
        LOG.info("Entered phase %s", self.phase.value)
        return True

    def previous_phase(self) -> bool:
        if self.phase is Phase.START:
            return False
        self.phase = self.phase.previous()
        LOG.info("Back to phase %s", self.phase.value)
        return True

    def apply_move(self, start: HexCoord, end: HexCoord) -> MoveResult:
        if self.phase is not Phase.GAME_PLAY:
            return MoveResult(legal=False, error="wrong_phase")

        mover = self.board.get(start)
        if mover is not None and mover is not Spot.EMPTY and mover is not self.board.turn:
            return MoveResult(legal=False, error="not_your_turn")

        result = self.board.move(start, end)
        if not result.legal:
            return result
        self._played = True

        if mover not in self.finish_order and self.board.has_finished(mover):
            self.finish_order.append(mover)
            LOG.info("Side %s finished in place %d", mover.label, len(self.finish_order))

        self.board.advance_turn()
        return result

    def is_over(self) -> bool:
        # One side left still crossing means nothing is left to decide
        remaining = len(self.board.active_sides) - len(self.finish_order)
        return self.phase is Phase.GAME_PLAY and remaining <= 1
