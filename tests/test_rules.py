"""Tests for phases, side toggling and move submission."""

from __future__ import annotations

import pytest

from sternhalma.game.board import Spot
from sternhalma.game.rules import GameRules, Phase
from sternhalma.game.sides import Side, sides_for_player_count
from sternhalma.hexcoord import HexCoord


def _playing(player_count: int = 2) -> GameRules:
    rules = GameRules(player_count=player_count)
    rules.next_phase()
    rules.next_phase()
    return rules


class TestSides:
    def test_forward_cycles(self) -> None:
        assert Side.A.forward() is Side.B
        assert Side.F.forward() is Side.A

    def test_opposite(self) -> None:
        assert [side.opposite() for side in Side.all()] == [
            Side.D,
            Side.E,
            Side.F,
            Side.A,
            Side.B,
            Side.C,
        ]

    def test_all_in_ordinal_order(self) -> None:
        assert [int(side) for side in Side.all()] == list(range(6))
        assert Side.C.label == "C"

    def test_target_tip_is_opposite_start(self) -> None:
        assert Side.B.target_tip() == Side.E.starting_tip()

    def test_unsupported_count_logs_and_falls_back(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level("WARNING", logger="sternhalma.sides"):
            assert sides_for_player_count(5) == {Side.A, Side.D}
        assert "Unsupported player count" in caplog.text


class TestPhase:
    def test_forward_and_back(self) -> None:
        assert Phase.START.next() is Phase.GAME_SETUP
        assert Phase.GAME_SETUP.next() is Phase.GAME_PLAY
        assert Phase.GAME_PLAY.previous() is Phase.GAME_SETUP
        assert Phase.GAME_SETUP.previous() is Phase.START

    def test_ends_raise(self) -> None:
        with pytest.raises(ValueError):
            Phase.GAME_PLAY.next()
        with pytest.raises(ValueError):
            Phase.START.previous()


class TestConfiguration:
    def test_starts_on_start_screen(self) -> None:
        rules = GameRules()
        assert rules.phase is Phase.START
        assert rules.board.active_sides == {Side.A, Side.C, Side.E}
        assert not rules.previous_phase()

    def test_toggle_only_during_setup(self) -> None:
        rules = GameRules()
        assert not rules.toggle_side(Side.B, True)
        rules.next_phase()
        assert rules.toggle_side(Side.B, True)
        assert rules.toggle_side(Side.A, False)
        assert rules.board.active_sides == {Side.B, Side.C, Side.E}

    def test_leaving_setup_reseeds_board(self) -> None:
        rules = GameRules()
        rules.next_phase()
        rules.toggle_side(Side.A, False)
        rules.toggle_side(Side.D, True)
        assert rules.next_phase()

        assert rules.phase is Phase.GAME_PLAY
        assert rules.turn is Side.C
        assert rules.board.pieces(Side.A) == []
        assert len(rules.board.pieces(Side.D)) == 10

    def test_needs_two_sides(self) -> None:
        rules = GameRules(player_count=2)
        rules.next_phase()
        rules.toggle_side(Side.D, False)
        assert not rules.next_phase()
        assert rules.phase is Phase.GAME_SETUP

    def test_replaying_starts_from_a_fresh_board(self) -> None:
        rules = _playing()
        assert rules.apply_move(HexCoord(4, -5), HexCoord(4, -4)).legal
        rules.previous_phase()
        assert rules.next_phase()

        assert rules.board.get(HexCoord(4, -4)) is Spot.EMPTY
        assert len(rules.board.pieces(Side.A)) == 10
        assert len(rules.board.pieces(Side.D)) == 10
        assert rules.turn is Side.A

    def test_play_is_last_phase(self) -> None:
        rules = _playing()
        assert not rules.next_phase()
        assert rules.previous_phase()
        assert rules.phase is Phase.GAME_SETUP


class TestApplyMove:
    def test_moves_only_during_play(self) -> None:
        rules = GameRules(player_count=2)
        result = rules.apply_move(HexCoord(4, -5), HexCoord(4, -4))
        assert result.error == "wrong_phase"

    def test_legal_move_passes_the_turn(self) -> None:
        rules = _playing()
        result = rules.apply_move(HexCoord(4, -5), HexCoord(4, -4))
        assert result.legal
        assert rules.turn is Side.D
        assert rules.board.get(HexCoord(4, -4)) is Side.A

    def test_must_move_own_piece(self) -> None:
        rules = _playing()
        result = rules.apply_move(HexCoord(-4, 5), HexCoord(-4, 4))
        assert result.error == "not_your_turn"
        assert rules.turn is Side.A

    def test_illegal_move_keeps_the_turn(self) -> None:
        rules = _playing()
        result = rules.apply_move(HexCoord(4, -8), HexCoord(0, 0))
        assert result.error == "unreachable"
        assert rules.turn is Side.A

    def test_empty_origin_reported_by_board(self) -> None:
        rules = _playing()
        assert rules.apply_move(HexCoord(0, 0), HexCoord(1, 0)).error == "empty_origin"

    def test_finishing_records_order(self) -> None:
        rules = _playing()
        board = rules.board
        board.clear_all()
        last = HexCoord(-1, 5)
        for coord in Side.A.target_tip():
            if coord != last:
                board.put(coord, Side.A)
        board.put(HexCoord(-1, 4), Side.A)
        board.put(HexCoord(0, -4), Side.D)

        assert not rules.is_over()
        result = rules.apply_move(HexCoord(-1, 4), last)
        assert result.legal
        assert rules.finish_order == [Side.A]
        assert board.get(HexCoord(-1, 4)) is Spot.EMPTY
        assert rules.is_over()
