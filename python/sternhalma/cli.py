"""Command-line interface for playing Sternhalma at the terminal."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from .game.board import Board, Spot
from .game.rules import GameRules
from .notation import NotationError, format_coord, parse_coord, parse_move


LOG = logging.getLogger("sternhalma.cli")

EMPTY_SYMBOL = "."
QUIT_WORDS = {"q", "quit", "exit"}


def render_board(board: Board) -> str:
    """Draw the star as text, one line per slant row.

    Cells sit at column ``2*horz + slant`` so neighboring rows interleave the
    same way the hexagons do on screen.
    """

    columns = {coord: 2 * coord.horz + coord.slant for coord in board.cells}
    left = min(columns.values())
    slants = sorted({coord.slant for coord in board.cells})

    lines: List[str] = []
    for slant in slants:
        row = {columns[coord] - left: board.cells[coord] for coord in board.cells if coord.slant == slant}
        width = max(row) + 1
        chars = [" "] * width
        for column, state in row.items():
            chars[column] = EMPTY_SYMBOL if state is Spot.EMPTY else state.label
        lines.append(f"{slant:3} {''.join(chars).rstrip()}")
    return "\n".join(lines)


def _prompt(prompt: str) -> Optional[str]:
    try:
        value = input(prompt)
    except EOFError:
        return None

    value = value.strip()
    if value.lower() in QUIT_WORDS:
        return None
    return value


def _show_hint(state: GameRules, text: str) -> None:
    try:
        coord = parse_coord(text)
    except NotationError as exc:
        print(exc)
        return

    targets = sorted(state.board.reachable(coord), key=lambda c: (c.slant, c.horz))
    if not targets:
        print(f"No moves from {format_coord(coord)}.")
        return
    print("Reachable: " + " ".join(format_coord(target) for target in targets))


def _play_turn(state: GameRules) -> bool:
    while True:
        print()
        print(render_board(state.board))
        side = state.turn
        line = _prompt(f"Side {side.label} to move (e.g. '2,-6 2,-4', 'hint 4,-5', q to quit): ")
        if line is None:
            return False
        if not line:
            continue

        if line.lower().startswith("hint"):
            _show_hint(state, line[4:])
            continue

        try:
            start, end = parse_move(line)
        except NotationError as exc:
            print(exc)
            continue

        result = state.apply_move(start, end)
        if not result.legal:
            print(f"Illegal move: {result.error}. Try again.")
            continue

        print(f"{side.label} moved {format_coord(start)} -> {format_coord(end)}.")
        if side in state.finish_order:
            print(f"Side {side.label} has crossed the board (place {state.finish_order.index(side) + 1}).")
        return True


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Sternhalma at the terminal")
    parser.add_argument("--players", type=int, default=2, help="2, 3, 4 or 6")
    parser.add_argument("--log-level", default="WARNING")
    args = parser.parse_args(argv)

    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.WARNING))

    state = GameRules(player_count=args.players)
    # Skip the start screen; the player count already picked the sides
    state.next_phase()
    state.next_phase()
    LOG.info("Playing with %d sides", len(state.board.active_sides))

    print("Game start! Enter 'q' at any prompt to quit.")
    while not state.is_over():
        if not _play_turn(state):
            break

    if state.finish_order:
        print("Finish order: " + ", ".join(side.label for side in state.finish_order))
    print("Thanks for playing!")
    return 0


if __name__ == "__main__":  # pragma: no cover - CLI invocation
    sys.exit(main())
