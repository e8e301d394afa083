"""Text notation for coordinates and moves, as typed at the terminal."""

from __future__ import annotations

from typing import Tuple

from .hexcoord import HexCoord


class NotationError(ValueError):
    pass


def parse_coord(text: str) -> HexCoord:
    """Parse ``"horz,slant"`` (whitespace tolerated) into a :class:`HexCoord`."""

    parts = text.strip().strip("()").split(",")
    if len(parts) != 2:
        raise NotationError(f"Expected 'horz,slant', got {text!r}")

    try:
        return HexCoord(int(parts[0]), int(parts[1]))
    except ValueError as exc:
        raise NotationError(f"Coordinates must be integers: {text!r}") from exc


def parse_move(text: str) -> Tuple[HexCoord, HexCoord]:
    """Parse ``"h,s h,s"`` or ``"h,s -> h,s"`` into a start and end cell."""

    tokens = text.replace("->", " ").split()
    if len(tokens) != 2:
        raise NotationError(f"Expected a start and an end cell, got {text!r}")
    return parse_coord(tokens[0]), parse_coord(tokens[1])


def format_coord(coord: HexCoord) -> str:
    return f"{coord.horz},{coord.slant}"
