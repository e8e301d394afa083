"""Pointer drag-and-drop tracking, fed from raw mouse events."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable, Optional, Tuple

from ..hexcoord import HexCoord


Point = Tuple[float, float]

# Motion shorter than this (in pixels) from the press point is not a drag
DRAG_THRESHOLD = 3.0


@dataclass
class LiftedPiece:
    piece_coord: HexCoord
    current_pos: Point
    dropped_coord: Optional[HexCoord] = None

    def update_pos(self, new_pos: Point) -> None:
        self.current_pos = new_pos

    def drop_piece(self, make_coord: Callable[[Point], HexCoord]) -> None:
        self.dropped_coord = make_coord(self.current_pos)


@dataclass
class DragNDrop:
    """State of the left mouse button drag.

    Pressing arms a drag. The first motion afterwards records the start
    point; later motion beyond :data:`DRAG_THRESHOLD` records the current
    point. Releasing before any real motion cancels, otherwise the drag is
    marked as dropped until :meth:`clear` is called.
    """

    drag_started: bool = False
    start_pos: Optional[Point] = None
    current_pos: Optional[Point] = None
    is_dropped: bool = False

    def press(self) -> None:
        self.drag_started = True

    def motion(self, point: Point) -> None:
        if not self.drag_started:
            return
        if self.start_pos is None:
            self.start_pos = point
            return
        if math.dist(self.start_pos, point) > DRAG_THRESHOLD:
            self.current_pos = point

    def release(self) -> None:
        if self.current_pos is None:
            self.reset()
        else:
            self.is_dropped = True

    def clear(self) -> None:
        if self.is_dropped:
            self.reset()

    def reset(self) -> None:
        self.drag_started = False
        self.start_pos = None
        self.current_pos = None
        self.is_dropped = False

    def drag_status(self) -> Optional[Tuple[Point, Point]]:
        """``(current, start)`` once the pointer has really moved, else ``None``."""

        if self.current_pos is None or self.start_pos is None:
            return None
        return self.current_pos, self.start_pos
