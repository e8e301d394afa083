"""Pygame front-end for Sternhalma (Chinese Checkers)."""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import dataclass
from typing import List, Optional, Set, Tuple

try:
    import pygame
except ImportError as exc:  # pragma: no cover - handled at runtime
    raise SystemExit(
        "Pygame is required for the graphical client. Install it with 'pip install pygame'."
    ) from exc

from ..game.board import Spot
from ..game.rules import GameRules, Phase
from ..game.sides import Side
from ..hexcoord import HexCoord
from .dragndrop import DragNDrop, LiftedPiece, Point
from .layout import EMPTY_COLOR, SIDE, hex_to_pixel, ideal_radius, pixel_to_hex, spot_color


LOG = logging.getLogger("sternhalma.client")


# ---------------------------------------------------------------------------
# Rendering configuration
# ---------------------------------------------------------------------------

WINDOW_WIDTH = 900
WINDOW_HEIGHT = 700
FPS = 30

BACKGROUND = (0, 0, 0)
TEXT_COLOR = (240, 240, 240)
BUTTON_COLOR = (33, 150, 243)
BUTTON_BORDER = (13, 71, 161)
HIGHLIGHT_TARGET = (129, 199, 132)
LIFT_OUTLINE_LOW = (0, 0, 255)
LIFT_OUTLINE_HIGH = (255, 0, 0)
FLOATING_ALPHA = 230

DESCRIPTION = (
    "This is a game of Chinese Checkers.",
    "Chinese Checkers originated in Germany where it was called Sternhalma.",
    "Chinese Checkers is played on a star-shaped board.",
)


@dataclass
class Button:
    label: str
    rect: pygame.Rect

    def draw(self, surface: pygame.Surface, font: pygame.font.Font, hovered: bool) -> None:
        color = tuple(min(c + 40, 255) for c in BUTTON_COLOR) if hovered else BUTTON_COLOR
        pygame.draw.rect(surface, color, self.rect, border_radius=6)
        pygame.draw.rect(surface, BUTTON_BORDER, self.rect, width=2, border_radius=6)
        text_surf = font.render(self.label, True, (255, 255, 255))
        surface.blit(text_surf, text_surf.get_rect(center=self.rect.center))

    def contains(self, pos: Tuple[int, int]) -> bool:
        return self.rect.collidepoint(pos)


@dataclass
class Checkbox:
    side: Side
    rect: pygame.Rect

    def draw(self, surface: pygame.Surface, font: pygame.font.Font, checked: bool) -> None:
        box = pygame.Rect(self.rect.x, self.rect.y, self.rect.height, self.rect.height)
        pygame.draw.rect(surface, TEXT_COLOR, box, width=2)
        if checked:
            pygame.draw.rect(surface, spot_color(self.side), box.inflate(-8, -8))
        text_surf = font.render(f"Side{self.side.label}", True, TEXT_COLOR)
        surface.blit(text_surf, (box.right + 12, box.y + (box.height - text_surf.get_height()) // 2))

    def contains(self, pos: Tuple[int, int]) -> bool:
        return self.rect.collidepoint(pos)


class SternhalmaPygameApp:
    def __init__(self, player_count: int = 3) -> None:
        pygame.init()
        pygame.display.set_caption("Chinese Checkers")
        self.screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT), pygame.RESIZABLE)
        self.clock = pygame.time.Clock()

        self.font_small = pygame.font.Font(None, 24)
        self.font_medium = pygame.font.Font(None, 32)
        self.font_large = pygame.font.Font(None, 80)

        self.game = GameRules(player_count=player_count)
        self.drag = DragNDrop()
        self.lifted_piece: Optional[LiftedPiece] = None
        self.highlight_targets: Set[HexCoord] = set()
        self.message: Optional[str] = None

        self.next_button = Button("Next", pygame.Rect(0, 0, 350, 45))
        self.previous_button = Button("Previous", pygame.Rect(0, 0, 350, 45))
        self.checkboxes = [Checkbox(side, pygame.Rect(0, 0, 200, 28)) for side in Side.all()]

    # ------------------------------------------------------------------
    # Geometry helpers
    # ------------------------------------------------------------------
    @property
    def grid_center(self) -> Point:
        width, height = self.screen.get_size()
        return width * 0.5, height * 0.5

    def _relative(self, point: Point) -> Point:
        cx, cy = self.grid_center
        return point[0] - cx, point[1] - cy

    def _absolute(self, point: Point) -> Tuple[int, int]:
        cx, cy = self.grid_center
        return int(point[0] + cx), int(point[1] + cy)

    def _coord_at(self, point: Point) -> HexCoord:
        return pixel_to_hex(point[0], point[1], SIDE)

    def _layout_widgets(self) -> None:
        width, height = self.screen.get_size()
        center_x = width // 2
        if self.game.phase is Phase.GAME_PLAY:
            self.previous_button.rect.midbottom = (center_x, height - 20)
            return

        top = 260 if self.game.phase is Phase.GAME_SETUP else 360
        for index, checkbox in enumerate(self.checkboxes):
            checkbox.rect.topleft = (center_x - 100, top + index * 36)
        buttons_top = top + len(self.checkboxes) * 36 + 20 if self.game.phase is Phase.GAME_SETUP else top
        self.next_button.rect.midtop = (center_x, buttons_top)
        self.previous_button.rect.midtop = (center_x, buttons_top + 60)

    # ------------------------------------------------------------------
    # Input handling
    # ------------------------------------------------------------------
    def handle_click(self, pos: Tuple[int, int]) -> bool:
        """Route a click to the widgets of the current phase.

        Returns ``True`` when a widget consumed the click.
        """

        self._layout_widgets()
        phase = self.game.phase

        if phase is not Phase.START and self.previous_button.contains(pos):
            self.game.previous_phase()
            self._drop_selection()
            return True

        if phase is Phase.GAME_PLAY:
            return False

        if self.next_button.contains(pos):
            if not self.game.next_phase():
                self.message = "Pick at least two sides"
            else:
                self.message = None
            return True

        if phase is Phase.GAME_SETUP:
            for checkbox in self.checkboxes:
                if checkbox.contains(pos):
                    checked = checkbox.side not in self.game.board.active_sides
                    self.game.toggle_side(checkbox.side, checked)
                    return True
        return False

    def interact(self) -> None:
        # Turn the drag state into a lifted piece and, on drop, a target cell
        if self.game.phase is not Phase.GAME_PLAY:
            return

        status = self.drag.drag_status()
        if status is None:
            return

        current, start = status
        current = self._relative(current)
        if self.lifted_piece is not None:
            self.lifted_piece.update_pos(current)
            if self.drag.is_dropped:
                self.lifted_piece.drop_piece(self._coord_at)
            return

        start_coord = self._coord_at(self._relative(start))
        if self.game.board.is_occupied(start_coord):
            self.lifted_piece = LiftedPiece(start_coord, current)
            self.highlight_targets = self.game.board.reachable(start_coord)

    def update(self) -> None:
        if self.game.phase is not Phase.GAME_PLAY or self.lifted_piece is None:
            return
        if self.lifted_piece.dropped_coord is None:
            # The drag ended before the drop was seen; forget the piece
            if self.drag.drag_status() is None:
                self._drop_selection()
            return

        side = self.game.turn
        start = self.lifted_piece.piece_coord
        end = self.lifted_piece.dropped_coord
        result = self.game.apply_move(start, end)
        if result.legal:
            self.message = f"{side.label} moved {start} -> {end}"
            if side in self.game.finish_order:
                self.message = f"Side {side.label} finished in place {self.game.finish_order.index(side) + 1}"
        else:
            LOG.debug("Dropped piece back: %s", result.error)
            self.message = f"Illegal move: {result.error}"
        self._drop_selection()

    def _drop_selection(self) -> None:
        self.lifted_piece = None
        self.highlight_targets = set()
        self.drag.reset()

    # ------------------------------------------------------------------
    # Rendering helpers
    # ------------------------------------------------------------------
    def draw(self) -> None:
        self.screen.fill(BACKGROUND)
        self._layout_widgets()

        if self.game.phase is Phase.START:
            self._draw_start()
        elif self.game.phase is Phase.GAME_SETUP:
            self._draw_setup()
        else:
            self._draw_board()
            self._draw_lifted()
            self._draw_play_ui()

        if self.message:
            msg = self.font_small.render(self.message, True, (255, 193, 7))
            self.screen.blit(msg, (20, self.screen.get_height() - 40))

    def _draw_heading(self, size_font: pygame.font.Font, y: int) -> None:
        heading = size_font.render("Chinese Checkers", True, TEXT_COLOR)
        self.screen.blit(heading, heading.get_rect(midtop=(self.screen.get_width() // 2, y)))

    def _draw_start(self) -> None:
        self._draw_heading(self.font_large, 60)
        for index, line in enumerate(DESCRIPTION):
            text = self.font_small.render(line, True, TEXT_COLOR)
            self.screen.blit(text, text.get_rect(midtop=(self.screen.get_width() // 2, 200 + index * 30)))
        self.next_button.draw(self.screen, self.font_medium, self.next_button.contains(pygame.mouse.get_pos()))

    def _draw_setup(self) -> None:
        self._draw_heading(self.font_large, 60)
        sub_heading = self.font_medium.render("Please select the players you want", True, TEXT_COLOR)
        self.screen.blit(sub_heading, sub_heading.get_rect(midtop=(self.screen.get_width() // 2, 180)))

        for checkbox in self.checkboxes:
            checkbox.draw(self.screen, self.font_small, checkbox.side in self.game.board.active_sides)

        mouse_pos = pygame.mouse.get_pos()
        for button in (self.next_button, self.previous_button):
            button.draw(self.screen, self.font_medium, button.contains(mouse_pos))

    def _draw_board(self) -> None:
        radius = ideal_radius(SIDE)
        for coord, state in self.game.board.cells.items():
            center = self._absolute(hex_to_pixel(coord, SIDE))
            pygame.draw.circle(self.screen, spot_color(state), center, radius)

        for coord in self.highlight_targets:
            center = self._absolute(hex_to_pixel(coord, SIDE))
            pygame.draw.circle(self.screen, HIGHLIGHT_TARGET, center, radius, width=3)

    def _draw_lifted(self) -> None:
        if self.lifted_piece is None:
            return

        state = self.game.board.get(self.lifted_piece.piece_coord)
        if state is None or state is Spot.EMPTY:
            return

        radius = ideal_radius(SIDE)
        origin = self._absolute(hex_to_pixel(self.lifted_piece.piece_coord, SIDE))
        outline = LIFT_OUTLINE_LOW if state < Side.D else LIFT_OUTLINE_HIGH
        pygame.draw.circle(self.screen, EMPTY_COLOR, origin, radius)
        pygame.draw.circle(self.screen, outline, origin, radius, width=4)

        size = int(radius * 2) + 2
        surf = pygame.Surface((size, size), pygame.SRCALPHA)
        pygame.draw.circle(surf, spot_color(state) + (FLOATING_ALPHA,), (size // 2, size // 2), radius)
        x, y = self._absolute(self.lifted_piece.current_pos)
        self.screen.blit(surf, (x - size // 2, y - size // 2))

    def _draw_play_ui(self) -> None:
        self._draw_heading(self.font_medium, 10)
        turn = self.game.turn
        label = self.font_medium.render(f"Turn:{turn.label}", True, spot_color(turn))
        self.screen.blit(label, label.get_rect(midtop=(self.screen.get_width() // 2, 45)))
        self.previous_button.draw(
            self.screen, self.font_medium, self.previous_button.contains(pygame.mouse.get_pos())
        )

    # ------------------------------------------------------------------
    # Main loop
    # ------------------------------------------------------------------
    def handle_event(self, event: pygame.event.Event) -> bool:
        if event.type == pygame.QUIT:
            return False
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if not self.handle_click(event.pos):
                self.drag.press()
                self.drag.motion(event.pos)
        elif event.type == pygame.MOUSEMOTION:
            self.drag.motion(event.pos)
        elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
            self.drag.release()
        return True

    def run(self) -> None:
        running = True
        while running:
            for event in pygame.event.get():
                if not self.handle_event(event):
                    running = False

            self.interact()
            self.update()
            self.drag.clear()
            self.draw()
            pygame.display.flip()
            self.clock.tick(FPS)

        pygame.quit()


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Sternhalma pygame client")
    parser.add_argument("--players", type=int, default=3, help="initial layout: 2, 3, 4 or 6")
    parser.add_argument("--log-level", default="INFO")
    args = parser.parse_args(argv)

    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.INFO))

    app = SternhalmaPygameApp(player_count=args.players)
    app.run()
    return 0


if __name__ == "__main__":  # pragma: no cover - manual execution
    sys.exit(main())
