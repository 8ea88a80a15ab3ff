#!/usr/bin/env python3
"""
flappy_client.py

pygame host for the game: window and resize handling, input mapping,
frame driver and rendering. All game rules live in GameEngine.
"""

import argparse
import logging
import math
from typing import Optional, Tuple

import pygame

from .constants import (
    DEFAULT_WIDTH, MIN_VIEW_WIDTH, MAX_VIEW_WIDTH, VIEW_ASPECT, RENDER_FPS,
    DB_FILE, PLAYER_GLYPH, COLOR_BG_TOP, COLOR_BG_BOTTOM, COLOR_PIPE,
    COLOR_PIPE_TEXT, COLOR_PLAYER, COLOR_PLAYER_SCREEN, COLOR_PLAYER_TEXT,
    COLOR_GROUND, COLOR_HUD, COLOR_PANEL, COLOR_GAME_OVER
)
from .data_models import GameState, Phase
from .game_engine import GameEngine
from .storage import MemoryStore, SqliteStore

logger = logging.getLogger(__name__)

FLAP_KEYS = (pygame.K_SPACE, pygame.K_UP)


def viewport_for_window(window_width: int) -> Tuple[int, int]:
    """Logical viewport for a window width: clamped width, fixed aspect ratio."""
    width = max(MIN_VIEW_WIDTH, min(MAX_VIEW_WIDTH, window_width))
    return width, round(width * VIEW_ASPECT)


# ----------------- Renderer -----------------

class Renderer:
    """Draws a GameState onto a surface. Reads the state, never changes it."""

    def __init__(self, surface: pygame.Surface):
        self.surface = surface
        self._fonts = {}
        self.hud_font = self._font(30)
        self.panel_font = self._font(40)
        self.small_font = self._font(24)
        self.panel_rect: Optional[pygame.Rect] = None
        self._background_cache: Optional[pygame.Surface] = None

    def _font(self, size: int) -> pygame.font.Font:
        if size not in self._fonts:
            self._fonts[size] = pygame.font.Font(None, size)
        return self._fonts[size]

    def _background(self, width: int, height: int):
        cached = self._background_cache
        if cached is None or cached.get_size() != (width, height):
            cached = pygame.Surface((width, height))
            for y in range(height):
                t = y / max(1, height - 1)
                color = tuple(
                    round(a + (b - a) * t) for a, b in zip(COLOR_BG_TOP, COLOR_BG_BOTTOM))
                pygame.draw.line(cached, color, (0, y), (width, y))
            self._background_cache = cached
        self.surface.blit(cached, (0, 0))

    def _centered_text(self, font, text, color, center):
        surf = font.render(text, True, color)
        self.surface.blit(surf, surf.get_rect(center=center))

    def _draw_pipes(self, state: GameState):
        for pipe in state.pipes:
            font = self._font(max(16, round(pipe.width * 0.4)))
            top_rect = pygame.Rect(round(pipe.x), 0, round(pipe.width), round(pipe.top))
            bottom_rect = pygame.Rect(
                round(pipe.x), round(state.height - pipe.bottom),
                round(pipe.width), round(pipe.bottom))
            pygame.draw.rect(self.surface, COLOR_PIPE, top_rect, border_radius=8)
            pygame.draw.rect(self.surface, COLOR_PIPE, bottom_rect, border_radius=8)

            cx = pipe.x + pipe.width / 2
            self._centered_text(font, pipe.symbol, COLOR_PIPE_TEXT,
                                (cx, max(12, pipe.top / 2)))
            self._centered_text(font, pipe.symbol, COLOR_PIPE_TEXT,
                                (cx, state.height - max(12, pipe.bottom / 2)))

    def _draw_player(self, state: GameState):
        player = state.player
        size = round(player.size)
        body = pygame.Surface((size, size), pygame.SRCALPHA)
        pygame.draw.rect(body, COLOR_PLAYER, (0, 0, size, size), border_radius=8)
        pygame.draw.rect(body, COLOR_PLAYER_SCREEN, (6, 6, size - 12, size - 12),
                         border_radius=6)
        glyph_font = self._font(max(12, round(size * 0.45)))
        glyph = glyph_font.render(PLAYER_GLYPH, True, COLOR_PLAYER_TEXT)
        body.blit(glyph, glyph.get_rect(center=(size / 2, size / 2)))

        # Positive rotation tilts the nose down; pygame rotates counter-clockwise.
        rotated = pygame.transform.rotate(body, -math.degrees(player.rotation))
        self.surface.blit(rotated, rotated.get_rect(center=(player.x, player.y)))

    def _draw_hud(self, state: GameState):
        score = self.hud_font.render(f"Score: {state.score}", True, COLOR_HUD)
        best = self.hud_font.render(f"Best: {state.best}", True, COLOR_HUD)
        self.surface.blit(score, (10, 10))
        self.surface.blit(best, (state.width - best.get_width() - 10, 10))

    def _draw_panel(self, state: GameState):
        if state.phase is Phase.RUNNING:
            self.panel_rect = None
            return
        overlay = pygame.Surface((round(state.width), round(state.height)), pygame.SRCALPHA)
        overlay.fill(COLOR_PANEL)
        self.surface.blit(overlay, (0, 0))

        center_x, center_y = state.width / 2, state.height / 2
        if state.phase is Phase.IDLE:
            title, button = "Flappy Code", "Start"
            title_color = COLOR_HUD
        else:
            title, button = "Game Over", "Restart"
            title_color = COLOR_GAME_OVER
            self._centered_text(self.hud_font, f"Score: {state.score}", COLOR_HUD,
                                (center_x, center_y - 10))
        self._centered_text(self.panel_font, title, title_color, (center_x, center_y - 60))

        self.panel_rect = pygame.Rect(0, 0, 140, 44)
        self.panel_rect.center = (round(center_x), round(center_y + 40))
        pygame.draw.rect(self.surface, COLOR_PIPE, self.panel_rect, border_radius=10)
        self._centered_text(self.hud_font, button, COLOR_PIPE_TEXT, self.panel_rect.center)
        self._centered_text(self.small_font, "Space / Up / Click / Tap = Flap",
                            COLOR_HUD, (center_x, center_y + 100))

    def draw(self, state: GameState):
        """Renders the game state."""
        width, height = round(state.width), round(state.height)
        self._background(width, height)
        self._draw_pipes(state)
        self._draw_player(state)
        pygame.draw.rect(self.surface, COLOR_GROUND, (0, height - 4, width, 4))
        self._draw_hud(state)
        self._draw_panel(state)


# ----------------- Game Client (window / input / loop) -----------------

class FlappyClient:
    def __init__(self, engine: GameEngine, window_width: int = DEFAULT_WIDTH):
        pygame.init()
        self.engine = engine
        width, height = viewport_for_window(window_width)
        self.screen = pygame.display.set_mode((width, height), pygame.RESIZABLE)
        pygame.display.set_caption("Flappy Code")
        self.engine.resize(width, height)
        self.renderer = Renderer(self.screen)

        self.clock = pygame.time.Clock()
        self.dirty = True
        self.finger_down = False

    def _resize(self, window_width: int):
        width, height = viewport_for_window(window_width)
        self.screen = pygame.display.set_mode((width, height), pygame.RESIZABLE)
        self.renderer.surface = self.screen
        self.engine.resize(width, height)
        self.dirty = True

    def _handle_event(self, event) -> bool:
        """Maps one pygame event onto the engine. Returns False to quit."""
        if event.type == pygame.QUIT:
            return False
        if event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                return False
            if event.key in FLAP_KEYS:
                self._flap()
        elif event.type == pygame.MOUSEBUTTONDOWN:
            # A touch or trackpad tap can also send a click in the same batch.
            if getattr(event, "touch", False) or self.finger_down:
                return True
            panel = self.renderer.panel_rect
            if (not self.engine.state.running and panel is not None
                    and panel.collidepoint(event.pos)):
                self.engine.start(self._now())
                self.dirty = True
            else:
                self._flap()
        elif event.type == pygame.FINGERDOWN:
            self.finger_down = True
            self._flap()
        elif event.type == pygame.VIDEORESIZE:
            self._resize(event.w)
        return True

    @staticmethod
    def _now() -> float:
        return pygame.time.get_ticks() / 1000.0

    def _flap(self):
        self.engine.flap(self._now())
        self.dirty = True

    def _frame(self, events) -> bool:
        """One pass of the loop: input, simulation, then drawing. False means quit."""
        keep_going = True
        self.finger_down = False
        for event in events:
            if not self._handle_event(event):
                keep_going = False

        was_running = self.engine.state.running
        if was_running:
            self.engine.tick(self._now())

        # Ticks only while the session runs; otherwise redraw on change.
        if was_running or self.dirty:
            self.renderer.draw(self.engine.state)
            pygame.display.flip()
            self.dirty = False
        return keep_going

    def run(self):
        """The main client execution loop."""
        running = True
        while running:
            self.clock.tick(RENDER_FPS)
            running = self._frame(pygame.event.get())

        pygame.quit()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="flappy-code", description="Flappy Code arcade game")
    parser.add_argument("--db", default=DB_FILE, help="SQLite file for the best score")
    parser.add_argument("--memory", action="store_true",
                        help="Keep the best score in memory only")
    parser.add_argument("--width", type=int, default=DEFAULT_WIDTH,
                        help="Initial window width")
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    store = MemoryStore() if args.memory else SqliteStore(args.db)
    engine = GameEngine(store=store, clock=lambda: pygame.time.get_ticks() / 1000.0)
    logger.info("Loaded best score %d", engine.state.best)
    try:
        FlappyClient(engine, window_width=args.width).run()
    finally:
        if isinstance(store, SqliteStore):
            store.close()


if __name__ == "__main__":
    main()
