"""
HUD: score, lives, level and the game over overlay.
"""

from __future__ import annotations

from typing import Optional

import pygame

from swarm_invaders.constants import HUD_COLOR, OVERLAY_COLOR
from swarm_invaders.entities import GameState
from swarm_invaders.events import (
    GameEvent,
    GameOver,
    LevelChanged,
    LivesChanged,
    Restarted,
    ScoreChanged,
)


class HudPresenter:
    """
    Keeps the text shown to the player in sync with game events.

    Subscribe `on_event` to a `FrameDriver`; the presenter never reads game
    logic state except to seed its initial values.
    """

    def __init__(self, state: Optional[GameState] = None):
        state = state or GameState()
        self.score = str(state.score)
        self.lives = str(state.lives)
        self.level = str(state.level)
        self.final_score = ""
        self.overlay_visible = state.game_over
        self._font: Optional[pygame.font.Font] = None
        self._big_font: Optional[pygame.font.Font] = None

    def on_event(self, event: GameEvent) -> None:
        if isinstance(event, ScoreChanged):
            self.score = str(event.score)
        elif isinstance(event, LivesChanged):
            self.lives = str(event.lives)
        elif isinstance(event, LevelChanged):
            self.level = str(event.level)
        elif isinstance(event, GameOver):
            self.final_score = str(event.final_score)
            self.overlay_visible = True
        elif isinstance(event, Restarted):
            self.overlay_visible = False

    @property
    def status_line(self) -> str:
        return f"Score: {self.score}   Lives: {self.lives}   Level: {self.level}"

    def _fonts(self) -> tuple[pygame.font.Font, pygame.font.Font]:
        if self._font is None or self._big_font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            self._font = pygame.font.Font(None, 28)
            self._big_font = pygame.font.Font(None, 64)
        return self._font, self._big_font

    def draw(self, surface: pygame.Surface) -> None:
        """
        Draw the status line and, after game over, the overlay.

        :param surface: Target surface.
        :type surface: pygame.Surface
        """
        font, big_font = self._fonts()
        surface.blit(font.render(self.status_line, True, HUD_COLOR), (10, 10))

        if not self.overlay_visible:
            return

        width, height = surface.get_size()
        shade = pygame.Surface((width, height), pygame.SRCALPHA)
        shade.fill(OVERLAY_COLOR)
        surface.blit(shade, (0, 0))

        title = big_font.render("GAME OVER", True, HUD_COLOR)
        surface.blit(title, title.get_rect(center=(width // 2, height // 2 - 40)))

        for offset, text in (
            (20, f"Final score: {self.final_score}"),
            (60, "Press R to restart"),
        ):
            line = font.render(text, True, HUD_COLOR)
            surface.blit(line, line.get_rect(center=(width // 2, height // 2 + offset)))
