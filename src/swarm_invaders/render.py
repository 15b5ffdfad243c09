"""
Pygame renderer.
"""

from __future__ import annotations

from typing import Optional

import pygame

from swarm_invaders.constants import (
    ALIEN_BULLET_COLOR,
    ALIEN_COLORS,
    BACKGROUND_COLOR,
    BACKGROUND_IMAGE,
    PAUSED_COLOR,
    PLAYER_BULLET_COLOR,
    PLAYER_COLOR,
    PLAYER_IMAGE,
)
from swarm_invaders.entities import Alien
from swarm_invaders.hud import HudPresenter
from swarm_invaders.simulation import World
from swarm_invaders.utils import load_image, logger


class PygameRenderer:
    """
    Draws a world onto a pygame surface.

    Images are optional, missing ones are replaced by solid colors.
    """

    def __init__(
        self,
        surface: pygame.Surface,
        hud: Optional[HudPresenter] = None,
        load_assets: bool = True,
        flip: bool = True,
    ):
        """
        :param surface: Target surface, usually the display.
        :type surface: pygame.Surface

        :param hud: HUD drawn on top of the world.
        :type hud: HudPresenter | None

        :param load_assets: Try to load background and player images.
        :type load_assets: bool

        :param flip: Call `pygame.display.flip` after drawing.
        :type flip: bool
        """
        self.surface = surface
        self.hud = hud
        self.flip = flip
        self.background: Optional[pygame.Surface] = None
        self.player_image: Optional[pygame.Surface] = None
        self._paused_font: Optional[pygame.font.Font] = None

        if load_assets:
            logger.debug("Loading images")
            self.background = load_image(BACKGROUND_IMAGE)
            self.player_image = load_image(PLAYER_IMAGE, transparent=True)

    def draw(self, world: World) -> None:
        self._draw_background()
        self._draw_player(world)

        for a in world.aliens:
            self._draw_alien(a)

        bw, bh = world.settings.bullet_width, world.settings.bullet_height
        for b in world.bullets:
            pygame.draw.rect(
                self.surface, PLAYER_BULLET_COLOR, (int(b.x), int(b.y), bw, bh)
            )
        for b in world.alien_bullets:
            pygame.draw.rect(
                self.surface, ALIEN_BULLET_COLOR, (int(b.x), int(b.y), bw, bh)
            )

        if world.state.paused:
            self._draw_paused()

        if self.hud is not None:
            self.hud.draw(self.surface)

        if self.flip and pygame.display.get_surface() is self.surface:
            pygame.display.flip()

    def _draw_background(self) -> None:
        if self.background is not None:
            image = pygame.transform.scale(self.background, self.surface.get_size())
            self.surface.blit(image, (0, 0))
        else:
            self.surface.fill(BACKGROUND_COLOR)

    def _draw_player(self, world: World) -> None:
        p = world.player
        rect = pygame.Rect(int(p.x), int(p.y), int(p.width), int(p.height))
        if self.player_image is not None:
            image = pygame.transform.scale(self.player_image, rect.size)
            self.surface.blit(image, rect)
        else:
            pygame.draw.rect(self.surface, PLAYER_COLOR, rect)

    def _draw_alien(self, alien: Alien) -> None:
        if not alien.alive:
            return

        color = ALIEN_COLORS.get(alien.type, ALIEN_COLORS[1])
        sx, sy = alien.width / 40, alien.height / 30

        # body, wings and two legs on a 40x30 grid
        for x, y, w, h in (
            (5, 0, 30, 20),
            (0, 10, 40, 15),
            (10, 25, 5, 5),
            (25, 25, 5, 5),
        ):
            rect = pygame.Rect(
                int(alien.x + x * sx),
                int(alien.y + y * sy),
                max(1, int(w * sx)),
                max(1, int(h * sy)),
            )
            pygame.draw.rect(self.surface, color, rect)

    def _draw_paused(self) -> None:
        if self._paused_font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            self._paused_font = pygame.font.Font(None, 48)

        label = self._paused_font.render("PAUSED", True, PAUSED_COLOR)
        width, height = self.surface.get_size()
        self.surface.blit(label, label.get_rect(center=(width // 2, height // 2)))
