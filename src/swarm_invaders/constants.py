"""
Constants for the game.
"""

from __future__ import annotations

FPS = 60
WINDOW_SIZE = (800, 600)
TITLE = "Swarm Invaders"

# Assets are optional; the renderer falls back to solid colours.
BACKGROUND_IMAGE = "images/game_background.jpg"
PLAYER_IMAGE = "images/player.png"

Color = tuple[int, int, int]

BACKGROUND_COLOR: Color = (0, 0, 0)
PLAYER_COLOR: Color = (0, 255, 0)
PLAYER_BULLET_COLOR: Color = (255, 255, 255)
ALIEN_BULLET_COLOR: Color = (255, 0, 0)
PAUSED_COLOR: Color = (0, 255, 0)
HUD_COLOR: Color = (0, 255, 0)
OVERLAY_COLOR = (0, 0, 0, 180)

# tier -> colour
ALIEN_COLORS: dict[int, Color] = {
    3: (255, 0, 0),
    2: (255, 255, 0),
    1: (0, 255, 255),
}

POINTS_PER_TIER = 10
