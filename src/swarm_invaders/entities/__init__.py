"""
Swarm Invaders entities
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from swarm_invaders.constants import POINTS_PER_TIER
from swarm_invaders.settings import GameSettings

BulletOwner = Literal["player", "alien"]


@dataclass(frozen=True)
class RectCollider:
    """
    Axis-aligned bounding box.
    """

    x: float
    y: float
    width: float
    height: float

    def intersects(self, other: RectCollider) -> bool:
        """
        Strict overlap test: rectangles that only share an edge do not
        intersect.

        :param other: The other collider.
        :type other: RectCollider

        :return: True if the rectangles overlap.
        :rtype: bool
        """
        return (
            self.x < other.x + other.width
            and self.x + self.width > other.x
            and self.y < other.y + other.height
            and self.y + self.height > other.y
        )


@dataclass
class GameState:
    """
    Score, lives and flow flags.
    """

    score: int = 0
    lives: int = 3
    level: int = 1
    paused: bool = False
    game_over: bool = False


@dataclass
class Player:
    """
    Player ship
    """

    x: float
    y: float
    width: float = 50
    height: float = 30
    speed: float = 3.0
    dx: int = 0  # -1 left, 0 idle, 1 right

    @property
    def collider(self) -> RectCollider:
        return RectCollider(self.x, self.y, self.width, self.height)

    def reset_position(self, playfield_width: float) -> None:
        """
        Center the ship horizontally.

        :param playfield_width: Width of the playfield.
        :type playfield_width: float
        """
        self.x = playfield_width / 2 - self.width / 2

    @classmethod
    def from_settings(cls, settings: GameSettings) -> Player:
        player = cls(
            x=0.0,
            y=settings.height - 60,
            width=settings.player_width,
            height=settings.player_height,
            speed=settings.player_speed,
        )
        player.reset_position(settings.width)
        return player


@dataclass
class Bullet:
    """
    Bullet entity. Size is shared by every bullet and lives in the settings.
    """

    x: float
    y: float
    owner: BulletOwner = "player"

    def collider(self, width: float, height: float) -> RectCollider:
        return RectCollider(self.x, self.y, width, height)


@dataclass
class Alien:
    """
    Alien entity
    """

    x: float
    y: float
    width: float = 40
    height: float = 30
    alive: bool = True
    type: int = 1  # point tier, 1..3
    row: int = 0
    col: int = 0

    @property
    def collider(self) -> RectCollider:
        return RectCollider(self.x, self.y, self.width, self.height)

    @property
    def points(self) -> int:
        return self.type * POINTS_PER_TIER


def tier_for_row(row: int) -> int:
    """Top row is worth the most, the next two rows less, the rest least."""
    if row < 1:
        return 3
    if row < 3:
        return 2
    return 1


def create_aliens(settings: GameSettings) -> list[Alien]:
    """
    Build a full formation, row by row.

    :param settings: Grid dimensions, alien size and spacing.
    :type settings: GameSettings

    :return: Aliens in row-major order, all alive.
    :rtype: list[Alien]
    """
    aliens: list[Alien] = []
    step_x = settings.alien_width + settings.alien_padding
    step_y = settings.alien_height + settings.alien_padding
    for row in range(settings.alien_rows):
        for col in range(settings.alien_cols):
            aliens.append(
                Alien(
                    x=col * step_x + settings.alien_offset_x,
                    y=row * step_y + settings.alien_offset_y,
                    width=settings.alien_width,
                    height=settings.alien_height,
                    type=tier_for_row(row),
                    row=row,
                    col=col,
                )
            )
    return aliens

