"""
Per-frame simulation step.

Every function takes the `World` it mutates; nothing here keeps module
level state. Positions and speeds are in pixels per frame, so the game runs
as fast as the host calls it.
"""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Optional

from swarm_invaders.entities import (
    Alien,
    Bullet,
    GameState,
    Player,
    create_aliens,
)
from swarm_invaders.settings import GameSettings
from swarm_invaders.utils import logger


# Justification: the world is the single owner of all mutable game data.
# pylint: disable=too-many-instance-attributes
@dataclass
class World:
    """
    Swarm Invaders World
    """

    settings: GameSettings
    state: GameState
    player: Player
    aliens: list[Alien] = field(default_factory=list)
    bullets: list[Bullet] = field(default_factory=list)
    alien_bullets: list[Bullet] = field(default_factory=list)
    alien_speed: float = 0.5
    alien_direction: float = 1.0  # 1 for right, -1 for left
    rng: random.Random = field(default_factory=random.Random)

    @property
    def alive_aliens(self) -> list[Alien]:
        return [a for a in self.aliens if a.alive]

    @property
    def frozen(self) -> bool:
        """No simulation mutation happens after game over."""
        return self.state.game_over


def new_world(
    settings: Optional[GameSettings] = None, seed: Optional[int] = None
) -> World:
    """
    Create a world at the start of level 1.

    :param settings: Game settings, defaults to `GameSettings()`.
    :type settings: GameSettings | None

    :param seed: Seed for alien fire, overrides `settings.seed`.
    :type seed: int | None

    :return: A fresh world.
    :rtype: World
    """
    settings = settings or GameSettings()
    seed = settings.seed if seed is None else seed
    return World(
        settings=settings,
        state=GameState(lives=settings.lives),
        player=Player.from_settings(settings),
        aliens=create_aliens(settings),
        alien_speed=settings.alien_speed,
        rng=random.Random(seed),
    )


def update_player(world: World) -> None:
    """
    Move the player by its velocity intent and keep it on the playfield.
    """
    if world.frozen:
        return

    player = world.player
    player.x += player.dx * player.speed

    max_x = world.settings.width - player.width
    player.x = max(0.0, min(max_x, player.x))


def update_bullets(world: World) -> None:
    """
    Advance player bullets up and alien bullets down, dropping the ones
    that left the playfield. Order of the survivors is kept.
    """
    if world.frozen:
        return

    settings = world.settings

    alive: list[Bullet] = []
    for b in world.bullets:
        b.y -= settings.bullet_speed
        if b.y > 0:
            alive.append(b)
    world.bullets = alive

    alive = []
    for b in world.alien_bullets:
        b.y += settings.alien_bullet_speed
        if b.y < settings.height:
            alive.append(b)
    world.alien_bullets = alive


def speed_multiplier(destroyed: int, total: int) -> float:
    """
    Formation speed-up as it thins out: 1 at full strength, 4 when empty.

    :param destroyed: Aliens killed this level.
    :type destroyed: int

    :param total: Aliens in a full formation.
    :type total: int

    :return: Factor applied to the base alien speed.
    :rtype: float
    """
    if total <= 0:
        return 1.0
    return 1 + (destroyed / total) * 3


def update_aliens(world: World) -> None:
    """
    Move the formation as one rigid body:
    - Move every living alien horizontally
    - If any touches a wall -> reverse direction and drop all of them
    - Each living alien may fire with a small per-frame chance
    """
    if world.frozen:
        return

    settings = world.settings
    alive = world.alive_aliens
    total = settings.total_aliens
    current_speed = world.alien_speed * speed_multiplier(total - len(alive), total)

    hit_edge = False
    for a in alive:
        a.x += current_speed * world.alien_direction

        if a.x <= 0 or a.x + a.width >= settings.width:
            hit_edge = True

        if world.rng.random() < settings.alien_shoot_chance:
            world.alien_bullets.append(
                Bullet(x=a.x + a.width / 2, y=a.y + a.height, owner="alien")
            )

    if hit_edge:
        world.alien_direction *= -1
        for a in alive:
            a.y += settings.alien_drop_distance


def shoot(world: World) -> Optional[Bullet]:
    """
    Fire a player bullet from the top-center of the ship.

    :return: The new bullet, or None while paused or after game over.
    :rtype: Bullet | None
    """
    if world.state.paused or world.state.game_over:
        return None

    player = world.player
    bullet = Bullet(
        x=player.x + player.width / 2 - world.settings.bullet_width / 2,
        y=player.y,
        owner="player",
    )
    world.bullets.append(bullet)
    logger.debug(f"Shooting bullet at ({bullet.x}, {bullet.y})")
    return bullet
