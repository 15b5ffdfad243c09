"""
Shared fixtures. Pygame runs headless.
"""

from __future__ import annotations

import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame  # noqa: E402  pylint: disable=wrong-import-position
import pytest  # noqa: E402  pylint: disable=wrong-import-position

from swarm_invaders.driver import FrameDriver  # noqa: E402
from swarm_invaders.settings import GameSettings  # noqa: E402
from swarm_invaders.simulation import World, new_world  # noqa: E402


@pytest.fixture
def settings() -> GameSettings:
    # no random alien fire unless a test asks for it
    return GameSettings(alien_shoot_chance=0.0, seed=1234)


@pytest.fixture
def world(settings: GameSettings) -> World:
    return new_world(settings)


@pytest.fixture
def driver(world: World) -> FrameDriver:
    return FrameDriver(world=world)


@pytest.fixture
def pygame_init():
    pygame.init()
    yield
    pygame.quit()
