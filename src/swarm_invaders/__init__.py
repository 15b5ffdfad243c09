"""
Swarm Invaders: a fixed-step Space Invaders style arcade game.
"""

from __future__ import annotations

from swarm_invaders.driver import FrameDriver
from swarm_invaders.settings import GameSettings, SettingsError
from swarm_invaders.simulation import World, new_world
from swarm_invaders.state_machine import GamePhase, GameStateMachine

__all__ = [
    "FrameDriver",
    "GamePhase",
    "GameSettings",
    "GameStateMachine",
    "SettingsError",
    "World",
    "new_world",
]

__version__ = "0.1.0"
