"""
Events emitted by game state transitions.

The presentation layer subscribes to these instead of being called from
game logic.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Union


@dataclass(frozen=True)
class ScoreChanged:
    score: int


@dataclass(frozen=True)
class LivesChanged:
    lives: int


@dataclass(frozen=True)
class LevelChanged:
    level: int


@dataclass(frozen=True)
class PauseToggled:
    paused: bool


@dataclass(frozen=True)
class GameOver:
    final_score: int


@dataclass(frozen=True)
class Restarted:
    pass


GameEvent = Union[
    ScoreChanged, LivesChanged, LevelChanged, PauseToggled, GameOver, Restarted
]

EventListener = Callable[[GameEvent], None]
