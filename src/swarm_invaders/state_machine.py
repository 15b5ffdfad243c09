"""
Game flow: playing, paused and game over.
"""

from __future__ import annotations

from enum import Enum

from swarm_invaders.collision import CollisionReport
from swarm_invaders.entities import GameState, create_aliens
from swarm_invaders.events import (
    GameEvent,
    GameOver,
    LevelChanged,
    LivesChanged,
    PauseToggled,
    Restarted,
    ScoreChanged,
)
from swarm_invaders.simulation import World
from swarm_invaders.utils import logger


class GamePhase(str, Enum):
    PLAYING = "playing"
    PAUSED = "paused"
    GAME_OVER = "game_over"


class GameStateMachine:
    """
    Owns the transitions of a world's `GameState`.

    Every transition returns the events it produced, in order, and never
    touches the presentation layer directly.
    """

    def __init__(self, world: World):
        """
        :param world: The world whose state this machine drives.
        :type world: World
        """
        self.world = world

    @property
    def state(self) -> GameState:
        return self.world.state

    @property
    def phase(self) -> GamePhase:
        if self.state.game_over:
            return GamePhase.GAME_OVER
        if self.state.paused:
            return GamePhase.PAUSED
        return GamePhase.PLAYING

    def toggle_pause(self) -> list[GameEvent]:
        """Flip playing and paused. Does nothing after game over."""
        if self.phase is GamePhase.GAME_OVER:
            return []
        self.state.paused = not self.state.paused
        logger.debug(f"Paused: {self.state.paused}")
        return [PauseToggled(self.state.paused)]

    def award(self, points: int) -> list[GameEvent]:
        self.state.score += points
        logger.debug(f"Points: {self.state.score}")
        return [ScoreChanged(self.state.score)]

    def lose_life(self) -> list[GameEvent]:
        """
        Take one life. The last one ends the game, otherwise the ship is
        moved back to the center.
        """
        if self.phase is not GamePhase.PLAYING:
            return []

        self.state.lives = max(0, self.state.lives - 1)
        events: list[GameEvent] = [LivesChanged(self.state.lives)]
        logger.debug(f"Life lost, {self.state.lives} left")

        if self.state.lives <= 0:
            events.extend(self.end_game())
        else:
            self.world.player.reset_position(self.world.settings.width)
        return events

    def end_game(self) -> list[GameEvent]:
        if self.state.game_over:
            return []
        self.state.game_over = True
        logger.info(f"Game over, final score {self.state.score}")
        return [GameOver(self.state.score)]

    def next_level(self) -> list[GameEvent]:
        """
        Speed the formation up and bring in a fresh grid. Bullets in
        flight are left alone.
        """
        if self.phase is not GamePhase.PLAYING:
            return []

        world = self.world
        self.state.level += 1
        world.alien_speed += world.settings.alien_speed_increment
        world.aliens = create_aliens(world.settings)
        logger.info(
            f"Level {self.state.level}, alien speed {world.alien_speed:.2f}"
        )
        return [LevelChanged(self.state.level)]

    def restart(self) -> list[GameEvent]:
        """
        Start over from level 1. Allowed from any phase.
        """
        world = self.world
        settings = world.settings

        world.state = GameState(lives=settings.lives)
        world.player.reset_position(settings.width)
        world.player.dx = 0
        world.bullets = []
        world.alien_bullets = []
        world.alien_speed = settings.alien_speed
        world.aliens = create_aliens(settings)

        logger.info("Restarting the game")
        return [
            ScoreChanged(world.state.score),
            LivesChanged(world.state.lives),
            LevelChanged(world.state.level),
            Restarted(),
        ]

    def apply(self, report: CollisionReport) -> list[GameEvent]:
        """
        Turn a collision report into transitions.

        Invasion ends the game whatever else happened this frame; a cleared
        formation only advances the level if the game is still on.

        :param report: Result of `check_collisions`.
        :type report: CollisionReport

        :return: Events produced, in order.
        :rtype: list[GameEvent]
        """
        events: list[GameEvent] = []
        for alien in report.hits:
            events.extend(self.award(alien.points))

        if report.invaded:
            events.extend(self.end_game())
            return events

        # one life per hitting bullet; lose_life stops at game over
        for _ in range(report.player_hits):
            events.extend(self.lose_life())

        if report.cleared:
            events.extend(self.next_level())

        return events
