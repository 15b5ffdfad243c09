"""
Frame driver: one call to `tick` is one frame.
"""

from __future__ import annotations

from typing import Optional

from swarm_invaders.events import EventListener, GameEvent
from swarm_invaders.intents import Intent
from swarm_invaders.settings import GameSettings
from swarm_invaders.simulation import World, new_world
from swarm_invaders.state_machine import GamePhase, GameStateMachine
from swarm_invaders.systems import Renderer, System, TickContext, default_systems
from swarm_invaders.utils import logger


class FrameDriver:
    """
    Sequences input -> simulate -> collide -> render for one world.

    While paused it keeps rendering every frame. After game over it renders
    the final frame and stops scheduling itself until `restart`.
    """

    def __init__(
        self,
        world: Optional[World] = None,
        renderer: Optional[Renderer] = None,
        systems: Optional[list[System]] = None,
        settings: Optional[GameSettings] = None,
    ):
        """
        :param world: World to drive, a new one is built from `settings` if
            omitted.
        :type world: World | None

        :param renderer: Drawing collaborator, None for headless runs.
        :type renderer: Renderer | None

        :param systems: Systems to run instead of the default pipeline.
        :type systems: list[System] | None

        :param settings: Settings for the new world when `world` is None.
        :type settings: GameSettings | None
        """
        self.world = world or new_world(settings)
        self.machine = GameStateMachine(self.world)
        self.systems = sorted(
            systems if systems is not None else default_systems(renderer),
            key=lambda s: s.order,
        )
        self.scheduled = True
        self.frame = 0
        self._listeners: list[EventListener] = []

    @property
    def phase(self) -> GamePhase:
        return self.machine.phase

    def subscribe(self, listener: EventListener) -> None:
        self._listeners.append(listener)

    def publish(self, events: list[GameEvent]) -> None:
        for event in events:
            for listener in self._listeners:
                listener(event)

    def tick(self, intent: Optional[Intent] = None) -> bool:
        """
        Run one frame.

        :param intent: What the player wants this frame.
        :type intent: Intent | None

        :return: True if the driver wants another frame.
        :rtype: bool
        """
        if not self.scheduled:
            return False

        ctx = TickContext(
            world=self.world,
            machine=self.machine,
            intent=intent or Intent(),
        )
        for system in self.systems:
            if system.enabled(ctx):
                system.step(ctx)
            # listeners see this frame's changes before the render step
            self.publish(ctx.events)
            ctx.events.clear()

        self.frame += 1

        if self.world.state.game_over:
            logger.debug(f"Stopped scheduling at frame {self.frame}")
            self.scheduled = False
        return self.scheduled

    def restart(self) -> None:
        """Reset the game and resume scheduling."""
        self.publish(self.machine.restart())
        self.scheduled = True
