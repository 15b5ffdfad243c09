"""
Systems run by the frame driver, lowest `order` first.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Protocol

from swarm_invaders.collision import check_collisions
from swarm_invaders.events import GameEvent
from swarm_invaders.intents import Intent
from swarm_invaders.simulation import (
    World,
    shoot,
    update_aliens,
    update_bullets,
    update_player,
)
from swarm_invaders.state_machine import GamePhase, GameStateMachine


class Renderer(Protocol):
    """Anything that can draw a world snapshot."""

    def draw(self, world: World) -> None: ...


@dataclass
class TickContext:
    """
    Everything a system may read or change during one frame.
    """

    world: World
    machine: GameStateMachine
    intent: Intent
    events: list[GameEvent] = field(default_factory=list)


class System(Protocol):
    name: str
    order: int

    def enabled(self, ctx: TickContext) -> bool: ...

    def step(self, ctx: TickContext) -> None: ...


@dataclass
class InputSystem:
    """
    Apply the frame's intent: restart, pause toggle, movement and fire.
    """

    name: str = "input"
    order: int = 10

    def enabled(self, ctx: TickContext) -> bool:
        return True

    def step(self, ctx: TickContext) -> None:
        it = ctx.intent

        if it.restart:
            ctx.events.extend(ctx.machine.restart())

        if it.toggle_pause:
            ctx.events.extend(ctx.machine.toggle_pause())

        ctx.world.player.dx = it.move

        if it.fire:
            shoot(ctx.world)


@dataclass
class _PlayingOnly:
    def enabled(self, ctx: TickContext) -> bool:
        return ctx.machine.phase is GamePhase.PLAYING


@dataclass
class PlayerSystem(_PlayingOnly):
    name: str = "player"
    order: int = 20

    def step(self, ctx: TickContext) -> None:
        update_player(ctx.world)


@dataclass
class BulletSystem(_PlayingOnly):
    name: str = "bullets"
    order: int = 30

    def step(self, ctx: TickContext) -> None:
        update_bullets(ctx.world)


@dataclass
class AlienSystem(_PlayingOnly):
    name: str = "aliens"
    order: int = 40

    def step(self, ctx: TickContext) -> None:
        update_aliens(ctx.world)


@dataclass
class CollisionSystem(_PlayingOnly):
    """Check collisions and feed the report to the state machine."""

    name: str = "collisions"
    order: int = 50

    def step(self, ctx: TickContext) -> None:
        report = check_collisions(ctx.world)
        if not report.empty:
            ctx.events.extend(ctx.machine.apply(report))


@dataclass
class RenderSystem:
    """Hand the world to the renderer. Runs in every phase."""

    renderer: Optional[Renderer] = None
    name: str = "render"
    order: int = 100

    def enabled(self, ctx: TickContext) -> bool:
        return self.renderer is not None

    def step(self, ctx: TickContext) -> None:
        renderer = self.renderer
        if renderer is None:
            return
        renderer.draw(ctx.world)


def default_systems(renderer: Optional[Renderer] = None) -> list[System]:
    return [
        InputSystem(),
        PlayerSystem(),
        BulletSystem(),
        AlienSystem(),
        CollisionSystem(),
        RenderSystem(renderer=renderer),
    ]
