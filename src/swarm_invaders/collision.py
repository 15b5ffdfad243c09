"""
Collision checks.

Hits are collected against a snapshot first and applied afterwards, so a
bullet never skips its neighbour when the list shrinks mid-iteration.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from swarm_invaders.entities import Alien, Bullet, RectCollider
from swarm_invaders.simulation import World


def intersects(a: RectCollider, b: RectCollider) -> bool:
    """Strict AABB overlap; shared edges do not count."""
    return a.intersects(b)


@dataclass
class CollisionReport:
    """
    Outcome of one collision pass.
    """

    hits: list[Alien] = field(default_factory=list)
    player_hits: int = 0
    invaded: bool = False
    cleared: bool = False

    @property
    def empty(self) -> bool:
        return not (self.hits or self.player_hits or self.invaded or self.cleared)


def _bullet_alien_hits(
    bullets: list[Bullet], aliens: list[Alien], w: float, h: float
) -> list[tuple[Bullet, Alien]]:
    # first match wins, one alien per bullet and one bullet per alien
    claimed: set[int] = set()
    pairs: list[tuple[Bullet, Alien]] = []
    for b in bullets:
        collider = b.collider(w, h)
        for a in aliens:
            if id(a) in claimed:
                continue
            if collider.intersects(a.collider):
                claimed.add(id(a))
                pairs.append((b, a))
                break
    return pairs


def check_collisions(world: World) -> CollisionReport:
    """
    Resolve player bullets vs aliens, alien bullets vs the player, then
    look for an invasion or a cleared formation.

    Entity changes (dead aliens, removed bullets) are applied here. Score,
    lives and level changes are left to the state machine, which consumes
    the returned report.

    :param world: The world to check.
    :type world: World

    :return: What happened this frame.
    :rtype: CollisionReport
    """
    report = CollisionReport()
    if world.frozen:
        return report

    settings = world.settings
    bw, bh = settings.bullet_width, settings.bullet_height

    # 1) player bullets vs aliens
    pairs = _bullet_alien_hits(list(world.bullets), world.alive_aliens, bw, bh)
    if pairs:
        spent = {id(b) for b, _ in pairs}
        for _, a in pairs:
            a.alive = False
            report.hits.append(a)
        world.bullets = [b for b in world.bullets if id(b) not in spent]

    # 2) alien bullets vs player
    player_collider = world.player.collider
    remaining: list[Bullet] = []
    for b in world.alien_bullets:
        if b.collider(bw, bh).intersects(player_collider):
            report.player_hits += 1
            continue
        remaining.append(b)
    world.alien_bullets = remaining

    # 3) formation reached the player line
    alive = world.alive_aliens
    report.invaded = any(a.y + a.height >= world.player.y for a in alive)

    # 4) formation wiped out
    report.cleared = not alive

    return report
