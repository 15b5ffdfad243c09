"""
Tests for the frame driver.
"""

from dataclasses import dataclass, field

from swarm_invaders.driver import FrameDriver
from swarm_invaders.entities import Bullet
from swarm_invaders.events import GameOver, LevelChanged, Restarted, ScoreChanged
from swarm_invaders.hud import HudPresenter
from swarm_invaders.intents import Intent
from swarm_invaders.settings import GameSettings
from swarm_invaders.simulation import World
from swarm_invaders.state_machine import GamePhase
from swarm_invaders.systems import RenderSystem, TickContext


@dataclass
class RecordingRenderer:
    hud: HudPresenter | None = None
    frames: list[tuple[GamePhase, bool]] = field(default_factory=list)

    def draw(self, world: World) -> None:
        phase = (
            GamePhase.GAME_OVER
            if world.state.game_over
            else GamePhase.PAUSED if world.state.paused else GamePhase.PLAYING
        )
        overlay = self.hud.overlay_visible if self.hud else False
        self.frames.append((phase, overlay))


def _driver(world, hud=None):
    renderer = RecordingRenderer(hud=hud)
    driver = FrameDriver(world=world, renderer=renderer)
    if hud is not None:
        driver.subscribe(hud.on_event)
    return driver, renderer


class TestTick:
    def test_systems_run_in_order(self, driver):
        orders = [s.order for s in driver.systems]

        assert orders == sorted(orders)
        assert [s.name for s in driver.systems] == [
            "input",
            "player",
            "bullets",
            "aliens",
            "collisions",
            "render",
        ]

    def test_playing_frame_simulates_and_renders(self, world):
        driver, renderer = _driver(world)
        x = world.player.x
        alien_x = world.aliens[0].x

        assert driver.tick(Intent(move=1)) is True

        assert world.player.x == x + 3
        assert world.aliens[0].x == alien_x + 0.5
        assert renderer.frames == [(GamePhase.PLAYING, False)]
        assert driver.frame == 1

    def test_fire_spawns_a_bullet_that_moves_the_same_frame(self, world):
        driver, _ = _driver(world)

        driver.tick(Intent(fire=True))

        assert len(world.bullets) == 1
        assert world.bullets[0].y == world.player.y - 5

    def test_tick_without_renderer(self, driver, world):
        assert driver.tick() is True
        assert world.aliens[0].x == 50.5

    def test_render_system_without_renderer_is_a_no_op(self, driver, world):
        ctx = TickContext(world=world, machine=driver.machine, intent=Intent())

        RenderSystem().step(ctx)

        assert ctx.events == []


class TestPause:
    def test_paused_frames_render_but_do_not_simulate(self, world):
        driver, renderer = _driver(world)
        driver.tick(Intent(toggle_pause=True))
        alien_x = world.aliens[0].x

        for _ in range(3):
            assert driver.tick(Intent(move=1, fire=True)) is True

        assert world.aliens[0].x == alien_x
        assert world.bullets == []
        assert driver.phase is GamePhase.PAUSED
        assert renderer.frames[-3:] == [(GamePhase.PAUSED, False)] * 3

    def test_unpause_resumes_simulation(self, world):
        driver, _ = _driver(world)
        driver.tick(Intent(toggle_pause=True))
        alien_x = world.aliens[0].x

        driver.tick(Intent(toggle_pause=True))

        assert driver.phase is GamePhase.PLAYING
        assert world.aliens[0].x == alien_x + 0.5


class TestGameOver:
    def test_final_frame_rendered_then_stops(self, world):
        hud = HudPresenter(world.state)
        driver, renderer = _driver(world, hud)
        world.state.lives = 1
        p = world.player
        world.alien_bullets = [Bullet(p.x + 5, p.y - 10, owner="alien")]

        assert driver.tick() is False

        assert driver.phase is GamePhase.GAME_OVER
        assert renderer.frames == [(GamePhase.GAME_OVER, True)]
        assert driver.tick() is False
        assert len(renderer.frames) == 1

    def test_invasion_ends_the_game(self, world):
        driver, _ = _driver(world)
        world.aliens[-1].y = world.player.y

        driver.tick()

        assert driver.phase is GamePhase.GAME_OVER
        assert world.state.lives == 3

    def test_restart_resumes(self, world):
        hud = HudPresenter(world.state)
        driver, renderer = _driver(world, hud)
        world.aliens[-1].y = world.player.y
        driver.tick()

        driver.restart()

        assert driver.scheduled
        assert driver.phase is GamePhase.PLAYING
        assert not hud.overlay_visible
        assert driver.tick() is True
        assert renderer.frames[-1] == (GamePhase.PLAYING, False)


class TestEvents:
    def test_events_are_published_in_order(self, world):
        seen = []
        driver, _ = _driver(world)
        driver.subscribe(seen.append)
        world.aliens[-1].y = world.player.y
        target = world.aliens[0]
        world.bullets = [Bullet(target.x + 10, target.y + 10)]

        driver.tick()

        assert seen == [ScoreChanged(30), GameOver(30)]

    def test_level_up_through_collisions(self):
        world_settings = GameSettings(alien_shoot_chance=0.0)
        driver = FrameDriver(settings=world_settings)
        world = driver.world
        seen = []
        driver.subscribe(seen.append)
        for a in world.aliens[1:]:
            a.alive = False
        target = world.aliens[0]
        stray = Bullet(700, 300)
        world.bullets = [Bullet(target.x + 10, target.y + 20), stray]

        driver.tick()

        assert world.state.level == 2
        assert world.state.score == 30
        assert len(world.aliens) == 55 and all(a.alive for a in world.aliens)
        assert world.bullets == [stray]
        assert seen == [ScoreChanged(30), LevelChanged(2)]

    def test_restart_intent_mid_game(self, world):
        seen = []
        driver, _ = _driver(world)
        driver.subscribe(seen.append)
        world.state.score = 90

        driver.tick(Intent(restart=True))

        assert world.state.score == 0
        assert Restarted() in seen
