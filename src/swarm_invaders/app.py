"""
Swarm Invaders game
"""

from __future__ import annotations

import argparse
import logging
from typing import Optional, Sequence

import pygame

from swarm_invaders.constants import TITLE
from swarm_invaders.driver import FrameDriver
from swarm_invaders.hud import HudPresenter
from swarm_invaders.intents import IntentTracker
from swarm_invaders.render import PygameRenderer
from swarm_invaders.settings import GameSettings, SettingsError
from swarm_invaders.simulation import new_world
from swarm_invaders.utils import logger, set_screen, setup_logging


class SwarmInvaders:
    """
    Pygame host: owns the window and the clock, turns key presses into
    intents and calls the frame driver once per frame.
    """

    def __init__(self, settings: Optional[GameSettings] = None):
        """
        :param settings: Game settings, defaults to `GameSettings()`.
        :type settings: GameSettings | None
        """
        self.settings = (settings or GameSettings()).validate()
        self._carry_on = True

        logger.debug(f"Initializing {TITLE}")
        pygame.init()
        self._clock = pygame.time.Clock()
        self._screen = set_screen(TITLE, self.settings.width, self.settings.height)

        world = new_world(self.settings)
        self.hud = HudPresenter(world.state)
        self.tracker = IntentTracker()
        self.driver = FrameDriver(
            world=world,
            renderer=PygameRenderer(self._screen, hud=self.hud),
        )
        self.driver.subscribe(self.hud.on_event)

    def handle_events(self) -> None:
        """
        Feed pending pygame events to the intent tracker.
        """
        for event in pygame.event.get():
            self.tracker.feed_event(event)

    def handle_game_logic(self) -> None:
        """
        Run one frame, or wait for a restart once the game is over.
        """
        intent = self.tracker.consume()
        if intent.quit:
            logger.debug("Quitting the game")
            self._carry_on = False
            return

        if self.driver.scheduled:
            self.driver.tick(intent)
        elif intent.restart:
            self.driver.restart()

    def run(self) -> None:
        """
        Run the game
        """
        logger.info(f"Starting {TITLE}...")
        logger.debug(self.settings.to_dict())

        while self._carry_on:
            self._clock.tick(self.settings.fps)
            self.handle_events()
            self.handle_game_logic()

        pygame.quit()


def build_parser() -> argparse.ArgumentParser:
    defaults = GameSettings()
    parser = argparse.ArgumentParser(prog="swarm-invaders", description=TITLE)
    parser.add_argument("--width", type=int, default=defaults.width)
    parser.add_argument("--height", type=int, default=defaults.height)
    parser.add_argument("--fps", type=int, default=defaults.fps)
    parser.add_argument(
        "--rows", type=int, default=defaults.alien_rows, help="alien grid rows"
    )
    parser.add_argument(
        "--cols", type=int, default=defaults.alien_cols, help="alien grid columns"
    )
    parser.add_argument("--lives", type=int, default=defaults.lives)
    parser.add_argument(
        "--seed", type=int, default=None, help="seed for alien fire"
    )
    parser.add_argument("--debug", action="store_true", help="verbose logging")
    return parser


def settings_from_args(args: argparse.Namespace) -> GameSettings:
    """
    Translate parsed CLI arguments into validated settings.

    :raises SettingsError: If the combination is not playable.
    """
    return GameSettings.from_dict(
        {
            "window": {"width": args.width, "height": args.height, "fps": args.fps},
            "aliens": {"alien_rows": args.rows, "alien_cols": args.cols},
            "game": {"lives": args.lives, "seed": args.seed},
        }
    )


def main(argv: Optional[Sequence[str]] = None) -> None:
    """
    Main entry point for Swarm Invaders.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(logging.DEBUG if args.debug else logging.INFO)

    try:
        settings = settings_from_args(args)
    except SettingsError as e:
        parser.error(str(e))

    SwarmInvaders(settings).run()


if __name__ == "__main__":
    main()
