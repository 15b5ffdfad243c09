"""
Input intents.

Raw pygame events are mapped to actions, actions are folded into a per-frame
`Intent`. The simulation only ever sees intents.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional

import pygame


class Action(Enum):
    MOVE_LEFT_START = auto()
    MOVE_LEFT_STOP = auto()
    MOVE_RIGHT_START = auto()
    MOVE_RIGHT_STOP = auto()
    FIRE = auto()
    TOGGLE_PAUSE = auto()
    RESTART = auto()
    QUIT = auto()


KEY_DOWN_BINDINGS: dict[int, Action] = {
    pygame.K_LEFT: Action.MOVE_LEFT_START,
    pygame.K_RIGHT: Action.MOVE_RIGHT_START,
    pygame.K_SPACE: Action.FIRE,
    pygame.K_p: Action.TOGGLE_PAUSE,
    pygame.K_r: Action.RESTART,
    pygame.K_ESCAPE: Action.QUIT,
}

KEY_UP_BINDINGS: dict[int, Action] = {
    pygame.K_LEFT: Action.MOVE_LEFT_STOP,
    pygame.K_RIGHT: Action.MOVE_RIGHT_STOP,
}


def action_from_event(event: pygame.event.Event) -> Optional[Action]:
    """
    Map a pygame event to an action.

    :param event: Event from `pygame.event.get()`.
    :type event: pygame.event.Event

    :return: The bound action, or None for unbound events.
    :rtype: Action | None
    """
    if event.type == pygame.QUIT:
        return Action.QUIT
    if event.type == pygame.KEYDOWN:
        return KEY_DOWN_BINDINGS.get(event.key)
    if event.type == pygame.KEYUP:
        return KEY_UP_BINDINGS.get(event.key)
    return None


@dataclass
class Intent:
    """
    What the player wants this frame.
    """

    move: int = 0  # -1 left, 0 idle, 1 right
    fire: bool = False
    toggle_pause: bool = False
    restart: bool = False
    quit: bool = False


class IntentTracker:
    """
    Folds actions into intents.

    Movement is level-triggered and the last event wins: pressing right while
    left is held moves right, releasing either arrow stops the ship. Fire,
    pause, restart and quit are edge-triggered and cleared by `consume`.
    """

    def __init__(self) -> None:
        self._move = 0
        self._fire = False
        self._toggle_pause = False
        self._restart = False
        self._quit = False

    def feed(self, action: Action) -> None:
        if action is Action.MOVE_LEFT_START:
            self._move = -1
        elif action is Action.MOVE_RIGHT_START:
            self._move = 1
        elif action in (Action.MOVE_LEFT_STOP, Action.MOVE_RIGHT_STOP):
            self._move = 0
        elif action is Action.FIRE:
            self._fire = True
        elif action is Action.TOGGLE_PAUSE:
            self._toggle_pause = not self._toggle_pause
        elif action is Action.RESTART:
            self._restart = True
        elif action is Action.QUIT:
            self._quit = True

    def feed_event(self, event: pygame.event.Event) -> None:
        action = action_from_event(event)
        if action is not None:
            self.feed(action)

    def consume(self) -> Intent:
        """
        Return this frame's intent and reset the edge-triggered flags.

        :return: Current intent.
        :rtype: Intent
        """
        intent = Intent(
            move=self._move,
            fire=self._fire,
            toggle_pause=self._toggle_pause,
            restart=self._restart,
            quit=self._quit,
        )
        self._fire = False
        self._toggle_pause = False
        self._restart = False
        return intent
