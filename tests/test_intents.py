"""
Tests for input intents.
"""

import pygame

from swarm_invaders.intents import Action, Intent, IntentTracker, action_from_event


class TestActionFromEvent:
    def test_key_bindings(self):
        down = pygame.event.Event(pygame.KEYDOWN, key=pygame.K_LEFT)
        up = pygame.event.Event(pygame.KEYUP, key=pygame.K_RIGHT)
        fire = pygame.event.Event(pygame.KEYDOWN, key=pygame.K_SPACE)
        pause = pygame.event.Event(pygame.KEYDOWN, key=pygame.K_p)

        assert action_from_event(down) is Action.MOVE_LEFT_START
        assert action_from_event(up) is Action.MOVE_RIGHT_STOP
        assert action_from_event(fire) is Action.FIRE
        assert action_from_event(pause) is Action.TOGGLE_PAUSE

    def test_quit_and_unbound(self):
        assert action_from_event(pygame.event.Event(pygame.QUIT)) is Action.QUIT
        assert (
            action_from_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_z))
            is None
        )
        assert (
            action_from_event(pygame.event.Event(pygame.KEYUP, key=pygame.K_SPACE))
            is None
        )


class TestIntentTracker:
    def test_idle(self):
        assert IntentTracker().consume() == Intent()

    def test_last_event_wins(self):
        tracker = IntentTracker()

        tracker.feed(Action.MOVE_LEFT_START)
        tracker.feed(Action.MOVE_RIGHT_START)
        assert tracker.consume().move == 1

        tracker.feed(Action.MOVE_LEFT_STOP)
        assert tracker.consume().move == 0

    def test_movement_is_held_across_frames(self):
        tracker = IntentTracker()
        tracker.feed(Action.MOVE_LEFT_START)

        assert tracker.consume().move == -1
        assert tracker.consume().move == -1

    def test_edge_triggers_reset_after_consume(self):
        tracker = IntentTracker()
        tracker.feed(Action.FIRE)
        tracker.feed(Action.RESTART)

        first = tracker.consume()
        second = tracker.consume()

        assert first.fire and first.restart
        assert not second.fire and not second.restart

    def test_double_pause_press_cancels_out(self):
        tracker = IntentTracker()
        tracker.feed(Action.TOGGLE_PAUSE)
        tracker.feed(Action.TOGGLE_PAUSE)

        assert not tracker.consume().toggle_pause

    def test_feed_event(self):
        tracker = IntentTracker()
        tracker.feed_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_RIGHT))
        tracker.feed_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_ESCAPE))

        intent = tracker.consume()

        assert intent.move == 1
        assert intent.quit
