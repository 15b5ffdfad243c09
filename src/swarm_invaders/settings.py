"""
Game settings.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from typing import Any, Optional

from swarm_invaders.constants import FPS, WINDOW_SIZE


class SettingsError(ValueError):
    """Raised when a settings combination cannot produce a playable game."""


# section name -> field names stored in that section
_SECTIONS: dict[str, tuple[str, ...]] = {
    "window": ("width", "height", "fps"),
    "player": ("player_width", "player_height", "player_speed"),
    "bullets": (
        "bullet_width",
        "bullet_height",
        "bullet_speed",
        "alien_bullet_slowdown",
    ),
    "aliens": (
        "alien_rows",
        "alien_cols",
        "alien_width",
        "alien_height",
        "alien_padding",
        "alien_offset_x",
        "alien_offset_y",
        "alien_speed",
        "alien_speed_increment",
        "alien_drop_distance",
        "alien_shoot_chance",
    ),
    "game": ("lives", "seed"),
}


# Justification: a flat settings object is easier to pass around.
# pylint: disable=too-many-instance-attributes
@dataclass(frozen=True)
class GameSettings:
    """
    Every tunable of the game. Speeds and distances are in pixels per frame.
    """

    width: int = WINDOW_SIZE[0]
    height: int = WINDOW_SIZE[1]
    fps: int = FPS

    player_width: int = 50
    player_height: int = 30
    player_speed: float = 3.0

    bullet_width: int = 4
    bullet_height: int = 15
    bullet_speed: float = 5.0
    alien_bullet_slowdown: float = 2.0

    alien_rows: int = 5
    alien_cols: int = 11
    alien_width: int = 40
    alien_height: int = 30
    alien_padding: int = 10
    alien_offset_x: int = 50
    alien_offset_y: int = 50
    alien_speed: float = 0.5
    alien_speed_increment: float = 0.3
    alien_drop_distance: float = 20.0
    alien_shoot_chance: float = 0.0003

    lives: int = 3
    seed: Optional[int] = None

    @property
    def total_aliens(self) -> int:
        """Number of aliens in a full formation."""
        return self.alien_rows * self.alien_cols

    @property
    def alien_bullet_speed(self) -> float:
        """Alien bullets fall slower than player bullets rise."""
        return self.bullet_speed - self.alien_bullet_slowdown

    def validate(self) -> GameSettings:
        """
        Check the settings describe a playable game.

        :raises SettingsError: If a value is out of range.

        :return: self, to allow chaining.
        :rtype: GameSettings
        """
        if self.width <= 0 or self.height <= 0:
            raise SettingsError(
                f"Playfield must be positive, got {self.width}x{self.height}"
            )
        if self.fps <= 0:
            raise SettingsError(f"fps must be positive, got {self.fps}")
        if self.player_width > self.width:
            raise SettingsError(
                f"Player width {self.player_width} exceeds playfield {self.width}"
            )
        if self.alien_rows < 1 or self.alien_cols < 1:
            raise SettingsError(
                f"Alien grid must be at least 1x1, got "
                f"{self.alien_rows}x{self.alien_cols}"
            )
        if not 0.0 <= self.alien_shoot_chance <= 1.0:
            raise SettingsError(
                f"alien_shoot_chance must be within [0, 1], "
                f"got {self.alien_shoot_chance}"
            )
        if self.alien_bullet_speed <= 0:
            raise SettingsError("Alien bullets must move downwards")
        if self.lives < 1:
            raise SettingsError(f"lives must be at least 1, got {self.lives}")
        return self

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> GameSettings:
        """
        Build settings from a nested dictionary.

        Unknown sections or keys raise, missing ones keep their default.

        :param data: Dict shaped like the output of `to_dict`.
        :type data: dict[str, Any]

        :raises SettingsError: On unknown keys or invalid values.

        :return: Validated settings.
        :rtype: GameSettings
        """
        known = {f.name for f in fields(cls)}
        values: dict[str, Any] = {}
        for section, entries in data.items():
            if section not in _SECTIONS:
                raise SettingsError(f"Unknown settings section '{section}'")
            for key, value in (entries or {}).items():
                if key not in known or key not in _SECTIONS[section]:
                    raise SettingsError(
                        f"Unknown setting '{key}' in section '{section}'"
                    )
                values[key] = value
        return cls(**values).validate()

    def to_dict(self) -> dict[str, dict[str, Any]]:
        """Return the settings as a nested dictionary."""
        flat = asdict(self)
        return {
            section: {key: flat[key] for key in keys}
            for section, keys in _SECTIONS.items()
        }
