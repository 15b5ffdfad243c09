"""
Swarm Invaders utils
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

import pygame

LOGGER_NAME = "swarm-invaders"

LOGGER_FORMAT = (
    "%(asctime)s [%(levelname)-8.8s] [%(name)s] "
    "%(module)s.%(funcName)s: %(message)s"
)


class ConsoleColorFormatter(logging.Formatter):
    """
    Console formatter with ANSI colors by log level.
    """

    COLORS = {
        logging.DEBUG: "\033[96m",  # Cyan
        logging.INFO: "\033[92m",  # Green
        logging.WARNING: "\033[93m",  # Yellow
        logging.ERROR: "\033[91m",  # Red
        logging.CRITICAL: "\033[95m",  # Magenta
        "RESET": "\033[0m",
    }

    def format(self, record: logging.LogRecord) -> str:
        color = self.COLORS.get(record.levelno, self.COLORS["RESET"])
        msg = super().format(record)
        return f"{color}{msg}{self.COLORS['RESET']}"


logger = logging.getLogger(LOGGER_NAME)
logger.addHandler(logging.NullHandler())


def setup_logging(level: int = logging.INFO) -> logging.Logger:
    """
    Attach a colored console handler to the package logger.

    Calling it again only updates the level.

    :param level: Logging level for the package logger.
    :type level: int

    :return: The package logger.
    :rtype: logging.Logger
    """
    logger.setLevel(level)
    if not any(
        isinstance(h.formatter, ConsoleColorFormatter) for h in logger.handlers
    ):
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(ConsoleColorFormatter(LOGGER_FORMAT))
        logger.addHandler(handler)
    logger.propagate = False
    return logger


def find_assets_root() -> Path:
    """Return the path to the `assets` directory.

    Works in:
    - dev: repo/assets (when running from source tree)
    - pip install: site-packages/assets
    - PyInstaller onefile: _MEIPASS/assets (if bundled with --add-data)

    :raises FileNotFoundError: If the assets directory cannot be found.
    """
    # pylint: disable=protected-access
    if hasattr(sys, "_MEIPASS"):
        candidate = Path(sys._MEIPASS) / "assets"
        if candidate.is_dir():
            return candidate
    # pylint: enable=protected-access

    here = Path(__file__).resolve()
    for parent in here.parents:
        candidate = parent / "assets"
        if candidate.is_dir():
            return candidate

    raise FileNotFoundError("Could not locate 'assets' directory.")


def load_image(
    filename: str, transparent: bool = False
) -> Optional[pygame.Surface]:
    """
    Load an image from the assets directory.

    Returns None when the assets directory or the file is missing, so
    callers can draw a placeholder instead.

    :param filename: Path relative to the assets directory.
    :type filename: str

    :param transparent: Use the top-left pixel as color key.
    :type transparent: bool

    :return: The loaded surface or None.
    :rtype: pygame.Surface | None
    """
    try:
        path = find_assets_root() / filename
    except FileNotFoundError as e:
        logger.warning(f"Skipping image {filename}: {e}")
        return None

    if not path.is_file():
        logger.warning(f"Image {path} not found, using placeholder")
        return None

    try:
        image = pygame.image.load(str(path))
    except pygame.error as e:
        logger.warning(f"Failed to load image {path}: {e}")
        return None

    if pygame.display.get_surface() is not None:
        image = image.convert()
    if transparent:
        color = image.get_at((0, 0))
        image.set_colorkey(color, pygame.RLEACCEL)

    logger.debug(f"Loaded image {path}")
    return image


def set_screen(caption: str, width: int, height: int) -> pygame.Surface:
    """
    Set the screen

    :param caption: Caption of the screen
    :type caption: str

    :param width: Width of the screen
    :type width: int

    :param height: Height of the screen
    :type height: int

    :return: pygame.Surface
    """
    screen = pygame.display.set_mode((width, height))
    pygame.display.set_caption(caption)

    return screen
