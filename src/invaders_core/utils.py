"""
Space Invaders utils
"""

from __future__ import annotations

import logging

from mini_arcade_core.utils import logger
from mini_arcade_core.utils.logging import configure_logging as configure_root_logging


def configure_logging(debug: bool = False) -> None:
    """
    Configure the console handlers and the game's log level.

    :param debug: Log at DEBUG level instead of INFO
    :type debug: bool
    """
    level = logging.DEBUG if debug else logging.INFO
    configure_root_logging(level)
    logger.setLevel(level)
