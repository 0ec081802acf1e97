"""Package-wide logger."""
import logging
import sys
from typing import Union

LOGGER_NAME = "basic_calculator"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

logger = logging.getLogger(LOGGER_NAME)


def _resolve_level(level: Union[str, int, None]) -> int:
    """Resolve a user-provided log level to a logging constant."""
    if isinstance(level, int):
        return level

    level_name = str(level or "WARNING").upper()
    return getattr(logging, level_name, logging.WARNING)


def configure_logging(level: Union[str, int, None] = "WARNING") -> logging.Logger:
    """
    Attach a stderr handler to the package logger and set its level.

    Calling it again only updates the level; no duplicate handler is added.

    :param level: Level name ("DEBUG", "info", ...) or logging constant

    :return: The configured package logger
    :rtype: logging.Logger
    """
    resolved = _resolve_level(level)

    if not any(getattr(h, "_basic_calculator", False) for h in logger.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._basic_calculator = True
        logger.addHandler(handler)

    logger.setLevel(resolved)
    return logger
