"""Logger configuration for foldkit.

The library only emits records; handlers are attached by the application
through setup_logger.
"""

from __future__ import annotations
import logging
import sys

from . import config
from .errors import InvalidArgument

__all__ = ["setup_logger"]

logging.getLogger("foldkit").addHandler(logging.NullHandler())


def setup_logger(
    name: str = "foldkit",
    level: str | None = None,
    format_string: str | None = None,
) -> logging.Logger:
    """
    Configure and return a logger writing to stderr.

    Args:
        name: Logger name, "foldkit" or one of its children.
        level: Log level name. Defaults to FOLDKIT_LOG_LEVEL, then WARNING.
        format_string: Custom format string.
    """
    level = level or config.log_level()
    format_string = format_string or (
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    logger = logging.getLogger(name)

    # Configure once; NullHandler does not count.
    if not any(not isinstance(h, logging.NullHandler) for h in logger.handlers):
        handler = logging.StreamHandler(sys.stderr)
        formatter = logging.Formatter(fmt=format_string, datefmt="%Y-%m-%d %H:%M:%S")
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    numeric = logging.getLevelName(level.upper())
    if not isinstance(numeric, int):
        raise InvalidArgument(f"Unknown log level: {level!r}")
    logger.setLevel(numeric)

    return logger
