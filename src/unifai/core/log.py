"""Logging setup for applications that embed the library."""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from unifai.config.schema import LoggingConfig

LOGGER_NAME = "unifai"
_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(config: LoggingConfig, *, verbose: bool = False) -> logging.Logger:
    """Attach handlers to the ``unifai`` logger according to *config*.

    Library code never calls this; it is meant for the CLI and for
    applications that want the library's log output. Calling it again
    replaces the handlers installed by the previous call.

    Args:
        config: Level and optional log file.
        verbose: Force ``DEBUG`` regardless of the configured level.

    Returns:
        The configured ``unifai`` logger.
    """
    logger = logging.getLogger(LOGGER_NAME)
    level = logging.DEBUG if verbose else logging.getLevelName(config.level.upper())
    if not isinstance(level, int):
        level = logging.WARNING

    for handler in list(logger.handlers):
        if getattr(handler, "_unifai_managed", False):
            logger.removeHandler(handler)
            handler.close()

    formatter = logging.Formatter(_FORMAT)
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if config.file:
        handlers.append(logging.FileHandler(config.file, encoding="utf-8"))

    for handler in handlers:
        handler.setFormatter(formatter)
        handler._unifai_managed = True  # type: ignore[attr-defined]
        logger.addHandler(handler)

    logger.setLevel(level)
    return logger


# Silence "no handler" warnings for applications that do not configure logging
logging.getLogger(LOGGER_NAME).addHandler(logging.NullHandler())
