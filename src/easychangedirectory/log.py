"""Logging setup for easychangedirectory.

The TUI owns the terminal, so log records only ever go to a file, and only
when `log = true` is configured.
"""

import logging
from pathlib import Path

from .config import Config

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(config: Config) -> Path | None:
    """Attach a file handler to the package logger if logging is enabled.

    Handlers from an earlier call are replaced, so records are never written
    twice.

    Returns:
        The log file path, or None when logging is disabled.
    """
    logger = logging.getLogger("easychangedirectory")
    logger.propagate = False
    for old in list(logger.handlers):
        logger.removeHandler(old)
        old.close()

    if not config.log:
        logger.addHandler(logging.NullHandler())
        return None

    log_path = config.get_log_path()
    log_path.parent.mkdir(parents=True, exist_ok=True)

    handler = logging.FileHandler(log_path, encoding="utf-8")
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
    return log_path
