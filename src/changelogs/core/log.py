"""Logging setup for the changelogs package."""

from __future__ import annotations

import logging
import sys

from changelogs.core.config import ChangelogsConfig

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_ROOT_LOGGER = "changelogs"


def configure_logging(config: ChangelogsConfig) -> logging.Logger:
    """
    Attach a single handler to the package logger.

    Logs go to stderr unless ``logging.file`` is set. Calling this twice
    replaces the previous handler rather than stacking a second one.
    """
    logger = logging.getLogger(_ROOT_LOGGER)
    for old in list(logger.handlers):
        logger.removeHandler(old)
        old.close()

    handler: logging.Handler
    if config.log_path is not None:
        config.log_path.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(config.log_path, encoding="utf-8")
    else:
        handler = logging.StreamHandler(sys.stderr)

    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(config.logging.level)
    logger.propagate = False
    return logger
