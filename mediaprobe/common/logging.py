# mediaprobe/common/logging.py
from __future__ import annotations

import logging

DEFAULT_LOGGER_NAME = "mediaprobe"


def get_logger(name: str = DEFAULT_LOGGER_NAME, level: int | str | None = None) -> logging.Logger:
    """
    Return a package logger.
    If nothing upstream configured logging, we add a basicConfig once so that
    messages from a bare script still go somewhere readable.
    """
    logger = logging.getLogger(name)
    if not logging.getLogger().handlers and not logger.handlers:
        logging.basicConfig(level=logging.WARNING, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    if level is not None:
        logger.setLevel(level.upper() if isinstance(level, str) else level)
    return logger
