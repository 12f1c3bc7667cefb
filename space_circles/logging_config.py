"""Logging configuration for Space Circles."""

import logging
from typing import Optional

LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"
LOG_LEVEL = "INFO"


def setup_logging(level: Optional[str] = None, name: str = "space_circles") -> logging.Logger:
    """
    Attach a console handler to the package logger.

    Calling it again only changes the level; it never stacks handlers.
    """
    if level is None:
        level = LOG_LEVEL

    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    if not any(getattr(h, "_space_circles", False) for h in logger.handlers):
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        console_handler._space_circles = True  # type: ignore[attr-defined]
        logger.addHandler(console_handler)

    return logger
