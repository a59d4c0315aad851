"""Logging for the media sentiment service.

Module loggers are children of one service logger; ``setup_logger`` gives
that parent its handler and level, so LOG_LEVEL applies to all of them.
"""

import logging
import sys

ROOT_LOGGER = "media_sentiment"


def get_logger(name: str) -> logging.Logger:
    """Child of the service logger; inherits its level and handler."""
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")


def setup_logger(level: str = "INFO") -> logging.Logger:
    """Attach the stderr handler to the service logger and set its level."""
    logger = logging.getLogger(ROOT_LOGGER)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(
            "%(asctime)s | %(name)-28s | %(levelname)-7s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        ))
        logger.addHandler(handler)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    return logger
