"""Loguru sink configuration."""

import sys

from loguru import logger

LOG_FORMAT = (
    "<green>{time:YYYY-MM-DDTHH:mm:ss.SSSZ}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>"
)


def configure_logging(level: str = "INFO") -> None:
    """Replace loguru's default sink with one stderr sink at ``level``."""
    logger.remove()
    _ = logger.add(sys.stderr, level=level.upper(), format=LOG_FORMAT, backtrace=False)
