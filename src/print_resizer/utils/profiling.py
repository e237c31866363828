"""Timing helpers for the resize steps."""

import time
from collections.abc import Callable
from functools import wraps
from typing import ParamSpec, TypeVar

from loguru import logger

P = ParamSpec("P")
R = TypeVar("R")


def timed(func: Callable[P, R]) -> Callable[P, R]:
    """Decorator to measure and log execution time of a pipeline step.

    Logs the function name and execution time at DEBUG level, also when the
    step raises.

    Usage:
        @timed
        def cover_fit(image, size):
            # ... processing ...
            return result
    """

    @wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
        start_time = time.perf_counter()
        try:
            return func(*args, **kwargs)
        finally:
            elapsed_time = time.perf_counter() - start_time
            logger.debug(f"[PROFILE] {func.__qualname__} took {elapsed_time:.3f}s")

    return wrapper
