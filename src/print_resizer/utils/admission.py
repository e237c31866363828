"""Admission control for CPU and memory heavy work."""

import asyncio
from collections.abc import Callable
from typing import ParamSpec, TypeVar

from loguru import logger
from starlette.concurrency import run_in_threadpool

P = ParamSpec("P")
R = TypeVar("R")


class ResizeLimiter:
    """Caps how many blocking resize runs execute at once.

    Callers beyond the limit wait on the semaphore; the work itself runs in
    the thread pool so the event loop keeps serving health checks.

    Example:
        limiter = ResizeLimiter(max_concurrent=1)
        processed = await limiter.run(service.resize, data, "image/png")
    """

    def __init__(self, max_concurrent: int = 1):
        if max_concurrent < 1:
            raise ValueError("max_concurrent must be at least 1")
        self.limit: int = max_concurrent
        self.active: int = 0
        self.waiting: int = 0
        self._semaphore: asyncio.Semaphore = asyncio.Semaphore(max_concurrent)

    async def run(self, func: Callable[P, R], *args: P.args, **kwargs: P.kwargs) -> R:
        self.waiting += 1
        if self._semaphore.locked():
            logger.debug(f"Resize queued ({self.waiting} waiting, {self.active} active)")
        try:
            await self._semaphore.acquire()
        finally:
            self.waiting -= 1

        self.active += 1
        try:
            return await run_in_threadpool(func, *args, **kwargs)
        finally:
            self.active -= 1
            self._semaphore.release()

    def snapshot(self) -> dict[str, int]:
        return {"active": self.active, "waiting": self.waiting, "limit": self.limit}
