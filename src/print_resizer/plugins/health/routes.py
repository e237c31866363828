"""Health route factory."""

import time
from datetime import datetime, timezone

from fastapi import APIRouter

from ...common.config import Settings
from ...utils.admission import ResizeLimiter
from ..print_resize.service import ResizeService
from .algo.resource_usage import memory_usage
from .schema import HealthStatus, MemoryUsage, ResizeSlots


def create_router(
    service: ResizeService,
    limiter: ResizeLimiter,
    settings: Settings,
) -> APIRouter:
    """Create the liveness router.

    The same report is served on ``/health`` (process supervisors) and
    ``/api/health`` (the browser client's admission check).
    """
    router = APIRouter()
    started = time.monotonic()

    @router.get("/health", response_model=HealthStatus)
    @router.get("/api/health", response_model=HealthStatus)
    async def health() -> HealthStatus:
        return HealthStatus(
            timestamp=datetime.now(timezone.utc),
            uptime=round(time.monotonic() - started, 3),
            memory=MemoryUsage.model_validate(memory_usage()),
            resize=ResizeSlots.model_validate(limiter.snapshot()),
        )

    _ = health
    return router
