"""Health report schema."""

from datetime import datetime

from pydantic import BaseModel, Field


class MemoryUsage(BaseModel):
    rss_bytes: int | None = Field(None, description="Current resident set size")
    peak_rss_bytes: int = Field(description="Peak resident set size since start")
    image_blocks: dict[str, int] = Field(
        default_factory=dict,
        description="Pillow image memory arena counters",
    )


class ResizeSlots(BaseModel):
    active: int
    waiting: int
    limit: int


class HealthStatus(BaseModel):
    """Liveness plus resource usage, polled by the client before uploading."""

    status: str = "ok"
    timestamp: datetime
    uptime: float = Field(description="Seconds since the application started")
    memory: MemoryUsage
    resize: ResizeSlots
