"""Runtime configuration.

Settings are read from environment variables prefixed with ``PRINT_RESIZER_``
(or a local ``.env`` file). The resize tunables are frozen into a
``ResizeConfig`` which is handed to the guard and pipeline at construction.
"""

from functools import lru_cache
from typing import ClassVar, Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

MB = 1024 * 1024

IntermediateFormat = Literal["PNG", "TIFF"]


class ResizeConfig(BaseModel):
    """Immutable tuning constants for one resize pipeline."""

    max_upload_bytes: int = Field(50 * MB, gt=0, description="Upload size ceiling in bytes")
    safe_pixel_ceiling: int = Field(
        100_000_000,
        gt=0,
        description="Largest pixel count resampled in a single pass",
    )
    max_edge_px: int = Field(10_000, gt=0, description="Longest allowed output edge")
    jpeg_quality: int = Field(95, ge=90, le=95, description="JPEG output quality")
    default_width: int = Field(7200, gt=0, description="Output width when none is requested")
    default_height: int = Field(10800, gt=0, description="Output height when none is requested")
    default_dpi: int = Field(300, gt=0, description="Output DPI when none is requested")
    intermediate_format: IntermediateFormat = Field(
        "PNG",
        description="Lossless container for the progressive downscale buffer",
    )

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True)

    @property
    def max_upload_mb(self) -> float:
        return self.max_upload_bytes / MB


class Settings(BaseSettings):
    """Application configuration loaded from environment variables or .env file."""

    # Upload / pipeline
    max_upload_bytes: int = Field(50 * MB, gt=0)
    safe_pixel_ceiling: int = Field(100_000_000, gt=0)
    max_edge_px: int = Field(10_000, gt=0)
    jpeg_quality: int = Field(95, ge=90, le=95)
    default_width: int = Field(7200, gt=0)
    default_height: int = Field(10800, gt=0)
    default_dpi: int = Field(300, gt=0)
    intermediate_format: IntermediateFormat = "PNG"

    # Scheduling
    max_concurrent_resizes: int = Field(1, ge=1, description="Resize pipelines running at once")

    # HTTP
    host: str = "0.0.0.0"
    port: int = 3001
    cors_origins: list[str] = Field(default_factory=lambda: ["*"])
    log_level: str = "INFO"

    model_config: ClassVar[SettingsConfigDict] = SettingsConfigDict(
        env_prefix="PRINT_RESIZER_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    def resize_config(self) -> ResizeConfig:
        return ResizeConfig(
            max_upload_bytes=self.max_upload_bytes,
            safe_pixel_ceiling=self.safe_pixel_ceiling,
            max_edge_px=self.max_edge_px,
            jpeg_quality=self.jpeg_quality,
            default_width=self.default_width,
            default_height=self.default_height,
            default_dpi=self.default_dpi,
            intermediate_format=self.intermediate_format,
        )


@lru_cache()
def get_settings() -> Settings:
    """Return a cached Settings instance so it is only parsed once."""
    return Settings()
