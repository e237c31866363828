"""Test configuration and fixtures for print_resizer.

This module provides:
- Synthetic image factories (encoded bytes in any mode/format)
- Small-budget configuration so the oversized path runs on tiny images
- Service, pipeline and API client fixtures
"""

from collections.abc import Callable
from io import BytesIO

import pytest
from fastapi.testclient import TestClient
from PIL import Image, ImageDraw

from print_resizer.app import create_app
from print_resizer.common.config import ResizeConfig, Settings
from print_resizer.plugins.print_resize.service import ResizeService
from print_resizer.plugins.print_resize.task import ResizePipeline

# Pixel budget used by the test configuration: 100x100.
TEST_PIXEL_CEILING = 10_000

ImageFactory = Callable[..., bytes]


# ============================================================================
# Image Fixtures
# ============================================================================


def render_image(
    width: int,
    height: int,
    *,
    mode: str = "RGB",
    format: str = "PNG",
    color: object = (73, 109, 137),
    **save_kwargs: object,
) -> bytes:
    """Encode a synthetic image with a simple pattern so resampling has edges."""
    img = Image.new(mode, (width, height), color=color)
    if mode in ("RGB", "RGBA") and width > 4 and height > 4:
        draw = ImageDraw.Draw(img)
        fill = (255, 255, 255) if mode == "RGB" else (255, 255, 255, 255)
        draw.line([(0, 0), (width - 1, height - 1)], fill=fill, width=1)
        draw.rectangle([width // 4, height // 4, width // 2, height // 2], outline=fill)

    out = BytesIO()
    img.save(out, format=format, **save_kwargs)
    return out.getvalue()


@pytest.fixture
def make_image() -> ImageFactory:
    """Factory fixture returning encoded image bytes."""
    return render_image


@pytest.fixture
def png_bytes() -> bytes:
    return render_image(80, 60)


@pytest.fixture
def jpeg_bytes() -> bytes:
    return render_image(80, 60, format="JPEG", quality=90)


@pytest.fixture
def oversized_png_bytes() -> bytes:
    """120x120 = 14,400 px, above TEST_PIXEL_CEILING."""
    return render_image(120, 120)


# ============================================================================
# Configuration / Service Fixtures
# ============================================================================


@pytest.fixture
def resize_config() -> ResizeConfig:
    return ResizeConfig(
        max_upload_bytes=1024 * 1024,
        safe_pixel_ceiling=TEST_PIXEL_CEILING,
        max_edge_px=2000,
        default_width=72,
        default_height=108,
        default_dpi=300,
    )


@pytest.fixture
def pipeline(resize_config: ResizeConfig) -> ResizePipeline:
    return ResizePipeline(resize_config)


@pytest.fixture
def service(resize_config: ResizeConfig) -> ResizeService:
    return ResizeService(resize_config)


@pytest.fixture
def test_settings() -> Settings:
    return Settings(
        max_upload_bytes=1024 * 1024,
        safe_pixel_ceiling=TEST_PIXEL_CEILING,
        max_edge_px=2000,
        default_width=72,
        default_height=108,
        default_dpi=300,
        max_concurrent_resizes=1,
        log_level="DEBUG",
    )


@pytest.fixture
def api_client(test_settings: Settings):
    """Provide FastAPI test client for the application."""
    app = create_app(test_settings)
    with TestClient(app) as client:
        yield client
