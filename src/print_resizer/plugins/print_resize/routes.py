"""Print resize route factory."""

from typing import Annotated

from fastapi import APIRouter, File, Query, UploadFile
from fastapi.responses import Response

from ...common.config import Settings
from ...common.errors import MissingUpload, PayloadTooLarge
from ...common.schemas import PRINT_DIMENSIONS, PrintDimension
from ...utils.admission import ResizeLimiter
from .service import ResizeService


def create_router(
    service: ResizeService,
    limiter: ResizeLimiter,
    settings: Settings,
) -> APIRouter:
    """Create router with injected dependencies.

    Args:
        service: ResizeService running guard and pipeline
        limiter: ResizeLimiter capping concurrent pipelines
        settings: Application settings

    Returns:
        Configured APIRouter with the upscale and presets endpoints
    """
    router = APIRouter(prefix="/api")

    @router.post(
        "/upscale",
        response_class=Response,
        responses={200: {"content": {"image/jpeg": {}}}},
    )
    async def upscale(
        image: Annotated[UploadFile | None, File(description="Image to resize")] = None,
        width: Annotated[int | None, Query(description="Output width in pixels")] = None,
        height: Annotated[int | None, Query(description="Output height in pixels")] = None,
        dpi: Annotated[int | None, Query(description="Output DPI tag")] = None,
        preset: Annotated[str | None, Query(description="Print preset id, e.g. 24x36")] = None,
    ) -> Response:
        """Resize an uploaded image to a print-resolution JPEG.

        Query values default to 7200 x 10800 @ 300 DPI (24" x 36"). A
        ``preset`` supplies width/height/dpi; explicit values win.

        Returns:
            JPEG body with X-Image-Width / X-Image-Height / X-Image-DPI headers
        """
        if image is None:
            raise MissingUpload()

        limit = service.config.max_upload_bytes
        try:
            service.guard.check_declared(image.content_type, image.size)
            # One byte past the ceiling is enough to tell the upload is too big.
            buffer = await image.read(limit + 1)
        finally:
            await image.close()
        if len(buffer) > limit:
            raise PayloadTooLarge(limit, len(buffer))

        processed = await limiter.run(
            service.resize,
            buffer,
            image.content_type,
            image.size,
            width,
            height,
            dpi,
            preset,
        )

        return Response(
            content=processed.buffer,
            media_type=processed.content_type,
            headers=processed.headers(),
        )

    @router.get("/presets", response_model=list[PrintDimension])
    async def presets() -> list[PrintDimension]:
        """List the built-in print sizes."""
        return list(PRINT_DIMENSIONS)

    # Mark functions as used (accessed via FastAPI decorator)
    _ = upscale
    _ = presets

    return router
