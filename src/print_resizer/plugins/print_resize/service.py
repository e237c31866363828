"""ResizeService - guard, target resolution and pipeline behind one call."""

from loguru import logger

from ...common.config import ResizeConfig
from ...common.schemas import ProcessedImage, TargetSpec, get_print_dimension
from ...common.upload_guard import UploadGuard
from .schema import PrintResizeParams
from .task import ResizePipeline


class ResizeService:
    """Framework-agnostic entry point used by the HTTP layer.

    Example:
        service = ResizeService(ResizeConfig())
        processed = service.resize(data, "image/jpeg", len(data), 7200, 10800, 300)
    """

    def __init__(self, config: ResizeConfig):
        self.config: ResizeConfig = config
        self.guard: UploadGuard = UploadGuard(config)
        self.pipeline: ResizePipeline = ResizePipeline(config)

    def resolve_target(
        self,
        width: int | None = None,
        height: int | None = None,
        dpi: int | None = None,
        preset: str | None = None,
    ) -> TargetSpec:
        """Build the clamped TargetSpec for a request.

        Explicit ``width``/``height``/``dpi`` override the preset's values;
        missing values fall back to the preset, then to the configured
        defaults.

        Raises:
            InvalidDimensions: unknown preset or invalid values
        """
        if preset:
            dimension = get_print_dimension(preset)
            width = dimension.width_px if width is None else width
            height = dimension.height_px if height is None else height
            dpi = dimension.dpi if dpi is None else dpi

        target = TargetSpec.resolve(self.config, width=width, height=height, dpi=dpi)
        if width is not None and height is not None and (target.width, target.height) != (
            width,
            height,
        ):
            logger.info(
                f"Clamped requested {width}x{height} to {target.width}x{target.height} "
                + f"(max edge {self.config.max_edge_px})"
            )
        return target

    def resize(
        self,
        buffer: bytes,
        declared_mime_type: str | None,
        declared_size: int | None = None,
        target_width_px: int | None = None,
        target_height_px: int | None = None,
        dpi: int | None = None,
        preset: str | None = None,
    ) -> ProcessedImage:
        """Run one upload through guard and pipeline.

        Returns:
            ProcessedImage with the JPEG bytes and achieved dimensions

        Raises:
            ResizeError: any typed failure from the guard, target resolution
                or pipeline
        """
        upload = self.guard.accept(buffer, declared_mime_type, declared_size)
        target = self.resolve_target(target_width_px, target_height_px, dpi, preset)
        return self.pipeline.execute(PrintResizeParams(upload=upload, target=target))
