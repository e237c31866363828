"""Print resize task implementation."""

from collections.abc import Iterator
from contextlib import contextmanager

from loguru import logger
from typing_extensions import override

from ...common.compute_module import ComputeModule
from ...common.config import ResizeConfig
from ...common.errors import OutOfMemory, ProcessingFailed, ResizeError, UnsupportedFormat
from ...common.schemas import ProcessedImage
from ...utils.media_types import mime_for_pil_format
from .algo.cover_fit import cover_fit, flatten_to_rgb
from .algo.decode import configure_decoder, open_image, read_metadata, release_buffers
from .algo.downscale import classify, intermediate_size, progressive_downscale
from .algo.jpeg_encode import encode_jpeg
from .schema import PrintResizeParams

# Modes whose embedded ICC profile describes RGB data and can be carried
# over to the RGB JPEG unchanged.
RGB_PROFILE_MODES = ("RGB", "RGBA", "RGBX", "P", "PA")


@contextmanager
def pipeline_step(name: str) -> Iterator[None]:
    """Type any unclassified failure raised inside a resample/encode step."""
    try:
        yield
    except ResizeError:
        raise
    except MemoryError as exc:
        logger.error(f"Out of memory during {name}")
        raise OutOfMemory() from exc
    except Exception as exc:
        logger.error(f"{name} failed: {exc}")
        raise ProcessingFailed(f"{name} failed: {exc}") from exc


class ResizePipeline(ComputeModule[PrintResizeParams, ProcessedImage]):
    """Decode, classify, downscale if needed, cover-fit and encode one upload.

    Steps run strictly in order and every failure is terminal:

    1. read the header (UnsupportedFormat / InvalidDimensions)
    2. classify against ``safe_pixel_ceiling``
    3. oversized only: resample to the pixel budget, encode, re-decode
    4. flatten onto white and cover-fit to the exact target with Lanczos
    5. encode JPEG 4:4:4 with the requested DPI

    Example:
        pipeline = ResizePipeline(ResizeConfig())
        processed = pipeline.execute(PrintResizeParams(upload=upload, target=target))
    """

    def __init__(self, config: ResizeConfig):
        self.config: ResizeConfig = config
        configure_decoder()

    @property
    @override
    def task_type(self) -> str:
        return "print_resize"

    @override
    def teardown(self) -> None:
        release_buffers()

    @override
    def run(self, params: PrintResizeParams) -> ProcessedImage:
        target = params.target
        ceiling = self.config.safe_pixel_ceiling

        source = open_image(params.upload.buffer)
        intermediate: tuple[int, int] | None = None
        try:
            metadata = read_metadata(source)
            strategy = classify(metadata, ceiling)
            icc_profile = None
            if metadata.mode in RGB_PROFILE_MODES:
                icc_profile = source.info.get("icc_profile")

            detected = mime_for_pil_format(metadata.format)
            if detected != params.upload.mime_type.strip().lower():
                logger.info(
                    f"Upload declared as {params.upload.mime_type} decodes as {detected}"
                )

            logger.info(
                f"Resizing {metadata.format} {metadata.width}x{metadata.height} "
                + f"({metadata.pixel_count} px, {strategy}) "
                + f"-> {target.width}x{target.height} @ {target.dpi} DPI"
            )

            if strategy == "oversized":
                intermediate = intermediate_size(metadata.width, metadata.height, ceiling)
                logger.info(
                    f"Progressive downscale to {intermediate[0]}x{intermediate[1]} "
                    + f"({intermediate[0] * intermediate[1]} px, ceiling {ceiling})"
                )
                with pipeline_step("Progressive downscale"):
                    reduced = progressive_downscale(
                        source, intermediate, self.config.intermediate_format
                    )
                source.close()
                try:
                    source = open_image(reduced)
                except UnsupportedFormat as exc:
                    raise ProcessingFailed("Intermediate buffer could not be decoded") from exc
                finally:
                    del reduced

            with pipeline_step("Resample"):
                rgb = flatten_to_rgb(source)
                try:
                    rendered = cover_fit(rgb, (target.width, target.height))
                finally:
                    if rgb is not source:
                        rgb.close()
        finally:
            source.close()

        try:
            with pipeline_step("Encode"):
                buffer = encode_jpeg(
                    rendered,
                    dpi=target.dpi,
                    quality=self.config.jpeg_quality,
                    icc_profile=icc_profile,
                )
            width, height = rendered.size
        finally:
            rendered.close()

        return ProcessedImage(
            buffer=buffer,
            width=width,
            height=height,
            dpi=target.dpi,
            strategy=strategy,
            source_width=metadata.width,
            source_height=metadata.height,
            intermediate_width=intermediate[0] if intermediate else None,
            intermediate_height=intermediate[1] if intermediate else None,
        )
