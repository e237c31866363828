"""Progressive downscale for images above the single-pass pixel budget.

An oversized image is resampled once to the largest size that fits the
budget, encoded to a lossless buffer and then decoded again as the input of
the final cover-fit. The pipeline therefore never resamples more than
``safe_pixel_ceiling`` pixels into the final size.
"""

import math
from io import BytesIO

from loguru import logger
from PIL import Image

from ....common.config import IntermediateFormat
from ....common.schemas import ImageMetadata, ResizeStrategy
from ....utils.profiling import timed
from .cover_fit import flatten_to_rgb, scale_to


def classify(metadata: ImageMetadata, safe_pixel_ceiling: int) -> ResizeStrategy:
    if metadata.pixel_count > safe_pixel_ceiling:
        return "oversized"
    return "direct"


def intermediate_size(width: int, height: int, safe_pixel_ceiling: int) -> tuple[int, int]:
    """Largest (floored) size with the same aspect whose area fits the ceiling.

    ``scale = sqrt(ceiling / (width * height))`` is applied to both axes and
    floored, never rounded. Float error in ``sqrt`` may still leave the
    product one row or column over the ceiling, in which case the longer
    axis is trimmed until it fits.
    """
    pixel_count = width * height
    if pixel_count <= safe_pixel_ceiling:
        return width, height

    scale = math.sqrt(safe_pixel_ceiling / pixel_count)
    new_width = max(1, math.floor(width * scale))
    new_height = max(1, math.floor(height * scale))

    while new_width * new_height > safe_pixel_ceiling:
        if new_width >= new_height and new_width > 1:
            new_width -= 1
        elif new_height > 1:
            new_height -= 1
        else:
            break

    return new_width, new_height


@timed
def progressive_downscale(
    image: Image.Image,
    size: tuple[int, int],
    intermediate_format: IntermediateFormat = "PNG",
) -> bytes:
    """Resample ``image`` to ``size`` and return it encoded losslessly.

    Transparency is flattened onto white first; the final step would do the
    same, and it keeps the intermediate buffer a plain RGB image.
    """
    rgb = flatten_to_rgb(image)
    try:
        reduced = scale_to(rgb, size)
    finally:
        if rgb is not image:
            rgb.close()

    try:
        out = BytesIO()
        if intermediate_format == "PNG":
            reduced.save(out, format="PNG", compress_level=1)
        else:
            reduced.save(out, format="TIFF", compression="raw")
    finally:
        reduced.close()

    data = out.getvalue()
    logger.debug(
        f"Intermediate {size[0]}x{size[1]} {intermediate_format} buffer: {len(data)} bytes"
    )
    return data
