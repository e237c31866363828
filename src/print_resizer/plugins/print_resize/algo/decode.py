"""Decoder setup, lazy open and header inspection."""

import warnings
from io import BytesIO

from loguru import logger
from PIL import Image, ImageFile, UnidentifiedImageError

from ....common.errors import InvalidDimensions, UnsupportedFormat
from ....common.schemas import ImageMetadata


def configure_decoder() -> None:
    """Put Pillow into the mode the pipeline relies on.

    - no decompression-bomb pixel ceiling (the pipeline enforces its own)
    - truncated files decode as far as they go instead of failing
    - no pooled memory blocks kept between images
    """
    Image.MAX_IMAGE_PIXELS = None
    ImageFile.LOAD_TRUNCATED_IMAGES = True
    Image.core.set_blocks_max(0)


def release_buffers() -> None:
    """Drop any image memory Pillow still keeps around."""
    Image.core.clear_cache()


def open_image(buffer: bytes) -> Image.Image:
    """Lazily open an encoded image; only the header is parsed here.

    Raises:
        UnsupportedFormat: the bytes are not an image Pillow can read
    """
    try:
        with warnings.catch_warnings():
            warnings.simplefilter("ignore")
            return Image.open(BytesIO(buffer))
    except (UnidentifiedImageError, OSError, SyntaxError, ValueError, EOFError) as exc:
        logger.info(f"Could not identify uploaded image: {exc}")
        raise UnsupportedFormat() from exc


def read_metadata(image: Image.Image) -> ImageMetadata:
    """Read width, height, container and mode from an opened image.

    Raises:
        InvalidDimensions: the header reports a zero or missing dimension
    """
    width, height = image.size
    if not width or not height or width <= 0 or height <= 0:
        raise InvalidDimensions(f"Invalid image dimensions: {width}x{height}")

    return ImageMetadata(width=width, height=height, format=image.format, mode=image.mode)
