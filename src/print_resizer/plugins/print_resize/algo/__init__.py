"""Resize pipeline step functions."""

from .cover_fit import cover_fit, flatten_to_rgb, scale_to
from .decode import configure_decoder, open_image, read_metadata, release_buffers
from .downscale import classify, intermediate_size, progressive_downscale
from .jpeg_encode import encode_jpeg

__all__ = [
    "classify",
    "configure_decoder",
    "cover_fit",
    "encode_jpeg",
    "flatten_to_rgb",
    "intermediate_size",
    "open_image",
    "progressive_downscale",
    "read_metadata",
    "release_buffers",
    "scale_to",
]
