"""print_resizer - print-resolution JPEG resizing for large uploaded images."""

__version__ = "0.1.0"

from .common.config import ResizeConfig, Settings, get_settings
from .common.errors import (
    EmptyPayload,
    InvalidDimensions,
    MissingUpload,
    OutOfMemory,
    PayloadTooLarge,
    ProcessingFailed,
    ResizeError,
    UnsupportedFormat,
    UnsupportedMediaType,
)
from .common.schemas import (
    PRINT_DIMENSIONS,
    ImageMetadata,
    PrintDimension,
    ProcessedImage,
    TargetSpec,
    UploadedImage,
)
from .common.upload_guard import UploadGuard
from .plugins.print_resize.service import ResizeService
from .plugins.print_resize.task import ResizePipeline
from .utils.admission import ResizeLimiter

__all__ = [
    "EmptyPayload",
    "ImageMetadata",
    "InvalidDimensions",
    "MissingUpload",
    "OutOfMemory",
    "PRINT_DIMENSIONS",
    "PayloadTooLarge",
    "PrintDimension",
    "ProcessedImage",
    "ProcessingFailed",
    "ResizeConfig",
    "ResizeError",
    "ResizeLimiter",
    "ResizePipeline",
    "ResizeService",
    "Settings",
    "TargetSpec",
    "UnsupportedFormat",
    "UnsupportedMediaType",
    "UploadGuard",
    "UploadedImage",
    "__version__",
    "get_settings",
]
