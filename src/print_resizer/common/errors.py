"""Typed failures raised by the upload guard and the resize pipeline.

Every failure carries a short ``title`` and a human-readable ``detail``;
the HTTP layer renders both and uses ``status_code`` for the response.
"""

from typing import ClassVar

from typing_extensions import override


class ResizeError(Exception):
    """Base class for every failure a resize request can end with."""

    title: ClassVar[str] = "Processing failed"
    status_code: ClassVar[int] = 500
    default_detail: ClassVar[str] = "An unexpected error occurred"

    def __init__(self, detail: str | None = None):
        self.detail: str = detail or self.default_detail
        super().__init__(self.detail)

    @override
    def __str__(self) -> str:
        return f"{self.title}: {self.detail}"

    def to_dict(self) -> dict[str, str]:
        return {"error": self.title, "details": self.detail}


class UnsupportedMediaType(ResizeError):
    title = "Unsupported media type"
    status_code = 400
    default_detail = "Only image files are allowed"


class PayloadTooLarge(ResizeError):
    title = "File too large"
    status_code = 400

    def __init__(self, limit_bytes: int, size: int | None = None):
        self.limit_bytes: int = limit_bytes
        self.size: int | None = size
        super().__init__(f"File size exceeds {format_limit(limit_bytes)} limit")


def format_limit(limit_bytes: int) -> str:
    """Render a byte ceiling as ``50MB``, ``1.50MB`` or ``1024 bytes``."""
    mb = 1024 * 1024
    if limit_bytes >= mb and limit_bytes % mb == 0:
        return f"{limit_bytes // mb}MB"
    if limit_bytes >= mb:
        return f"{limit_bytes / mb:.2f}MB"
    return f"{limit_bytes} bytes"


class EmptyPayload(ResizeError):
    title = "Empty file"
    status_code = 400
    default_detail = "File appears to be empty"


class MissingUpload(ResizeError):
    title = "No image provided"
    status_code = 400
    default_detail = "Please select an image to upload"


class UnsupportedFormat(ResizeError):
    title = "Unsupported image format"
    status_code = 400
    default_detail = "Please upload a valid image file"


class InvalidDimensions(ResizeError):
    title = "Invalid image dimensions"
    status_code = 400


class ProcessingFailed(ResizeError):
    title = "Processing failed"
    status_code = 500


class OutOfMemory(ResizeError):
    title = "Out of memory"
    status_code = 500
    default_detail = "Not enough memory to process this image, try a smaller image"
