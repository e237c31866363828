"""Unit tests for the upload guard.

Every check must fire before the decoder sees a byte, so the buffers used
here are mostly not images at all.
"""

import pytest

from print_resizer.common.config import ResizeConfig
from print_resizer.common.errors import EmptyPayload, PayloadTooLarge, UnsupportedMediaType
from print_resizer.common.schemas import UploadedImage
from print_resizer.common.upload_guard import UploadGuard

LIMIT = 1024


@pytest.fixture
def guard() -> UploadGuard:
    return UploadGuard(ResizeConfig(max_upload_bytes=LIMIT))


# ============================================================================
# Accepted uploads
# ============================================================================


def test_accepts_image_upload(guard: UploadGuard, png_bytes: bytes):
    """Test a small declared image is accepted unchanged."""
    upload = guard.accept(png_bytes, "image/png", len(png_bytes))

    assert isinstance(upload, UploadedImage)
    assert upload.buffer == png_bytes
    assert upload.mime_type == "image/png"
    assert upload.size == len(png_bytes)


def test_accepts_without_declared_size(guard: UploadGuard):
    upload = guard.accept(b"\x00" * 10, "image/jpeg")
    assert upload.size == 10


def test_accepts_exactly_the_limit(guard: UploadGuard):
    upload = guard.accept(b"\x00" * LIMIT, "image/jpeg", LIMIT)
    assert upload.size == LIMIT


def test_does_not_decode(guard: UploadGuard):
    """Test garbage bytes declared as an image pass the guard (decode happens later)."""
    upload = guard.accept(b"not really a jpeg", "image/jpeg")
    assert upload.buffer == b"not really a jpeg"


# ============================================================================
# Rejections
# ============================================================================


@pytest.mark.parametrize(
    "mime_type",
    ["text/plain", "application/pdf", "video/mp4", "", None, "image", "imagex/png"],
)
def test_rejects_non_image_types(guard: UploadGuard, mime_type: str | None):
    with pytest.raises(UnsupportedMediaType):
        guard.accept(b"hello", mime_type)


def test_rejects_one_byte_over_limit(guard: UploadGuard):
    with pytest.raises(PayloadTooLarge) as exc_info:
        guard.accept(b"\x00" * (LIMIT + 1), "image/png")

    assert exc_info.value.limit_bytes == LIMIT
    assert exc_info.value.size == LIMIT + 1
    assert exc_info.value.status_code == 400


def test_rejects_on_declared_size(guard: UploadGuard):
    """Test a declared size over the limit is enough, whatever the buffer holds."""
    with pytest.raises(PayloadTooLarge):
        guard.accept(b"\x00" * 10, "image/png", LIMIT + 1)


def test_payload_too_large_message_carries_limit():
    guard = UploadGuard(ResizeConfig(max_upload_bytes=50 * 1024 * 1024))

    with pytest.raises(PayloadTooLarge, match="50MB"):
        guard.accept(b"", "image/png", 50 * 1024 * 1024 + 1)


def test_check_declared_rejects_size_without_bytes(guard: UploadGuard):
    with pytest.raises(PayloadTooLarge) as exc_info:
        guard.check_declared("image/jpeg", LIMIT + 1)

    assert exc_info.value.size == LIMIT + 1


def test_check_declared_rejects_type(guard: UploadGuard):
    with pytest.raises(UnsupportedMediaType):
        guard.check_declared("application/zip", 10)


def test_check_declared_accepts_unknown_size(guard: UploadGuard):
    guard.check_declared("image/png", None)
    guard.check_declared("image/png", LIMIT)


def test_rejects_empty_buffer(guard: UploadGuard):
    with pytest.raises(EmptyPayload):
        guard.accept(b"", "image/png", 0)


def test_media_type_checked_before_size(guard: UploadGuard):
    with pytest.raises(UnsupportedMediaType):
        guard.accept(b"\x00" * (LIMIT + 1), "text/plain")


def test_media_type_checked_before_emptiness(guard: UploadGuard):
    with pytest.raises(UnsupportedMediaType):
        guard.accept(b"", "text/plain")
