"""Upload guard - cheap checks run before any byte reaches the decoder."""

from loguru import logger

from ..utils.media_types import is_image_mime
from .config import ResizeConfig
from .errors import EmptyPayload, PayloadTooLarge, UnsupportedMediaType
from .schemas import UploadedImage


class UploadGuard:
    """Accepts or rejects an upload from its declared type and size.

    Nothing here decodes the buffer, so every check is O(1) and a crafted
    upload cannot make the guard allocate anything.

    Example:
        guard = UploadGuard(ResizeConfig())
        upload = guard.accept(data, "image/png")
    """

    def __init__(self, config: ResizeConfig):
        self.config: ResizeConfig = config

    def check_declared(self, declared_mime_type: str | None, declared_size: int | None) -> None:
        """Run the type and size checks from what the client declared.

        Needs no bytes at all, so the HTTP layer can call it before reading
        the upload body into memory.

        Raises:
            UnsupportedMediaType: declared type is not image/*
            PayloadTooLarge: declared size is bigger than the configured ceiling
        """
        if not is_image_mime(declared_mime_type):
            logger.info(f"Rejected upload with declared type {declared_mime_type!r}")
            raise UnsupportedMediaType()

        if declared_size is not None and declared_size > self.config.max_upload_bytes:
            logger.info(
                f"Rejected upload of {declared_size} bytes "
                + f"(limit {self.config.max_upload_bytes})"
            )
            raise PayloadTooLarge(self.config.max_upload_bytes, declared_size)

    def accept(
        self,
        buffer: bytes,
        declared_mime_type: str | None,
        declared_size: int | None = None,
    ) -> UploadedImage:
        """Validate an upload.

        Args:
            buffer: Raw uploaded bytes
            declared_mime_type: Content type sent by the client
            declared_size: Size sent by the client, if any

        Returns:
            The accepted UploadedImage

        Raises:
            UnsupportedMediaType: declared type is not image/*
            PayloadTooLarge: the upload is bigger than the configured ceiling
            EmptyPayload: the buffer holds no bytes
        """
        size = len(buffer)
        if declared_size is not None:
            size = max(size, declared_size)
        self.check_declared(declared_mime_type, size)

        if len(buffer) == 0:
            raise EmptyPayload()

        return UploadedImage(
            buffer=buffer,
            mime_type=declared_mime_type or "",
            size=len(buffer),
        )
