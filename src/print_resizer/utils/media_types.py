from enum import StrEnum


class MediaType(StrEnum):
    TEXT = "text"
    IMAGE = "image"
    VIDEO = "video"
    AUDIO = "audio"
    FILE = "file"

    @classmethod
    def from_mime(cls, file_type: str | None) -> "MediaType":
        if not file_type:
            return MediaType.FILE

        major = file_type.strip().lower().split("/", 1)[0]
        if major == "image":
            return MediaType.IMAGE
        elif major == "video":
            return MediaType.VIDEO
        elif major == "audio":
            return MediaType.AUDIO
        elif major == "text":
            return MediaType.TEXT
        else:
            return MediaType.FILE


def is_image_mime(file_type: str | None) -> bool:
    """True when the declared type is ``image/<something>``."""
    if not file_type or "/" not in file_type:
        return False
    return MediaType.from_mime(file_type) == MediaType.IMAGE


# Pillow format name -> MIME type, for the formats Pillow can both read and
# report. Only compared against the declared type for logging, never used
# to accept or reject an upload.
PIL_FORMAT_MIME: dict[str, str] = {
    "JPEG": "image/jpeg",
    "PNG": "image/png",
    "WEBP": "image/webp",
    "GIF": "image/gif",
    "BMP": "image/bmp",
    "TIFF": "image/tiff",
    "MPO": "image/jpeg",
}


def mime_for_pil_format(pil_format: str | None) -> str:
    if not pil_format:
        return "application/octet-stream"
    return PIL_FORMAT_MIME.get(pil_format.upper(), f"image/{pil_format.lower()}")
