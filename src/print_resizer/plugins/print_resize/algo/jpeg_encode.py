"""Print-grade JPEG encoding."""

from io import BytesIO

from PIL import Image

from ....utils.profiling import timed

# Pillow's ``subsampling`` value for 4:4:4 (no chroma subsampling).
SUBSAMPLING_444 = 0


@timed
def encode_jpeg(
    image: Image.Image,
    *,
    dpi: int,
    quality: int = 95,
    icc_profile: bytes | None = None,
) -> bytes:
    """
    Encode an RGB image as JPEG with a DPI tag.

    The DPI only lands in the JFIF header; pixels are untouched.

    Args:
        image: RGB image to encode
        dpi: Density for both axes
        quality: JPEG quality
        icc_profile: Colour profile to embed, if the source carried one

    Returns:
        Encoded JPEG bytes

    Raises:
        OSError: If Pillow fails to encode the image
    """
    save_kwargs: dict[str, object] = {
        "quality": quality,
        "subsampling": SUBSAMPLING_444,
        "dpi": (dpi, dpi),
    }
    if icc_profile:
        save_kwargs["icc_profile"] = icc_profile

    out = BytesIO()
    image.save(out, format="JPEG", **save_kwargs)
    return out.getvalue()
