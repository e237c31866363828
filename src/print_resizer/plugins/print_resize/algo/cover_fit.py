"""Flattening and cover-fit resampling."""

from PIL import Image, ImageOps

from ....utils.profiling import timed

WHITE = (255, 255, 255, 255)

# Centre anchor for the cover crop; not configurable.
CENTER = (0.5, 0.5)


def has_alpha(image: Image.Image) -> bool:
    if image.mode in ("RGBA", "LA", "PA", "RGBa", "La"):
        return True
    return image.mode in ("P", "L", "RGB") and "transparency" in image.info


def flatten_to_rgb(
    image: Image.Image,
    background: tuple[int, int, int, int] = WHITE,
) -> Image.Image:
    """Return an RGB version of ``image``.

    Transparent pixels are composited onto ``background``; every other mode
    (CMYK, L, 16-bit, palette) is converted directly.
    """
    if has_alpha(image):
        rgba = image.convert("RGBA")
        canvas = Image.new("RGBA", rgba.size, background)
        canvas.alpha_composite(rgba)
        rgba.close()
        flattened = canvas.convert("RGB")
        canvas.close()
        return flattened

    if image.mode == "RGB":
        return image

    if image.mode.startswith("I;16"):
        # 16-bit greyscale: scale down to 8 bits before the RGB conversion.
        wide = image.convert("I")
        grey = wide.point(lambda value: value * (1 / 256)).convert("L")
        wide.close()
        rgb = grey.convert("RGB")
        grey.close()
        return rgb

    if image.mode == "I":
        grey = _stretch_to_l(image)
        rgb = grey.convert("RGB")
        grey.close()
        return rgb

    if image.mode == "F":
        grey = image.convert("L")
        rgb = grey.convert("RGB")
        grey.close()
        return rgb

    return image.convert("RGB")


def _stretch_to_l(image: Image.Image) -> Image.Image:
    """Map a 32-bit integer image onto 0..255 using its own value range."""
    low, high = image.getextrema()
    if low >= 0 and high <= 255:
        return image.convert("L")
    if low == high:
        return Image.new("L", image.size, 255 if low > 255 else 0)

    scale = 255 / (high - low)
    offset = -low * scale
    return image.point(lambda value: value * scale + offset).convert("L")


@timed
def scale_to(image: Image.Image, size: tuple[int, int]) -> Image.Image:
    """Plain Lanczos resample to ``size``, no cropping."""
    return image.resize(size, Image.Resampling.LANCZOS)


@timed
def cover_fit(image: Image.Image, size: tuple[int, int]) -> Image.Image:
    """Scale ``image`` to fill ``size`` exactly, cropping the overflow around the centre."""
    return ImageOps.fit(
        image,
        size,
        method=Image.Resampling.LANCZOS,
        bleed=0.0,
        centering=CENTER,
    )
