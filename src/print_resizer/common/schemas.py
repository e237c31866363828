"""Pydantic models for the data flowing through one resize request."""

import math
from typing import ClassVar, Literal

from pydantic import BaseModel, ConfigDict, Field, computed_field

from .config import ResizeConfig
from .errors import InvalidDimensions

# Largest density a JFIF APP0 header can store (16-bit field).
MAX_DPI = 65535

ResizeStrategy = Literal["direct", "oversized"]


# ─────────────────────────────────────────────────────────────
# Request side
# ─────────────────────────────────────────────────────────────


class UploadedImage(BaseModel):
    """An upload that passed the guard. Never persisted."""

    buffer: bytes = Field(repr=False, description="Raw uploaded bytes")
    mime_type: str = Field(description="Declared MIME type")
    size: int = Field(gt=0, description="Size in bytes")

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True)


class ImageMetadata(BaseModel):
    """Header information read from the decoded upload."""

    width: int = Field(gt=0)
    height: int = Field(gt=0)
    format: str | None = Field(default=None, description="Detected container, e.g. 'JPEG'")
    mode: str = Field(default="RGB", description="Pillow band layout, e.g. 'RGBA'")

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True)

    @computed_field
    @property
    def pixel_count(self) -> int:
        return self.width * self.height


class TargetSpec(BaseModel):
    """Requested output size and print density."""

    width: int = Field(7200, gt=0, description="Output width in pixels")
    height: int = Field(10800, gt=0, description="Output height in pixels")
    dpi: int = Field(300, gt=0, le=MAX_DPI, description="Density written to the JPEG header")

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True)

    @classmethod
    def resolve(
        cls,
        config: ResizeConfig,
        width: int | None = None,
        height: int | None = None,
        dpi: int | None = None,
    ) -> "TargetSpec":
        """Fill in defaults, validate and clamp a caller's request.

        Raises:
            InvalidDimensions: if any value is not a positive integer or the
                DPI does not fit a JPEG header.
        """
        width = config.default_width if width is None else width
        height = config.default_height if height is None else height
        dpi = config.default_dpi if dpi is None else dpi

        if width <= 0 or height <= 0:
            raise InvalidDimensions(
                f"Target dimensions must be positive, got {width}x{height}"
            )
        if not 0 < dpi <= MAX_DPI:
            raise InvalidDimensions(f"DPI must be between 1 and {MAX_DPI}, got {dpi}")

        return cls(width=width, height=height, dpi=dpi).clamped(config.max_edge_px)

    def clamped(self, max_edge: int) -> "TargetSpec":
        """Scale both edges down so the longer one is at most ``max_edge``.

        The aspect ratio is kept; floored values never drop below 1.
        """
        longest = max(self.width, self.height)
        if longest <= max_edge:
            return self

        if self.width >= self.height:
            width = max_edge
            height = max(1, math.floor(self.height * max_edge / self.width))
        else:
            height = max_edge
            width = max(1, math.floor(self.width * max_edge / self.height))
        return self.model_copy(update={"width": width, "height": height})


# ─────────────────────────────────────────────────────────────
# Response side
# ─────────────────────────────────────────────────────────────


class ProcessedImage(BaseModel):
    """Encoded JPEG plus the dimensions actually produced."""

    buffer: bytes = Field(repr=False, description="Encoded JPEG bytes")
    width: int = Field(description="Achieved output width")
    height: int = Field(description="Achieved output height")
    dpi: int = Field(description="Density written to the JPEG header")
    format: Literal["jpeg"] = "jpeg"

    strategy: ResizeStrategy = Field("direct", description="Single pass or progressive downscale")
    source_width: int | None = None
    source_height: int | None = None
    intermediate_width: int | None = None
    intermediate_height: int | None = None

    @property
    def content_type(self) -> str:
        return f"image/{self.format}"

    def headers(self) -> dict[str, str]:
        return {
            "Content-Length": str(len(self.buffer)),
            "Cache-Control": "no-cache",
            "X-Image-Width": str(self.width),
            "X-Image-Height": str(self.height),
            "X-Image-DPI": str(self.dpi),
        }


# ─────────────────────────────────────────────────────────────
# Print presets
# ─────────────────────────────────────────────────────────────


class PrintDimension(BaseModel):
    """A named print size expressed in inches at a DPI."""

    id: str
    name: str
    width_in: float = Field(gt=0)
    height_in: float = Field(gt=0)
    dpi: int = Field(300, gt=0, le=MAX_DPI)
    description: str = ""

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True)

    @computed_field
    @property
    def width_px(self) -> int:
        return round(self.width_in * self.dpi)

    @computed_field
    @property
    def height_px(self) -> int:
        return round(self.height_in * self.dpi)


PRINT_DIMENSIONS: tuple[PrintDimension, ...] = (
    PrintDimension(
        id="24x36",
        name='24" x 36"',
        width_in=24,
        height_in=36,
        description="Large Format Poster (2:3)",
    ),
    PrintDimension(
        id="24x32",
        name='24" x 32"',
        width_in=24,
        height_in=32,
        description="Large Format Print (3:4)",
    ),
    PrintDimension(
        id="24x30",
        name='24" x 30"',
        width_in=24,
        height_in=30,
        description="Large Format Print (4:5)",
    ),
    PrintDimension(
        id="11x14",
        name='11" x 14"',
        width_in=11,
        height_in=14,
        description="Standard Photo Print",
    ),
    PrintDimension(
        id="a1",
        name="A1 (ISO)",
        width_in=23.39,
        height_in=33.11,
        description="International Standard (594mm x 841mm)",
    ),
)


def get_print_dimension(preset_id: str) -> PrintDimension:
    """Look up a preset by id.

    Raises:
        InvalidDimensions: if no preset has this id.
    """
    for dimension in PRINT_DIMENSIONS:
        if dimension.id == preset_id.lower():
            return dimension
    known = ", ".join(d.id for d in PRINT_DIMENSIONS)
    raise InvalidDimensions(f"Unknown print preset '{preset_id}'. Known presets: {known}")
