"""Unit tests for request/response schemas and print presets."""

import pytest
from pydantic import ValidationError

from print_resizer.common.config import ResizeConfig
from print_resizer.common.errors import InvalidDimensions
from print_resizer.common.schemas import (
    MAX_DPI,
    PRINT_DIMENSIONS,
    ImageMetadata,
    ProcessedImage,
    TargetSpec,
    get_print_dimension,
)

# ============================================================================
# TargetSpec
# ============================================================================


def test_target_spec_defaults():
    """Test the default target is 24x36 inches at 300 DPI."""
    target = TargetSpec()

    assert (target.width, target.height, target.dpi) == (7200, 10800, 300)


def test_resolve_uses_config_defaults():
    target = TargetSpec.resolve(ResizeConfig())

    assert (target.width, target.height, target.dpi) == (7200, 10800, 300)


def test_resolve_keeps_explicit_values():
    target = TargetSpec.resolve(ResizeConfig(), width=3300, height=4200, dpi=150)

    assert (target.width, target.height, target.dpi) == (3300, 4200, 150)


@pytest.mark.parametrize(
    ("width", "height", "dpi"),
    [(0, 100, 300), (100, 0, 300), (-5, 100, 300), (100, 100, 0), (100, 100, MAX_DPI + 1)],
)
def test_resolve_rejects_invalid_values(width: int, height: int, dpi: int):
    with pytest.raises(InvalidDimensions):
        TargetSpec.resolve(ResizeConfig(), width=width, height=height, dpi=dpi)


def test_clamp_portrait_keeps_aspect():
    target = TargetSpec.resolve(ResizeConfig(max_edge_px=10_000), width=12_000, height=18_000)

    assert target.height == 10_000
    assert target.width == 6666


def test_clamp_landscape_keeps_aspect():
    target = TargetSpec(width=20_000, height=5_000).clamped(10_000)

    assert (target.width, target.height) == (10_000, 2_500)


def test_clamp_within_limit_is_identity():
    target = TargetSpec(width=7200, height=10800)

    assert target.clamped(10_800) is target


def test_clamp_never_drops_below_one_pixel():
    target = TargetSpec(width=50_000, height=1).clamped(1000)

    assert (target.width, target.height) == (1000, 1)


def test_target_spec_is_frozen():
    target = TargetSpec()

    with pytest.raises(ValidationError):
        target.width = 10  # type: ignore[misc]


# ============================================================================
# ImageMetadata / ProcessedImage
# ============================================================================


def test_metadata_pixel_count():
    metadata = ImageMetadata(width=12_000, height=12_000, format="JPEG")

    assert metadata.pixel_count == 144_000_000


def test_metadata_rejects_zero_dimension():
    with pytest.raises(ValidationError):
        ImageMetadata(width=0, height=10)


def test_processed_image_headers():
    processed = ProcessedImage(buffer=b"\xff\xd8abc", width=7200, height=10800, dpi=300)

    assert processed.content_type == "image/jpeg"
    assert processed.headers() == {
        "Content-Length": "5",
        "Cache-Control": "no-cache",
        "X-Image-Width": "7200",
        "X-Image-Height": "10800",
        "X-Image-DPI": "300",
    }


# ============================================================================
# Presets
# ============================================================================


def test_preset_ids():
    assert [d.id for d in PRINT_DIMENSIONS] == ["24x36", "24x32", "24x30", "11x14", "a1"]


def test_preset_pixel_sizes():
    assert get_print_dimension("24x36").width_px == 7200
    assert get_print_dimension("24x36").height_px == 10800
    assert get_print_dimension("11x14").width_px == 3300
    assert get_print_dimension("11x14").height_px == 4200


def test_a1_preset_rounds_to_nearest_pixel():
    a1 = get_print_dimension("a1")

    assert a1.width_px == 7017
    assert a1.height_px == 9933


def test_preset_lookup_is_case_insensitive():
    assert get_print_dimension("A1").id == "a1"


def test_unknown_preset():
    with pytest.raises(InvalidDimensions, match="Unknown print preset"):
        get_print_dimension("poster")
