import pytest

from pixelforge.presets import (
    INVALID_DIMENSIONS_MESSAGE,
    MAX_DIMENSION,
    MIN_DIMENSION,
    RESOLUTION_PRESETS,
    InvalidDimensionsError,
    ResolutionPreset,
    parse_dimension,
    validate_custom_size,
)


def test_presets_match_source_table():
    assert RESOLUTION_PRESETS[0] == ResolutionPreset(1280, 720, "1280 × 720 (16:9)")
    assert RESOLUTION_PRESETS[-1] == ResolutionPreset(1200, 1200, "1200 × 1200 (Square)")
    assert len(RESOLUTION_PRESETS) == 6


@pytest.mark.parametrize("preset", RESOLUTION_PRESETS)
def test_preset_label_width_parses_back(preset):
    assert parse_dimension(preset.label) == preset.width


@pytest.mark.parametrize("preset", RESOLUTION_PRESETS)
def test_preset_sizes_pass_custom_validation(preset):
    assert validate_custom_size(str(preset.width), str(preset.height)) == (
        preset.width,
        preset.height,
    )


def test_parse_plain_number():
    assert parse_dimension("1000") == 1000


def test_parse_stops_at_non_digit_and_skips_whitespace():
    assert parse_dimension("  42abc") == 42


def test_parse_sign():
    assert parse_dimension("-5") == -5
    assert parse_dimension("+7") == 7


def test_parse_garbage_is_zero():
    assert parse_dimension("") == 0
    assert parse_dimension("abc") == 0


def test_parse_reads_only_nine_characters():
    assert parse_dimension("1234567890") == 123456789


def test_validate_accepts_bounds():
    assert validate_custom_size(str(MIN_DIMENSION), str(MAX_DIMENSION)) == (
        MIN_DIMENSION,
        MAX_DIMENSION,
    )


@pytest.mark.parametrize(
    "width_text, height_text",
    [("99", "500"), ("500", "10001"), ("abc", "500"), ("", ""), ("-200", "200")],
)
def test_validate_rejects_out_of_range(width_text, height_text):
    with pytest.raises(InvalidDimensionsError) as info:
        validate_custom_size(width_text, height_text)
    assert str(info.value) == INVALID_DIMENSIONS_MESSAGE


def test_invalid_dimensions_is_value_error():
    with pytest.raises(ValueError):
        validate_custom_size("1", "1")