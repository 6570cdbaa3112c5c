"""Resolution presets and validation of custom canvas sizes."""

from __future__ import annotations

from dataclasses import dataclass

MIN_DIMENSION = 100
MAX_DIMENSION = 10000

# The edit controls are read into a 10-character buffer, leaving room for 9.
_MAX_INPUT_CHARS = 9

INVALID_DIMENSIONS_MESSAGE = "Please enter valid dimensions (100-10000 pixels)"


@dataclass(frozen=True)
class ResolutionPreset:
    """A named canvas size offered as a one-click choice."""

    width: int
    height: int
    label: str


RESOLUTION_PRESETS: tuple[ResolutionPreset, ...] = (
    ResolutionPreset(1280, 720, "1280 × 720 (16:9)"),
    ResolutionPreset(1920, 1080, "1920 × 1080 (16:9)"),
    ResolutionPreset(1280, 1024, "1280 × 1024 (5:4)"),
    ResolutionPreset(1280, 2400, "1280 × 2400 (Phone)"),
    ResolutionPreset(800, 1200, "800 × 1200 (ebook)"),
    ResolutionPreset(1200, 1200, "1200 × 1200 (Square)"),
)


class InvalidDimensionsError(ValueError):
    """Raised when a custom size falls outside the accepted range."""

    def __init__(self, message: str = INVALID_DIMENSIONS_MESSAGE) -> None:
        super().__init__(message)


def parse_dimension(text: str) -> int:
    """Read a leading integer from an input field, lenient like atoi.

    Only the first nine characters are considered. Leading whitespace and a
    single sign are accepted; anything unparsable yields 0.
    """
    text = text[:_MAX_INPUT_CHARS].lstrip()
    sign = 1
    if text[:1] in ("+", "-"):
        if text[0] == "-":
            sign = -1
        text = text[1:]
    digits = []
    for char in text:
        if not ("0" <= char <= "9"):
            break
        digits.append(char)
    if not digits:
        return 0
    return sign * int("".join(digits))


def validate_custom_size(width_text: str, height_text: str) -> tuple[int, int]:
    """Parse and check a custom width and height, returning them as ints."""
    width = parse_dimension(width_text)
    height = parse_dimension(height_text)
    if not (MIN_DIMENSION <= width <= MAX_DIMENSION and MIN_DIMENSION <= height <= MAX_DIMENSION):
        raise InvalidDimensionsError()
    return width, height