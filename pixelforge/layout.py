"""Geometry of the sidebar, the canvas and the aspect-ratio preview."""

from __future__ import annotations

import math
import struct
from collections.abc import Iterator
from dataclasses import dataclass

SIDEBAR_WIDTH = 190
CANVAS_MARGIN = 20
CHECKER_CELL = 10
LABEL_INSET = 5
LABEL_HEIGHT = 20


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle with exclusive right and bottom edges."""

    left: int
    top: int
    right: int
    bottom: int

    @property
    def width(self) -> int:
        return self.right - self.left

    @property
    def height(self) -> int:
        return self.bottom - self.top


def _f32(value: float) -> float:
    """Round a value to single precision."""
    return struct.unpack("f", struct.pack("f", value))[0]


def _ratio(numerator: int, denominator: int) -> float:
    if denominator == 0:
        if numerator == 0:
            return math.nan
        return math.copysign(math.inf, numerator)
    return _f32(numerator / denominator)


def _trunc_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b > 0) else -quotient


def _to_int(value: float) -> int:
    if math.isnan(value) or math.isinf(value):
        return 0
    return int(value)


def canvas_rect(client_width: int, client_height: int) -> Rect:
    """The area right of the sidebar within a client area of the given size."""
    return Rect(SIDEBAR_WIDTH, 0, client_width, client_height)


def fit_aspect(canvas: Rect, width: int, height: int) -> Rect | None:
    """Largest rectangle of the given aspect ratio centred in the canvas.

    A margin of CANVAS_MARGIN is kept on the limiting side. Returns None when
    no size is set.
    """
    if width <= 0 or height <= 0:
        return None
    canvas_width = canvas.width
    canvas_height = canvas.height
    canvas_ratio = _ratio(canvas_width, canvas_height)
    aspect_ratio = _ratio(width, height)

    if aspect_ratio > canvas_ratio:
        display_width = canvas_width - 2 * CANVAS_MARGIN
        display_height = _to_int(_f32(display_width / aspect_ratio))
    else:
        display_height = canvas_height - 2 * CANVAS_MARGIN
        display_width = _to_int(_f32(display_height * aspect_ratio))

    left = canvas.left + _trunc_div(canvas_width - display_width, 2)
    top = canvas.top + _trunc_div(canvas_height - display_height, 2)
    return Rect(left, top, left + display_width, top + display_height)


def checkerboard(rect: Rect, cell: int = CHECKER_CELL) -> Iterator[tuple[Rect, bool]]:
    """Yield the cells of a transparency checkerboard and whether each is light."""
    for y in range(rect.top, rect.bottom, cell):
        for x in range(rect.left, rect.right, cell):
            light = (_trunc_div(x, cell) + _trunc_div(y, cell)) % 2 == 0
            yield Rect(x, y, x + cell, y + cell), light


def size_label_rect(rect: Rect) -> Rect:
    """Where the size caption sits, inset from the top-left of the preview."""
    top = rect.top + LABEL_INSET
    return Rect(rect.left + LABEL_INSET, top, rect.right - LABEL_INSET, top + LABEL_HEIGHT)