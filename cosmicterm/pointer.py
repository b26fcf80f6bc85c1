"""Pointer handling: click counting, wheel scrolling and cell hit-testing."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Optional

DEFAULT_CLICK_TIMING = 0.5
"""Seconds within which a second click continues the same click sequence."""

WHEEL_SCALE = 6.0
"""Factor applied to wheel deltas before they become lines or pixels."""

SIDE_LEFT = "left"
SIDE_RIGHT = "right"


class ClickKind(Enum):
    """How many clicks in quick succession a press belongs to."""

    SINGLE = "single"
    DOUBLE = "double"
    TRIPLE = "triple"

    def advance(self) -> "ClickKind":
        """The kind of the next click in a quick sequence; wraps after triple."""
        return _NEXT_KIND[self]


_NEXT_KIND = {
    ClickKind.SINGLE: ClickKind.DOUBLE,
    ClickKind.DOUBLE: ClickKind.TRIPLE,
    ClickKind.TRIPLE: ClickKind.SINGLE,
}


def next_click_kind(
    previous: Optional[ClickKind],
    elapsed: float,
    click_timing: float = DEFAULT_CLICK_TIMING,
) -> ClickKind:
    """The kind of a new click given the previous one and the seconds since it."""
    if previous is not None and elapsed < click_timing:
        return ClickKind(previous).advance()
    return ClickKind.SINGLE


@dataclass
class PixelScroller:
    """Turns wheel deltas into whole-line scroll amounts.

    Pixel deltas accumulate until they make up a whole line; the remainder is
    kept for the next event. The returned value is the scroll delta for the
    view: positive moves back into history, zero means no scroll.
    """

    pixels: float = 0.0

    def scroll_lines(self, y: float) -> int:
        """Scroll delta for a wheel event measured in lines."""
        self.pixels = 0.0
        product = -y * WHEEL_SCALE
        lines = 0 if math.isnan(product) else int(product)
        return -lines

    def scroll_pixels(self, y: float, line_height: float) -> int:
        """Scroll delta for a wheel event measured in pixels."""
        if not line_height > 0:
            raise ValueError("line height must be positive")
        if not math.isfinite(y):
            raise ValueError("scroll delta must be finite")
        self.pixels -= y * WHEEL_SCALE
        lines = 0
        while self.pixels <= -line_height:
            lines -= 1
            self.pixels += line_height
        while self.pixels >= line_height:
            lines += 1
            self.pixels -= line_height
        return -lines


def _saturating_index(value: float) -> int:
    if math.isnan(value) or value <= 0:
        return 0
    return int(value)


def cell_position(
    x: float, y: float, cell_width: float, cell_height: float
) -> tuple[int, int, str]:
    """The (row, column, side) of a point in view pixels.

    Negative positions clamp to zero. The side tells which half of the cell
    the point falls in, ``"left"`` or ``"right"``.
    """
    if not cell_width > 0 or not cell_height > 0:
        raise ValueError("cell dimensions must be positive")
    col = x / cell_width
    row = y / cell_height
    fraction = col - math.trunc(col) if math.isfinite(col) else 0.0
    side = SIDE_LEFT if fraction < 0.5 else SIDE_RIGHT
    return _saturating_index(row), _saturating_index(col), side


def scrollbar_rect(
    start: float, end: float, view_w: float, view_h: float, scrollbar_w: float
) -> tuple[float, float, float, float]:
    """The (x, y, width, height) of the scrollbar thumb, right of the text area.

    ``start`` and ``end`` are the visible span as fractions of all lines.
    """
    if start > end:
        raise ValueError("scrollbar start lies after its end")
    scrollbar_y = start * view_h
    scrollbar_h = end * view_h - scrollbar_y
    return float(view_w), scrollbar_y, float(scrollbar_w), scrollbar_h