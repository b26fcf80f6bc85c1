"""Pure helpers for pasting, scrolling, searching and cell text in the view."""

from __future__ import annotations

import math
from typing import Iterable, Optional

BRACKETED_PASTE_START = b"\x1b[200~"
BRACKETED_PASTE_END = b"\x1b[201~"


def paste_chunks(value: str, bracketed: bool) -> list[bytes]:
    """The byte chunks to send to the pty when pasting ``value``.

    In bracketed mode the text is wrapped in paste markers and stripped of
    escape characters. Otherwise line breaks of either style become a single
    carriage return, which is what the Enter key produces.
    """
    if bracketed:
        return [
            BRACKETED_PASTE_START,
            value.replace("\x1b", "").encode("utf-8"),
            BRACKETED_PASTE_END,
        ]
    return [value.replace("\r\n", "\r").replace("\n", "\r").encode("utf-8")]


def _check_counts(**counts: int) -> None:
    for name, count in counts.items():
        if count < 0:
            raise ValueError(f"{name} must not be negative")


def scrollbar(
    history_size: int, screen_lines: int, display_offset: int
) -> Optional[tuple[float, float]]:
    """The visible span as fractions of all lines, or None without history."""
    _check_counts(
        history_size=history_size,
        screen_lines=screen_lines,
        display_offset=display_offset,
    )
    if history_size <= 0:
        return None
    if display_offset > history_size:
        raise ValueError("display offset exceeds the history size")
    total = history_size + screen_lines
    start = total - display_offset - screen_lines
    end = total - display_offset
    return start / total, end / total


def scroll_to_delta(
    ratio: float, history_size: int, screen_lines: int, display_offset: int
) -> int:
    """Lines to scroll so the top of the view sits at ``ratio`` of all lines."""
    _check_counts(
        history_size=history_size,
        screen_lines=screen_lines,
        display_offset=display_offset,
    )
    total = history_size + screen_lines
    target = total * (1.0 - ratio)
    whole = 0 if math.isnan(target) else int(target)
    new_display_offset = whole - screen_lines
    return new_display_offset - display_offset


def search_origin(
    forwards: bool, history_size: int, screen_lines: int, columns: int
) -> tuple[int, int]:
    """The (line, column) a search starts from when nothing is selected.

    Forward searches start at the top-left of the history; backward searches
    at the bottom-right of the screen.
    """
    _check_counts(history_size=history_size, screen_lines=screen_lines)
    if columns < 1:
        raise ValueError("a grid needs at least one column")
    if forwards:
        return -history_size, 0
    return screen_lines - 1, columns - 1


def cell_text(c: str, zerowidth: Optional[Iterable[str]] = None) -> str:
    """The text a cell contributes to its line; tabs render as spaces."""
    if len(c) != 1:
        raise ValueError("a cell holds exactly one character")
    base = " " if c == "\t" else c
    return base + "".join(zerowidth or ())