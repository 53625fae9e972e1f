"""ANSI-aware text measurement helpers.

Provides escape-sequence matching, display-width measurement, and clipping.
These keep panel and frame layout aligned when color codes and wide chars
are present.
"""

from __future__ import annotations

import re
import unicodedata

ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-9;?]*[ -/]*[@-~]")
_ESCAPE_SPLIT_RE = re.compile(f"({ANSI_ESCAPE_RE.pattern})")
SGR_RE = re.compile(r"\x1b\[([0-9;]*)m")
TAB_STOP = 8


def char_display_width(ch: str, col: int) -> int:
    """Return terminal column width for one character at visual column ``col``.

    Tabs expand to the next 8-column stop, combining marks consume no columns,
    and East Asian wide/fullwidth characters consume two.
    """
    if ch == "\t":
        return TAB_STOP - (col % TAB_STOP)
    if unicodedata.combining(ch):
        return 0
    if unicodedata.east_asian_width(ch) in {"W", "F"}:
        return 2
    return 1


def strip_ansi(text: str) -> str:
    """Remove every CSI escape sequence from ``text``."""
    return ANSI_ESCAPE_RE.sub("", text)


def display_width(text: str) -> int:
    """Return terminal column width for ANSI-styled text."""
    col = 0
    for ch in strip_ansi(text):
        col += char_display_width(ch, col)
    return col


def clip_ansi_line(text: str, max_cols: int) -> str:
    """Trim a styled line to at most ``max_cols`` display columns.

    Escape sequences are kept even past the cut, so a trailing reset still
    applies. Tabs become spaces up to their stop.
    """
    if max_cols <= 0:
        return ""
    out: list[str] = []
    col = 0
    for index, part in enumerate(_ESCAPE_SPLIT_RE.split(text)):
        if index % 2:
            out.append(part)
            continue
        for ch in part:
            width = char_display_width(ch, col)
            if col + width > max_cols:
                col = max_cols
                break
            out.append(" " * width if ch == "\t" else ch)
            col += width
    return "".join(out)


def pad_ansi_line(text: str, width: int) -> str:
    """Clip ``text`` to ``width`` columns and right-pad it with spaces."""
    clipped = clip_ansi_line(text, width)
    return clipped + " " * max(0, width - display_width(clipped))
