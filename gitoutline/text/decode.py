"""Decode stored item text into styled, measurable lines.

Item display text may carry SGR escapes produced by the diff highlighter.
Anything else that starts with ESC is treated as corrupt data.
"""

from __future__ import annotations

from ..ansi import SGR_RE, TAB_STOP, char_display_width
from ..errors import DisplayDecodeError
from .line import Line, Span
from .style import Style, apply_sgr, style_from_sgr


def _split_raw_lines(text: str) -> list[str]:
    """Split on newlines; a trailing newline does not open another line."""
    raw_lines = text.split("\n")
    if len(raw_lines) > 1 and raw_lines[-1] == "":
        raw_lines.pop()
    return [raw.rstrip("\r") for raw in raw_lines]


def _decode_line(raw: str, style: Style, base: Style) -> tuple[Line, Style]:
    spans: list[Span] = []
    chunk: list[str] = []
    col = 0

    def flush() -> None:
        if chunk:
            spans.append(Span("".join(chunk), base.patch(style)))
            chunk.clear()

    i = 0
    n = len(raw)
    while i < n:
        ch = raw[i]
        if ch == "\x1b":
            match = SGR_RE.match(raw, i)
            if match is None:
                raise DisplayDecodeError(f"unsupported escape sequence: {raw[i:i + 12]!r}")
            flush()
            style = apply_sgr(style, match.group(1))
            i = match.end()
            continue
        if ch == "\t":
            width = TAB_STOP - (col % TAB_STOP)
            chunk.append(" " * width)
            col += width
        else:
            chunk.append(ch)
            col += char_display_width(ch, col)
        i += 1
    flush()
    return Line(tuple(spans)), style


def decode_display(text: str, patch: str | Style = "") -> list[Line]:
    """Turn raw display text plus a semantic style patch into styled lines.

    ``patch`` (a palette SGR string or a ``Style``) sits underneath embedded
    escapes: attributes the text sets explicitly win. Style state carries
    across newlines like it would on a terminal. Empty text decodes to a single
    empty line so every item occupies at least one row.
    """
    base = patch if isinstance(patch, Style) else style_from_sgr(patch)
    style = Style()
    lines: list[Line] = []
    for raw in _split_raw_lines(text):
        line, style = _decode_line(raw, style, base)
        lines.append(line)
    return lines
