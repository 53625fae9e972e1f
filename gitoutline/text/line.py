"""Styled spans and lines produced by the text decoder."""

from __future__ import annotations

from dataclasses import dataclass

from ..ansi import char_display_width
from .style import Style


@dataclass(frozen=True)
class Span:
    text: str
    style: Style = Style()

    def width(self) -> int:
        col = 0
        for ch in self.text:
            col += char_display_width(ch, col)
        return col


@dataclass(frozen=True)
class Line:
    """One rendered terminal line made of styled spans."""

    spans: tuple[Span, ...] = ()

    def width(self) -> int:
        return sum(span.width() for span in self.spans)

    def plain(self) -> str:
        return "".join(span.text for span in self.spans)

    def with_span(self, span: Span) -> Line:
        return Line(self.spans + (span,))
