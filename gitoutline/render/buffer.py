"""Cell buffer the screen engine paints into.

A ``Buffer`` is a width x height grid of styled cells. Widgets write into it
through ``set_style``/``set_stringn``; the runtime turns it into ANSI rows.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..ansi import char_display_width
from ..text import Line, Style

WIDE_CONTINUATION = ""


@dataclass(frozen=True)
class Rect:
    x: int
    y: int
    width: int
    height: int

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def bottom(self) -> int:
        return self.y + self.height

    def intersection(self, other: Rect) -> Rect:
        x = max(self.x, other.x)
        y = max(self.y, other.y)
        right = min(self.right, other.right)
        bottom = min(self.bottom, other.bottom)
        return Rect(x, y, max(0, right - x), max(0, bottom - y))


@dataclass
class Cell:
    symbol: str = " "
    style: Style = Style()


class Buffer:
    """Grid of cells addressed by absolute ``(x, y)`` coordinates."""

    def __init__(self, width: int, height: int) -> None:
        self.area = Rect(0, 0, max(0, width), max(0, height))
        self._rows: list[list[Cell]] = [[Cell() for _ in range(self.area.width)] for _ in range(self.area.height)]

    def cell(self, x: int, y: int) -> Cell:
        return self._rows[y][x]

    def set_style(self, area: Rect, style: Style) -> None:
        """Layer ``style`` over every cell of ``area`` (clipped to the buffer)."""
        target = area.intersection(self.area)
        for y in range(target.y, target.bottom):
            row = self._rows[y]
            for x in range(target.x, target.right):
                row[x].style = row[x].style.patch(style)

    def set_stringn(self, x: int, y: int, text: str, max_width: int, style: Style) -> int:
        """Write at most ``max_width`` columns of ``text`` starting at ``(x, y)``.

        Wide characters take two cells; a character that would straddle the
        limit is dropped. Returns the column after the last written cell.
        """
        if not 0 <= y < self.area.height or x < 0:
            return x
        limit = min(self.area.width, x + max(0, max_width))
        row = self._rows[y]
        col = x
        for ch in text:
            width = char_display_width(ch, col - x)
            if width == 0:
                if col > x:
                    row[col - 1].symbol += ch
                continue
            if col + width > limit:
                break
            row[col].symbol = ch
            row[col].style = row[col].style.patch(style)
            for extra in range(1, width):
                row[col + extra].symbol = WIDE_CONTINUATION
                row[col + extra].style = row[col + extra].style.patch(style)
            col += width
        return col

    def set_line(self, x: int, y: int, line: Line, max_width: int) -> int:
        """Write every span of ``line``, clipped to ``max_width`` columns."""
        col = x
        end = x + max_width
        for span in line.spans:
            if col >= end:
                break
            col = self.set_stringn(col, y, span.text, end - col, span.style)
        return col

    def plain_rows(self) -> list[str]:
        return ["".join(cell.symbol for cell in row) for row in self._rows]

    def styles_at(self, y: int) -> list[Style]:
        return [cell.style for cell in self._rows[y]]

    def to_ansi_rows(self) -> list[str]:
        """Render each row as text with SGR changes only where styles change."""
        rows: list[str] = []
        empty = Style()
        for row in self._rows:
            out: list[str] = []
            current = empty
            for cell in row:
                if cell.symbol == WIDE_CONTINUATION:
                    continue
                if cell.style != current:
                    out.append(cell.style.to_sgr())
                    current = cell.style
                out.append(cell.symbol)
            if current != empty:
                out.append("\033[0m")
            rows.append("".join(out))
        return rows
