"""Line index: map visible items onto rendered-line offsets.

One item may render several lines (a diff hunk), so scrolling works in line
space while navigation works in item space. ``LineEntry`` bridges the two.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from typing import NamedTuple

from ..items import Item


class LineEntry(NamedTuple):
    line_offset: int
    item_index: int
    item: Item
    line_count: int

    @property
    def end(self) -> int:
        """Offset one past this item's last rendered line."""
        return self.line_offset + self.line_count


def build_line_index(
    visible: Iterable[tuple[int, Item]],
    line_count: Callable[[int, Item], int],
) -> list[LineEntry]:
    """Accumulate per-item line counts into cumulative offsets."""
    entries: list[LineEntry] = []
    offset = 0
    for index, item in visible:
        count = line_count(index, item)
        entries.append(LineEntry(offset, index, item, count))
        offset += count
    return entries


def total_line_count(entries: Sequence[LineEntry]) -> int:
    return entries[-1].end if entries else 0
