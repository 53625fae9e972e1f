"""Screen: a scrollable, collapsible outline of items.

Owns one item list plus its presentation state (cursor, scroll, collapse
set) and the derived per-line view. Navigation and scrolling never fail;
they saturate at the ends and clamp the viewport instead.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import NamedTuple, Protocol, Union

from ..errors import GitOutlineError, ProviderError
from ..items import Item
from ..render.buffer import Buffer, Rect
from ..text import Line, Span, decode_display, style_from_sgr
from ..ui_theme import DEFAULT_THEME, UITheme
from .line_index import LineEntry, build_line_index, total_line_count
from .visibility import has_subtree, iter_visible_items

logger = logging.getLogger(__name__)

TRUNCATION_MARKER = "…"


class ScreenData(Protocol):
    """Produces the current item list for one kind of screen."""

    def items(self) -> list[Item]: ...


ItemSource = Union[ScreenData, Callable[[], Sequence[Item]]]


class UiLine(NamedTuple):
    """One rendered line together with the item that owns it."""

    item_index: int
    item: Item
    line: Line
    truncated: bool


class Screen:
    """Cursor, scroll, and collapse state over a refreshable item list."""

    def __init__(self, size: tuple[int, int], data: ItemSource, *, theme: UITheme = DEFAULT_THEME) -> None:
        self.size = (max(0, size[0]), max(0, size[1]))
        self.theme = theme
        self.cursor = 0
        self.scroll = 0
        self.collapsed: set[object] = set()
        self._data = data
        self._decoded: dict[tuple[str, str], list[Line]] = {}
        self.items: list[Item] = self._capture()
        self.ui_lines: list[UiLine] = []
        self._line_index: list[LineEntry] = []
        self._position_by_index: dict[int, int] = {}
        self._rebuild()
        self._settle_cursor()

    # -- derived view -------------------------------------------------------

    def _capture(self) -> list[Item]:
        produce = getattr(self._data, "items", None)
        try:
            produced = produce() if callable(produce) else self._data()
        except ProviderError:
            raise
        except (GitOutlineError, OSError) as exc:
            raise ProviderError(f"could not load screen items: {exc}") from exc
        return list(produced)

    def _decode(self, item: Item) -> list[Line]:
        key = (item.display, item.style)
        lines = self._decoded.get(key)
        if lines is None:
            lines = decode_display(item.display, item.style)
            self._decoded[key] = lines
        return lines

    def _derive(self, items: list[Item]) -> tuple[list[LineEntry], list[UiLine]]:
        visible = list(iter_visible_items(items, self.collapsed))
        decoded = {index: self._decode(item) for index, item in visible}
        line_index = build_line_index(visible, lambda index, _item: len(decoded[index]))

        ui_lines: list[UiLine] = []
        for entry in line_index:
            lines = decoded[entry.item_index]
            elided = self.is_collapsed(entry.item) and has_subtree(items, entry.item_index)
            last = len(lines) - 1
            for n, line in enumerate(lines):
                truncated = elided and n == last and line.width() > 0
                if truncated:
                    line = line.with_span(Span(TRUNCATION_MARKER))
                ui_lines.append(UiLine(entry.item_index, entry.item, line, truncated))
        return line_index, ui_lines

    def _rebuild(self, items: list[Item] | None = None) -> None:
        target = self.items if items is None else items
        line_index, ui_lines = self._derive(target)
        self.items = target
        self._line_index = line_index
        self._position_by_index = {entry.item_index: pos for pos, entry in enumerate(line_index)}
        self.ui_lines = ui_lines
        self._clamp_scroll()

    def _clamp_scroll(self) -> None:
        self.scroll = max(0, min(self.scroll, self.total_lines()))

    def _settle_cursor(self) -> None:
        """Move the cursor onto a visible selectable item, preferring later ones."""
        self.clamp_cursor()
        position = self._position_by_index.get(self.cursor)
        if position is not None and not self._line_index[position].item.unselectable:
            return

        before: int | None = None
        for entry in self._line_index:
            if entry.item.unselectable:
                continue
            if entry.item_index >= self.cursor:
                self.cursor = entry.item_index
                return
            before = entry.item_index
        if before is not None:
            self.cursor = before

    # -- accessors ----------------------------------------------------------

    def visible_items(self) -> list[tuple[int, Item]]:
        return [(entry.item_index, entry.item) for entry in self._line_index]

    def line_index(self) -> list[LineEntry]:
        return list(self._line_index)

    def total_lines(self) -> int:
        return total_line_count(self._line_index)

    def get_selected_item(self) -> Item | None:
        if not self.items:
            return None
        return self.items[self.cursor]

    def is_collapsed(self, item: Item) -> bool:
        return item.section and item.collapse_key in self.collapsed

    # -- mutators -----------------------------------------------------------

    def update(self) -> None:
        """Re-run the data provider and rebuild every derived view.

        A provider failure raises ``ProviderError`` and leaves the screen as
        it was. Collapse state survives because it is keyed by section
        identity, not position.
        """
        items = self._capture()
        previous_cache = self._decoded
        self._decoded = {}
        try:
            self._rebuild(items)
        except Exception:
            self._decoded = previous_cache
            raise
        self._settle_cursor()
        logger.debug("Screen refreshed: %d items, %d lines", len(self.items), len(self.ui_lines))

    def set_size(self, size: tuple[int, int]) -> None:
        self.size = (max(0, size[0]), max(0, size[1]))
        self._clamp_scroll()

    def clamp_cursor(self) -> None:
        self.cursor = max(0, min(self.cursor, len(self.items) - 1))

    def select_next(self) -> None:
        for entry in self._line_index:
            if entry.item_index > self.cursor and not entry.item.unselectable:
                self.cursor = entry.item_index
                break
        self.scroll_fit_end()
        self.scroll_fit_start()

    def select_previous(self) -> None:
        for entry in reversed(self._line_index):
            if entry.item_index < self.cursor and not entry.item.unselectable:
                self.cursor = entry.item_index
                break
        self.scroll_fit_start()

    def toggle_section(self) -> None:
        selected = self.get_selected_item()
        if selected is None:
            return
        if selected.section:
            key = selected.collapse_key
            if key in self.collapsed:
                self.collapsed.remove(key)
            else:
                self.collapsed.add(key)
        self._rebuild()
        self._settle_cursor()

    def scroll_half_page_up(self) -> None:
        self.scroll = max(0, self.scroll - self.size[1] // 2)

    def scroll_half_page_down(self) -> None:
        self.scroll = min(self.scroll + self.size[1] // 2, self.total_lines())

    # -- scroll fitting -----------------------------------------------------

    def _context_start_index(self) -> int:
        """Return the top of the consecutive ancestor chain ending at the cursor.

        Walks back while each preceding item is exactly one level shallower.
        Ancestors separated from the cursor by earlier siblings are not
        included, so fitting never pushes the cursor off a short viewport.
        """
        index = self.cursor
        while index > 0 and self.items[index - 1].depth == self.items[index].depth - 1:
            index -= 1
        return index

    def scroll_fit_start(self) -> None:
        """Scroll up so the cursor's immediate context starts on screen."""
        if not self.items:
            return
        position = self._position_by_index.get(self._context_start_index())
        if position is None:
            return
        start_line = self._line_index[position].line_offset
        if start_line < self.scroll:
            self.scroll = start_line

    def scroll_fit_end(self) -> None:
        """Scroll down so the cursor item and its visible subtree end on screen."""
        position = self._position_by_index.get(self.cursor)
        if position is None:
            return
        depth = self._line_index[position].item.depth
        last_end = self._line_index[position].end
        for entry in self._line_index[position + 1 :]:
            if entry.item.depth <= depth:
                break
            last_end = entry.end

        height = self.size[1]
        if last_end > self.scroll + height:
            self.scroll = max(0, last_end - height)

    # -- rendering ----------------------------------------------------------

    def render(self, area: Rect, buf: Buffer) -> None:
        """Paint the visible line window into ``buf`` at ``area``.

        The cursor row gets the selection background; following rows whose
        items are nested deeper than the cursor item get the dim background,
        up to the first sibling-or-shallower row.
        """
        selected_style = style_from_sgr(self.theme.selection_bg)
        dim_style = style_from_sgr(self.theme.dim_selection_bg)

        highlight_depth: int | None = None
        window = self.ui_lines[self.scroll : self.scroll + area.height]
        for row, ui_line in enumerate(window):
            y = area.y + row
            is_cursor = ui_line.item_index == self.cursor
            if is_cursor:
                highlight_depth = ui_line.item.depth
            elif highlight_depth is not None and ui_line.item.depth <= highlight_depth:
                highlight_depth = None

            if highlight_depth is not None:
                buf.set_style(Rect(area.x, y, area.width, 1), selected_style if is_cursor else dim_style)

            buf.set_line(area.x, y, ui_line.line, area.width)
