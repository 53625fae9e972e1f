"""Screen engine: item visibility, line index, navigation, and rendering."""

from __future__ import annotations

from .line_index import LineEntry, build_line_index, total_line_count
from .screen import TRUNCATION_MARKER, ItemSource, Screen, ScreenData, UiLine
from .visibility import has_subtree, iter_visible_items

__all__ = [
    "ItemSource",
    "LineEntry",
    "Screen",
    "ScreenData",
    "TRUNCATION_MARKER",
    "UiLine",
    "build_line_index",
    "has_subtree",
    "iter_visible_items",
    "total_line_count",
]
