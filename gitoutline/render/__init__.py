"""Cell buffer, bottom panel, and frame output for the terminal view."""

from __future__ import annotations

from .buffer import Buffer, Cell, Rect
from .frame import compose_frame, write_frame
from .panel import bottom_panel_height, bottom_panel_lines

__all__ = [
    "Buffer",
    "Cell",
    "Rect",
    "bottom_panel_height",
    "bottom_panel_lines",
    "compose_frame",
    "write_frame",
]
