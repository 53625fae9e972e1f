"""Compose full terminal frames and write them out."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

from .buffer import Buffer, Rect
from .panel import bottom_panel_lines, fit_panel

if TYPE_CHECKING:
    from ..state import State


def compose_frame(state: State, width: int, height: int) -> Buffer:
    """Paint the active screen above the bottom panel into a fresh buffer."""
    buf = Buffer(width, height)
    panel = fit_panel(bottom_panel_lines(state, width), height)
    screen_height = height - len(panel)

    screen = state.screen()
    screen.set_size((width, screen_height))
    screen.render(Rect(0, 0, width, screen_height), buf)

    for offset, line in enumerate(panel):
        buf.set_line(0, screen_height + offset, line, width)
    return buf


def write_frame(buf: Buffer, fd: int) -> None:
    """Clear, home the cursor, and write every row in one ``os.write`` call."""
    out: list[str] = ["\033[H\033[J"]
    out.append("\r\n".join(buf.to_ansi_rows()))
    os.write(fd, "".join(out).encode("utf-8", errors="replace"))
