"""Bottom panel: prompt, pending menu, help, command log, and errors."""

from __future__ import annotations

from itertools import zip_longest
from typing import TYPE_CHECKING

from ..ansi import display_width, pad_ansi_line
from ..highlight import sanitize_terminal_text
from ..input import key_label
from ..menu import Menu
from ..text import Line, decode_display
from ..ui_theme import UITheme

if TYPE_CHECKING:
    from ..input import KeyComboBinding
    from ..state import State

DIVIDER_CHAR = "─"
COLUMN_GAP = 4
MAX_CMD_OUTPUT_LINES = 5


def _paint(text: str, sgr: str, theme: UITheme) -> str:
    return f"{sgr}{text}{theme.reset}" if sgr else text


def _columns(left: list[str], right: list[str]) -> list[str]:
    if not right:
        return left
    left_width = max((display_width(row) for row in left), default=0) + COLUMN_GAP
    return [pad_ansi_line(a, left_width) + b for a, b in zip_longest(left, right, fillvalue="")]


def menu_rows(menu: Menu, theme: UITheme) -> list[str]:
    left = [_paint(menu.title, theme.help_heading, theme)]
    left.extend(f"{_paint(entry.key, theme.help_key, theme)} {entry.label}" for entry in menu.entries)
    right: list[str] = []
    if menu.args:
        right.append(_paint("Arguments", theme.help_heading, theme))
        for arg in menu.args:
            flag = _paint(f"({arg.flag})", theme.help_key if arg.enabled else theme.help_dim, theme)
            right.append(f"{_paint('-' + arg.key, theme.help_key, theme)} {arg.description} {flag}")
    return _columns(left, right)


def help_rows(bindings: list[KeyComboBinding], theme: UITheme) -> list[str]:
    rows = [_paint("Help", theme.help_heading, theme)]
    for binding in bindings:
        keys = "/".join(key_label(combo) for combo in binding.combos)
        rows.append(f"{_paint(keys, theme.help_key, theme)} {binding.description}")
    # Two columns keep the panel short on typical terminals.
    half = (len(rows) + 1) // 2
    return _columns(rows[:half], rows[half:])


def cmd_log_rows(state: State, theme: UITheme) -> list[str]:
    if not state.cmd_log:
        return []
    entry = state.cmd_log[-1]
    rows = [_paint(f"$ {entry.command}", theme.command, theme)]
    output = sanitize_terminal_text(entry.output)
    if output:
        rows.extend(output.splitlines()[-MAX_CMD_OUTPUT_LINES:])
    return rows


def bottom_panel_lines(state: State, width: int) -> list[Line]:
    """Styled panel lines, divider first; empty when there is nothing to show."""
    theme = state.screen_style.theme
    if state.prompt is not None:
        prompt = state.prompt
        rows = [_paint(prompt.heading(), theme.help_heading, theme) + sanitize_terminal_text(prompt.text)]
    elif state.pending_menu is not None:
        rows = menu_rows(state.pending_menu, theme)
    elif state.show_help:
        rows = help_rows(state.bindings(), theme)
    else:
        rows = cmd_log_rows(state, theme)
    if state.error:
        rows.append(_paint(sanitize_terminal_text(state.error), theme.error, theme))
    if not rows:
        return []

    lines = decode_display(_paint(DIVIDER_CHAR * width, theme.divider, theme)) if width > 0 else []
    for row in rows:
        lines.extend(decode_display(row))
    return lines


def fit_panel(lines: list[Line], height: int) -> list[Line]:
    """Cap the panel at half the terminal, keeping the divider and the newest rows."""
    cap = height // 2
    if len(lines) <= cap:
        return lines
    if cap <= 0:
        return []
    if cap == 1:
        return lines[-1:]
    return [lines[0], *lines[len(lines) - cap + 1 :]]


def bottom_panel_height(state: State, width: int, height: int) -> int:
    return len(fit_panel(bottom_panel_lines(state, width), height))
