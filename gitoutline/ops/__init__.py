"""Operations and the normal-mode key bindings that trigger them."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..input import KeyComboBinding, KeyComboRegistry, normalize_key
from . import core
from .stash import stash_menu

if TYPE_CHECKING:
    from ..state import State


def build_normal_registry(state: State) -> KeyComboRegistry:
    """Bind every normal-mode key of ``state`` to its operation."""

    def bind(combos: tuple[str, ...], op, description: str) -> KeyComboBinding:
        return KeyComboBinding(combos, lambda: op(state), description)

    return KeyComboRegistry(normalize_key).register_bindings(
        bind(("g",), core.refresh, "Refresh"),
        bind(("TAB",), core.toggle_section, "Toggle section"),
        bind(("k", "p", "UP"), core.move_up, "Move up"),
        bind(("j", "n", "DOWN"), core.move_down, "Move down"),
        bind(("CTRL_U",), core.half_page_up, "Half page up"),
        bind(("CTRL_D",), core.half_page_down, "Half page down"),
        bind(("y",), core.show_refs, "Show refs"),
        bind(("l",), core.log_current, "Log current"),
        bind(("ENTER",), core.show_selected, "Show"),
        bind(("z",), core.open_stash_menu, "Stash"),
        bind(("h", "?"), core.toggle_help, "Help"),
        bind(("q",), core.close_screen, "Quit / close"),
        bind(("ESC",), core.dismiss, "Close panel"),
    )


__all__ = ["build_normal_registry", "core", "stash_menu"]
