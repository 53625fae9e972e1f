"""Navigation, screen-switching, and panel operations bound in normal mode."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..items import BranchTarget, CommitTarget, StashTarget
from ..screens import LogScreenData, ShowRefsScreenData, ShowScreenData
from .stash import stash_menu

if TYPE_CHECKING:
    from ..state import State


def refresh(state: State) -> None:
    state.refresh()


def toggle_section(state: State) -> None:
    state.screen().toggle_section()


def move_up(state: State) -> None:
    state.screen().select_previous()


def move_down(state: State) -> None:
    state.screen().select_next()


def half_page_up(state: State) -> None:
    state.screen().scroll_half_page_up()


def half_page_down(state: State) -> None:
    state.screen().scroll_half_page_down()


def show_refs(state: State) -> None:
    state.push_screen(ShowRefsScreenData(state.repo_root, state.screen_style))


def log_current(state: State) -> None:
    state.push_screen(LogScreenData(state.repo_root, None, state.screen_style, limit=state.config.log_limit))


def show_selected(state: State) -> bool:
    """Open the selected commit or stash, or the log of the selected branch."""
    selected = state.screen().get_selected_item()
    target = selected.target_data if selected is not None else None
    if isinstance(target, CommitTarget):
        state.push_screen(ShowScreenData(state.repo_root, target.oid, state.screen_style))
    elif isinstance(target, StashTarget):
        state.push_screen(ShowScreenData(state.repo_root, target.commit, state.screen_style))
    elif isinstance(target, BranchTarget):
        state.push_screen(LogScreenData(state.repo_root, target.name, state.screen_style, limit=state.config.log_limit))
    else:
        return False
    return True


def open_stash_menu(state: State) -> None:
    state.open_menu(stash_menu())


def toggle_help(state: State) -> None:
    state.show_help = not state.show_help


def close_screen(state: State) -> None:
    state.close_screen()


def dismiss(state: State) -> bool:
    """Close the help panel; nothing else is open in normal mode."""
    if not state.show_help:
        return False
    state.show_help = False
    return True
