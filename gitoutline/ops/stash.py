"""Stash menu: push variants plus pop/apply/drop of an existing stash."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..errors import OperationError
from ..git.status import is_something_staged, is_working_tree_empty
from ..items import StashTarget
from ..menu import Arg, Menu, MenuEntry
from ..prompt import Prompt

if TYPE_CHECKING:
    from ..state import State


def stash_args() -> list[Arg]:
    return [
        Arg("u", "--include-untracked", "Also save untracked files", default=True),
        Arg("a", "--all", "Also save untracked and ignored files"),
    ]


def stash_menu() -> Menu:
    return Menu(
        title="Stash",
        entries=[
            MenuEntry("z", "both", stash_both),
            MenuEntry("i", "index", stash_index),
            MenuEntry("w", "worktree", stash_worktree),
            MenuEntry("x", "keeping index", stash_keep_index),
            MenuEntry("p", "pop", stash_pop),
            MenuEntry("a", "apply", stash_apply),
            MenuEntry("k", "drop", stash_drop),
        ],
        args=stash_args(),
    )


def _message_args(message: str) -> list[str]:
    return ["--message", message] if message else []


def selected_stash(state: State) -> str:
    """Index of the stash under the cursor, else ``"0"``."""
    selected = state.screen().get_selected_item()
    if selected is not None and isinstance(selected.target_data, StashTarget):
        return str(selected.target_data.index)
    return "0"


def stash_both(state: State, args: list[str]) -> None:
    def submit(state: State, message: str) -> None:
        state.run_cmd(["stash", "push", *args, *_message_args(message)])

    state.open_prompt(Prompt("Stash message", submit))


def stash_index(state: State, args: list[str]) -> None:
    # --include-untracked and --all cannot be combined with --staged.
    def submit(state: State, message: str) -> None:
        state.run_cmd(["stash", "push", "--staged", *_message_args(message)])

    state.open_prompt(Prompt("Stash message", submit))


def stash_worktree(state: State, args: list[str]) -> None:
    """Stash only worktree changes by parking the index in a temporary stash."""
    if is_working_tree_empty(state.repo_root):
        raise OperationError("Cannot stash: working tree is empty")

    def submit(state: State, message: str) -> None:
        need_to_stash_index = is_something_staged(state.repo_root)
        if need_to_stash_index:
            state.run_cmd(["stash", "push", "--staged"])
        state.run_cmd(["stash", "push", *args, *_message_args(message)])
        if need_to_stash_index:
            state.run_cmd(["stash", "pop", "-q", "1"])

    state.open_prompt(Prompt("Stash message", submit))


def stash_keep_index(state: State, args: list[str]) -> None:
    def submit(state: State, message: str) -> None:
        state.run_cmd(["stash", "push", "--keep-index", *args, *_message_args(message)])

    state.open_prompt(Prompt("Stash message", submit))


def stash_pop(state: State, args: list[str]) -> None:
    state.open_prompt(
        Prompt("Pop stash", lambda state, index: state.run_cmd(["stash", "pop", "-q", index]), selected_stash(state))
    )


def stash_apply(state: State, args: list[str]) -> None:
    state.open_prompt(
        Prompt("Apply stash", lambda state, index: state.run_cmd(["stash", "apply", "-q", index]), selected_stash(state))
    )


def stash_drop(state: State, args: list[str]) -> None:
    state.open_prompt(
        Prompt("Drop stash", lambda state, index: state.run_cmd(["stash", "drop", index]), selected_stash(state))
    )
