"""Transient operation menus with toggleable command-line arguments."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .state import State

MenuAction = Callable[["State", list[str]], None]


@dataclass
class Arg:
    """A flag the user can switch on or off with ``-<key>``."""

    key: str
    flag: str
    description: str
    default: bool = False
    enabled: bool = field(init=False)

    def __post_init__(self) -> None:
        self.enabled = self.default


@dataclass(frozen=True)
class MenuEntry:
    key: str
    label: str
    action: MenuAction


@dataclass
class Menu:
    """Pending menu: entries run an action, ``-`` followed by a key toggles an arg."""

    title: str
    entries: list[MenuEntry]
    args: list[Arg] = field(default_factory=list)
    awaiting_arg: bool = False

    def enabled_args(self) -> list[str]:
        return [arg.flag for arg in self.args if arg.enabled]

    def entry_for(self, key: str) -> MenuEntry | None:
        for entry in self.entries:
            if entry.key == key:
                return entry
        return None

    def toggle_arg(self, key: str) -> bool:
        for arg in self.args:
            if arg.key == key:
                arg.enabled = not arg.enabled
                return True
        return False
