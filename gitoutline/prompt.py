"""Single-line text prompt shown in the bottom panel."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .state import State

PromptAction = Callable[["State", str], None]

SUBMIT = "submit"
CANCEL = "cancel"


@dataclass
class Prompt:
    label: str
    on_submit: PromptAction
    default: str | None = None
    text: str = ""

    def heading(self) -> str:
        if self.default:
            return f"{self.label} (default {self.default}): "
        return f"{self.label}: "

    def value(self) -> str:
        """Entered text, or the default when nothing was typed."""
        if not self.text and self.default is not None:
            return self.default
        return self.text

    def handle_key(self, key: str) -> str | None:
        """Apply one key; returns ``SUBMIT``/``CANCEL`` when the prompt is done."""
        if key == "ENTER":
            return SUBMIT
        if key == "ESC":
            return CANCEL
        if key == "BACKSPACE":
            self.text = self.text[:-1]
            return None
        if len(key) == 1 and key.isprintable():
            self.text += key
        return None
