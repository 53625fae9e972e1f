"""Key token normalization and ``--keys`` script parsing."""

from __future__ import annotations

import re

_NAMED_KEYS = {
    "tab": "TAB",
    "enter": "ENTER",
    "return": "ENTER",
    "esc": "ESC",
    "escape": "ESC",
    "up": "UP",
    "down": "DOWN",
    "left": "LEFT",
    "right": "RIGHT",
    "backspace": "BACKSPACE",
    "space": " ",
    "lt": "<",
}

_TOKEN_RE = re.compile(r"<([^<>\s]+)>")


def normalize_key(key: str) -> str:
    """Fold terminal-specific variants onto the names bindings use."""
    if key in {"ENTER_CR", "ENTER_LF"}:
        return "ENTER"
    return key


def _named_key(name: str) -> str | None:
    lowered = name.lower()
    if lowered.startswith("ctrl+") and len(lowered) == 6 and lowered[5].isalpha():
        return f"CTRL_{lowered[5].upper()}"
    return _NAMED_KEYS.get(lowered)


def parse_keys(text: str) -> list[str]:
    """Split a key script such as ``"jj<tab><ctrl+d>q"`` into key tokens.

    ``<name>`` groups map to named keys; anything unrecognized between angle
    brackets is kept as literal characters.
    """
    keys: list[str] = []
    position = 0
    while position < len(text):
        match = _TOKEN_RE.match(text, position)
        if match is not None:
            named = _named_key(match.group(1))
            if named is not None:
                keys.append(named)
                position = match.end()
                continue
        keys.append(text[position])
        position += 1
    return keys


_KEY_LABELS = {
    "TAB": "tab",
    "ENTER": "ret",
    "ESC": "esc",
    "UP": "up",
    "DOWN": "down",
    "LEFT": "left",
    "RIGHT": "right",
    "BACKSPACE": "bs",
}


def key_label(key: str) -> str:
    """Short human-readable form of a key token, e.g. ``C-d`` for ``CTRL_D``."""
    if key.startswith("CTRL_"):
        return f"C-{key[5:].lower()}"
    return _KEY_LABELS.get(key, key)
