"""Diff highlighting and terminal-text sanitization.

Hunk bodies are colorized with Pygments' diff lexer so the screen decoder
receives SGR-styled text. Control bytes from repository content are escaped
first so they can never reach the terminal or confuse the decoder.
"""

from __future__ import annotations

import re
from functools import lru_cache

from pygments import highlight as pygments_highlight
from pygments.formatters import Terminal256Formatter
from pygments.lexers import DiffLexer
from pygments.util import ClassNotFound

DEFAULT_STYLE = "monokai"

_CONTROL_RE = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\x7f-\x9f]")


def sanitize_terminal_text(source: str) -> str:
    """Escape terminal control bytes to avoid side effects (bell, cursor moves, etc.)."""
    if _CONTROL_RE.search(source) is None:
        return source

    out: list[str] = []
    for ch in source:
        code = ord(ch)
        if ch in {"\n", "\r", "\t"}:
            out.append(ch)
            continue
        # C0 controls + DEL + C1 controls.
        if code < 32 or code == 127 or 0x80 <= code <= 0x9F:
            out.append(f"\\x{code:02x}")
            continue
        out.append(ch)
    return "".join(out)


@lru_cache(maxsize=8)
def _formatter_for_style(style: str) -> Terminal256Formatter:
    try:
        return Terminal256Formatter(style=style)
    except ClassNotFound:
        return Terminal256Formatter(style=DEFAULT_STYLE)


def colorize_diff(text: str, style: str = DEFAULT_STYLE, *, no_color: bool = False) -> str:
    """Return ``text`` (unified diff lines) sanitized and, unless disabled, colorized."""
    safe = sanitize_terminal_text(text)
    if no_color or not safe:
        return safe
    rendered = pygments_highlight(safe, DiffLexer(), _formatter_for_style(style))
    # Pygments always terminates output with a newline.
    if not safe.endswith("\n") and rendered.endswith("\n"):
        rendered = rendered[:-1]
    return rendered
