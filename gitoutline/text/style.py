"""Terminal cell styles and SGR parsing.

``Style`` fields left as ``None`` are "unset" so styles can be layered:
``base.patch(over)`` keeps every attribute ``over`` does not set.
"""

from __future__ import annotations

from dataclasses import dataclass, fields, replace

from ..ansi import SGR_RE
from ..errors import DisplayDecodeError


@dataclass(frozen=True)
class Style:
    """Foreground/background colors (SGR parameter strings) plus modifiers."""

    fg: str | None = None
    bg: str | None = None
    bold: bool | None = None
    dim: bool | None = None
    italic: bool | None = None
    underline: bool | None = None
    reverse: bool | None = None

    def patch(self, other: Style) -> Style:
        """Return a copy with every attribute set on ``other`` applied."""
        overrides = {
            f.name: getattr(other, f.name)
            for f in fields(other)
            if getattr(other, f.name) is not None
        }
        return replace(self, **overrides) if overrides else self

    @property
    def is_empty(self) -> bool:
        return all(getattr(self, f.name) is None for f in fields(self))

    def to_sgr(self) -> str:
        """Render a full SGR sequence that resets first, then applies this style."""
        params = ["0"]
        if self.bold:
            params.append("1")
        if self.dim:
            params.append("2")
        if self.italic:
            params.append("3")
        if self.underline:
            params.append("4")
        if self.reverse:
            params.append("7")
        if self.fg:
            params.append(self.fg)
        if self.bg:
            params.append(self.bg)
        return f"\033[{';'.join(params)}m"


def _extended_color(codes: list[int], index: int) -> tuple[str, int]:
    """Parse a ``38;5;n`` / ``38;2;r;g;b`` color starting at ``codes[index]``.

    Returns the color parameter string (without the leading 38/48) and the
    number of codes consumed, including the introducer.
    """
    mode = codes[index + 1] if index + 1 < len(codes) else None
    if mode == 5:
        if index + 2 >= len(codes) or not 0 <= codes[index + 2] <= 255:
            raise DisplayDecodeError("malformed 256-color SGR parameter")
        return f"5;{codes[index + 2]}", 3
    if mode == 2:
        channels = codes[index + 2 : index + 5]
        if len(channels) != 3 or any(not 0 <= c <= 255 for c in channels):
            raise DisplayDecodeError("malformed truecolor SGR parameter")
        return "2;" + ";".join(str(c) for c in channels), 5
    raise DisplayDecodeError(f"unsupported extended color mode: {mode!r}")


def apply_sgr(style: Style, params_text: str) -> Style:
    """Apply the parameters of one SGR sequence (``ESC [ params m``) to ``style``."""
    codes = [int(part) if part else 0 for part in params_text.split(";")] if params_text else [0]
    i = 0
    while i < len(codes):
        code = codes[i]
        if code in (38, 48):
            color, consumed = _extended_color(codes, i)
            if code == 38:
                style = replace(style, fg=f"38;{color}")
            else:
                style = replace(style, bg=f"48;{color}")
            i += consumed
            continue
        if code == 0:
            style = Style()
        elif code == 1:
            style = replace(style, bold=True)
        elif code == 2:
            style = replace(style, dim=True)
        elif code == 3:
            style = replace(style, italic=True)
        elif code == 4:
            style = replace(style, underline=True)
        elif code == 7:
            style = replace(style, reverse=True)
        elif code == 22:
            style = replace(style, bold=False, dim=False)
        elif code == 23:
            style = replace(style, italic=False)
        elif code == 24:
            style = replace(style, underline=False)
        elif code == 27:
            style = replace(style, reverse=False)
        elif 30 <= code <= 37 or 90 <= code <= 97 or code == 39:
            style = replace(style, fg=str(code))
        elif 40 <= code <= 47 or 100 <= code <= 107 or code == 49:
            style = replace(style, bg=str(code))
        # Blink, conceal and friends have no cell representation here.
        i += 1
    return style


def style_from_sgr(sequence: str) -> Style:
    """Parse a palette entry made of zero or more SGR sequences into a ``Style``.

    The empty string yields an empty (fully unset) style. A leading reset is
    treated as "start from nothing" rather than an explicit attribute.
    """
    style = Style()
    pos = 0
    while pos < len(sequence):
        match = SGR_RE.match(sequence, pos)
        if match is None:
            raise DisplayDecodeError(f"not an SGR sequence: {sequence[pos:pos + 12]!r}")
        style = apply_sgr(style, match.group(1))
        pos = match.end()
    return style
