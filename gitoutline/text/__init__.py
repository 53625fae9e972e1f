"""Styled text model and the ANSI display decoder."""

from __future__ import annotations

from .decode import decode_display
from .line import Line, Span
from .style import Style, apply_sgr, style_from_sgr

__all__ = [
    "Line",
    "Span",
    "Style",
    "apply_sgr",
    "decode_display",
    "style_from_sgr",
]
