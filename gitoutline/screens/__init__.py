"""Item providers, one per screen kind."""

from __future__ import annotations

from .common import ScreenStyle
from .log import LogScreenData
from .show import ShowScreenData
from .show_refs import ShowRefsScreenData
from .status import StatusScreenData

__all__ = [
    "LogScreenData",
    "ScreenStyle",
    "ShowRefsScreenData",
    "ShowScreenData",
    "StatusScreenData",
]
