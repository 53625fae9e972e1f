"""Persistent JSON config helpers.

Reads the UI theme name, diff style, and refresh/limit preferences. All
access is defensive: malformed or missing config falls back to defaults.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path

from platformdirs import user_config_dir

from .highlight import DEFAULT_STYLE
from .ui_theme import DEFAULT_THEME, normalize_theme_name

logger = logging.getLogger(__name__)

APP_NAME = "gitoutline"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME

DEFAULT_RECENT_COMMITS_LIMIT = 10
DEFAULT_LOG_LIMIT = 256


@dataclass(frozen=True)
class GeneralConfig:
    theme: str = DEFAULT_THEME.name
    diff_style: str = DEFAULT_STYLE
    refresh_on_file_change: bool = True
    recent_commits_limit: int = DEFAULT_RECENT_COMMITS_LIMIT
    log_limit: int = DEFAULT_LOG_LIMIT


def load_config(path: Path | None = None) -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    config_path = CONFIG_PATH if path is None else path
    try:
        data = json.loads(config_path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return {}
    except (OSError, ValueError) as exc:
        logger.warning("Ignoring unreadable config %s: %s", config_path, exc)
        return {}
    return data if isinstance(data, dict) else {}


def _coerce_nonnegative_int(value: object, default: int) -> int:
    """Booleans and non-integers are invalid and fall back to ``default``."""
    if isinstance(value, bool) or not isinstance(value, int):
        return default
    return max(0, value)


def load_general_config(path: Path | None = None) -> GeneralConfig:
    data = load_config(path)

    refresh = data.get("refresh_on_file_change")
    diff_style = data.get("diff_style")
    return GeneralConfig(
        theme=normalize_theme_name(data.get("theme") if isinstance(data.get("theme"), str) else None),
        diff_style=diff_style if isinstance(diff_style, str) and diff_style else DEFAULT_STYLE,
        refresh_on_file_change=refresh if isinstance(refresh, bool) else True,
        recent_commits_limit=_coerce_nonnegative_int(data.get("recent_commits_limit"), DEFAULT_RECENT_COMMITS_LIMIT),
        log_limit=max(1, _coerce_nonnegative_int(data.get("log_limit"), DEFAULT_LOG_LIMIT)),
    )


