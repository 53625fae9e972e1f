"""UI theme definitions and selection helpers.

Themes are ANSI palettes consumed as opaque SGR strings. The screen engine
reads the two selection backgrounds; screens read the per-category entries.
Diff-body coloring comes from the Pygments style, a separate setting.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by screens and renderers."""

    name: str
    reset: str
    selection_bg: str
    dim_selection_bg: str
    section_header: str
    branch: str
    remote: str
    tag: str
    commit_hash: str
    ref_decoration: str
    file_header: str
    hunk_header: str
    change_kind: str
    untracked_file: str
    stash: str
    muted: str
    help_heading: str
    help_key: str
    help_dim: str
    divider: str
    error: str
    command: str


DEFAULT_THEME = UITheme(
    name="default",
    reset="\033[0m",
    selection_bg="\033[48;5;238m",
    dim_selection_bg="\033[48;5;235m",
    section_header="\033[1;38;5;179m",
    branch="\033[38;5;114m",
    remote="\033[38;5;203m",
    tag="\033[38;5;221m",
    commit_hash="\033[38;5;172m",
    ref_decoration="\033[38;5;110m",
    file_header="\033[38;5;140m",
    hunk_header="\033[38;5;111m",
    change_kind="\033[38;5;250m",
    untracked_file="\033[38;5;42m",
    stash="\033[38;5;110m",
    muted="\033[2;38;5;250m",
    help_heading="\033[1;38;5;81m",
    help_key="\033[38;5;229m",
    help_dim="\033[2;38;5;250m",
    divider="\033[2m",
    error="\033[1;38;5;203m",
    command="\033[38;5;245m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    reset="\033[0m",
    selection_bg="\033[48;5;24m",
    dim_selection_bg="\033[48;5;17m",
    section_header="\033[1;38;5;45m",
    branch="\033[38;5;117m",
    remote="\033[38;5;215m",
    tag="\033[38;5;153m",
    commit_hash="\033[38;5;73m",
    ref_decoration="\033[38;5;84m",
    file_header="\033[38;5;153m",
    hunk_header="\033[38;5;39m",
    change_kind="\033[38;5;110m",
    untracked_file="\033[38;5;84m",
    stash="\033[38;5;117m",
    muted="\033[2;38;5;110m",
    help_heading="\033[1;38;5;45m",
    help_key="\033[38;5;153m",
    help_dim="\033[2;38;5;110m",
    divider="\033[2;38;5;31m",
    error="\033[1;38;5;215m",
    command="\033[38;5;110m",
)

PLAIN_THEME = UITheme(
    name="plain",
    reset="",
    selection_bg="\033[7m",
    dim_selection_bg="",
    section_header="",
    branch="",
    remote="",
    tag="",
    commit_hash="",
    ref_decoration="",
    file_header="",
    hunk_header="",
    change_kind="",
    untracked_file="",
    stash="",
    muted="",
    help_heading="",
    help_key="",
    help_dim="",
    divider="",
    error="",
    command="",
)

_THEMES: dict[str, UITheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    OCEAN_THEME.name: OCEAN_THEME,
}


def available_theme_names() -> tuple[str, ...]:
    """Return selectable non-plain theme names."""
    return tuple(sorted(_THEMES.keys()))


def normalize_theme_name(name: str | None) -> str:
    """Return a valid theme name, falling back to default."""
    if not name:
        return DEFAULT_THEME.name
    candidate = str(name).strip().lower()
    if candidate in _THEMES:
        return candidate
    return DEFAULT_THEME.name


def resolve_theme(name: str | None, *, no_color: bool = False) -> UITheme:
    """Return concrete theme for requested name and color mode."""
    if no_color:
        return PLAIN_THEME
    return _THEMES[normalize_theme_name(name)]


__all__ = [
    "UITheme",
    "DEFAULT_THEME",
    "OCEAN_THEME",
    "PLAIN_THEME",
    "available_theme_names",
    "normalize_theme_name",
    "resolve_theme",
]
