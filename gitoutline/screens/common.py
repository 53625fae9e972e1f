"""Item builders shared by several screen kinds."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from ..git.diff import FileDiff
from ..highlight import DEFAULT_STYLE, colorize_diff, sanitize_terminal_text
from ..items import DeltaTarget, HunkTarget, Item, blank_line, item_hash
from ..ui_theme import DEFAULT_THEME, UITheme


@dataclass(frozen=True)
class ScreenStyle:
    """Palette plus diff highlighting options handed to every provider."""

    theme: UITheme = DEFAULT_THEME
    diff_style: str = DEFAULT_STYLE
    no_color: bool = False


def display_field(text: str) -> str:
    """Repository text (paths, subjects, ref names) made safe for one display line.

    Control bytes are shown escaped so they can neither reach the terminal nor
    be taken for styling.
    """
    return sanitize_terminal_text(text).replace("\r", "\\r").replace("\n", "\\n")


def paint(text: str, sgr: str, theme: UITheme) -> str:
    if not sgr:
        return text
    return f"{sgr}{text}{theme.reset}"


def section_header(key: str, title: str, theme: UITheme, *, depth: int = 0) -> Item:
    return Item(
        id=item_hash("section", key),
        display=title,
        style=theme.section_header,
        depth=depth,
        section=True,
        section_key=key,
    )


def join_sections(sections: Iterable[list[Item]]) -> list[Item]:
    """Concatenate non-empty sections with a blank separator between them."""
    items: list[Item] = []
    for section in sections:
        if not section:
            continue
        if items:
            items.append(blank_line())
        items.extend(section)
    return items


def file_diff_items(
    files: Iterable[FileDiff],
    scope: str,
    style: ScreenStyle,
    *,
    depth: int = 0,
    staged: bool = False,
) -> list[Item]:
    """One collapsible item per file followed by one item per hunk.

    ``scope`` namespaces ids and collapse keys so the same path can appear in
    both the staged and unstaged sections without sharing collapse state.
    """
    theme = style.theme
    items: list[Item] = []
    for diff in files:
        key = f"{scope}:{diff.path}"
        display = f"{paint(f'{diff.status:<10}', theme.change_kind, theme)} {paint(display_field(diff.label), theme.file_header, theme)}"
        items.append(
            Item(
                id=item_hash("file", key),
                display=display,
                depth=depth,
                section=True,
                section_key=key,
                target_data=DeltaTarget(old_path=diff.old_path, new_path=diff.new_path, status=diff.status),
            )
        )
        for index, hunk in enumerate(diff.hunks):
            items.append(
                Item(
                    id=item_hash("hunk", key, index, hunk.header),
                    display=colorize_diff(hunk.text, style.diff_style, no_color=style.no_color),
                    depth=depth + 1,
                    target_data=HunkTarget(path=diff.path, header=hunk.header, index=index, staged=staged),
                )
            )
    return items
