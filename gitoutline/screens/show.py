"""Show screen: one commit's header followed by its file diffs."""

from __future__ import annotations

from pathlib import Path

from ..git.history import read_commit
from ..items import CommitTarget, Item, item_hash
from .common import ScreenStyle, display_field, file_diff_items, join_sections, paint


class ShowScreenData:
    def __init__(self, repo_root: Path, rev: str, style: ScreenStyle | None = None) -> None:
        self.repo_root = repo_root
        self.rev = rev
        self.style = style or ScreenStyle()

    def items(self) -> list[Item]:
        details = read_commit(self.repo_root, self.rev)
        theme = self.style.theme
        # Each header line is sanitized on its own so the message keeps its line breaks.
        lines = [display_field(line) for line in details.header_lines] or [f"commit {details.oid}"]
        lines[0] = paint(lines[0], theme.commit_hash, theme)
        header = Item(
            id=item_hash("show", details.oid),
            display="\n".join(lines),
            target_data=CommitTarget(details.oid),
        )
        return join_sections([[header], file_diff_items(details.files, f"show:{details.oid}", self.style)])
