"""Log screen: commits reachable from one revision."""

from __future__ import annotations

from pathlib import Path

from ..git.history import read_log
from ..items import Item, item_hash
from .common import ScreenStyle
from .status import commit_item


class LogScreenData:
    def __init__(self, repo_root: Path, rev: str | None = None, style: ScreenStyle | None = None, *, limit: int = 256) -> None:
        self.repo_root = repo_root
        self.rev = rev
        self.style = style or ScreenStyle()
        self.limit = limit

    def items(self) -> list[Item]:
        commits = read_log(self.repo_root, self.rev, self.limit)
        if not commits:
            theme = self.style.theme
            return [Item(id=item_hash("log", "empty"), display="No commits", style=theme.muted, unselectable=True)]
        return [commit_item(commit, self.style) for commit in commits]
