"""Status screen: branch, untracked files, changes, stashes, recent commits."""

from __future__ import annotations

from pathlib import Path

from ..git.diff import read_diff
from ..git.history import CommitEntry, read_log, read_stashes
from ..git.status import BranchStatus, read_status
from ..items import CommitTarget, FileTarget, Item, StashTarget, item_hash
from .common import ScreenStyle, display_field, file_diff_items, join_sections, paint, section_header


def _plural(count: int, word: str) -> str:
    return f"{count} {word}" if count == 1 else f"{count} {word}s"


def describe_upstream(branch: BranchStatus) -> str | None:
    """Return the tracking summary line, or None when there is no upstream."""
    if branch.upstream is None:
        return None
    upstream = display_field(branch.upstream)
    if branch.upstream_gone:
        return f"Your branch is based on '{upstream}', but the upstream is gone."
    if branch.ahead and branch.behind:
        return (
            f"Your branch and '{upstream}' have diverged, "
            f"and have {branch.ahead} and {branch.behind} different commits each."
        )
    if branch.ahead:
        return f"Your branch is ahead of '{upstream}' by {_plural(branch.ahead, 'commit')}."
    if branch.behind:
        return f"Your branch is behind '{upstream}' by {_plural(branch.behind, 'commit')}."
    return f"Your branch is up to date with '{upstream}'."


class StatusScreenData:
    """Item provider for the main status screen."""

    def __init__(self, repo_root: Path, style: ScreenStyle | None = None, *, recent_commits_limit: int = 10) -> None:
        self.repo_root = repo_root
        self.style = style or ScreenStyle()
        self.recent_commits_limit = recent_commits_limit

    def items(self) -> list[Item]:
        status = read_status(self.repo_root)
        return join_sections(
            [
                self._branch_section(status.branch),
                self._untracked_section(status.untracked),
                self._changes_section("unstaged", "Unstaged changes", staged=False),
                self._changes_section("staged", "Staged changes", staged=True),
                self._stash_section(),
                self._recent_commits_section(),
            ]
        )

    def _branch_section(self, branch: BranchStatus) -> list[Item]:
        theme = self.style.theme
        if branch.detached:
            title = f"HEAD detached at {display_field(branch.detached_at or '(unknown)')}"
        else:
            title = f"On branch {display_field(branch.head or '(unknown)')}"
        items = [section_header("branch_status", title, theme)]
        upstream = describe_upstream(branch)
        if upstream is not None:
            items.append(Item(id=item_hash("branch_status", "upstream"), display=upstream, depth=1))
        return items

    def _untracked_section(self, paths: list[str]) -> list[Item]:
        if not paths:
            return []
        theme = self.style.theme
        items = [section_header("untracked", "Untracked files", theme)]
        for path in paths:
            items.append(
                Item(
                    id=item_hash("untracked", path),
                    display=display_field(path),
                    style=theme.untracked_file,
                    depth=1,
                    target_data=FileTarget(path),
                )
            )
        return items

    def _changes_section(self, key: str, title: str, *, staged: bool) -> list[Item]:
        files = read_diff(self.repo_root, staged)
        if not files:
            return []
        header = section_header(key, f"{title} ({len(files)})", self.style.theme)
        return [header, *file_diff_items(files, key, self.style, depth=1, staged=staged)]

    def _stash_section(self) -> list[Item]:
        stashes = read_stashes(self.repo_root)
        if not stashes:
            return []
        theme = self.style.theme
        items = [section_header("stashes", "Stashes", theme)]
        for stash in stashes:
            items.append(
                Item(
                    id=item_hash("stash", stash.commit),
                    display=f"{paint(stash.name, theme.stash, theme)} {display_field(stash.message)}",
                    depth=1,
                    target_data=StashTarget(index=stash.index, commit=stash.commit),
                )
            )
        return items

    def _recent_commits_section(self) -> list[Item]:
        if self.recent_commits_limit <= 0:
            return []
        commits = read_log(self.repo_root, limit=self.recent_commits_limit)
        if not commits:
            return []
        items = [section_header("recent_commits", "Recent commits", self.style.theme)]
        items.extend(commit_item(commit, self.style, depth=1) for commit in commits)
        return items


def commit_item(commit: CommitEntry, style: ScreenStyle, *, depth: int = 0) -> Item:
    theme = style.theme
    parts = [paint(commit.short, theme.commit_hash, theme)]
    if commit.refs:
        parts.append(paint(f"({display_field(commit.refs)})", theme.ref_decoration, theme))
    parts.append(display_field(commit.subject))
    return Item(
        id=item_hash("commit", commit.oid),
        display=" ".join(parts),
        depth=depth,
        target_data=CommitTarget(commit.oid),
    )
