"""Working-tree status: branch tracking info and porcelain change records."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path

from .commands import git_output

_BRANCH_RE = re.compile(
    r"^## (?:No commits yet on |Initial commit on )?(?P<head>.+?)"
    r"(?:\.\.\.(?P<upstream>\S+))?(?: \[(?P<track>[^\]]*)\])?$"
)
_TRACK_RE = re.compile(r"(ahead|behind) (\d+)")
DETACHED_HEAD = "HEAD (no branch)"


@dataclass
class BranchStatus:
    head: str | None
    detached: bool = False
    detached_at: str | None = None
    upstream: str | None = None
    ahead: int = 0
    behind: int = 0
    upstream_gone: bool = False


@dataclass
class StatusRecord:
    index: str
    worktree: str
    path: str

    @property
    def is_untracked(self) -> bool:
        return self.index == "?" and self.worktree == "?"


@dataclass
class WorkingTreeStatus:
    branch: BranchStatus
    records: list[StatusRecord] = field(default_factory=list)

    @property
    def untracked(self) -> list[str]:
        return [record.path for record in self.records if record.is_untracked]

    def has_worktree_changes(self) -> bool:
        return any(
            record.is_untracked or record.worktree not in {" ", "!"}
            for record in self.records
        )

    def has_staged_changes(self) -> bool:
        return any(record.index not in {" ", "?", "!"} for record in self.records)


def parse_branch_header(line: str) -> BranchStatus:
    """Parse the ``## ...`` line emitted by ``git status --branch``."""
    match = _BRANCH_RE.match(line)
    if match is None:
        return BranchStatus(head=None)
    head = match.group("head")
    if head == DETACHED_HEAD:
        return BranchStatus(head=None, detached=True)

    status = BranchStatus(head=head, upstream=match.group("upstream"))
    track = match.group("track") or ""
    if track == "gone":
        status.upstream_gone = True
    for kind, count in _TRACK_RE.findall(track):
        if kind == "ahead":
            status.ahead = int(count)
        else:
            status.behind = int(count)
    return status


def parse_porcelain_status(output: str) -> WorkingTreeStatus:
    """Parse ``git status --porcelain=v1 --branch -z`` output."""
    branch = BranchStatus(head=None)
    records: list[StatusRecord] = []
    tokens = output.split("\0")
    index = 0
    while index < len(tokens):
        token = tokens[index]
        index += 1
        if not token:
            continue
        if token.startswith("## "):
            branch = parse_branch_header(token)
            continue
        if len(token) < 4 or token[2] != " ":
            continue

        status = token[:2]
        records.append(StatusRecord(index=status[0], worktree=status[1], path=token[3:]))

        # For renamed/copied entries, porcelain -z appends an extra token
        # containing the source path; the first path token is the destination.
        if "R" in status or "C" in status:
            index += 1

    return WorkingTreeStatus(branch=branch, records=records)


def read_status(repo_root: Path) -> WorkingTreeStatus:
    output = git_output(
        repo_root,
        ["status", "--porcelain=v1", "--branch", "-z", "--untracked-files=normal"],
    )
    status = parse_porcelain_status(output)
    if status.branch.detached:
        status.branch.detached_at = git_output(repo_root, ["rev-parse", "--short", "HEAD"]).strip() or None
    return status


def is_working_tree_empty(repo_root: Path) -> bool:
    return not read_status(repo_root).has_worktree_changes()


def is_something_staged(repo_root: Path) -> bool:
    return read_status(repo_root).has_staged_changes()
