"""Commit history, commit contents, and stash listings."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from ..errors import GitCommandError
from .commands import git_output, output_lines, run_git
from .diff import FileDiff, parse_unified_diff

_FIELD_SEP = "\x1f"
_RECORD_SEP = "\x1e"


@dataclass
class CommitEntry:
    oid: str
    short: str
    refs: str
    subject: str


@dataclass
class CommitDetails:
    oid: str
    header_lines: list[str]
    files: list[FileDiff] = field(default_factory=list)


@dataclass
class StashEntry:
    index: int
    commit: str
    message: str

    @property
    def name(self) -> str:
        return f"stash@{{{self.index}}}"


def _split_records(output: str, field_count: int) -> list[list[str]]:
    records: list[list[str]] = []
    for raw in output.split(_RECORD_SEP):
        raw = raw.strip("\n")
        if not raw:
            continue
        parts = raw.split(_FIELD_SEP)
        if len(parts) < field_count:
            continue
        records.append(parts[:field_count])
    return records


def has_commits(repo_root: Path) -> bool:
    return run_git(repo_root, ["rev-parse", "--verify", "--quiet", "HEAD"], check=False).returncode == 0


def read_log(repo_root: Path, rev: str | None = None, limit: int = 256) -> list[CommitEntry]:
    """Return up to ``limit`` commits reachable from ``rev`` (default ``HEAD``)."""
    if rev is None and not has_commits(repo_root):
        return []
    fmt = "%H%x1f%h%x1f%D%x1f%s%x1e"
    args = ["log", f"--format={fmt}", f"--max-count={max(1, limit)}"]
    if rev:
        args.extend([rev, "--"])
    output = git_output(repo_root, args)
    return [CommitEntry(oid, short, refs, subject) for oid, short, refs, subject in _split_records(output, 4)]


def read_commit(repo_root: Path, rev: str) -> CommitDetails:
    """Return the header and parsed diff of commit ``rev``."""
    oid = git_output(repo_root, ["rev-parse", "--verify", f"{rev}^{{commit}}"]).strip()
    header = git_output(
        repo_root,
        ["show", "--no-patch", "--no-color", "--format=commit %H%nAuthor: %an <%ae>%nDate:   %ad%n%n%w(0,4,4)%B", oid],
    )
    patch = git_output(repo_root, ["show", "--no-color", "--no-ext-diff", "--format=", "--find-renames", oid])
    return CommitDetails(oid=oid, header_lines=output_lines(header.rstrip("\n")), files=parse_unified_diff(patch))


def read_stashes(repo_root: Path) -> list[StashEntry]:
    fmt = "%H%x1f%gs%x1e"
    try:
        output = git_output(repo_root, ["stash", "list", f"--format={fmt}"])
    except GitCommandError:
        # Repositories without commits cannot have stashes.
        if not has_commits(repo_root):
            return []
        raise
    return [
        StashEntry(index=index, commit=commit, message=message)
        for index, (commit, message) in enumerate(_split_records(output, 2))
    ]
