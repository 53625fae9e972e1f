"""Unified diff parsing into files and hunks."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path

from .commands import git_output, output_lines

_HUNK_RE = re.compile(r"^@@ -(\d+)(?:,(\d+))? \+(\d+)(?:,(\d+))? @@")
_DIFF_GIT_RE = re.compile(r"^diff --git a/(.*) b/(.*)$")


@dataclass
class Hunk:
    header: str
    body: str
    old_start: int
    old_count: int
    new_start: int
    new_count: int

    @property
    def text(self) -> str:
        return f"{self.header}\n{self.body}" if self.body else self.header


@dataclass
class FileDiff:
    old_path: str
    new_path: str
    status: str = "modified"
    header: list[str] = field(default_factory=list)
    hunks: list[Hunk] = field(default_factory=list)

    @property
    def path(self) -> str:
        return self.new_path if self.status != "deleted" else self.old_path

    @property
    def label(self) -> str:
        if self.status in {"renamed", "copied"} and self.old_path != self.new_path:
            return f"{self.old_path} -> {self.new_path}"
        return self.path


def _strip_prefix(path: str, prefix: str) -> str:
    return path[len(prefix) :] if path.startswith(prefix) else path


def _new_hunk(line: str, match: re.Match[str]) -> Hunk:
    return Hunk(
        header=line,
        body="",
        old_start=int(match.group(1)),
        old_count=int(match.group(2) or "1"),
        new_start=int(match.group(3)),
        new_count=int(match.group(4) or "1"),
    )


def parse_unified_diff(diff_text: str) -> list[FileDiff]:
    """Split ``git diff`` output into per-file headers and hunks.

    File status comes from the extended header lines (``new file mode``,
    ``deleted file mode``, ``rename from``/``to``, ``copy from``/``to``).
    """
    files: list[FileDiff] = []
    current: FileDiff | None = None
    hunk: Hunk | None = None
    body: list[str] = []

    def close_hunk() -> None:
        nonlocal hunk
        if current is not None and hunk is not None:
            hunk.body = "\n".join(body)
            current.hunks.append(hunk)
        hunk = None
        body.clear()

    for line in output_lines(diff_text):
        git_match = _DIFF_GIT_RE.match(line)
        if git_match:
            close_hunk()
            current = FileDiff(old_path=git_match.group(1), new_path=git_match.group(2), header=[line])
            files.append(current)
            continue
        if current is None:
            continue

        hunk_match = _HUNK_RE.match(line)
        if hunk_match:
            close_hunk()
            hunk = _new_hunk(line, hunk_match)
            continue
        if hunk is not None:
            body.append(line)
            continue

        current.header.append(line)
        if line.startswith("new file mode"):
            current.status = "new file"
        elif line.startswith("deleted file mode"):
            current.status = "deleted"
        elif line.startswith("rename from "):
            current.status = "renamed"
            current.old_path = line[len("rename from ") :]
        elif line.startswith("rename to "):
            current.new_path = line[len("rename to ") :]
        elif line.startswith("copy from "):
            current.status = "copied"
            current.old_path = line[len("copy from ") :]
        elif line.startswith("copy to "):
            current.new_path = line[len("copy to ") :]
        elif line.startswith("--- ") and line[4:] != "/dev/null":
            current.old_path = _strip_prefix(line[4:], "a/")
        elif line.startswith("+++ ") and line[4:] != "/dev/null":
            current.new_path = _strip_prefix(line[4:], "b/")
        elif line.startswith("Binary files") and current.status == "modified":
            current.status = "binary"

    close_hunk()
    return files


def read_diff(repo_root: Path, staged: bool) -> list[FileDiff]:
    """Return the work-tree (or index, with ``staged``) diff as parsed files."""
    args = ["diff", "--no-color", "--no-ext-diff", "--find-renames"]
    if staged:
        args.append("--cached")
    return parse_unified_diff(git_output(repo_root, args))
