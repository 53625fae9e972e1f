"""Git backend: thin ``git`` subprocess queries returning plain dataclasses."""

from __future__ import annotations

from .commands import find_repo_root, git_output, output_lines, resolve_git_dir, run_git
from .diff import FileDiff, Hunk, parse_unified_diff, read_diff
from .history import (
    CommitDetails,
    CommitEntry,
    StashEntry,
    has_commits,
    read_commit,
    read_log,
    read_stashes,
)
from .refs import HeadState, RefEntry, read_head_state, read_refs
from .status import (
    BranchStatus,
    StatusRecord,
    WorkingTreeStatus,
    is_something_staged,
    is_working_tree_empty,
    parse_branch_header,
    parse_porcelain_status,
    read_status,
)

__all__ = [
    "BranchStatus",
    "CommitDetails",
    "CommitEntry",
    "FileDiff",
    "HeadState",
    "Hunk",
    "RefEntry",
    "StashEntry",
    "StatusRecord",
    "WorkingTreeStatus",
    "find_repo_root",
    "git_output",
    "output_lines",
    "has_commits",
    "is_something_staged",
    "is_working_tree_empty",
    "parse_branch_header",
    "parse_porcelain_status",
    "parse_unified_diff",
    "read_commit",
    "read_diff",
    "read_head_state",
    "read_log",
    "read_refs",
    "read_stashes",
    "read_status",
    "resolve_git_dir",
    "run_git",
]
