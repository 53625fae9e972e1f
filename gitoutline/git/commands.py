"""Subprocess wrapper around the ``git`` executable.

Every backend query goes through ``run_git`` so failures surface uniformly
as ``GitCommandError`` with the command line and stderr attached.
"""

from __future__ import annotations

import logging
import subprocess
from collections.abc import Sequence
from pathlib import Path

from ..errors import GitCommandError, RepositoryNotFoundError

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 10.0


def run_git(
    repo_root: Path,
    args: Sequence[str],
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
    *,
    check: bool = True,
) -> subprocess.CompletedProcess[str]:
    """Run ``git -C repo_root *args`` and capture text output.

    Raises ``GitCommandError`` when git cannot be started, times out, or (with
    ``check``) exits non-zero.
    """
    logger.debug("Running git %s", " ".join(args))
    try:
        proc = subprocess.run(
            ["git", "-C", str(repo_root), *args],
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            text=True,
            encoding="utf-8",
            errors="replace",
            check=False,
            timeout=timeout_seconds,
        )
    except (OSError, subprocess.TimeoutExpired) as exc:
        raise GitCommandError(args, None, str(exc)) from exc
    if check and proc.returncode != 0:
        raise GitCommandError(args, proc.returncode, proc.stderr)
    return proc


def git_output(repo_root: Path, args: Sequence[str], timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS) -> str:
    return run_git(repo_root, args, timeout_seconds).stdout


def output_lines(text: str) -> list[str]:
    """Split git output on newline characters only.

    ``str.splitlines`` would also break on form feeds and other separators
    that can appear inside file content and commit messages.
    """
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


def find_repo_root(path: Path, timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS) -> Path:
    """Resolve the work-tree root containing ``path``."""
    args = ["rev-parse", "--show-toplevel"]
    try:
        proc = run_git(path, args, timeout_seconds)
    except GitCommandError as exc:
        raise RepositoryNotFoundError(args, exc.returncode, exc.stderr or f"{path} is not a git repository") from exc
    root = proc.stdout.strip()
    if not root:
        raise RepositoryNotFoundError(args, proc.returncode, f"{path} is not inside a work tree")
    return Path(root).resolve()


def resolve_git_dir(repo_root: Path, timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS) -> Path | None:
    """Return the absolute git-dir for ``repo_root`` or ``None`` if unavailable."""
    try:
        raw = git_output(repo_root, ["rev-parse", "--git-dir"], timeout_seconds).strip()
    except GitCommandError:
        return None
    if not raw:
        return None
    git_dir = Path(raw)
    return (git_dir if git_dir.is_absolute() else repo_root / git_dir).resolve()
