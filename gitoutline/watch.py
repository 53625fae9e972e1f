"""Poll-based change detection for the repository being viewed.

Hashes git control-file metadata together with porcelain status output.
The event loop compares successive signatures to decide when to refresh.
"""

from __future__ import annotations

import hashlib
import logging
import time
from collections.abc import Callable
from pathlib import Path

from .errors import GitCommandError
from .git.commands import run_git

logger = logging.getLogger(__name__)

DEFAULT_POLL_INTERVAL_SECONDS = 0.5


def _update_digest(digest, token: str) -> None:
    """Append a token plus separator byte to a hash digest."""
    digest.update(token.encode("utf-8", errors="surrogateescape"))
    digest.update(b"\0")


def _path_stat_signature(path: Path) -> tuple[str, int, int, int]:
    """Return a stable stat tuple describing ``path`` existence and metadata."""
    try:
        st = path.stat()
    except FileNotFoundError:
        return ("missing", 0, 0, 0)
    except OSError:
        return ("error", 0, 0, 0)
    return ("ok", st.st_mtime_ns, st.st_size, st.st_mode)


def build_git_watch_signature(git_dir: Path | None) -> str:
    """Build a digest over git metadata that signals status-relevant changes."""
    digest = hashlib.blake2b(digest_size=20)
    if git_dir is None:
        _update_digest(digest, "git:none")
        return digest.hexdigest()

    git_dir = git_dir.resolve()
    _update_digest(digest, f"git_dir:{git_dir}")

    def add_path_token(label: str, path: Path) -> None:
        state, mtime_ns, size, mode = _path_stat_signature(path)
        _update_digest(digest, f"{label}:{state}:{mtime_ns}:{size}:{mode}")

    add_path_token("index", git_dir / "index")
    head_path = git_dir / "HEAD"
    add_path_token("head", head_path)

    ref_name = ""
    try:
        head_text = head_path.read_text(encoding="utf-8", errors="replace").strip()
        if head_text.startswith("ref: "):
            ref_name = head_text[5:].strip()
    except OSError:
        ref_name = ""
    _update_digest(digest, f"head_ref:{ref_name}")

    if ref_name:
        add_path_token("head_ref_file", git_dir / ref_name)

    add_path_token("packed_refs", git_dir / "packed-refs")
    add_path_token("stash", git_dir / "refs" / "stash")
    add_path_token("merge_head", git_dir / "MERGE_HEAD")
    add_path_token("cherry_pick_head", git_dir / "CHERRY_PICK_HEAD")
    add_path_token("rebase_head", git_dir / "REBASE_HEAD")

    return digest.hexdigest()


def build_status_signature(repo_root: Path) -> str:
    """Digest of ``git status --porcelain`` so worktree edits are noticed too.

    Content edits to an already-modified file do not change porcelain output,
    so the stat data of every listed path is folded in as well.
    """
    digest = hashlib.blake2b(digest_size=20)
    try:
        proc = run_git(repo_root, ["status", "--porcelain=v1", "-z", "--untracked-files=all"], check=False)
    except GitCommandError as exc:
        logger.debug("Status signature read failed: %s", exc)
        _update_digest(digest, "status:error")
        return digest.hexdigest()
    _update_digest(digest, f"status:{proc.returncode}")
    for entry in proc.stdout.split("\0"):
        if not entry:
            continue
        _update_digest(digest, entry)
        if len(entry) > 3:
            state, mtime_ns, size, _mode = _path_stat_signature(repo_root / entry[3:])
            _update_digest(digest, f"stat:{state}:{mtime_ns}:{size}")
    return digest.hexdigest()


class GitWatcher:
    """Report when the repository changed since the last observed signature."""

    def __init__(
        self,
        repo_root: Path,
        git_dir: Path | None,
        poll_interval_seconds: float = DEFAULT_POLL_INTERVAL_SECONDS,
        *,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.repo_root = repo_root
        self.git_dir = git_dir
        self.poll_interval_seconds = poll_interval_seconds
        self._clock = clock
        self._last_poll = clock()
        self._signature = self.signature()

    def signature(self) -> str:
        return build_git_watch_signature(self.git_dir) + ":" + build_status_signature(self.repo_root)

    def mark_seen(self) -> None:
        """Adopt the current signature, e.g. after a refresh the user triggered."""
        self._signature = self.signature()
        self._last_poll = self._clock()

    def pending_updates(self) -> bool:
        """Return True once per change, polling at most every poll interval."""
        now = self._clock()
        if now - self._last_poll < self.poll_interval_seconds:
            return False
        self._last_poll = now
        signature = self.signature()
        if signature == self._signature:
            return False
        logger.debug("Repository change detected")
        self._signature = signature
        return True
