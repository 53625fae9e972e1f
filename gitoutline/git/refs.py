"""Branch, remote-tracking branch, and tag listings."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .commands import git_output, output_lines, run_git

_REF_FORMAT = "%(refname)%1f%(refname:short)%1f%(objectname)%1f%(*objectname)%1f%(HEAD)"


@dataclass
class RefEntry:
    name: str
    shorthand: str
    kind: str
    target: str
    is_head: bool = False
    remote: str | None = None


@dataclass
class HeadState:
    oid: str | None
    detached: bool


def read_head_state(repo_root: Path) -> HeadState:
    symbolic = run_git(repo_root, ["symbolic-ref", "-q", "HEAD"], check=False)
    head = run_git(repo_root, ["rev-parse", "--verify", "--quiet", "HEAD"], check=False)
    oid = head.stdout.strip() if head.returncode == 0 else None
    return HeadState(oid=oid or None, detached=symbolic.returncode != 0 and oid is not None)


def read_remote_names(repo_root: Path) -> list[str]:
    return [name for name in output_lines(git_output(repo_root, ["remote"])) if name]


def _remote_for(shorthand: str, remotes: list[str]) -> str:
    """Return the configured remote owning ``shorthand`` (longest prefix wins)."""
    matches = [remote for remote in remotes if shorthand.startswith(f"{remote}/")]
    if matches:
        return max(matches, key=len)
    return shorthand.split("/", 1)[0]


def read_refs(repo_root: Path) -> list[RefEntry]:
    """List local branches, remote-tracking branches, and tags in ref order."""
    output = git_output(
        repo_root,
        ["for-each-ref", f"--format={_REF_FORMAT}", "refs/heads", "refs/remotes", "refs/tags"],
    )
    remotes = read_remote_names(repo_root)
    refs: list[RefEntry] = []
    for line in output_lines(output):
        parts = line.split("\x1f")
        if len(parts) != 5:
            continue
        name, shorthand, objectname, peeled, head_marker = parts
        if name.startswith("refs/heads/"):
            kind = "branch"
        elif name.startswith("refs/remotes/"):
            if name.endswith("/HEAD"):
                continue
            kind = "remote"
        else:
            kind = "tag"
        refs.append(
            RefEntry(
                name=name,
                shorthand=shorthand,
                kind=kind,
                target=peeled or objectname,
                is_head=head_marker.strip() == "*",
                remote=_remote_for(shorthand, remotes) if kind == "remote" else None,
            )
        )
    return refs
