"""Exception hierarchy shared by the backend, screens, and runtime.

Backend and provider failures are recoverable and surface as inline errors.
``DisplayDecodeError`` marks malformed item text and is never swallowed.
"""

from __future__ import annotations

from collections.abc import Sequence


class GitOutlineError(Exception):
    """Base class for all gitoutline errors."""


class GitCommandError(GitOutlineError):
    """A ``git`` invocation exited non-zero or could not be started."""

    def __init__(self, args: Sequence[str], returncode: int | None, stderr: str = "") -> None:
        self.git_args = tuple(args)
        self.returncode = returncode
        self.stderr = stderr.strip()
        command = " ".join(["git", *self.git_args])
        if returncode is None:
            message = f"failed to run `{command}`"
        else:
            message = f"`{command}` exited with status {returncode}"
        if self.stderr:
            message = f"{message}: {self.stderr}"
        super().__init__(message)


class RepositoryNotFoundError(GitCommandError):
    """The working directory is not inside a git work tree."""


class ProviderError(GitOutlineError):
    """A screen data provider failed to produce items."""


class DisplayDecodeError(GitOutlineError, ValueError):
    """An item's display text carries malformed or unsupported escape data."""


class OperationError(GitOutlineError):
    """An operation refused to run against the current repository state."""


__all__ = [
    "GitOutlineError",
    "GitCommandError",
    "RepositoryNotFoundError",
    "ProviderError",
    "DisplayDecodeError",
    "OperationError",
]
