"""Outline items and their operation-target payloads.

An item list is a pre-order flattening of a logical outline: a child follows
its parent directly with ``depth = parent.depth + 1``, and the run of deeper
items after an item is exactly its subtree.
"""

from __future__ import annotations

import hashlib
from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class BranchTarget:
    name: str


@dataclass(frozen=True)
class CommitTarget:
    oid: str


@dataclass(frozen=True)
class FileTarget:
    path: str


@dataclass(frozen=True)
class DeltaTarget:
    old_path: str
    new_path: str
    status: str


@dataclass(frozen=True)
class HunkTarget:
    path: str
    header: str
    index: int
    staged: bool


@dataclass(frozen=True)
class StashTarget:
    index: int
    commit: str


TargetData = Union[BranchTarget, CommitTarget, FileTarget, DeltaTarget, HunkTarget, StashTarget]


def item_hash(*parts: object) -> int:
    """Return a stable 64-bit identity hash for ``parts``.

    Unlike ``hash()`` this does not change between interpreter runs.
    """
    digest = hashlib.blake2b(digest_size=8)
    for part in parts:
        digest.update(str(part).encode("utf-8", errors="surrogateescape"))
        digest.update(b"\0")
    return int.from_bytes(digest.digest(), "big")


@dataclass(frozen=True)
class Item:
    """One node of the displayed outline.

    ``display`` may span several lines and may embed SGR escapes; ``style`` is
    the palette entry applied beneath them. ``target_data`` is carried for
    operations and never inspected by the screen engine.
    """

    id: int = 0
    display: str = ""
    style: str = ""
    depth: int = 0
    section: bool = False
    unselectable: bool = False
    target_data: TargetData | None = None
    section_key: str | None = None

    @property
    def collapse_key(self) -> object:
        """Key remembered in a screen's collapse set for this section."""
        return self.section_key if self.section_key is not None else self.id


def blank_line() -> Item:
    """Return the unselectable empty separator placed between sections."""
    return Item(id=item_hash("blank_line"), display="", unselectable=True)


__all__ = [
    "BranchTarget",
    "CommitTarget",
    "DeltaTarget",
    "FileTarget",
    "HunkTarget",
    "Item",
    "StashTarget",
    "TargetData",
    "blank_line",
    "item_hash",
]
