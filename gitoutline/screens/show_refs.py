"""Refs screen: local branches, one section per remote, then tags."""

from __future__ import annotations

from pathlib import Path

from ..git.refs import HeadState, RefEntry, read_head_state, read_refs
from ..items import BranchTarget, Item, item_hash
from .common import ScreenStyle, display_field, join_sections, paint, section_header


def ref_prefix(ref: RefEntry, head: HeadState) -> str:
    """Return ``"* "`` for the checked-out branch, ``"? "`` for refs at a detached HEAD."""
    if head.detached:
        return "? " if ref.target == head.oid else "  "
    return "* " if ref.is_head else "  "


class ShowRefsScreenData:
    def __init__(self, repo_root: Path, style: ScreenStyle | None = None) -> None:
        self.repo_root = repo_root
        self.style = style or ScreenStyle()

    def items(self) -> list[Item]:
        theme = self.style.theme
        head = read_head_state(self.repo_root)
        refs = read_refs(self.repo_root)

        branches = [section_header("local_branches", "Branches", theme)]
        branches.extend(self._ref_item(ref, head, theme.branch) for ref in refs if ref.kind == "branch")

        remotes: dict[str, list[Item]] = {}
        for ref in refs:
            if ref.kind == "remote":
                remotes.setdefault(ref.remote or "", []).append(self._ref_item(ref, head, theme.remote))
        remote_sections = [
            [section_header(f"remote:{name}", f"Remote {display_field(name)}", theme), *remote_items]
            for name, remote_items in sorted(remotes.items())
        ]

        tags = [self._ref_item(ref, head, theme.tag) for ref in refs if ref.kind == "tag"]
        tag_section = [section_header("tags", "Tags", theme), *tags] if tags else []

        return join_sections([branches, *remote_sections, tag_section])

    def _ref_item(self, ref: RefEntry, head: HeadState, sgr: str) -> Item:
        return Item(
            id=item_hash(ref.name),
            display=ref_prefix(ref, head) + paint(display_field(ref.shorthand), sgr, self.style.theme),
            depth=1,
            target_data=BranchTarget(ref.shorthand),
        )
