"""Visibility filter: elide the subtrees of collapsed sections."""

from __future__ import annotations

from collections.abc import Container, Iterator, Sequence

from ..items import Item


def iter_visible_items(items: Sequence[Item], collapsed: Container[object]) -> Iterator[tuple[int, Item]]:
    """Yield ``(index, item)`` for every item not hidden by a collapsed section.

    Single pass: after emitting a collapsed section at depth ``d``, every
    following item deeper than ``d`` is skipped; the first item at depth
    ``<= d`` ends the elided run and is itself subject to the same rule.
    """
    collapse_depth: int | None = None
    for index, item in enumerate(items):
        if collapse_depth is not None and item.depth > collapse_depth:
            continue
        collapse_depth = item.depth if item.section and item.collapse_key in collapsed else None
        yield index, item


def has_subtree(items: Sequence[Item], index: int) -> bool:
    """Return whether the item at ``index`` has at least one descendant."""
    return index + 1 < len(items) and items[index + 1].depth > items[index].depth
