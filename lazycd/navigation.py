"""Visible-order flattening and up/down selection movement.

Both helpers are pure queries over node identities. Callers apply the
result through ``BrowserSession.select`` so selection changes stay atomic.
"""

from __future__ import annotations

from enum import Enum

from .tree_model.rendering import iter_visible
from .tree_model.types import DirectoryNode


class Direction(Enum):
    UP = -1
    DOWN = 1


def flatten_visible(root: DirectoryNode) -> list[DirectoryNode]:
    """Return visible nodes in display order.

    Recomputed on every call since expansion state may have changed.
    """
    return [node for node, _depth in iter_visible(root)]


def index_of_node(nodes: list[DirectoryNode], target: DirectoryNode) -> int | None:
    """Locate ``target`` by identity, returning ``None`` when absent."""
    for idx, node in enumerate(nodes):
        if node is target:
            return idx
    return None


def move_selection(root: DirectoryNode, selected: DirectoryNode, direction: Direction) -> DirectoryNode:
    """Return the visible neighbour of ``selected`` in ``direction``.

    Moving past either end, or from a node that is not visible, returns
    ``selected`` unchanged.
    """
    visible = flatten_visible(root)
    idx = index_of_node(visible, selected)
    if idx is None:
        return selected
    target = idx + direction.value
    if target < 0 or target >= len(visible):
        return selected
    return visible[target]
