"""Pre-order projection of the expanded tree into display rows."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from .types import DirectoryNode

LINE_PADDING_WIDTH = 3


@dataclass(frozen=True)
class TreeRow:
    """One rendered tree line: indented label plus highlight flag."""

    node: DirectoryNode
    depth: int
    text: str
    highlighted: bool


def iter_visible(root: DirectoryNode) -> Iterator[tuple[DirectoryNode, int]]:
    """Yield ``(node, depth)`` for the root and every node under expanded ancestors."""
    stack: list[tuple[DirectoryNode, int]] = [(root, 0)]
    while stack:
        node, depth = stack.pop()
        yield node, depth
        if node.is_expanded:
            stack.extend((child, depth + 1) for child in reversed(node.children))


def format_tree_label(node: DirectoryNode, depth: int, indent_width: int = LINE_PADDING_WIDTH) -> str:
    return " " * (indent_width * depth) + node.name


def render_tree(root: DirectoryNode, indent_width: int = LINE_PADDING_WIDTH) -> list[TreeRow]:
    """Render visible nodes in display order without touching node state."""
    return [
        TreeRow(
            node=node,
            depth=depth,
            text=format_tree_label(node, depth, indent_width),
            highlighted=node.is_selected,
        )
        for node, depth in iter_visible(root)
    ]
