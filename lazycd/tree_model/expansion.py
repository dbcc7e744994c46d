"""Expand/collapse toggling with lazy loading of the next levels."""

from __future__ import annotations

from .build import LOAD_DIR_DEPTH, load_directory
from .types import DirectoryNode


def toggle_expansion(
    node: DirectoryNode,
    depth: int = LOAD_DIR_DEPTH,
    *,
    follow_symlinks: bool = False,
) -> bool:
    """Flip ``node.is_expanded`` and load whatever it needs to render.

    A placeholder node is loaded ``depth`` levels deep from itself. An
    already scanned node instead loads each child that is still a
    placeholder ``depth`` levels deep. Nodes that were already scanned are
    never scanned again. Returns ``False`` if any scan failed.
    """
    node.is_expanded = not node.is_expanded

    if node.is_placeholder:
        return load_directory(node, node.full_path, depth, follow_symlinks=follow_symlinks)

    ok = True
    for child in node.children:
        if child.is_placeholder:
            if not load_directory(child, child.full_path, depth, follow_symlinks=follow_symlinks):
                ok = False
    return ok
