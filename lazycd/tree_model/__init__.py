"""Directory tree model: nodes, lazy loading, expansion, and row rendering.

The tree is a point-in-time snapshot of the filesystem below a root path.
Subtrees past the loaded depth exist as placeholder nodes until expanded.
"""

from __future__ import annotations

from .build import (
    LOAD_DIR_DEPTH,
    build_directory_tree,
    is_hidden_name,
    list_child_directories,
    load_directory,
)
from .expansion import toggle_expansion
from .rendering import LINE_PADDING_WIDTH, TreeRow, format_tree_label, iter_visible, render_tree
from .types import DirectoryNode, display_name

__all__ = [
    "DirectoryNode",
    "display_name",
    "LOAD_DIR_DEPTH",
    "LINE_PADDING_WIDTH",
    "is_hidden_name",
    "list_child_directories",
    "load_directory",
    "build_directory_tree",
    "toggle_expansion",
    "TreeRow",
    "iter_visible",
    "format_tree_label",
    "render_tree",
]
