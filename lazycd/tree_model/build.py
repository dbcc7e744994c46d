"""Directory scanning and depth-bounded tree loading."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from ..errors import ScanFailure
from .types import DirectoryNode, display_name

logger = logging.getLogger(__name__)

# Levels loaded at startup and on each expansion of an unloaded node.
LOAD_DIR_DEPTH = 3


def is_hidden_name(name: str) -> bool:
    """Return whether a directory entry name is ``.``, ``..`` or a dotfile."""
    return name.startswith(".")


def list_child_directories(
    directory: Path,
    follow_symlinks: bool = False,
) -> tuple[list[Path], ScanFailure | None]:
    """List visible subdirectories of ``directory`` in scan order.

    Returns ``(child_paths, scan_failure)``. Order is whatever the OS returns;
    nothing is sorted. Hidden entries and non-directories are skipped.
    """
    child_paths: list[Path] = []
    try:
        with os.scandir(directory) as entries:
            for entry in entries:
                if is_hidden_name(entry.name):
                    continue
                try:
                    is_dir = entry.is_dir(follow_symlinks=follow_symlinks)
                except OSError:
                    is_dir = False
                if is_dir:
                    child_paths.append(Path(entry.path))
    except OSError as exc:
        return [], ScanFailure(directory, exc)
    return child_paths, None


def _real_path(path: Path) -> str:
    return os.path.realpath(path)


def _links_back_to_ancestor(node: DirectoryNode, child_path: Path) -> bool:
    """Return whether symlinked ``child_path`` resolves to ``node`` or one of its ancestors."""
    target = _real_path(child_path)
    if target == _real_path(node.full_path):
        return True
    return any(target == _real_path(ancestor.full_path) for ancestor in node.ancestors())


def load_directory(
    node: DirectoryNode,
    path: Path,
    depth: int,
    *,
    follow_symlinks: bool = False,
) -> bool:
    """Populate ``node`` from ``path`` and load ``depth`` levels below it.

    ``depth == 0`` only records name and path. Otherwise the directory is
    scanned and each child is loaded with ``depth - 1``; children beyond the
    bound remain placeholders. Returns ``False`` if this scan or any nested
    scan failed. Failures are logged and whatever loaded is kept.
    """
    node.full_path = path
    node.name = display_name(path)
    if depth <= 0:
        return True

    child_paths, scan_failure = list_child_directories(path, follow_symlinks=follow_symlinks)
    if scan_failure is not None:
        logger.warning("%s", scan_failure)
        return False

    node.clear_children()
    ok = True
    for child_path in child_paths:
        if follow_symlinks and child_path.is_symlink() and _links_back_to_ancestor(node, child_path):
            logger.debug("skipping %s: symlink cycle", child_path)
            continue
        child = node.add_child(child_path)
        if not load_directory(child, child_path, depth - 1, follow_symlinks=follow_symlinks):
            ok = False
    node.is_children_loaded = True
    return ok


def build_directory_tree(
    root_path: Path,
    depth: int = LOAD_DIR_DEPTH,
    *,
    follow_symlinks: bool = False,
) -> tuple[DirectoryNode, bool]:
    """Create a root node for ``root_path`` and bootstrap-load it.

    The root starts expanded. Returns ``(root, ok)``.
    """
    root = DirectoryNode(root_path)
    ok = load_directory(root, root_path, depth, follow_symlinks=follow_symlinks)
    root.is_expanded = True
    return root, ok
