"""Directory node datatype used by the tree model and navigation."""

from __future__ import annotations

import weakref
from collections.abc import Iterator
from dataclasses import dataclass, field
from pathlib import Path


def display_name(path: Path) -> str:
    """Return the label shown for ``path`` (last component, or the path for ``/``)."""
    return path.name or str(path)


@dataclass(eq=False)
class DirectoryNode:
    """One filesystem directory known to the browser.

    Nodes compare by identity. Children are owned by their parent; the parent
    link is a weak reference and never keeps a subtree alive.
    """

    full_path: Path
    name: str = ""
    children: list[DirectoryNode] = field(default_factory=list, repr=False)
    index_as_child: int = -1
    is_expanded: bool = False
    is_selected: bool = False
    is_children_loaded: bool = False
    _parent_ref: weakref.ReferenceType[DirectoryNode] | None = field(default=None, repr=False)

    def __post_init__(self) -> None:
        if not self.name:
            self.name = display_name(self.full_path)

    @property
    def parent(self) -> DirectoryNode | None:
        if self._parent_ref is None:
            return None
        return self._parent_ref()

    @property
    def is_root(self) -> bool:
        return self._parent_ref is None

    @property
    def is_placeholder(self) -> bool:
        """True while this node's own directory has not been scanned."""
        return not self.is_children_loaded

    def add_child(self, full_path: Path) -> DirectoryNode:
        """Append and return a new placeholder child for ``full_path``."""
        child = DirectoryNode(full_path, index_as_child=len(self.children))
        child._parent_ref = weakref.ref(self)
        self.children.append(child)
        return child

    def clear_children(self) -> None:
        self.children.clear()
        self.is_children_loaded = False

    def ancestors(self) -> Iterator[DirectoryNode]:
        """Yield parent, grandparent, ... up to the root."""
        node = self.parent
        while node is not None:
            yield node
            node = node.parent

    def iter_subtree(self) -> Iterator[DirectoryNode]:
        """Yield this node and every descendant in pre-order, ignoring expansion."""
        stack: list[DirectoryNode] = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))
