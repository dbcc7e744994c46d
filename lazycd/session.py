"""Browsing session: the tree, the selected node, and event handling.

One ``BrowserSession`` holds all mutable browser state. Each event performs
one complete transition so the next render always sees a consistent tree.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from .errors import DeliveryFailure
from .navigation import Direction, move_selection
from .tree_model import LOAD_DIR_DEPTH, DirectoryNode, build_directory_tree, toggle_expansion

logger = logging.getLogger(__name__)

SCAN_FAILURE_STATUS = "some directories could not be read"


class SessionEvent(Enum):
    MOVE_UP = "move_up"
    MOVE_DOWN = "move_down"
    TOGGLE_EXPAND = "toggle_expand"
    COMMIT = "commit"
    QUIT = "quit"


@dataclass
class BrowserSession:
    """Mutable state for one browsing session."""

    root: DirectoryNode
    selected: DirectoryNode
    load_depth: int = LOAD_DIR_DEPTH
    follow_symlinks: bool = False
    deliver: Callable[[Path], None] | None = None
    running: bool = True
    committed_path: Path | None = None
    status_message: str = ""

    @classmethod
    def open(
        cls,
        start_path: Path,
        load_depth: int = LOAD_DIR_DEPTH,
        *,
        follow_symlinks: bool = False,
        deliver: Callable[[Path], None] | None = None,
    ) -> BrowserSession:
        """Bootstrap a session rooted at ``start_path`` with the root selected."""
        root, ok = build_directory_tree(start_path, load_depth, follow_symlinks=follow_symlinks)
        root.is_selected = True
        session = cls(
            root=root,
            selected=root,
            load_depth=load_depth,
            follow_symlinks=follow_symlinks,
            deliver=deliver,
        )
        if not ok:
            session.status_message = SCAN_FAILURE_STATUS
        return session

    def select(self, node: DirectoryNode) -> bool:
        """Move the selection flag to ``node``. Returns whether it changed."""
        if node is self.selected:
            return False
        self.selected.is_selected = False
        node.is_selected = True
        self.selected = node
        return True

    def move(self, direction: Direction) -> bool:
        return self.select(move_selection(self.root, self.selected, direction))

    def toggle_selected(self) -> bool:
        ok = toggle_expansion(self.selected, self.load_depth, follow_symlinks=self.follow_symlinks)
        if not ok:
            self.status_message = SCAN_FAILURE_STATUS
        return True

    def commit(self) -> None:
        """Deliver the selected path and end the session."""
        chosen = self.selected.full_path
        self.committed_path = chosen
        if self.deliver is not None:
            try:
                self.deliver(chosen)
            except DeliveryFailure as exc:
                logger.error("%s", exc)
        self.running = False

    def quit(self) -> None:
        self.running = False

    def handle_event(self, event: SessionEvent) -> bool:
        """Apply one event. Returns whether the screen needs redrawing."""
        if not self.running:
            return False
        self.status_message = ""
        if event is SessionEvent.MOVE_UP:
            self.move(Direction.UP)
        elif event is SessionEvent.MOVE_DOWN:
            self.move(Direction.DOWN)
        elif event is SessionEvent.TOGGLE_EXPAND:
            self.toggle_selected()
        elif event is SessionEvent.COMMIT:
            self.commit()
        elif event is SessionEvent.QUIT:
            self.quit()
        return True
