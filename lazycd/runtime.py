"""Interactive event loop and session bootstrap for the terminal UI.

The loop redraws when something changed, polls for one key with a bounded
idle wait, and dispatches it to the session through the key registry.
"""

from __future__ import annotations

import logging
import os
import shutil
import sys
from collections.abc import Callable
from dataclasses import dataclass
from functools import partial
from pathlib import Path

from .diagnostics import buffered_diagnostics
from .handoff import clear_handoff_file, write_chosen_directory
from .input import read_key
from .keys import KEY_HINT, build_key_registry
from .render import build_frame, clamp_tree_start, render_frame, selected_row_index
from .session import BrowserSession
from .terminal import TerminalController
from .tree_model import render_tree
from .ui_theme import UITheme

logger = logging.getLogger(__name__)

IDLE_POLL_MS = 250


@dataclass
class ViewState:
    """Scroll position and last drawn terminal size."""

    tree_start: int = 0
    last_size: tuple[int, int] | None = None


def draw_session(
    session: BrowserSession,
    view: ViewState,
    columns: int,
    lines: int,
    theme: UITheme | None = None,
) -> str:
    """Render ``session`` into a frame, updating ``view.tree_start`` to follow the selection."""
    rows = render_tree(session.root)
    visible_rows = max(1, lines - 1)
    view.tree_start = clamp_tree_start(selected_row_index(rows), view.tree_start, visible_rows, len(rows))
    status_is_message = bool(session.status_message)
    status_text = session.status_message if status_is_message else str(session.selected.full_path)
    return build_frame(
        rows,
        view.tree_start,
        lines,
        columns,
        status_text,
        key_hint=KEY_HINT,
        status_is_message=status_is_message,
        theme=theme,
    )


def run_main_loop(
    session: BrowserSession,
    stdin_fd: int,
    stdout_fd: int,
    theme: UITheme | None = None,
    *,
    read_key_fn: Callable[..., str] = read_key,
    get_terminal_size: Callable[..., os.terminal_size] = shutil.get_terminal_size,
    poll_ms: int = IDLE_POLL_MS,
) -> None:
    """Run until the session commits or quits."""
    registry = build_key_registry(session)
    view = ViewState()
    dirty = True
    while session.running:
        term = get_terminal_size((80, 24))
        size = (term.columns, term.lines)
        if size != view.last_size:
            view.last_size = size
            dirty = True
        if dirty:
            render_frame(stdout_fd, draw_session(session, view, term.columns, term.lines, theme))
            dirty = False

        key = read_key_fn(stdin_fd, timeout_ms=poll_ms)
        if not key:
            continue
        if registry.dispatch(key):
            dirty = True


def run_browser(
    start_path: Path,
    load_depth: int,
    handoff_file: Path,
    theme: UITheme | None = None,
    *,
    follow_symlinks: bool = False,
) -> Path | None:
    """Browse from ``start_path`` and return the committed directory, if any."""
    stdin_fd = sys.stdin.fileno()
    stdout_fd = sys.stdout.fileno()
    if not os.isatty(stdin_fd):
        raise SystemExit("lazycd needs an interactive terminal on stdin.")

    with buffered_diagnostics():
        try:
            clear_handoff_file(handoff_file)
        except OSError as exc:
            logger.warning("cannot remove stale hand-off file %s: %s", handoff_file, exc.strerror or exc)
        session = BrowserSession.open(
            start_path,
            load_depth,
            follow_symlinks=follow_symlinks,
            deliver=partial(write_chosen_directory, handoff_file=handoff_file),
        )
        terminal = TerminalController(stdin_fd, stdout_fd)
        with terminal.raw_mode():
            run_main_loop(session, stdin_fd, stdout_fd, theme)
    if session.committed_path is not None:
        logger.debug("chose %s", session.committed_path)
    return session.committed_path
