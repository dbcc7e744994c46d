"""Screen composition for the tree view.

Builds a full ANSI frame from rendered tree rows and writes it in one call.
Frame building is side-effect free; only ``render_frame`` touches the fd.
"""

from __future__ import annotations

import os
import unicodedata

from .tree_model import TreeRow
from .ui_theme import DEFAULT_THEME, UITheme

CLEAR_SCREEN = "\033[H\033[J"


def char_display_width(ch: str) -> int:
    """Return terminal column width for one character."""
    if unicodedata.combining(ch):
        return 0
    if unicodedata.east_asian_width(ch) in {"W", "F"}:
        return 2
    return 1


def display_width(text: str) -> int:
    return sum(char_display_width(ch) for ch in text)


def clip_to_width(text: str, max_cols: int) -> str:
    """Trim plain ``text`` to at most ``max_cols`` display columns."""
    if max_cols <= 0:
        return ""
    out: list[str] = []
    col = 0
    for ch in text:
        width = char_display_width(ch)
        if col + width > max_cols:
            break
        out.append(ch)
        col += width
    return "".join(out)


def selected_row_index(rows: list[TreeRow]) -> int:
    for idx, row in enumerate(rows):
        if row.highlighted:
            return idx
    return 0


def clamp_tree_start(selected_idx: int, tree_start: int, visible_rows: int, total_rows: int) -> int:
    """Scroll the tree window just enough to keep ``selected_idx`` in view."""
    visible_rows = max(1, visible_rows)
    if selected_idx < tree_start:
        tree_start = selected_idx
    elif selected_idx >= tree_start + visible_rows:
        tree_start = selected_idx - visible_rows + 1
    return max(0, min(tree_start, max(0, total_rows - visible_rows)))


def build_status_line(left_text: str, width: int, right_text: str = "") -> str:
    """Left-align ``left_text`` and right-align ``right_text`` within ``width`` columns."""
    usable = max(1, width - 1)
    if usable <= len(right_text):
        return right_text[-usable:]
    left_limit = max(0, usable - len(right_text) - 1)
    left = clip_to_width(left_text, left_limit)
    gap = " " * max(0, usable - display_width(left) - len(right_text))
    return f"{left}{gap}{right_text}"


def style_row(row: TreeRow, width: int, theme: UITheme) -> str:
    text = clip_to_width(row.text, max(1, width - 1))
    color = theme.tree_root if row.depth == 0 else theme.tree_dir
    if row.highlighted:
        return f"{theme.selected}{color}{text}{theme.reset}"
    if color:
        return f"{color}{text}{theme.reset}"
    return text


def build_frame(
    rows: list[TreeRow],
    tree_start: int,
    max_lines: int,
    width: int,
    status_text: str,
    key_hint: str = "",
    status_is_message: bool = False,
    theme: UITheme | None = None,
) -> str:
    """Compose one complete screen: tree window plus a status row."""
    active_theme = theme or DEFAULT_THEME
    content_rows = max(1, max_lines - 1)
    out: list[str] = [CLEAR_SCREEN]
    for row_idx in range(content_rows):
        idx = tree_start + row_idx
        if idx < len(rows):
            out.append(style_row(rows[idx], width, active_theme))
        out.append("\r\n")
    status_style = active_theme.status_message if status_is_message else active_theme.status
    out.append(status_style)
    out.append(build_status_line(status_text, width, key_hint))
    out.append(active_theme.reset)
    return "".join(out)


def render_frame(stdout_fd: int, frame: str) -> None:
    os.write(stdout_fd, frame.encode("utf-8", errors="replace"))
