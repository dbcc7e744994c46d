"""Screen composition tests: scrolling window, clipping, and status row."""

from __future__ import annotations

import unittest
from pathlib import Path
from unittest import mock

from lazycd.render import (
    CLEAR_SCREEN,
    build_frame,
    build_status_line,
    clamp_tree_start,
    clip_to_width,
    render_frame,
    selected_row_index,
)
from lazycd.tree_model import DirectoryNode, render_tree
from lazycd.ui_theme import DEFAULT_THEME, PLAIN_THEME, resolve_theme


def _rows(count: int, selected: int = 0):
    root = DirectoryNode(Path("/root"), is_expanded=True)
    for idx in range(count - 1):
        root.add_child(Path(f"/root/d{idx}"))
    nodes = list(root.iter_subtree())
    nodes[selected].is_selected = True
    return render_tree(root)


class ClampTreeStartTests(unittest.TestCase):
    def test_scrolls_down_to_keep_selection_visible(self) -> None:
        self.assertEqual(clamp_tree_start(12, 0, 10, 30), 3)

    def test_scrolls_up_to_selection(self) -> None:
        self.assertEqual(clamp_tree_start(2, 5, 10, 30), 2)

    def test_keeps_start_when_selection_already_visible(self) -> None:
        self.assertEqual(clamp_tree_start(6, 4, 10, 30), 4)

    def test_never_scrolls_past_end_of_short_tree(self) -> None:
        self.assertEqual(clamp_tree_start(3, 8, 10, 5), 0)


class TextShapingTests(unittest.TestCase):
    def test_clip_counts_wide_characters_as_two_columns(self) -> None:
        self.assertEqual(clip_to_width("abcdef", 4), "abcd")
        self.assertEqual(clip_to_width("日本語", 5), "日本")
        self.assertEqual(clip_to_width("abc", 0), "")

    def test_status_line_right_aligns_hint(self) -> None:
        line = build_status_line("/tmp/x", 20, "q quit")

        self.assertEqual(len(line), 19)
        self.assertTrue(line.startswith("/tmp/x"))
        self.assertTrue(line.endswith("q quit"))

    def test_status_line_truncates_left_text_first(self) -> None:
        line = build_status_line("/a/very/long/path/here", 16, "q quit")

        self.assertTrue(line.endswith("q quit"))
        self.assertEqual(len(line), 15)


class BuildFrameTests(unittest.TestCase):
    def test_frame_clears_screen_and_draws_window(self) -> None:
        rows = _rows(5, selected=1)

        frame = build_frame(rows, 0, 4, 40, "/root/d0", theme=PLAIN_THEME)

        self.assertTrue(frame.startswith(CLEAR_SCREEN))
        body = frame[len(CLEAR_SCREEN):].split("\r\n")
        self.assertEqual(len(body), 4)
        self.assertEqual(body[0], "root")
        self.assertEqual(body[1], f"{PLAIN_THEME.selected}   d0{PLAIN_THEME.reset}")
        self.assertEqual(body[2], "   d1")
        self.assertIn("/root/d0", body[3])

    def test_frame_starts_at_tree_start(self) -> None:
        rows = _rows(6, selected=4)

        frame = build_frame(rows, 3, 3, 40, "", theme=PLAIN_THEME)

        body = frame[len(CLEAR_SCREEN):].split("\r\n")
        self.assertEqual(body[0], "   d2")
        self.assertIn("d3", body[1])

    def test_selected_row_uses_theme_highlight(self) -> None:
        rows = _rows(2, selected=0)

        frame = build_frame(rows, 0, 5, 40, "", theme=DEFAULT_THEME)

        self.assertIn(f"{DEFAULT_THEME.selected}{DEFAULT_THEME.tree_root}root", frame)

    def test_selected_row_index_falls_back_to_zero(self) -> None:
        rows = _rows(3, selected=2)
        self.assertEqual(selected_row_index(rows), 2)
        self.assertEqual(selected_row_index([]), 0)

    def test_render_frame_writes_utf8_once(self) -> None:
        with mock.patch("lazycd.render.os.write") as write_mock:
            render_frame(7, "héllo")

        write_mock.assert_called_once_with(7, "héllo".encode("utf-8"))


class ThemeTests(unittest.TestCase):
    def test_no_color_forces_plain_theme(self) -> None:
        self.assertIs(resolve_theme("default", no_color=True), PLAIN_THEME)

    def test_unknown_theme_falls_back_to_default(self) -> None:
        self.assertIs(resolve_theme("nope"), DEFAULT_THEME)
        self.assertIs(resolve_theme(None), DEFAULT_THEME)
        self.assertEqual(resolve_theme(" Reverse ").name, "reverse")

    def test_plain_theme_still_highlights_selection(self) -> None:
        self.assertTrue(PLAIN_THEME.selected)


if __name__ == "__main__":
    unittest.main()
