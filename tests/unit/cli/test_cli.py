"""CLI argument, config precedence, and default-path behavior tests."""

from __future__ import annotations

import io
import json
import os
import sys
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from lazycd import cli
from lazycd.handoff import HANDOFF_FILENAME
from lazycd.tree_model import LOAD_DIR_DEPTH
from lazycd.ui_theme import DEFAULT_THEME, PLAIN_THEME


class CliTests(unittest.TestCase):
    def setUp(self) -> None:
        tmp = tempfile.TemporaryDirectory()
        self.addCleanup(tmp.cleanup)
        self.config_path = Path(tmp.name) / "config.json"
        patcher = mock.patch("lazycd.config.CONFIG_PATH", self.config_path)
        patcher.start()
        self.addCleanup(patcher.stop)
        logging_patcher = mock.patch("lazycd.cli.configure_logging")
        self.configure_logging = logging_patcher.start()
        self.addCleanup(logging_patcher.stop)

    def test_main_defaults_to_current_working_directory(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            previous_cwd = Path.cwd()
            try:
                os.chdir(root)
                with mock.patch.object(sys, "argv", ["lazycd"]), mock.patch("lazycd.cli.run_browser") as run_browser:
                    cli.main()
            finally:
                os.chdir(previous_cwd)

        run_browser.assert_called_once()
        path, depth, handoff_file, theme = run_browser.call_args.args
        self.assertEqual(path, root)
        self.assertEqual(depth, LOAD_DIR_DEPTH)
        self.assertEqual(handoff_file.resolve(), root / HANDOFF_FILENAME)
        self.assertIs(theme, DEFAULT_THEME)
        self.assertFalse(run_browser.call_args.kwargs["follow_symlinks"])
        self.configure_logging.assert_called_once_with(verbose=False)

    def test_explicit_flags_override_config(self) -> None:
        self.config_path.write_text(
            json.dumps({"load_depth": 7, "theme": "reverse", "follow_symlinks": False}),
            encoding="utf-8",
        )
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            argv = [
                "lazycd",
                str(root),
                "--depth",
                "2",
                "--no-color",
                "--follow-symlinks",
                "--handoff-file",
                str(root / "out"),
                "-v",
            ]
            with mock.patch.object(sys, "argv", argv), mock.patch("lazycd.cli.run_browser") as run_browser:
                cli.main()

        path, depth, handoff_file, theme = run_browser.call_args.args
        self.assertEqual(path, root)
        self.assertEqual(depth, 2)
        self.assertEqual(handoff_file, root / "out")
        self.assertIs(theme, PLAIN_THEME)
        self.assertTrue(run_browser.call_args.kwargs["follow_symlinks"])
        self.configure_logging.assert_called_once_with(verbose=True)

    def test_config_values_apply_without_flags(self) -> None:
        self.config_path.write_text(
            json.dumps({"load_depth": 5, "theme": "reverse", "follow_symlinks": True, "handoff_filename": ".pick"}),
            encoding="utf-8",
        )
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            with mock.patch.object(sys, "argv", ["lazycd", str(root)]), mock.patch("lazycd.cli.run_browser") as run_browser:
                cli.main()

        _path, depth, handoff_file, theme = run_browser.call_args.args
        self.assertEqual(depth, 5)
        self.assertEqual(handoff_file.name, ".pick")
        self.assertEqual(theme.name, "reverse")
        self.assertTrue(run_browser.call_args.kwargs["follow_symlinks"])

    def test_missing_path_exits(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            missing = Path(tmp) / "nope"
            with mock.patch.object(sys, "argv", ["lazycd", str(missing)]), mock.patch("lazycd.cli.run_browser") as run_browser:
                with self.assertRaises(SystemExit) as ctx:
                    cli.main()

        run_browser.assert_not_called()
        self.assertIn("Path not found", str(ctx.exception.code))

    def test_file_path_exits(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            target = Path(tmp) / "file.txt"
            target.write_text("x", encoding="utf-8")
            with mock.patch.object(sys, "argv", ["lazycd", str(target)]), mock.patch("lazycd.cli.run_browser") as run_browser:
                with self.assertRaises(SystemExit) as ctx:
                    cli.main()

        run_browser.assert_not_called()
        self.assertIn("Not a directory", str(ctx.exception.code))

    def test_invalid_depth_is_rejected(self) -> None:
        stderr = io.StringIO()
        with mock.patch.object(sys, "argv", ["lazycd", "--depth", "0"]), mock.patch("sys.stderr", stderr):
            with self.assertRaises(SystemExit) as ctx:
                cli.main()

        self.assertEqual(ctx.exception.code, 2)
        self.assertIn("value must be >= 1", stderr.getvalue())

    def test_shell_init_prints_function_and_skips_browser(self) -> None:
        stdout = io.StringIO()
        with mock.patch.object(sys, "argv", ["lazycd", "--shell-init"]), mock.patch(
            "lazycd.cli.run_browser"
        ) as run_browser, mock.patch("sys.stdout", stdout):
            cli.main()

        run_browser.assert_not_called()
        self.assertIn("lcd() {", stdout.getvalue())
        self.assertIn(HANDOFF_FILENAME, stdout.getvalue())


if __name__ == "__main__":
    unittest.main()
