"""Command-line front door for lazycd.

Parses CLI options, merges them with the persisted config, and either prints
the shell integration snippet or launches the interactive browser.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from . import config
from .diagnostics import configure_logging
from .handoff import HANDOFF_FILENAME, default_handoff_file, shell_init_script
from .runtime import run_browser
from .tree_model import LOAD_DIR_DEPTH
from .ui_theme import available_theme_names, resolve_theme


def _positive_int(value: str) -> int:
    """argparse type for positive integer values."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError("value must be >= 1")
    return parsed


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lazycd",
        description="Browse the directory tree and hand the chosen directory back to the shell.",
    )
    parser.add_argument("path", nargs="?", default=None, help="Directory to browse. Defaults to current directory.")
    parser.add_argument(
        "--depth",
        type=_positive_int,
        default=None,
        help=f"Directory levels loaded at startup and per expansion (default: {LOAD_DIR_DEPTH}).",
    )
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable colors; keep the selection highlight.")
    parser.add_argument(
        "--follow-symlinks",
        action="store_true",
        default=None,
        help="List and traverse symlinked directories (cycles are skipped).",
    )
    parser.add_argument(
        "--handoff-file",
        metavar="PATH",
        default=None,
        help=f"File that receives the chosen directory (default: ./{HANDOFF_FILENAME}).",
    )
    parser.add_argument(
        "--shell-init",
        action="store_true",
        help="Print a shell function that cds into the chosen directory, then exit.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Report debug diagnostics on stderr.")
    return parser


def main(default_path: Path | None = None) -> None:
    """Parse CLI arguments and launch the browser.

    ``default_path`` is primarily for tests; when omitted the current working
    directory is used.
    """
    args = build_parser().parse_args()
    configure_logging(verbose=args.verbose)

    handoff_filename = config.load_handoff_filename() or HANDOFF_FILENAME
    if args.shell_init:
        sys.stdout.write(shell_init_script(filename=handoff_filename))
        return

    if default_path is None:
        default_path = Path.cwd()
    path = Path(args.path or default_path)
    if not path.exists():
        raise SystemExit(f"Path not found: {path}")
    if not path.is_dir():
        raise SystemExit(f"Not a directory: {path}")

    load_depth = args.depth if args.depth is not None else (config.load_depth() or LOAD_DIR_DEPTH)
    follow_symlinks = args.follow_symlinks if args.follow_symlinks is not None else config.load_follow_symlinks()
    theme = resolve_theme(args.theme or config.load_theme_name(), no_color=args.no_color)
    handoff_file = Path(args.handoff_file) if args.handoff_file else default_handoff_file(handoff_filename)

    run_browser(
        path.resolve(),
        load_depth,
        handoff_file,
        theme,
        follow_symlinks=follow_symlinks,
    )


if __name__ == "__main__":
    main()
