"""Commit hand-off to the invoking shell.

The chosen directory is written, as plain text with no trailing newline, to
a well-known file in the working directory. A small shell function wraps
``lazycd``, reads that file, removes it, and changes into the path. Each
run starts by removing a file left behind by an earlier one.
"""

from __future__ import annotations

import shlex
from pathlib import Path

from .errors import DeliveryFailure

HANDOFF_FILENAME = ".newdir.lazycd"
SHELL_FUNCTION_NAME = "lcd"


def default_handoff_file(filename: str = HANDOFF_FILENAME) -> Path:
    """Return the hand-off file location inside the current working directory."""
    return Path.cwd() / filename


def write_chosen_directory(chosen: Path, handoff_file: Path) -> None:
    """Write ``chosen`` to ``handoff_file``; raise ``DeliveryFailure`` on error."""
    try:
        handoff_file.write_text(str(chosen), encoding="utf-8")
    except OSError as exc:
        raise DeliveryFailure(handoff_file, exc) from exc


def clear_handoff_file(handoff_file: Path) -> None:
    """Remove a hand-off file left behind by an earlier run, if any.

    Raises ``OSError`` if the file exists but cannot be removed.
    """
    handoff_file.unlink(missing_ok=True)


def read_chosen_directory(handoff_file: Path) -> Path | None:
    """Return the path recorded in ``handoff_file``, or ``None`` if absent/empty."""
    try:
        text = handoff_file.read_text(encoding="utf-8")
    except OSError:
        return None
    return Path(text) if text else None


def shell_init_script(
    command: str = "lazycd",
    function_name: str = SHELL_FUNCTION_NAME,
    filename: str = HANDOFF_FILENAME,
) -> str:
    """Return a POSIX shell function that runs ``command`` and follows its choice.

    A stale hand-off file is removed before ``command`` starts. The path is
    read with a trailing sentinel so newlines at its end survive command
    substitution.
    """
    quoted_file = shlex.quote(filename)
    return (
        f"{function_name}() {{\n"
        f"    rm -f {quoted_file}\n"
        f"    command {command} \"$@\" || return\n"
        f"    if [ -f {quoted_file} ]; then\n"
        f"        _lazycd_target=\"$(cat {quoted_file}; printf x)\"\n"
        f"        _lazycd_target=\"${{_lazycd_target%x}}\"\n"
        f"        rm -f {quoted_file}\n"
        f"        cd \"$_lazycd_target\" || return\n"
        f"        unset _lazycd_target\n"
        f"    fi\n"
        f"}}\n"
    )
