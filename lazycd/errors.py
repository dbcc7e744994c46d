"""Error types shared by the tree model, session, and hand-off writer."""

from __future__ import annotations

from pathlib import Path


class LazyCdError(Exception):
    """Base class for lazycd failures."""


class ScanFailure(LazyCdError):
    """A directory could not be opened or listed.

    Returned (not raised) by the scanner so loading can keep whatever it
    already has and carry on with sibling directories.
    """

    def __init__(self, path: Path, cause: OSError) -> None:
        super().__init__(f"cannot open directory {path}: {cause.strerror or cause}")
        self.path = path
        self.cause = cause


class DeliveryFailure(LazyCdError):
    """The chosen directory could not be written to the hand-off file."""

    def __init__(self, handoff_file: Path, cause: OSError) -> None:
        super().__init__(f"could not write {handoff_file}: {cause.strerror or cause}")
        self.handoff_file = handoff_file
        self.cause = cause
