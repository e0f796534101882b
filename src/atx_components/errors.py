"""Custom exception types raised while installing stubs."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable

__all__ = [
    "DestinationWriteError",
    "InvalidSelectionError",
    "SourceMissingError",
    "StubCopyError",
    "StubError",
]


class StubError(RuntimeError):
    """Base class for every error raised by :mod:`atx_components`."""


class InvalidSelectionError(StubError):
    """Raised when requested stub identifiers are not part of the catalog."""

    def __init__(self, tokens: Iterable[str]) -> None:
        self.invalid = tuple(tokens)
        listed = ", ".join(repr(token) for token in self.invalid)
        super().__init__(f"unknown stub(s): {listed}")


class StubCopyError(StubError):
    """Raised when a single stub cannot be copied."""

    kind = "copy"

    def __init__(self, stub_id: str, path: Path, reason: str) -> None:
        self.stub_id = stub_id
        self.path = path
        self.reason = reason
        super().__init__(f"{stub_id}: {reason} ({path})")


class SourceMissingError(StubCopyError):
    """The bundled source file for a stub does not exist."""

    kind = "source_missing"


class DestinationWriteError(StubCopyError):
    """The destination file could not be written."""

    kind = "destination_write"
