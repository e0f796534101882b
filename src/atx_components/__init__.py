"""Install presentational UI component stubs into a project.

The package bundles a catalog of component templates and an installer that
copies a selection of them, byte for byte, below a destination directory. It
can be used programmatically or through the ``atx-components`` command.
"""

from __future__ import annotations

from .catalog import DEFAULT_CATALOG, StubCatalog, StubEntry
from .config import InstallConfig
from .errors import (
    DestinationWriteError,
    InvalidSelectionError,
    SourceMissingError,
    StubCopyError,
    StubError,
)
from .installer import StubInstaller
from .schema import CopyOutcome, CopyTask, InstallReport, OutcomeStatus
from .selection import ALL, Selection

__all__ = [
    "ALL",
    "CopyOutcome",
    "CopyTask",
    "DEFAULT_CATALOG",
    "DestinationWriteError",
    "InstallConfig",
    "InstallReport",
    "InvalidSelectionError",
    "OutcomeStatus",
    "Selection",
    "SourceMissingError",
    "StubCatalog",
    "StubCopyError",
    "StubEntry",
    "StubError",
    "StubInstaller",
]

__version__ = "0.1.0"
