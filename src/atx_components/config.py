"""Configuration helpers shared by the installer and CLI."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Iterable, Mapping

from .selection import Selection

__all__ = [
    "DEFAULT_MODE",
    "MAX_WORKERS_CAP",
    "MODE_DESTINATIONS",
    "InstallConfig",
    "default_max_workers",
]


MODE_DESTINATIONS: Mapping[str, Path] = MappingProxyType(
    {
        "project": Path("."),
        "primitives": Path("UI") / "components" / "primitives",
    }
)
DEFAULT_MODE = "project"

MAX_WORKERS_CAP = 8


def default_max_workers() -> int:
    return max(1, min(MAX_WORKERS_CAP, os.cpu_count() or 1))


@dataclass(slots=True)
class InstallConfig:
    """Options describing a single ``add`` invocation.

    Attributes
    ----------
    destination:
        Absolute directory stubs are installed under.
    selection:
        Stubs requested by the caller, ``Selection.all()`` when none were given.
    mode:
        Deployment mode that supplied the default destination.
    max_workers:
        Upper bound on concurrent copies.
    """

    destination: Path
    selection: Selection
    mode: str = DEFAULT_MODE
    max_workers: int = 1

    @classmethod
    def from_options(
        cls,
        target_path: str | Path | None = None,
        stub_ids: Iterable[str] | None = None,
        *,
        mode: str = DEFAULT_MODE,
        jobs: int | None = None,
        cwd: str | Path | None = None,
    ) -> "InstallConfig":
        """Build an :class:`InstallConfig` from command line style values.

        Parameters
        ----------
        target_path:
            Explicit destination. Takes precedence over the mode default.
        stub_ids:
            Requested identifiers; ``None`` or empty selects every stub.
        mode:
            Either ``"project"`` or ``"primitives"``.
        jobs:
            Optional override for the number of concurrent copies.
        cwd:
            Directory relative destinations are resolved against. Defaults to
            the current working directory.
        """

        if mode not in MODE_DESTINATIONS:
            choices = ", ".join(sorted(MODE_DESTINATIONS))
            raise ValueError(f"unknown mode '{mode}'. Expected one of: {choices}")
        if jobs is not None and jobs < 1:
            raise ValueError("jobs must be a positive integer")

        base = Path(cwd) if cwd is not None else Path.cwd()
        target = Path(target_path) if target_path else MODE_DESTINATIONS[mode]
        destination = (base / target.expanduser()).resolve()

        return cls(
            destination=destination,
            selection=Selection.of(stub_ids),
            mode=mode,
            max_workers=jobs or default_max_workers(),
        )
