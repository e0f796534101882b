"""Registry of the stubs bundled with the package."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path, PurePosixPath
from types import MappingProxyType
from typing import Iterable, Mapping

from .errors import InvalidSelectionError

__all__ = [
    "COMPONENT_IDS",
    "DEFAULT_CATALOG",
    "STUB_DIRECTORY",
    "StubCatalog",
    "StubEntry",
]


STUB_DIRECTORY = Path(__file__).resolve().parent / "stubs"
STUB_EXTENSION = ".tsx"

COMPONENT_IDS: tuple[str, ...] = (
    "accordion",
    "avatar",
    "alert",
    "alert-dialog",
    "badge",
    "breadcrumbs",
    "button",
    "card",
    "checkbox",
    "collapsible",
    "dialog",
    "drawer",
    "dropdown",
    "hover-card",
    "icon",
    "input",
    "label",
    "menubar",
    "navigation-menu",
    "pagination",
    "popover",
    "progress",
    "radio-group",
    "select",
    "sheet",
    "switch",
    "table",
    "tabs",
    "text-area",
)

# Entries that do not land flat under the destination root.
_SPECIAL_DESTINATIONS: tuple[tuple[str, str, str], ...] = (
    ("default", "default.tsx", "layouts/default.tsx"),
    ("home", "home.tsx", "pages/home.tsx"),
    ("types", "types.ts", "lib/types.ts"),
    ("utils", "utils.ts", "lib/utils.ts"),
)


@dataclass(frozen=True, slots=True)
class StubEntry:
    """A single stub and where it is installed.

    Attributes
    ----------
    stub_id:
        Identifier used on the command line.
    source:
        File name inside the stub directory.
    destination:
        POSIX style path relative to the destination root.
    """

    stub_id: str
    source: str
    destination: str

    @classmethod
    def flat(cls, stub_id: str, extension: str = STUB_EXTENSION) -> "StubEntry":
        filename = f"{stub_id}{extension}"
        return cls(stub_id=stub_id, source=filename, destination=filename)


@dataclass(frozen=True, slots=True)
class StubCatalog:
    """Immutable, ordered set of known stubs."""

    entries: Mapping[str, StubEntry]
    stub_directory: Path = field(default=STUB_DIRECTORY)

    @classmethod
    def from_entries(
        cls,
        entries: Iterable[StubEntry],
        *,
        stub_directory: str | Path = STUB_DIRECTORY,
    ) -> "StubCatalog":
        """Build a catalog, rejecting duplicate identifiers."""

        index: dict[str, StubEntry] = {}
        for entry in entries:
            if entry.stub_id in index:
                raise ValueError(f"duplicate stub id '{entry.stub_id}'")
            index[entry.stub_id] = entry
        return cls(entries=MappingProxyType(index), stub_directory=Path(stub_directory))

    @classmethod
    def default(cls) -> "StubCatalog":
        entries = [StubEntry.flat(stub_id) for stub_id in COMPONENT_IDS]
        entries.extend(
            StubEntry(stub_id=stub_id, source=source, destination=destination)
            for stub_id, source, destination in _SPECIAL_DESTINATIONS
        )
        return cls.from_entries(entries)

    def with_stub_directory(self, stub_directory: str | Path) -> "StubCatalog":
        """Return a copy of the catalog reading sources from ``stub_directory``."""

        return StubCatalog(entries=self.entries, stub_directory=Path(stub_directory))

    def list_all(self) -> tuple[str, ...]:
        return tuple(self.entries)

    def is_valid(self, token: str) -> bool:
        return token in self.entries

    def entry(self, stub_id: str) -> StubEntry:
        try:
            return self.entries[stub_id]
        except KeyError as exc:
            raise InvalidSelectionError([stub_id]) from exc

    def validate(self, tokens: Iterable[str]) -> tuple[str, ...]:
        """Return ``tokens`` de-duplicated, or raise listing every unknown one."""

        requested = tuple(dict.fromkeys(tokens))
        invalid = [token for token in requested if not self.is_valid(token)]
        if invalid:
            raise InvalidSelectionError(invalid)
        return requested

    def resolve_paths(self, stub_id: str, destination_root: str | Path) -> tuple[Path, Path]:
        """Return the ``(source, destination)`` pair for ``stub_id``."""

        entry = self.entry(stub_id)
        source = self.stub_directory / entry.source
        destination = Path(destination_root).joinpath(*PurePosixPath(entry.destination).parts)
        return source, destination

    def __contains__(self, token: object) -> bool:
        return token in self.entries

    def __iter__(self):
        return iter(self.entries.values())

    def __len__(self) -> int:
        return len(self.entries)


DEFAULT_CATALOG = StubCatalog.default()
