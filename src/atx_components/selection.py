"""Selection of the stubs a caller wants to install."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from .catalog import StubCatalog

__all__ = ["ALL", "Selection"]


@dataclass(frozen=True, slots=True)
class Selection:
    """Either every stub in a catalog or an ordered subset of identifiers.

    ``stub_ids`` is ``None`` for the "all" selection. An explicitly empty
    request is treated as "all" as well, matching the command line default.
    """

    stub_ids: tuple[str, ...] | None = None

    def __post_init__(self) -> None:
        if self.stub_ids is not None and not self.stub_ids:
            object.__setattr__(self, "stub_ids", None)

    @classmethod
    def all(cls) -> "Selection":
        return cls(None)

    @classmethod
    def of(cls, stub_ids: Iterable[str] | None) -> "Selection":
        if stub_ids is None:
            return cls.all()
        if isinstance(stub_ids, str):
            stub_ids = [stub_ids]
        return cls(tuple(dict.fromkeys(stub_ids)))

    @classmethod
    def coerce(cls, value: "Selection | Iterable[str] | None") -> "Selection":
        if isinstance(value, Selection):
            return value
        return cls.of(value)

    @property
    def is_all(self) -> bool:
        return self.stub_ids is None

    def resolve(self, catalog: StubCatalog) -> tuple[str, ...]:
        """Expand to concrete identifiers, validating them against ``catalog``."""

        if self.stub_ids is None:
            return catalog.list_all()
        return catalog.validate(self.stub_ids)


ALL = Selection.all()
