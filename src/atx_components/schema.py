"""Schemas describing copy tasks and their outcomes."""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import List

from pydantic import BaseModel, ConfigDict, Field


class OutcomeStatus(str, Enum):
    """Result of a single copy task."""

    SUCCESS = "success"
    FAILURE = "failure"


class CopyTask(BaseModel):
    """Resolved source and destination for one stub."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    stub_id: str = Field(..., description="Catalog identifier of the stub.")
    source: Path = Field(..., description="Bundled file to copy.")
    destination: Path = Field(..., description="Path the stub is written to.")


class CopyOutcome(BaseModel):
    """What happened when a :class:`CopyTask` was executed."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    stub_id: str = Field(..., description="Catalog identifier of the stub.")
    source: Path = Field(..., description="Bundled file that was copied.")
    destination: Path = Field(..., description="Path the stub was written to.")
    status: OutcomeStatus = Field(..., description="Whether the copy succeeded.")
    error: str | None = Field(None, description="Failure class, e.g. 'source_missing'.")
    reason: str | None = Field(None, description="Human-readable failure reason.")

    @classmethod
    def success(cls, task: CopyTask) -> "CopyOutcome":
        return cls(
            stub_id=task.stub_id,
            source=task.source,
            destination=task.destination,
            status=OutcomeStatus.SUCCESS,
        )

    @classmethod
    def failure(cls, task: CopyTask, error: str, reason: str) -> "CopyOutcome":
        return cls(
            stub_id=task.stub_id,
            source=task.source,
            destination=task.destination,
            status=OutcomeStatus.FAILURE,
            error=error,
            reason=reason,
        )

    @property
    def ok(self) -> bool:
        return self.status is OutcomeStatus.SUCCESS


class InstallReport(BaseModel):
    """Aggregate of every outcome produced by one installer run."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    destination_root: Path = Field(..., description="Root directory stubs were installed under.")
    outcomes: List[CopyOutcome] = Field(default_factory=list, description="Outcomes in selection order.")

    @property
    def succeeded(self) -> list[CopyOutcome]:
        return [outcome for outcome in self.outcomes if outcome.ok]

    @property
    def failed(self) -> list[CopyOutcome]:
        return [outcome for outcome in self.outcomes if not outcome.ok]

    @property
    def ok(self) -> bool:
        return not self.failed


__all__ = [
    "CopyOutcome",
    "CopyTask",
    "InstallReport",
    "OutcomeStatus",
]
