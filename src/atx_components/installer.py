"""Copy bundled stubs into a consumer project."""

from __future__ import annotations

import asyncio
import logging
import os
import shutil
import tempfile
from pathlib import Path
from typing import Iterable

from .catalog import DEFAULT_CATALOG, StubCatalog
from .config import default_max_workers
from .errors import DestinationWriteError, SourceMissingError, StubCopyError
from .schema import CopyOutcome, CopyTask
from .selection import Selection

__all__ = ["StubInstaller", "copy_file_atomic"]


LOGGER = logging.getLogger(__name__)


def copy_file_atomic(task: CopyTask) -> None:
    """Copy ``task.source`` over ``task.destination`` via write-then-rename.

    The bytes are streamed into a temporary sibling of the destination which
    is renamed into place once fully written, so readers only ever observe the
    previous file or the complete new one.
    """

    source = task.source
    destination = task.destination

    if not source.is_file():
        raise SourceMissingError(task.stub_id, source, "source file does not exist")

    try:
        destination.parent.mkdir(parents=True, exist_ok=True)
        fd, temp_name = tempfile.mkstemp(
            prefix=f".{destination.name}.",
            suffix=".tmp",
            dir=destination.parent,
        )
    except OSError as exc:
        raise DestinationWriteError(task.stub_id, destination, _describe(exc)) from exc

    temp_path = Path(temp_name)
    try:
        with os.fdopen(fd, "wb") as handle:
            try:
                with source.open("rb") as reader:
                    shutil.copyfileobj(reader, handle)
            except FileNotFoundError as exc:
                raise SourceMissingError(task.stub_id, source, "source file does not exist") from exc
            handle.flush()
            os.fsync(handle.fileno())
        shutil.copymode(source, temp_path)
        os.replace(temp_path, destination)
    except StubCopyError:
        temp_path.unlink(missing_ok=True)
        raise
    except OSError as exc:
        temp_path.unlink(missing_ok=True)
        raise DestinationWriteError(task.stub_id, destination, _describe(exc)) from exc
    except BaseException:
        temp_path.unlink(missing_ok=True)
        raise


def _describe(exc: OSError) -> str:
    return exc.strerror or str(exc)


class StubInstaller:
    """Resolve a :class:`Selection` into copy tasks and execute them.

    Validation of the whole selection happens before any filesystem change.
    Individual copy failures are recorded in the returned outcomes and never
    stop the remaining tasks.
    """

    def __init__(
        self,
        catalog: StubCatalog | None = None,
        *,
        max_workers: int | None = None,
    ) -> None:
        if max_workers is not None and max_workers < 1:
            raise ValueError("max_workers must be a positive integer")
        self.catalog = DEFAULT_CATALOG if catalog is None else catalog
        self.max_workers = max_workers or default_max_workers()

    def plan(
        self,
        selection: Selection | Iterable[str] | None,
        destination_root: str | Path,
    ) -> list[CopyTask]:
        """Return the copy tasks for ``selection`` without touching the disk."""

        stub_ids = Selection.coerce(selection).resolve(self.catalog)
        return [self._task(stub_id, destination_root) for stub_id in stub_ids]

    def copy_one(self, stub_id: str, destination_root: str | Path) -> CopyOutcome:
        return self._execute(self._task(stub_id, destination_root))

    def run(
        self,
        selection: Selection | Iterable[str] | None,
        destination_root: str | Path,
    ) -> list[CopyOutcome]:
        """Install ``selection`` under ``destination_root`` and wait for every copy."""

        return asyncio.run(self.run_async(selection, destination_root))

    async def run_async(
        self,
        selection: Selection | Iterable[str] | None,
        destination_root: str | Path,
    ) -> list[CopyOutcome]:
        tasks = self.plan(selection, destination_root)
        LOGGER.debug(
            "Installing %d stub(s) into %s with %d worker(s)",
            len(tasks),
            destination_root,
            self.max_workers,
        )
        semaphore = asyncio.Semaphore(self.max_workers)

        async def bounded(task: CopyTask) -> CopyOutcome:
            async with semaphore:
                return await asyncio.to_thread(self._execute, task)

        return list(await asyncio.gather(*(bounded(task) for task in tasks)))

    def _task(self, stub_id: str, destination_root: str | Path) -> CopyTask:
        source, destination = self.catalog.resolve_paths(stub_id, destination_root)
        return CopyTask(stub_id=stub_id, source=source, destination=destination)

    def _execute(self, task: CopyTask) -> CopyOutcome:
        try:
            copy_file_atomic(task)
        except StubCopyError as exc:
            LOGGER.warning("Error copying %s: %s", task.stub_id, exc.reason)
            return CopyOutcome.failure(task, exc.kind, exc.reason)
        LOGGER.info("Copied %s to %s", task.stub_id, task.destination)
        return CopyOutcome.success(task)
