from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from atx_components.catalog import DEFAULT_CATALOG, StubCatalog  # noqa: E402


@pytest.fixture()
def stub_dir(tmp_path: Path) -> Path:
    """A private copy of the stub directory with small, predictable payloads."""

    directory = tmp_path / "stubs"
    directory.mkdir()
    for entry in DEFAULT_CATALOG:
        (directory / entry.source).write_text(f"// {entry.stub_id}\n", encoding="utf-8")
    return directory


@pytest.fixture()
def catalog(stub_dir: Path) -> StubCatalog:
    return DEFAULT_CATALOG.with_stub_directory(stub_dir)


@pytest.fixture()
def dest(tmp_path: Path) -> Path:
    return tmp_path / "out"
