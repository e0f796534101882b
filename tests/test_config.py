from __future__ import annotations

from pathlib import Path

import pytest

from atx_components.config import MAX_WORKERS_CAP, MODE_DESTINATIONS, InstallConfig, default_max_workers


def test_defaults_to_current_directory(tmp_path: Path):
    config = InstallConfig.from_options(cwd=tmp_path)
    assert config.destination == tmp_path.resolve()
    assert config.selection.is_all
    assert config.mode == "project"
    assert 1 <= config.max_workers <= MAX_WORKERS_CAP


def test_primitives_mode_uses_convention_path(tmp_path: Path):
    config = InstallConfig.from_options(mode="primitives", cwd=tmp_path)
    assert config.destination == (tmp_path / "UI" / "components" / "primitives").resolve()


def test_explicit_target_wins_over_mode(tmp_path: Path):
    config = InstallConfig.from_options("views", ["card"], mode="primitives", cwd=tmp_path)
    assert config.destination == (tmp_path / "views").resolve()
    assert config.selection.stub_ids == ("card",)


def test_absolute_target_is_kept(tmp_path: Path):
    target = tmp_path / "elsewhere"
    config = InstallConfig.from_options(target, cwd=tmp_path / "cwd")
    assert config.destination == target.resolve()


def test_jobs_override(tmp_path: Path):
    assert InstallConfig.from_options(jobs=3, cwd=tmp_path).max_workers == 3


@pytest.mark.parametrize("options", [{"mode": "desktop"}, {"jobs": 0}])
def test_rejects_invalid_options(tmp_path: Path, options):
    with pytest.raises(ValueError):
        InstallConfig.from_options(cwd=tmp_path, **options)


def test_default_worker_count_is_capped(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setattr("atx_components.config.os.cpu_count", lambda: 64)
    assert default_max_workers() == MAX_WORKERS_CAP
    monkeypatch.setattr("atx_components.config.os.cpu_count", lambda: None)
    assert default_max_workers() == 1


def test_mode_destinations_are_read_only():
    with pytest.raises(TypeError):
        MODE_DESTINATIONS["desktop"] = Path("desktop")  # type: ignore[index]
