from __future__ import annotations

from pathlib import Path

import pytest

from hexflags.config import ensure_storage_dir, home_dir, storage_dir
from hexflags.errors import ConfigError


def test_home_prefers_home_over_userprofile(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    monkeypatch.setenv("USERPROFILE", str(tmp_path / "profile"))
    assert home_dir() == tmp_path / "home"


def test_home_falls_back_to_userprofile(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.delenv("HOME", raising=False)
    monkeypatch.setenv("USERPROFILE", str(tmp_path))
    assert home_dir() == tmp_path


def test_home_missing_raises(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("HOME", raising=False)
    monkeypatch.delenv("USERPROFILE", raising=False)
    with pytest.raises(ConfigError):
        home_dir()


def test_storage_dir_precedence(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.delenv("HEXFLAGS_DIR", raising=False)
    assert storage_dir() == tmp_path / ".bitflags"

    monkeypatch.setenv("HEXFLAGS_DIR", str(tmp_path / "env"))
    assert storage_dir() == tmp_path / "env"
    assert storage_dir(tmp_path / "cli") == tmp_path / "cli"


def test_ensure_storage_dir(tmp_path: Path) -> None:
    target = tmp_path / "tables"
    assert ensure_storage_dir(target) == target
    assert target.is_dir()
    ensure_storage_dir(target)


def test_ensure_storage_dir_does_not_create_parents(tmp_path: Path) -> None:
    target = tmp_path / "typo" / "tables"
    with pytest.raises(ConfigError, match="parent directory does not exist"):
        ensure_storage_dir(target)
    assert not (tmp_path / "typo").exists()
