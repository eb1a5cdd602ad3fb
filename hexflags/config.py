from __future__ import annotations

import os
from pathlib import Path

from hexflags.errors import ConfigError


STORAGE_DIRNAME = ".bitflags"
TABLE_SUFFIX = ".yml"


def home_dir() -> Path:
    for name in ("HOME", "USERPROFILE"):
        env = (os.getenv(name, "") or "").strip()
        if env:
            return Path(env)
    raise ConfigError('Your environment does not contain "HOME" and "USERPROFILE" necessary variables')


def storage_dir(override: str | Path | None = None) -> Path:
    """Resolve the directory holding the flag tables.

    Precedence (highest to lowest):
    1) explicit parameter (typically CLI --dir)
    2) env var HEXFLAGS_DIR
    3) default <home>/.bitflags
    """

    if override is not None:
        return Path(override).expanduser()
    env = (os.getenv("HEXFLAGS_DIR", "") or "").strip()
    if env:
        return Path(env).expanduser()
    return home_dir() / STORAGE_DIRNAME


def ensure_storage_dir(path: Path) -> Path:
    # Only the last path component is ever created.
    try:
        path.mkdir(exist_ok=True)
    except FileNotFoundError as exc:
        raise ConfigError(f"parent directory does not exist: {path.parent}") from exc
    return path
