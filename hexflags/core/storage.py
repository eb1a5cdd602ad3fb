from __future__ import annotations

import logging
import os
import platform
import subprocess
from pathlib import Path

from hexflags.config import TABLE_SUFFIX
from hexflags.errors import StorageError


log = logging.getLogger(__name__)


def list_types(base_dir: str | Path) -> list[str]:
    root = Path(base_dir)
    if not root.is_dir():
        return []
    names = [p.name[: -len(TABLE_SUFFIX)] for p in root.iterdir() if p.is_file() and p.name.endswith(TABLE_SUFFIX)]
    return sorted(n for n in names if n)


def open_in_file_browser(path: str | Path) -> None:
    target = str(Path(path))
    system = platform.system()
    log.debug("opening storage dir", extra={"path": target, "system": system})
    try:
        if system == "Windows":
            os.startfile(target)  # type: ignore[attr-defined]
        elif system == "Darwin":
            subprocess.Popen(["open", target])
        else:
            subprocess.Popen(["xdg-open", target])
    except OSError as exc:
        raise StorageError(f"failed to open {target}: {exc}") from exc
