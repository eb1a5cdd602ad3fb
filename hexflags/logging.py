from __future__ import annotations

import datetime as _dt
import json
import logging
import os
import sys
from typing import Any


LOG_LEVELS = {
    "error": logging.ERROR,
    "warning": logging.WARNING,
    "warn": logging.WARNING,
    "info": logging.INFO,
    "debug": logging.DEBUG,
}

_ANSI = {logging.ERROR: "31", logging.WARNING: "33", logging.INFO: "32"}

_RESERVED_ATTRS = set(logging.LogRecord("", 0, "", 0, "", (), None).__dict__) | {"message", "asctime"}


class LineFormatter(logging.Formatter):
    """One record per line, either ``key=value`` text or compact JSON.

    Anything passed through ``extra=`` is appended after the message.
    """

    def __init__(self, *, as_json: bool = False, use_color: bool = False) -> None:
        super().__init__()
        self._as_json = as_json
        self._use_color = use_color and not as_json

    def format(self, record: logging.LogRecord) -> str:
        ts = _dt.datetime.fromtimestamp(record.created).astimezone().isoformat(timespec="milliseconds")
        extras = {k: v for k, v in vars(record).items() if k not in _RESERVED_ATTRS and not k.startswith("_")}
        exc = self.formatException(record.exc_info) if record.exc_info else None

        if self._as_json:
            payload: dict[str, Any] = {"ts": ts, "level": record.levelname.lower(), "logger": record.name}
            payload["msg"] = record.getMessage()
            payload.update(extras)
            if exc:
                payload["exc"] = exc
            return json.dumps(payload, separators=(",", ":"), sort_keys=True, default=str)

        line = " ".join([ts, record.levelname, record.name, record.getMessage()])
        line += "".join(f" {k}={extras[k]}" for k in sorted(extras))
        if exc:
            line += "\n" + exc
        if self._use_color:
            code = next((c for lvl, c in sorted(_ANSI.items(), reverse=True) if record.levelno >= lvl), "36")
            line = f"\x1b[{code}m{line}\x1b[0m"
        return line


def parse_log_level(value: str | None) -> int:
    raw = (value or "warning").strip().lower()
    if raw not in LOG_LEVELS:
        raise ValueError("invalid log level")
    return LOG_LEVELS[raw]


def setup_logging(
    *,
    level: int = logging.WARNING,
    log_format: str = "pretty",
    log_file: str | None = None,
    no_color: bool = False,
) -> None:
    """Configure root logging on stderr (plus an optional file).

    Stdout is left to the decode output.
    """

    fmt = (log_format or "pretty").strip().lower()
    if fmt not in {"pretty", "json"}:
        raise ValueError("invalid log format")
    as_json = fmt == "json"
    tty = bool(getattr(sys.stderr, "isatty", lambda: False)())

    stderr_handler = logging.StreamHandler(stream=sys.stderr)
    stderr_handler.setFormatter(LineFormatter(as_json=as_json, use_color=tty and not no_color))
    handlers: list[logging.Handler] = [stderr_handler]

    if log_file:
        path = os.path.expanduser(str(log_file))
        os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
        file_handler = logging.FileHandler(path, encoding="utf-8")
        file_handler.setFormatter(LineFormatter(as_json=as_json))
        handlers.append(file_handler)

    logging.basicConfig(level=level, handlers=handlers, force=True)
