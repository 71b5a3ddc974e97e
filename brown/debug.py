"""Logging to the engine log file and fatal-condition reporting."""

from __future__ import annotations

from pathlib import Path
from typing import Any

LOG_FILE = "LOG.txt"


class EngineError(Exception):
    """A fatal engine error."""


class AssertionFailure(EngineError):
    """An engine invariant did not hold."""


def _append(path: str | Path, line: str) -> None:
    with open(path, "a", encoding="utf-8") as handle:
        handle.write(line + "\n")


def log(message: Any, file: str = "", path: str | Path = LOG_FILE) -> None:
    """Append a log line naming the file it came from."""
    _append(path, f"[LOG] FILE: {file}: {message}")


def ensure(
    check: bool,
    message: str,
    file: str = "",
    line: int = 0,
    assertion: str = "",
    path: str | Path = LOG_FILE,
) -> None:
    """Record and raise AssertionFailure when ``check`` is false."""
    if not check:
        _append(
            path,
            f"[ASSERT] FILE: {file}, at line: {line}: {message} ({assertion})",
        )
        raise AssertionFailure(message)


def error(message: str, file: str = "", line: int = 0, path: str | Path = LOG_FILE) -> None:
    """Record and raise EngineError."""
    _append(path, f"[ERROR] FILE: {file}, at line: {line}: {message}")
    raise EngineError(message)