"""Frame timing."""

from __future__ import annotations

import time

FPS = 60


class Timer:
    """Measures wall-clock seconds since it was created or last started."""

    def __init__(self) -> None:
        self._start = time.perf_counter()

    def start(self) -> None:
        self._start = time.perf_counter()

    def elapsed(self) -> float:
        return time.perf_counter() - self._start