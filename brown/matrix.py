"""A fixed-size two-dimensional grid stored as a flat list."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from pathlib import Path
from typing import Any


def _parse_token(token: str) -> Any:
    try:
        return int(token)
    except ValueError:
        return token


class Mat:
    """A grid of ``x`` columns by ``y`` rows."""

    def __init__(self, x: int, y: int | None = None, data: Iterable[Any] | None = None) -> None:
        if y is None:
            y = x
        if x < 0 or y < 0:
            raise ValueError("matrix dimensions must be non-negative")
        self._x = x
        self._y = y
        count = x * y
        if data is None:
            self._data: list[Any] = [0] * count
        else:
            values = list(data)
            if len(values) < count:
                raise ValueError(f"expected {count} values, got {len(values)}")
            self._data = values[:count]

    @property
    def x(self) -> int:
        return self._x

    @property
    def y(self) -> int:
        return self._y

    def _check(self, index: int) -> int:
        if not 0 <= index < len(self._data):
            raise IndexError(f"matrix index {index} out of range")
        return index

    def set_all(self, data: Iterable[Any]) -> None:
        """Replace every element from the first ``x * y`` values of ``data``."""
        values = list(data)
        if len(values) < len(self._data):
            raise ValueError(f"expected {len(self._data)} values, got {len(values)}")
        self._data = values[: len(self._data)]

    def set(self, value: Any, x: int, y: int) -> None:
        """Store ``value`` at the row-major position ``x * y_size + y``."""
        self._data[self._check(x * self._y + y)] = value

    def at(self, x: int, y: int) -> Any:
        """Element at column ``x`` of row ``y``."""
        return self._data[self._check(x + y * self._x)]

    def put(self, value: Any, x: int, y: int) -> None:
        """Store ``value`` at the position that :meth:`at` reads."""
        self._data[self._check(x + y * self._x)] = value

    def load_from_file(self, path: str | Path) -> None:
        """Fill the grid from whitespace-separated tokens; integers are converted."""
        tokens = Path(path).read_text(encoding="utf-8").split()
        if len(tokens) < len(self._data):
            raise ValueError(f"expected {len(self._data)} values, got {len(tokens)}")
        self._data = [_parse_token(token) for token in tokens[: len(self._data)]]

    def rotate(self) -> None:
        """Rotate a square grid a quarter turn clockwise."""
        if self._x != self._y:
            raise ValueError("only square matrices can be rotated")
        n = self._x
        old = self._data
        self._data = [old[(n - 1 - c) * n + r] for r in range(n) for c in range(n)]

    def __getitem__(self, index: int) -> Any:
        return self._data[self._check(index)]

    def __setitem__(self, index: int, value: Any) -> None:
        self._data[self._check(index)] = value

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._data)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Mat):
            return NotImplemented
        return (self._x, self._y, self._data) == (other._x, other._y, other._data)

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        parts = []
        for i, value in enumerate(self._data):
            parts.append(f"{value} ")
            if i % self._x == self._x - 1:
                parts.append("\n")
        return "".join(parts)

    def __repr__(self) -> str:
        return f"Mat({self._x}, {self._y}, {self._data!r})"