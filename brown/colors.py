"""Terminal colour palettes and the character-to-colour map."""

from __future__ import annotations

import curses
import re
from pathlib import Path
from typing import Any

from .debug import LOG_FILE, error

COLOR_PATH = Path("./src/assets/colors/")
FIRST_CUSTOM_ID = 8

_RGB_SCALE = 1000 // 255
_WORD = re.compile(r"\s*(\S+)")
_CHAR = re.compile(r"\s*(\S)")


def parse_palette(text: str) -> list[tuple[str, int, int, int]]:
    """Read ``name r g b`` records, stopping at the first malformed one."""
    tokens = text.split()
    records = []
    for start in range(0, len(tokens) - 3, 4):
        name, *rgb = tokens[start : start + 4]
        try:
            r, g, b = (int(value) for value in rgb)
        except ValueError:
            break
        records.append((name, r, g, b))
    return records


def parse_color_map(text: str) -> list[tuple[str, str]]:
    """Read ``colour_name char`` records; the char is one non-blank character."""
    records = []
    pos = 0
    while True:
        word = _WORD.match(text, pos)
        if word is None:
            break
        char = _CHAR.match(text, word.end())
        if char is None:
            break
        records.append((word.group(1), char.group(1)))
        pos = char.end()
    return records


class ColorPalette:
    """Named colour pairs loaded from palette files and a char-to-pair map.

    ``backend`` provides ``has_colors``, ``start_color``, ``init_color`` and
    ``init_pair``; it defaults to the curses module.
    """

    def __init__(
        self,
        color_path: str | Path = COLOR_PATH,
        backend: Any = None,
        log_path: str | Path = LOG_FILE,
    ) -> None:
        self.color_path = Path(color_path)
        self.backend = curses if backend is None else backend
        self.log_path = log_path
        self.palette: dict[str, int] = {}
        self.char_map: dict[str, int] = {}
        self.next_color_id = FIRST_CUSTOM_ID
        self.next_pair_id = FIRST_CUSTOM_ID

    def start_colors(self) -> None:
        """Enable colour mode; raise EngineError when the terminal lacks colours."""
        if not self.backend.has_colors():
            error("Colors not supported!", __file__, 0, self.log_path)
        self.backend.start_color()

    def init_color_from_rgb(self, color_id: int, r: int, g: int, b: int) -> None:
        """Define colour ``color_id`` from 0-255 components."""
        self.backend.init_color(color_id, r * _RGB_SCALE, g * _RGB_SCALE, b * _RGB_SCALE)

    def make_pair(self, pair_id: int, fg: int, bg: int) -> None:
        self.backend.init_pair(pair_id, fg, bg)

    def init_palette_from_file(self, name: str) -> None:
        """Load ``<name>.color`` and make a solid pair for every colour in it."""
        text = (self.color_path / f"{name}.color").read_text(encoding="utf-8")
        for color_name, r, g, b in parse_palette(text):
            self.init_color_from_rgb(self.next_color_id, r, g, b)
            self.make_pair(self.next_pair_id, self.next_color_id, self.next_color_id)
            self.palette.setdefault(color_name, self.next_pair_id)
            self.next_color_id += 1
            self.next_pair_id += 1

    def init_color_map_from_file(self, name: str) -> None:
        """Load ``<name>.map``; unknown colour names map to pair 0."""
        text = (self.color_path / f"{name}.map").read_text(encoding="utf-8")
        for color_name, char in parse_color_map(text):
            self.char_map.setdefault(char, self.palette.get(color_name, 0))

    def add_custom_pair(self, fg: int, bg: int) -> int:
        """Define the next pair; return the pair counter after the allocation."""
        self.backend.init_pair(self.next_pair_id, fg, bg)
        self.next_pair_id += 1
        return self.next_pair_id

    def add_custom_color(self, r: int, g: int, b: int) -> int:
        """Define the next colour from 0-1000 components; return the counter after it."""
        self.backend.init_color(self.next_color_id, r, g, b)
        self.next_color_id += 1
        return self.next_color_id

    def pair_for_char(self, char: str) -> int:
        return self.char_map.get(char, 0)