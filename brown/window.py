"""Curses window helpers: boxed windows, coloured text and sprites, input."""

from __future__ import annotations

import curses
from collections.abc import Mapping, Sequence
from typing import Any

_PAIR_SHIFT = 8


def color_pair_attr(pair: int) -> int:
    """The attribute that selects colour pair ``pair``."""
    return (pair << _PAIR_SHIFT) & curses.A_COLOR


def pair_number(attr: int) -> int:
    """The colour pair selected by attribute ``attr``."""
    return (attr & curses.A_COLOR) >> _PAIR_SHIFT


def create_newwin(height: int, width: int, starty: int, startx: int) -> Any:
    """Create a window with a default border and show it."""
    win = curses.newwin(height, width, starty, startx)
    win.box()
    win.refresh()
    return win


def destroy_win(win: Any) -> None:
    """Blank the window's border and refresh it."""
    win.border(*(" ",) * 8)
    win.refresh()


def print_colored(win: Any, y: int, x: int, pair: int, text: str) -> None:
    attr = color_pair_attr(pair)
    win.attron(attr)
    win.addstr(y, x, text)
    win.attroff(attr)


def add_char_colored(win: Any, y: int, x: int, pair: int, char: str) -> None:
    attr = color_pair_attr(pair)
    win.attron(attr)
    win.addch(y, x, char)
    win.attroff(attr)


def print_sprite(
    win: Any,
    y: int,
    x: int,
    sprite: Sequence[str],
    char_map: Mapping[str, int] | None = None,
) -> None:
    """Draw sprite rows; ',' is transparent and '.' is drawn as a blank.

    With a ``char_map`` each character is drawn in its mapped pair, else pair 0.
    """
    for row_index, row in enumerate(sprite):
        for col_index, char in enumerate(row):
            if char == ",":
                continue
            pair = char_map.get(char, 0) if char_map is not None else 0
            add_char_colored(win, y + row_index, x + col_index, pair, " " if char == "." else char)


def start_curses_flags(win: Any) -> None:
    win.keypad(True)
    curses.cbreak()
    win.nodelay(True)
    win.refresh()


def get_keyboard_input(win: Any) -> int:
    """The key code read from ``win`` (-1 when nothing is pressed)."""
    return win.getch()