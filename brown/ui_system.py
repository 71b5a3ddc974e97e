"""Draws text components over whatever colour lies beneath them."""

from __future__ import annotations

import curses
from pathlib import Path
from typing import TYPE_CHECKING, Any

from .components import UI, Transform
from .debug import LOG_FILE, log
from .ecs import System
from .types import Signature
from .window import color_pair_attr, pair_number

if TYPE_CHECKING:
    from .brain import Brain

TEXT_PAIR_BASE = 30
_MAX_STEP = 70
_LOGGED_PAIRS = 60


class UISystem(System):
    """Draws bold white text on the background colour found at its position.

    ``backend`` provides ``pair_content`` and ``init_pair``; it defaults to curses.
    """

    def __init__(self) -> None:
        super().__init__()
        self.backend: Any = curses
        self.log_path: str | Path = LOG_FILE
        self.step = 0
        self.pairs: dict[int, int] = {}

    @staticmethod
    def register_system(brain: Brain) -> UISystem:
        system = brain.register_system(UISystem)
        signature = Signature()
        signature.set(brain.get_component_type(UI))
        signature.set(brain.get_component_type(Transform))
        brain.set_system_signature(UISystem, signature)
        return system

    def draw(self, win: Any, brain: Brain) -> None:
        for entity in sorted(self.entities):
            ui = brain.get_component(entity, UI)
            tr = brain.get_component(entity, Transform)
            if not ui.is_visible:
                continue
            below = win.inch(tr.position.y - ui.offset.y, tr.position.x - ui.offset.x)
            _, bg = self.backend.pair_content(pair_number(below))
            self.pairs.setdefault(bg, TEXT_PAIR_BASE + self.step)
            self.backend.init_pair(TEXT_PAIR_BASE + self.step, curses.COLOR_WHITE, bg)
            attr = color_pair_attr(self.pairs[bg]) | curses.A_BOLD
            win.attron(attr)
            if ui.centered:
                x = tr.position.x + 1 - len(ui.text) // 2
                win.addstr(tr.position.y, x - ui.offset.x, ui.text)
            else:
                win.addstr(tr.position.y - ui.offset.y, tr.position.x - ui.offset.x, ui.text)
            win.attroff(attr)
            if self.step < _MAX_STEP:
                self.step += 1

    def log_colors(self) -> list[str]:
        """Log the foreground and background of the first pairs; return the lines."""
        lines = []
        for number in range(_LOGGED_PAIRS):
            fg, bg = self.backend.pair_content(number)
            line = f"Pair number {number} has fg: {fg} and bg: {bg}"
            log(line, __file__, self.log_path)
            lines.append(line)
        return lines