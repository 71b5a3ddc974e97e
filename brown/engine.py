"""The main loop and the stack of game states."""

from __future__ import annotations

import curses
import locale
import time
from collections.abc import Callable
from typing import Any

from .debug import EngineError
from .state import State
from .timing import FPS


class Engine:
    """Runs the top state of a stack of states once per frame.

    Subclasses may extend :meth:`init` to set up colours and the like.
    """

    def __init__(self, fps: int = FPS, sleep: Callable[[float], Any] = time.sleep) -> None:
        if fps <= 0:
            raise ValueError("fps must be positive")
        self.fps = fps
        self._sleep = sleep
        self.states: list[State] = []
        self.running = False
        self.std_screen: Any = None
        self.current_screen: Any = None

    def init(self, width: int = 640, height: int = 480) -> None:
        """Start curses in raw, non-blocking mode with the cursor hidden."""
        locale.setlocale(locale.LC_ALL, "")
        screen = curses.initscr()
        curses.noecho()
        screen.nodelay(True)
        curses.raw()
        curses.curs_set(0)
        screen.keypad(True)
        self.std_screen = screen
        self.running = True
        screen.refresh()

    def cleanup(self) -> None:
        """Leave curses mode if it was started."""
        if self.std_screen is not None:
            curses.endwin()
            self.std_screen = None

    def quit(self) -> None:
        self.running = False

    def _top(self) -> State:
        if not self.states:
            raise EngineError("No state is active")
        return self.states[-1]

    def handle_events(self) -> None:
        self._top().handle_events(self)

    def update(self) -> None:
        self._top().update(self)

    def draw(self) -> None:
        self._top().draw(self)

    def change_state(self, state: State) -> None:
        """Replace the top state, cleaning it up, and initialise ``state``."""
        if self.states:
            self.states.pop().cleanup()
        self.states.append(state)
        state.init(self)

    def push_state(self, state: State) -> None:
        """Pause the top state and put ``state`` above it."""
        if self.states:
            self.states[-1].pause()
        self.states.append(state)
        if not state.initialized:
            state.init(self)
        else:
            state.resume()

    def pop_state(self) -> None:
        """Pause and remove the top state, resuming the one beneath."""
        if self.states:
            self.states.pop().pause()
        if self.states:
            self.states[-1].resume()

    def run(self) -> None:
        """Loop at the frame rate until :meth:`quit` or an interrupt."""
        interval = 1 / self.fps
        while self.running:
            try:
                self._sleep(interval)
            except KeyboardInterrupt:
                break
            self.handle_events()
            self.update()
            self.draw()