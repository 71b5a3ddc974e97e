"""The engine's built-in components."""

from __future__ import annotations

import enum
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from .debug import AssertionFailure
from .mathutil import Vec2


@dataclass
class Animation:
    """An animation clip: ``clips`` frames, one every ``time_step`` ticks."""

    name: str = ""
    offset: Vec2 = field(default_factory=Vec2)
    clips: int = 0
    time_step: int = 0
    cyclic: bool = False
    final: bool = False
    is_reversed: bool = False
    playing: bool = False
    has_finished: bool = False
    current: int = 0


@dataclass
class AnimatorController:
    """Holds named animations and which one is current."""

    current_anim: Animation | None = None
    anims: dict[str, Animation] = field(default_factory=dict)
    current_anim_name: str = ""

    def _current(self) -> Animation:
        if self.current_anim is None:
            raise AssertionFailure("No animation selected!")
        return self.current_anim

    def set_anim(self, name: str) -> None:
        if name not in self.anims:
            raise AssertionFailure("Invalid animation!")
        self.current_anim = self.anims[name]
        self.current_anim_name = name

    def _start(self, reversed_: bool) -> None:
        anim = self._current()
        anim.is_reversed = reversed_
        anim.playing = True
        anim.has_finished = False

    def play_current(self) -> None:
        self._start(False)

    def play_current_reversed(self) -> None:
        self._start(True)

    def play_reversed(self, name: str) -> None:
        """Play ``name`` backwards from its last clip unless it is already playing."""
        self.set_anim(name)
        anim = self._current()
        if not anim.playing:
            anim.current = anim.clips
            self._start(True)

    def play(self, name: str, callback: Callable[[], Any] | None = None) -> None:
        """Start ``name`` if idle; once it has finished, call ``callback``."""
        if name not in self.anims:
            raise AssertionFailure("Invalid animation!")
        anim = self.anims[name]
        if not anim.playing:
            self.set_anim(name)
            self.play_current()
        elif anim.has_finished and callback is not None:
            callback()

    def add_anim(self, name: str, anim: Animation) -> None:
        """Add an animation; an existing one with the same name is kept."""
        self.anims.setdefault(name, anim)
        if self.current_anim is None:
            self.current_anim = self.anims[name]


@dataclass
class NativeScript:
    """Attaches a script object to an entity."""

    instance: Any = None
    created: bool = False

    def bind(self, script_type: type, *args: Any, **kwargs: Any) -> Any:
        self.instance = script_type(*args, **kwargs)
        return self.instance

    def destroy(self) -> None:
        self.instance = None


class ZIndex(enum.IntFlag):
    """Drawing layers; a sprite is drawn on each layer whose bit it carries."""

    Z_1 = 1
    Z_2 = 2
    Z_3 = 4


@dataclass
class Sprite:
    size: Vec2 = field(default_factory=Vec2)
    sprite_name: str = ""
    offset: Vec2 = field(default_factory=Vec2)
    z_index: ZIndex = ZIndex.Z_2


@dataclass
class Transform:
    position: Vec2 = field(default_factory=Vec2)
    direction: int = 0
    z_index: int = 0


@dataclass
class UI:
    text: str = ""
    offset: Vec2 = field(default_factory=Vec2)
    is_visible: bool = True
    centered: bool = False