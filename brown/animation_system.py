"""Advances sprite animations frame by frame."""

from __future__ import annotations

import copy
import dataclasses
from typing import TYPE_CHECKING

from .components import Animation, AnimatorController, Sprite, Transform
from .debug import AssertionFailure
from .ecs import System
from .mathutil import Vec2
from .types import Signature

if TYPE_CHECKING:
    from .brain import Brain


def _current(brain: Brain, entity: int) -> Animation:
    anim = brain.get_component(entity, AnimatorController).current_anim
    if anim is None:
        raise AssertionFailure("No animation selected!")
    return anim


class AnimationSystem(System):
    """Steps the current animation of every animated entity.

    While an animation plays, the entity's sprite shows ``<name><frame>``; the
    original sprite is restored when a non-final, non-cyclic animation ends.
    """

    def __init__(self) -> None:
        super().__init__()
        self._saved: dict[int, Sprite] = {}

    @staticmethod
    def register_system(brain: Brain) -> AnimationSystem:
        system = brain.register_system(AnimationSystem)
        signature = Signature()
        for component_type in (Transform, AnimatorController, Sprite):
            signature.set(brain.get_component_type(component_type))
        brain.set_system_signature(AnimationSystem, signature)
        return system

    @staticmethod
    def _due(anim: Animation, dt: int) -> bool:
        if anim.time_step == 0:
            raise AssertionFailure("Animation time step must not be zero")
        return dt % anim.time_step == 0

    def _show_frame(self, entity: int, anim: Animation, spr: Sprite) -> None:
        anim.has_finished = False
        self._saved.setdefault(entity, copy.deepcopy(spr))
        spr.sprite_name = f"{anim.name}{anim.current}"
        spr.offset = Vec2(anim.offset.x, anim.offset.y)

    def _finish(self, entity: int, anim: Animation, spr: Sprite, restart: int) -> None:
        if anim.cyclic:
            anim.current = restart
            return
        anim.has_finished = True
        anim.playing = False
        saved = self._saved.pop(entity, None)
        if not anim.final:
            saved = saved if saved is not None else Sprite()
            for f in dataclasses.fields(Sprite):
                setattr(spr, f.name, getattr(saved, f.name))

    def update(self, brain: Brain, dt: int) -> None:
        """Advance every animation for tick ``dt``."""
        for entity in sorted(self.entities):
            anim = brain.get_component(entity, AnimatorController).current_anim
            if anim is None:
                continue
            spr = brain.get_component(entity, Sprite)
            if anim.is_reversed:
                if anim.playing and self._due(anim, dt) and anim.current >= 0:
                    self._show_frame(entity, anim, spr)
                    anim.current -= 1
                elif anim.current == 0 and not anim.has_finished:
                    self._finish(entity, anim, spr, anim.clips)
            else:
                if anim.playing and self._due(anim, dt) and anim.current < anim.clips + 1:
                    self._show_frame(entity, anim, spr)
                    anim.current += 1
                elif anim.current == anim.clips and not anim.has_finished:
                    self._finish(entity, anim, spr, 0)

    @staticmethod
    def play(entity: int, brain: Brain) -> None:
        """Restart the entity's current animation from its first frame."""
        anim = _current(brain, entity)
        anim.current = 0
        anim.playing = True

    @staticmethod
    def stop(entity: int, brain: Brain) -> None:
        """Stop the entity's current animation and rewind it."""
        anim = _current(brain, entity)
        anim.playing = False
        anim.current = 0