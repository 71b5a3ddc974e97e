"""Runs the native scripts attached to entities."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from .components import NativeScript
from .debug import EngineError
from .ecs import System
from .entity import Entity
from .types import Signature

if TYPE_CHECKING:
    from .brain import Brain
    from .state import State


class ScriptsSystem(System):
    """Creates scripts on first sight and updates them every frame."""

    @staticmethod
    def register_system(brain: Brain) -> ScriptsSystem:
        system = brain.register_system(ScriptsSystem)
        signature = Signature()
        signature.set(brain.get_component_type(NativeScript))
        brain.set_system_signature(ScriptsSystem, signature)
        return system

    @staticmethod
    def _instance(script: NativeScript) -> Any:
        if script.instance is None:
            raise EngineError("Native script has no bound instance")
        return script.instance

    def update(self, state: State) -> None:
        """Run ``on_create`` once for new scripts, then ``on_update`` for all."""
        for entity in sorted(self.entities):
            script = state.brain.get_component(entity, NativeScript)
            instance = self._instance(script)
            if not script.created:
                script.created = True
                instance.entity = Entity("", entity, state.brain)
                instance.state = state
                instance.on_create()
            instance.on_update()

    def on_destroy(self, state: State) -> None:
        """Tell every script it is being destroyed and flush pending deletions."""
        for entity in sorted(self.entities):
            if entity not in self.entities:
                continue
            script = state.brain.get_component(entity, NativeScript)
            if script.instance is not None:
                script.instance.on_destroy()
                state.controller.empty_to_be_deleted()