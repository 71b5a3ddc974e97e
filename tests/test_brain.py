import pytest

from brown.brain import Brain
from brown.components import UI, AnimatorController, NativeScript, Sprite, Transform
from brown.debug import AssertionFailure
from brown.ecs import System
from brown.events import Event
from brown.mathutil import Vec2
from brown.types import MAX_COMPONENTS, WINDOW_INPUT, WINDOW_INPUT_PARAM, WINDOW_QUIT, Signature


class Velocity:
    def __init__(self, dx=0):
        self.dx = dx


class Mover(System):
    pass


def test_basic_components_registered_in_order():
    brain = Brain()
    bits = [
        brain.get_component_type(t)
        for t in (Transform, Sprite, AnimatorController, NativeScript, UI)
    ]
    assert bits == list(range(5))
    with pytest.raises(AssertionFailure):
        brain.register_component(Transform)


def test_custom_component_gets_new_bit():
    brain = Brain()
    bit = brain.register_component(Velocity)
    assert 0 <= bit < MAX_COMPONENTS
    assert bit not in {brain.get_component_type(t) for t in (Transform, Sprite, UI)}


def test_add_and_get_component():
    brain = Brain()
    entity = brain.create_entity()
    tr = Transform(position=Vec2(3, 4))
    brain.add_component(entity, tr)
    assert brain.has_component(entity, Transform)
    assert not brain.has_component(entity, Sprite)
    assert brain.get_component(entity, Transform) is tr
    assert brain.get_signature(entity)[brain.get_component_type(Transform)]


def test_get_missing_component_raises():
    brain = Brain()
    entity = brain.create_entity()
    with pytest.raises(AssertionFailure):
        brain.get_component(entity, Sprite)


def test_unregistered_component_raises():
    brain = Brain()
    entity = brain.create_entity()
    with pytest.raises(AssertionFailure):
        brain.add_component(entity, Velocity())
    with pytest.raises(AssertionFailure):
        brain.has_component(entity, Velocity)


def test_remove_component_clears_bit():
    brain = Brain()
    entity = brain.create_entity()
    brain.add_component(entity, Sprite())
    brain.remove_component(entity, Sprite)
    assert not brain.has_component(entity, Sprite)
    assert brain.get_signature(entity) == Signature()


def test_systems_follow_signatures():
    brain = Brain()
    mover = brain.register_system(Mover)
    sig = Signature()
    sig.set(brain.get_component_type(Transform))
    sig.set(brain.get_component_type(Sprite))
    brain.set_system_signature(Mover, sig)

    entity = brain.create_entity()
    brain.add_component(entity, Transform())
    assert entity not in mover.entities
    brain.add_component(entity, Sprite())
    assert mover.entities == {entity}
    brain.remove_component(entity, Transform)
    assert mover.entities == set()
    brain.add_component(entity, Transform())
    brain.destroy_entity(entity)
    assert mover.entities == set()


def test_destroy_entity_clears_components():
    brain = Brain()
    entity = brain.create_entity()
    brain.add_component(entity, UI(text="hi"))
    brain.destroy_entity(entity)
    assert brain.get_signature(entity) == Signature()
    with pytest.raises(AssertionFailure):
        brain.get_component(entity, UI)


def test_entities_are_distinct():
    brain = Brain()
    ids = {brain.create_entity() for _ in range(20)}
    assert len(ids) == 20


def test_events_through_brain():
    brain = Brain()
    received = []
    brain.add_event_listener(WINDOW_INPUT, "input", lambda e: received.append(e.get_param(WINDOW_INPUT_PARAM)))
    brain.add_event_listener(WINDOW_QUIT, "quit", lambda e: received.append("quit"))
    ev = Event(WINDOW_INPUT)
    ev.set_param(WINDOW_INPUT_PARAM, "d")
    brain.send_event(ev)
    brain.send_event(WINDOW_QUIT)
    assert received == ["d", "quit"]
    brain.remove_event_listener(WINDOW_QUIT, "quit")
    brain.send_event(WINDOW_QUIT)
    assert received == ["d", "quit"]