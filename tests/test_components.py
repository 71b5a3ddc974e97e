import pytest

from brown.components import (
    UI,
    Animation,
    AnimatorController,
    NativeScript,
    Sprite,
    Transform,
    ZIndex,
)
from brown.debug import AssertionFailure
from brown.mathutil import Vec2


def test_animation_defaults():
    anim = Animation()
    assert anim.name == ""
    assert anim.offset == Vec2(0, 0)
    assert not anim.playing and not anim.has_finished and not anim.is_reversed
    assert anim.current == 0


def test_defaults_not_shared():
    a, b = Transform(), Transform()
    a.position += Vec2(1, 1)
    assert b.position == Vec2(0, 0)


def test_sprite_and_ui_defaults():
    assert Sprite().z_index is ZIndex.Z_2
    ui = UI()
    assert ui.is_visible is True
    assert ui.centered is False


def test_zindex_flags():
    assert ZIndex(1) is ZIndex.Z_1
    assert ZIndex(2) is ZIndex.Z_2
    assert ZIndex(4) is ZIndex.Z_3
    layers = ZIndex(5)
    assert layers == ZIndex.Z_1 | ZIndex.Z_3
    assert layers & ZIndex.Z_1
    assert not layers & ZIndex.Z_2


def test_add_anim_sets_first_current():
    ctrl = AnimatorController()
    walk, run = Animation(name="walk"), Animation(name="run")
    ctrl.add_anim("walk", walk)
    ctrl.add_anim("run", run)
    assert ctrl.current_anim is walk
    assert set(ctrl.anims) == {"walk", "run"}


def test_add_anim_keeps_existing():
    ctrl = AnimatorController()
    first = Animation(name="a")
    ctrl.add_anim("a", first)
    ctrl.add_anim("a", Animation(name="b"))
    assert ctrl.anims["a"] is first


def test_set_anim():
    ctrl = AnimatorController()
    ctrl.add_anim("a", Animation())
    ctrl.add_anim("b", Animation())
    ctrl.set_anim("b")
    assert ctrl.current_anim is ctrl.anims["b"]
    assert ctrl.current_anim_name == "b"
    with pytest.raises(AssertionFailure):
        ctrl.set_anim("missing")


def test_play_starts_animation():
    ctrl = AnimatorController()
    ctrl.add_anim("a", Animation())
    ctrl.add_anim("b", Animation(is_reversed=True))
    ctrl.play("b")
    anim = ctrl.anims["b"]
    assert ctrl.current_anim is anim
    assert anim.playing and not anim.is_reversed and not anim.has_finished


def test_play_callback_after_finish():
    ctrl = AnimatorController()
    ctrl.add_anim("a", Animation())
    calls = []
    ctrl.play("a", lambda: calls.append(1))
    assert calls == []
    ctrl.anims["a"].has_finished = True
    ctrl.play("a", lambda: calls.append(1))
    assert calls == [1]


def test_play_unknown_raises():
    with pytest.raises(AssertionFailure):
        AnimatorController().play("nope")


def test_play_reversed():
    ctrl = AnimatorController()
    ctrl.add_anim("a", Animation(clips=4))
    ctrl.play_reversed("a")
    anim = ctrl.anims["a"]
    assert anim.current == anim.clips
    assert anim.is_reversed and anim.playing


def test_play_current_reversed_and_forward():
    ctrl = AnimatorController()
    ctrl.add_anim("a", Animation())
    ctrl.play_current_reversed()
    assert ctrl.current_anim.is_reversed and ctrl.current_anim.playing
    ctrl.play_current()
    assert not ctrl.current_anim.is_reversed


def test_play_current_without_animation_raises():
    with pytest.raises(AssertionFailure):
        AnimatorController().play_current()


class Script:
    def __init__(self, speed, name="s"):
        self.speed = speed
        self.name = name


def test_native_script_bind_and_destroy():
    script = NativeScript()
    instance = script.bind(Script, 3, name="hero")
    assert script.instance is instance
    assert (instance.speed, instance.name) == (3, "hero")
    assert script.created is False
    script.destroy()
    assert script.instance is None