import curses

from brown.brain import Brain
from brown.components import UI, Transform
from brown.mathutil import Vec2
from brown.ui_system import TEXT_PAIR_BASE, UISystem
from brown.window import color_pair_attr


class FakeBackend:
    def __init__(self, contents):
        self.contents = contents
        self.pair_calls = []

    def pair_content(self, number):
        return self.contents.get(number, (number, 0))

    def init_pair(self, *args):
        self.pair_calls.append(args)


class FakeWindow:
    def __init__(self, below):
        self.below = below
        self.calls = []

    def inch(self, y, x):
        return self.below

    def attron(self, attr):
        self.calls.append(("attron", attr))

    def attroff(self, attr):
        self.calls.append(("attroff", attr))

    def addstr(self, y, x, text):
        self.calls.append(("addstr", y, x, text))


def make_world(*uis):
    brain = Brain()
    system = UISystem.register_system(brain)
    system.backend = FakeBackend({3: (7, 4)})
    for position, ui in uis:
        entity = brain.create_entity()
        brain.add_component(entity, Transform(position=position))
        brain.add_component(entity, ui)
    return brain, system


def test_draws_text_on_background_pair():
    brain, system = make_world((Vec2(10, 5), UI(text="hi", offset=Vec2(1, 2))))
    win = FakeWindow(color_pair_attr(3) | ord("x"))
    system.draw(win, brain)
    assert system.backend.pair_calls == [(TEXT_PAIR_BASE, curses.COLOR_WHITE, 4)]
    attr = color_pair_attr(TEXT_PAIR_BASE) | curses.A_BOLD
    assert win.calls == [
        ("attron", attr),
        ("addstr", 5 - 2, 10 - 1, "hi"),
        ("attroff", attr),
    ]


def test_same_background_reuses_pair():
    brain, system = make_world((Vec2(1, 1), UI(text="a")), (Vec2(2, 2), UI(text="b")))
    win = FakeWindow(color_pair_attr(3))
    system.draw(win, brain)
    attrs = [call[1] for call in win.calls if call[0] == "attron"]
    assert attrs == [color_pair_attr(TEXT_PAIR_BASE) | curses.A_BOLD] * 2
    assert [c[0] for c in system.backend.pair_calls] == [TEXT_PAIR_BASE, TEXT_PAIR_BASE + 1]
    assert system.pairs == {4: TEXT_PAIR_BASE}


def test_centered_text():
    brain, system = make_world((Vec2(10, 5), UI(text="abcd", centered=True)))
    win = FakeWindow(0)
    system.draw(win, brain)
    assert ("addstr", 5, 9, "abcd") in win.calls


def test_invisible_text_is_skipped():
    brain, system = make_world((Vec2(1, 1), UI(text="a", is_visible=False)))
    win = FakeWindow(0)
    system.draw(win, brain)
    assert win.calls == []
    assert system.step == 0


def test_log_colors(tmp_path):
    system = UISystem()
    system.backend = FakeBackend({})
    system.log_path = tmp_path / "log.txt"
    lines = system.log_colors()
    assert len(lines) == 60
    assert lines[0] == "Pair number 0 has fg: 0 and bg: 0"
    assert len(system.log_path.read_text().splitlines()) == len(lines)