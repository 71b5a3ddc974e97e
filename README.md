# brown

`brown` is a small library for building games that run in a terminal.
It draws ASCII sprites through curses and organises game objects with an
entity-component-system core.

## Pieces

- **Engine** (`brown.engine.Engine`) keeps a stack of states and, in
  `run`, calls `handle_events`, `update` and `draw` on the top state once
  per frame. `Engine(fps=60, sleep=time.sleep)` sets the frame rate and
  the sleep function. `init` starts curses (raw, non-blocking, no echo,
  cursor hidden), `cleanup` leaves curses mode, and `quit` ends the loop.
  The loop also stops when the sleep is interrupted with Ctrl-C.
  Subclasses can extend `init`, for example to load colours.
- **State** (`brown.state.State`) is the abstract base for menus, levels
  and other screens. Subclasses implement `init`, `cleanup`, `pause`,
  `resume`, `handle_events`, `update` and `draw`. Each state owns a
  `Brain` and an `EntityController`, and can `create_entity` (unnamed
  ones are called `entity_0`, `entity_1`, ...), `find_entity`,
  `find_entity_id` and `delete_entity`.
- **Brain** (`brown.brain.Brain`) ties together entities, components,
  systems and events. The built-in components are registered when it is
  created.
- **Components** (`brown.components`): `Transform`, `Sprite` (with a
  `ZIndex` layer), `UI`, `Animation`, `AnimatorController` and
  `NativeScript`.
- **Entities** (`brown.entity`): `Entity` is a named handle on an id,
  `ScriptableEntity` is the base class for scripts, and `EntityController`
  tracks a state's entities and defers their deletion.
- **Systems**:
  - `brown.render_system.RenderSystem` draws sprites by z-index.
  - `brown.animation_system.AnimationSystem` steps animation clips.
  - `brown.ui_system.UISystem` draws bold white text on the background
    colour under it.
  - `brown.scripts_system.ScriptsSystem` drives scripts through
    `on_create`, `on_update` and `on_destroy`.
- **Events** (`brown.events`): named listeners that are registered for an
  event id and receive `Event` objects carrying parameters.
- **Colours** (`brown.colors.ColorPalette`) loads a palette of named RGB
  colours and a map from sprite characters to colour pairs.
- **Window helpers** (`brown.window`) create boxed windows, print
  coloured text and sprites, and read keys.
- **Utilities**:
  - `Vec2`, `angle`, `distance` and `random_int` in `brown.mathutil`.
  - The grid type `Mat` in `brown.matrix`.
  - `Timer` in `brown.timing`.
  - The `Signature` bitset and the `fnv1a_32` hash in `brown.types`.

## Entities and components

```python
from brown.brain import Brain
from brown.components import Transform
from brown.mathutil import Vec2

brain = Brain()
player = brain.create_entity()
brain.add_component(player, Transform(position=Vec2(3, 4)))

transform = brain.get_component(player, Transform)
transform.position += Vec2(1, 0)
assert brain.has_component(player, Transform)
```

Each system keeps the set of entities whose signature contains every
component the system asks for. This set is updated whenever components
are added or removed.

## States and scripts

```python
from brown.components import NativeScript, Transform
from brown.entity import ScriptableEntity
from brown.scripts_system import ScriptsSystem
from brown.state import State


class Mover(ScriptableEntity):
    def on_update(self):
        self.get_component(Transform).position.x += 1


class Level(State):
    def init(self, game):
        self.game = game
        self.scripts = ScriptsSystem.register_system(self.brain)
        hero = self.create_entity("player")
        hero.add_component(Transform())
        hero.add_component(NativeScript()).bind(Mover)
        self.initialized = True

    def cleanup(self): ...
    def pause(self): ...
    def resume(self): ...
    def handle_events(self, game): ...

    def update(self, game):
        self.scripts.update(self)

    def draw(self, game): ...
```

`Engine.push_state` calls `init` only on states whose `initialized` flag
is false, and calls `resume` on the others. `Engine.change_state` calls
`cleanup` on the state it replaces and `init` on the new one.

Deleted entities are queued. They are destroyed by
`EntityController.empty_to_be_deleted`, which first calls the script's
`on_destroy`.

## Events

```python
from brown.events import Event
from brown.types import fnv1a_32

HIT = fnv1a_32("Events::Game::HIT")
DAMAGE = fnv1a_32("Events::Game::Hit::DAMAGE")

def on_hit(event):
    print("took", event.get_param(DAMAGE))

brain.add_event_listener(HIT, "printer", on_hit)

event = Event(HIT)
event.set_param(DAMAGE, 5)
brain.send_event(event)

brain.remove_event_listener(HIT, "printer")
```

Passing an integer to `send_event` sends an event of that id without
parameters.

## Sprites and colours

Sprites are plain text files:

- A `.spr` file holds one frame.
- An `.aspr` file holds several frames, each ended by a line containing
  `frame`. Frame *n* of `walk.aspr` is stored as `walk<n>`.

`RenderSystem.init(directory)` loads every sprite in a directory. The
default directory is `./src/assets/sprites/`. When a sprite is drawn,
`.` is drawn as a blank, and `,` is skipped so that whatever is
underneath stays visible. Unknown sprite names draw nothing.

A palette file (`<name>.color`) lists one colour per line as
`name r g b`, with components from 0 to 255. A colour map file
(`<name>.map`) lists `name char` and gives each sprite character the
colour pair of that palette entry. Characters whose colour name is not in
the palette get pair 0. Both files are read from `ColorPalette.color_path`,
which defaults to `./src/assets/colors/`. To draw sprites in colour, give
the render system the map: `render.char_map = palette.char_map`.

## Errors and logging

`brown.debug.log` appends lines to a log file, `LOG.txt` by default.
`brown.debug.ensure` and `brown.debug.error` also write their message to
the log, and then raise `AssertionFailure` or `EngineError`. The ECS
classes raise `AssertionFailure` directly when they are misused, for
example on an unregistered component type, a duplicate component, or a
missing component.

## What it does not do

`brown` is a library. It ships no game, no menu or level states, no
sprite or colour assets, and no command to run. A game supplies its own
`State` subclasses and assets, and calls `Engine.init`, `change_state`
and `run` itself. Drawing and input need a curses-capable terminal.