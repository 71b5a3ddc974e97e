"""A terminal game engine: curses drawing, an entity-component-system core, states and events."""

__version__ = "0.1.0"

__all__ = [
    "animation_system",
    "brain",
    "colors",
    "components",
    "debug",
    "ecs",
    "engine",
    "entity",
    "events",
    "mathutil",
    "matrix",
    "render_system",
    "scripts_system",
    "state",
    "timing",
    "types",
    "ui_system",
    "window",
]