"""Sprite loading and drawing of sprite components."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from pathlib import Path
from typing import TYPE_CHECKING, Any

from .components import Sprite, Transform, ZIndex
from .debug import AssertionFailure
from .ecs import System
from .types import Signature
from .window import print_sprite

if TYPE_CHECKING:
    from .brain import Brain

SPRITES_PATH = Path("./src/assets/sprites/")

SpriteData = list[str]


def _lines(path: str | Path) -> Iterator[str]:
    text = Path(path).read_text(encoding="utf-8")
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return iter(lines)


def load_sprite(path: str | Path) -> SpriteData:
    """The lines of a sprite file."""
    return list(_lines(path))


def load_animated_sprite(path: str | Path) -> list[SpriteData]:
    """Frames of an animated sprite; each frame ends at a line containing 'frame'."""
    frames: list[SpriteData] = []
    frame: SpriteData = []
    for line in _lines(path):
        if "frame" in line:
            frames.append(frame)
            frame = []
        else:
            frame.append(line)
    return frames


class SpriteStore:
    """Sprites by name; the first sprite stored under a name is kept."""

    def __init__(self) -> None:
        self._sprites: dict[str, SpriteData] = {}

    def load_directory(self, directory: str | Path) -> None:
        """Load every ``.spr`` file and every frame of each ``.aspr`` file.

        Frames of ``walk.aspr`` are stored as ``walk0``, ``walk1`` and so on.
        """
        directory = Path(directory)
        if not directory.is_dir():
            raise AssertionFailure("Could not open sprites folder!")
        for path in sorted(p for p in directory.iterdir() if p.is_file()):
            name = path.name
            if ".spr" in name:
                self.add_sprite(name[: name.index(".spr")], load_sprite(path))
            elif ".aspr" in name:
                stem = name[: name.index(".aspr")]
                for number, frame in enumerate(load_animated_sprite(path)):
                    self.add_sprite(f"{stem}{number}", frame)

    def add_sprite(self, name: str, data: SpriteData) -> None:
        self._sprites.setdefault(name, list(data))

    def get(self, name: str, default: SpriteData | None = None) -> SpriteData:
        return self._sprites.get(name, [] if default is None else default)

    def __getitem__(self, name: str) -> SpriteData:
        return self._sprites[name]

    def __contains__(self, name: object) -> bool:
        return name in self._sprites

    def __len__(self) -> int:
        return len(self._sprites)


class RenderSystem(System):
    """Draws the sprite of every entity with a transform and a sprite."""

    def __init__(self) -> None:
        super().__init__()
        self.sprites = SpriteStore()
        self.char_map: Mapping[str, int] = {}

    @staticmethod
    def register_system(brain: Brain) -> RenderSystem:
        system = brain.register_system(RenderSystem)
        signature = Signature()
        signature.set(brain.get_component_type(Transform))
        signature.set(brain.get_component_type(Sprite))
        brain.set_system_signature(RenderSystem, signature)
        return system

    def init(self, directory: str | Path = SPRITES_PATH) -> None:
        self.sprites.load_directory(directory)

    def draw(self, win: Any, brain: Brain, z_index: ZIndex = ZIndex.Z_2) -> None:
        """Draw sprites on layer ``z_index``; unknown sprite names draw nothing."""
        for entity in sorted(self.entities):
            trans = brain.get_component(entity, Transform)
            spr = brain.get_component(entity, Sprite)
            if spr.z_index & z_index:
                print_sprite(
                    win,
                    trans.position.y - spr.offset.y,
                    trans.position.x - spr.offset.x,
                    self.sprites.get(spr.sprite_name),
                    self.char_map,
                )