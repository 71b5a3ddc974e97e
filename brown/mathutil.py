"""Integer 2D vectors and small numeric helpers."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass


@dataclass
class Vec2:
    """A 2D integer vector."""

    x: int = 0
    y: int = 0

    @classmethod
    def splat(cls, value: int) -> Vec2:
        return cls(value, value)

    def __add__(self, other: Vec2) -> Vec2:
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        return Vec2(self.x - other.x, self.y - other.y)

    def __iadd__(self, other: Vec2) -> Vec2:
        self.x += other.x
        self.y += other.y
        return self

    def __isub__(self, other: Vec2) -> Vec2:
        self.x -= other.x
        self.y -= other.y
        return self


def angle(v1: Vec2, v2: Vec2) -> float:
    """Angle in radians of the direction from ``v1`` to ``v2``."""
    return math.atan2(v2.y - v1.y, v2.x - v1.x)


def distance(v1: Vec2, v2: Vec2) -> float:
    """Euclidean distance between two points."""
    return math.hypot(v1.x - v2.x, v1.y - v2.y)


def random_int(low: int, high: int, rng: random.Random | None = None) -> int:
    """A uniformly chosen integer in the closed range [low, high]."""
    if high < low:
        raise ValueError("high must not be less than low")
    source = random if rng is None else rng
    return source.randint(low, high)