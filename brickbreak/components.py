"""Basic geometry types and the shapes of the arena walls."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum

from brickbreak.constants import (
    BOTTOM_WALL,
    LEFT_WALL,
    RIGHT_WALL,
    TOP_WALL,
    WALL_THICKNESS,
)


@dataclass(frozen=True, slots=True)
class Vec2:
    """An immutable two-dimensional vector."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vec2) -> Vec2:
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> Vec2:
        return Vec2(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def __truediv__(self, divisor: float) -> Vec2:
        return Vec2(self.x / divisor, self.y / divisor)

    def __neg__(self) -> Vec2:
        return Vec2(-self.x, -self.y)

    def __iter__(self):
        yield self.x
        yield self.y

    def length(self) -> float:
        """Euclidean length of the vector."""
        return math.hypot(self.x, self.y)

    def normalize(self) -> Vec2:
        """Unit vector in the same direction; raises ValueError for a zero vector."""
        length = self.length()
        if length == 0.0 or not math.isfinite(length):
            raise ValueError("cannot normalize a zero or non-finite vector")
        return self / length


@dataclass(slots=True)
class Transform:
    """Centre position, drawing depth and size of an object in the arena."""

    translation: Vec2 = field(default_factory=Vec2)
    z: float = 0.0
    scale: Vec2 = field(default_factory=lambda: Vec2(1.0, 1.0))


class WallLocation(Enum):
    """The four walls around the arena."""

    LEFT = "left"
    RIGHT = "right"
    BOTTOM = "bottom"
    TOP = "top"

    def position(self) -> Vec2:
        """Centre of the wall."""
        if self is WallLocation.LEFT:
            return Vec2(LEFT_WALL, 0.0)
        if self is WallLocation.RIGHT:
            return Vec2(RIGHT_WALL, 0.0)
        if self is WallLocation.BOTTOM:
            return Vec2(0.0, BOTTOM_WALL)
        return Vec2(0.0, TOP_WALL)

    def size(self) -> Vec2:
        """Width and height of the wall."""
        arena_height = TOP_WALL - BOTTOM_WALL
        arena_width = RIGHT_WALL - LEFT_WALL
        if arena_height <= 0.0 or arena_width <= 0.0:
            raise ValueError("arena dimensions must be positive")
        if self in (WallLocation.LEFT, WallLocation.RIGHT):
            return Vec2(WALL_THICKNESS, arena_height + WALL_THICKNESS)
        return Vec2(arena_width + WALL_THICKNESS, WALL_THICKNESS)


class Collision(Enum):
    """The side of a box that the ball struck."""

    LEFT = "left"
    RIGHT = "right"
    TOP = "top"
    BOTTOM = "bottom"


def wall_transform(location: WallLocation) -> Transform:
    """Transform that places and sizes the wall at ``location``."""
    return Transform(translation=location.position(), z=0.0, scale=location.size())