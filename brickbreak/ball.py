"""Bounding volumes and the ball-versus-box collision test."""

from __future__ import annotations

from dataclasses import dataclass

from brickbreak.components import Collision, Vec2


@dataclass(frozen=True, slots=True)
class Aabb2d:
    """Axis-aligned box given by its centre and half extents."""

    center: Vec2
    half_size: Vec2

    @property
    def min(self) -> Vec2:
        return self.center - self.half_size

    @property
    def max(self) -> Vec2:
        return self.center + self.half_size

    def closest_point(self, point: Vec2) -> Vec2:
        """Point of the box nearest to ``point``; ``point`` itself if inside."""
        low, high = self.min, self.max
        return Vec2(
            min(max(point.x, low.x), high.x),
            min(max(point.y, low.y), high.y),
        )


@dataclass(frozen=True, slots=True)
class BoundingCircle:
    """Circle given by its centre and radius."""

    center: Vec2
    radius: float

    def intersects(self, aabb: Aabb2d) -> bool:
        """True if the circle touches or overlaps ``aabb``."""
        offset = self.center - aabb.closest_point(self.center)
        return offset.x * offset.x + offset.y * offset.y <= self.radius * self.radius


def ball_collision(ball: BoundingCircle, bounding_box: Aabb2d) -> Collision | None:
    """Side of ``bounding_box`` hit by ``ball``, or None if they do not touch."""
    if not ball.intersects(bounding_box):
        return None

    offset = ball.center - bounding_box.closest_point(ball.center)
    if abs(offset.x) > abs(offset.y):
        return Collision.LEFT if offset.x < 0.0 else Collision.RIGHT
    if offset.y > 0.0:
        return Collision.TOP
    return Collision.BOTTOM