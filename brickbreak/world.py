"""The game state and the systems that advance it each fixed tick."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum

from brickbreak.ball import Aabb2d, BoundingCircle, ball_collision
from brickbreak.components import Collision, Transform, Vec2, WallLocation, wall_transform
from brickbreak.constants import (
    BALL_COLOR,
    BALL_DIAMETER,
    BALL_SPEED,
    BALL_STARTING_POSITION,
    BOTTOM_WALL,
    BRICK_COLOR,
    BRICK_SIZE,
    GAP_BETWEEN_BRICKS,
    GAP_BETWEEN_BRICKS_AND_CEILING,
    GAP_BETWEEN_BRICKS_AND_SIDES,
    GAP_BETWEEN_PADDLE_AND_BRICKS,
    GAP_BETWEEN_PADDLE_AND_FLOOR,
    INITIAL_BALL_DIRECTION,
    LEFT_WALL,
    PADDLE_COLOR,
    PADDLE_PADDING,
    PADDLE_SIZE,
    PADDLE_SPEED,
    RIGHT_WALL,
    TOP_WALL,
    WALL_COLOR,
    WALL_THICKNESS,
)

SCOREBOARD_LABEL = "Score: "


class BodyKind(Enum):
    """What a body in the arena is."""

    PADDLE = "paddle"
    BALL = "ball"
    BRICK = "brick"
    WALL = "wall"


@dataclass(eq=False)
class Body:
    """An object in the arena: its kind, placement, colour and optional velocity."""

    kind: BodyKind
    transform: Transform
    color: tuple[float, float, float]
    velocity: Vec2 | None = None

    @property
    def is_collider(self) -> bool:
        """True if the ball bounces off this body."""
        return self.kind is not BodyKind.BALL


def _paddle_y() -> float:
    return BOTTOM_WALL + GAP_BETWEEN_PADDLE_AND_FLOOR


def brick_positions() -> list[Vec2]:
    """Centres of every brick in the starting layout, row by row from the bottom."""
    brick_w, brick_h = BRICK_SIZE
    total_width = (RIGHT_WALL - LEFT_WALL) - 2.0 * GAP_BETWEEN_BRICKS_AND_SIDES
    bottom_edge = _paddle_y() + GAP_BETWEEN_PADDLE_AND_BRICKS
    total_height = TOP_WALL - bottom_edge - GAP_BETWEEN_BRICKS_AND_CEILING
    if total_width <= 0.0 or total_height <= 0.0:
        raise ValueError("no room for bricks in the arena")

    n_columns = math.floor(total_width / (brick_w + GAP_BETWEEN_BRICKS))
    n_rows = math.floor(total_height / (brick_h + GAP_BETWEEN_BRICKS))
    if n_columns < 1:
        raise ValueError("no room for a column of bricks")
    n_vertical_gaps = n_columns - 1

    center = (LEFT_WALL + RIGHT_WALL) / 2.0
    left_edge = center - n_columns / 2.0 * brick_w - n_vertical_gaps / 2.0 * GAP_BETWEEN_BRICKS
    offset_x = left_edge + brick_w / 2.0
    offset_y = bottom_edge + brick_h / 2.0

    return [
        Vec2(
            offset_x + column * (brick_w + GAP_BETWEEN_BRICKS),
            offset_y + row * (brick_h + GAP_BETWEEN_BRICKS),
        )
        for row in range(n_rows)
        for column in range(n_columns)
    ]


@dataclass
class World:
    """All bodies in play, the score and the collisions not yet heard."""

    bodies: list[Body] = field(default_factory=list)
    score: int = 0
    pending_collisions: int = 0

    def _single(self, kind: BodyKind) -> Body:
        matches = [body for body in self.bodies if body.kind is kind]
        if len(matches) != 1:
            raise LookupError(f"expected exactly one {kind.value}, found {len(matches)}")
        return matches[0]

    @property
    def ball(self) -> Body:
        return self._single(BodyKind.BALL)

    @property
    def paddle(self) -> Body:
        return self._single(BodyKind.PADDLE)

    @property
    def bricks(self) -> list[Body]:
        return [body for body in self.bodies if body.kind is BodyKind.BRICK]

    @property
    def colliders(self) -> list[Body]:
        return [body for body in self.bodies if body.is_collider]

    def apply_velocity(self, dt: float) -> None:
        """Move every body that has a velocity by ``velocity * dt``."""
        for body in self.bodies:
            if body.velocity is not None:
                body.transform.translation += body.velocity * dt

    def move_paddle(self, direction: float, dt: float) -> None:
        """Slide the paddle sideways, keeping it inside the walls."""
        transform = self.paddle.transform
        new_x = transform.translation.x + direction * PADDLE_SPEED * dt
        left_bound = LEFT_WALL + WALL_THICKNESS / 2.0 + PADDLE_SIZE[0] / 2.0 + PADDLE_PADDING
        right_bound = RIGHT_WALL - WALL_THICKNESS / 2.0 - PADDLE_SIZE[0] / 2.0 - PADDLE_PADDING
        clamped = min(max(new_x, left_bound), right_bound)
        transform.translation = Vec2(clamped, transform.translation.y)

    def check_for_collisions(self) -> None:
        """Bounce the ball off whatever it touches and break any bricks it hits."""
        ball = self.ball
        velocity = ball.velocity if ball.velocity is not None else Vec2()
        circle = BoundingCircle(ball.transform.translation, BALL_DIAMETER / 2.0)
        broken: list[Body] = []

        for body in self.colliders:
            box = Aabb2d(body.transform.translation, body.transform.scale / 2.0)
            collision = ball_collision(circle, box)
            if collision is None:
                continue

            self.pending_collisions += 1
            if body.kind is BodyKind.BRICK:
                broken.append(body)
                self.score += 1

            reflect_x = (collision is Collision.LEFT and velocity.x > 0.0) or (
                collision is Collision.RIGHT and velocity.x < 0.0
            )
            reflect_y = (collision is Collision.TOP and velocity.y < 0.0) or (
                collision is Collision.BOTTOM and velocity.y > 0.0
            )
            if reflect_x:
                velocity = Vec2(-velocity.x, velocity.y)
            if reflect_y:
                velocity = Vec2(velocity.x, -velocity.y)

        ball.velocity = velocity
        if broken:
            self.bodies = [body for body in self.bodies if all(body is not b for b in broken)]

    def take_collision_events(self) -> bool:
        """True if any collision happened since the last call; clears them."""
        happened = self.pending_collisions > 0
        self.pending_collisions = 0
        return happened

    def step(self, dt: float, direction: float) -> bool:
        """Run one fixed tick; True if a collision sound should play."""
        self.apply_velocity(dt)
        self.move_paddle(direction, dt)
        self.check_for_collisions()
        return self.take_collision_events()

    def scoreboard_text(self) -> str:
        """The text shown on the scoreboard."""
        return f"{SCOREBOARD_LABEL}{self.score}"


def build_world() -> World:
    """The starting arena: paddle, ball, four walls and the wall of bricks."""
    bodies = [
        Body(
            BodyKind.PADDLE,
            Transform(translation=Vec2(0.0, _paddle_y()), z=0.0, scale=Vec2(*PADDLE_SIZE)),
            PADDLE_COLOR,
        ),
        Body(
            BodyKind.BALL,
            Transform(
                translation=Vec2(BALL_STARTING_POSITION[0], BALL_STARTING_POSITION[1]),
                z=BALL_STARTING_POSITION[2],
                scale=Vec2(BALL_DIAMETER, BALL_DIAMETER),
            ),
            BALL_COLOR,
            velocity=Vec2(*INITIAL_BALL_DIRECTION).normalize() * BALL_SPEED,
        ),
    ]
    bodies.extend(Body(BodyKind.WALL, wall_transform(location), WALL_COLOR) for location in WallLocation)
    bodies.extend(
        Body(BodyKind.BRICK, Transform(translation=position, z=0.0, scale=Vec2(*BRICK_SIZE)), BRICK_COLOR)
        for position in brick_positions()
    )
    return World(bodies=bodies)