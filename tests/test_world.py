import math

import pytest

from brickbreak.components import Transform, Vec2
from brickbreak.constants import (
    BALL_DIAMETER,
    BALL_SPEED,
    BOTTOM_WALL,
    BRICK_SIZE,
    GAP_BETWEEN_BRICKS,
    GAP_BETWEEN_PADDLE_AND_BRICKS,
    GAP_BETWEEN_PADDLE_AND_FLOOR,
    LEFT_WALL,
    PADDLE_PADDING,
    PADDLE_SIZE,
    RIGHT_WALL,
    TOP_WALL,
    WALL_THICKNESS,
)
from brickbreak.world import Body, BodyKind, World, brick_positions, build_world


def _place_ball(world, position, velocity):
    world.ball.transform.translation = position
    world.ball.velocity = velocity


def test_bricks_are_symmetric_about_centre():
    positions = brick_positions()
    xs = [p.x for p in positions]
    assert min(xs) + max(xs) == pytest.approx(LEFT_WALL + RIGHT_WALL)


def test_bricks_stay_inside_arena():
    for p in brick_positions():
        assert p.x - BRICK_SIZE[0] / 2 > LEFT_WALL
        assert p.x + BRICK_SIZE[0] / 2 < RIGHT_WALL
        assert p.y + BRICK_SIZE[1] / 2 < TOP_WALL


def test_lowest_row_starts_at_gap_above_paddle():
    lowest = min(p.y for p in brick_positions())
    paddle_y = BOTTOM_WALL + GAP_BETWEEN_PADDLE_AND_FLOOR
    assert lowest - BRICK_SIZE[1] / 2 == pytest.approx(paddle_y + GAP_BETWEEN_PADDLE_AND_BRICKS)


def test_bricks_spaced_by_size_and_gap():
    positions = brick_positions()
    first_row = [p for p in positions if p.y == positions[0].y]
    steps = {round(b.x - a.x, 6) for a, b in zip(first_row, first_row[1:])}
    assert steps == {BRICK_SIZE[0] + GAP_BETWEEN_BRICKS}
    assert len(positions) % len(first_row) == 0


def test_build_world_contents():
    world = build_world()
    kinds = [body.kind for body in world.bodies]
    assert kinds.count(BodyKind.BALL) == 1
    assert kinds.count(BodyKind.PADDLE) == 1
    assert kinds.count(BodyKind.WALL) == 4
    assert len(world.bricks) == len(brick_positions())
    assert world.score == 0


def test_initial_ball_velocity_has_ball_speed():
    world = build_world()
    velocity = world.ball.velocity
    assert velocity.length() == pytest.approx(BALL_SPEED)
    assert velocity.x == pytest.approx(-velocity.y)
    assert velocity.x > 0


def test_ball_is_not_a_collider():
    world = build_world()
    assert all(body.kind is not BodyKind.BALL for body in world.colliders)
    assert len(world.colliders) == len(world.bodies) - 1


def test_apply_velocity_moves_only_moving_bodies():
    world = build_world()
    start = world.ball.transform.translation
    paddle_start = world.paddle.transform.translation
    world.apply_velocity(0.5)
    moved = world.ball.transform.translation
    assert moved.x == pytest.approx(start.x + world.ball.velocity.x * 0.5)
    assert moved.y == pytest.approx(start.y + world.ball.velocity.y * 0.5)
    assert world.paddle.transform.translation == paddle_start


def test_move_paddle_without_input_keeps_position():
    world = build_world()
    before = world.paddle.transform.translation
    world.move_paddle(0.0, 1.0)
    assert world.paddle.transform.translation == before


def test_move_paddle_is_clamped_to_walls():
    world = build_world()
    world.move_paddle(-1.0, 100.0)
    left = world.paddle.transform.translation.x
    world.move_paddle(1.0, 100.0)
    right = world.paddle.transform.translation.x
    expected = RIGHT_WALL - WALL_THICKNESS / 2 - PADDLE_SIZE[0] / 2 - PADDLE_PADDING
    assert right == pytest.approx(expected)
    assert left == pytest.approx(-expected)


def test_move_paddle_keeps_height():
    world = build_world()
    y = world.paddle.transform.translation.y
    world.move_paddle(1.0, 0.1)
    assert world.paddle.transform.translation.y == y
    assert world.paddle.transform.translation.x > 0


def test_hitting_brick_from_below_breaks_it_and_bounces():
    world = build_world()
    target = min(world.bricks, key=lambda b: (b.transform.translation.y, b.transform.translation.x))
    pos = target.transform.translation
    _place_ball(world, Vec2(pos.x, pos.y - 25.0), Vec2(10.0, 20.0))
    count = len(world.bricks)
    world.check_for_collisions()
    assert world.score == 1
    assert len(world.bricks) == count - 1
    assert target not in world.bodies
    assert world.ball.velocity == Vec2(10.0, -20.0)


def test_brick_hit_while_moving_away_scores_without_bounce():
    world = build_world()
    target = min(world.bricks, key=lambda b: b.transform.translation.y)
    pos = target.transform.translation
    _place_ball(world, Vec2(pos.x, pos.y - 25.0), Vec2(10.0, -20.0))
    world.check_for_collisions()
    assert world.score == 1
    assert world.ball.velocity == Vec2(10.0, -20.0)


def test_wall_bounce_does_not_score():
    world = build_world()
    _place_ball(world, Vec2(LEFT_WALL + WALL_THICKNESS / 2 + BALL_DIAMETER / 2 - 1.0, 0.0), Vec2(-30.0, 5.0))
    world.check_for_collisions()
    assert world.score == 0
    assert world.ball.velocity == Vec2(30.0, 5.0)
    assert world.take_collision_events() is True


def test_no_collision_leaves_everything():
    world = build_world()
    _place_ball(world, Vec2(0.0, -100.0), Vec2(1.0, 1.0))
    world.check_for_collisions()
    assert world.score == 0
    assert world.ball.velocity == Vec2(1.0, 1.0)
    assert world.take_collision_events() is False


def test_collision_events_are_cleared_after_taking():
    world = build_world()
    _place_ball(world, Vec2(0.0, TOP_WALL - 10.0), Vec2(0.0, 50.0))
    world.check_for_collisions()
    assert world.take_collision_events() is True
    assert world.take_collision_events() is False


def test_step_reports_collision():
    world = build_world()
    _place_ball(world, Vec2(0.0, BOTTOM_WALL + 15.0), Vec2(0.0, -40.0))
    assert world.step(0.01, 0.0) is True
    assert world.ball.velocity.y > 0


def test_step_runs_from_start_without_collision():
    world = build_world()
    assert world.step(1 / 64, 0.0) is False
    assert world.ball.transform.translation.y < -50.0


def test_scoreboard_text():
    world = build_world()
    assert world.scoreboard_text() == "Score: 0"
    world.score = 7
    assert world.scoreboard_text().endswith("7")


def test_missing_ball_raises_lookup_error():
    world = World(bodies=[Body(BodyKind.WALL, Transform(), (0.0, 0.0, 0.0))])
    with pytest.raises(LookupError):
        world.check_for_collisions()


def test_ball_never_escapes_over_long_run():
    world = build_world()
    for _ in range(2000):
        world.step(1 / 64, 0.0)
        pos = world.ball.transform.translation
        assert LEFT_WALL < pos.x < RIGHT_WALL
        assert BOTTOM_WALL < pos.y < TOP_WALL
    assert math.isfinite(world.ball.velocity.length())