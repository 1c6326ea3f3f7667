# brickbreak

A small brick-breaking arcade game. You steer a paddle along the bottom of a
walled arena and keep a ball bouncing into a wall of bricks. Each brick the
ball hits disappears and adds one point to the score in the top-left corner.

## Installing

```
pip install .
```

This installs `pygame`, which opens the window, reads the keyboard and plays
sound.

## Playing

```
brickbreak
```

- **Left arrow** / **Right arrow**: move the paddle
- Close the window to quit

Options:

- `--assets DIR`: directory that holds the game assets (default `assets`).
  The collision sound is read from `DIR/sounds/breakout_collision.ogg`.
- `--frames N`: close the window by itself after `N` drawn frames.

The window is 1280 by 720 pixels. The ball starts just below the middle of the
arena and heads down and to the right. It bounces off the walls, the paddle
and the bricks. The simulation runs on a fixed timestep of 64 steps per
second, whatever the frame rate of the display, and the collision sound plays
at most once per step.

## What it does not do

- The package ships no sound file. If the collision sound cannot be found, or
  no audio device can be opened, the game runs silently.
- There is no win or lose screen and no restart: when the ball leaves through
  a gap or all bricks are gone, the game simply carries on until the window is
  closed.

## Using the game logic directly

All of the game logic is plain Python and needs no window:

```python
from brickbreak.world import build_world

world = build_world()
for _ in range(64):
    world.step(1 / 64, 0.0)   # one second, paddle standing still

print(world.scoreboard_text())   # "Score: 0" or higher
```

- `brickbreak.world.build_world()` lays out the paddle, the ball, the four
  walls and the grid of bricks; `brickbreak.world.brick_positions()` gives the
  brick centres, row by row from the bottom.
- `World.step(dt, direction)` moves the ball, moves the paddle (`direction`
  is -1, 0 or 1, clamped inside the walls), resolves collisions and returns
  whether anything was hit.
- `World.apply_velocity`, `World.move_paddle`, `World.check_for_collisions`
  and `World.take_collision_events` run those parts one at a time.
- `brickbreak.ball.ball_collision(ball, bounding_box)` tells which side of an
  `Aabb2d` a `BoundingCircle` has hit, as a `Collision`, or `None`.
- `brickbreak.components` holds `Vec2`, `Transform`, `WallLocation` and
  `wall_transform`; `brickbreak.constants` holds the arena sizes, speeds and
  colours.

## Running the tests

```
pip install ".[test]"
pytest
```