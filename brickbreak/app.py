"""Window, input, drawing and sound around the game world."""

from __future__ import annotations

import argparse
from pathlib import Path

import pygame

from brickbreak.constants import (
    BACKGROUND_COLOR,
    BALL_DIAMETER,
    SCORE_COLOR,
    SCOREBOARD_FONT_SIZE,
    SCOREBOARD_TEXT_PADDING,
    TEXT_COLOR,
)
from brickbreak.world import SCOREBOARD_LABEL, BodyKind, World, build_world

FIXED_HZ = 64
FIXED_DT = 1.0 / FIXED_HZ
WINDOW_SIZE = (1280, 720)
COLLISION_SOUND = Path("sounds") / "breakout_collision.ogg"


def input_direction(left: bool, right: bool) -> float:
    """Horizontal paddle direction for the pressed arrow keys."""
    direction = 0.0
    if left:
        direction -= 1.0
    if right:
        direction += 1.0
    return direction


def to_screen(x: float, y: float, width: float, height: float) -> tuple[float, float]:
    """Convert arena coordinates (origin centre, y up) to screen coordinates."""
    return x + width / 2.0, height / 2.0 - y


def _rgb(color: tuple[float, float, float]) -> tuple[int, int, int]:
    return tuple(round(max(0.0, min(1.0, c)) * 255) for c in color)


def _load_sound(assets: Path):
    try:
        pygame.mixer.init()
        return pygame.mixer.Sound(str(assets / COLLISION_SOUND))
    except (pygame.error, FileNotFoundError):
        return None


def _draw(surface, world: World, font) -> None:
    width, height = surface.get_size()
    surface.fill(_rgb(BACKGROUND_COLOR))
    for body in sorted(world.bodies, key=lambda b: b.transform.z):
        t = body.transform
        cx, cy = to_screen(t.translation.x, t.translation.y, width, height)
        if body.kind is BodyKind.BALL:
            pygame.draw.circle(surface, _rgb(body.color), (round(cx), round(cy)), round(BALL_DIAMETER / 2))
        else:
            rect = pygame.Rect(0, 0, round(t.scale.x), round(t.scale.y))
            rect.center = (round(cx), round(cy))
            pygame.draw.rect(surface, _rgb(body.color), rect)

    label = font.render(SCOREBOARD_LABEL, True, _rgb(TEXT_COLOR))
    value = font.render(str(world.score), True, _rgb(SCORE_COLOR))
    pad = round(SCOREBOARD_TEXT_PADDING)
    surface.blit(label, (pad, pad))
    surface.blit(value, (pad + label.get_width(), pad))


def main(argv: list[str] | None = None) -> int:
    """Open the game window and run until it is closed."""
    parser = argparse.ArgumentParser(prog="brickbreak", description="Break the bricks with the ball.")
    parser.add_argument("--assets", type=Path, default=Path("assets"), help="directory holding game assets")
    parser.add_argument("--frames", type=int, default=None, help="stop after this many frames")
    args = parser.parse_args(argv)

    pygame.init()
    try:
        screen = pygame.display.set_mode(WINDOW_SIZE)
        pygame.display.set_caption("brickbreak")
        font = pygame.font.Font(None, round(SCOREBOARD_FONT_SIZE))
        sound = _load_sound(args.assets)
        clock = pygame.time.Clock()
        world = build_world()
        accumulator = 0.0
        frames = 0
        running = True

        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False

            accumulator += clock.tick(240) / 1000.0
            keys = pygame.key.get_pressed()
            direction = input_direction(bool(keys[pygame.K_LEFT]), bool(keys[pygame.K_RIGHT]))
            while accumulator >= FIXED_DT:
                accumulator -= FIXED_DT
                if world.step(FIXED_DT, direction) and sound is not None:
                    sound.play()

            _draw(screen, world, font)
            pygame.display.flip()

            frames += 1
            if args.frames is not None and frames >= args.frames:
                running = False
    finally:
        pygame.quit()
    return 0