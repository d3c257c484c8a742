"""Scrolling background, stars, explosions and debris."""

from __future__ import annotations

import random

from .defs import FPS, SCREEN_WIDTH
from .stage import Debris, Entity, Explosion, Stage


def do_background(stage: Stage) -> None:
    stage.background_x -= 1
    if stage.background_x < -SCREEN_WIDTH:
        stage.background_x = 0


def do_starfield(stage: Stage) -> None:
    for star in stage.stars:
        star.x -= star.speed
        if star.x < 0:
            star.x = SCREEN_WIDTH + star.x


def do_explosions(stage: Stage) -> None:
    """Move every explosion and drop those that have faded out."""
    alive = []
    for explosion in stage.explosions:
        explosion.x += explosion.dx
        explosion.y += explosion.dy
        explosion.a -= 1
        if explosion.a > 0:
            alive.append(explosion)
    stage.explosions[:] = alive


def add_explosions(stage: Stage, x, y, num: int, rng: random.Random) -> None:
    """Scatter ``num`` coloured explosion sprites around (x, y)."""
    x, y = int(x), int(y)
    for _ in range(num):
        explosion = Explosion()
        explosion.x = x + rng.randrange(32) + 30
        explosion.y = y + rng.randrange(32) + 30
        explosion.dx = (rng.randrange(10) - rng.randrange(10)) / 10
        explosion.dy = (rng.randrange(10) - rng.randrange(10)) / 10
        colour = rng.randrange(4)
        explosion.r = 255
        if colour == 1:
            explosion.g = 128
        elif colour == 2:
            explosion.g = 255
        elif colour == 3:
            explosion.g = 255
            explosion.b = 255
        explosion.a = rng.randrange(FPS) * 3
        stage.explosions.append(explosion)


def do_debris(stage: Stage) -> None:
    """Move and shrink debris, dropping pieces that expired or vanished."""
    alive = []
    for piece in stage.debris:
        piece.x += piece.dx
        piece.y += piece.dy
        piece.life -= 1
        piece.rect_w -= 1
        piece.rect_h -= 1
        if piece.life <= 0 or (piece.rect_w == 0 and piece.rect_h == 0):
            continue
        alive.append(piece)
    stage.debris[:] = alive


def add_debris(stage: Stage, entity: Entity, rng: random.Random) -> None:
    """Break the entity's image into flying pieces.

    Entities narrower or shorter than four pixels are too small to break up.
    """
    if entity.w < 4 or entity.h < 4:
        return
    w = entity.w // (rng.randrange(5) + 1)
    h = entity.h // (rng.randrange(5) + 1)
    y = 0
    while y < entity.h:
        x = 0
        while x < entity.w:
            w = rng.randrange(entity.w // 4) + 1
            h = rng.randrange(entity.h // 4) + 1
            stage.debris.append(
                Debris(
                    x=entity.x + entity.w // 2,
                    y=entity.y + entity.h // 2,
                    dx=rng.randrange(20) - rng.randrange(20),
                    dy=rng.randrange(20) - rng.randrange(20),
                    life=FPS * 3,
                    rect_x=x,
                    rect_y=y,
                    rect_w=w,
                    rect_h=h,
                )
            )
            x += w
        y += h