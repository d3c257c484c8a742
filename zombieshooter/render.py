"""Drawing: images, text, health bars, the HUD and visual effects."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from os import PathLike
from pathlib import Path
from typing import Optional

import pygame

from .defs import SCREEN_HEIGHT, SCREEN_WIDTH
from .dungeon import tile_image_paths
from .menus import TUTORIAL_SLIDE_PATHS
from .stage import Entity, Stage
from .weapon import Pose

log = logging.getLogger(__name__)

WHITE = (255, 255, 255, 255)
GREEN = (0, 255, 0, 255)
RED = (255, 0, 0, 255)
SCENE_COLOR = (96, 128, 255, 255)

Rect = tuple[int, int, int, int]

_POSE_FILES = {
    Pose.STANDING: "kenney_top-down-shooter/PNG/Survivor 1/survivor1_stand.png",
    Pose.HOLDING_AK: "kenney_top-down-shooter/PNG/Survivor 1/survivor1_machine.png",
    Pose.HOLDING_PISTOL: "kenney_top-down-shooter/PNG/Survivor 1/survivor1_gun.png",
    Pose.PUNCHING: "kenney_top-down-shooter/PNG/Survivor 1/survivor1_hold.png",
}


def _trunc_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b > 0) else -quotient


def health_bar_rects(entity: Entity, x, y) -> tuple[Rect, Rect]:
    """The filled (green) and missing (red) parts of an entity's health bar."""
    bar_width = 16 * entity.max_health
    bar_height = 10
    health_width = _trunc_div(entity.health * bar_width, entity.max_health)
    top = int(y) - entity.h // 2 - 10
    left = int(x)
    return (
        (left, top, health_width, bar_height),
        (left + health_width, top, bar_width - health_width, bar_height),
    )


def health_text(entity: Entity) -> str:
    return f"{entity.health}/{entity.max_health}"


def hud_lines(score: int, highscore: int) -> list[tuple[str, tuple[int, int], tuple]]:
    """Text, position and colour of the score lines; a new record shows green."""
    record = score == highscore and score != 0
    return [
        (f"SCORE: {score}", (10, 10), WHITE),
        (f"HIGH SCORE: {highscore}", (960, 10), GREEN if record else WHITE),
    ]


def _load_image(path: Path) -> Optional[pygame.Surface]:
    try:
        image = pygame.image.load(str(path))
    except (pygame.error, OSError) as error:
        log.warning("Failed to load texture '%s': %s", path, error)
        return None
    if pygame.display.get_surface() is not None:
        image = image.convert_alpha()
    return image


@dataclass
class Assets:
    """Every image the game draws; an image that failed to load is None."""

    root: Path = Path(".")
    bullet: Optional[pygame.Surface] = None
    enemy: Optional[pygame.Surface] = None
    alien_bullet: Optional[pygame.Surface] = None
    explosion: Optional[pygame.Surface] = None
    debris: Optional[pygame.Surface] = None
    background: Optional[pygame.Surface] = None
    poses: dict = field(default_factory=dict)
    tiles: dict = field(default_factory=dict)
    slides: list = field(default_factory=list)

    @classmethod
    def load(cls, root: str | PathLike = ".") -> Assets:
        base = Path(root)
        return cls(
            root=base,
            bullet=_load_image(base / "img/bullet_klee.png"),
            enemy=_load_image(base / "kenney_top-down-shooter/PNG/Zombie 1/zoimbie1_gun.png"),
            alien_bullet=_load_image(base / "img/alienBullet.png"),
            explosion=_load_image(base / "img/explosion.png"),
            debris=_load_image(base / "img/debris.png"),
            poses={pose: _load_image(base / path) for pose, path in _POSE_FILES.items()},
            tiles={number: _load_image(base / path) for number, path in tile_image_paths().items()},
            slides=[_load_image(base / path) for path in TUTORIAL_SLIDE_PATHS],
        )

    def load_image(self, relative: str | PathLike) -> Optional[pygame.Surface]:
        """Load one image below the asset root."""
        return _load_image(self.root / relative)


class Renderer:
    """Draws onto a surface with a font and the game's images."""

    def __init__(self, surface: pygame.Surface, font, assets: Optional[Assets] = None):
        self.surface = surface
        self.font = font
        self.assets = assets if assets is not None else Assets()

    def render_text(self, message: str, x, y, color=WHITE, scale: float = 1.0):
        """Draw text with its top-left at (x, y); return the covered rectangle."""
        if self.font is None:
            log.warning("Font not loaded!")
            return None
        image = self.font.render(message, False, color)
        if scale != 1.0:
            width, height = image.get_size()
            image = pygame.transform.scale(image, (int(width * scale), int(height * scale)))
        return self.surface.blit(image, (int(x), int(y)))

    def blit(self, image, x, y):
        if image is None:
            log.warning("blit() Error: Attempted to render a missing texture")
            return None
        return self.surface.blit(image, (int(x), int(y)))

    def blit_rotated(self, image, x, y, angle):
        """Draw an image centred on (x, y), turned clockwise by ``angle`` degrees."""
        if image is None:
            return None
        rotated = pygame.transform.rotate(image, -angle)
        rect = rotated.get_rect(center=(int(x), int(y)))
        return self.surface.blit(rotated, rect)

    def draw_health_bar(self, entity: Entity, x, y) -> None:
        filled, missing = health_bar_rects(entity, x, y)
        self.surface.fill(GREEN, pygame.Rect(filled))
        if missing[2] > 0:
            self.surface.fill(RED, pygame.Rect(missing))

    def draw_health_text(self, entity: Entity, x, y):
        return self.render_text(health_text(entity), int(x), int(y) - entity.h - 2, WHITE, 0.5)

    def draw_hud(self, score: int, highscore: int) -> None:
        for text, (x, y), color in hud_lines(score, highscore):
            self.render_text(text, x, y, color)

    def _draw_background(self, stage: Stage) -> None:
        background = self.assets.background
        if background is None:
            return
        if background.get_size() != (SCREEN_WIDTH, SCREEN_HEIGHT):
            background = pygame.transform.scale(background, (SCREEN_WIDTH, SCREEN_HEIGHT))
        for x in range(stage.background_x, SCREEN_WIDTH, SCREEN_WIDTH):
            self.surface.blit(background, (x, 0))

    def _draw_starfield(self, stage: Stage) -> None:
        for star in stage.stars:
            shade = min(32 * star.speed, 255)
            pygame.draw.line(
                self.surface, (shade, shade, shade), (star.x, star.y), (star.x + 3, star.y)
            )

    def _draw_debris(self, stage: Stage) -> None:
        for piece in stage.debris:
            texture = piece.texture if piece.texture is not None else self.assets.debris
            if texture is None:
                continue
            area = pygame.Rect(piece.rect_x, piece.rect_y, max(piece.rect_w, 0), max(piece.rect_h, 0))
            self.surface.blit(texture, (int(piece.x), int(piece.y)), area)

    def _draw_explosions(self, stage: Stage) -> None:
        image = self.assets.explosion
        if image is None:
            return
        for explosion in stage.explosions:
            alpha = max(0, min(explosion.a, 255))
            tinted = image.copy()
            tinted.fill(
                (
                    explosion.r * alpha // 255,
                    explosion.g * alpha // 255,
                    explosion.b * alpha // 255,
                    255,
                ),
                special_flags=pygame.BLEND_RGBA_MULT,
            )
            if tinted.get_flags() & pygame.SRCALPHA:
                tinted = tinted.premul_alpha()
            self.surface.blit(
                tinted, (int(explosion.x), int(explosion.y)), special_flags=pygame.BLEND_RGB_ADD
            )

    def draw_effects(self, stage: Stage) -> None:
        """Draw the background, stars, debris and additive explosions."""
        self._draw_background(stage)
        self._draw_starfield(stage)
        self._draw_debris(stage)
        self._draw_explosions(stage)