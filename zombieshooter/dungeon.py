"""The dungeon map: tiles, CSV maps and the following camera."""

from __future__ import annotations

import random
import re
from dataclasses import dataclass, field
from os import PathLike

from .defs import (
    MAP_HEIGHT,
    MAP_WIDTH,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    TILE_GROUND,
    TILE_SIZE,
    TILE_WALL,
)
from .geometry import clamp
from .stage import Entity

_TILE_DIR = "kenney_top-down-shooter/PNG/Tiles"
_GROUND_TILES = range(1, 11)
_WALL_TILES = range(42, 48)
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def tile_image_paths() -> dict[int, str]:
    """Image file for each tile number the dungeon draws."""
    return {
        number: f"{_TILE_DIR}/tile_{number:02d}.png"
        for number in (*_GROUND_TILES, *_WALL_TILES)
    }


def _parse_cell(cell: str) -> int:
    match = _LEADING_INT.match(cell)
    if match is None:
        raise ValueError(f"invalid map cell: {cell!r}")
    return int(match.group(1))


def _grid(value: int) -> list[list[int]]:
    return [[value] * MAP_HEIGHT for _ in range(MAP_WIDTH)]


@dataclass
class TileMap:
    """Tile kinds and the tile image chosen for each cell, indexed [x][y]."""

    data: list[list[int]] = field(default_factory=lambda: _grid(0))
    visual: list[list[int]] = field(default_factory=lambda: _grid(0))

    def fill(self, tile: int) -> None:
        """Set every cell to the given tile kind."""
        for column in self.data:
            column[:] = [tile] * MAP_HEIGHT

    def reset(self, rng: random.Random) -> None:
        """Make the whole map ground with a random ground image per cell."""
        self.fill(TILE_GROUND)
        for column in self.visual:
            column[:] = [1 + rng.randrange(10) for _ in range(MAP_HEIGHT)]

    def load_csv(self, path: str | PathLike, rng: random.Random) -> None:
        """Read tile kinds from a comma-separated file, one map row per line.

        Rows and columns beyond the map's size are ignored.
        """
        with open(path, encoding="utf-8") as handle:
            for row, line in zip(range(MAP_HEIGHT), handle):
                line = line.rstrip("\n")
                if not line:
                    continue
                cells = line.split(",")
                if cells[-1] == "":
                    cells.pop()
                for col, cell in zip(range(MAP_WIDTH), cells):
                    tile = _parse_cell(cell)
                    self.data[col][row] = tile
                    if tile == TILE_GROUND:
                        self.visual[col][row] = 1 + rng.randrange(10)
                    elif tile == TILE_WALL:
                        self.visual[col][row] = 42 + rng.randrange(6)
                    else:
                        self.visual[col][row] = 0


@dataclass
class Camera:
    """A view into the dungeon that trails smoothly behind the player."""

    x: int = 0
    y: int = 0
    ghost_x: float = 0.0
    ghost_y: float = 0.0
    smooth_speed: float = 0.2

    def reset(self) -> None:
        self.x = 0
        self.y = 0
        self.ghost_x = 0.0
        self.ghost_y = 0.0
        self.smooth_speed = 0.2

    def snap_to(self, player: Entity | None) -> None:
        """Jump straight to the player, or to the origin if there is none."""
        if player is not None:
            self.ghost_x = player.x
            self.ghost_y = player.y
        else:
            self.ghost_x = 0.0
            self.ghost_y = 0.0
        self.smooth_speed = 0.10
        self.follow(player)

    def follow(self, player: Entity | None) -> None:
        """Ease towards a point just ahead of the player, kept inside the world."""
        if player is None:
            return
        moving = bool(player.dx or player.dy)
        tx = player.x + (player.dx * 2.0 if moving else 0.0)
        ty = player.y + (player.dy * 2.0 if moving else 0.0)

        self.ghost_x += (tx - self.ghost_x) * self.smooth_speed
        self.ghost_y += (ty - self.ghost_y) * self.smooth_speed

        half_w = SCREEN_WIDTH // 2 - player.w // 2
        half_h = SCREEN_HEIGHT // 2 - player.h // 2
        world_w = MAP_WIDTH * TILE_SIZE
        world_h = MAP_HEIGHT * TILE_SIZE

        self.ghost_x = clamp(int(self.ghost_x), half_w, world_w - half_w)
        self.ghost_y = clamp(int(self.ghost_y), half_h, world_h - half_h)

        self.x = int(self.ghost_x) - SCREEN_WIDTH // 2 + player.w // 2
        self.y = int(self.ghost_y) - SCREEN_HEIGHT // 2 + player.h // 2