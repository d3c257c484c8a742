"""Everything alive in a round: fighters, bullets, effects and score."""

from __future__ import annotations

import random
from dataclasses import dataclass, field

from .defs import FPS, MAX_STARS, SCREEN_HEIGHT, SCREEN_WIDTH, Mode, Side
from .weapon import PlayerWeapons


@dataclass(eq=False)
class Entity:
    """A fighter or a bullet."""

    x: float = 0.0
    y: float = 0.0
    w: int = 0
    h: int = 0
    dx: float = 0.0
    dy: float = 0.0
    health: int = 0
    max_health: int = 0
    angle: float = 0.0
    reload: int = 0
    side: Side = Side.PLAYER
    texture: object = None
    screen_x: int = 0
    screen_y: int = 0


@dataclass(eq=False)
class Explosion:
    x: float = 0.0
    y: float = 0.0
    dx: float = 0.0
    dy: float = 0.0
    r: int = 0
    g: int = 0
    b: int = 0
    a: int = 0


@dataclass(eq=False)
class Debris:
    """A shrinking piece of an exploded fighter's image."""

    x: float = 0.0
    y: float = 0.0
    dx: float = 0.0
    dy: float = 0.0
    life: int = 0
    rect_x: int = 0
    rect_y: int = 0
    rect_w: int = 0
    rect_h: int = 0
    texture: object = None


@dataclass
class Star:
    x: int
    y: int
    speed: int


@dataclass
class Stage:
    """State of the round being played."""

    fighters: list[Entity] = field(default_factory=list)
    bullets: list[Entity] = field(default_factory=list)
    explosions: list[Explosion] = field(default_factory=list)
    debris: list[Debris] = field(default_factory=list)
    stars: list[Star] = field(default_factory=list)
    player: Entity | None = None
    player_size: tuple[int, int] = (0, 0)
    weapons: PlayerWeapons = field(default_factory=lambda: PlayerWeapons.standard(0))
    mode: Mode | None = None
    score: int = 0
    highscore: int = 0
    background_x: int = 0
    enemy_spawn_timer: int = 0
    stage_reset_timer: int = 0

    def clear(self) -> None:
        """Remove every fighter, bullet, explosion and piece of debris."""
        self.fighters.clear()
        self.bullets.clear()
        self.explosions.clear()
        self.debris.clear()
        self.player = None

    def reset(self, rng: random.Random) -> None:
        """Start the round over with a fresh player and full weapons."""
        self.clear()
        self.weapons.reset()
        self.init_starfield(rng)
        self.add_player(rng)
        self.score = 0
        self.enemy_spawn_timer = 0
        self.stage_reset_timer = FPS * 3

    def init_starfield(self, rng: random.Random) -> None:
        self.stars = [
            Star(
                rng.randrange(SCREEN_WIDTH),
                rng.randrange(SCREEN_HEIGHT),
                1 + rng.randrange(8),
            )
            for _ in range(MAX_STARS)
        ]

    def add_player(self, rng: random.Random) -> Entity:
        """Place a new player near the screen centre and return it."""
        x = SCREEN_WIDTH // 2 + rng.randrange(20) - rng.randrange(20)
        y = SCREEN_HEIGHT // 2 + rng.randrange(20) - rng.randrange(20)
        width, height = self.player_size
        player = Entity(
            x=x,
            y=y,
            w=width,
            h=height,
            health=3,
            max_health=3,
            side=Side.PLAYER,
        )
        self.fighters.append(player)
        self.player = player
        return player

    def update_highscore(self) -> None:
        if self.score > self.highscore:
            self.highscore = self.score