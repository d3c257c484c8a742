import random

import pytest

from zombieshooter.defs import FPS, MAX_STARS, SCREEN_HEIGHT, SCREEN_WIDTH, Side
from zombieshooter.stage import Debris, Entity, Explosion, Stage


@pytest.fixture
def stage():
    s = Stage()
    s.reset(random.Random(1))
    return s


def test_reset_creates_single_player(stage):
    assert stage.fighters == [stage.player]
    assert stage.player.side is Side.PLAYER
    assert stage.player.health == 3
    assert stage.player.max_health == 3


def test_player_starts_near_centre(stage):
    assert abs(stage.player.x - SCREEN_WIDTH // 2) < 20
    assert abs(stage.player.y - SCREEN_HEIGHT // 2) < 20


def test_reset_fills_starfield(stage):
    assert len(stage.stars) == MAX_STARS
    assert all(0 <= s.x < SCREEN_WIDTH and 0 <= s.y < SCREEN_HEIGHT for s in stage.stars)
    assert all(1 <= s.speed <= 8 for s in stage.stars)


def test_reset_sets_timers_and_score(stage):
    stage.score = 12
    stage.enemy_spawn_timer = 40
    stage.reset(random.Random(2))
    assert stage.score == 0
    assert stage.enemy_spawn_timer == 0
    assert stage.stage_reset_timer == FPS * 3


def test_reset_clears_everything(stage):
    stage.fighters.append(Entity(side=Side.ALIEN, health=1))
    stage.bullets.append(Entity())
    stage.explosions.append(Explosion())
    stage.debris.append(Debris())
    stage.reset(random.Random(3))
    assert len(stage.fighters) == 1
    assert stage.bullets == []
    assert stage.explosions == []
    assert stage.debris == []


def test_reset_restores_weapons(stage):
    stage.weapons.switch(2)
    stage.weapons.current().ammo = 0
    stage.reset(random.Random(4))
    assert stage.weapons.current_index == 0
    assert all(w.ammo == w.ammo_capacity for w in stage.weapons.weapons)


def test_reset_is_deterministic_for_a_seed():
    a, b = Stage(), Stage()
    a.reset(random.Random(9))
    b.reset(random.Random(9))
    assert a.stars == b.stars
    assert (a.player.x, a.player.y) == (b.player.x, b.player.y)


def test_player_size_is_used():
    s = Stage(player_size=(49, 43))
    player = s.add_player(random.Random(0))
    assert (player.w, player.h) == (49, 43)
    assert s.player is player


def test_clear_drops_player(stage):
    stage.clear()
    assert stage.player is None
    assert stage.fighters == []


def test_update_highscore(stage):
    stage.highscore = 5
    stage.score = 3
    stage.update_highscore()
    assert stage.highscore == 5
    stage.score = 8
    stage.update_highscore()
    assert stage.highscore == 8