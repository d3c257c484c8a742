"""Player control, fighter movement, bullets and hits."""

from __future__ import annotations

import math
import random
from typing import Callable

import pygame

from .controls import InputState
from .defs import (
    ALIEN_BULLET_SPEED,
    FPS,
    MAP_HEIGHT,
    MAP_WIDTH,
    PI,
    PLAYER_BULLET_SPEED,
    PLAYER_SPEED,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    TILE_SIZE,
    Channel,
    Mode,
    Side,
    Sound,
)
from .effects import add_debris, add_explosions
from .geometry import calc_slope, collision
from .stage import Entity, Stage
from .weapon import WeaponType

PlaySound = Callable[[Sound, Channel], None]

_SWITCH_KEYS = ((pygame.K_1, 1), (pygame.K_2, 2), (pygame.K_3, 3))


def _texture_size(texture) -> tuple[int, int]:
    if texture is None:
        return 0, 0
    width, height = texture.get_size()
    return int(width), int(height)


def _player_bullet_texture(stage: Stage):
    return getattr(stage, "bullet_texture", None)


def _alien_bullet_texture(stage: Stage):
    return getattr(stage, "alien_bullet_texture", None)


def fire_bullet(stage: Stage, now: int, play_sound: PlaySound) -> Entity | None:
    """Use the weapon in hand; return the new bullet if one was fired."""
    weapon = stage.weapons.current()
    player = stage.player
    if weapon is None or player is None:
        return None
    if now - weapon.last_fire_time < weapon.fire_delay:
        return None
    if weapon.type is WeaponType.KNIFE:
        weapon.last_fire_time = now
        play_sound(Sound.PLAYER_FIRE, Channel.PLAYER)
        return None
    if weapon.ammo <= 0:
        return None

    weapon.ammo -= 1
    play_sound(Sound.PLAYER_FIRE, Channel.PLAYER)

    texture = _player_bullet_texture(stage)
    width, height = _texture_size(texture)
    rad = player.angle * (PI / 180.0)
    bullet = Entity(
        x=player.x - player.w // 2,
        y=player.y + player.h // 2 - height // 2,
        w=width,
        h=height,
        dx=math.cos(rad) * PLAYER_BULLET_SPEED,
        dy=math.sin(rad) * PLAYER_BULLET_SPEED,
        health=1,
        texture=texture,
    )
    stage.bullets.append(bullet)
    weapon.last_fire_time = now
    if weapon.ammo == 0:
        weapon.reload_time = now
    return bullet


def _out_of_bounds(stage: Stage, bullet: Entity) -> bool:
    if stage.mode == Mode.DUNGEON:
        return (
            bullet.x < 0
            or bullet.y < 0
            or bullet.x > MAP_WIDTH * TILE_SIZE
            or bullet.y > MAP_HEIGHT * TILE_SIZE
        )
    if stage.mode == Mode.SURVIVOR:
        return (
            bullet.x < -bullet.w
            or bullet.y < -bullet.h
            or bullet.x > SCREEN_WIDTH
            or bullet.y > SCREEN_HEIGHT
        )
    return False


def do_bullets(stage: Stage, play_sound: PlaySound) -> None:
    """Move bullets, dropping those that hit something or left the field."""
    alive = []
    for bullet in stage.bullets:
        bullet.x += bullet.dx
        bullet.y += bullet.dy
        if bullet_hit_fighter(stage, bullet, play_sound) or _out_of_bounds(stage, bullet):
            continue
        alive.append(bullet)
    stage.bullets[:] = alive


def fire_alien_bullet(stage: Stage, shooter: Entity, rng: random.Random) -> Entity | None:
    """Fire a bullet from ``shooter`` at the player's centre."""
    player = stage.player
    if player is None:
        return None
    texture = _alien_bullet_texture(stage)
    width, height = _texture_size(texture)
    dx, dy = calc_slope(
        player.x + player.w // 2,
        player.y + player.h // 2,
        shooter.x,
        shooter.y,
    )
    bullet = Entity(
        x=shooter.x + shooter.w // 2 - width // 2,
        y=shooter.y + shooter.h // 2 - height // 2,
        w=width,
        h=height,
        dx=dx * ALIEN_BULLET_SPEED,
        dy=dy * ALIEN_BULLET_SPEED,
        health=1,
        side=Side.ALIEN,
        texture=texture,
    )
    stage.bullets.append(bullet)
    shooter.reload = rng.randrange(FPS * 2)
    return bullet


def bullet_hit_fighter(stage: Stage, bullet: Entity, play_sound: PlaySound) -> bool:
    """Apply a hit to the first enemy fighter the bullet overlaps."""
    for fighter in stage.fighters:
        if fighter.side != bullet.side and collision(
            bullet.x, bullet.y, bullet.w, bullet.h, fighter.x, fighter.y, fighter.w, fighter.h
        ):
            bullet.health -= 1
            if fighter is stage.player:
                if fighter.health == 1:
                    play_sound(Sound.PLAYER_DIE, Channel.PLAYER)
            elif fighter.health == 1:
                play_sound(Sound.ALIEN_DIE, Channel.ANY)
            fighter.health -= 1
            if fighter.health == 0:
                stage.score += 1
                stage.highscore = max(stage.score, stage.highscore)
            return True
    return False


def player_hit_enemy(stage: Stage, play_sound: PlaySound) -> bool:
    """Trade health between the player and the first enemy touching it."""
    player = stage.player
    if player is None:
        return False
    for enemy in stage.fighters:
        if enemy is not player and enemy.side != player.side and collision(
            player.x, player.y, player.w, player.h, enemy.x, enemy.y, enemy.w, enemy.h
        ):
            play_sound(Sound.PLAYER_DIE, Channel.PLAYER)
            play_sound(Sound.ALIEN_DIE, Channel.ANY)
            if player.health < enemy.health:
                enemy.health -= player.health
                player.health = 0
            elif player.health > enemy.health:
                player.health -= enemy.health
                enemy.health = 0
            else:
                player.health = 0
                enemy.health = 0
            return True
    return False


def clip_player(stage: Stage) -> None:
    """Keep the player inside the screen."""
    player = stage.player
    if player is None:
        return
    player.x = max(player.x, 0)
    player.y = max(player.y, 0)
    if player.x > SCREEN_WIDTH - player.w:
        player.x = SCREEN_WIDTH - player.w
    if player.y > SCREEN_HEIGHT - player.h:
        player.y = SCREEN_HEIGHT - player.h


def do_player_movement(
    stage: Stage,
    controls: InputState,
    now: int,
    play_sound: PlaySound,
) -> None:
    """Read the controls: move, switch weapon, reload and fire."""
    player = stage.player
    if player is None:
        return
    player.dx = 0
    player.dy = 0
    if player.reload > 0:
        player.reload -= 1

    if controls.is_down(pygame.K_w):
        player.dy = -PLAYER_SPEED
    if controls.is_down(pygame.K_s):
        player.dy = PLAYER_SPEED
    if controls.is_down(pygame.K_a):
        player.dx = -PLAYER_SPEED
    if controls.is_down(pygame.K_d):
        player.dx = PLAYER_SPEED

    for key, slot in _SWITCH_KEYS:
        if controls.pressed_once(key):
            stage.weapons.switch(slot)
    if controls.pressed_once(pygame.K_r):
        stage.weapons.force_reload(now)

    weapon = stage.weapons.current()
    if weapon is not None and controls.is_mouse_down(pygame.BUTTON_LEFT) and weapon.reload_time == 0:
        fire_bullet(stage, now, play_sound)


def do_fighters(stage: Stage, rng: random.Random, play_sound: PlaySound) -> None:
    """Chase the player, resolve contact and clear away dead fighters."""
    for fighter in list(stage.fighters):
        player = stage.player
        if fighter is not player and player is not None:
            dx, dy = calc_slope(player.x, player.y, fighter.x, fighter.y)
            fighter.dx = dx * 4.0
            fighter.dy = dy * 4.0

        fighter.x += fighter.dx
        fighter.y += fighter.dy

        if fighter is not stage.player and fighter.x + fighter.w < 0:
            fighter.health = 0

        player_hit_enemy(stage, play_sound)

        if fighter.health <= 0:
            if fighter is stage.player:
                stage.player = None
            add_explosions(stage, fighter.x - fighter.w // 2, fighter.y - fighter.h // 2, 15, rng)
            add_debris(stage, fighter, rng)
            stage.fighters.remove(fighter)