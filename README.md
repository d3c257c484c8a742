# zombieshooter

The building blocks of a top-down arcade shooter in which a survivor armed
with an AK, a pistol and a knife fights zombies, either on a single screen
over a scrolling starfield (survivor mode) or on a tiled map three screens
wide and three screens tall with a following camera (dungeon mode).

The game logic needs no window and can be driven and tested directly; the
input, audio and drawing parts use pygame.

## Installing

```
pip install .
```

Images, sounds and fonts are not part of the package. The loaders look for
them under a root directory you pass in (`img/`, `sound/` and
`kenney_top-down-shooter/` below it); a file that fails to load is logged and
then left out.

## What is in the package

| Module | Contents |
|--------|----------|
| `zombieshooter.defs` | Screen and map sizes, speeds, and the enums `Channel`, `Sound`, `GameState`, `MovePattern`, `Mode`, `Side`. |
| `zombieshooter.geometry` | `get_angle`, `collision`, `calc_slope`, `clamp`, and `FrameLimiter`, which sleeps out each frame to hold a target frame rate. |
| `zombieshooter.weapon` | `Weapon`, `WeaponType`, `Pose`, and `PlayerWeapons` with firing delay, ammunition, reloading and weapon switching. |
| `zombieshooter.stage` | `Stage` with its fighters, bullets, explosions, debris, stars, score and high score; `Entity`, `Explosion`, `Debris`, `Star`. |
| `zombieshooter.controls` | `InputState`: held keys and mouse buttons, fed from pygame events. |
| `zombieshooter.effects` | Background scrolling, starfield, explosions and debris. |
| `zombieshooter.combat` | Player movement and firing, enemy bullets, bullet and contact hits, fighters chasing the player, keeping the player on screen. |
| `zombieshooter.dungeon` | `TileMap` (including loading a map from a comma-separated file) and `Camera`. |
| `zombieshooter.settings` | `Settings` and `SettingsMenu`, which turns key presses into a `SettingsAction`. |
| `zombieshooter.menus` | `Menu` layouts (`main_menu`, `pause_menu`, `mode_selection_menu`) with keyboard selection and mouse hit-testing, and `TutorialSlides`. |
| `zombieshooter.audio` | `SoundBoard`: sound effects, music and volumes through the pygame mixer. |
| `zombieshooter.render` | `Renderer` for text, images, health bars, the HUD and effects; `Assets` to load the images. |

### Weapons

`PlayerWeapons.standard(now)` gives the standard loadout:

| Weapon | Magazine | Delay between shots | Reload time |
|--------|----------|---------------------|-------------|
| AK     | 30       | 0.13 s              | 2 s         |
| Pistol | 7        | 0.30 s              | 1 s         |
| Knife  | –        | 0.50 s              | –           |

`switch(slot)` takes slot 1, 2 or 3; choosing the weapon already in hand puts
it away. A firearm starts reloading when `fire_bullet` empties it, or on
`force_reload`, and `update_reloads` refills it once the reload time is over.

## Example

```python
import random

from zombieshooter.stage import Stage
from zombieshooter.weapon import PlayerWeapons
from zombieshooter.geometry import collision, calc_slope

weapons = PlayerWeapons.standard(now=0)
weapons.force_reload(now=0)      # False: the magazine is already full
weapons.switch(2)                # take the pistol

stage = Stage()
stage.reset(random.Random(1))    # fresh player, starfield and score

collision(0, 0, 10, 10, 5, 5, 10, 10)   # True
calc_slope(10, 0, 0, 0)                 # (1.0, 0.0)
```

The functions in `zombieshooter.combat` take a `play_sound(sound, channel)`
callable, for instance `SoundBoard.play`, so they can run without a mixer.

## What the package does not do

There is no playable game here yet: no command to start it, no window set-up,
no main loop that moves between the menu, tutorial, settings, pause and
playing screens, and nothing that spawns enemies or drives them. The pieces
above have to be wired together by the caller.