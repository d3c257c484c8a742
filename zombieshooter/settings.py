"""Player preferences and the settings screen that edits them."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

import pygame

FPS_CAP_OPTIONS = (30, 60, 75, 120, 144, 165)
BACKGROUND_NAMES = ("background", "drthanh", "Stars")
MUSIC_NAMES = (
    "_Hotline Miami Soundtrack_Crystals.mp3",
    "_Hotline Miami Soundtrack . Perturbator.mp3",
    "_Hotline Miami Soundtrack . -Paris-.mp3",
    "_Hotline Miami Soundtrack . Musik.mp3",
    "_Hotline Miami Soundtrack . Miami.mp3",
    "_Hotline Miami Soundtrack . It's Safe Now.mp3",
    "_Hotline Miami Soundtrack . Hydrogen.mp3",
    "_Hotline Miami Soundtrack . Daisuke.mp3",
    "_Hotline Miami Soundtrack . A New Morning.mp3",
)
SETTING_COUNT = 8
VOLUME_STEP = 5


@dataclass
class Settings:
    """Volumes in percent, chosen background and music, frame-rate options."""

    sfx_volume: int = 100
    music_volume: int = 100
    bg_index: int = 0
    music_index: int = 0
    show_fps: bool = True
    fps_cap_index: int = 1

    def fps_cap(self) -> int:
        return FPS_CAP_OPTIONS[self.fps_cap_index]

    def background_path(self) -> str:
        return f"img/{BACKGROUND_NAMES[self.bg_index]}.png"

    def music_path(self) -> str:
        return f"sound/{MUSIC_NAMES[self.music_index]}"

    def sfx_mix_volume(self) -> int:
        """Effect volume on the mixer's 0-128 scale."""
        return self.sfx_volume * 128 // 100

    def music_mix_volume(self) -> int:
        """Music volume on the mixer's 0-128 scale."""
        return self.music_volume * 128 // 100


class SettingsAction(Enum):
    """What the game has to do after the settings screen handled input."""

    NONE = auto()
    APPLY = auto()
    CHANGE_MUSIC = auto()
    PLAY_MUSIC = auto()
    STOP_MUSIC = auto()
    BACK = auto()


_UP_KEYS = (pygame.K_UP, pygame.K_w)
_DOWN_KEYS = (pygame.K_DOWN, pygame.K_s)
_RIGHT_KEYS = (pygame.K_RIGHT, pygame.K_d)
_LEFT_KEYS = (pygame.K_LEFT, pygame.K_a)


class SettingsMenu:
    """The list of settings, the selected row and how keys change them."""

    def __init__(self, settings: Settings):
        self.settings = settings
        self.selected = 0

    def labels(self) -> list[str]:
        s = self.settings
        return [
            "SFX Volume",
            "Music Volume",
            f"Background: {BACKGROUND_NAMES[s.bg_index]}",
            f"Music: {MUSIC_NAMES[s.music_index]}",
            "▶ Play Music (Enter)",
            "■ Stop Music (Enter)",
            "Show FPS",
            "FPS Cap",
        ]

    def move(self, step: int) -> None:
        self.selected = (self.selected + step) % SETTING_COUNT

    def select(self, index: int) -> None:
        if not 0 <= index < SETTING_COUNT:
            raise IndexError(f"no setting at index {index}")
        self.selected = index

    @staticmethod
    def _step_volume(volume: int, direction: int) -> int | None:
        if direction > 0 and volume < 100:
            return volume + VOLUME_STEP
        if direction < 0 and volume > 0:
            return volume - VOLUME_STEP
        return None

    @staticmethod
    def _step_index(index: int, direction: int, size: int) -> int | None:
        if direction > 0 and index < size - 1:
            return index + 1
        if direction < 0 and index > 0:
            return index - 1
        return None

    def adjust(self, direction: int) -> SettingsAction:
        """Change the selected setting one step right (>0) or left (<0)."""
        s = self.settings
        if direction == 0:
            return SettingsAction.NONE
        if self.selected == 0:
            value = self._step_volume(s.sfx_volume, direction)
            if value is not None:
                s.sfx_volume = value
                return SettingsAction.APPLY
        elif self.selected == 1:
            value = self._step_volume(s.music_volume, direction)
            if value is not None:
                s.music_volume = value
                return SettingsAction.APPLY
        elif self.selected == 2:
            value = self._step_index(s.bg_index, direction, len(BACKGROUND_NAMES))
            if value is not None:
                s.bg_index = value
                return SettingsAction.APPLY
        elif self.selected == 3:
            value = self._step_index(s.music_index, direction, len(MUSIC_NAMES))
            if value is not None:
                s.music_index = value
                return SettingsAction.CHANGE_MUSIC
        elif self.selected == 6:
            s.show_fps = not s.show_fps
            return SettingsAction.APPLY
        elif self.selected == 7:
            value = self._step_index(s.fps_cap_index, direction, len(FPS_CAP_OPTIONS))
            if value is not None:
                s.fps_cap_index = value
                return SettingsAction.APPLY
        return SettingsAction.NONE

    def activate(self) -> SettingsAction:
        """Enter on the selected row: only the music buttons respond."""
        if self.selected == 4:
            return SettingsAction.PLAY_MUSIC
        if self.selected == 5:
            return SettingsAction.STOP_MUSIC
        return SettingsAction.NONE

    def handle_key(self, key: int) -> SettingsAction:
        if key in _UP_KEYS:
            self.move(-1)
            return SettingsAction.NONE
        if key in _DOWN_KEYS:
            self.move(1)
            return SettingsAction.NONE
        if key == pygame.K_ESCAPE:
            return SettingsAction.BACK
        if key == pygame.K_RETURN:
            return self.activate()
        if key in _RIGHT_KEYS:
            return self.adjust(1)
        if key in _LEFT_KEYS:
            return self.adjust(-1)
        return SettingsAction.NONE