"""Sound effects and background music."""

from __future__ import annotations

import logging
from os import PathLike
from pathlib import Path

import pygame

from .defs import Channel, Sound

log = logging.getLogger(__name__)

SOUND_FILES = {
    Sound.PLAYER_FIRE: "sound/bulletsound.mp3",
    Sound.ALIEN_FIRE: "sound/bulletsound.mp3",
    Sound.PLAYER_DIE: "sound/low.mp3",
    Sound.ALIEN_DIE: "sound/medium.mp3",
}

_MIX_MAX_VOLUME = 128
_LOAD_ERRORS = (pygame.error, OSError)


class SoundBoard:
    """Loads and plays the game's sounds through a mixer.

    The ``mixer`` attribute defaults to ``pygame.mixer`` and may be replaced
    before loading. Files that fail to load are logged and then stay silent.
    """

    def __init__(self, root: str | PathLike = "."):
        self.root = Path(root)
        self.mixer = pygame.mixer
        self.sounds: dict[Sound, object] = {}
        self.music_path: Path | None = None
        self._sfx_volume = _MIX_MAX_VOLUME

    def load_sounds(self) -> None:
        self.sounds = {}
        for sound, relative in SOUND_FILES.items():
            path = self.root / relative
            try:
                chunk = self.mixer.Sound(str(path))
            except _LOAD_ERRORS as error:
                log.warning("Failed to load sound %s: %s", path, error)
                continue
            chunk.set_volume(self._sfx_volume / _MIX_MAX_VOLUME)
            self.sounds[sound] = chunk

    def play(self, sound: Sound, channel: Channel = Channel.ANY) -> bool:
        """Play a sound once; return whether there was anything to play."""
        chunk = self.sounds.get(sound)
        if chunk is None:
            return False
        if channel == Channel.ANY:
            chunk.play()
        else:
            self.mixer.Channel(int(channel)).play(chunk)
        return True

    def load_music(self, path: str | PathLike) -> bool:
        """Replace the current music with the file at ``path`` (under root)."""
        music = self.mixer.music
        if self.music_path is not None:
            music.stop()
            music.unload()
            self.music_path = None
        full = self.root / path
        try:
            music.load(str(full))
        except _LOAD_ERRORS as error:
            log.warning("Failed to load music %s: %s", full, error)
            return False
        self.music_path = full
        return True

    def play_music(self, loop) -> bool:
        """Start the music, forever if ``loop`` is true, else once."""
        if self.music_path is None:
            return False
        self.mixer.music.play(-1 if loop else 0)
        return True

    def stop_music(self) -> None:
        self.mixer.music.stop()

    def set_volumes(self, sfx: int, music: int) -> None:
        """Set effect and music volume on the mixer's 0-128 scale."""
        self._sfx_volume = sfx
        for chunk in self.sounds.values():
            chunk.set_volume(sfx / _MIX_MAX_VOLUME)
        self.mixer.music.set_volume(music / _MIX_MAX_VOLUME)