import pytest

from zombieshooter.audio import SoundBoard
from zombieshooter.defs import Channel, Sound


class FakeSound:
    def __init__(self, path):
        if not path.endswith(".mp3") or "missing" in path:
            raise FileNotFoundError(path)
        self.path = path
        self.volume = 1.0
        self.plays = 0

    def set_volume(self, value):
        self.volume = value

    def play(self):
        self.plays += 1


class FakeMusic:
    def __init__(self):
        self.events = []
        self.volume = 1.0

    def load(self, path):
        if "missing" in path:
            raise FileNotFoundError(path)
        self.events.append(("load", path))

    def unload(self):
        self.events.append(("unload",))

    def play(self, loops):
        self.events.append(("play", loops))

    def stop(self):
        self.events.append(("stop",))

    def set_volume(self, value):
        self.volume = value


class FakeMixer:
    def __init__(self):
        self.music = FakeMusic()
        self.channel_plays = []
        self.Sound = FakeSound

    def Channel(self, number):
        mixer = self

        class _Channel:
            def play(self, chunk):
                mixer.channel_plays.append((number, chunk))

        return _Channel()


@pytest.fixture
def board(tmp_path):
    mixer = FakeMixer()
    sounds = SoundBoard(tmp_path)
    sounds.mixer = mixer
    return sounds, mixer


def test_loaded_sounds_use_source_files(board):
    sounds, _ = board
    sounds.load_sounds()
    assert sounds.sounds[Sound.PLAYER_DIE].path.replace("\\", "/").endswith("sound/low.mp3")
    assert sounds.sounds[Sound.ALIEN_DIE].path.replace("\\", "/").endswith("sound/medium.mp3")


def test_load_sounds_loads_every_effect(board):
    sounds, _ = board
    sounds.load_sounds()
    assert set(sounds.sounds) == set(Sound)
    assert sounds.sounds[Sound.PLAYER_FIRE].path.endswith("bulletsound.mp3")


def test_play_on_any_channel_uses_sound(board):
    sounds, mixer = board
    sounds.load_sounds()
    assert sounds.play(Sound.ALIEN_DIE, Channel.ANY) is True
    assert sounds.sounds[Sound.ALIEN_DIE].plays == 1
    assert mixer.channel_plays == []


def test_play_on_fixed_channel(board):
    sounds, mixer = board
    sounds.load_sounds()
    sounds.play(Sound.PLAYER_FIRE, Channel.PLAYER)
    assert mixer.channel_plays == [(0, sounds.sounds[Sound.PLAYER_FIRE])]


def test_play_unloaded_sound_is_silent(board):
    sounds, _ = board
    assert sounds.play(Sound.PLAYER_FIRE, Channel.PLAYER) is False


def test_load_music_replaces_previous(board):
    sounds, mixer = board
    assert sounds.load_music("sound/a.mp3") is True
    assert sounds.load_music("sound/b.mp3") is True
    kinds = [event[0] for event in mixer.music.events]
    assert kinds == ["load", "stop", "unload", "load"]
    assert sounds.music_path.name == "b.mp3"


def test_load_missing_music_fails(board):
    sounds, _ = board
    assert sounds.load_music("sound/missing.mp3") is False
    assert sounds.music_path is None
    assert sounds.play_music(True) is False


def test_play_music_loop_flags(board):
    sounds, mixer = board
    sounds.load_music("sound/a.mp3")
    sounds.play_music(10)
    sounds.play_music(0)
    assert mixer.music.events[-2:] == [("play", -1), ("play", 0)]


def test_stop_music(board):
    sounds, mixer = board
    sounds.stop_music()
    assert mixer.music.events == [("stop",)]


def test_set_volumes_scales_to_unit(board):
    sounds, mixer = board
    sounds.load_sounds()
    sounds.set_volumes(64, 128)
    assert all(chunk.volume == 0.5 for chunk in sounds.sounds.values())
    assert mixer.music.volume == 1.0