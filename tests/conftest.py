"""Shared fixtures: a recording audio device and throwaway music directories."""

import os
import tempfile

# Keep test logs out of the real log directory; must run before config is imported
os.environ.setdefault("AUDIOPLAYER_LOG_DIR", tempfile.mkdtemp(prefix="audioplayer-test-logs-"))

import pytest

from player import commands
from player.audio_mock import MockAudioDevice
from player.engine import PlaybackEngine

AUDIO_FILES = ("a.wav", "b.au", "c.aiff")
OTHER_FILES = ("notes.txt", "cover.mp3")


@pytest.fixture
def device():
    return MockAudioDevice()


@pytest.fixture
def music_dir(tmp_path):
    directory = tmp_path / "music"
    directory.mkdir()
    for name in AUDIO_FILES + OTHER_FILES:
        (directory / name).write_bytes(b"")
    (directory / "nested.wav").mkdir()
    return directory


@pytest.fixture
def empty_dir(tmp_path):
    directory = tmp_path / "empty"
    directory.mkdir()
    (directory / "readme.md").write_text("nothing to play", encoding="utf-8")
    return directory


@pytest.fixture
def engine(device):
    with PlaybackEngine(device) as player:
        yield player


@pytest.fixture
def loaded_engine(engine, device, music_dir):
    engine.dispatch(commands.LoadDirectory(str(music_dir)))
    device.calls.clear()
    return engine
