"""
Audio device capability shared by all playback backends.

The engine only talks to an ``AudioDevice``. A backend opens a file into a
``Clip`` and then starts, pauses, rewinds and closes that clip. Playback
itself runs on the backend's own threads.
"""

import os
from abc import ABC, abstractmethod

import config
from utils.logger import get_logger

logger = get_logger("audio")

BACKENDS = ("pygame", "vlc", "mock")


class DeviceError(Exception):
    """Raised when a clip cannot be opened or started"""


class Clip:
    """An open audio resource bound to one file"""

    def __init__(self, path, native=None):
        self.path = path
        self.native = native
        self.started = False
        self.closed = False

    @property
    def name(self):
        return os.path.basename(self.path)

    def __repr__(self):
        state = "closed" if self.closed else "open"
        return f"<Clip {self.name!r} {state}>"


class AudioDevice(ABC):
    """Abstract audio output. Stop and close must tolerate finished or closed clips."""

    name = "abstract"

    @abstractmethod
    def open(self, path) -> Clip:
        """Open a file for playback, raising DeviceError on failure"""

    @abstractmethod
    def start(self, clip: Clip):
        """Start or resume streaming"""

    @abstractmethod
    def stop(self, clip: Clip):
        """Pause streaming, keeping the clip open"""

    @abstractmethod
    def seek_to_start(self, clip: Clip):
        """Rewind to the first frame"""

    @abstractmethod
    def close(self, clip: Clip):
        """Release the clip"""

    def shutdown(self):
        """Release the output device itself"""


def create_audio_device(backend=None):
    """
    Build the configured audio backend

    Falls back to the silent mock device if the backend cannot be initialized,
    e.g. when no sound card is present.
    """
    backend = backend or config.AUDIO_BACKEND
    if backend not in BACKENDS:
        raise ValueError(f"Unknown audio backend: {backend}")

    from player.audio_mock import MockAudioDevice

    if backend == "mock":
        return MockAudioDevice()

    try:
        logger.info(f"Initializing {backend} audio device")
        if backend == "vlc":
            from player.audio import VlcAudioDevice
            return VlcAudioDevice()
        from player.audio_local import PygameAudioDevice
        return PygameAudioDevice()
    except Exception as e:
        logger.warning(f"Failed to initialize {backend} audio device, using mock: {e}")
        return MockAudioDevice()
