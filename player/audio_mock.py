import os

from player.device import AudioDevice, Clip, DeviceError
from utils.logger import get_logger

logger = get_logger("audio")


class MockAudioDevice(AudioDevice):
    """Mock audio device for running without sound; records every call"""

    name = "mock"

    def __init__(self, fail_on=()):
        self.calls = []
        self.fail_on = set(fail_on)
        self.open_clips = []

    def _record(self, action, clip_or_path):
        path = clip_or_path.path if isinstance(clip_or_path, Clip) else clip_or_path
        self.calls.append((action, os.path.basename(path)))

    def open(self, path):
        self._record("open", path)
        if os.path.basename(path) in self.fail_on or path in self.fail_on:
            logger.error(f"Mock: refusing to open {path}")
            raise DeviceError(f"Mock: cannot open {path}")
        clip = Clip(path)
        self.open_clips.append(clip)
        logger.debug(f"Mock: opened {clip.name}")
        return clip

    def start(self, clip):
        self._record("start", clip)
        if clip.closed:
            raise DeviceError(f"Clip is not open: {clip.name}")
        clip.started = True
        logger.debug(f"Mock: playing {clip.name}")

    def stop(self, clip):
        self._record("stop", clip)

    def seek_to_start(self, clip):
        self._record("seek", clip)

    def close(self, clip):
        self._record("close", clip)
        if clip.closed:
            return
        clip.closed = True
        self.open_clips.remove(clip)
        logger.debug(f"Mock: closed {clip.name}")

    def shutdown(self):
        self.calls.append(("shutdown", None))

    def count(self, action, name=None):
        """Number of recorded calls of one kind, optionally for one file"""
        return sum(
            1 for call, target in self.calls
            if call == action and (name is None or target == name)
        )
