"""
Local Audio Device - plays files through the pygame mixer
"""

import os

os.environ.setdefault('PYGAME_HIDE_SUPPORT_PROMPT', '1')

import pygame

import config
from player.device import AudioDevice, Clip, DeviceError
from utils.logger import get_logger

logger = get_logger("audio")


class PygameAudioDevice(AudioDevice):
    """pygame.mixer.music has a single stream, so at most one clip is live"""

    name = "pygame"

    def __init__(self):
        pygame.mixer.init(
            frequency=config.MIXER_FREQUENCY,
            size=config.MIXER_SIZE,
            channels=config.MIXER_CHANNELS,
            buffer=config.MIXER_BUFFER
        )
        self._current = None
        logger.info("✓ Audio initialized with pygame mixer")

    def open(self, path):
        if self._current is not None:
            self.close(self._current)

        try:
            pygame.mixer.music.load(path)
        except (pygame.error, OSError) as e:
            logger.error(f"Error loading audio file {path}: {e}")
            raise DeviceError(str(e)) from e

        clip = Clip(path)
        self._current = clip
        logger.debug(f"Opened {clip}")
        return clip

    def start(self, clip):
        if clip.closed or clip is not self._current:
            raise DeviceError(f"Clip is not open: {clip.name}")

        try:
            if clip.started:
                pygame.mixer.music.unpause()
            else:
                pygame.mixer.music.play()
                clip.started = True
        except pygame.error as e:
            raise DeviceError(str(e)) from e

    def stop(self, clip):
        if clip.closed or clip is not self._current:
            return
        pygame.mixer.music.pause()

    def seek_to_start(self, clip):
        if clip.closed or clip is not self._current:
            return
        # An unstarted stream already begins at frame 0
        if clip.started:
            pygame.mixer.music.rewind()

    def close(self, clip):
        if clip.closed:
            return
        if clip is self._current:
            pygame.mixer.music.stop()
            pygame.mixer.music.unload()
            self._current = None
        clip.closed = True
        logger.debug(f"Closed {clip}")

    def shutdown(self):
        if self._current is not None:
            self.close(self._current)
        pygame.mixer.quit()
        logger.info("pygame mixer shut down")
