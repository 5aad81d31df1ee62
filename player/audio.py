import os

import vlc

import config
from player.device import AudioDevice, Clip, DeviceError
from utils.logger import get_logger

logger = get_logger("audio")

# Nothing left to pause once the player reaches one of these
FINISHED_STATES = (vlc.State.Ended, vlc.State.Stopped, vlc.State.Error)


def _debug_vlc():
    """Log libVLC version info"""
    logger.info("=== VLC Debug Info ===")
    logger.info(f"VLC module path: {vlc.__file__}")
    try:
        logger.info(f"VLC version: {vlc.libvlc_get_version()}")
    except Exception as e:
        logger.warning(f"Could not get VLC version: {e}")


class VlcAudioDevice(AudioDevice):
    """Plays files through libVLC, one MediaPlayer per clip"""

    name = "vlc"

    def __init__(self):
        logger.info("=== VlcAudioDevice Init ===")
        _debug_vlc()

        self.instance = vlc.Instance(*config.VLC_ARGS)
        if self.instance is None:
            raise DeviceError("VLC Instance() returned None - VLC libraries not properly installed")

        logger.info("✓ Audio initialized with VLC backend")

    def open(self, path):
        if not os.path.isfile(path):
            raise DeviceError(f"File not found: {path}")

        logger.debug(f"Creating media for {path}")
        player = self.instance.media_player_new()
        if player is None:
            raise DeviceError("media_player_new() returned None")

        media = self.instance.media_new(path)
        player.set_media(media)
        return Clip(path, native=(player, media))

    def start(self, clip):
        if clip.closed:
            raise DeviceError(f"Clip is not open: {clip.name}")

        player, _ = clip.native
        if clip.started:
            logger.info("Resuming playback")
            player.set_pause(0)
            return

        logger.info(f"Starting playback: {clip.name}")
        if player.play() == -1:
            raise DeviceError(f"VLC could not play {clip.name}")
        clip.started = True

    def stop(self, clip):
        if clip.closed or not clip.started:
            return
        player, _ = clip.native
        # play() is asynchronous; Opening and Buffering still need the pause
        state = player.get_state()
        if state in FINISHED_STATES:
            logger.debug(f"Not pausing {clip.name}, player state is {state}")
            return
        logger.info("Pausing playback")
        player.set_pause(1)

    def seek_to_start(self, clip):
        if clip.closed or not clip.started:
            return
        player, _ = clip.native
        player.set_time(0)

    def close(self, clip):
        if clip.closed:
            return
        player, media = clip.native
        logger.info(f"Closing {clip.name}")
        player.stop()
        player.release()
        media.release()
        clip.closed = True

    def shutdown(self):
        self.instance.release()
        logger.info("VLC instance released")
