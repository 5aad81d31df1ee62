"""
Playback engine - the single owner of the playlist state

Front-ends submit commands through ``dispatch`` and render the returned
snapshot. Every transition runs under one lock, so two commands never
interleave and a snapshot always reflects a completed transition.
"""

import os
import threading

from player import commands
from player.device import DeviceError
from player.local_library import DirectoryReadError, LocalLibrary
from player.state import PlayerError, PlaylistState
from utils.logger import get_logger

logger = get_logger("engine")


class PlaybackEngine:
    def __init__(self, device, library=None):
        """
        Args:
            device: AudioDevice used for all playback
            library: File lister, defaults to LocalLibrary
        """
        self.device = device
        self.library = library or LocalLibrary()
        self._state = PlaylistState()
        self._lock = threading.RLock()
        self._shut_down = False

        self._handlers = {
            commands.LoadDirectory: self._load_directory,
            commands.PlayPause: self._play_pause,
            commands.Stop: self._stop,
            commands.Next: self._next,
            commands.Previous: self._previous,
            commands.PlayAt: self._play_at,
            commands.PlayFile: self._play_file,
        }

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.shutdown()
        return False

    def snapshot(self):
        with self._lock:
            return self._state.snapshot()

    def dispatch(self, command):
        """Apply one command and return the resulting snapshot"""
        with self._lock:
            state = self._state
            state.last_error = None

            handler = self._handlers.get(type(command))
            if handler is None:
                logger.error(f"Unknown command: {command!r}")
                self._fail(PlayerError.UNKNOWN_COMMAND, f"Unknown command: {command!r}")
            else:
                logger.debug(f"Dispatching {command!r}")
                handler(command)

            return state.snapshot()

    def shutdown(self):
        """Release any open clip and the device; safe to call more than once"""
        with self._lock:
            if self._shut_down:
                return
            logger.info("Shutting down playback engine")
            self._release_clip()
            self.device.shutdown()
            self._shut_down = True

    # Helpers

    def _fail(self, error, message):
        self._state.last_error = error
        self._state.status_text = message

    def _require_tracks(self):
        if self._state.tracks:
            return True
        self._fail(PlayerError.EMPTY_PLAYLIST, "Please load a playlist first")
        return False

    def _playing_text(self, name):
        state = self._state
        clip_path = state.clip.path if state.clip else None
        if state.tracks and clip_path == state.tracks[state.current_index]:
            return f"Playing: {name} ({state.current_index + 1}/{len(state.tracks)})"
        return f"Playing: {name}"

    def _release_clip(self):
        """Stop and close the open clip, if any"""
        state = self._state
        if state.clip is not None:
            logger.debug(f"Releasing {state.clip}")
            self.device.stop(state.clip)
            self.device.close(state.clip)
        state.clip = None
        state.is_playing = False

    def _open_and_start(self, path):
        """
        Open a file, rewind it and start streaming

        Returns:
            The started clip, or None if the device refused it
        """
        try:
            clip = self.device.open(path)
        except DeviceError as e:
            logger.error(f"Could not open {path}: {e}")
            self._fail(PlayerError.DEVICE_OPEN_FAILURE, f"Error loading audio file: {e}")
            return None

        try:
            self.device.seek_to_start(clip)
            self.device.start(clip)
        except DeviceError as e:
            logger.error(f"Could not start {path}: {e}")
            self.device.close(clip)
            self._fail(PlayerError.DEVICE_OPEN_FAILURE, f"Error playing audio file: {e}")
            return None

        return clip

    def _play_index(self, index):
        """Replace the open clip with the track at index"""
        state = self._state
        self._release_clip()

        filepath = state.tracks[index]
        clip = self._open_and_start(filepath)
        if clip is None:
            return

        state.clip = clip
        state.current_index = index
        state.is_playing = True
        state.current_song = os.path.basename(filepath)
        state.status_text = self._playing_text(state.current_song)
        logger.info(f"Playing track {index + 1}/{len(state.tracks)}: {filepath}")

    # Transitions

    def _load_directory(self, command):
        state = self._state
        try:
            tracks = self.library.list_audio_files(command.path)
        except DirectoryReadError as e:
            logger.warning(f"Treating unreadable directory as empty: {e}")
            tracks = []
            state.last_error = PlayerError.DIRECTORY_READ_FAILURE

        # The open clip is left alone; a loaded playlist does not interrupt playback
        state.tracks = tracks
        state.current_index = 0
        state.is_playing = False
        state.status_text = f"Loaded {len(tracks)} files" if tracks else "No audio files found"
        logger.info(f"Loaded {len(tracks)} files from {command.path}")

    def _play_pause(self, command):
        state = self._state
        if not self._require_tracks():
            return

        if state.is_playing:
            self.device.stop(state.clip)
            state.is_playing = False
            state.status_text = f"Paused: {state.clip.name}"
            logger.info(f"Paused {state.clip.name}")
            return

        if state.clip is not None:
            try:
                self.device.start(state.clip)
            except DeviceError as e:
                logger.error(f"Could not resume {state.clip.name}: {e}")
                self._fail(PlayerError.DEVICE_OPEN_FAILURE, f"Error playing audio file: {e}")
                return
            state.is_playing = True
            state.status_text = self._playing_text(state.clip.name)
            logger.info(f"Resumed {state.clip.name}")
            return

        if 0 <= state.current_index < len(state.tracks):
            self._play_index(state.current_index)

    def _stop(self, command):
        self._release_clip()
        self._state.status_text = "Stopped"
        logger.info("Stopped")

    def _next(self, command):
        if not self._state.tracks:
            return
        state = self._state
        self._play_index((state.current_index + 1) % len(state.tracks))

    def _previous(self, command):
        if not self._state.tracks:
            return
        state = self._state
        self._play_index((state.current_index - 1) % len(state.tracks))

    def _play_at(self, command):
        if not self._require_tracks():
            return

        count = len(self._state.tracks)
        if not 0 <= command.index < count:
            logger.warning(f"Ignoring out-of-range index {command.index} (playlist has {count})")
            self._fail(
                PlayerError.INDEX_OUT_OF_RANGE,
                f"Index out of range: {command.index + 1} (playlist has {count} tracks)"
            )
            return

        self._play_index(command.index)

    def _play_file(self, command):
        state = self._state
        self._release_clip()

        clip = self._open_and_start(command.path)
        if clip is None:
            return

        state.clip = clip
        state.is_playing = True
        state.current_song = clip.name
        state.status_text = self._playing_text(clip.name)
        logger.info(f"Playing file {command.path}")
