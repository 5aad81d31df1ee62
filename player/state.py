"""Playlist state owned by the playback engine, and the snapshots it hands out."""

import os
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple

from player.device import Clip


class PlayerError(Enum):
    """Recoverable failures reported by a transition"""
    DEVICE_OPEN_FAILURE = "device_open_failure"
    DIRECTORY_READ_FAILURE = "directory_read_failure"
    INDEX_OUT_OF_RANGE = "index_out_of_range"
    UNKNOWN_COMMAND = "unknown_command"
    EMPTY_PLAYLIST = "empty_playlist"


@dataclass
class PlaylistState:
    tracks: List[str] = field(default_factory=list)
    current_index: int = 0
    is_playing: bool = False
    clip: Optional[Clip] = None
    current_song: Optional[str] = None
    status_text: str = "No song playing"
    last_error: Optional[PlayerError] = None

    def snapshot(self) -> "PlayerSnapshot":
        return PlayerSnapshot(
            tracks=tuple(self.tracks),
            current_index=self.current_index,
            is_playing=self.is_playing,
            has_clip=self.clip is not None,
            current_song=self.current_song,
            status_text=self.status_text,
            error=self.last_error,
        )


@dataclass(frozen=True)
class PlayerSnapshot:
    """Read-only view of the state after a completed transition"""
    tracks: Tuple[str, ...]
    current_index: int
    is_playing: bool
    has_clip: bool
    current_song: Optional[str]
    status_text: str
    error: Optional[PlayerError] = None

    @property
    def track_names(self) -> List[str]:
        return [os.path.basename(path) for path in self.tracks]
