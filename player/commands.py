"""Commands accepted by the playback engine."""

from dataclasses import dataclass


@dataclass(frozen=True)
class LoadDirectory:
    path: str


@dataclass(frozen=True)
class PlayPause:
    pass


@dataclass(frozen=True)
class Stop:
    pass


@dataclass(frozen=True)
class Next:
    pass


@dataclass(frozen=True)
class Previous:
    pass


@dataclass(frozen=True)
class PlayAt:
    index: int


@dataclass(frozen=True)
class PlayFile:
    """Play a single file outside the playlist"""
    path: str
