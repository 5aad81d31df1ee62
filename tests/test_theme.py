import pytest

from player.state import PlayerError, PlayerSnapshot
from ui.theme import (STYLE_ERROR, STYLE_PLAYING, STYLE_STATUS, SYMBOL_PAUSED,
                      SYMBOL_PLAYING, SYMBOL_STOPPED, format_duration,
                      playback_symbol, status_style)


def _snapshot(is_playing=False, has_clip=False, error=None):
    return PlayerSnapshot(
        tracks=("/music/a.wav",),
        current_index=0,
        is_playing=is_playing,
        has_clip=has_clip,
        current_song="a.wav" if has_clip else None,
        status_text="",
        error=error,
    )


@pytest.mark.parametrize(
    "snapshot, style",
    [
        (_snapshot(is_playing=True, has_clip=True), STYLE_PLAYING),
        (_snapshot(has_clip=True), STYLE_STATUS),
        (_snapshot(), STYLE_STATUS),
        (_snapshot(is_playing=True, has_clip=True, error=PlayerError.INDEX_OUT_OF_RANGE),
         STYLE_ERROR),
    ],
)
def test_status_style(snapshot, style):
    assert status_style(snapshot) == style


def test_playback_symbol():
    assert playback_symbol(_snapshot(is_playing=True, has_clip=True)) == SYMBOL_PLAYING
    assert playback_symbol(_snapshot(has_clip=True)) == SYMBOL_PAUSED
    assert playback_symbol(_snapshot()) == SYMBOL_STOPPED


def test_format_duration():
    assert format_duration(0) == "00:00"
    assert format_duration(125.7) == "02:05"
