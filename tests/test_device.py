import pytest

import player.device
from player.audio_mock import MockAudioDevice
from player.device import Clip, DeviceError, create_audio_device


def test_clip_name_and_repr():
    clip = Clip("/music/a.wav")

    assert clip.name == "a.wav"
    assert repr(clip) == "<Clip 'a.wav' open>"
    clip.closed = True
    assert repr(clip) == "<Clip 'a.wav' closed>"


def test_create_mock_device():
    assert isinstance(create_audio_device("mock"), MockAudioDevice)


def test_create_unknown_backend():
    with pytest.raises(ValueError):
        create_audio_device("alsa")


def test_create_falls_back_to_mock(monkeypatch):
    import player.audio_local

    def _no_sound_card(self):
        raise RuntimeError("No available audio device")

    monkeypatch.setattr(player.audio_local.PygameAudioDevice, "__init__", _no_sound_card)

    assert isinstance(create_audio_device("pygame"), MockAudioDevice)


def test_create_uses_configured_backend(monkeypatch):
    monkeypatch.setattr(player.device.config, "AUDIO_BACKEND", "mock")

    assert isinstance(create_audio_device(), MockAudioDevice)


def test_mock_tolerates_repeated_stop_and_close():
    device = MockAudioDevice()
    clip = device.open("/music/a.wav")
    device.start(clip)

    device.stop(clip)
    device.stop(clip)
    device.close(clip)
    device.close(clip)

    assert clip.closed is True
    assert device.open_clips == []


def test_mock_refuses_closed_clip():
    device = MockAudioDevice()
    clip = device.open("/music/a.wav")
    device.close(clip)

    with pytest.raises(DeviceError):
        device.start(clip)


def test_mock_failure_list():
    device = MockAudioDevice(fail_on={"broken.aiff"})

    with pytest.raises(DeviceError):
        device.open("/music/broken.aiff")
    assert device.calls == [("open", "broken.aiff")]


def _vlc_backend():
    # python-vlc fails at import time when libvlc itself is missing
    try:
        import player.audio
    except (ImportError, OSError, NotImplementedError) as e:
        pytest.skip(f"libVLC unavailable: {e}")
    return player.audio


class _FakeMediaPlayer:
    def __init__(self, state):
        self.state = state
        self.pauses = []

    def get_state(self):
        return self.state

    def set_pause(self, value):
        self.pauses.append(value)


def _started_vlc_clip(backend, state_name):
    media_player = _FakeMediaPlayer(getattr(backend.vlc.State, state_name))
    clip = Clip("/music/a.wav", native=(media_player, None))
    clip.started = True
    # stop() never touches the libVLC instance, so skip __init__
    device = backend.VlcAudioDevice.__new__(backend.VlcAudioDevice)
    return device, clip, media_player


@pytest.mark.parametrize("state_name", ["Opening", "Buffering", "Playing"])
def test_vlc_stop_pauses_while_starting_or_playing(state_name):
    device, clip, media_player = _started_vlc_clip(_vlc_backend(), state_name)

    device.stop(clip)

    assert media_player.pauses == [1]


@pytest.mark.parametrize("state_name", ["Ended", "Stopped", "Error"])
def test_vlc_stop_skips_finished_player(state_name):
    device, clip, media_player = _started_vlc_clip(_vlc_backend(), state_name)

    device.stop(clip)

    assert media_player.pauses == []


def test_vlc_stop_ignores_unstarted_clip():
    device, clip, media_player = _started_vlc_clip(_vlc_backend(), "Opening")
    clip.started = False

    device.stop(clip)

    assert media_player.pauses == []
