import os

# Audio backend: "pygame", "vlc" or "mock"
AUDIO_BACKEND = os.environ.get("AUDIOPLAYER_BACKEND", "pygame")

# Container formats the platform decodes natively
SUPPORTED_FORMATS = {".wav", ".au", ".aiff"}

# Mixer settings (pygame backend)
MIXER_FREQUENCY = 44100
MIXER_SIZE = -16
MIXER_CHANNELS = 2
MIXER_BUFFER = 2048

# VLC instance arguments
VLC_ARGS = ("--verbose=0", "--no-video")

# Logging
LOG_DIR = os.environ.get("AUDIOPLAYER_LOG_DIR", "/tmp/audioplayer_logs")

# Command shell
PROMPT = "audio> "

# Textual window
WINDOW_TITLE = "Simple Audio Player"
