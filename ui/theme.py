import config

# Window title shown by the Textual app
WINDOW_TITLE = config.WINDOW_TITLE

# Rich styles shared by the shell and the Textual app
STYLE_STATUS = "bold yellow"
STYLE_PLAYING = "bold green"
STYLE_CURRENT = "bold cyan"
STYLE_ERROR = "bold red"
STYLE_DIM = "dim"

# UI Symbols
SYMBOL_PLAYING = "▶"
SYMBOL_PAUSED = "⏸"
SYMBOL_STOPPED = "⏹"
SYMBOL_CURRENT = "►"
SYMBOL_MUSIC = "♪"


def playback_symbol(snapshot):
    """Symbol for the playback state in a snapshot"""
    if snapshot.is_playing:
        return SYMBOL_PLAYING
    if snapshot.has_clip:
        return SYMBOL_PAUSED
    return SYMBOL_STOPPED


def status_style(snapshot):
    """Rich style for the status line of a snapshot"""
    if snapshot.error:
        return STYLE_ERROR
    if snapshot.is_playing:
        return STYLE_PLAYING
    return STYLE_STATUS


def format_duration(seconds):
    """Format seconds as MM:SS"""
    mins = int(seconds // 60)
    secs = int(seconds % 60)
    return f"{mins:02d}:{secs:02d}"
