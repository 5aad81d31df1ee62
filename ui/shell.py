"""
Interactive command shell front-end

Reads one line at a time, turns it into an engine command and prints the
resulting status. Shell-only commands (status, list, help, quit) read the
engine snapshot without changing it.
"""

from rich.console import Console
from rich.markup import escape

import config
from player import commands
from player.local_library import LocalLibrary
from ui.theme import (STYLE_CURRENT, STYLE_DIM, STYLE_ERROR, SYMBOL_CURRENT,
                      format_duration, playback_symbol, status_style)
from utils.logger import get_logger

logger = get_logger("ui")

HELP_TEXT = """
[bold]Audio Player Commands:[/bold]
  play <file>     - Play a single audio file
  load <dir>      - Load all audio files from directory
  p               - Play/pause current song
  s               - Stop playback
  n               - Next song
  b               - Previous song
  j <number>      - Jump to song number in playlist
  status          - Show current status
  list            - Show playlist
  help            - Show this help
  quit            - Exit player

Supported formats: WAV, AU, AIFF"""

SHELL_ACTIONS = {"status", "list", "help", "quit"}
QUIT_WORDS = {"quit", "exit", "q"}


class ShellError(Exception):
    """Raised for input the shell cannot turn into a command"""


def parse_command(line):
    """
    Parse one line of input

    Returns:
        An engine command, a shell action name ("status", "list", "help",
        "quit"), or None for a blank line

    Raises:
        ShellError: with a usage or unknown-command message
    """
    parts = line.strip().split(None, 1)
    if not parts:
        return None

    command = parts[0].lower()
    arg = parts[1].strip() if len(parts) > 1 else None

    if command == "play":
        if not arg:
            raise ShellError("Usage: play <filepath>")
        return commands.PlayFile(arg)
    if command == "load":
        if not arg:
            raise ShellError("Usage: load <directory>")
        return commands.LoadDirectory(arg)
    if command == "j":
        if not arg:
            raise ShellError("Usage: j <number>")
        try:
            number = int(arg)
        except ValueError:
            raise ShellError(f"Not a song number: {arg}") from None
        return commands.PlayAt(number - 1)
    if command == "p":
        return commands.PlayPause()
    if command == "s":
        return commands.Stop()
    if command == "n":
        return commands.Next()
    if command == "b":
        return commands.Previous()
    if command in QUIT_WORDS:
        return "quit"
    if command in SHELL_ACTIONS:
        return command

    raise ShellError(f"Unknown command: {command}\nType 'help' for available commands")


class CommandShell:
    def __init__(self, engine, console=None, library=None):
        self.engine = engine
        self.console = console or Console()
        self.library = library or LocalLibrary()

    def run(self):
        """Run the interactive loop until quit or end of input"""
        logger.info("Starting command shell")
        self.console.print("Simple Audio Player", style="bold")
        self.console.print("Type 'help' for commands")

        try:
            while True:
                try:
                    line = self.console.input(f"\n{config.PROMPT}")
                except (EOFError, KeyboardInterrupt):
                    break
                if not self.handle_line(line):
                    break
        finally:
            self.engine.dispatch(commands.Stop())
            logger.info("Command shell finished")
            self.console.print("Goodbye!")

    def handle_line(self, line):
        """Process one line of input; returns False when the shell should exit"""
        try:
            parsed = parse_command(line)
        except ShellError as e:
            logger.info(f"Rejected input: {line!r}")
            self.console.print(escape(str(e)), style=STYLE_ERROR)
            return True

        if parsed is None:
            return True
        if parsed == "quit":
            return False
        if parsed == "help":
            self.console.print(HELP_TEXT)
        elif parsed == "status":
            self.show_status()
        elif parsed == "list":
            self.show_playlist()
        else:
            snapshot = self.engine.dispatch(parsed)
            self.render(snapshot)
            if isinstance(parsed, commands.LoadDirectory) and snapshot.tracks:
                self.show_playlist()
        return True

    def render(self, snapshot):
        style = status_style(snapshot)
        self.console.print(
            f"{playback_symbol(snapshot)} {escape(snapshot.status_text)}", style=style
        )

    def show_status(self):
        """Show current player status"""
        snapshot = self.engine.snapshot()
        if not snapshot.tracks:
            self.console.print("No playlist loaded")
        else:
            self.console.print(f"Playlist: {len(snapshot.tracks)} songs")
            self.console.print(f"Current: {snapshot.current_index + 1}/{len(snapshot.tracks)}")
            self.console.print(f"Track: {escape(snapshot.track_names[snapshot.current_index])}")
        self.render(snapshot)

    def show_playlist(self):
        """Show current playlist"""
        snapshot = self.engine.snapshot()
        if not snapshot.tracks:
            self.console.print("Playlist is empty")
            return

        self.console.print("\nPlaylist:")
        for i, filepath in enumerate(snapshot.tracks):
            info = self.library.describe(filepath)
            duration = format_duration(info['duration']) if info['duration'] else "--:--"
            line = f"{i + 1}. {escape(info['filename'])} [{STYLE_DIM}]{duration}[/]"
            if i == snapshot.current_index:
                self.console.print(f"{SYMBOL_CURRENT} {line}", style=STYLE_CURRENT)
            else:
                self.console.print(f"  {line}")
