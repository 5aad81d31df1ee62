"""Textual-based graphical front-end"""
from pathlib import Path

from rich.text import Text
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.screen import ModalScreen
from textual.widgets import (Button, DirectoryTree, Footer, Header, Input, Label,
                             ListItem, ListView, Static)

from player import commands
from ui.theme import SYMBOL_MUSIC, WINDOW_TITLE, playback_symbol, status_style
from utils.logger import get_logger

logger = get_logger("ui")


class DirectoryPickScreen(ModalScreen):
    """Modal dialog that returns a directory path, or None when cancelled"""

    BINDINGS = [("escape", "cancel", "Cancel")]

    CSS = """
    DirectoryPickScreen {
        align: center middle;
    }

    #picker {
        width: 80%;
        height: 80%;
        border: thick $primary;
        background: $surface;
        padding: 1;
    }

    #picker-tree {
        height: 1fr;
    }

    #picker-buttons {
        height: 3;
        align: right middle;
    }
    """

    def __init__(self, start_path="."):
        super().__init__()
        self.start_path = str(Path(start_path).expanduser())

    def compose(self) -> ComposeResult:
        with Vertical(id="picker"):
            yield Label("Select Music Directory")
            yield DirectoryTree(self.start_path, id="picker-tree")
            yield Input(value=self.start_path, placeholder="Directory path", id="picker-path")
            with Horizontal(id="picker-buttons"):
                yield Button("Load", variant="primary", id="picker-load")
                yield Button("Cancel", id="picker-cancel")

    def on_directory_tree_directory_selected(self, event: DirectoryTree.DirectorySelected):
        self.query_one("#picker-path", Input).value = str(event.path)

    def on_input_submitted(self, event: Input.Submitted):
        self._submit(event.value)

    def on_button_pressed(self, event: Button.Pressed):
        event.stop()
        if event.button.id == "picker-load":
            self._submit(self.query_one("#picker-path", Input).value)
        else:
            self.dismiss(None)

    def _submit(self, value):
        value = value.strip()
        self.dismiss(value or None)

    def action_cancel(self):
        self.dismiss(None)


class PlayerApp(App):
    """Main window: controls, status bar and playlist"""

    TITLE = WINDOW_TITLE

    BINDINGS = [
        Binding("p", "play_pause", "Play/Pause"),
        Binding("n", "next", "Next"),
        Binding("b", "previous", "Previous"),
        Binding("s", "stop", "Stop"),
        Binding("l", "load", "Load"),
        Binding("q", "quit", "Quit"),
    ]

    CSS = """
    #controls {
        height: 3;
        align: center middle;
    }

    #controls Button {
        width: 18;
        margin: 0 1;
    }

    #status {
        height: 3;
        padding: 1;
        background: $primary-darken-2;
    }

    #empty-hint {
        padding: 2;
        text-style: italic;
    }

    #playlist {
        height: 1fr;
    }

    #playlist > ListItem.current {
        background: $success;
        color: $text;
    }
    """

    CONTROL_COMMANDS = {
        "previous": commands.Previous,
        "play-pause": commands.PlayPause,
        "stop": commands.Stop,
        "next": commands.Next,
    }

    def __init__(self, engine, start_dir="."):
        super().__init__()
        self.engine = engine
        self.start_dir = start_dir
        self._rendered_tracks = None
        self.current_snapshot = None

    def compose(self) -> ComposeResult:
        yield Header()
        with Horizontal(id="controls"):
            yield Button("Load Directory", id="load")
            yield Button("Previous", id="previous")
            yield Button("Play", variant="success", id="play-pause")
            yield Button("Stop", id="stop")
            yield Button("Next", id="next")
        yield Static(id="status")
        yield Static(
            "No playlist loaded. Click 'Load Directory' to get started.", id="empty-hint"
        )
        yield ListView(id="playlist")
        yield Footer()

    async def on_mount(self):
        logger.info("Textual app mounted")
        await self.render_snapshot(self.engine.snapshot())

    async def send_command(self, command):
        """Send a command to the engine and redraw from the result"""
        logger.info(f"UI dispatch: {command!r}")
        snapshot = self.engine.dispatch(command)
        await self.render_snapshot(snapshot)
        return snapshot

    async def render_snapshot(self, snapshot):
        self.current_snapshot = snapshot
        style = status_style(snapshot)
        status = Text(f"{playback_symbol(snapshot)} ", style=style)
        status.append(snapshot.status_text, style=style)
        self.query_one("#status", Static).update(status)

        self.query_one("#play-pause", Button).label = "Pause" if snapshot.is_playing else "Play"
        self.query_one("#empty-hint", Static).display = not snapshot.tracks

        playlist = self.query_one("#playlist", ListView)
        if snapshot.tracks != self._rendered_tracks:
            await playlist.clear()
            await playlist.extend(
                ListItem(Label(f"{i + 1}. {name}"))
                for i, name in enumerate(snapshot.track_names)
            )
            self._rendered_tracks = snapshot.tracks

        for i, item in enumerate(playlist.children):
            item.set_class(bool(snapshot.tracks) and i == snapshot.current_index, "current")

        if snapshot.has_clip and snapshot.current_song:
            self.sub_title = f"{SYMBOL_MUSIC} {snapshot.current_song}"
        else:
            self.sub_title = ""

    async def on_button_pressed(self, event: Button.Pressed):
        button_id = event.button.id
        if button_id == "load":
            self.action_load()
        elif button_id in self.CONTROL_COMMANDS:
            await self.send_command(self.CONTROL_COMMANDS[button_id]())

    async def on_list_view_selected(self, event: ListView.Selected):
        index = event.list_view.index
        if index is not None:
            await self.send_command(commands.PlayAt(index))

    def action_load(self):
        self.push_screen(DirectoryPickScreen(self.start_dir), self._on_directory_picked)

    async def _on_directory_picked(self, path):
        if path is None:
            logger.debug("Directory selection cancelled")
            return
        self.start_dir = path
        await self.send_command(commands.LoadDirectory(path))

    async def action_play_pause(self):
        await self.send_command(commands.PlayPause())

    async def action_next(self):
        await self.send_command(commands.Next())

    async def action_previous(self):
        await self.send_command(commands.Previous())

    async def action_stop(self):
        await self.send_command(commands.Stop())
