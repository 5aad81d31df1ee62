import argparse
import os

from rich.console import Console

from player import commands
from player.device import BACKENDS, create_audio_device
from player.engine import PlaybackEngine
from player.local_library import is_supported
from utils.logger import get_logger, log_startup, log_shutdown

logger = get_logger("main")

console = Console()


def build_parser():
    parser = argparse.ArgumentParser(
        description="Simple audio player for WAV, AU and AIFF files"
    )
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument("--gui", action="store_true", help="start the Textual interface")
    mode.add_argument("--cli", action="store_true", help="start the command shell")
    parser.add_argument("--backend", choices=BACKENDS, help="audio backend to use")
    parser.add_argument("file", nargs="?", help="play a single file and exit")
    return parser


def play_single_file(engine, filepath):
    """Play one file, wait for Enter, then stop. Returns the exit code."""
    if not os.path.exists(filepath):
        console.print(f"File not found: {filepath}")
        return 1
    if not is_supported(filepath):
        console.print("Unsupported file format. Supported: WAV, AU, AIFF")
        return 1

    snapshot = engine.dispatch(commands.PlayFile(filepath))
    console.print(snapshot.status_text)
    if snapshot.error:
        return 1

    try:
        console.input("Press Enter to exit...")
    except (EOFError, KeyboardInterrupt):
        pass
    engine.dispatch(commands.Stop())
    return 0


def run(args):
    if args.gui:
        mode = "gui"
    elif args.file and not args.cli:
        mode = "file"
    else:
        mode = "cli"

    log_startup(mode)
    try:
        with PlaybackEngine(create_audio_device(args.backend)) as engine:
            if mode == "gui":
                from ui.textual_app import PlayerApp
                PlayerApp(engine).run()
                return 0
            if mode == "file":
                return play_single_file(engine, args.file)

            from ui.shell import CommandShell
            CommandShell(engine, console=console).run()
            return 0
    finally:
        log_shutdown()


def main(argv=None):
    args = build_parser().parse_args(argv)
    try:
        return run(args)
    except KeyboardInterrupt:
        logger.info("Keyboard interrupt received")
        console.print("\nExiting...")
        return 130
    except Exception as e:
        logger.exception(f"Unhandled exception: {e}")
        raise


if __name__ == "__main__":
    raise SystemExit(main())
