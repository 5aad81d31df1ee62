"""
Local Music Library Scanner
Lists a directory for playable audio files and reads their metadata
"""

import os
from pathlib import Path

import mutagen

import config
from utils.logger import get_logger

logger = get_logger("library")


class DirectoryReadError(Exception):
    """Raised when a directory cannot be listed"""


def get_file_extension(filename):
    """Extract the lower-cased extension (with its dot), or None"""
    dot_index = filename.rfind(".")
    if dot_index <= 0:
        return None
    return filename[dot_index:].lower()


def is_supported(filename):
    """Check if a file name is one of the supported audio formats"""
    ext = get_file_extension(os.path.basename(filename))
    return ext is not None and ext in config.SUPPORTED_FORMATS


class LocalLibrary:
    """Lists local audio files for the playlist"""

    def list_audio_files(self, directory):
        """
        List supported audio files directly inside a directory

        Args:
            directory: Path to the directory (not searched recursively)

        Returns:
            List of absolute file paths, sorted by file name

        Raises:
            DirectoryReadError: if the directory is missing or unreadable
        """
        music_dir = Path(directory).expanduser()
        logger.info(f"Scanning {music_dir}")

        try:
            entries = list(music_dir.iterdir())
        except OSError as e:
            logger.error(f"Could not read directory {music_dir}: {e}")
            raise DirectoryReadError(f"Could not read directory: {music_dir}") from e

        tracks = [
            str(entry.resolve())
            for entry in entries
            if entry.is_file() and is_supported(entry.name)
        ]
        tracks.sort(key=lambda path: os.path.basename(path).lower())

        skipped = len(entries) - len(tracks)
        logger.info(f"Found {len(tracks)} audio files ({skipped} entries skipped)")
        return tracks

    def describe(self, filepath):
        """
        Read display metadata for a track

        Returns:
            Dict with 'path', 'filename', 'title' and 'duration' (seconds, 0 if unknown)
        """
        path = Path(filepath)
        info = {
            'path': str(path),
            'filename': path.name,
            'title': path.stem,
            'duration': 0
        }

        try:
            audio = mutagen.File(path)
        except Exception as e:
            logger.warning(f"Error reading {path}: {e}")
            return info

        # .au files and unknown containers come back as None
        if audio is not None and audio.info is not None:
            info['duration'] = int(getattr(audio.info, 'length', 0) or 0)

        return info
