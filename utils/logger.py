"""
File logging for the audio player

Every component (main, engine, audio, library, ui) writes to its own
rotating file under config.LOG_DIR. Nothing goes to the terminal, which
belongs to the shell and the Textual app.
"""

import logging
import logging.handlers
from pathlib import Path
from datetime import datetime

import config

LOG_DIR = Path(config.LOG_DIR)
LOG_DIR.mkdir(parents=True, exist_ok=True)

LOG_FORMAT = "%(asctime)s | %(name)s | %(levelname)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
MAX_LOG_BYTES = 5 * 1024 * 1024
LOG_BACKUPS = 3

formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

# component -> (file name, level); the device and engine logs are the noisy ones
COMPONENTS = {
    "main": ("audioplayer.log", logging.INFO),
    "engine": ("engine.log", logging.DEBUG),
    "audio": ("audio.log", logging.DEBUG),
    "library": ("library.log", logging.INFO),
    "ui": ("ui.log", logging.INFO),
}


def setup_logger(name, log_file, level=logging.INFO):
    """Attach a single rotating file handler to the named logger"""
    logger = logging.getLogger(name)
    logger.setLevel(level)
    # Re-importing in tests must not stack handlers
    logger.handlers.clear()

    file_handler = logging.handlers.RotatingFileHandler(
        log_file, maxBytes=MAX_LOG_BYTES, backupCount=LOG_BACKUPS
    )
    file_handler.setFormatter(formatter)
    logger.addHandler(file_handler)
    logger.propagate = False
    return logger


_loggers = {
    component: setup_logger(component, LOG_DIR / filename, level)
    for component, (filename, level) in COMPONENTS.items()
}
main_logger = _loggers["main"]


def _banner(message):
    main_logger.info("=" * 60)
    main_logger.info(message)
    main_logger.info(f"Timestamp: {datetime.now()}")
    main_logger.info("=" * 60)


def log_startup(mode):
    """Write the start banner, naming the front-end mode ("cli", "gui", "file")"""
    _banner(f"Audio Player Started ({mode} mode)")


def log_shutdown():
    _banner("Audio Player Shutdown")


def get_logger(component):
    """Logger for one of COMPONENTS; unknown names share the main log"""
    return _loggers.get(component, main_logger)
