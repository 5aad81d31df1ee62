"""Utility modules for the audio player"""

from .logger import get_logger, log_startup, log_shutdown

__all__ = ["get_logger", "log_startup", "log_shutdown"]
