"""
hangar logging module.

Key Features:
- Single log file with daily rotation
- Cross-platform log directory detection
- API call logging with timing
- Automatic sanitization of sensitive information
- Log level read from the global settings file
"""

from .logger import (
    get_logger,
    setup_logging,
    log_api_call,
    log_transaction,
)
from .config import LogConfig, LogLevel, get_log_directory, get_log_file_path
from .utils import sanitize_data

__all__ = [
    "get_logger",
    "setup_logging",
    "log_api_call",
    "log_transaction",
    "LogLevel",
    "LogConfig",
    "get_log_directory",
    "get_log_file_path",
    "sanitize_data",
]
