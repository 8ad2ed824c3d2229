"""
Logging configuration for the hangar CLI.

This module handles cross-platform log directory detection
and the parameters used when setting up logging.
"""

import os
import platform
from pathlib import Path
from enum import Enum
from typing import Optional
from dataclasses import dataclass
from hangar.constants import LOG_FILE_NAME, LOG_RETENTION_DAYS, SENSITIVE_KEYS


class LogLevel(Enum):
    """Log levels accepted by hangar"""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


@dataclass
class LogConfig:
    """Configuration class for hangar logging"""

    log_filename: str = f"{LOG_FILE_NAME}.log"
    log_retention_days: int = LOG_RETENTION_DAYS

    default_level: LogLevel = LogLevel.INFO
    console_level: LogLevel = LogLevel.WARNING

    include_timestamps: bool = True
    include_thread_info: bool = False

    # API call logging
    log_api_calls: bool = True

    sanitize_sensitive_data: bool = True
    sensitive_keys: tuple = SENSITIVE_KEYS


def get_log_directory() -> Path:
    """
    Get the log directory for the current operating system.

    Returns:
        Path: Platform-specific log directory, created if missing
    """
    system = platform.system().lower()

    if system == "windows":
        # %APPDATA%/hangar/logs/
        base_dir = Path(os.environ.get("APPDATA", ""))
        if not base_dir.exists():
            base_dir = Path.home()
        log_dir = base_dir / LOG_FILE_NAME / "logs"

    elif system == "darwin":
        # ~/Library/Logs/hangar/
        log_dir = Path.home() / "Library" / "Logs" / LOG_FILE_NAME

    else:
        # ~/.local/share/hangar/logs/
        xdg_data_home = os.environ.get("XDG_DATA_HOME")
        if xdg_data_home:
            base_dir = Path(xdg_data_home)
        else:
            base_dir = Path.home() / ".local" / "share"
        log_dir = base_dir / LOG_FILE_NAME / "logs"

    try:
        log_dir.mkdir(parents=True, exist_ok=True)
        return log_dir
    except OSError:
        fallback_dir = Path.cwd() / "logs"
        fallback_dir.mkdir(exist_ok=True)
        return fallback_dir


def get_log_file_path(config: Optional[LogConfig] = None) -> Path:
    """Full path to the active log file"""
    if config is None:
        config = LogConfig()

    return get_log_directory() / config.log_filename
