"""
Main logging module for the hangar CLI.

Sets up a daily rotating log file, a stderr handler for warnings and a
dedicated API call logger.
"""

import json
import logging
import logging.handlers
import sys
from typing import Optional, Dict, Any

from .config import LogConfig, LogLevel, get_log_file_path
from .formatters import HangarFormatter, APICallFormatter
from .utils import cleanup_old_logs, sanitize_data


_loggers: Dict[str, logging.Logger] = {}
_logging_configured = False
_log_config: Optional[LogConfig] = None


def _configured_level() -> Optional[LogLevel]:
    """Read the user's log level from the global settings file"""
    from hangar.utils.target_store import TargetStore

    settings_file = TargetStore().settings_file
    if not settings_file.exists():
        return None
    try:
        with open(settings_file, "r", encoding="utf-8") as f:
            user_level = json.load(f).get("log_level")
    except (json.JSONDecodeError, OSError):
        return None
    if user_level in [lev.value for lev in LogLevel]:
        return LogLevel(user_level)
    return None


def _rotating_handler(log_file_path, config: LogConfig) -> logging.Handler:
    handler = logging.handlers.TimedRotatingFileHandler(
        filename=log_file_path,
        when="midnight",
        interval=1,
        backupCount=config.log_retention_days,
        encoding="utf-8",
        utc=False,
    )
    handler.suffix = "%Y-%m-%d"
    return handler


def setup_logging(config: Optional[LogConfig] = None, force_reconfigure: bool = False) -> None:
    """
    Set up the hangar logging system.

    Args:
        config: LogConfig instance, uses default if None
        force_reconfigure: Force reconfiguration even if already set up
    """
    global _logging_configured, _log_config

    if _logging_configured and not force_reconfigure:
        return

    if config is None:
        config = LogConfig()
        user_level = _configured_level()
        if user_level:
            config.default_level = user_level

    _log_config = config
    log_file_path = get_log_file_path(config)

    root_logger = logging.getLogger("hangar")
    root_logger.setLevel(getattr(logging, config.default_level.value))
    root_logger.handlers.clear()

    file_handler = _rotating_handler(log_file_path, config)
    file_handler.setLevel(getattr(logging, config.default_level.value))
    file_handler.setFormatter(
        HangarFormatter(
            include_timestamps=config.include_timestamps,
            include_thread_info=config.include_thread_info,
            sanitize_sensitive=config.sanitize_sensitive_data,
            sensitive_keys=config.sensitive_keys,
        )
    )
    root_logger.addHandler(file_handler)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(getattr(logging, config.console_level.value))
    console_handler.setFormatter(
        HangarFormatter(
            include_timestamps=False,
            sanitize_sensitive=config.sanitize_sensitive_data,
            sensitive_keys=config.sensitive_keys,
        )
    )
    root_logger.addHandler(console_handler)

    # API calls always go to the log file, never to the console
    api_logger = logging.getLogger("hangar.api")
    api_logger.setLevel(logging.DEBUG)
    api_logger.handlers.clear()
    if config.log_api_calls:
        api_handler = _rotating_handler(log_file_path, config)
        api_handler.setLevel(logging.DEBUG)
        api_handler.setFormatter(APICallFormatter())
        api_logger.addHandler(api_handler)
    api_logger.propagate = False

    try:
        cleanup_old_logs(log_file_path.parent, config.log_retention_days)
    except OSError:
        pass

    _logging_configured = True

    get_logger("hangar.setup").info(
        f"Logging initialized - File: {log_file_path}, Level: {config.default_level.value}"
    )


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for the specified name.

    Args:
        name: Logger name (e.g., 'hangar.commands.team')
    """
    if not _logging_configured:
        setup_logging()

    if name not in _loggers:
        _loggers[name] = logging.getLogger(name)

    return _loggers[name]


def log_api_call(
    method: str,
    url: str,
    status_code: Optional[int] = None,
    duration: Optional[float] = None,
    error: Optional[str] = None,
    logger_name: str = "hangar.api",
) -> None:
    """
    Log an API call with structured information.

    Args:
        method: HTTP method
        url: Request URL
        status_code: Response status code
        duration: Request duration in seconds
        error: Error message if request failed
        logger_name: Logger name to use
    """
    logger = get_logger(logger_name)

    extra = {
        "api_method": method,
        "api_url": url,
        "api_status": status_code,
        "api_duration": duration or 0,
    }
    if error:
        extra["api_error"] = error

    if error or (status_code and status_code >= 500):
        logger.error("API call failed", extra=extra)
    elif status_code and 400 <= status_code < 500:
        logger.warning("API call client error", extra=extra)
    else:
        logger.debug("API call completed", extra=extra)


def log_transaction(
    operation: str,
    details: Optional[Dict[str, Any]] = None,
    logger_name: str = "hangar.transaction",
) -> None:
    """
    Log a state-changing operation at DEBUG level with sanitized details.

    Args:
        operation: Description of the operation
        details: Additional transaction details
        logger_name: Logger name to use
    """
    logger = get_logger(logger_name)
    config = _log_config or LogConfig()

    if details:
        sanitized = sanitize_data(details, config.sensitive_keys)
        logger.debug(f"Transaction: {operation} {json.dumps(sanitized, default=str)}")
    else:
        logger.debug(f"Transaction: {operation}")
