"""
Custom formatters for hangar logging.
"""

import logging
from datetime import datetime
from .utils import sanitize_data
from hangar.constants import SENSITIVE_KEYS


class HangarFormatter(logging.Formatter):
    """
    Formatter for general hangar log entries.

    Dict and list arguments are sanitized before formatting so payloads
    logged by commands never leak credentials.
    """

    def __init__(
        self,
        include_timestamps: bool = True,
        include_thread_info: bool = False,
        sanitize_sensitive: bool = True,
        sensitive_keys: tuple = None,
    ):
        self.sanitize_sensitive = sanitize_sensitive
        self.sensitive_keys = sensitive_keys or SENSITIVE_KEYS

        fmt_parts = []
        if include_timestamps:
            fmt_parts.append("%(asctime)s")
        fmt_parts.extend(["%(levelname)s", "[%(name)s]", "%(message)s"])
        if include_thread_info:
            fmt_parts.insert(-1, "[Thread:%(thread)d]")
        super().__init__(fmt=" ".join(fmt_parts), datefmt="%Y-%m-%d %H:%M:%S")

    def format(self, record: logging.LogRecord) -> str:
        if self.sanitize_sensitive:
            if isinstance(record.msg, (dict, list)):
                record.msg = sanitize_data(record.msg, self.sensitive_keys)
            elif isinstance(record.args, dict):
                # a single mapping argument is unwrapped by LogRecord
                record.args = sanitize_data(record.args, self.sensitive_keys)
            elif isinstance(record.args, (tuple, list)):
                record.args = tuple(
                    sanitize_data(arg, self.sensitive_keys)
                    if isinstance(arg, (dict, list))
                    else arg
                    for arg in record.args
                )

        return super().format(record)


class APICallFormatter(logging.Formatter):
    """
    Formatter for API call records.

    Example:
        2026-10-19 10:00:00 DEBUG [hangar.api] PUT https://ci/api/v1/teams/main -> 200 (12.5ms)
    """

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.fromtimestamp(record.created).strftime("%Y-%m-%d %H:%M:%S")
        method = getattr(record, "api_method", "UNKNOWN")
        url = getattr(record, "api_url", "")
        status = getattr(record, "api_status", None) or "---"
        duration = round(getattr(record, "api_duration", 0) * 1000, 2)

        lines = [
            f"{timestamp} {record.levelname} [{record.name}] "
            f"{method} {url} -> {status} ({duration}ms)"
        ]

        api_error = getattr(record, "api_error", None)
        if api_error:
            lines.append(f"    Error: {api_error}")

        return "\n".join(lines)
