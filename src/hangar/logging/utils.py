"""
Utility functions for hangar logging.

Helpers for sanitizing log payloads and housekeeping of rotated log files.
"""

import re
from typing import Any, Dict, List, Tuple
from pathlib import Path
from datetime import datetime, timedelta
from hangar.constants import LOG_FILE_NAME, REDACTION_MARKER
from hangar.utils.redaction import log_policy

# Secrets that show up inside free-form strings such as URLs and headers
STRING_PATTERNS = (
    (r"Bearer\s+[A-Za-z0-9\-._~+/]+=*", "Bearer " + REDACTION_MARKER),
    (r"([?&](?:token|key|secret|password)=)[^&\s]+", r"\1" + REDACTION_MARKER),
)


def sanitize_data(data: Any, sensitive_keys: Tuple[str, ...]) -> Any:
    """
    Recursively sanitize sensitive data from dictionaries, lists, and strings.

    Args:
        data: Data to sanitize
        sensitive_keys: Key fragments treated as sensitive (case-insensitive)

    Returns:
        Any: A sanitized copy of the data
    """
    if isinstance(data, dict):
        return sanitize_dict(data, sensitive_keys)
    elif isinstance(data, list):
        return sanitize_list(data, sensitive_keys)
    elif isinstance(data, str):
        return sanitize_string(data)
    return data


def sanitize_dict(data: Dict[Any, Any], sensitive_keys: Tuple[str, ...]) -> Dict[Any, Any]:
    """Replace values of sensitive keys with the redaction marker"""
    policy = log_policy(sensitive_keys)
    sanitized = {}
    for key, value in data.items():
        if policy.is_sensitive(key):
            sanitized[key] = REDACTION_MARKER
        else:
            sanitized[key] = sanitize_data(value, sensitive_keys)
    return sanitized


def sanitize_list(data: List[Any], sensitive_keys: Tuple[str, ...]) -> List[Any]:
    return [sanitize_data(item, sensitive_keys) for item in data]


def sanitize_string(data: str) -> str:
    """Mask bearer tokens and secret query parameters inside a string"""
    sanitized = data
    for pattern, replacement in STRING_PATTERNS:
        sanitized = re.sub(pattern, replacement, sanitized, flags=re.IGNORECASE)
    return sanitized


def cleanup_old_logs(log_directory: Path, retention_days: int = 30) -> int:
    """
    Delete rotated log files older than the retention period.

    Returns:
        int: Number of files removed
    """
    if not log_directory.exists():
        return 0

    cutoff = datetime.now() - timedelta(days=retention_days)
    cleaned_count = 0

    for log_file in log_directory.glob(f"{LOG_FILE_NAME}.log.*"):
        try:
            if log_file.stat().st_mtime < cutoff.timestamp():
                log_file.unlink()
                cleaned_count += 1
        except OSError:
            continue

    return cleaned_count
