"""
Snapshot serialization.

Turns a configuration snapshot (mapping, dataclass or named tuple, nested
arbitrarily) into plain ordered data: dicts in natural field order, lists
and scalars. Mappings keep insertion order, dataclasses keep declaration
order and named tuples keep field order.
"""

import dataclasses
from collections.abc import Mapping
from datetime import date, datetime
from enum import Enum
from typing import Any, List, Set, Tuple

from .errors import SerializationError

SCALAR_TYPES = (str, bool, int, float, type(None), date, datetime)


def is_record(value: Any) -> bool:
    """Check whether a value can act as a top-level snapshot"""
    if isinstance(value, Mapping):
        return True
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return True
    return _is_namedtuple(value)


def _is_namedtuple(value: Any) -> bool:
    return isinstance(value, tuple) and hasattr(value, "_fields") and hasattr(value, "_asdict")


def snapshot_fields(snapshot: Any) -> List[Tuple[str, Any]]:
    """
    Serialize a snapshot into ordered ``(name, value)`` pairs.

    Args:
        snapshot: The configuration record, or None for an empty snapshot

    Returns:
        List of field name/value pairs with nested values normalized

    Raises:
        SerializationError: If the snapshot is not a record or holds
            values that cannot be serialized
    """
    if snapshot is None:
        return []
    if not is_record(snapshot):
        raise SerializationError(
            f"snapshot must be a mapping or record, got {type(snapshot).__name__}"
        )
    try:
        return list(normalize(snapshot).items())
    except RecursionError as e:
        raise SerializationError("snapshot is nested too deeply") from e


def normalize(value: Any, _active: Set[int] = None) -> Any:
    """Recursively convert a value into dicts, lists and scalars"""
    if _active is None:
        _active = set()

    if isinstance(value, Enum):
        value = value.value
    if isinstance(value, SCALAR_TYPES):
        return value

    marker = id(value)
    if marker in _active:
        raise SerializationError(f"cyclic structure detected in {type(value).__name__}")
    _active.add(marker)

    try:
        if isinstance(value, Mapping):
            return _normalize_pairs(value.items(), _active)
        if dataclasses.is_dataclass(value) and not isinstance(value, type):
            return _normalize_pairs(
                ((f.name, getattr(value, f.name)) for f in dataclasses.fields(value)),
                _active,
            )
        if _is_namedtuple(value):
            return _normalize_pairs(value._asdict().items(), _active)
        if isinstance(value, (list, tuple)):
            return [normalize(item, _active) for item in value]
        raise SerializationError(f"unsupported value type: {type(value).__name__}")
    finally:
        _active.discard(marker)


def _normalize_pairs(pairs, _active: Set[int]) -> dict:
    result = {}
    for key, item in pairs:
        name = field_name(key)
        if name in result:
            raise SerializationError(f"duplicate field name: {name}")
        result[name] = normalize(item, _active)
    return result


def field_name(key: Any) -> str:
    """Canonical text of a mapping key"""
    if isinstance(key, Enum):
        key = key.value
    if isinstance(key, bool):
        return "true" if key else "false"
    if isinstance(key, str):
        return key
    if isinstance(key, (int, float)):
        return str(key)
    raise SerializationError(f"unsupported field name type: {type(key).__name__}")


def format_scalar(value: Any) -> str:
    """Canonical text of a scalar value"""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (date, datetime)):
        return value.isoformat()
    if isinstance(value, str):
        return value if value else '""'
    return str(value)
