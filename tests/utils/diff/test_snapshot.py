from collections import namedtuple
from dataclasses import dataclass
from datetime import date
from enum import Enum

import pytest

from hangar.utils.diff import SerializationError, snapshot_fields
from hangar.utils.diff.snapshot import field_name, format_scalar, is_record


class Color(Enum):
    RED = "red"


Point = namedtuple("Point", ["x", "y"])


@dataclass
class Job:
    name: str
    color: Color
    origin: Point


def test_dataclass_fields_follow_declaration_order():
    fields = snapshot_fields(Job(name="build", color=Color.RED, origin=Point(1, 2)))

    assert fields == [("name", "build"), ("color", "red"), ("origin", {"x": 1, "y": 2})]


def test_mapping_keeps_insertion_order():
    assert [name for name, _ in snapshot_fields({"b": 1, "a": 2})] == ["b", "a"]


def test_none_snapshot_has_no_fields():
    assert snapshot_fields(None) == []


def test_non_string_keys_use_canonical_text():
    fields = snapshot_fields({1: "one", False: "no", 2.5: "half"})

    assert [name for name, _ in fields] == ["1", "false", "2.5"]


def test_duplicate_field_names_are_rejected():
    with pytest.raises(SerializationError):
        snapshot_fields({1: "a", "1": "b"})


def test_unsupported_key_type_is_rejected():
    with pytest.raises(SerializationError):
        snapshot_fields({("a", "b"): 1})


def test_unsupported_value_type_is_rejected():
    with pytest.raises(SerializationError):
        snapshot_fields({"callback": lambda: None})


def test_cyclic_mapping_is_rejected():
    data = {}
    data["self"] = data

    with pytest.raises(SerializationError):
        snapshot_fields(data)


def test_cyclic_list_is_rejected():
    items = []
    items.append(items)

    with pytest.raises(SerializationError):
        snapshot_fields({"items": items})


def test_shared_references_are_not_cycles():
    shared = {"k": "v"}

    fields = snapshot_fields({"a": shared, "b": shared})

    assert fields == [("a", {"k": "v"}), ("b", {"k": "v"})]


def test_top_level_scalar_is_rejected():
    with pytest.raises(SerializationError):
        snapshot_fields(42)


def test_is_record():
    assert is_record({})
    assert is_record(Point(1, 2))
    assert is_record(Job("a", Color.RED, Point(0, 0)))
    assert not is_record(Job)
    assert not is_record([1, 2])


def test_format_scalar():
    assert format_scalar(None) == "null"
    assert format_scalar(True) == "true"
    assert format_scalar(date(2024, 1, 2)) == "2024-01-02"
    assert format_scalar("") == '""'
    assert format_scalar(7) == "7"


def test_field_name_from_enum():
    assert field_name(Color.RED) == "red"


def test_deep_nesting_is_rejected():
    snapshot = {}
    for _ in range(5000):
        snapshot = {"child": snapshot}

    with pytest.raises(SerializationError, match="nested too deeply"):
        snapshot_fields(snapshot)
