"""
Redacting diff renderer.

Renders configuration snapshots as ``name : value`` lines and compares a
before/after pair line by line. Values of sensitive fields are replaced with
the redaction marker at every nesting depth; the raw values never reach the
output sink.
"""

import difflib
import io
from dataclasses import dataclass
from typing import Any, List, NamedTuple, Tuple

from hangar.constants import REDACTION_MARKER
from hangar.utils.redaction import DEFAULT_POLICY, SensitiveFieldPolicy
from .errors import SerializationError, WriteError
from .snapshot import format_scalar, snapshot_fields

INDENT = "  "

UNCHANGED = " "
REMOVED = "-"
ADDED = "+"


class RenderedLine(NamedTuple):
    """One output line plus the key used to align it against another snapshot"""

    text: str
    key: str


def snapshot_lines(
    snapshot: Any, policy: SensitiveFieldPolicy = DEFAULT_POLICY
) -> List[RenderedLine]:
    """
    Render a snapshot into redacted lines without a label.

    Args:
        snapshot: Configuration record (mapping, dataclass or named tuple)
        policy: Sensitive field policy

    Returns:
        Rendered lines in natural field order

    Raises:
        SerializationError: If the snapshot cannot be serialized
    """
    lines: List[RenderedLine] = []
    fields = snapshot_fields(snapshot)
    try:
        _field_lines(fields, 0, policy, lines)
    except RecursionError as e:
        raise SerializationError("snapshot is nested too deeply") from e
    return lines


def _plain(text: str) -> RenderedLine:
    return RenderedLine(text, text)


def _leaf(text: str, value: Any) -> RenderedLine:
    # values with the same text but a different type must not align
    return RenderedLine(text, f"{text}\x00{value!r}")


def _field_lines(fields, depth: int, policy: SensitiveFieldPolicy, lines: list) -> None:
    prefix = INDENT * depth
    for name, value in fields:
        if policy.is_sensitive(name):
            text = f"{prefix}{name} : {REDACTION_MARKER}"
            # the raw value only takes part in alignment, it is never written
            lines.append(_leaf(text, value))
        else:
            _value_lines(f"{prefix}{name} :", value, depth, policy, lines)


def _value_lines(head: str, value: Any, depth: int, policy: SensitiveFieldPolicy, lines: list) -> None:
    if isinstance(value, dict):
        if not value:
            lines.append(_leaf(f"{head} {{}}", value))
            return
        lines.append(_plain(head))
        _field_lines(value.items(), depth + 1, policy, lines)
    elif isinstance(value, list):
        if not value:
            lines.append(_leaf(f"{head} []", value))
            return
        lines.append(_plain(head))
        for item in value:
            _value_lines(f"{INDENT * (depth + 1)}-", item, depth + 1, policy, lines)
    elif isinstance(value, str) and "\n" in value:
        lines.append(_leaf(f"{head} |", value))
        for part in value.splitlines():
            lines.append(_plain(f"{INDENT * (depth + 1)}{part}"))
    else:
        lines.append(_leaf(f"{head} {format_scalar(value)}", value))


def write_line(output, text: str) -> None:
    """Write a newline-terminated line to a text or binary sink"""
    data = text + "\n"
    if isinstance(output, (io.RawIOBase, io.BufferedIOBase)):
        data = data.encode("utf-8")
    try:
        output.write(data)
    except (OSError, ValueError) as e:
        raise WriteError(f"Failed to write rendered output: {e}") from e


def render_snapshot(
    output, snapshot: Any, label: str, policy: SensitiveFieldPolicy = DEFAULT_POLICY
) -> None:
    """
    Render a single snapshot under a label.

    The label is written verbatim on its own line, each field line follows
    indented by two spaces.

    Raises:
        SerializationError: If the snapshot cannot be serialized
        WriteError: If the sink rejects a write
    """
    lines = snapshot_lines(snapshot, policy)
    write_line(output, label)
    for line in lines:
        write_line(output, INDENT + line.text)


@dataclass(frozen=True)
class Diff:
    """Before/after pair of configuration snapshots"""

    before: Any = None
    after: Any = None
    policy: SensitiveFieldPolicy = DEFAULT_POLICY

    def changes(self) -> List[Tuple[str, str]]:
        """Aligned ``(marker, text)`` pairs for both snapshots"""
        before = snapshot_lines(self.before, self.policy)
        after = snapshot_lines(self.after, self.policy)

        matcher = difflib.SequenceMatcher(
            None,
            [line.key for line in before],
            [line.key for line in after],
            autojunk=False,
        )

        result = []
        for tag, i1, i2, j1, j2 in matcher.get_opcodes():
            if tag == "equal":
                result.extend((UNCHANGED, line.text) for line in after[j1:j2])
                continue
            result.extend((REMOVED, line.text) for line in before[i1:i2])
            result.extend((ADDED, line.text) for line in after[j1:j2])
        return result

    def has_changes(self) -> bool:
        return any(marker != UNCHANGED for marker, _ in self.changes())

    def header(self, label: str) -> str:
        if self.before is None and self.after is not None:
            return f"{label} has been added"
        if self.after is None and self.before is not None:
            return f"{label} has been removed"
        return label

    def render(self, output, label: str) -> None:
        """
        Write the redacted comparison to a sink.

        Unchanged lines are indented by two spaces, removed lines start
        with ``- `` and added lines with ``+ ``.

        Args:
            output: Writable text or binary sink, left open
            label: Header written verbatim before the comparison

        Raises:
            SerializationError: If either snapshot cannot be serialized
            WriteError: If the sink rejects a write
        """
        changes = self.changes()
        write_line(output, self.header(label))
        for marker, text in changes:
            prefix = INDENT if marker == UNCHANGED else f"{marker} "
            write_line(output, prefix + text)
