"""
Sensitive field policy.

A single predicate over field names decides what gets redacted, both when
rendering configuration diffs and when sanitizing log payloads.
"""

from dataclasses import dataclass
from typing import Iterable, Tuple

from hangar.constants import SENSITIVE_FIELD_PATTERNS, SENSITIVE_KEYS


@dataclass(frozen=True)
class SensitiveFieldPolicy:
    """Decides whether a field name holds a sensitive value.

    A name is sensitive when it equals one of ``exact_names`` or contains
    one of ``patterns``.
    """

    patterns: Tuple[str, ...] = SENSITIVE_FIELD_PATTERNS
    exact_names: Tuple[str, ...] = ()
    case_sensitive: bool = True

    def is_sensitive(self, field_name) -> bool:
        name = str(field_name)
        if not self.case_sensitive:
            name = name.lower()

        for exact in self.exact_names:
            candidate = exact if self.case_sensitive else exact.lower()
            if name == candidate:
                return True

        for pattern in self.patterns:
            if not pattern:
                continue
            candidate = pattern if self.case_sensitive else pattern.lower()
            if candidate in name:
                return True

        return False

    def with_exact_names(self, names: Iterable[str]) -> "SensitiveFieldPolicy":
        """Return a copy of the policy with additional exact names"""
        extra = []
        for name in names:
            if name and name not in self.exact_names and name not in extra:
                extra.append(name)
        return SensitiveFieldPolicy(
            patterns=self.patterns,
            exact_names=self.exact_names + tuple(extra),
            case_sensitive=self.case_sensitive,
        )


def log_policy(sensitive_keys: Tuple[str, ...] = SENSITIVE_KEYS) -> SensitiveFieldPolicy:
    """Policy used for sanitizing log payloads (case-insensitive)"""
    return SensitiveFieldPolicy(patterns=tuple(sensitive_keys), case_sensitive=False)


DEFAULT_POLICY = SensitiveFieldPolicy()
