"""
Key and value line matchers.

The default key pattern is ``//#tr <key>`` and the default value pattern is
``// <lang_code> <translated_text>``. Whitespace in both is significant.
Projects with other comment conventions can replace either pattern; a
replacement fully replaces the default.

Custom key patterns may name their capture group ``key``; otherwise group 1 is
used. Custom value patterns may name their groups ``lang`` and ``value``;
otherwise groups 1 and 2 are used.

Patterns are compiled with ASCII character classes, so ``\\s`` only matches
space, tab and line breaks; a no-break space is part of a ``\\S+`` token.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Protocol

from ..utils.core.exceptions import PatternConfigurationError

DEFAULT_KEY_PATTERN = r"^//#tr (\S+)$"
DEFAULT_VALUE_PATTERN = r"^// (\S+) (.+)$"


class KeyMatcher(Protocol):
    def match(self, line: str) -> str | None: ...


class ValueMatcher(Protocol):
    def match(self, line: str) -> tuple[str, str] | None: ...


def compile_pattern(pattern: str, required_groups: int) -> re.Pattern[str]:
    """
    Compile a user supplied pattern and check it captures enough groups.

    Args:
        pattern: Regular expression source
        required_groups: Number of capture groups the matcher reads

    Returns:
        The compiled pattern

    Raises:
        PatternConfigurationError: If the pattern is invalid or captures too little
    """
    try:
        compiled = re.compile(pattern, re.ASCII)
    except (re.error, ValueError) as e:
        raise PatternConfigurationError(
            f"Invalid pattern {pattern!r}: {e}", pattern=pattern
        ) from e

    if compiled.groups < required_groups:
        raise PatternConfigurationError(
            f"Pattern {pattern!r} must capture {required_groups} group(s), "
            f"found {compiled.groups}",
            pattern=pattern,
        )
    return compiled


class RegexKeyMatcher:
    """Extracts the translation key from a key declaration line."""

    def __init__(self, pattern: str = DEFAULT_KEY_PATTERN) -> None:
        self.pattern: re.Pattern[str] = compile_pattern(pattern, 1)
        self._group: str | int = "key" if "key" in self.pattern.groupindex else 1

    def match(self, line: str) -> str | None:
        found = self.pattern.search(line)
        if found is None:
            return None
        # an optional group that did not take part counts as an empty key
        return found.group(self._group) or ""


class RegexValueMatcher:
    """Extracts ``(language, value)`` from a translation value line."""

    def __init__(self, pattern: str = DEFAULT_VALUE_PATTERN) -> None:
        self.pattern: re.Pattern[str] = compile_pattern(pattern, 2)
        named = self.pattern.groupindex
        self._lang_group: str | int = "lang" if "lang" in named else 1
        self._value_group: str | int = "value" if "value" in named else 2

    def match(self, line: str) -> tuple[str, str] | None:
        found = self.pattern.search(line)
        if found is None:
            return None
        return found.group(self._lang_group) or "", found.group(self._value_group) or ""


@dataclass
class PatternConfig:
    """The pair of matchers the line scanner works with."""

    key: KeyMatcher = field(default_factory=RegexKeyMatcher)
    value: ValueMatcher = field(default_factory=RegexValueMatcher)

    @classmethod
    def from_strings(
        cls, key_pattern: str | None = None, value_pattern: str | None = None
    ) -> PatternConfig:
        """Build matchers from pattern strings, falling back to the defaults."""
        return cls(
            key=RegexKeyMatcher(key_pattern or DEFAULT_KEY_PATTERN),
            value=RegexValueMatcher(value_pattern or DEFAULT_VALUE_PATTERN),
        )
