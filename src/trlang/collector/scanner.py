"""
Line scanner for localization comments.

The scanner is a two-state machine. A key line moves it to ``PendingKey``;
value lines for allowed languages are then attached to that key, one per
language, for as long as the block is not interrupted. Any line that matches
neither pattern (code, a blank line, a comment in another format) ends the
block and moves the scanner back to ``NoPendingKey``.

Example block::

    //#tr greeting
    // en_US Hello!
    // zh_CN 你好！
"""

from __future__ import annotations

import logging
from collections.abc import Collection, Iterable
from dataclasses import dataclass
from pathlib import Path

from .patterns import PatternConfig
from .reporter import EventKind, ScanEvent, ScanReporter
from .store import LocalizationStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NoPendingKey:
    """No key is waiting for values."""


@dataclass(frozen=True)
class PendingKey:
    """A declared key that value lines attach to."""

    key: str


ScanState = NoPendingKey | PendingKey

NO_PENDING_KEY = NoPendingKey()

# isspace() accepts these, but they are text, not indentation
NON_INDENT_SPACES = frozenset("\u0085\u00a0\u2007\u202f")


def strip_indentation(line: str) -> str:
    """Remove leading whitespace, keeping no-break spaces and NEL."""
    for index, char in enumerate(line):
        if not char.isspace() or char in NON_INDENT_SPACES:
            return line[index:]
    return ""


class LineScanner:
    """Feeds the lines of one source file into a LocalizationStore."""

    def __init__(
        self,
        patterns: PatternConfig,
        allowed_language_codes: Collection[str],
        store: LocalizationStore,
        reporter: ScanReporter,
        source: Path | None = None,
    ) -> None:
        self.patterns: PatternConfig = patterns
        self.allowed_language_codes: Collection[str] = allowed_language_codes
        self.store: LocalizationStore = store
        self.reporter: ScanReporter = reporter
        self.source: Path | None = source
        self.state: ScanState = NO_PENDING_KEY

    def feed(self, line: str, line_number: int | None = None) -> ScanState:
        """
        Process a single line and return the new state.

        Only leading whitespace is stripped; trailing whitespace is part of the
        value text.
        """
        line = strip_indentation(line)

        key = self.patterns.key.match(line)
        if key is not None:
            if key:
                logger.debug(f"Found key: {key}")
                self.state = PendingKey(key)
            else:
                self.state = NO_PENDING_KEY
            return self.state

        value_match = self.patterns.value.match(line)
        if value_match is not None:
            language, value = value_match
            if language not in self.allowed_language_codes:
                # treat it as a plain comment
                return self.state

            match self.state:
                case PendingKey(key=pending):
                    self.store.add(
                        language, pending, value, source=self.source, line_number=line_number
                    )
                    logger.debug(f"Found value for key {pending}: {value}")
                case NoPendingKey():
                    self.reporter.report(
                        ScanEvent(
                            kind=EventKind.ORPHANED_VALUE_LINE,
                            message=(
                                f"Invalid value for unknown key in file {self.source}: {line}"
                            ),
                            source=self.source,
                            line_number=line_number,
                            language=language,
                            key="",
                            new_value=value,
                        )
                    )
            return self.state

        self.state = NO_PENDING_KEY
        return self.state

    def scan(self, lines: Iterable[str]) -> None:
        """Scan every line of one file, starting from ``NoPendingKey``."""
        self.state = NO_PENDING_KEY
        for line_number, line in enumerate(lines, start=1):
            _ = self.feed(line, line_number)
        self.state = NO_PENDING_KEY
