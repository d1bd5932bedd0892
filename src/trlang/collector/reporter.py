"""
Warning side-channel for the localization collector.

Every non-fatal problem found while scanning sources or writing language files
is recorded as a ScanEvent and forwarded to the module logger, so callers can
both read the log and assert on the structured events.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

logger = logging.getLogger(__name__)


class EventKind(Enum):
    """Kinds of non-fatal problems reported during a generation run."""

    MISSING_SOURCE_FILE = "missing_source_file"
    NOT_A_REGULAR_FILE = "not_a_regular_file"
    FILE_READ_FAILURE = "file_read_failure"
    ORPHANED_VALUE_LINE = "orphaned_value_line"
    DUPLICATE_KEY_OVERWRITE = "duplicate_key_overwrite"
    OUTPUT_DELETE_FAILED = "output_delete_failed"
    OUTPUT_CREATE_FAILED = "output_create_failed"
    OUTPUT_WRITE_FAILED = "output_write_failed"


@dataclass(frozen=True)
class ScanEvent:
    """A single reported warning."""

    kind: EventKind
    message: str
    source: Path | None = None
    line_number: int | None = None
    language: str | None = None
    key: str | None = None
    old_value: str | None = None
    new_value: str | None = None


class ScanReporter:
    """Collects ScanEvents and logs each one as a warning."""

    def __init__(self, log: logging.Logger | None = None) -> None:
        self.events: list[ScanEvent] = []
        self._log: logging.Logger = log or logger

    def report(self, event: ScanEvent) -> None:
        self.events.append(event)
        self._log.warning(event.message)

    def of_kind(self, kind: EventKind) -> list[ScanEvent]:
        """Return the recorded events of one kind, in report order."""
        return [event for event in self.events if event.kind is kind]

    def clear(self) -> None:
        self.events.clear()
