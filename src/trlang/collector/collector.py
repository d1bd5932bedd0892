"""
Localization text collector.

Collects the comments with special patterns in source code files and builds the
text of one language file per language code.

Usage Examples:
    Collect from two files and render:
        >>> from trlang.collector import LocalizationTextCollector
        >>> collector = LocalizationTextCollector(allowed_language_codes=["en_US", "zh_CN"])
        >>> collector.load_source_files([Path("Foo.java"), Path("Bar.java")])
        >>> files = collector.build_language_files()
        >>> print(files["en_US"])
        # Auto-generated language file. Don't edit!
        # The language is en_US
        # Last updated time is 2024-05-01_12:00:00:000
        greeting=Hello!
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from datetime import datetime
from pathlib import Path

from .patterns import PatternConfig, RegexKeyMatcher, RegexValueMatcher
from .reporter import EventKind, ScanEvent, ScanReporter
from .scanner import LineScanner
from .serializer import render
from .store import LocalizationStore

logger = logging.getLogger(__name__)

DEFAULT_LANGUAGE_CODES: tuple[str, ...] = ("en_US",)


class LocalizationTextCollector:
    """Scans source files and accumulates translations per language."""

    def __init__(
        self,
        patterns: PatternConfig | None = None,
        allowed_language_codes: Sequence[str] | None = None,
        reporter: ScanReporter | None = None,
        encoding: str = "utf-8",
    ) -> None:
        self.patterns: PatternConfig = patterns or PatternConfig()
        self.allowed_language_codes: list[str] = list(
            DEFAULT_LANGUAGE_CODES if allowed_language_codes is None else allowed_language_codes
        )
        self.reporter: ScanReporter = reporter or ScanReporter()
        self.encoding: str = encoding
        self.store: LocalizationStore = LocalizationStore(self.reporter)

    @property
    def events(self) -> list[ScanEvent]:
        return self.reporter.events

    def set_key_pattern(self, pattern: str) -> None:
        self.patterns.key = RegexKeyMatcher(pattern)

    def set_value_pattern(self, pattern: str) -> None:
        self.patterns.value = RegexValueMatcher(pattern)

    def set_allowed_language_codes(self, codes: Iterable[str]) -> None:
        self.allowed_language_codes = list(codes)

    def mapping_for(self, language: str) -> dict[str, str]:
        """
        Args:
            language: the language code

        Returns:
            the localization map for the language
        """
        return self.store.mapping_for(language)

    def add(self, language: str, key: str, value: str) -> None:
        self.store.add(language, key, value)

    def get(self, language: str, key: str) -> str | None:
        return self.store.get(language, key)

    def load_source_file(self, source_file: Path) -> None:
        """
        Load the file, find the patterns and store the keys and values.

        Missing, non-regular and unreadable files are reported and skipped.

        Args:
            source_file: the source file
        """
        if not source_file.exists():
            self._report(EventKind.MISSING_SOURCE_FILE, f"Source file does not exist: {source_file}", source_file)
            return
        if not source_file.is_file():
            self._report(EventKind.NOT_A_REGULAR_FILE, f"Source file is not a file: {source_file}", source_file)
            return
        logger.debug(f"Processing source code file: {source_file}")

        try:
            with open(source_file, "r", encoding=self.encoding) as file:
                lines = [line.rstrip("\n") for line in file]
        except (OSError, UnicodeDecodeError) as e:
            self._report(
                EventKind.FILE_READ_FAILURE,
                f"Failed to read source file: {source_file}: {e}",
                source_file,
            )
            return

        scanner = LineScanner(
            self.patterns,
            self.allowed_language_codes,
            self.store,
            self.reporter,
            source=source_file,
        )
        scanner.scan(lines)

    def load_source_files(self, source_files: Iterable[Path]) -> None:
        """Load every file in the given order."""
        for source_file in source_files:
            self.load_source_file(source_file)

    def build_language_files(self, now: datetime | None = None) -> dict[str, str]:
        """
        Render one language file per collected language.

        Args:
            now: Timestamp written into every header, defaults to the current time

        Returns:
            Mapping of language code to file text, in first-seen language order
        """
        moment = now or datetime.now()
        return {
            language: render(mapping, language, now=moment)
            for language, mapping in self.store.items()
        }

    def _report(self, kind: EventKind, message: str, source: Path) -> None:
        self.reporter.report(ScanEvent(kind=kind, message=message, source=source))
