"""Comment scanning, accumulation and rendering of localization text."""

from .collector import DEFAULT_LANGUAGE_CODES, LocalizationTextCollector
from .patterns import (
    DEFAULT_KEY_PATTERN,
    DEFAULT_VALUE_PATTERN,
    PatternConfig,
    RegexKeyMatcher,
    RegexValueMatcher,
)
from .reporter import EventKind, ScanEvent, ScanReporter
from .scanner import LineScanner, NoPendingKey, PendingKey
from .serializer import render
from .store import LocalizationStore

__all__ = [
    "DEFAULT_KEY_PATTERN",
    "DEFAULT_LANGUAGE_CODES",
    "DEFAULT_VALUE_PATTERN",
    "EventKind",
    "LineScanner",
    "LocalizationStore",
    "LocalizationTextCollector",
    "NoPendingKey",
    "PatternConfig",
    "PendingKey",
    "RegexKeyMatcher",
    "RegexValueMatcher",
    "ScanEvent",
    "ScanReporter",
    "render",
]
