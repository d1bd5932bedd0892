"""
Basic exception classes for trlang.

This module contains fundamental exception classes that are used throughout
the codebase without creating import cycles. Only configuration problems are
fatal; everything that can go wrong while scanning sources or writing language
files is reported as a warning event instead of being raised.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path


class ErrorCategory(Enum):
    """Categories of errors for appropriate handling strategies."""

    CONFIGURATION = "configuration"
    PATTERN = "pattern"
    SOURCE = "source"
    OUTPUT = "output"
    UNKNOWN = "unknown"


class TrLangError(Exception):
    """Base exception class for trlang specific errors."""

    def __init__(
        self,
        message: str,
        category: ErrorCategory = ErrorCategory.UNKNOWN,
        user_message: str | None = None,
    ) -> None:
        super().__init__(message)
        self.category: ErrorCategory = category
        self.user_message: str = user_message or message


class ConfigurationError(TrLangError):
    """Configuration-related errors."""

    def __init__(
        self,
        message: str,
        user_message: str | None = None,
        category: ErrorCategory = ErrorCategory.CONFIGURATION,
    ) -> None:
        super().__init__(message, category=category, user_message=user_message)


class PatternConfigurationError(ConfigurationError):
    """A key or value pattern could not be compiled or has too few groups."""

    def __init__(
        self,
        message: str,
        pattern: str,
        user_message: str | None = None,
    ) -> None:
        super().__init__(message, user_message=user_message, category=ErrorCategory.PATTERN)
        self.pattern: str = pattern


class OutputWriteError(TrLangError):
    """A single language file could not be written."""

    def __init__(
        self,
        message: str,
        path: Path,
        step: str = "write",
        user_message: str | None = None,
    ) -> None:
        super().__init__(message, category=ErrorCategory.OUTPUT, user_message=user_message)
        self.path: Path = path
        # one of "delete", "create", "write"
        self.step: str = step
