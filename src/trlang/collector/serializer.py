"""Rendering of collected translations into ``.lang`` file text."""

from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime

HEADER_LINE = "# Auto-generated language file. Don't edit!"
LANGUAGE_LINE = "# The language is {language}"
TIMESTAMP_LINE = "# Last updated time is {timestamp}"


def format_timestamp(moment: datetime) -> str:
    """Format a time as ``yyyy-MM-dd_HH:mm:ss:SSS``."""
    return f"{moment:%Y-%m-%d_%H:%M:%S}:{moment.microsecond // 1000:03d}"


def render(
    mapping: Mapping[str, str],
    language_code: str | None,
    now: datetime | None = None,
) -> str:
    """
    Render one language's translations.

    Args:
        mapping: Ordered key -> value mapping
        language_code: Language named in the header; the line is left out when None
        now: Timestamp for the header, defaults to the current local time

    Returns:
        The file text, every line terminated by a newline
    """
    lines = [HEADER_LINE]
    if language_code is not None:
        lines.append(LANGUAGE_LINE.format(language=language_code))
    lines.append(TIMESTAMP_LINE.format(timestamp=format_timestamp(now or datetime.now())))
    lines.extend(f"{key}={value}" for key, value in mapping.items())
    return "".join(f"{line}\n" for line in lines)
