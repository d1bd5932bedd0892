"""
Test helper utilities for trlang tests.

This module provides reusable utility functions and context managers for
common testing patterns: writing source files with localization comments and
temporary YAML configuration files.
"""

from __future__ import annotations

import tempfile
from collections.abc import Generator
from contextlib import contextmanager
from datetime import datetime
from pathlib import Path

import yaml

__all__ = [
    "FIXED_NOW",
    "create_source_file",
    "create_temp_config_file",
    "entry_lines",
]

# 2024-05-01 12:34:56.789 local time
FIXED_NOW = datetime(2024, 5, 1, 12, 34, 56, 789000)


def create_source_file(directory: Path, name: str, lines: list[str]) -> Path:
    """
    Write a UTF-8 source file made of the given lines.

    Args:
        directory: Directory receiving the file (created if missing)
        name: File name, may contain sub directories
        lines: File lines without terminators

    Returns:
        Path: The created file
    """
    path = directory / name
    path.parent.mkdir(parents=True, exist_ok=True)
    _ = path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


def entry_lines(content: str) -> list[str]:
    """Return the ``key=value`` lines of a rendered language file."""
    return [line for line in content.splitlines() if not line.startswith("#")]


@contextmanager
def create_temp_config_file(
    config_data: dict[str, object] | None = None,
    *,
    suffix: str = ".yml",
    encoding: str = "utf-8",
) -> Generator[Path, None, None]:
    """
    Create a temporary configuration file with YAML content.

    Args:
        config_data: Dictionary of configuration data to write to file.
                    If None, writes an empty mapping.
        suffix: File suffix for the temporary file (default: ".yml")
        encoding: File encoding (default: "utf-8")

    Yields:
        Path: Path to the created temporary configuration file
    """
    with tempfile.NamedTemporaryFile(
        mode="w",
        suffix=suffix,
        encoding=encoding,
        delete=False,
    ) as temp_file:
        yaml.safe_dump(config_data or {}, temp_file, default_flow_style=False, allow_unicode=True)
        temp_path = Path(temp_file.name)

    try:
        yield temp_path
    finally:
        temp_path.unlink(missing_ok=True)
