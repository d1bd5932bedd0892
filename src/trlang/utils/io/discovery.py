"""
Source file discovery.

Expands the configured source paths into the ordered list of files handed to
the collector. Files are passed through untouched, even when they do not exist,
so the collector can report them; directories are walked recursively.
"""

from __future__ import annotations

import fnmatch
import logging
from collections.abc import Iterable
from pathlib import Path

logger = logging.getLogger(__name__)


def _is_included(path: Path, include: list[str]) -> bool:
    if not include:
        return True
    return any(fnmatch.fnmatch(path.name, pattern) for pattern in include)


def _is_excluded(path: Path, root: Path, exclude_dirs: set[str]) -> bool:
    relative_parts = path.relative_to(root).parts[:-1]
    return any(part in exclude_dirs for part in relative_parts)


def expand_directory(
    directory: Path,
    include: list[str] | None = None,
    exclude_dirs: set[str] | None = None,
) -> list[Path]:
    """
    List the regular files under a directory.

    Args:
        directory: Root directory to walk
        include: Filename globs to keep (empty or None keeps every file)
        exclude_dirs: Directory names to skip

    Returns:
        Sorted list of matching files
    """
    include = include or []
    exclude_dirs = exclude_dirs or set()

    files: list[Path] = []
    for candidate in sorted(directory.rglob("*")):
        if not candidate.is_file():
            continue
        if _is_excluded(candidate, directory, exclude_dirs):
            continue
        if _is_included(candidate, include):
            files.append(candidate)
    return files


def discover_source_files(
    paths: Iterable[Path],
    include: list[str] | None = None,
    exclude_dirs: Iterable[str] | None = None,
) -> list[Path]:
    """
    Resolve source paths into an ordered, duplicate free list of files.

    Args:
        paths: Files or directories, in scan order
        include: Filename globs applied to directory contents
        exclude_dirs: Directory names skipped inside directories

    Returns:
        Files to scan
    """
    excluded = set(exclude_dirs or ())
    seen: set[Path] = set()
    result: list[Path] = []

    for path in paths:
        candidates = expand_directory(path, include, excluded) if path.is_dir() else [path]
        for candidate in candidates:
            if candidate in seen:
                continue
            seen.add(candidate)
            result.append(candidate)

    logger.info(f"Discovered {len(result)} source file(s)")
    return result
