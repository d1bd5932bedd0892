"""
Language file persistence.

Each rendered language is written to ``<output_dir>/<language>.lang``. An
existing file is deleted first and the new one is created exclusively, so a
file that cannot be replaced is reported instead of being partially written.
A failure only skips that language.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import override

from ...collector.reporter import EventKind, ScanEvent, ScanReporter
from ..core.exceptions import OutputWriteError

logger = logging.getLogger(__name__)

LANGUAGE_FILE_SUFFIX = ".lang"

STEP_EVENT_KINDS: dict[str, EventKind] = {
    "delete": EventKind.OUTPUT_DELETE_FAILED,
    "create": EventKind.OUTPUT_CREATE_FAILED,
    "write": EventKind.OUTPUT_WRITE_FAILED,
}


class WriteResult:
    """Result of writing a set of language files."""

    def __init__(self) -> None:
        self.written_files: list[Path] = []
        self.failed_files: list[tuple[Path, OutputWriteError]] = []

    @property
    def success_count(self) -> int:
        """Number of language files written."""
        return len(self.written_files)

    @property
    def failure_count(self) -> int:
        """Number of language files skipped because of an error."""
        return len(self.failed_files)

    @property
    def ok(self) -> bool:
        return not self.failed_files

    @override
    def __str__(self) -> str:
        return (
            f"Write Results: "
            f"{self.success_count} written, "
            f"{self.failure_count} failed"
        )


def language_file_path(output_dir: Path, language: str) -> Path:
    return output_dir / f"{language}{LANGUAGE_FILE_SUFFIX}"


def write_language_file(path: Path, content: str) -> None:
    """
    Replace a single language file with UTF-8 text.

    Raises:
        OutputWriteError: If deleting, creating or writing the file fails
    """
    if path.exists():
        try:
            path.unlink()
        except OSError as e:
            raise OutputWriteError(
                f"Failed to delete existing language file: {path}, skipped",
                path=path,
                step="delete",
            ) from e

    try:
        handle = open(path, "x", encoding="utf-8", newline="")
    except OSError as e:
        raise OutputWriteError(
            f"Failed to create new language file: {path}, skipped", path=path, step="create"
        ) from e

    try:
        with handle:
            _ = handle.write(content)
    except OSError as e:
        raise OutputWriteError(
            f"Failed to export language file: {path.name}: {e}", path=path, step="write"
        ) from e


def write_language_files(
    output_dir: Path,
    files: Mapping[str, str],
    reporter: ScanReporter | None = None,
) -> WriteResult:
    """
    Write every rendered language file into the output directory.

    Args:
        output_dir: Directory receiving the ``.lang`` files, created if missing
        files: Language code -> file text
        reporter: Receives one event per failed language

    Returns:
        WriteResult with details of the operation
    """
    reporter = reporter or ScanReporter()
    result = WriteResult()

    if files:
        try:
            _ = output_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            # every file below will then fail to be created and be reported
            logger.warning(f"Failed to create output directory {output_dir}: {e}")

    for language, content in files.items():
        path = language_file_path(output_dir, language)
        try:
            write_language_file(path, content)
        except OutputWriteError as e:
            reporter.report(
                ScanEvent(
                    kind=STEP_EVENT_KINDS.get(e.step, EventKind.OUTPUT_WRITE_FAILED),
                    message=e.user_message,
                    source=path,
                    language=language,
                )
            )
            result.failed_files.append((path, e))
            continue

        logger.debug(f"Wrote language file: {path}")
        result.written_files.append(path)

    logger.info(str(result))
    return result
