"""Tests for language file persistence."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

import pytest

from trlang.collector import EventKind, ScanReporter
from trlang.utils.io.writer import (
    WriteResult,
    language_file_path,
    write_language_file,
    write_language_files,
)
from trlang.utils.core.exceptions import OutputWriteError

FILES = {
    "en_US": "# header\ngreeting=Hello\n",
    "zh_CN": "# header\ngreeting=你好\n",
}


class TestWriteResult:
    """Test the WriteResult class."""

    def test_empty_result(self) -> None:
        """Test empty write result."""
        result = WriteResult()

        assert result.success_count == 0
        assert result.failure_count == 0
        assert result.ok
        assert "0 written, 0 failed" in str(result)

    def test_result_with_failure(self) -> None:
        """Test result with a failed file."""
        result = WriteResult()
        result.written_files = [Path("en_US.lang")]
        result.failed_files = [
            (Path("zh_CN.lang"), OutputWriteError("boom", path=Path("zh_CN.lang")))
        ]

        assert not result.ok
        assert "1 written, 1 failed" in str(result)


class TestWriteLanguageFiles:
    """Test writing a set of language files."""

    def test_writes_every_language(self, tmp_path: Path, reporter: ScanReporter) -> None:
        """Test that each language lands in <language>.lang as UTF-8."""
        output_dir = tmp_path / "build" / "lang"

        result = write_language_files(output_dir, FILES, reporter=reporter)

        assert result.written_files == [output_dir / "en_US.lang", output_dir / "zh_CN.lang"]
        assert (output_dir / "zh_CN.lang").read_bytes() == FILES["zh_CN"].encode("utf-8")
        assert reporter.events == []

    def test_replaces_existing_file(self, tmp_path: Path) -> None:
        """Test that stale content is fully replaced."""
        stale = tmp_path / "en_US.lang"
        _ = stale.write_text("old=content\n" * 100, encoding="utf-8")

        _ = write_language_files(tmp_path, {"en_US": "new=content\n"})

        assert stale.read_text(encoding="utf-8") == "new=content\n"

    def test_newlines_not_translated(self, tmp_path: Path) -> None:
        """Test that files always use LF line endings."""
        _ = write_language_files(tmp_path, {"en_US": "a=1\nb=2\n"})

        assert b"\r" not in (tmp_path / "en_US.lang").read_bytes()

    def test_no_files_no_directory(self, tmp_path: Path) -> None:
        """Test that nothing is created when nothing was collected."""
        output_dir = tmp_path / "lang"

        result = write_language_files(output_dir, {})

        assert result.success_count == 0
        assert not output_dir.exists()

    def test_delete_failure_skips_language(
        self, tmp_path: Path, reporter: ScanReporter
    ) -> None:
        """Test that a file that cannot be deleted is skipped, others continue."""
        # a directory where the file should be cannot be unlinked
        (tmp_path / "en_US.lang").mkdir()

        result = write_language_files(tmp_path, FILES, reporter=reporter)

        assert result.written_files == [tmp_path / "zh_CN.lang"]
        assert result.failed_files[0][0] == tmp_path / "en_US.lang"
        assert [event.kind for event in reporter.events] == [EventKind.OUTPUT_DELETE_FAILED]
        assert reporter.events[0].language == "en_US"

    def test_create_failure_skips_language(
        self, tmp_path: Path, reporter: ScanReporter
    ) -> None:
        """Test that a creation failure is reported per language."""
        real_open = open

        def failing_open(file: object, mode: str = "r", *args: object, **kwargs: object) -> object:
            if str(file).endswith("en_US.lang") and "x" in mode:
                raise PermissionError("read-only file system")
            return real_open(file, mode, *args, **kwargs)  # pyright: ignore

        with patch("builtins.open", side_effect=failing_open):
            result = write_language_files(tmp_path, FILES, reporter=reporter)

        assert result.failure_count == 1
        assert result.written_files == [tmp_path / "zh_CN.lang"]
        assert [event.kind for event in reporter.events] == [EventKind.OUTPUT_CREATE_FAILED]

    def test_write_failure_skips_language(
        self, tmp_path: Path, reporter: ScanReporter
    ) -> None:
        """Test that a failing write is reported and the run continues."""
        real_open = open

        class FailingHandle:
            def __init__(self, handle: object) -> None:
                self._handle = handle

            def __enter__(self) -> "FailingHandle":
                return self

            def __exit__(self, *exc: object) -> None:
                self._handle.close()  # pyright: ignore

            def write(self, content: str) -> int:
                raise OSError("disk full")

        def opener(file: object, mode: str = "r", *args: object, **kwargs: object) -> object:
            handle = real_open(file, mode, *args, **kwargs)  # pyright: ignore
            if str(file).endswith("en_US.lang"):
                return FailingHandle(handle)
            return handle

        with patch("builtins.open", side_effect=opener):
            result = write_language_files(tmp_path, FILES, reporter=reporter)

        assert [event.kind for event in reporter.events] == [EventKind.OUTPUT_WRITE_FAILED]
        assert "disk full" in reporter.events[0].message
        assert result.written_files == [tmp_path / "zh_CN.lang"]


class TestWriteLanguageFile:
    """Test replacing a single file."""

    def test_error_carries_step_and_path(self, tmp_path: Path) -> None:
        """Test that the raised error names the failed step."""
        target = tmp_path / "en_US.lang"
        target.mkdir()

        with pytest.raises(OutputWriteError) as exc_info:
            write_language_file(target, "a=b\n")

        assert exc_info.value.step == "delete"
        assert exc_info.value.path == target

    def test_language_file_path(self) -> None:
        """Test the output file naming."""
        assert language_file_path(Path("out"), "zh_CN") == Path("out") / "zh_CN.lang"
