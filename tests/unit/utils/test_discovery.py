"""Tests for source file discovery."""

from __future__ import annotations

from pathlib import Path

from tests.utils.test_helpers import create_source_file
from trlang.utils.io.discovery import discover_source_files, expand_directory


class TestExpandDirectory:
    """Test walking a source directory."""

    def test_recursive_and_sorted(self, tmp_path: Path) -> None:
        """Test that nested files are found in sorted order."""
        b = create_source_file(tmp_path, "b/B.java", [])
        a = create_source_file(tmp_path, "a/A.java", [])
        root = create_source_file(tmp_path, "Root.java", [])

        assert expand_directory(tmp_path) == sorted([a, b, root])

    def test_include_globs(self, tmp_path: Path) -> None:
        """Test filtering by file name."""
        java = create_source_file(tmp_path, "A.java", [])
        kotlin = create_source_file(tmp_path, "B.kt", [])
        _ = create_source_file(tmp_path, "notes.txt", [])

        assert expand_directory(tmp_path, include=["*.java", "*.kt"]) == [java, kotlin]

    def test_excluded_directories(self, tmp_path: Path) -> None:
        """Test that excluded directory names are skipped at any depth."""
        kept = create_source_file(tmp_path, "src/A.java", [])
        _ = create_source_file(tmp_path, "build/Generated.java", [])
        _ = create_source_file(tmp_path, "src/build/Nested.java", [])

        assert expand_directory(tmp_path, exclude_dirs={"build"}) == [kept]

    def test_exclusion_is_relative_to_root(self, tmp_path: Path) -> None:
        """Test that the root itself may sit inside an excluded name."""
        root = tmp_path / "build"
        kept = create_source_file(root, "A.java", [])

        assert expand_directory(root, exclude_dirs={"build"}) == [kept]


class TestDiscoverSourceFiles:
    """Test resolving the configured source paths."""

    def test_files_kept_in_given_order(self, tmp_path: Path) -> None:
        """Test that explicit files keep their order."""
        second = create_source_file(tmp_path, "Z.java", [])
        first = create_source_file(tmp_path, "A.java", [])

        assert discover_source_files([second, first]) == [second, first]

    def test_missing_file_passed_through(self, tmp_path: Path) -> None:
        """Test that missing files reach the collector to be reported."""
        missing = tmp_path / "Missing.java"

        assert discover_source_files([missing]) == [missing]

    def test_include_does_not_filter_explicit_files(self, tmp_path: Path) -> None:
        """Test that globs only apply to directory contents."""
        notes = create_source_file(tmp_path, "notes.txt", [])

        assert discover_source_files([notes], include=["*.java"]) == [notes]

    def test_duplicates_dropped(self, tmp_path: Path) -> None:
        """Test that a file named directly and via its directory is scanned once."""
        source = create_source_file(tmp_path, "src/A.java", [])
        other = create_source_file(tmp_path, "src/B.java", [])

        assert discover_source_files([source, tmp_path / "src"]) == [source, other]
