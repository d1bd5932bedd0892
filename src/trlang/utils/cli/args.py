"""
Command-line argument parsing for trlang.

This module parses the arguments of the ``trlang`` build step: the source
paths, the optional configuration file and overrides for every configuration
value.
"""

import argparse
from pathlib import Path
from typing import NamedTuple

from ..core.version import get_version


class PathValidationError(Exception):
    """Raised when a path validation fails."""

    pass


class ParsedArgs(NamedTuple):
    """Container for parsed command-line arguments."""

    sources: list[Path]
    config_file: Path | None
    output_dir: Path | None
    languages: list[str] | None
    key_pattern: str | None
    value_pattern: str | None
    include: list[str] | None
    exclude: list[str] | None
    encoding: str | None
    dry_run: bool
    verbose: bool


def validate_config_file_path(config_file_str: str) -> Path:
    """
    Validate configuration file path.

    Args:
        config_file_str: String path to configuration file

    Returns:
        Resolved Path object for the configuration file

    Raises:
        PathValidationError: If the configuration file path is invalid
    """
    try:
        # Expand tilde if present, then resolve
        config_file = Path(config_file_str).expanduser().resolve()
    except (OSError, ValueError) as e:
        raise PathValidationError(f"Invalid config file path: {e}") from e

    if not config_file.exists():
        raise PathValidationError(f"Config file does not exist: {config_file}")

    if not config_file.is_file():
        raise PathValidationError(f"Config file path exists but is not a file: {config_file}")

    return config_file


def validate_output_dir_path(path_str: str) -> Path:
    """
    Validate and resolve the output directory path.

    Args:
        path_str: String representation of the directory path

    Returns:
        Resolved absolute path to the directory

    Raises:
        PathValidationError: If the path is invalid
    """
    try:
        path = Path(path_str).expanduser().resolve()
    except (OSError, ValueError) as e:
        raise PathValidationError(f"Invalid output directory path: {e}") from e

    # If the path exists, it must be a directory
    if path.exists() and not path.is_dir():
        raise PathValidationError(f"Output path exists but is not a directory: {path}")

    return path


def create_argument_parser() -> argparse.ArgumentParser:
    """
    Create the argument parser for trlang.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        prog="trlang",
        description="Generate .lang files from localization comments in source code",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  trlang src/main/java
    Collect en_US texts and write lang/en_US.lang

  trlang src/main/java --language en_US --language zh_CN --output-dir build/lang
    Collect two languages into a custom directory

  trlang --config-file trlang.yml --dry-run
    Scan the configured sources and show what would be written
""",
    )

    _ = parser.add_argument(
        "sources",
        nargs="*",
        metavar="SOURCE",
        help="Source files or directories to scan (overrides sources.paths)",
    )

    _ = parser.add_argument(
        "--config-file",
        type=str,
        default=None,
        help="Path to the YAML configuration file (default: trlang.yml if present)",
        metavar="PATH",
    )

    _ = parser.add_argument(
        "--output-dir",
        type=str,
        default=None,
        help="Directory receiving the <language>.lang files (overrides output.directory)",
        metavar="PATH",
    )

    _ = parser.add_argument(
        "--language",
        action="append",
        default=None,
        dest="languages",
        help="Allowed language code, can be used multiple times (default: en_US)",
        metavar="CODE",
    )

    _ = parser.add_argument(
        "--key-pattern",
        default=None,
        help="Regular expression matching key lines (overrides patterns.key)",
        metavar="REGEX",
    )

    _ = parser.add_argument(
        "--value-pattern",
        default=None,
        help="Regular expression matching value lines (overrides patterns.value)",
        metavar="REGEX",
    )

    _ = parser.add_argument(
        "--include",
        action="append",
        default=None,
        help="Filename glob kept when scanning directories, can be used multiple times",
        metavar="GLOB",
    )

    _ = parser.add_argument(
        "--exclude",
        action="append",
        default=None,
        help="Directory name skipped when scanning directories, can be used multiple times",
        metavar="DIR",
    )

    _ = parser.add_argument(
        "--encoding",
        default=None,
        help="Text encoding of the source files (default: utf-8)",
    )

    _ = parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Show what would be written without creating files",
    )

    _ = parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )

    _ = parser.add_argument(
        "--version", action="version", version=f"%(prog)s {get_version()}"
    )

    return parser


def parse_arguments(args: list[str] | None = None) -> ParsedArgs:
    """
    Parse command-line arguments.

    Args:
        args: List of arguments to parse (defaults to sys.argv[1:])

    Returns:
        ParsedArgs containing validated and resolved paths

    Raises:
        SystemExit: If argument parsing fails or --help is requested
        PathValidationError: If path validation fails
    """
    parser = create_argument_parser()
    parsed = parser.parse_args(args)

    sources: list[str] = getattr(parsed, "sources", [])
    config_file_str: str | None = getattr(parsed, "config_file", None)
    output_dir_str: str | None = getattr(parsed, "output_dir", None)

    return ParsedArgs(
        sources=[Path(source) for source in sources],
        config_file=validate_config_file_path(config_file_str) if config_file_str else None,
        output_dir=validate_output_dir_path(output_dir_str) if output_dir_str else None,
        languages=getattr(parsed, "languages", None),
        key_pattern=getattr(parsed, "key_pattern", None),
        value_pattern=getattr(parsed, "value_pattern", None),
        include=getattr(parsed, "include", None),
        exclude=getattr(parsed, "exclude", None),
        encoding=getattr(parsed, "encoding", None),
        dry_run=getattr(parsed, "dry_run", False),
        verbose=getattr(parsed, "verbose", False),
    )
