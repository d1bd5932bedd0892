"""
Main entry point for trlang.

This module is the task driver around the collector: it sets up logging,
loads configuration, discovers source files, runs the collector and persists
the rendered language files.
"""

import logging
import sys
from dataclasses import dataclass, field
from datetime import datetime

import yaml
from pydantic import ValidationError

from .collector import LocalizationTextCollector, PatternConfig, ScanEvent, ScanReporter
from .config.manager import ConfigManager
from .config.schema import TrLangConfig
from .utils.cli.args import ParsedArgs, PathValidationError, parse_arguments
from .utils.core.exceptions import ConfigurationError
from .utils.io.discovery import discover_source_files
from .utils.io.writer import WriteResult, language_file_path, write_language_files

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_WRITE_FAILURES = 1
EXIT_CONFIGURATION_ERROR = 2


@dataclass
class GenerationResult:
    """Outcome of one generation run."""

    files: dict[str, str]
    events: list[ScanEvent] = field(default_factory=list)
    write_result: WriteResult | None = None

    @property
    def ok(self) -> bool:
        return self.write_result is None or self.write_result.ok


def setup_logging(verbose: bool = False) -> None:
    """
    Configure logging for the command line run.

    Args:
        verbose: Enable verbose logging
    """
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


def generate_language_files(
    config: TrLangConfig,
    dry_run: bool = False,
    reporter: ScanReporter | None = None,
    now: datetime | None = None,
    patterns: PatternConfig | None = None,
) -> GenerationResult:
    """
    Run the whole generation: discover, scan, render and write.

    Args:
        config: Validated configuration
        dry_run: Render but do not write any file
        reporter: Receives all warnings of the run
        now: Timestamp for the language file headers
        patterns: Prepared matchers, built from the configuration when omitted

    Returns:
        GenerationResult with the rendered files and the reported events
    """
    reporter = reporter or ScanReporter()

    if config.languages is not None and not config.languages:
        logger.warning("No language codes are allowed, nothing will be collected")

    collector = LocalizationTextCollector(
        patterns=patterns
        or PatternConfig.from_strings(config.patterns.key, config.patterns.value),
        allowed_language_codes=config.languages,
        reporter=reporter,
        encoding=config.sources.encoding,
    )
    logger.debug("Patterns are prepared, collecting localization data")

    source_files = discover_source_files(
        config.sources.paths,
        include=config.sources.include,
        exclude_dirs=config.sources.exclude_dirs,
    )
    collector.load_source_files(source_files)

    logger.debug("Source files are collected, exporting language files")
    files = collector.build_language_files(now=now)
    result = GenerationResult(files=files, events=reporter.events)

    output_dir = config.output.directory
    if dry_run:
        for language in files:
            entries = len(collector.mapping_for(language))
            logger.info(
                f"DRY RUN: Would write {language_file_path(output_dir, language)} ({entries} entries)"
            )
        return result

    result.write_result = write_language_files(output_dir, files, reporter=reporter)
    return result


def build_config(args: ParsedArgs) -> TrLangConfig:
    """Load the configuration file and apply the command line overrides."""
    config = ConfigManager.load_or_default(args.config_file)
    return ConfigManager.apply_overrides(
        config,
        {
            "sources.paths": args.sources or None,
            "sources.include": args.include,
            "sources.exclude_dirs": args.exclude,
            "sources.encoding": args.encoding,
            "patterns.key": args.key_pattern,
            "patterns.value": args.value_pattern,
            "languages": args.languages,
            "output.directory": args.output_dir,
        },
    )


def main(argv: list[str] | None = None) -> int:
    """
    Command line entry point.

    Returns:
        Exit code (0 for success, 1 when language files failed to write,
        2 for configuration errors)
    """
    try:
        args = parse_arguments(argv)
    except PathValidationError as e:
        setup_logging()
        logger.error(str(e))
        return EXIT_CONFIGURATION_ERROR

    setup_logging(args.verbose)

    try:
        config = build_config(args)
        patterns = PatternConfig.from_strings(config.patterns.key, config.patterns.value)
    except ConfigurationError as e:
        logger.error(f"Invalid configuration ({e.category.value}): {e.user_message}")
        return EXIT_CONFIGURATION_ERROR
    except (FileNotFoundError, yaml.YAMLError, ValidationError, ValueError) as e:
        logger.error(f"Invalid configuration: {e}")
        return EXIT_CONFIGURATION_ERROR

    if not config.sources.paths:
        logger.warning("No source paths given, nothing to scan")

    result = generate_language_files(config, dry_run=args.dry_run, patterns=patterns)

    logger.info(
        f"Done. Generated {len(result.files)} language file(s) with {len(result.events)} warning(s)"
    )
    return EXIT_OK if result.ok else EXIT_WRITE_FAILURES


if __name__ == "__main__":
    raise SystemExit(main())
