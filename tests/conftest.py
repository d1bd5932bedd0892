"""
Global test configuration fixtures for trlang tests.

Provides fresh reporters, stores and collectors for every test so that no
collected state or recorded warning leaks between tests.
"""

from __future__ import annotations

import pytest

from trlang.collector import (
    LocalizationStore,
    LocalizationTextCollector,
    PatternConfig,
    ScanReporter,
)


@pytest.fixture
def reporter() -> ScanReporter:
    """Provide a fresh ScanReporter instance for each test."""
    return ScanReporter()


@pytest.fixture
def store(reporter: ScanReporter) -> LocalizationStore:
    """Provide an empty store reporting into the test's reporter."""
    return LocalizationStore(reporter)


@pytest.fixture
def patterns() -> PatternConfig:
    """Provide the default key and value matchers."""
    return PatternConfig()


@pytest.fixture
def collector(reporter: ScanReporter) -> LocalizationTextCollector:
    """Provide a collector allowing en_US and zh_CN."""
    return LocalizationTextCollector(
        allowed_language_codes=["en_US", "zh_CN"], reporter=reporter
    )
