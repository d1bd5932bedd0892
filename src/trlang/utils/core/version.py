"""
Version utilities for trlang.

This module provides centralized version information by reading the installed
distribution metadata, with a fallback to pyproject.toml for source checkouts.
"""

import logging
import tomllib
from functools import lru_cache
from pathlib import Path

logger = logging.getLogger(__name__)

DISTRIBUTION_NAME = "trlang"


@lru_cache(maxsize=1)
def get_project_version() -> str:
    """
    Get the project version.

    This function uses caching to avoid repeatedly reading metadata
    and provides a fallback for running from a source checkout.

    Returns:
        Version string (e.g., "1.0.0")

    Raises:
        RuntimeError: If version cannot be determined from any source
    """
    # Try importlib.metadata first (standard approach for installed packages)
    try:
        from importlib.metadata import PackageNotFoundError, version

        return version(DISTRIBUTION_NAME)
    except PackageNotFoundError:
        # Package might not be installed, fallback to pyproject.toml
        logger.debug("importlib.metadata failed, falling back to pyproject.toml")

    return _read_version_from_pyproject()


def _read_version_from_pyproject() -> str:
    """Read version using tomllib."""
    pyproject_path = Path("pyproject.toml")

    if not pyproject_path.exists():
        # src/trlang/utils/core -> project root
        pyproject_path = Path(__file__).parents[4] / "pyproject.toml"

    if not pyproject_path.exists():
        raise RuntimeError("pyproject.toml not found")

    try:
        with open(pyproject_path, "rb") as f:
            data = tomllib.load(f)

        project_data = data.get("project")
        if not isinstance(project_data, dict):
            raise KeyError("project section not found or invalid")

        version = project_data.get("version")
        if not isinstance(version, str):
            raise KeyError("version field not found or not a string")

        return version
    except (KeyError, OSError, tomllib.TOMLDecodeError) as e:
        raise RuntimeError(f"Failed to read version from pyproject.toml: {e}") from e


def get_version() -> str:
    """Get the project version with error handling."""
    try:
        return get_project_version()
    except RuntimeError:
        logger.warning("Could not determine project version, using fallback")
        return "0.0.0"
