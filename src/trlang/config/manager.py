"""Configuration manager for trlang.

This module provides functionality for loading and validating YAML
configuration files with Pydantic model validation, and for merging command
line overrides on top of the loaded values.
"""

import logging
from pathlib import Path

import yaml

from ..config.schema import TrLangConfig

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = Path("trlang.yml")


class ConfigManager:
    """Loads trlang configuration files."""

    @staticmethod
    def load_config(config_path: Path) -> TrLangConfig:
        """
        Load and validate configuration from a YAML file.

        Args:
            config_path: Path to the YAML configuration file

        Returns:
            TrLangConfig: Validated configuration object

        Raises:
            FileNotFoundError: If the config file doesn't exist
            yaml.YAMLError: If the YAML syntax is invalid
            ValueError: If the document is not a mapping
            ValidationError: If the configuration fails Pydantic validation
        """
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        try:
            with config_path.open("r", encoding="utf-8") as f:
                raw_config_data: object = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise yaml.YAMLError(f"Invalid YAML syntax in {config_path}: {e}") from e

        if raw_config_data is None:
            config_data: dict[str, object] = {}
        elif isinstance(raw_config_data, dict):
            config_data = raw_config_data
        else:
            raise ValueError(
                f"Configuration file must contain a YAML dictionary, got {type(raw_config_data).__name__}"
            )

        config = TrLangConfig.model_validate(config_data)
        logger.debug(f"Loaded configuration from {config_path}")
        return config

    @staticmethod
    def load_or_default(config_path: Path | None) -> TrLangConfig:
        """
        Load the given configuration file, or the default one when present.

        An explicitly given path must exist. When no path is given,
        ``trlang.yml`` in the working directory is used if it exists, otherwise
        the built-in defaults apply.
        """
        if config_path is not None:
            return ConfigManager.load_config(config_path)
        if DEFAULT_CONFIG_FILE.is_file():
            return ConfigManager.load_config(DEFAULT_CONFIG_FILE)
        logger.debug("No configuration file found, using defaults")
        return TrLangConfig()

    @staticmethod
    def apply_overrides(config: TrLangConfig, overrides: dict[str, object]) -> TrLangConfig:
        """
        Return a copy of the configuration with command line values applied.

        Keys use dotted section paths such as ``"patterns.key"``; ``None``
        values are ignored. The result is validated again.
        """
        data = config.model_dump()
        for dotted_key, value in overrides.items():
            if value is None:
                continue
            match dotted_key.split("."):
                case [field]:
                    data[field] = value
                case [section, field]:
                    section_data = data.setdefault(section, {})
                    section_data[field] = value
                case _:
                    raise ValueError(f"Unsupported override key: {dotted_key}")
        return TrLangConfig.model_validate(data)
