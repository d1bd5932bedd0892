"""Configuration schema for trlang using nested Pydantic models."""

from pathlib import Path
from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..collector.patterns import DEFAULT_KEY_PATTERN, DEFAULT_VALUE_PATTERN, compile_pattern
from ..utils.core.exceptions import PatternConfigurationError

DEFAULT_EXCLUDED_DIRS: tuple[str, ...] = (
    ".git",
    ".gradle",
    ".hg",
    ".idea",
    ".svn",
    ".venv",
    "__pycache__",
    "build",
    "node_modules",
    "out",
)


class SourcesConfig(BaseModel):
    """Source files to scan."""

    paths: list[Path] = Field(
        default_factory=list,
        description="Files or directories to scan, in order",
    )
    include: list[str] = Field(
        default_factory=list,
        description="Filename globs kept when expanding directories (empty keeps all files)",
    )
    exclude_dirs: list[str] = Field(
        default_factory=lambda: list(DEFAULT_EXCLUDED_DIRS),
        description="Directory names skipped when expanding directories",
    )
    encoding: str = Field(
        default="utf-8",
        description="Text encoding of the source files",
        min_length=1,
    )


class PatternsConfig(BaseModel):
    """Key and value line patterns."""

    key: str = Field(
        default=DEFAULT_KEY_PATTERN,
        description="Regular expression matching a key line, capturing the key",
        min_length=1,
    )
    value: str = Field(
        default=DEFAULT_VALUE_PATTERN,
        description="Regular expression matching a value line, capturing language and text",
        min_length=1,
    )

    @field_validator("key")
    @classmethod
    def validate_key_pattern(cls, v: str) -> str:
        """Reject key patterns that do not compile or capture nothing."""
        try:
            _ = compile_pattern(v, 1)
        except PatternConfigurationError as e:
            raise ValueError(e.user_message) from e
        return v

    @field_validator("value")
    @classmethod
    def validate_value_pattern(cls, v: str) -> str:
        """Reject value patterns that do not compile or capture fewer than two groups."""
        try:
            _ = compile_pattern(v, 2)
        except PatternConfigurationError as e:
            raise ValueError(e.user_message) from e
        return v


class OutputConfig(BaseModel):
    """Where language files are written."""

    directory: Path = Field(
        default=Path("lang"),
        description="Output directory for <language>.lang files",
    )


class TrLangConfig(BaseModel):
    """
    Configuration model for trlang.

    Every section is optional; an empty configuration file collects ``en_US``
    texts with the default patterns.
    """

    sources: SourcesConfig = Field(default_factory=SourcesConfig)
    patterns: PatternsConfig = Field(default_factory=PatternsConfig)
    languages: list[str] | None = Field(
        default=None,
        description="Allowed language codes; null means en_US only",
    )
    output: OutputConfig = Field(default_factory=OutputConfig)

    model_config: ClassVar[ConfigDict] = ConfigDict(
        str_strip_whitespace=True,
        validate_assignment=True,
        extra="forbid",
    )

    @field_validator("languages")
    @classmethod
    def validate_languages(cls, v: list[str] | None) -> list[str] | None:
        """Language codes are used as file names and must be single tokens."""
        if v is None:
            return v
        for code in v:
            if not code or any(ch.isspace() for ch in code):
                raise ValueError(f"Invalid language code: {code!r}")
        return list(dict.fromkeys(v))
