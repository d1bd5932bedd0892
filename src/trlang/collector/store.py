"""Accumulation store: language code -> translation key -> translation text."""

from __future__ import annotations

from pathlib import Path

from .reporter import EventKind, ScanEvent, ScanReporter


class LocalizationStore:
    """
    Ordered per-language translation mappings.

    Languages and keys keep their first-seen order. Re-adding a key replaces
    its value in place and reports a duplicate-key overwrite.
    """

    def __init__(self, reporter: ScanReporter | None = None) -> None:
        self._languages: dict[str, dict[str, str]] = {}
        self._reporter: ScanReporter = reporter or ScanReporter()

    def mapping_for(self, language: str) -> dict[str, str]:
        """
        Get the mapping for a language, creating it on first access.

        Args:
            language: The language code

        Returns:
            The live key -> value mapping for the language
        """
        if language not in self._languages:
            self._languages[language] = {}
        return self._languages[language]

    def add(
        self,
        language: str,
        key: str,
        value: str,
        source: Path | None = None,
        line_number: int | None = None,
    ) -> None:
        mapping = self.mapping_for(language)
        if key in mapping:
            old_value = mapping[key]
            self._reporter.report(
                ScanEvent(
                    kind=EventKind.DUPLICATE_KEY_OVERWRITE,
                    message=(
                        f'Duplicated key {key} in language {language}, '
                        f'old "{old_value}" new "{value}"'
                    ),
                    source=source,
                    line_number=line_number,
                    language=language,
                    key=key,
                    old_value=old_value,
                    new_value=value,
                )
            )
        mapping[key] = value

    def get(self, language: str, key: str) -> str | None:
        mapping = self._languages.get(language)
        if mapping is None:
            return None
        return mapping.get(key)

    def languages(self) -> list[str]:
        return list(self._languages)

    def items(self) -> list[tuple[str, dict[str, str]]]:
        """Return ``(language, mapping)`` pairs in first-seen language order."""
        return [(language, dict(mapping)) for language, mapping in self._languages.items()]

    def __len__(self) -> int:
        return sum(len(mapping) for mapping in self._languages.values())

    def __contains__(self, language: object) -> bool:
        return language in self._languages
