"""Per-language text tables: identity seeding and the frozen lookup table."""
from __future__ import annotations

from collections.abc import Iterable, Mapping
from types import MappingProxyType

DEFAULT_LANGUAGE_CODE = "en-US"


def seed_language(keys: Iterable[str]) -> dict[str, str]:
    """Return a new mapping with every key's text set to the key's own name."""
    return {key: key for key in keys}


class TranslationTable:
    """Read-only mapping of language code -> {translation key: text}.

    Every language holds an entry for every known key. The default language
    is always present.
    """

    __slots__ = ("_languages", "_default_language")

    def __init__(
        self,
        languages: Mapping[str, Mapping[str, str]],
        default_language: str = DEFAULT_LANGUAGE_CODE,
    ) -> None:
        if default_language not in languages:
            raise ValueError(f"default language {default_language!r} missing from table")
        self._languages = MappingProxyType(
            {code: MappingProxyType(dict(texts)) for code, texts in languages.items()}
        )
        self._default_language = default_language

    @classmethod
    def identity(cls, keys: Iterable[str], default_language: str = DEFAULT_LANGUAGE_CODE) -> TranslationTable:
        """Minimal table: only the default language, every key mapped to itself."""
        return cls({default_language: seed_language(keys)}, default_language)

    @property
    def default_language(self) -> str:
        return self._default_language

    @property
    def languages(self) -> Mapping[str, Mapping[str, str]]:
        return self._languages

    def language_codes(self) -> frozenset[str]:
        return frozenset(self._languages)

    def resolve_language(self, language_code: str | None) -> str:
        """Return *language_code* if loaded, else the default language code."""
        if language_code in self._languages:
            return language_code  # type: ignore[return-value]
        return self._default_language

    def text(self, key: str, language_code: str | None) -> str:
        return self._languages[self.resolve_language(language_code)][key]

    def __contains__(self, language_code: object) -> bool:
        return language_code in self._languages

    def __len__(self) -> int:
        return len(self._languages)

    def __repr__(self) -> str:
        codes = ", ".join(self._languages)
        return f"TranslationTable(default={self._default_language!r}, languages=[{codes}])"
