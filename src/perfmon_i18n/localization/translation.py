"""Translation service: load Translation.csv once, then answer read-only lookups.

Usage::

    from perfmon_i18n.localization.translation import load_translation

    translation = load_translation(active_language=lambda: manager.active_locale_id)
    label = translation.get("RowLabelFrameRate")            # active language
    tip = translation.get("ToolTipFrameRate", "fr-FR")       # explicit language
    for code, source in translation.locale_sources().items():
        manager.add_source(code, source)

The table never changes after loading, so a single instance can be shared by
any number of threads without locking.
"""
from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from pathlib import Path
from typing import Any

from perfmon_i18n.localization.builder import BuildResult, build_table
from perfmon_i18n.localization.diagnostics import Diagnostics
from perfmon_i18n.localization.keys import TRANSLATION_KEYS, TranslationKey
from perfmon_i18n.localization.locale_source import LocaleSource
from perfmon_i18n.localization.table import DEFAULT_LANGUAGE_CODE, TranslationTable
from perfmon_i18n.utils.config import translation_settings
from perfmon_i18n.utils.hash import text_digest

logger = logging.getLogger(__name__)

BUNDLED_RESOURCE = Path(__file__).parent / "Translation.csv"

ActiveLanguageProvider = Callable[[], str]


class TranslationResourceMissing(FileNotFoundError):
    """Raised when the translation file cannot be located."""


def read_resource(path: str | Path) -> str:
    """Read the whole translation file as text (UTF-8, optional BOM)."""
    path = Path(path)
    try:
        with open(path, "rb") as f:
            data = f.read()
    except FileNotFoundError as exc:
        raise TranslationResourceMissing(f"Translation file [{path}] does not exist.") from exc
    return data.decode("utf-8-sig")


class Translation:
    """Read-only lookups over a built :class:`TranslationTable`."""

    def __init__(
        self,
        table: TranslationTable,
        diagnostics: Diagnostics | None = None,
        keys: Sequence[TranslationKey] = TRANSLATION_KEYS,
        active_language: ActiveLanguageProvider | None = None,
        resource_digest: str = "",
    ) -> None:
        self._table = table
        self._diagnostics = diagnostics if diagnostics is not None else Diagnostics()
        self._keys = tuple(keys)
        self._active_language = active_language
        self.resource_digest = resource_digest

    @property
    def table(self) -> TranslationTable:
        return self._table

    @property
    def diagnostics(self) -> Diagnostics:
        return self._diagnostics

    @property
    def default_language(self) -> str:
        return self._table.default_language

    @property
    def keys(self) -> tuple[TranslationKey, ...]:
        return self._keys

    def active_language_code(self) -> str:
        if self._active_language is None:
            return self._table.default_language
        return self._active_language()

    def get(self, key: str, language_code: str | None = None) -> str:
        """Return text for *key* in *language_code* (default: the active language).

        A language code that was not loaded falls back to the default language.
        *key* must be one of the known keys.
        """
        if language_code is None:
            language_code = self.active_language_code()
        return self._table.text(key, language_code)

    def language_codes(self) -> frozenset[str]:
        return self._table.language_codes()

    def locale_sources(self) -> dict[str, LocaleSource]:
        """One locale source per loaded language code."""
        return {
            code: LocaleSource(code, self, self._keys)
            for code in self._table.languages
        }


def load_translation(
    resource: str | Path | None = None,
    keys: Sequence[TranslationKey] = TRANSLATION_KEYS,
    default_language: str = DEFAULT_LANGUAGE_CODE,
    active_language: ActiveLanguageProvider | None = None,
) -> Translation:
    """Read *resource* (default: bundled Translation.csv) and build the service.

    Never raises for resource problems: a missing or unreadable file yields a
    default-language-only table where every key's text is its own name.
    """
    path = Path(resource) if resource is not None else BUNDLED_RESOURCE
    names = [k.name for k in keys]
    diagnostics = Diagnostics()
    digest = ""

    try:
        text = read_resource(path)
    except TranslationResourceMissing as exc:
        diagnostics.error("resource-missing", str(exc))
        result = BuildResult(TranslationTable.identity(names, default_language), diagnostics)
    except (OSError, UnicodeDecodeError) as exc:
        diagnostics.exception("resource-unreadable", exc)
        result = BuildResult(TranslationTable.identity(names, default_language), diagnostics)
    else:
        digest = text_digest(text)
        result = build_table(names, text, default_language, diagnostics)

    logger.info(
        "Translation loaded from %s: %d language(s), %d key(s), %d warning(s), %d error(s) [%s]",
        path, len(result.table), len(names),
        len(diagnostics.warnings), len(diagnostics.errors), digest or "no digest",
    )
    diagnostics.log_to(logger)

    return Translation(
        result.table,
        diagnostics,
        keys=keys,
        active_language=active_language,
        resource_digest=digest,
    )


def load_translation_from_config(
    cfg: dict[str, Any],
    active_language: ActiveLanguageProvider | None = None,
) -> Translation:
    """Build the service from a loaded config (see utils.config)."""
    settings = translation_settings(cfg)
    if active_language is None and settings.active_language:
        configured = settings.active_language
        active_language = lambda: configured  # noqa: E731
    return load_translation(
        resource=settings.resource,
        default_language=settings.default_language,
        active_language=active_language,
    )
