"""Locale source: the (locale id, text) entries of one language, ready for registration."""
from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from typing import TYPE_CHECKING

from perfmon_i18n.localization.keys import TRANSLATION_KEYS, TranslationKey

if TYPE_CHECKING:
    from perfmon_i18n.localization.translation import Translation

logger = logging.getLogger(__name__)


class LocaleSource:
    """Entries for one language code, resolved once at construction."""

    def __init__(
        self,
        language_code: str,
        translation: Translation,
        keys: Iterable[TranslationKey] = TRANSLATION_KEYS,
    ) -> None:
        logger.debug("LocaleSource language_code=[%s]", language_code)
        self.language_code = language_code
        self._entries: dict[str, str] = {
            key.locale_id: translation.get(key.name, language_code) for key in keys
        }

    def read_entries(self) -> dict[str, str]:
        return dict(self._entries)

    def unload(self) -> None:
        # entries are plain strings; nothing to release
        pass

    def __iter__(self) -> Iterator[tuple[str, str]]:
        return iter(self._entries.items())

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"LocaleSource({self.language_code!r}, entries={len(self._entries)})"
