"""Translation table builder: header parsing, row resolution, validation.

File layout
-----------
Line 1:     ,<code 1>,<code 2>,...,<code n>
Line 2..m:  <key>,<text 1>,<text 2>,...,<text n>

Resolution rules (per row, per header column, top to bottom)
------------------------------------------------------------
- blank text, default language     -> warning, the key's own name
- blank text, other language       -> text currently stored for the default language
- ``@@other``                      -> text of ``other`` in the same language, only if an
                                      earlier row stored it; otherwise warning + literal text
- anything else                    -> stored verbatim

Only a missing/blank/comment header line is fatal. Everything else is a
warning and the build continues.
"""
from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from dataclasses import dataclass

from perfmon_i18n.localization.diagnostics import Diagnostics
from perfmon_i18n.localization.table import DEFAULT_LANGUAGE_CODE, TranslationTable, seed_language
from perfmon_i18n.localization.tokenizer import LineCursor, read_value

logger = logging.getLogger(__name__)

ALIAS_MARKER = "@@"
COMMENT_MARKER = "#"

_LINE_BREAK = re.compile(r"\r?\n")


@dataclass(frozen=True)
class BuildResult:
    table: TranslationTable
    diagnostics: Diagnostics
    columns: tuple[str, ...] = ()


def split_lines(resource_text: str) -> list[str]:
    """Split on LF / CRLF only; other Unicode separators stay inside the text."""
    return _LINE_BREAK.split(resource_text)


def build_table(
    keys: Iterable[str],
    resource_text: str,
    default_language: str = DEFAULT_LANGUAGE_CODE,
    diagnostics: Diagnostics | None = None,
) -> BuildResult:
    """Build the translation table for *keys* from the raw file text.

    Never raises: an unexpected failure is recorded as an ``unexpected``
    error diagnostic and the table built so far is returned.
    """
    if diagnostics is None:
        diagnostics = Diagnostics()
    builder = _TableBuilder(keys, default_language, diagnostics)
    try:
        builder.run(resource_text)
    except Exception as exc:
        diagnostics.exception("unexpected", exc, line=builder.line_no or None)
    return builder.result()


class _TableBuilder:
    def __init__(self, keys: Iterable[str], default_language: str, diagnostics: Diagnostics) -> None:
        self.keys = tuple(keys)
        self.known_keys = frozenset(self.keys)
        self.default_language = default_language
        self.diagnostics = diagnostics
        self.languages: dict[str, dict[str, str]] = {default_language: seed_language(self.keys)}
        # language -> keys stored by a row; identity seeds do not count
        self.resolved: dict[str, set[str]] = {default_language: set()}
        self.columns: list[str] = []
        self.line_no = 0

    def result(self) -> BuildResult:
        return BuildResult(
            table=TranslationTable(self.languages, self.default_language),
            diagnostics=self.diagnostics,
            columns=tuple(self.columns),
        )

    # ------------------------------------------------------------------
    # Driver
    # ------------------------------------------------------------------

    def run(self, resource_text: str) -> None:
        lines = split_lines(resource_text)
        if not lines[0].strip() or lines[0].startswith(COMMENT_MARKER):
            self.diagnostics.error(
                "bad-header",
                "Translation file first line is blank or comment. "
                "Expecting language codes on the first line.",
                line=1,
            )
            return

        self.line_no = 1
        self._read_header(lines[0])

        key_counts = dict.fromkeys(self.keys, 0)
        for line_no, line in enumerate(lines[1:], start=2):
            self.line_no = line_no
            if line.strip():
                self._read_row(line, key_counts)

        for key, count in key_counts.items():
            if count != 1:
                self.diagnostics.warning(
                    "key-count",
                    f"Translation file defines translation key [{key}] {count} times.  Expecting 1 time.",
                )

        logger.debug(
            "Built translation table: %d language(s), %d key(s), %d diagnostic(s)",
            len(self.languages), len(self.keys), len(self.diagnostics),
        )

    # ------------------------------------------------------------------
    # Header
    # ------------------------------------------------------------------

    def _read_header(self, line: str) -> None:
        cursor = LineCursor(line)
        read_value(cursor)  # leading placeholder cell

        counts: dict[str, int] = {self.default_language: 0}
        code = read_value(cursor)
        while code:
            if not self.columns and code != self.default_language:
                self.diagnostics.warning(
                    "default-not-first",
                    f"Translation file must have default language code "
                    f"[{self.default_language}] defined first.",
                    line=1,
                )
            counts[code] = counts.get(code, 0) + 1
            if code not in self.languages:
                self.languages[code] = seed_language(self.keys)
                self.resolved[code] = set()
            self.columns.append(code)
            code = read_value(cursor)

        for code, count in counts.items():
            if count != 1:
                self.diagnostics.warning(
                    "language-count",
                    f"Translation file defines language code [{code}] {count} times.  Expecting 1 time.",
                    line=1,
                )

    # ------------------------------------------------------------------
    # Rows
    # ------------------------------------------------------------------

    def _read_row(self, line: str, key_counts: dict[str, int]) -> None:
        cursor = LineCursor(line)
        key = read_value(cursor)
        if not key or key.startswith(COMMENT_MARKER):
            return
        if key not in self.known_keys:
            self.diagnostics.warning(
                "unknown-key",
                f"Translation file contains translation key [{key}], "
                f"which does not have a corresponding key in the program.",
                line=self.line_no,
            )
            return

        key_counts[key] += 1
        for code in self.columns:
            text = self._resolve(key, code, read_value(cursor))
            self.languages[code][key] = text
            self.resolved[code].add(key)

    def _resolve(self, key: str, code: str, text: str) -> str:
        if not text:
            if code == self.default_language:
                self.diagnostics.warning(
                    "blank-default",
                    f"Translation for key [{key}] must be defined for default "
                    f"language code [{self.default_language}].",
                    line=self.line_no,
                )
                return key
            # Depends on the default column being earlier in the header.
            return self.languages[self.default_language][key]

        if text.startswith(ALIAS_MARKER):
            alias = text[len(ALIAS_MARKER):]
            if not alias or alias not in self.resolved[code]:
                self.diagnostics.warning(
                    "bad-alias",
                    f"Translation for key [{key}] for language [{code}] has invalid "
                    f"@@ reference to key [{alias}].",
                    line=self.line_no,
                )
                return text
            return self.languages[code][alias]

        return text
