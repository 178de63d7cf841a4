"""Export: one <code>.json locale file per language plus diagnostics.json."""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from perfmon_i18n.localization.translation import Translation

logger = logging.getLogger(__name__)

SCHEMA_VERSION = "1"
REPORT_NAME = "diagnostics"


def write_locale_files(translation: Translation, out_dir: Path) -> dict[str, Path]:
    """Write all locale files and the diagnostics report. Returns {name: path} dict.

    Language codes come straight from the resource header. A code that is not
    a plain file name inside *out_dir* (or would clash with the report) is
    skipped with a warning.
    """
    out_dir.mkdir(parents=True, exist_ok=True)
    paths: dict[str, Path] = {}

    for code, source in sorted(translation.locale_sources().items()):
        if not is_file_safe_code(code):
            logger.warning("Skipping language code [%s]: not usable as a locale file name", code)
            continue
        paths[code] = _write_json(out_dir / f"{code}.json", source.read_entries())

    paths[REPORT_NAME] = _write_json(out_dir / f"{REPORT_NAME}.json", _diagnostics_report(translation))
    logger.info("Wrote %d locale file(s) to %s", len(paths) - 1, out_dir)
    return paths


def is_file_safe_code(code: str) -> bool:
    """True if ``<code>.json`` names a plain file that cannot clash with the report."""
    if not code or code in (".", "..") or code.startswith("."):
        return False
    if "/" in code or "\\" in code or "\x00" in code:
        return False
    return code.casefold() != REPORT_NAME


def _diagnostics_report(translation: Translation) -> dict[str, Any]:
    return {
        "schema_version": SCHEMA_VERSION,
        "resource_digest": translation.resource_digest,
        "default_language": translation.default_language,
        "language_codes": sorted(translation.language_codes()),
        "diagnostics": [d.to_dict() for d in translation.diagnostics],
    }


def _write_json(path: Path, data: dict[str, Any]) -> Path:
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, ensure_ascii=False, indent=2)
    return path
