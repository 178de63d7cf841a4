"""Config loader: reads config/config.yaml into a dict with defaults filled in."""
from __future__ import annotations

import copy
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

_DEFAULT_CONFIG = Path(__file__).parent.parent.parent.parent / "config" / "config.yaml"

CONFIG_ENV_VAR = "PERFMON_I18N_CONFIG"

DEFAULT_CONFIG: dict[str, Any] = {
    "translation": {
        "resource": None,
        "default_language": "en-US",
        "active_language": None,
    },
    "logging": {
        "level": "INFO",
    },
}


@dataclass(frozen=True)
class TranslationSettings:
    resource: Path | None
    default_language: str
    active_language: str | None


def load_config(path: str | Path | None = None) -> dict[str, Any]:
    """Load config YAML. Falls back to PERFMON_I18N_CONFIG, then the default path.

    An explicit path (argument or env var) must exist. A missing default file
    just means built-in defaults. A relative ``translation.resource`` is taken
    relative to the directory of the config file that names it.
    """
    if path is None:
        path = os.environ.get(CONFIG_ENV_VAR)
    if path is None:
        if not _DEFAULT_CONFIG.exists():
            return copy.deepcopy(DEFAULT_CONFIG)
        path = _DEFAULT_CONFIG
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config not found: {path}")
    with open(path, encoding="utf-8") as f:
        cfg = yaml.safe_load(f)
    merged = _merge_defaults(cfg or {})
    _anchor_resource(merged, path.parent)
    return merged


def _merge_defaults(cfg: dict[str, Any]) -> dict[str, Any]:
    merged = copy.deepcopy(DEFAULT_CONFIG)
    for section, values in cfg.items():
        if values is None:
            continue
        if isinstance(values, dict) and isinstance(merged.get(section), dict):
            merged[section].update(values)
        else:
            merged[section] = values
    return merged


def _anchor_resource(cfg: dict[str, Any], base_dir: Path) -> None:
    section = cfg.get("translation")
    if not isinstance(section, dict) or not section.get("resource"):
        return
    resource = Path(section["resource"])
    if not resource.is_absolute():
        section["resource"] = str(base_dir / resource)


def translation_settings(cfg: dict[str, Any]) -> TranslationSettings:
    """Normalise the ``translation`` section of a loaded config."""
    section = cfg.get("translation") or {}
    resource = section.get("resource")
    default_language = section.get("default_language") or DEFAULT_CONFIG["translation"]["default_language"]
    return TranslationSettings(
        resource=Path(resource) if resource else None,
        default_language=str(default_language),
        active_language=section.get("active_language") or None,
    )
