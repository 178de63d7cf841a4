"""Known translation keys for the performance monitor UI.

The key *name* is what appears in column 1 of Translation.csv. The
*locale_id* is the id the UI looks text up by once a locale source is
registered with the host's localization manager.
"""
from __future__ import annotations

from dataclasses import dataclass

MOD_NAME = "PerformanceMonitor"
_SETTINGS_ID = f"{MOD_NAME}.{MOD_NAME}.Mod"


@dataclass(frozen=True)
class TranslationKey:
    name: str
    locale_id: str


def _ui(name: str) -> TranslationKey:
    return TranslationKey(name, f"{MOD_NAME}.{name}")


def _group(name: str, group: str) -> TranslationKey:
    return TranslationKey(name, f"Options.GROUP[{_SETTINGS_ID}.{group}]")


def _option(name: str, option: str, kind: str = "OPTION") -> TranslationKey:
    return TranslationKey(name, f"Options.{kind}[{_SETTINGS_ID}.ModSettings.{option}]")


TRANSLATION_KEYS: tuple[TranslationKey, ...] = (
    # mod title and description
    _ui("Title"),
    _ui("Description"),
    # settings
    TranslationKey("SettingTitle",      f"Options.SECTION[{_SETTINGS_ID}]"),
    TranslationKey("SettingBindingMap", f"Options.INPUT_MAP[{_SETTINGS_ID}]"),
    _group("SettingGroupGeneral", "General"),
    TranslationKey(
        "SettingActivationKeyBinding",
        f"Options.INPUT_BINDING[{_SETTINGS_ID}/ActivationKeyBinding]",
    ),
    _option("SettingActivationKeyBindingLabel", "ActivationKeyBinding"),
    _option("SettingActivationKeyBindingDesc",  "ActivationKeyBinding", "OPTION_DESCRIPTION"),
    _option("SettingResetWindowPositionLabel",  "ResetMainPanelPosition"),
    _option("SettingResetWindowPositionDesc",   "ResetMainPanelPosition", "OPTION_DESCRIPTION"),
    _group("SettingGroupAbout", "About"),
    _option("SettingModVersionLabel", "ModVersion"),
    _option("SettingModVersionDesc",  "ModVersion", "OPTION_DESCRIPTION"),
    # measurement row labels
    _ui("RowLabelCurrentGameMinute"),
    _ui("RowLabelPreviousGameMinute"),
    _ui("RowLabelFrameRate"),
    _ui("RowLabelGPUUsage"),
    _ui("RowLabelCPUUsage"),
    _ui("RowLabelMemoryUsage"),
    # measurement tool tips
    _ui("ToolTipCurrentGameMinute"),
    _ui("ToolTipPreviousGameMinute"),
    _ui("ToolTipFrameRate"),
    _ui("ToolTipGPUUsage"),
    _ui("ToolTipCPUUsage"),
    _ui("ToolTipMemoryUsage"),
)

KEY_NAMES: tuple[str, ...] = tuple(k.name for k in TRANSLATION_KEYS)
