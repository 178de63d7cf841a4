"""Test config loading: default path, env override, defaults merge."""
from __future__ import annotations

from pathlib import Path

import pytest

from perfmon_i18n.utils.config import (
    CONFIG_ENV_VAR,
    DEFAULT_CONFIG,
    load_config,
    translation_settings,
)


class TestLoadConfig:
    def test_repo_default_config(self, monkeypatch):
        monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
        cfg = load_config()
        assert cfg["translation"]["default_language"] == "en-US"
        assert cfg["logging"]["level"] == "INFO"

    def test_explicit_missing_path_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "nope.yaml")

    def test_env_var_path(self, tmp_path, monkeypatch):
        p = tmp_path / "cfg.yaml"
        p.write_text("translation:\n  active_language: fr-FR\n")
        monkeypatch.setenv(CONFIG_ENV_VAR, str(p))
        cfg = load_config()
        assert cfg["translation"]["active_language"] == "fr-FR"

    def test_env_var_missing_file_raises(self, tmp_path, monkeypatch):
        monkeypatch.setenv(CONFIG_ENV_VAR, str(tmp_path / "gone.yaml"))
        with pytest.raises(FileNotFoundError):
            load_config()

    def test_partial_config_keeps_defaults(self, tmp_path):
        p = tmp_path / "cfg.yaml"
        p.write_text("logging:\n  level: DEBUG\ntranslation:\n")
        cfg = load_config(p)
        assert cfg["logging"]["level"] == "DEBUG"
        assert cfg["translation"] == DEFAULT_CONFIG["translation"]

    def test_empty_file_is_defaults(self, tmp_path):
        p = tmp_path / "cfg.yaml"
        p.write_text("")
        assert load_config(p) == DEFAULT_CONFIG

    def test_defaults_not_shared_between_calls(self, tmp_path):
        p = tmp_path / "cfg.yaml"
        p.write_text("")
        cfg = load_config(p)
        cfg["translation"]["resource"] = "changed.csv"
        assert DEFAULT_CONFIG["translation"]["resource"] is None


class TestTranslationSettings:
    def test_defaults(self):
        s = translation_settings(DEFAULT_CONFIG)
        assert s.resource is None
        assert s.default_language == "en-US"
        assert s.active_language is None

    def test_resource_becomes_path(self):
        s = translation_settings({"translation": {"resource": "data/Translation.csv"}})
        assert s.resource == Path("data/Translation.csv")

    def test_missing_section(self):
        s = translation_settings({})
        assert s.default_language == "en-US"


class TestRelativeResource:
    def test_relative_to_config_directory(self, tmp_path):
        p = tmp_path / "cfg.yaml"
        p.write_text("translation:\n  resource: data/T.csv\n")
        cfg = load_config(p)
        assert translation_settings(cfg).resource == tmp_path / "data" / "T.csv"

    def test_relative_via_env_var(self, tmp_path, monkeypatch):
        conf_dir = tmp_path / "conf"
        conf_dir.mkdir()
        p = conf_dir / "cfg.yaml"
        p.write_text("translation:\n  resource: ../T.csv\n")
        monkeypatch.setenv(CONFIG_ENV_VAR, str(p))
        monkeypatch.chdir(tmp_path)
        assert Path(load_config()["translation"]["resource"]) == conf_dir / ".." / "T.csv"

    def test_absolute_path_unchanged(self, tmp_path):
        target = tmp_path / "elsewhere" / "T.csv"
        p = tmp_path / "cfg.yaml"
        p.write_text(f"translation:\n  resource: '{target.as_posix()}'\n")
        assert translation_settings(load_config(p)).resource == target

    def test_loaded_through_translation(self, tmp_path):
        from perfmon_i18n.localization.translation import load_translation_from_config

        (tmp_path / "data").mkdir()
        (tmp_path / "data" / "T.csv").write_text(",en-US,fr-FR\nTitle,Hello,Bonjour\n", encoding="utf-8")
        p = tmp_path / "cfg.yaml"
        p.write_text("translation:\n  resource: data/T.csv\n")
        translation = load_translation_from_config(load_config(p))
        assert translation.get("Title", "fr-FR") == "Bonjour"
