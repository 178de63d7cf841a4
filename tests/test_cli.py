"""Test the perfmon_i18n CLI subcommands."""
from __future__ import annotations

import json
import os
import subprocess
import sys
from pathlib import Path

import pytest

from perfmon_i18n.cli import main
from perfmon_i18n.utils.config import CONFIG_ENV_VAR

SRC_DIR = Path(__file__).parent.parent / "src"


@pytest.fixture(autouse=True)
def _no_env_config(monkeypatch):
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)


def _run(argv: list[str]) -> int:
    with pytest.raises(SystemExit) as exc_info:
        main(argv=argv)
    return exc_info.value.code


def _resource(tmp_path, text: str):
    path = tmp_path / "Translation.csv"
    path.write_text(text, encoding="utf-8")
    return path


class TestCheck:
    def test_bundled_file_is_clean(self, capsys):
        assert _run(["check"]) == 0
        out = capsys.readouterr().out
        assert "0 error(s), 0 warning(s)" in out

    def test_warnings_reported_but_pass(self, tmp_path, capsys):
        path = _resource(tmp_path, ",en-US\nTitle,Performance Monitor\n")
        assert _run(["check", "--resource", str(path)]) == 0
        out = capsys.readouterr().out
        assert "WARNING" in out
        assert "[Description] 0 times" in out

    def test_strict_fails_on_warnings(self, tmp_path):
        path = _resource(tmp_path, ",en-US\nTitle,Performance Monitor\n")
        assert _run(["check", "--strict", "--resource", str(path)]) == 1

    def test_missing_resource_fails(self, tmp_path, capsys):
        assert _run(["check", "--resource", str(tmp_path / "absent.csv")]) == 1
        out = capsys.readouterr().out
        assert "does not exist" in out

    def test_bad_header_fails(self, tmp_path, capsys):
        path = _resource(tmp_path, "\nTitle,x\n")
        assert _run(["check", "--resource", str(path)]) == 1
        assert "line 1:" in capsys.readouterr().out


class TestGet:
    def test_get_with_language(self, capsys):
        assert _run(["get", "RowLabelFrameRate", "--lang", "de-DE"]) == 0
        assert capsys.readouterr().out.strip() == "Bildrate"

    def test_get_uses_configured_active_language(self, tmp_path, capsys):
        cfg = tmp_path / "cfg.yaml"
        cfg.write_text("translation:\n  active_language: fr-FR\n")
        assert _run(["get", "RowLabelGPUUsage", "--config", str(cfg)]) == 0
        assert capsys.readouterr().out.strip() == "Utilisation du GPU"

    def test_unknown_language_falls_back(self, capsys):
        assert _run(["get", "Title", "--lang", "xx-XX"]) == 0
        assert capsys.readouterr().out.strip() == "Performance Monitor"

    def test_unknown_key(self, capsys):
        assert _run(["get", "NoSuchKey"]) == 1
        assert "unknown translation key" in capsys.readouterr().err


class TestLanguagesAndExport:
    def test_languages(self, capsys):
        assert _run(["languages"]) == 0
        lines = capsys.readouterr().out.split()
        assert "en-US" in lines
        assert "(default)" in lines
        assert "pl-PL" in lines

    def test_export(self, tmp_path, capsys):
        out_dir = tmp_path / "locales"
        assert _run(["export", "--out", str(out_dir)]) == 0
        data = json.loads((out_dir / "es-ES.json").read_text(encoding="utf-8"))
        assert data["PerformanceMonitor.RowLabelMemoryUsage"] == "Uso de memoria"
        assert (out_dir / "diagnostics.json").exists()


def test_main_no_command_exits(capsys):
    """CLI with no subcommand should print help and exit non-zero."""
    assert _run([]) != 0


def test_module_entry_point():
    result = subprocess.run(
        [sys.executable, "-m", "perfmon_i18n.cli", "languages"],
        capture_output=True,
        text=True,
        env={**os.environ, "PYTHONPATH": str(SRC_DIR)},
    )
    assert result.returncode == 0, (
        f"CLI failed (rc={result.returncode}):\nSTDOUT: {result.stdout}\nSTDERR: {result.stderr}"
    )
    assert "en-US (default)" in result.stdout


def test_check_reports_each_error_once(tmp_path):
    absent = tmp_path / "absent.csv"
    result = subprocess.run(
        [sys.executable, "-m", "perfmon_i18n.cli", "check", "--resource", str(absent)],
        capture_output=True,
        text=True,
        env={**os.environ, "PYTHONPATH": str(SRC_DIR)},
    )
    assert result.returncode == 1
    combined = result.stdout + result.stderr
    assert combined.count("does not exist") == 1, (
        f"STDOUT: {result.stdout}\nSTDERR: {result.stderr}"
    )
    assert "does not exist" in result.stdout
