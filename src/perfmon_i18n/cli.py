"""CLI entry point for perfmon-i18n."""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

logger = logging.getLogger(__name__)


def _setup_logging(cfg: dict) -> None:
    level = str(cfg.get("logging", {}).get("level", "INFO")).upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )


def _load(args: argparse.Namespace, level: str | None = None):
    """Load config + translation for a subcommand."""
    from perfmon_i18n.localization.translation import load_translation_from_config
    from perfmon_i18n.utils.config import load_config

    cfg = load_config(Path(args.config) if args.config else None)
    if args.resource:
        cfg["translation"]["resource"] = args.resource
    if level:
        cfg["logging"]["level"] = level
    _setup_logging(cfg)
    return load_translation_from_config(cfg)


def _cmd_check(args: argparse.Namespace) -> int:
    # diagnostics go to stdout only
    translation = _load(args, level="CRITICAL")
    diagnostics = translation.diagnostics

    for d in diagnostics:
        print(d)
    n_warn = len(diagnostics.warnings)
    n_err = len(diagnostics.errors)
    print(
        f"{len(translation.language_codes())} language(s), {len(translation.keys)} key(s): "
        f"{n_err} error(s), {n_warn} warning(s)"
    )

    if n_err or (args.strict and n_warn):
        return 1
    return 0


def _cmd_get(args: argparse.Namespace) -> int:
    translation = _load(args, level="ERROR")
    known = {k.name for k in translation.keys}
    if args.key not in known:
        print(f"ERROR: unknown translation key [{args.key}]", file=sys.stderr)
        return 1
    print(translation.get(args.key, args.lang))
    return 0


def _cmd_languages(args: argparse.Namespace) -> int:
    translation = _load(args, level="ERROR")
    for code in sorted(translation.language_codes()):
        marker = " (default)" if code == translation.default_language else ""
        print(f"{code}{marker}")
    return 0


def _cmd_export(args: argparse.Namespace) -> int:
    from perfmon_i18n.localization.export import write_locale_files

    translation = _load(args)
    out_dir = Path(args.out)
    paths = write_locale_files(translation, out_dir)
    print(f"Written {len(paths)} file(s) → {out_dir}")
    return 0


def _add_common(p: argparse.ArgumentParser) -> None:
    p.add_argument("--config", default=None, help="Path to config YAML")
    p.add_argument("--resource", default=None, help="Path to Translation.csv (default: bundled)")


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(prog="perfmon_i18n.cli")
    sub = parser.add_subparsers(dest="command")

    p_check = sub.add_parser("check", help="Build the translation table and report diagnostics")
    _add_common(p_check)
    p_check.add_argument("--strict", action="store_true", help="Exit non-zero on warnings too")

    p_get = sub.add_parser("get", help="Print the text of one translation key")
    _add_common(p_get)
    p_get.add_argument("key", help="Translation key name, e.g. RowLabelFrameRate")
    p_get.add_argument("--lang", default=None, help="Language code (default: configured active language)")

    p_lang = sub.add_parser("languages", help="List loaded language codes")
    _add_common(p_lang)

    p_export = sub.add_parser("export", help="Write one JSON locale file per language")
    _add_common(p_export)
    p_export.add_argument("--out", required=True, help="Output directory")

    args = parser.parse_args(argv)

    if args.command == "check":
        sys.exit(_cmd_check(args))
    elif args.command == "get":
        sys.exit(_cmd_get(args))
    elif args.command == "languages":
        sys.exit(_cmd_languages(args))
    elif args.command == "export":
        sys.exit(_cmd_export(args))
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
