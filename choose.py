#!/usr/bin/env python3
"""
nestpick - Pick options from a nested JSON choice file.

Shows the choices as a keyboard-driven checklist and prints the selected
keys, one per line (or as a JSON array with --json).
"""

import argparse
import json
import sys
from datetime import datetime
from pathlib import Path

from nestpick import __version__
from nestpick.config import ChoicesConfig, ConfigError
from nestpick.core.logging import TeeOutput, debug_log
from nestpick.core.paths import get_logs_dir, get_settings_path
from nestpick.ui import STYLED_TEMPLATES, show_choices


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="nestpick",
        description="nestpick - Pick options from a nested JSON choice file",
    )
    parser.add_argument("choices", type=Path, help="JSON file with the nested choices")
    parser.add_argument("--title", help="Line shown above the list")
    parser.add_argument("--sort", action="store_true", default=None,
                        help="Sort choices by path before display")
    parser.add_argument("--delay", type=float, default=None, metavar="SECONDS",
                        help="How long rejected toggles show their message")
    parser.add_argument("--scoped-dependencies", action="store_true", default=None,
                        help="Resolve dependencies within each namespace only")
    parser.add_argument("--plain", action="store_true",
                        help="Plain [x]/[ ] rows without colors (ignores settings templates)")
    parser.add_argument("--settings", type=Path, default=None,
                        help="Settings file (default: .nestpick/settings.json)")
    parser.add_argument("--log", nargs="?", const="", default=None, metavar="PATH",
                        help="Also write the session to a log file")
    parser.add_argument("--json", action="store_true", help="Print the selection as a JSON array")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def load_choice_file(path: Path) -> dict:
    """Load the nested choice mapping (key order is preserved)."""
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigError(f"{path}: invalid JSON ({e})")
    except OSError as e:
        raise ConfigError(f"{path}: {e.strerror or e}")
    if not isinstance(data, dict):
        raise ConfigError(f"{path}: expected a JSON object at the top level")
    return data


def load_config(args) -> ChoicesConfig:
    """Settings file values, then command-line overrides."""
    settings_path = args.settings or get_settings_path()
    config = ChoicesConfig.load(settings_path)
    templates = None
    if args.plain:
        templates = {}
    elif not config.templates:
        templates = dict(STYLED_TEMPLATES)
    return config.with_overrides(
        sort=args.sort,
        error_msg_delay=args.delay,
        scoped_dependencies=args.scoped_dependencies,
        templates=templates,
    )


def main(argv=None) -> int:
    """Entry point."""
    args = build_parser().parse_args(argv)

    try:
        choices = load_choice_file(args.choices)
        config = load_config(args)
    except ConfigError as e:
        print(f"nestpick: {e}", file=sys.stderr)
        return 2

    if not sys.stdin.isatty() or not sys.stdout.isatty():
        print("nestpick: interactive selection requires a TTY.", file=sys.stderr)
        return 1

    tee = None
    if args.log is not None:
        log_path = Path(args.log) if args.log else get_logs_dir() / f"{datetime.now().strftime('%Y-%m-%d')}.log"
        tee = TeeOutput(log_path, version=__version__)
        sys.stdout = tee
        debug_log(f"choices file: {args.choices}")

    try:
        try:
            selected = show_choices(choices, title=args.title, config=config)
        except ConfigError as e:
            print(f"nestpick: {e}", file=sys.stderr)
            return 2

        if args.json:
            print(json.dumps(selected))
        else:
            for key in selected:
                print(key)
        return 0
    finally:
        if tee is not None:
            sys.stdout = tee.terminal
            tee.close()


if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        print("\n\nCancelled by user.")
        sys.exit(130)
