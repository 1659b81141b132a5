"""
Centralized path management for nestpick.

User-writable data lives in a .nestpick/ folder next to the app, so a checkout
stays self-contained.

Directory structure:
    path/to/choose.py
    path/to/.nestpick/
        settings.json   - Prompt defaults (templates, delay, sort)
        logs/           - Session logs written with --log
"""

import os
from pathlib import Path

# Directory name for app data (hidden on Unix)
DATA_DIR_NAME = ".nestpick"


def get_app_dir() -> Path:
    """
    Get the directory the app runs from.

    NESTPICK_ROOT overrides it (tests, wrappers); otherwise the repo root.
    """
    root = os.environ.get("NESTPICK_ROOT")
    if root:
        return Path(root)
    return Path(__file__).parent.parent.parent


def get_data_dir() -> Path:
    """Get the .nestpick/ data directory, creating it if needed."""
    data_dir = get_app_dir() / DATA_DIR_NAME
    data_dir.mkdir(parents=True, exist_ok=True)
    return data_dir


def get_settings_path() -> Path:
    """Get path to the prompt settings file."""
    return get_data_dir() / "settings.json"


def get_logs_dir() -> Path:
    """Get the session log directory, creating it if needed."""
    logs_dir = get_data_dir() / "logs"
    logs_dir.mkdir(exist_ok=True)
    return logs_dir
