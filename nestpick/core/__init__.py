"""
Core utilities for nestpick.

App paths and session logging.
"""

from .paths import (
    DATA_DIR_NAME,
    get_app_dir,
    get_data_dir,
    get_settings_path,
    get_logs_dir,
)

from .logging import (
    TeeOutput,
    debug_log,
)

__all__ = [
    # Paths
    "DATA_DIR_NAME",
    "get_app_dir",
    "get_data_dir",
    "get_settings_path",
    "get_logs_dir",
    # Logging
    "TeeOutput",
    "debug_log",
]
