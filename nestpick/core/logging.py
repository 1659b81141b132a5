"""
Logging utilities for nestpick.
"""

import re
import sys
from datetime import datetime
from pathlib import Path

# Colour, clear and cursor-movement sequences emitted by the prompt
ANSI_CONTROL_PATTERN = re.compile(r'\x1b\[[0-9;?]*[mKHJABCDhl]')


def _last_visible(text: str) -> str:
    """Return the last non-empty \\r-separated rewrite of a line."""
    parts = [p for p in text.split('\r') if p]
    return parts[-1] if parts else ''


class TeeOutput:
    """Write to both stdout and a log file, filtering out UI noise."""

    # Patterns to skip in log file (checklist rows are redrawn constantly)
    _SKIP_PATTERNS = [
        r'^\s*$',                 # Blank lines
        r'^\s*\[[ x]\] ',         # Checklist rows
        r'[▸]',                   # Cursor marker of the styled templates
    ]

    def __init__(self, log_path: Path, version: str = None):
        self.terminal = sys.stdout
        self.log_file = open(log_path, "a", encoding="utf-8")
        self._skip_regex = re.compile('|'.join(self._SKIP_PATTERNS))
        self._line_buffer = ""
        # Write session header with version
        self.log_file.write(f"\n{'='*60}\n")
        version_str = f" v{version}" if version else ""
        self.log_file.write(f"Session started: {datetime.now().isoformat()}{version_str}\n")
        self.log_file.write(f"{'='*60}\n\n")
        self.log_file.flush()

    def write(self, message):
        self.terminal.write(message)

        clean = ANSI_CONTROL_PATTERN.sub('', message)

        # Buffer partial lines (for \r carriage return handling)
        self._line_buffer += clean

        # Process complete lines
        while '\n' in self._line_buffer:
            line, self._line_buffer = self._line_buffer.split('\n', 1)
            line = _last_visible(line)
            if not self._skip_regex.search(line):
                stripped = line.rstrip()
                if stripped:
                    timestamp = datetime.now().strftime("[%H:%M:%S]")
                    self.log_file.write(f"{timestamp} {stripped}\n")

        # Handle \r (carriage return) - only keep the last version
        if '\r' in self._line_buffer:
            self._line_buffer = _last_visible(self._line_buffer)

        self.log_file.flush()

    def flush(self):
        self.terminal.flush()
        self.log_file.flush()

    def close(self):
        # Flush any remaining buffer
        remaining = _last_visible(self._line_buffer).rstrip()
        if remaining and not self._skip_regex.search(remaining):
            timestamp = datetime.now().strftime("[%H:%M:%S]")
            self.log_file.write(f"{timestamp} {remaining}\n")
        self.log_file.close()

    def log_only(self, message: str):
        """Write a message only to the log file, not to terminal."""
        timestamp = datetime.now().strftime("[%H:%M:%S]")
        self.log_file.write(f"{timestamp} {message}\n")
        self.log_file.flush()


def debug_log(message: str):
    """Log a debug message to file only (not shown to user)."""
    if hasattr(sys.stdout, 'log_only'):
        sys.stdout.log_only(message)
    # If not using TeeOutput (e.g., tests), silently ignore
