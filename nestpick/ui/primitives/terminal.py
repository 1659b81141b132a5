"""
Terminal control sequences for nestpick.

Cursor movement and line clearing as ANSI strings; callers write them to
their output stream.
"""

import re

ANSI_PATTERN = re.compile(r'\x1b\[[0-9;]*m')


def strip_ansi(text: str) -> str:
    """Remove ANSI colour codes from text."""
    return ANSI_PATTERN.sub('', text)


def clear_line() -> str:
    """Clear from the cursor to the end of the line."""
    return "\x1b[K"


def cursor_up(lines: int = 1) -> str:
    """Move the cursor up. Zero lines is an empty string (\\x1b[0A moves one)."""
    return f"\x1b[{lines}A" if lines > 0 else ""


def cursor_down(lines: int = 1) -> str:
    """Move the cursor down. Zero lines is an empty string (\\x1b[0B moves one)."""
    return f"\x1b[{lines}B" if lines > 0 else ""


def cursor_to_line_start() -> str:
    return "\r"


def cursor_show() -> str:
    return "\x1b[?25h"
