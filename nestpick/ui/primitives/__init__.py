"""
Terminal I/O primitives.

Control sequences, keyboard input and color handling.
"""

from .terminal import (
    strip_ansi,
    clear_line,
    cursor_up,
    cursor_down,
    cursor_to_line_start,
    cursor_show,
)
from .keyboard_input import (
    cbreak_noecho,
    read_byte,
    read_escape_tail,
    KEY_ENTER,
    KEY_ESC,
    KEY_SPACE,
    ARROW_UP,
)
from .colors import Colors

__all__ = [
    # Terminal
    "strip_ansi",
    "clear_line",
    "cursor_up",
    "cursor_down",
    "cursor_to_line_start",
    "cursor_show",
    # Keyboard input
    "cbreak_noecho",
    "read_byte",
    "read_escape_tail",
    "KEY_ENTER",
    "KEY_ESC",
    "KEY_SPACE",
    "ARROW_UP",
    # Colors
    "Colors",
]
