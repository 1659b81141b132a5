"""
Keyboard input handling for nestpick.

Byte-at-a-time reads from a binary stream, and a scoped cbreak/no-echo mode
for the controlling terminal.
"""

import io
import os
import sys
from contextlib import contextmanager

# Platform-specific imports
if os.name != 'nt':
    import termios

# Bytes the choices prompt reacts to
KEY_ENTER = b"\n"
KEY_ESC = b"\x1b"
KEY_SPACE = b" "
# Final byte of the cursor-up sequence (ESC [ A)
ARROW_UP = b"A"


def _tty_fd(stream) -> int | None:
    """Return the stream's file descriptor if it is a terminal, else None."""
    try:
        fd = stream.fileno()
    except (AttributeError, io.UnsupportedOperation, ValueError):
        return None
    return fd if os.isatty(fd) else None


@contextmanager
def cbreak_noecho(stream=None):
    """Context manager for cbreak mode with echo disabled.

    Unlike raw mode, this preserves output processing (newlines work correctly)
    while disabling input echo and line buffering. The original settings are
    restored on every exit path. No-op on Windows and for non-terminal streams.
    """
    if stream is None:
        stream = sys.stdin
    fd = None if os.name == 'nt' else _tty_fd(stream)
    if fd is None:
        yield None
        return

    old_settings = termios.tcgetattr(fd)
    try:
        # Copy settings
        new_settings = termios.tcgetattr(fd)
        # Disable echo and canonical mode (line buffering)
        new_settings[3] = new_settings[3] & ~(termios.ECHO | termios.ICANON)
        # Set minimum chars to read = 1, timeout = 0
        new_settings[6][termios.VMIN] = 1
        new_settings[6][termios.VTIME] = 0
        termios.tcsetattr(fd, termios.TCSANOW, new_settings)
        yield fd
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, old_settings)


def read_byte(stream) -> bytes:
    """Read one byte, blocking. Returns b'' once the stream is closed."""
    return stream.read(1) or b""


def read_escape_tail(stream) -> bytes:
    """
    Read the two bytes that follow ESC in an arrow-key sequence.

    Returns fewer than two bytes only if the stream closed mid-sequence.
    """
    tail = b""
    while len(tail) < 2:
        chunk = stream.read(2 - len(tail))
        if not chunk:
            break
        tail += chunk
    return tail
