"""
Reusable visual building blocks.

Non-interactive formatting for prompt lines.
"""

from .formatting import (
    KINDS,
    DEFAULT_TEMPLATES,
    STYLED_TEMPLATES,
    LineRenderer,
)

__all__ = [
    "KINDS",
    "DEFAULT_TEMPLATES",
    "STYLED_TEMPLATES",
    "LineRenderer",
]
