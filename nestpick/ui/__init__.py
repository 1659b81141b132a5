"""
User interface module.

Organized into layers:
- primitives/: Terminal I/O (control sequences, keyboard, colors)
- components/: Line formatting and templates
- widgets/: The interactive choices prompt
"""

# Re-export commonly used items for convenience
from .primitives import (
    cbreak_noecho,
    strip_ansi,
    Colors,
)
from .components import (
    DEFAULT_TEMPLATES,
    STYLED_TEMPLATES,
    LineRenderer,
)
from .widgets import (
    ChoicesPrompt,
    show_choices,
)

__all__ = [
    # Primitives
    "cbreak_noecho",
    "strip_ansi",
    "Colors",
    # Components
    "DEFAULT_TEMPLATES",
    "STYLED_TEMPLATES",
    "LineRenderer",
    # Widgets
    "ChoicesPrompt",
    "show_choices",
]
