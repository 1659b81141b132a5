"""
Interactive widgets.
"""

from .choices import ChoicesPrompt, show_choices

__all__ = [
    "ChoicesPrompt",
    "show_choices",
]
