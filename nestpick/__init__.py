"""
nestpick - Hierarchical multi-select lists for the terminal.

Turns a nested mapping of options into a keyboard-driven checklist grouped
by namespace, with per-group limits, read-only entries and dependencies.

Import from submodules directly:
    from nestpick.config import ChoicesConfig
    from nestpick.tree import build_choice_tree
    from nestpick.ui import ChoicesPrompt, show_choices
"""


def _get_version():
    """Read version from VERSION file."""
    from pathlib import Path
    version_file = Path(__file__).parent.parent / "VERSION"
    if version_file.exists():
        return version_file.read_text().strip()
    return "0.0.0"


__version__ = _get_version()
