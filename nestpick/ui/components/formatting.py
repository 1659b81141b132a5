"""
Line formatting for the choices prompt.

Each rendered line has a kind (group header, selected or unselected choice,
transient error) plus two wrappers applied when the cursor arrives at or
leaves a line. Templates are str.format strings with one {} placeholder, or
callables taking the text.
"""

from typing import Callable, Union

from ...config.errors import ConfigError
from ...tree.model import Choice, Group
from ..primitives import Colors

Template = Union[str, Callable[[str], str]]

KINDS = ("group", "on", "off", "error", "cursor", "clear")

DEFAULT_TEMPLATES: dict[str, Template] = {
    "group": "{}",
    "on": " [x] {}",
    "off": " [ ] {}",
    "error": "{}",
    "cursor": "{}",
    "clear": "{}",
}


def _mark_cursor(text: str) -> str:
    """Put the cursor marker in the leading column of a rendered line."""
    if text.startswith(" "):
        text = text[1:]
    return f"{Colors.PINK}▸{Colors.RESET}{text}"


STYLED_TEMPLATES: dict[str, Template] = {
    "group": f" {Colors.BOLD}{{}}{Colors.RESET}",
    "on": f" {Colors.GREEN}[x]{Colors.RESET} {{}}",
    "off": f" {Colors.MUTED}[ ]{Colors.RESET} {{}}",
    "error": f" {Colors.RED}{{}}{Colors.RESET}",
    "cursor": _mark_cursor,
    "clear": "{}",
}


def _check_template(kind: str, template) -> Template:
    if callable(template):
        return template
    if not isinstance(template, str):
        raise ConfigError(f"Template '{kind}' must be a string or a callable, got {template!r}")
    try:
        template.format("")
    except (AttributeError, IndexError, KeyError, TypeError, ValueError) as e:
        raise ConfigError(f"Template '{kind}' is not a valid one-placeholder format: {template!r} ({e})")
    return template


class LineRenderer:
    """Formats prompt lines from a validated template map."""

    def __init__(self, templates: dict | None = None):
        merged = dict(DEFAULT_TEMPLATES)
        for kind, template in (templates or {}).items():
            if kind not in KINDS:
                raise ConfigError(f"Unknown template kind '{kind}' (expected one of: {', '.join(KINDS)})")
            merged[kind] = _check_template(kind, template)
        self.templates = merged

    def format(self, kind: str, text: str) -> str:
        template = self.templates[kind]
        if callable(template):
            return str(template(text))
        return template.format(text)

    def group(self, group: Group) -> str:
        return self.format("group", group.label)

    def choice(self, choice: Choice, selected: bool) -> str:
        return self.format("on" if selected else "off", choice.display_name)

    def error(self, message: str) -> str:
        return self.format("error", message)

    def line(self, line: Group | Choice, selected: bool = False, kind: str | None = None) -> str:
        """
        Render a list line, optionally wrapped in the 'cursor' or 'clear' form.

        `selected` is ignored for group headers.
        """
        if isinstance(line, Group):
            text = self.group(line)
        else:
            text = self.choice(line, selected)
        if kind is None:
            return text
        return self.format(kind, text)
