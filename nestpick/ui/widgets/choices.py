"""
Interactive hierarchical multi-select widget.

Renders a nested choice mapping as a checklist under namespace headers and
edits it in place: arrow keys move, space toggles, Enter confirms. Toggles
that break a group limit, a read-only lock or a dependency show a transient
message on the current line instead.
"""

import sys
import time
from collections.abc import Mapping

from ...config import ChoicesConfig, ConfigError
from ...core.logging import debug_log
from ...tree import (
    GROUP_KEY,
    Choice,
    ChoiceTree,
    ConstraintEngine,
    Group,
    build_choice_tree,
    flatten,
    sort_paths,
)
from ..components import LineRenderer
from ..primitives import (
    cbreak_noecho,
    read_byte,
    read_escape_tail,
    clear_line,
    cursor_down,
    cursor_show,
    cursor_to_line_start,
    cursor_up,
    KEY_ENTER,
    KEY_ESC,
    KEY_SPACE,
    ARROW_UP,
)


class ChoicesPrompt:
    """
    Keyboard-driven checklist over a nested choice mapping.

    The choice mapping may nest to any depth; leaves are display names and a
    "_" entry at any level holds that namespace's metadata:

        {
            "Db": {
                "_": {"max": 2, "depends": {"orm": ["pdo"]}, "selected": ["pdo"]},
                "pdo": "PDO",
                "orm": "ORM",
            },
        }

    Only the selection and the cursor change while asking; the tree is built
    once per set_choices().
    """

    def __init__(self, choices: Mapping, config=None, output=None, input=None):
        self.config = ChoicesConfig.from_dict(config)
        self.renderer = LineRenderer(self.config.templates)
        self.output = output
        self.input = input
        self.reset()
        self.set_choices(choices)

    def reset(self) -> "ChoicesPrompt":
        """Drop the tree, the selection and the cursor."""
        self.tree = ChoiceTree()
        self.engine = ConstraintEngine(self.tree, scoped=self.config.scoped_dependencies)
        self._selections: dict[str, str] = {}
        self._line = 0
        return self

    def set_choices(self, choices: Mapping):
        """Build the line list from a nested mapping. Raises ConfigError."""
        self.reset()

        flat = flatten(choices)
        if self.config.sort:
            flat = sort_paths(flat)

        self.tree = build_choice_tree(flat)
        self.engine = ConstraintEngine(self.tree, scoped=self.config.scoped_dependencies)
        for key, namespace in self.tree.preselected_keys():
            self._selections[key] = namespace

        self._line = max(0, self.tree.line_count - 1)

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def selections(self) -> dict[str, str]:
        """Selected key -> namespace, in selection order."""
        return dict(self._selections)

    @property
    def cursor(self) -> int:
        return self._line

    @property
    def current(self) -> Group | Choice:
        return self.tree.lines[self._line]

    def is_group(self) -> bool:
        return isinstance(self.current, Group)

    def is_choice(self) -> bool:
        return isinstance(self.current, Choice)

    def _line_selected(self, line: Group | Choice) -> bool:
        return isinstance(line, Choice) and line.key in self._selections

    def can_go_up(self) -> bool:
        return self._line > 0

    def can_go_down(self) -> bool:
        return self._line < self.tree.line_count - 1

    # ------------------------------------------------------------------
    # Input loop
    # ------------------------------------------------------------------

    def ask(self) -> list[str]:
        """
        Run the prompt until Enter (selected keys) or end of input ([]).

        The terminal is put in cbreak/no-echo mode for the duration and is
        restored however the loop ends.
        """
        if not self.tree.lines:
            return []

        stream = self.input if self.input is not None else sys.stdin.buffer
        with cbreak_noecho(stream):
            self.render()
            self._write(cursor_show(), cursor_to_line_start())
            self.render_line("cursor")

            while True:
                char = read_byte(stream)
                if not char:
                    break

                if char == KEY_ENTER:
                    self._leave_list()
                    keys = list(self._selections)
                    debug_log(f"choices: confirmed {keys}")
                    return keys

                elif char == KEY_ESC:
                    tail = read_escape_tail(stream)
                    if len(tail) < 2:
                        break
                    if tail[1:2] == ARROW_UP:
                        self.move(-1)
                    else:
                        self.move(1)

                elif char == KEY_SPACE:
                    if self.is_choice():
                        self.toggle()

            self._leave_list()
            debug_log("choices: input closed, nothing selected")
            return []

    def move(self, step: int) -> bool:
        """Move the cursor one line up (-1) or down (1). No wraparound."""
        if step < 0 and not self.can_go_up():
            return False
        if step > 0 and not self.can_go_down():
            return False

        self.render_line("clear")
        self._line += step
        self._write(cursor_up() if step < 0 else cursor_down())
        self.render_line("cursor")
        return True

    def toggle(self) -> bool:
        """Toggle the choice under the cursor if the constraints allow it."""
        choice = self.current
        verdict = self.engine.check_toggle(choice, self._selections)
        if not verdict:
            debug_log(f"choices: toggle '{choice.key}' rejected: {verdict.message}")
            self.render_error(verdict.message)
            return False

        if choice.key in self._selections:
            del self._selections[choice.key]
        else:
            self._selections[choice.key] = choice.namespace
        debug_log(f"choices: '{choice.key}' {'on' if choice.key in self._selections else 'off'}")
        self.render_line("cursor")
        return True

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def _write(self, *parts: str):
        out = self.output if self.output is not None else sys.stdout
        out.write("".join(parts))
        out.flush()

    def _leave_list(self):
        """Park the terminal cursor below the last line."""
        self._write(cursor_down(self.tree.line_count - 1 - self._line), "\n")

    def render(self):
        """Write every line once, without a trailing newline."""
        self._write("\n".join(
            self.renderer.line(line, self._line_selected(line)) for line in self.tree.lines
        ))

    def render_line(self, kind: str = "cursor"):
        """Redraw the current line in its 'cursor' or 'clear' form."""
        line = self.current
        self._write(
            cursor_to_line_start(),
            clear_line(),
            self.renderer.line(line, self._line_selected(line), kind),
            cursor_to_line_start(),
        )

    def render_error(self, message: str, wait: float | None = None):
        """Show a message on the current line, block, then restore the line.

        Keys typed while the message is up are not read until it clears.
        """
        if wait is None:
            wait = self.config.error_msg_delay
        self._write(cursor_to_line_start(), clear_line(), self.renderer.error(message))
        time.sleep(wait)
        self._write(cursor_to_line_start(), clear_line())
        self.render_line("cursor")


def show_choices(
    choices,
    title: str | None = None,
    multi: bool = True,
    config=None,
    output=None,
    input=None,
) -> list[str]:
    """
    Ask for a selection and return the selected keys.

    A mapping is used as a choice tree. A plain list of labels becomes a flat
    checklist keyed by label, limited to one selection when multi is False.
    """
    if not isinstance(choices, Mapping):
        labels = [str(c) for c in choices]
        for label in labels:
            if "." in label or label == GROUP_KEY:
                raise ConfigError(f"Choice label {label!r} cannot contain '.' or be '{GROUP_KEY}'")
        choices = {label: label for label in labels}
        if not multi:
            choices = {GROUP_KEY: {"max": 1}, **choices}

    prompt = ChoicesPrompt(choices, config=config, output=output, input=input)
    if title:
        prompt._write(f"{title}\n")
    return prompt.ask()
