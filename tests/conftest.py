"""Pytest configuration and shared fixtures."""

import io
from dataclasses import dataclass

import pytest

from nestpick.ui.widgets.choices import ChoicesPrompt

# Key bytes as a terminal in cbreak mode delivers them
UP = b"\x1b[A"
DOWN = b"\x1b[B"
SPACE = b" "
ENTER = b"\n"


@dataclass
class PromptRun:
    """A finished prompt session driven by scripted keys."""
    prompt: ChoicesPrompt
    output: io.StringIO
    result: list

    @property
    def screen(self) -> str:
        return self.output.getvalue()


def run_prompt(choices: dict, keys: bytes, **config) -> PromptRun:
    """Run a prompt over scripted key bytes. Error messages don't wait by default."""
    config.setdefault("error_msg_delay", 0)
    output = io.StringIO()
    prompt = ChoicesPrompt(choices, config=config, output=output, input=io.BytesIO(keys))
    result = prompt.ask()
    return PromptRun(prompt=prompt, output=output, result=result)


@pytest.fixture
def prompt_runner():
    """Return the scripted-session runner."""
    return run_prompt


@pytest.fixture(autouse=True)
def isolated_app_root(monkeypatch, tmp_path):
    """Point the app data directory at a temp dir."""
    monkeypatch.setenv("NESTPICK_ROOT", str(tmp_path))
    return tmp_path
