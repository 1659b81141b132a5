"""
Prompt settings for nestpick.

Construction-time options for the choices prompt. Can be passed as a plain
dict (merged over the defaults) or persisted to .nestpick/settings.json.
"""

import json
from dataclasses import dataclass, field, fields
from pathlib import Path

from .errors import ConfigError
from ..core.logging import debug_log


@dataclass
class ChoicesConfig:
    """
    Options for a ChoicesPrompt.

    Stores:
    - How long a rejected toggle's message stays on screen (seconds)
    - Whether flattened paths are sorted before display
    - Line templates per kind (merged over the renderer defaults)
    - Whether dependency checks stay inside the choice's own namespace
    """

    error_msg_delay: float = 2
    sort: bool = False
    templates: dict = field(default_factory=dict)
    scoped_dependencies: bool = False

    def __post_init__(self):
        if isinstance(self.error_msg_delay, bool) or not isinstance(self.error_msg_delay, (int, float)):
            raise ConfigError(f"error_msg_delay must be a number, got {self.error_msg_delay!r}")
        if self.error_msg_delay < 0:
            raise ConfigError(f"error_msg_delay must not be negative, got {self.error_msg_delay}")
        if not isinstance(self.sort, bool):
            raise ConfigError(f"sort must be true or false, got {self.sort!r}")
        if not isinstance(self.scoped_dependencies, bool):
            raise ConfigError(f"scoped_dependencies must be true or false, got {self.scoped_dependencies!r}")
        if not isinstance(self.templates, dict):
            raise ConfigError(f"templates must be a mapping, got {type(self.templates).__name__}")

    @classmethod
    def from_dict(cls, data: dict | None) -> "ChoicesConfig":
        """Build a config from a plain dict, keeping defaults for missing keys."""
        if data is None:
            return cls()
        if isinstance(data, cls):
            return data
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigError(f"Unknown setting(s): {', '.join(unknown)}")
        return cls(**data)

    @classmethod
    def load(cls, path: Path) -> "ChoicesConfig":
        """Load settings from file. Missing or unreadable files give defaults."""
        if not path.exists():
            return cls()

        try:
            with open(path, encoding="utf-8") as f:
                data = json.load(f)
        except (json.JSONDecodeError, IOError) as e:
            debug_log(f"settings: ignoring {path}: {e}")
            return cls()

        if not isinstance(data, dict):
            raise ConfigError(f"{path}: expected a JSON object")
        return cls.from_dict(data)

    def save(self, path: Path):
        """Save settings to file. Callable templates are not persisted."""
        data = {
            "error_msg_delay": self.error_msg_delay,
            "sort": self.sort,
            "templates": {k: v for k, v in self.templates.items() if isinstance(v, str)},
            "scoped_dependencies": self.scoped_dependencies,
        }
        with open(path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2)

    def with_overrides(self, **overrides) -> "ChoicesConfig":
        """Return a copy with the given non-None values replaced."""
        values = {f.name: getattr(self, f.name) for f in fields(self)}
        values["templates"] = dict(self.templates)
        for name, value in overrides.items():
            if value is not None:
                values[name] = value
        return ChoicesConfig.from_dict(values)
