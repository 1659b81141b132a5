"""
Configuration management for nestpick.

Config files:
- .nestpick/settings.json: prompt defaults (error delay, sort, templates)
"""

from .errors import ConfigError
from .settings import ChoicesConfig

__all__ = [
    "ConfigError",
    "ChoicesConfig",
]
