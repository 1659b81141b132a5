"""
Configuration errors.
"""


class ConfigError(ValueError):
    """Raised when a choice tree, template map or settings file is malformed.

    Always raised while building a prompt, never once it is running.
    """
    pass
