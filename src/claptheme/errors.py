"""Exceptions raised by claptheme.

Attribute lookups never raise; these cover the inputs read from disk.
"""


class ClapThemeError(Exception):
    """Base class for claptheme errors."""


class ConfigError(ClapThemeError):
    """Raised when a config file cannot be parsed or validated."""


class ColorSchemeError(ClapThemeError):
    """Raised when a colour-scheme snapshot is missing or invalid."""
