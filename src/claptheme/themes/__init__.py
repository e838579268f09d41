"""Theme utilities for binding highlight groups.

This module provides fallback foreground colours per colour scheme, used when
a binding's base group has no colour of its own.
"""

from claptheme.themes.fallbacks import (
    COLORSCHEME_FALLBACKS,
    DEFAULT_DARK_FALLBACK,
    DEFAULT_LIGHT_FALLBACK,
    FallbackColors,
    get_fallback_colors,
    is_dark_colorscheme,
)

__all__ = [
    "COLORSCHEME_FALLBACKS",
    "DEFAULT_DARK_FALLBACK",
    "DEFAULT_LIGHT_FALLBACK",
    "FallbackColors",
    "get_fallback_colors",
    "is_dark_colorscheme",
]
