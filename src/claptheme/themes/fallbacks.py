"""Fallback foreground colours mapped to colour schemes.

When the base group of a binding has no foreground in the active colour
scheme, the binding falls back to a literal colour. This module provides
those literals per colour scheme, so that file listings stay readable on
both dark and light backgrounds.
"""

from typing import NamedTuple


class FallbackColors(NamedTuple):
    """Foreground colour for each colour space."""

    cterm: str
    gui: str


# Mapping from colour scheme name to the foreground of its Normal group
COLORSCHEME_FALLBACKS: dict[str, FallbackColors] = {
    # Dark schemes
    "default": FallbackColors("249", "#b2b2b2"),
    "desert": FallbackColors("231", "#ffffff"),
    "gruvbox": FallbackColors("223", "#ebdbb2"),
    "nord": FallbackColors("253", "#d8dee9"),
    "dracula": FallbackColors("255", "#f8f8f2"),
    "molokai": FallbackColors("252", "#f8f8f2"),
    "onedark": FallbackColors("145", "#abb2bf"),
    "solarized8_dark": FallbackColors("246", "#839496"),
    # Light schemes
    "morning": FallbackColors("16", "#000000"),
    "solarized8_light": FallbackColors("241", "#657b83"),
    "PaperColor-light": FallbackColors("238", "#444444"),
}

# Default fallback colours when no mapping exists
DEFAULT_DARK_FALLBACK = FallbackColors("249", "#b2b2b2")
DEFAULT_LIGHT_FALLBACK = FallbackColors("238", "#444444")

# Colour scheme name fragments that indicate a light background
LIGHT_SCHEME_INDICATORS = frozenset(
    {
        "light",
        "day",
        "dawn",
        "morning",
    }
)


def get_fallback_colors(colorscheme: str, background: str | None = None) -> FallbackColors:
    """Get the fallback foreground colours for a colour scheme.

    A direct mapping wins. Otherwise the editor's ``background`` option
    decides between the dark and light defaults, and when that is unknown
    the colour scheme name is used as a hint.

    Args:
        colorscheme: Name of the colour scheme (e.g., "gruvbox").
        background: The editor's background option, "dark" or "light", if known.

    Returns:
        Fallback colours for the terminal and graphical colour spaces.

    Examples:
        >>> get_fallback_colors("gruvbox")
        FallbackColors(cterm='223', gui='#ebdbb2')
        >>> get_fallback_colors("unknown", background="light")
        FallbackColors(cterm='238', gui='#444444')
        >>> get_fallback_colors("unknown-dark-scheme")
        FallbackColors(cterm='249', gui='#b2b2b2')
    """
    if colorscheme in COLORSCHEME_FALLBACKS:
        return COLORSCHEME_FALLBACKS[colorscheme]

    if background is not None:
        dark = background.lower() != "light"
    else:
        dark = is_dark_colorscheme(colorscheme)

    return DEFAULT_DARK_FALLBACK if dark else DEFAULT_LIGHT_FALLBACK


def is_dark_colorscheme(colorscheme: str) -> bool:
    """Check if a colour scheme is a dark one.

    Colour schemes are assumed to be dark unless their name carries a light
    indicator.

    Args:
        colorscheme: Name of the colour scheme.

    Returns:
        True if the scheme is dark (default), False if light.

    Examples:
        >>> is_dark_colorscheme("gruvbox")
        True
        >>> is_dark_colorscheme("solarized8_light")
        False
        >>> is_dark_colorscheme("morning")
        False
    """
    scheme_lower = colorscheme.lower()
    return not any(indicator in scheme_lower for indicator in LIGHT_SCHEME_INDICATORS)
