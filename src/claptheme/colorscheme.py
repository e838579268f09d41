# mypy: warn_unused_ignores=False
"""Colour-scheme snapshots stored as TOML.

A snapshot captures the highlight table a colour scheme leaves behind, so
bindings can be previewed and tested without a running editor::

    name = "gruvbox"
    background = "dark"

    [groups.Normal]
    ctermfg = "223"
    guifg = "#ebdbb2"

    [groups.TNormal]
    link = "Normal"
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Literal

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib  # type: ignore

from pydantic import BaseModel, ConfigDict, ValidationError

from claptheme.context import InMemoryThemeContext
from claptheme.errors import ColorSchemeError
from claptheme.logger import get_logger
from claptheme.models import Attribute, ColorSpace, LinkDirective
from claptheme.themes import FallbackColors, get_fallback_colors

logger = get_logger(__name__)


class GroupSnapshot(BaseModel):
    """Attributes of one highlight group as the colour scheme set them."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    ctermfg: str | None = None
    ctermbg: str | None = None
    ctermsp: str | None = None
    guifg: str | None = None
    guibg: str | None = None
    guisp: str | None = None
    link: str | None = None


class ColorScheme(BaseModel):
    """A colour scheme's highlight table."""

    model_config = ConfigDict(frozen=True)

    name: str
    background: Literal["dark", "light"] | None = None
    groups: dict[str, GroupSnapshot] = {}

    @property
    def fallbacks(self) -> FallbackColors:
        return get_fallback_colors(self.name, self.background)

    def apply(self, context: InMemoryThemeContext) -> None:
        """Load every group into ``context``."""
        for group, snapshot in self.groups.items():
            for space in ColorSpace:
                for attribute in Attribute:
                    value = getattr(snapshot, f"{space.value}{attribute.value}")
                    if value is not None:
                        context.set_attribute(group, attribute, space, value)
            if snapshot.link is not None:
                context.link(LinkDirective(alias=group, target=snapshot.link))

    def to_context(self) -> InMemoryThemeContext:
        """Return a fresh context holding this colour scheme."""
        context = InMemoryThemeContext()
        self.apply(context)
        return context


def load_colorscheme(path: Path) -> ColorScheme:
    """Load a colour-scheme snapshot.

    Args:
        path: TOML file to read.

    Returns:
        The parsed colour scheme.

    Raises:
        ColorSchemeError: If the file is missing, not TOML, or has an invalid layout.
    """
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except FileNotFoundError as e:
        raise ColorSchemeError(f"Colour scheme not found: {path}") from e
    except OSError as e:
        raise ColorSchemeError(f"Cannot read colour scheme {path}: {e}") from e
    except tomllib.TOMLDecodeError as e:
        raise ColorSchemeError(f"Invalid TOML in {path}: {e}") from e

    data.setdefault("name", path.stem)

    try:
        scheme = ColorScheme.model_validate(data)
    except ValidationError as e:
        raise ColorSchemeError(f"Invalid colour scheme {path}: {e}") from e

    logger.debug("Loaded colour scheme {} with {} groups", scheme.name, len(scheme.groups))
    return scheme
