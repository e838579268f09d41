"""Typed commands and queries exchanged with the host editor.

Every value here is immutable. A binding run builds these objects and hands
them to a ``ThemeContext``; nothing is turned into command text until it
reaches ``claptheme.render``.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, field_validator

NONE_COLOR = "NONE"
CONTAINS_DELIMITER = ","


class Attribute(str, Enum):
    """Colour attributes of a highlight group."""

    FG = "fg"
    BG = "bg"
    SP = "sp"


class ColorSpace(str, Enum):
    """Terminal palette or graphical colours."""

    CTERM = "cterm"
    GUI = "gui"


def attribute_key(attribute: Attribute, space: ColorSpace) -> str:
    """Return the host key for an attribute, e.g. ``ctermfg`` or ``guibg``."""
    return f"{space.value}{attribute.value}"


def is_unset(value: str | None) -> bool:
    """Check whether a colour value means "no colour"."""
    return value is None or value == "" or value.upper() == NONE_COLOR


class HighlightAttributeQuery(BaseModel):
    """A single colour lookup against the colour-scheme table."""

    model_config = ConfigDict(frozen=True)

    group_name: str
    attribute: Attribute = Attribute.FG
    color_space: ColorSpace = ColorSpace.CTERM
    fallback: str


class HighlightGroupDefinition(BaseModel):
    """Explicit colours for a highlight group.

    Backgrounds default to ``NONE`` so the group stays transparent over
    whatever the window background is.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    cterm_fg: str
    cterm_bg: str = NONE_COLOR
    gui_fg: str
    gui_bg: str = NONE_COLOR

    def attributes(self) -> dict[str, str]:
        """Return the explicit attributes keyed by host attribute name."""
        return {
            attribute_key(Attribute.FG, ColorSpace.CTERM): self.cterm_fg,
            attribute_key(Attribute.BG, ColorSpace.CTERM): self.cterm_bg,
            attribute_key(Attribute.FG, ColorSpace.GUI): self.gui_fg,
            attribute_key(Attribute.BG, ColorSpace.GUI): self.gui_bg,
        }


class SyntaxMatchRule(BaseModel):
    """A pattern that highlights whole lines and nests other groups inside them."""

    model_config = ConfigDict(frozen=True)

    group_name: str
    pattern: str = "^.*"
    contained_groups: tuple[str, ...] = ()

    @field_validator("contained_groups", mode="before")
    @classmethod
    def _coerce_groups(cls, value: object) -> object:
        # Accept any ordered iterable (lists from config, generators from providers)
        if isinstance(value, str):
            return (value,)
        if value is not None and not isinstance(value, tuple):
            return tuple(value)  # type: ignore[call-overload]
        return value

    @property
    def contains_clause(self) -> str:
        """Comma-joined contained groups, order preserved.

        Examples:
            >>> SyntaxMatchRule(group_name="ClapFile", contained_groups=["A", "B", "C"]).contains_clause
            'A,B,C'
        """
        return CONTAINS_DELIMITER.join(self.contained_groups)


class LinkDirective(BaseModel):
    """Make ``alias`` inherit every attribute it does not set from ``target``."""

    model_config = ConfigDict(frozen=True)

    alias: str
    target: str


ThemeCommand = HighlightGroupDefinition | SyntaxMatchRule | LinkDirective
