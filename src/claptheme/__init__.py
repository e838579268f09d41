"""Highlight group bindings for file-listing pickers."""

from claptheme.binder import BindingResult, HeadGroupProvider, ThemeBinder, static_head_groups
from claptheme.context import InMemoryThemeContext, ThemeContext
from claptheme.models import (
    Attribute,
    ColorSpace,
    HighlightAttributeQuery,
    HighlightGroupDefinition,
    LinkDirective,
    SyntaxMatchRule,
)

__all__ = [
    "Attribute",
    "BindingResult",
    "ColorSpace",
    "HeadGroupProvider",
    "HighlightAttributeQuery",
    "HighlightGroupDefinition",
    "InMemoryThemeContext",
    "LinkDirective",
    "SyntaxMatchRule",
    "ThemeBinder",
    "ThemeContext",
    "static_head_groups",
]
