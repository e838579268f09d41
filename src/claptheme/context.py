"""Host editor API and an in-memory host.

``ThemeContext`` is the only way the binder touches highlight and syntax
state. ``InMemoryThemeContext`` keeps both tables in dictionaries and follows
links on lookup the way an editor resolves a group to its final attributes.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Protocol, runtime_checkable

from claptheme.logger import get_logger
from claptheme.models import (
    Attribute,
    ColorSpace,
    HighlightGroupDefinition,
    LinkDirective,
    SyntaxMatchRule,
    attribute_key,
    is_unset,
)

logger = get_logger(__name__)


@runtime_checkable
class ThemeContext(Protocol):
    """Highlight and syntax services provided by the host editor."""

    def get_attribute(self, group: str, attribute: Attribute, space: ColorSpace) -> str | None:
        """Return the effective colour, or None if the group or attribute is undefined."""
        ...

    def define(self, definition: HighlightGroupDefinition) -> None:
        """Create or overwrite a highlight group with explicit colours."""
        ...

    def link(self, directive: LinkDirective) -> None:
        """Make ``directive.alias`` inherit from ``directive.target``."""
        ...

    def syntax_match(self, rule: SyntaxMatchRule) -> None:
        """Register a syntax match rule for the current buffer type."""
        ...


@dataclass
class HighlightEntry:
    """One row of the highlight table."""

    attributes: dict[str, str] = field(default_factory=dict)
    link: str | None = None


class InMemoryThemeContext:
    """Highlight and syntax tables held in memory.

    Explicit attributes on a group take precedence over its link; attributes
    the group does not set are looked up on the link target, recursively.
    ``NONE`` is stored as given but reported as undefined.
    """

    def __init__(self) -> None:
        self._highlights: dict[str, HighlightEntry] = {}
        self._syntax: dict[str, SyntaxMatchRule] = {}

    # ------------------------------------------------------------------
    # ThemeContext
    # ------------------------------------------------------------------

    def get_attribute(self, group: str, attribute: Attribute, space: ColorSpace) -> str | None:
        key = attribute_key(attribute, space)
        visited: list[str] = []
        current: str | None = group

        while current is not None:
            if current in visited:
                logger.warning("Highlight link cycle: {}", " -> ".join([*visited, current]))
                return None
            visited.append(current)

            entry = self._highlights.get(current)
            if entry is None:
                return None
            if key in entry.attributes:
                value = entry.attributes[key]
                return None if is_unset(value) else value
            current = entry.link

        return None

    def define(self, definition: HighlightGroupDefinition) -> None:
        entry = self._highlights.setdefault(definition.name, HighlightEntry())
        entry.attributes.update(definition.attributes())

    def link(self, directive: LinkDirective) -> None:
        entry = self._highlights.setdefault(directive.alias, HighlightEntry())
        entry.link = directive.target

    def syntax_match(self, rule: SyntaxMatchRule) -> None:
        if rule.group_name in self._syntax:
            logger.debug("Replacing syntax match for {}", rule.group_name)
        self._syntax[rule.group_name] = rule

    # ------------------------------------------------------------------
    # Table access
    # ------------------------------------------------------------------

    def set_attribute(self, group: str, attribute: Attribute, space: ColorSpace, value: str) -> None:
        """Set a single attribute, as a colour scheme does when it loads."""
        entry = self._highlights.setdefault(group, HighlightEntry())
        entry.attributes[attribute_key(attribute, space)] = value

    def has_group(self, group: str) -> bool:
        return group in self._highlights

    def get_link(self, group: str) -> str | None:
        entry = self._highlights.get(group)
        return entry.link if entry else None

    def get_syntax_match(self, group: str) -> SyntaxMatchRule | None:
        return self._syntax.get(group)

    @property
    def groups(self) -> list[str]:
        return sorted(self._highlights)

    def snapshot(self) -> dict[str, Any]:
        """Return a plain-data copy of both tables."""
        return {
            "highlights": {
                name: {"attributes": dict(entry.attributes), "link": entry.link}
                for name, entry in sorted(self._highlights.items())
            },
            "syntax": {name: rule.model_dump() for name, rule in sorted(self._syntax.items())},
        }

    def reset(self) -> None:
        """Drop all highlight and syntax state, as on a colour-scheme reload."""
        self._highlights.clear()
        self._syntax.clear()
