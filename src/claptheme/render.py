"""Render theme commands as Vim ex commands.

``ScriptContext`` wraps another context: lookups and state changes go to the
wrapped context, and every change is also recorded as a line of Vim script.
"""

from __future__ import annotations

import re
from functools import singledispatch
from pathlib import Path

from claptheme.context import ThemeContext
from claptheme.models import (
    Attribute,
    ColorSpace,
    HighlightGroupDefinition,
    LinkDirective,
    SyntaxMatchRule,
    ThemeCommand,
)

# Candidate pattern delimiters, tried in order
PATTERN_DELIMITERS = ("/", "#", "!", "+", "~", "@")

_UNESCAPED_SLASH = re.compile(r"(?<!\\)/")


def pattern_delimiter(pattern: str) -> str:
    """Pick a delimiter that does not occur in the pattern.

    Falls back to ``/`` when every candidate occurs; ``delimit_pattern``
    then escapes the slashes in the pattern.
    """
    for delimiter in PATTERN_DELIMITERS:
        if delimiter not in pattern:
            return delimiter
    return "/"


def delimit_pattern(pattern: str) -> str:
    """Wrap a pattern in delimiters for a ``syntax match`` command.

    Examples:
        >>> delimit_pattern("^.*")
        '/^.*/'
        >>> delimit_pattern("a/b#c!d+e~f@g")
        '/a\\\\/b#c!d+e~f@g/'
    """
    delimiter = pattern_delimiter(pattern)
    if delimiter in pattern:
        pattern = _UNESCAPED_SLASH.sub(r"\\/", pattern)
    return f"{delimiter}{pattern}{delimiter}"


@singledispatch
def render_command(command: ThemeCommand) -> str:
    """Render a command as a single Vim ex command."""
    raise TypeError(f"Cannot render {type(command).__name__}")


@render_command.register
def _(command: HighlightGroupDefinition) -> str:
    return (
        f"highlight {command.name}"
        f" ctermfg={command.cterm_fg} ctermbg={command.cterm_bg}"
        f" guifg={command.gui_fg} guibg={command.gui_bg}"
    )


@render_command.register
def _(command: SyntaxMatchRule) -> str:
    line = f"syntax match {command.group_name} {delimit_pattern(command.pattern)}"
    if command.contained_groups:
        line += f" contains={command.contains_clause}"
    return line


@render_command.register
def _(command: LinkDirective) -> str:
    # Vim skips a default link when the group already has settings of its own
    return f"highlight default link {command.alias} {command.target}"


class ScriptContext:
    """Records rendered commands while delegating to a backing context."""

    def __init__(self, backing: ThemeContext) -> None:
        self.backing = backing
        self.lines: list[str] = []

    def get_attribute(self, group: str, attribute: Attribute, space: ColorSpace) -> str | None:
        return self.backing.get_attribute(group, attribute, space)

    def define(self, definition: HighlightGroupDefinition) -> None:
        self.backing.define(definition)
        self.lines.append(render_command(definition))

    def link(self, directive: LinkDirective) -> None:
        self.backing.link(directive)
        self.lines.append(render_command(directive))

    def syntax_match(self, rule: SyntaxMatchRule) -> None:
        self.backing.syntax_match(rule)
        self.lines.append(render_command(rule))

    def script(self, header: str | None = None) -> str:
        """Return the recorded commands as a Vim script."""
        lines = [f'" {header}'] if header else []
        lines.extend(self.lines)
        return "\n".join(lines) + "\n"

    def write(self, path: Path, header: str | None = None) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(self.script(header), encoding="utf-8")
