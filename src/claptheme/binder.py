"""Copy a base group's foreground onto a derived group and put it to use.

A binding run does four things against a ``ThemeContext``:

1. resolve the base group's foreground in both colour spaces,
2. define the derived group with that foreground and a ``NONE`` background,
3. register a full-line syntax match that nests the icon head groups,
4. link the derived group to its link target for everything else.

The run is repeated from scratch whenever the colour scheme changes.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass

from claptheme.config.settings import BindingSettings
from claptheme.context import ThemeContext
from claptheme.logger import get_logger
from claptheme.models import (
    Attribute,
    ColorSpace,
    HighlightAttributeQuery,
    HighlightGroupDefinition,
    LinkDirective,
    SyntaxMatchRule,
    ThemeCommand,
)
from claptheme.themes import DEFAULT_DARK_FALLBACK, FallbackColors

logger = get_logger(__name__)

HeadGroupProvider = Callable[[], Sequence[str]]


@dataclass(frozen=True)
class BindingResult:
    """Commands issued for one binding, in issue order."""

    definition: HighlightGroupDefinition
    rule: SyntaxMatchRule
    link: LinkDirective | None = None

    @property
    def commands(self) -> list[ThemeCommand]:
        commands: list[ThemeCommand] = [self.definition, self.rule]
        if self.link is not None:
            commands.append(self.link)
        return commands


class ThemeBinder:
    """Applies highlight bindings through an injected host context."""

    def __init__(self, context: ThemeContext, fallbacks: FallbackColors = DEFAULT_DARK_FALLBACK) -> None:
        self.context = context
        self.fallbacks = fallbacks

    def resolve_attribute(self, group: str, attribute: Attribute, space: ColorSpace, fallback: str) -> str:
        """Look up a colour, returning ``fallback`` when it is undefined.

        Args:
            group: Highlight group to read.
            attribute: Which colour of the group.
            space: Terminal or graphical colour space.
            fallback: Literal returned on a miss.

        Returns:
            The group's effective colour, or ``fallback``.
        """
        value = self.context.get_attribute(group, attribute, space)
        if value is None:
            logger.debug("{}.{}{} undefined, using fallback {}", group, space.value, attribute.value, fallback)
            return fallback
        return value

    def resolve(self, query: HighlightAttributeQuery) -> str:
        return self.resolve_attribute(query.group_name, query.attribute, query.color_space, query.fallback)

    def define_highlight_group(self, definition: HighlightGroupDefinition) -> None:
        logger.debug(
            "Defining {} ctermfg={} guifg={}",
            definition.name,
            definition.cterm_fg,
            definition.gui_fg,
        )
        self.context.define(definition)

    def register_syntax_match(self, rule: SyntaxMatchRule) -> None:
        if not rule.contained_groups:
            logger.debug("Syntax match for {} contains no groups", rule.group_name)
        self.context.syntax_match(rule)

    def link_group(self, alias: str, target: str) -> LinkDirective:
        directive = LinkDirective(alias=alias, target=target)
        self.context.link(directive)
        return directive

    def bind(self, binding: BindingSettings, contained_groups: Iterable[str] = ()) -> BindingResult:
        """Apply one binding.

        Args:
            binding: Which group to derive, from where, and how to match it.
            contained_groups: Head groups nested inside each matched line.
                Ignored when the binding lists its own ``contained_groups``.

        Returns:
            The commands that were issued.
        """
        cterm_fallback = binding.cterm_fallback or self.fallbacks.cterm
        gui_fallback = binding.gui_fallback or self.fallbacks.gui

        definition = HighlightGroupDefinition(
            name=binding.group,
            cterm_fg=self.resolve(
                HighlightAttributeQuery(
                    group_name=binding.base_group,
                    attribute=Attribute.FG,
                    color_space=ColorSpace.CTERM,
                    fallback=cterm_fallback,
                )
            ),
            gui_fg=self.resolve(
                HighlightAttributeQuery(
                    group_name=binding.base_group,
                    attribute=Attribute.FG,
                    color_space=ColorSpace.GUI,
                    fallback=gui_fallback,
                )
            ),
        )
        self.define_highlight_group(definition)

        groups = binding.contained_groups if binding.contained_groups is not None else contained_groups
        rule = SyntaxMatchRule(group_name=binding.group, pattern=binding.pattern, contained_groups=groups)
        self.register_syntax_match(rule)

        link = None
        if binding.link_target:
            link = self.link_group(binding.group, binding.link_target)

        logger.info("Bound {} to {}", binding.group, binding.base_group)
        return BindingResult(definition=definition, rule=rule, link=link)

    def bind_all(
        self,
        bindings: Iterable[BindingSettings],
        group_provider: HeadGroupProvider | None = None,
    ) -> list[BindingResult]:
        """Apply every binding in order.

        The head groups are requested once per run so that every binding
        nests the same list.
        """
        head_groups: Sequence[str] = group_provider() if group_provider is not None else ()
        return [self.bind(binding, head_groups) for binding in bindings]


def static_head_groups(groups: Iterable[str]) -> HeadGroupProvider:
    """Build a head group provider that always returns ``groups``."""
    frozen = tuple(groups)
    return lambda: frozen
