"""Tests for Vim script rendering."""

import pytest

from claptheme.binder import ThemeBinder
from claptheme.config.settings import BindingSettings
from claptheme.context import InMemoryThemeContext
from claptheme.models import Attribute, ColorSpace, HighlightGroupDefinition, LinkDirective, SyntaxMatchRule
from claptheme.render import ScriptContext, delimit_pattern, pattern_delimiter, render_command


class TestRenderCommand:
    def test_highlight_definition(self):
        definition = HighlightGroupDefinition(name="ClapFile", cterm_fg="249", gui_fg="#b2b2b2")
        assert render_command(definition) == "highlight ClapFile ctermfg=249 ctermbg=NONE guifg=#b2b2b2 guibg=NONE"

    def test_syntax_match_with_groups(self):
        rule = SyntaxMatchRule(group_name="ClapFile", contained_groups=["A", "B", "C"])
        assert render_command(rule) == "syntax match ClapFile /^.*/ contains=A,B,C"

    def test_syntax_match_without_groups(self):
        rule = SyntaxMatchRule(group_name="ClapFile")
        assert render_command(rule) == "syntax match ClapFile /^.*/"

    def test_syntax_match_pattern_with_slash(self):
        rule = SyntaxMatchRule(group_name="ClapPath", pattern="^.*/")
        assert render_command(rule) == "syntax match ClapPath #^.*/#"

    def test_link(self):
        directive = LinkDirective(alias="ClapFile", target="TNormal")
        assert render_command(directive) == "highlight default link ClapFile TNormal"

    def test_unknown_command(self):
        with pytest.raises(TypeError):
            render_command("highlight clear")


class TestPatternDelimiter:
    @pytest.mark.parametrize(
        "pattern,expected",
        [
            ("^.*", "/"),
            ("a/b", "#"),
            ("a/b#c", "!"),
            ("/#!+~", "@"),
        ],
    )
    def test_first_unused_delimiter(self, pattern, expected):
        assert pattern_delimiter(pattern) == expected

    def test_falls_back_to_slash(self):
        assert pattern_delimiter("/#!+~@") == "/"


class TestDelimitPattern:
    def test_free_delimiter_leaves_pattern_alone(self):
        assert delimit_pattern("a/b") == "#a/b#"

    def test_every_delimiter_used_escapes_slashes(self):
        assert delimit_pattern("a/b#c!d+e~f@g") == "/a\\/b#c!d+e~f@g/"

    def test_already_escaped_slash_kept(self):
        assert delimit_pattern("a\\/b/#!+~@") == "/a\\/b\\/#!+~@/"

    def test_syntax_match_with_every_delimiter(self):
        rule = SyntaxMatchRule(group_name="ClapPath", pattern="a/b#c!d+e~f@g", contained_groups=["A"])
        assert render_command(rule) == "syntax match ClapPath /a\\/b#c!d+e~f@g/ contains=A"


class TestScriptContext:
    def test_records_in_issue_order(self, context):
        script_context = ScriptContext(context)
        ThemeBinder(script_context).bind(BindingSettings(), ["ClapIcon1", "ClapIcon2"])
        assert script_context.lines == [
            "highlight ClapFile ctermfg=249 ctermbg=NONE guifg=#b2b2b2 guibg=NONE",
            "syntax match ClapFile /^.*/ contains=ClapIcon1,ClapIcon2",
            "highlight default link ClapFile TNormal",
        ]

    def test_define_sets_every_colour_before_default_link(self, context):
        script_context = ScriptContext(context)
        ThemeBinder(script_context).bind(BindingSettings(), [])
        define, link = script_context.lines[0], script_context.lines[-1]

        # Vim ignores the default link once ClapFile has settings
        assert link.startswith("highlight default link ClapFile")
        for attribute in ("ctermfg=", "ctermbg=", "guifg=", "guibg="):
            assert attribute in define
        assert context.get_attribute("ClapFile", Attribute.BG, ColorSpace.GUI) is None

    def test_applies_to_backing_context(self):
        backing = InMemoryThemeContext()
        script_context = ScriptContext(backing)
        script_context.define(HighlightGroupDefinition(name="ClapFile", cterm_fg="249", gui_fg="#b2b2b2"))
        assert backing.has_group("ClapFile")

    def test_lookups_do_not_record(self, context):
        script_context = ScriptContext(context)
        ThemeBinder(script_context).resolve_attribute("Normal", Attribute.FG, ColorSpace.CTERM, "999")
        assert script_context.lines == []

    def test_script_with_header(self):
        script_context = ScriptContext(InMemoryThemeContext())
        script_context.link(LinkDirective(alias="ClapFile", target="TNormal"))
        assert script_context.script(header="bindings") == '" bindings\nhighlight default link ClapFile TNormal\n'

    def test_empty_script(self):
        assert ScriptContext(InMemoryThemeContext()).script() == "\n"

    def test_write(self, tmp_path):
        script_context = ScriptContext(InMemoryThemeContext())
        script_context.syntax_match(SyntaxMatchRule(group_name="ClapFile"))
        path = tmp_path / "after" / "syntax" / "clap_files.vim"
        script_context.write(path)
        assert path.read_text() == "syntax match ClapFile /^.*/\n"
