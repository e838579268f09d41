"""Shared fixtures for claptheme tests."""

from pathlib import Path

import pytest

from claptheme.context import InMemoryThemeContext
from claptheme.logger import reset_logging
from claptheme.models import Attribute, ColorSpace

GRUVBOX_TOML = """\
name = "gruvbox"
background = "dark"

[groups.Normal]
ctermfg = "223"
ctermbg = "235"
guifg = "#ebdbb2"
guibg = "#282828"

[groups.TNormal]
link = "Normal"

[groups.Comment]
ctermfg = "245"
guifg = "#928374"
"""


@pytest.fixture(autouse=True)
def _reset_logging():
    """Drop log handlers installed during a test."""
    yield
    reset_logging()


@pytest.fixture
def context() -> InMemoryThemeContext:
    """Context holding a Normal group and a TNormal alias of it."""
    ctx = InMemoryThemeContext()
    ctx.set_attribute("Normal", Attribute.FG, ColorSpace.CTERM, "249")
    ctx.set_attribute("Normal", Attribute.FG, ColorSpace.GUI, "#b2b2b2")
    ctx.set_attribute("TNormal", Attribute.FG, ColorSpace.CTERM, "250")
    ctx.set_attribute("TNormal", Attribute.FG, ColorSpace.GUI, "#bcbcbc")
    ctx.set_attribute("TNormal", Attribute.BG, ColorSpace.GUI, "#1c1c1c")
    return ctx


@pytest.fixture
def gruvbox_path(tmp_path: Path) -> Path:
    path = tmp_path / "gruvbox.toml"
    path.write_text(GRUVBOX_TOML)
    return path


@pytest.fixture
def isolated_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the home and working directories at an empty temp directory."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.chdir(home)
    return home
