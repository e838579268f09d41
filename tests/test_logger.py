"""Tests for the logging module."""

import importlib
from collections.abc import Iterator
from pathlib import Path

import pytest
from loguru import logger

import claptheme.logger
from claptheme.binder import ThemeBinder
from claptheme.context import InMemoryThemeContext
from claptheme.logger import configure_logging, get_logger, reset_logging
from claptheme.models import Attribute, ColorSpace


class TestGetLogger:
    def test_returns_logger_instance(self) -> None:
        logger = get_logger("test_module")
        assert logger is not None

    def test_logger_has_level_methods(self) -> None:
        logger = get_logger("test_module")
        assert hasattr(logger, "info")
        assert hasattr(logger, "debug")
        assert hasattr(logger, "warning")
        assert hasattr(logger, "error")


class TestConfigureLogging:
    def test_returns_handler_ids(self) -> None:
        handler_ids = configure_logging("INFO")
        assert len(handler_ids) == 1
        assert all(isinstance(handler_id, int) for handler_id in handler_ids)

    def test_level_is_case_insensitive(self) -> None:
        assert len(configure_logging("debug")) == 1

    def test_unknown_level(self) -> None:
        with pytest.raises(ValueError):
            configure_logging("LOUD")

    def test_writes_to_stderr(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_logging("INFO")
        get_logger("claptheme.test").info("bound ClapFile")
        assert "bound ClapFile" in capsys.readouterr().err

    def test_below_level_is_dropped(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_logging("WARNING")
        get_logger("claptheme.test").info("quiet")
        assert "quiet" not in capsys.readouterr().err

    def test_file_sink(self, tmp_path: Path) -> None:
        log_file = tmp_path / "logs" / "claptheme.log"
        handler_ids = configure_logging("DEBUG", log_file)
        get_logger("claptheme.test").debug("to file")
        reset_logging()

        assert len(handler_ids) == 2
        assert "to file" in log_file.read_text()

    def test_reconfigure_replaces_handlers(self) -> None:
        first = configure_logging("INFO")
        second = configure_logging("DEBUG")
        assert set(first).isdisjoint(second)


class TestHostApplication:
    """claptheme shares loguru's global logger with the application importing it."""

    @pytest.fixture
    def host_messages(self) -> Iterator[list[str]]:
        messages: list[str] = []
        handler_id = logger.add(messages.append, level="DEBUG", format="{name} | {message}")
        yield messages
        logger.remove(handler_id)

    @staticmethod
    def _resolve_with_fallback() -> None:
        ThemeBinder(InMemoryThemeContext()).resolve_attribute("Normal", Attribute.FG, ColorSpace.CTERM, "999")

    def test_import_keeps_existing_handlers(self, host_messages: list[str]) -> None:
        importlib.reload(claptheme.logger)
        logger.info("host still listening")
        assert any("host still listening" in message for message in host_messages)

    def test_silent_without_configuration(self, host_messages: list[str]) -> None:
        reset_logging()
        self._resolve_with_fallback()
        assert not any("claptheme.binder" in message for message in host_messages)

    def test_configure_enables_package_messages(self, host_messages: list[str]) -> None:
        configure_logging("DEBUG")
        self._resolve_with_fallback()
        assert any("using fallback 999" in message for message in host_messages)

    def test_reset_silences_package_again(self, host_messages: list[str]) -> None:
        configure_logging("DEBUG")
        reset_logging()
        self._resolve_with_fallback()
        assert not any("using fallback 999" in message for message in host_messages)

    def test_configure_keeps_host_handlers(self, host_messages: list[str]) -> None:
        configure_logging("INFO")
        logger.info("after configure")
        assert any("after configure" in message for message in host_messages)
