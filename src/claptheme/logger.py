"""Logging configuration using loguru.

claptheme is imported by editor plugins and other applications, so it leaves
the global logger alone: its own messages are disabled until
``configure_logging`` is called, and only the handlers added there are ever
removed again. Applications that already run loguru can call
``logger.enable("claptheme")`` to route the messages to their own sinks.
"""

import sys
from pathlib import Path
from typing import TYPE_CHECKING

from loguru import logger

if TYPE_CHECKING:
    import loguru

PACKAGE = "claptheme"

LOG_LEVELS: tuple[str, ...] = ("TRACE", "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
DEFAULT_LOG_LEVEL = "WARNING"

STDERR_FORMAT = "<level>{level: <8}</level> | {name} - {message}"
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}"

logger.disable(PACKAGE)


class _LoggingState:
    """Handler ids installed by ``configure_logging``."""

    def __init__(self) -> None:
        self.handler_ids: list[int] = []


_state = _LoggingState()


def get_logger(name: str) -> "loguru.Logger":
    """Get a logger instance with the given name.

    Args:
        name: The name for the logger (typically __name__).

    Returns:
        A configured logger instance.
    """
    return logger.bind(name=name)


def configure_logging(
    level: str = DEFAULT_LOG_LEVEL,
    log_file: Path | None = None,
    exclusive: bool = False,
) -> list[int]:
    """Enable claptheme's messages and install a stderr sink and, optionally, a file sink.

    Calling this again replaces the handlers installed by the previous call.

    Args:
        level: Minimum level for both sinks.
        log_file: Optional path of a log file. Parent directories are created.
        exclusive: Also remove every other loguru handler, including loguru's
            default one. Only the command-line entry point, which owns the
            process, passes True.

    Returns:
        The ids of the installed handlers.

    Raises:
        ValueError: If the level is not a known loguru level name.
    """
    level = level.upper()
    if level not in LOG_LEVELS:
        raise ValueError(f"Unknown log level: {level!r}")

    reset_logging()
    if exclusive:
        logger.remove()

    _state.handler_ids.append(logger.add(sys.stderr, level=level, format=STDERR_FORMAT))

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        _state.handler_ids.append(
            logger.add(
                log_file,
                level=level,
                format=FILE_FORMAT,
                rotation="1 MB",
                retention=3,
                backtrace=True,
                diagnose=False,
            )
        )

    logger.enable(PACKAGE)
    return list(_state.handler_ids)


def reset_logging() -> None:
    """Remove the handlers installed by ``configure_logging`` and silence claptheme again."""
    for handler_id in _state.handler_ids:
        logger.remove(handler_id)
    _state.handler_ids.clear()
    logger.disable(PACKAGE)
