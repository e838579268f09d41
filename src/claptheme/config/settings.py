from typing import Literal

from pydantic import BaseModel, Field, field_validator

from claptheme.logger import DEFAULT_LOG_LEVEL

# Highlight groups of the file-listing picker
DEFAULT_GROUP = "ClapFile"
DEFAULT_BASE_GROUP = "Normal"
DEFAULT_LINK_TARGET = "TNormal"
DEFAULT_PATTERN = "^.*"


class BindingSettings(BaseModel):
    """One derived highlight group and the syntax match that uses it.

    The foreground of ``base_group`` is copied onto ``group`` in both colour
    spaces. When the base group has no foreground, ``cterm_fallback`` and
    ``gui_fallback`` are used; left unset, they come from the colour
    scheme's fallback table.
    """

    group: str = DEFAULT_GROUP
    base_group: str = DEFAULT_BASE_GROUP
    link_target: str | None = DEFAULT_LINK_TARGET  # None skips the link
    pattern: str = DEFAULT_PATTERN
    cterm_fallback: str | None = None
    gui_fallback: str | None = None
    contained_groups: list[str] | None = None  # None asks the head group provider


class LoggingSettings(BaseModel):
    level: Literal["TRACE", "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = DEFAULT_LOG_LEVEL  # type: ignore[assignment]
    file: str | None = None  # Path to a log file (supports ~ expansion)

    @field_validator("level", mode="before")
    @classmethod
    def _upper_level(cls, value: object) -> object:
        return value.upper() if isinstance(value, str) else value


class Settings(BaseModel):
    bindings: list[BindingSettings] = Field(default_factory=lambda: [BindingSettings()])
    head_groups: list[str] = Field(default_factory=list)
    logging: LoggingSettings = LoggingSettings()
