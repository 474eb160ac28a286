"""Logger settings resolved from the environment and optional YAML files."""

from __future__ import annotations

import logging
import os
from functools import lru_cache
from pathlib import Path
from typing import Any, Optional, Union

import yaml
from pydantic import BaseModel, Field, field_validator

from .config import (
    DEFAULT_DATE_FORMAT,
    DEFAULT_DIVIDER_WIDTH,
    DEFAULT_TIMEZONE,
    DEFAULT_TYPE_WIDTH,
    RenderConfig,
)
from .options import Disabled, is_off_word

logger = logging.getLogger(__name__)


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return not is_off_word(raw)


def _env_width(name: str, default: int) -> Optional[int]:
    raw = os.getenv(name)
    if raw is None:
        return default
    if is_off_word(raw):
        return None
    return int(raw)


def _env_text(name: str, default: Optional[str]) -> Optional[str]:
    raw = os.getenv(name)
    if raw is None:
        return default
    if is_off_word(raw):
        return None
    return raw


class LoggySettings(BaseModel):
    """Environment-driven defaults for new loggers (``LOGGY_*`` variables)."""

    write_enabled: bool = Field(default_factory=lambda: _env_bool("LOGGY_WRITE_ENABLED", True))
    type_width: Optional[int] = Field(
        default_factory=lambda: _env_width("LOGGY_TYPE_WIDTH", DEFAULT_TYPE_WIDTH)
    )
    divider_width: Optional[int] = Field(
        default_factory=lambda: _env_width("LOGGY_DIVIDER_WIDTH", DEFAULT_DIVIDER_WIDTH)
    )
    show_divider: bool = Field(default_factory=lambda: _env_bool("LOGGY_SHOW_DIVIDER", True))
    align_right_separator: Optional[str] = Field(
        default_factory=lambda: os.getenv("LOGGY_ALIGN_RIGHT_SEPARATOR") or None
    )
    date_format: Optional[str] = Field(
        default_factory=lambda: _env_text("LOGGY_DATE_FORMAT", DEFAULT_DATE_FORMAT)
    )
    timezone: Optional[str] = Field(
        default_factory=lambda: _env_text("LOGGY_TIMEZONE", DEFAULT_TIMEZONE)
    )
    log_level: str = Field(default_factory=lambda: os.getenv("LOGGY_LOG_LEVEL", "WARNING"))

    @field_validator("type_width", "divider_width", mode="before")
    @classmethod
    def _width_or_off(cls, value: Any) -> Any:
        # YAML reads "off"/"no" as False
        if value is False or (isinstance(value, str) and is_off_word(value)):
            return None
        if isinstance(value, int) and not isinstance(value, bool) and value < 0:
            raise ValueError("width must not be negative")
        return value

    @field_validator("date_format", "timezone", mode="before")
    @classmethod
    def _text_or_off(cls, value: Any) -> Any:
        if value is False or (isinstance(value, str) and is_off_word(value)):
            return None
        return value

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level {value!r}")
        return level

    @classmethod
    def from_file(cls, path: Union[str, Path], **overrides: Any) -> "LoggySettings":
        """Load a YAML mapping of settings on top of the environment defaults."""
        path = Path(path)
        if not path.is_file():
            raise ValueError(f"Settings file not found: {path}")
        try:
            data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
        except yaml.YAMLError as exc:
            raise ValueError(f"Invalid YAML in {path}: {exc}") from exc
        if not isinstance(data, dict):
            raise ValueError(f"Settings file {path} must contain a mapping")

        unknown = sorted(set(map(str, data)) - set(cls.model_fields))
        if unknown:
            logger.warning("Ignoring unknown settings in %s: %s", path, ", ".join(unknown))

        data.update(overrides)
        return cls.model_validate(data)

    def to_render_config(self) -> RenderConfig:
        divider: Any = self.divider_width
        if divider is not None and not self.show_divider:
            divider = Disabled(divider)
        return RenderConfig(
            write_enabled=self.write_enabled,
            type_width=self.type_width,
            divider_width=divider,
            align_right_separator=self.align_right_separator,
            date_format=self.date_format,
            timezone=self.timezone,
        )


@lru_cache()
def get_settings() -> LoggySettings:
    return LoggySettings()
