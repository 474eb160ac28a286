"""Render configuration for a single logger."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, fields
from typing import Any, Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from .options import DISABLED, Disabled, Enabled, Option, as_text, as_width

logger = logging.getLogger(__name__)

DEFAULT_TYPE_WIDTH = 10
DEFAULT_DIVIDER_WIDTH = 80
DEFAULT_DATE_FORMAT = "%a %B %-d, %-H:%M:%S %Z, %Y"
DEFAULT_TIMEZONE = "UTC"

_COERCE = {
    "write_enabled": bool,
    "type_width": as_width,
    "divider_width": as_width,
    "align_right_separator": as_text,
    "date_format": as_text,
    "timezone": as_text,
}


@dataclass
class RenderConfig:
    """How a logger lays out its report.

    Every field except ``write_enabled`` is an option. Raw values are
    accepted and coerced: ``None``/``False``/``0`` switch a field off.
    Set ``divider_width=Disabled(80)`` to hide the divider while keeping
    column 80 as the right edge for aligned text.
    """

    write_enabled: bool = True
    type_width: Option = field(default_factory=lambda: Enabled(DEFAULT_TYPE_WIDTH))
    divider_width: Option = field(default_factory=lambda: Enabled(DEFAULT_DIVIDER_WIDTH))
    align_right_separator: Option = DISABLED
    date_format: Option = field(default_factory=lambda: Enabled(DEFAULT_DATE_FORMAT))
    timezone: Option = field(default_factory=lambda: Enabled(DEFAULT_TIMEZONE))

    def __setattr__(self, name: str, value: Any) -> None:
        coerce = _COERCE.get(name)
        if coerce is not None:
            value = coerce(value)
        super().__setattr__(name, value)
        if name == "timezone":
            self.tzinfo()

    @classmethod
    def hidden_divider(cls, width: int = DEFAULT_DIVIDER_WIDTH, **kwargs: Any) -> "RenderConfig":
        return cls(divider_width=Disabled(width), **kwargs)

    @classmethod
    def from_kwargs(cls, **kwargs: Any) -> "RenderConfig":
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(kwargs) - known)
        if unknown:
            logger.warning("Ignoring unknown render options: %s", ", ".join(unknown))
        return cls(**{k: v for k, v in kwargs.items() if k in known})

    @property
    def alignment_column(self) -> Optional[int]:
        """Right edge for aligned text; set even when the divider is hidden."""
        return self.divider_width.value

    def tzinfo(self) -> Optional[ZoneInfo]:
        """Zone for the timestamp header, ``None`` for the local zone."""
        if not self.timezone:
            return None
        try:
            return ZoneInfo(self.timezone.value)
        except (ZoneInfoNotFoundError, ValueError) as exc:
            raise ValueError(f"Unknown timezone identifier: {self.timezone.value!r}") from exc
