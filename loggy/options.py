"""Tagged option values for settings that can be switched off."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Union


@dataclass(frozen=True)
class Enabled:
    """An active setting carrying its value."""

    value: Any

    @property
    def enabled(self) -> bool:
        return True

    def __bool__(self) -> bool:
        return True


@dataclass(frozen=True)
class Disabled:
    """An inactive setting.

    A disabled option may still carry a value: a hidden divider keeps its
    width so right-aligned text has a column to align to.
    """

    value: Any = None

    @property
    def enabled(self) -> bool:
        return False

    def __bool__(self) -> bool:
        return False


Option = Union[Enabled, Disabled]

DISABLED = Disabled()

_OFF_WORDS = {"", "0", "off", "false", "no", "none", "disabled"}


def is_off_word(raw: Optional[str]) -> bool:
    """True when an environment/config string means "switched off"."""
    return raw is None or raw.strip().lower() in _OFF_WORDS


def as_width(value: Any) -> Option:
    """Coerce a loose width value into an option.

    ``None``, ``False`` and ``0`` disable; positive integers enable.
    """
    if isinstance(value, (Enabled, Disabled)):
        if value.value is not None:
            _check_width(value.value)
        if value.enabled and not value.value:
            return DISABLED
        return value
    if value is None or value is False:
        return DISABLED
    _check_width(value)
    if value == 0:
        return DISABLED
    return Enabled(int(value))


def as_text(value: Any) -> Option:
    """Coerce a loose string setting (``None``/``False``/``""`` disable)."""
    if isinstance(value, (Enabled, Disabled)):
        return value
    if value is None or value is False or value == "":
        return DISABLED
    if not isinstance(value, str):
        raise ValueError(f"Expected a string or None, got {value!r}")
    return Enabled(value)


def _check_width(value: Any) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"Width must be an integer, got {value!r}")
    if value < 0:
        raise ValueError(f"Width must not be negative, got {value}")
