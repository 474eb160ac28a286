"""Plain-text report rendering for stored log entries.

A report block looks like::

    --------------------------------------------------------------------------------
    Mon October 19, 9:05:03 UTC, 2026
    ERROR      | disk full                                             /var/log
    INFO       | done

The divider and the timestamp line are optional. The type column is padded
to ``type_width`` and followed by ``" | "``. When a right-align separator is
configured, the text after it is pushed right so it ends on the divider
width column.
"""

from __future__ import annotations

import logging
import re
from datetime import datetime, tzinfo
from typing import Callable, List, Optional, Sequence

from .config import RenderConfig
from .sinks import Sink
from .store import LogEntry

logger = logging.getLogger(__name__)

TYPE_SEPARATOR = " | "

# %-d style directives are glibc-only; expand them before strftime sees the format
_UNPADDED = re.compile(r"%%|%-([dmHIMS])")

Clock = Callable[[Optional[tzinfo]], datetime]


def _now(tz: Optional[tzinfo]) -> datetime:
    if tz is None:
        return datetime.now().astimezone()
    return datetime.now(tz)


def _expand_unpadded(date_format: str, moment: datetime) -> str:
    """Replace ``%-d``, ``%-m``, ``%-H``, ``%-I``, ``%-M`` and ``%-S`` with unpadded numbers."""

    def replace(match: "re.Match[str]") -> str:
        directive = match.group(1)
        if directive is None:
            return match.group(0)
        if directive == "I":
            return str(moment.hour % 12 or 12)
        value = {
            "d": moment.day,
            "m": moment.month,
            "H": moment.hour,
            "M": moment.minute,
            "S": moment.second,
        }[directive]
        return str(value)

    return _UNPADDED.sub(replace, date_format)


class LogRenderer:
    """Format entries according to a :class:`RenderConfig`."""

    def __init__(self, config: RenderConfig, clock: Optional[Clock] = None) -> None:
        self.config = config
        self.clock = clock or _now

    def divider_line(self) -> Optional[str]:
        if not self.config.divider_width:
            return None
        return "-" * self.config.divider_width.value

    def timestamp_line(self) -> Optional[str]:
        if not self.config.date_format:
            return None
        moment = self.clock(self.config.tzinfo())
        return moment.strftime(_expand_unpadded(self.config.date_format.value, moment))

    def split_message(self, message: str) -> List[str]:
        separator = self.config.align_right_separator
        if separator and separator.value in message:
            left, right = message.split(separator.value, 1)
            return [left, right]
        return [message]

    def format_entry(self, entry: LogEntry) -> str:
        """Render one entry without its trailing newline."""
        parts: List[str] = []
        indent = 0

        type_width = self.config.type_width
        if type_width:
            parts.append(entry.type)
            parts.append(" " * max(0, type_width.value - len(entry.type)))
            parts.append(TYPE_SEPARATOR)
            indent += type_width.value + len(TYPE_SEPARATOR)

        message = self.split_message(entry.message)
        left = message[0]
        parts.append(left)

        if len(message) > 1:
            right = message[1]
            indent += len(left) + len(right)
            column = self.config.alignment_column
            if column is not None:
                parts.append(" " * max(0, column - indent))
            parts.append(right)

        return "".join(parts)

    def render(self, entries: Sequence[LogEntry]) -> str:
        lines: List[str] = []
        divider = self.divider_line()
        if divider is not None:
            lines.append(divider)
        stamp = self.timestamp_line()
        if stamp is not None:
            lines.append(stamp)
        lines.extend(self.format_entry(entry) for entry in entries)
        return "".join(line + "\n" for line in lines)

    def write(self, entries: Sequence[LogEntry], destination: str, sink: Sink) -> bool:
        """Append the rendered block to ``destination``.

        Returns ``False`` without touching the sink when there is nothing to
        write, and ``False`` when the sink cannot be opened or written.
        """
        if not entries:
            return False

        text = self.render(entries)
        try:
            with sink.open(destination) as handle:
                written = handle.write(text)
        except (OSError, ValueError) as exc:
            # ValueError covers unencodable text and NUL bytes in the path
            logger.debug("Could not write log report to %s: %s", destination, exc)
            return False

        if not written:
            logger.debug("Sink for %s reported an empty write", destination)
            return False
        return True
