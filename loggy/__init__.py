"""Loggy: an in-memory typed log buffer with aligned plain-text reports."""

from .config import RenderConfig
from .logger import Loggy
from .options import DISABLED, Disabled, Enabled
from .renderer import LogRenderer
from .sinks import FileSink, StreamSink
from .store import LogEntry, LogStore

__all__ = [
    "DISABLED",
    "Disabled",
    "Enabled",
    "FileSink",
    "LogEntry",
    "LogRenderer",
    "LogStore",
    "Loggy",
    "RenderConfig",
    "StreamSink",
]
