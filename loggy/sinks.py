"""Append-mode destinations for rendered reports."""

from __future__ import annotations

import os
from contextlib import contextmanager
from typing import ContextManager, Iterator, Protocol, TextIO


class SinkHandle(Protocol):
    def write(self, text: str) -> int: ...


class Sink(Protocol):
    """Opens a named destination for appending text."""

    def open(self, destination: str) -> ContextManager[SinkHandle]: ...


class FileSink:
    """Append reports to files on disk."""

    def __init__(self, encoding: str = "utf-8", create_dirs: bool = False) -> None:
        self.encoding = encoding
        self.create_dirs = create_dirs

    def open(self, destination: str) -> ContextManager[TextIO]:
        if self.create_dirs:
            directory = os.path.dirname(destination) or "."
            os.makedirs(directory, exist_ok=True)
        return open(destination, "a", encoding=self.encoding)


class StreamSink:
    """Write reports to an already-open text stream such as ``sys.stdout``.

    The destination name is ignored and the stream is left open.
    """

    def __init__(self, stream: TextIO) -> None:
        self.stream = stream

    @contextmanager
    def open(self, destination: str) -> Iterator[TextIO]:
        yield self.stream
        self.stream.flush()
