"""Ordered in-memory store of typed log entries."""

from __future__ import annotations

from collections import abc
from dataclasses import dataclass
from typing import Any, FrozenSet, Iterable, Iterator, List, Optional, Union

TypeFilter = Union[str, Iterable[str], None]


@dataclass(frozen=True)
class LogEntry:
    type: str
    message: str


def normalize_types(types: Any) -> FrozenSet[str]:
    """Turn a filter argument into a set of labels.

    An empty result means "match every entry", never "match nothing".
    A bare string is a single label, not an iterable of characters.
    """
    if types is None:
        return frozenset()
    if isinstance(types, str):
        return frozenset((types,))
    if isinstance(types, abc.Iterable):
        return frozenset(str(label) for label in types)
    return frozenset((str(types),))


class LogStore:
    """Keep entries in insertion order and filter them by type."""

    def __init__(self, entries: Optional[Iterable[LogEntry]] = None) -> None:
        self._entries: List[LogEntry] = list(entries or [])

    def add(self, type: str, message: str) -> LogEntry:
        entry = LogEntry(type=type, message=message)
        self._entries.append(entry)
        return entry

    def clear(self, types: TypeFilter = ()) -> None:
        """Remove entries of the given types, or every entry for an empty filter."""
        wanted = normalize_types(types)
        if not wanted:
            self._entries = []
            return
        self._entries = [entry for entry in self._entries if entry.type not in wanted]

    def get(self, types: TypeFilter = ()) -> List[LogEntry]:
        """Return matching entries in insertion order (all of them for an empty filter)."""
        wanted = normalize_types(types)
        if not wanted:
            return list(self._entries)
        return [entry for entry in self._entries if entry.type in wanted]

    def count(self, types: TypeFilter = ()) -> int:
        wanted = normalize_types(types)
        if not wanted:
            return len(self._entries)
        return sum(1 for entry in self._entries if entry.type in wanted)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[LogEntry]:
        return iter(list(self._entries))

    def __bool__(self) -> bool:
        return bool(self._entries)
