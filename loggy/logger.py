"""The ``Loggy`` facade: collect entries now, write a formatted report later."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, List, Optional

from .config import RenderConfig
from .renderer import Clock, LogRenderer
from .sinks import FileSink, Sink
from .store import LogEntry, LogStore, TypeFilter

if TYPE_CHECKING:  # pragma: no cover
    from .settings import LoggySettings

logger = logging.getLogger(__name__)


class Loggy:
    """In-memory typed log buffer with a plain-text report writer.

    Example::

        log = Loggy(type_width=10, date_format=None)
        log.add("ERROR", "disk full")
        log.write("report.log", types={"ERROR"})

    Filters are sets of type labels; an empty filter means every type.
    ``write`` never raises: it returns ``False`` when writing is disabled,
    nothing matches, or the destination cannot be written.
    """

    def __init__(
        self,
        config: Optional[RenderConfig] = None,
        store: Optional[LogStore] = None,
        sink: Optional[Sink] = None,
        clock: Optional[Clock] = None,
        **options: Any,
    ) -> None:
        if config is None:
            config = RenderConfig.from_kwargs(**options)
        elif options:
            logger.warning(
                "Ignoring render options %s because a config was given",
                ", ".join(sorted(options)),
            )
        self.config = config
        self.store = store if store is not None else LogStore()
        self.sink: Sink = sink if sink is not None else FileSink()
        self.renderer = LogRenderer(self.config, clock=clock)

    @classmethod
    def from_settings(cls, settings: Optional["LoggySettings"] = None, **kwargs: Any) -> "Loggy":
        from .settings import get_settings

        settings = settings or get_settings()
        return cls(config=settings.to_render_config(), **kwargs)

    def add(self, type: str, message: str) -> None:
        self.store.add(type, message)

    def clear(self, types: TypeFilter = ()) -> None:
        self.store.clear(types)

    def get(self, types: TypeFilter = ()) -> List[LogEntry]:
        return self.store.get(types)

    def count(self, types: TypeFilter = ()) -> int:
        return self.store.count(types)

    def render(self, types: TypeFilter = ()) -> str:
        """Formatted block for the matching entries, or ``""`` if none match."""
        items = self.store.get(types)
        if not items:
            return ""
        return self.renderer.render(items)

    def write(self, destination: str, types: TypeFilter = ()) -> bool:
        """Append the matching entries to ``destination`` through the sink."""
        if not self.config.write_enabled:
            logger.debug("Writing is disabled; skipping %s", destination)
            return False

        items = self.store.get(types)
        if not items:
            logger.debug("No log entries to write to %s", destination)
            return False

        return self.renderer.write(items, destination, self.sink)

    def __len__(self) -> int:
        return len(self.store)
