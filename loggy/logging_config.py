import logging
import sys
from typing import Optional, TextIO, Union

from loguru import logger

LOG_FORMAT = "<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | {name} - {message}"


def _loguru_level(record: logging.LogRecord) -> Union[str, int]:
    """Loguru level name for ``record``, or its number for custom levels."""
    try:
        return logger.level(record.levelname).name
    except ValueError:
        return record.levelno


def _caller_depth() -> int:
    """Stack depth of the first frame outside the ``logging`` module."""
    depth = 2
    frame = logging.currentframe()
    while frame is not None and frame.f_code.co_filename == logging.__file__:
        frame = frame.f_back
        depth += 1
    return depth


class InterceptHandler(logging.Handler):
    """Forward ``loggy.*`` stdlib records to the Loguru sink."""

    def emit(self, record: logging.LogRecord) -> None:
        sink = logger.opt(depth=_caller_depth(), exception=record.exc_info)
        sink.log(_loguru_level(record), record.getMessage())


def setup_logging(
    log_level: str = "WARNING",
    enable_console: bool = True,
    stream: Optional[TextIO] = None,
) -> None:
    """
    Configure Loguru for diagnostics and intercept the ``loggy`` stdlib loggers.

    Diagnostics go to stderr by default so they never mix with a report
    written to stdout. An unknown ``log_level`` raises ``ValueError``
    before any handler is replaced.
    """
    level = log_level.upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ValueError(f"unknown log level {log_level!r}")

    logger.remove()

    if enable_console:
        logger.add(stream or sys.stderr, level=level, format=LOG_FORMAT)

    intercept_handler = InterceptHandler()
    logging.basicConfig(handlers=[intercept_handler], level=level, force=True)

    package_logger = logging.getLogger("loggy")
    package_logger.handlers = [intercept_handler]
    package_logger.propagate = False
