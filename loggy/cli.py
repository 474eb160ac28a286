"""Render JSONL log entries into a formatted Loggy report."""

from __future__ import annotations

import argparse
import glob
import json
import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Sequence, TextIO

from .logger import Loggy
from .logging_config import setup_logging
from .settings import LoggySettings
from .sinks import FileSink, StreamSink

logger = logging.getLogger(__name__)

STDIO = "-"


@dataclass
class LoadStats:
    total: int = 0
    loaded: int = 0
    skipped: int = 0


def _iter_input_paths(input_args: Sequence[str]) -> List[str]:
    paths: List[str] = []
    for arg in input_args:
        expanded = sorted(glob.glob(arg)) if arg != STDIO else []
        if not expanded:
            paths.append(arg)
            continue
        paths.extend(expanded)
    # remove duplicates while preserving order
    return list(dict.fromkeys(paths))


def _read_lines(path: str, stdin: TextIO) -> Iterable[str]:
    if path == STDIO:
        yield from stdin
        return
    source = Path(path)
    if not source.exists():
        logger.warning("Input not found: %s", path)
        return
    with source.open("r", encoding="utf-8") as handle:
        yield from handle


def load_entries(loggy: Loggy, inputs: Sequence[str], stdin: Optional[TextIO] = None) -> LoadStats:
    """Add every ``{"type": ..., "message": ...}`` record from the inputs."""
    stats = LoadStats()
    stdin = stdin or sys.stdin
    for path in _iter_input_paths(inputs):
        for line in _read_lines(path, stdin):
            line = line.strip()
            if not line:
                continue
            stats.total += 1
            try:
                record = json.loads(line)
            except json.JSONDecodeError:
                stats.skipped += 1
                continue
            if not isinstance(record, dict) or "type" not in record or "message" not in record:
                stats.skipped += 1
                continue
            loggy.add(str(record["type"]), str(record["message"]))
            stats.loaded += 1
    return stats


def _settings_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    overrides: Dict[str, Any] = {}
    if args.no_type:
        overrides["type_width"] = None
    elif args.type_width is not None:
        overrides["type_width"] = args.type_width
    if args.divider_width is not None:
        overrides["divider_width"] = args.divider_width
    if args.hide_divider:
        overrides["show_divider"] = False
    if args.align_right is not None:
        overrides["align_right_separator"] = args.align_right
    if args.no_date:
        overrides["date_format"] = None
    elif args.date_format is not None:
        overrides["date_format"] = args.date_format
    if args.timezone is not None:
        overrides["timezone"] = args.timezone
    if args.log_level is not None:
        overrides["log_level"] = args.log_level
    return overrides


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Render JSONL log entries into an aligned text report.")
    parser.add_argument("--input", "-i", action="append", required=True, help="JSONL source (file, glob or '-').")
    parser.add_argument("--out", "-o", required=True, help="Report file to append to ('-' for stdout).")
    parser.add_argument("--type", "-t", action="append", dest="types", default=[], help="Only write this type (repeatable).")
    parser.add_argument("--config", default=None, help="Optional YAML settings file.")
    parser.add_argument("--type-width", type=int, default=None, help="Width of the type column.")
    parser.add_argument("--no-type", action="store_true", help="Omit the type column.")
    parser.add_argument("--divider-width", type=int, default=None, help="Divider width and right-align column.")
    parser.add_argument("--hide-divider", action="store_true", help="Keep the width for alignment but skip the divider line.")
    parser.add_argument("--align-right", default=None, help="Separator marking right-aligned message text.")
    parser.add_argument("--date-format", default=None, help="strftime format of the timestamp line.")
    parser.add_argument("--no-date", action="store_true", help="Omit the timestamp line.")
    parser.add_argument("--timezone", default=None, help="IANA timezone for the timestamp line.")
    parser.add_argument("--log-level", default=None, help="Diagnostic log level (default: WARNING).")
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parse_args(argv)
    overrides = _settings_overrides(args)
    try:
        if args.config:
            settings = LoggySettings.from_file(args.config, **overrides)
        else:
            settings = LoggySettings(**overrides)
        config = settings.to_render_config()
        setup_logging(settings.log_level)
    except ValueError as exc:
        print(f"loggy: {exc}", file=sys.stderr)
        return 2

    sink = StreamSink(sys.stdout) if args.out == STDIO else FileSink(create_dirs=True)
    loggy = Loggy(config=config, sink=sink)
    stats = load_entries(loggy, args.input)
    written = loggy.write(args.out, types=args.types)

    logger.info(
        "Loaded %d of %d records (skipped: %d); wrote %d entries to %s: %s",
        stats.loaded,
        stats.total,
        stats.skipped,
        loggy.count(args.types) if written else 0,
        args.out,
        "ok" if written else "nothing written",
    )
    return 0 if written else 1


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
