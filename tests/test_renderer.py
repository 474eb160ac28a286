"""Tests for loggy.renderer: column layout, headers and sink handling."""

import io
from contextlib import contextmanager
from datetime import datetime, timezone

import pytest

from loggy.config import RenderConfig
from loggy.options import Enabled
from loggy.renderer import LogRenderer
from loggy.store import LogEntry


def fixed_clock(tz):
    return datetime(2026, 10, 19, 9, 5, 3, tzinfo=timezone.utc).astimezone(tz)


def _renderer(**kwargs):
    return LogRenderer(RenderConfig(**kwargs), clock=fixed_clock)


class _RecordingSink:
    def __init__(self, fail_open=False, fail_write=False):
        self.fail_open = fail_open
        self.fail_write = fail_write
        self.opened = []
        self.closed = 0
        self.buffer = io.StringIO()

    @contextmanager
    def open(self, destination):
        if self.fail_open:
            raise PermissionError(destination)
        self.opened.append(destination)
        try:
            yield self
        finally:
            self.closed += 1

    def write(self, text):
        if self.fail_write:
            raise OSError("disk full")
        return self.buffer.write(text)


class TestTypeColumn:
    def test_padding(self):
        r = _renderer(type_width=10)
        assert r.format_entry(LogEntry("ERROR", "boom")) == "ERROR" + " " * 5 + " | " + "boom"

    def test_long_type_is_not_truncated(self):
        r = _renderer(type_width=4)
        assert r.format_entry(LogEntry("CRITICAL", "x")) == "CRITICAL | x"

    def test_exact_width(self):
        r = _renderer(type_width=4)
        assert r.format_entry(LogEntry("INFO", "x")) == "INFO | x"

    def test_disabled(self):
        r = _renderer(type_width=None)
        assert r.format_entry(LogEntry("ERROR", "boom")) == "boom"


class TestRightAlignment:
    def test_without_type_column(self):
        r = _renderer(type_width=None, divider_width=40, align_right_separator="::")
        line = r.format_entry(LogEntry("INFO", "left::right"))
        assert line == "left" + " " * (40 - len("left") - len("right")) + "right"
        assert len(line) == 40

    def test_with_type_column(self):
        r = _renderer(type_width=10, divider_width=40, align_right_separator="::")
        line = r.format_entry(LogEntry("INFO", "copy::ok"))
        assert line.startswith("INFO" + " " * 6 + " | copy")
        assert line.endswith("ok")
        assert len(line) == 40

    def test_overflow_gets_no_padding(self):
        r = _renderer(type_width=None, divider_width=8, align_right_separator="::")
        assert r.format_entry(LogEntry("INFO", "abcdef::ghijk")) == "abcdefghijk"

    def test_exact_fit_gets_no_padding(self):
        r = _renderer(type_width=None, divider_width=9, align_right_separator="::")
        assert r.format_entry(LogEntry("INFO", "left::right")) == "leftright"

    def test_split_on_first_separator_only(self):
        r = _renderer(type_width=None, align_right_separator="::")
        assert r.split_message("a::b::c") == ["a", "b::c"]

    def test_message_without_separator(self):
        r = _renderer(type_width=None, align_right_separator="::")
        assert r.format_entry(LogEntry("INFO", "plain")) == "plain"

    def test_separator_ignored_when_not_configured(self):
        r = _renderer(type_width=None)
        assert r.format_entry(LogEntry("INFO", "left::right")) == "left::right"

    def test_hidden_divider_still_aligns(self):
        r = LogRenderer(
            RenderConfig.hidden_divider(20, type_width=None, align_right_separator="|"),
            clock=fixed_clock,
        )
        line = r.format_entry(LogEntry("INFO", "a|b"))
        assert len(line) == 20
        assert r.divider_line() is None

    def test_no_divider_width_appends_right_part(self):
        r = _renderer(type_width=None, divider_width=None, align_right_separator="::")
        assert r.format_entry(LogEntry("INFO", "left::right")) == "leftright"


class TestHeaders:
    def test_divider(self):
        assert _renderer(divider_width=12).divider_line() == "-" * 12

    def test_default_timestamp(self):
        assert _renderer().timestamp_line() == "Mon October 19, 9:05:03 UTC, 2026"

    def test_timestamp_in_named_zone(self):
        r = _renderer(timezone="Europe/Prague", date_format="%H:%M %Z")
        assert r.timestamp_line() == "11:05 CEST"

    def test_timezone_does_not_leak_between_renderers(self):
        prague = _renderer(timezone="Europe/Prague", date_format="%H:%M")
        utc = _renderer(timezone="UTC", date_format="%H:%M")
        assert prague.timestamp_line() == "11:05"
        assert utc.timestamp_line() == "09:05"
        assert prague.timestamp_line() == "11:05"

    def test_unpadded_directives(self):
        r = _renderer(date_format="%-d/%-m %-H:%M %-I%p")
        assert r.timestamp_line() == "19/10 9:05 9AM"

    def test_escaped_percent_is_left_alone(self):
        assert _renderer(date_format="%%-d %-d").timestamp_line() == "%-d 19"

    def test_zero_width_divider_is_off(self):
        r = _renderer(divider_width=Enabled(0), date_format=None)
        assert r.divider_line() is None
        assert r.render([LogEntry("x", "y")]) == "x          | y\n"

    def test_timestamp_disabled(self):
        assert _renderer(date_format=None).timestamp_line() is None


class TestRender:
    def test_full_block(self):
        r = _renderer(type_width=6, divider_width=20, date_format="%Y-%m-%d")
        text = r.render([LogEntry("ERROR", "one"), LogEntry("INFO", "two")])
        assert text == (
            "-" * 20 + "\n"
            "2026-10-19\n"
            "ERROR  | one\n"
            "INFO   | two\n"
        )

    def test_divider_appears_once(self):
        r = _renderer(divider_width=15)
        text = r.render([LogEntry("INFO", str(i)) for i in range(4)])
        assert text.count("-" * 15) == 1
        assert text.splitlines()[0] == "-" * 15

    def test_bare_lines(self):
        r = _renderer(type_width=None, divider_width=None, date_format=None)
        assert r.render([LogEntry("INFO", "a"), LogEntry("INFO", "b")]) == "a\nb\n"


class TestWrite:
    def test_success(self):
        sink = _RecordingSink()
        r = _renderer(date_format=None, divider_width=None, type_width=None)
        assert r.write([LogEntry("INFO", "hello")], "report.log", sink) is True
        assert sink.buffer.getvalue() == "hello\n"
        assert sink.opened == ["report.log"]
        assert sink.closed == 1

    def test_no_entries_does_not_open_sink(self):
        sink = _RecordingSink()
        assert _renderer().write([], "report.log", sink) is False
        assert sink.opened == []

    def test_open_failure(self):
        sink = _RecordingSink(fail_open=True)
        assert _renderer().write([LogEntry("INFO", "x")], "report.log", sink) is False

    def test_write_failure_still_closes(self):
        sink = _RecordingSink(fail_write=True)
        assert _renderer().write([LogEntry("INFO", "x")], "report.log", sink) is False
        assert sink.closed == 1

    @pytest.mark.parametrize("result", [0, None])
    def test_empty_write_is_failure(self, result):
        sink = _RecordingSink()
        sink.write = lambda text: result
        assert _renderer().write([LogEntry("INFO", "x")], "report.log", sink) is False
        assert sink.closed == 1
