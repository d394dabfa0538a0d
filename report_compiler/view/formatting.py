"""Date, elapsed-time and text formatting for report fragments."""

from __future__ import annotations

import datetime
import html
import re
from typing import Callable

from report_compiler.config import ReportConfig

LINE_BREAK = "<br />"

_NEWLINE_RE = re.compile(r"\r\n|\n")

ElapsedFormatter = Callable[[datetime.datetime, datetime.datetime], str]


def format_date_time(instant: datetime.datetime, fmt: str) -> str:
    return instant.strftime(fmt)


def format_time(instant: datetime.datetime, fmt: str) -> str:
    return instant.strftime(fmt)


def _split_elapsed(
    end: datetime.datetime, start: datetime.datetime
) -> tuple[int, int, int, int]:
    """Split end - start into (hours % 24, minutes, seconds, millis).

    Whole days are dropped: a 25 hour span reports 1 hour.
    """
    diff_ms = (end - start) // datetime.timedelta(milliseconds=1)
    hours = diff_ms // (60 * 60 * 1000) % 24
    mins = diff_ms // (60 * 1000) % 60
    secs = diff_ms // 1000 % 60
    millis = diff_ms % 1000
    return hours, mins, secs, millis


def format_elapsed(end: datetime.datetime, start: datetime.datetime) -> str:
    """Elapsed time for a test head, e.g. ``"0h 2m 5s+120ms"``."""
    hours, mins, secs, millis = _split_elapsed(end, start)
    return f"{hours}h {mins}m {secs}s+{millis}ms"


def node_elapsed(end: datetime.datetime, start: datetime.datetime) -> str:
    """Elapsed time for a nested node, e.g. ``"1h 0m 0s"``."""
    hours, mins, secs, _ = _split_elapsed(end, start)
    return f"{hours}h {mins}m {secs}s"


def escape_newlines(text: str) -> str:
    """Replace every ``\\r\\n`` or ``\\n`` with a line-break tag."""
    return _NEWLINE_RE.sub(LINE_BREAK, text)


def warning_marker(warning: str | None) -> str:
    """Markup flagging an internal warning on a test name, or ""."""
    if not warning:
        return ""
    return (
        '<span class="test-warning tooltipped" data-tooltip="'
        f'{html.escape(warning, quote=True)}"><i class="fa fa-warning"></i></span>'
    )


class Formatter:
    """Formatting services bound to a report configuration.

    Args:
        config: Supplies the date-time and time formats.
        elapsed: Formatter for a test head's time taken, called as
            ``elapsed(ended_at, started_at)``.
    """

    def __init__(
        self,
        config: ReportConfig | None = None,
        elapsed: ElapsedFormatter = format_elapsed,
    ) -> None:
        self.config = config if config is not None else ReportConfig()
        self._elapsed = elapsed

    def date_time(self, instant: datetime.datetime) -> str:
        return format_date_time(instant, self.config.date_time_format)

    def time(self, instant: datetime.datetime) -> str:
        return format_time(instant, self.config.time_format)

    def elapsed(self, end: datetime.datetime, start: datetime.datetime) -> str:
        return self._elapsed(end, start)

    def node_elapsed(self, end: datetime.datetime, start: datetime.datetime) -> str:
        return node_elapsed(end, start)

    def escape_newlines(self, text: str) -> str:
        return escape_newlines(text)

    def warning_marker(self, warning: str | None) -> str:
        return warning_marker(warning)
