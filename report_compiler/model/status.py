"""Status vocabularies for test nodes and log entries.

A test node's status and a log entry's status share the same words but
describe different things: the outcome of a whole test versus the
severity of a single recorded event.  They are kept as two separate
enumerations; rendering code that needs a shared lookup (icons) keys it
by the canonical string form.
"""

from __future__ import annotations

from enum import Enum

from report_compiler.errors import ConfigurationError


class TestStatus(Enum):
    """Outcome of a test or test node."""

    __test__ = False

    PASS = "pass"
    FAIL = "fail"
    FATAL = "fatal"
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"
    SKIP = "skip"
    UNKNOWN = "unknown"

    def __str__(self) -> str:
        return self.value


class LogStatus(Enum):
    """Severity of a single log event."""

    PASS = "pass"
    FAIL = "fail"
    FATAL = "fatal"
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"
    SKIP = "skip"
    UNKNOWN = "unknown"

    def __str__(self) -> str:
        return self.value


def _parse(enum_cls, value, label: str):
    if isinstance(value, enum_cls):
        return value
    if isinstance(value, str):
        try:
            return enum_cls(value.strip().lower())
        except ValueError:
            pass
    raise ConfigurationError(f"Unrecognized {label} status: {value!r}")


def parse_test_status(value: TestStatus | str) -> TestStatus:
    """Convert a member or case-insensitive string into a TestStatus.

    Raises:
        ConfigurationError: If the value is not a known status.
    """
    return _parse(TestStatus, value, "test")


def parse_log_status(value: LogStatus | str) -> LogStatus:
    """Convert a member or case-insensitive string into a LogStatus.

    Raises:
        ConfigurationError: If the value is not a known status.
    """
    return _parse(LogStatus, value, "log")
