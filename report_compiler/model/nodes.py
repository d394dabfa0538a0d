"""Test tree data structures.

Provides TestNode (one test or test node with its logs and tags),
LogEntry (one recorded event) and Tag (a category or author label).
All three are treated as immutable inputs by the compiler.
"""

from __future__ import annotations

import datetime
import uuid
from dataclasses import dataclass, field
from typing import Any

from report_compiler.errors import ConfigurationError
from report_compiler.model.status import (
    LogStatus,
    TestStatus,
    parse_log_status,
    parse_test_status,
)

# Supported log table layouts:
# 3 = Timestamp | Status | Details
# 4 = Timestamp | Status | Step | Details
VALID_COLUMN_COUNTS = frozenset({3, 4})


def validate_column_count(value: Any) -> int:
    """Return value as a supported log column count.

    Raises:
        ConfigurationError: If value is missing or not 3 or 4.
    """
    if isinstance(value, bool) or value not in VALID_COLUMN_COUNTS:
        raise ConfigurationError(
            f"Unsupported log column count: {value!r} "
            f"(expected one of {sorted(VALID_COLUMN_COUNTS)})"
        )
    return int(value)


@dataclass(frozen=True)
class Tag:
    """A category or author label attached to a test."""

    name: str


@dataclass(frozen=True)
class LogEntry:
    """A single event logged against a test node."""

    timestamp: datetime.datetime
    log_status: LogStatus
    details: str = ""
    step_name: str = ""  # only rendered in 4-column layouts

    def __post_init__(self) -> None:
        object.__setattr__(self, "log_status", parse_log_status(self.log_status))


@dataclass
class TestNode:
    """A test, or a node nested under a test, with its logs and tags.

    ``has_child_nodes`` exists for producers that report the flag
    separately from the children list.  When given it must agree with
    ``children``; the renderer only ever looks at ``has_children``.
    """

    __test__ = False

    name: str
    status: TestStatus
    started_at: datetime.datetime
    ended_at: datetime.datetime
    description: str = ""
    internal_warning: str | None = None
    log_column_count: int = 3
    children: list[TestNode] = field(default_factory=list)
    logs: list[LogEntry] = field(default_factory=list)
    categories: list[Tag] = field(default_factory=list)
    authors: list[Tag] = field(default_factory=list)
    id: uuid.UUID | str = field(default_factory=uuid.uuid4)
    has_child_nodes: bool | None = None

    def __post_init__(self) -> None:
        self.status = parse_test_status(self.status)
        self.log_column_count = validate_column_count(self.log_column_count)
        try:
            ends_early = self.ended_at < self.started_at
        except TypeError as e:
            raise ConfigurationError(
                f"Test '{self.name}' has incomparable start and end times: {e}"
            ) from e
        if ends_early:
            raise ConfigurationError(
                f"Test '{self.name}' ends before it starts "
                f"({self.ended_at} < {self.started_at})"
            )
        if (
            self.has_child_nodes is not None
            and bool(self.has_child_nodes) != bool(self.children)
        ):
            raise ConfigurationError(
                f"Test '{self.name}' has has_child_nodes="
                f"{self.has_child_nodes} but {len(self.children)} children"
            )

    @property
    def has_children(self) -> bool:
        """True if this node has at least one child node."""
        return len(self.children) > 0

    @property
    def has_tags(self) -> bool:
        """True if this node has any category or author."""
        return bool(self.categories or self.authors)
