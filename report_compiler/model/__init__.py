"""Test tree model: nodes, log entries, tags and status enumerations."""

from report_compiler.model.loader import load_test_trees, node_from_dict
from report_compiler.model.nodes import LogEntry, Tag, TestNode
from report_compiler.model.status import LogStatus, TestStatus

__all__ = [
    "LogEntry",
    "LogStatus",
    "Tag",
    "TestNode",
    "TestStatus",
    "load_test_trees",
    "node_from_dict",
]
