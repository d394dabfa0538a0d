"""Compile recorded test trees into HTML report fragments."""

from report_compiler.building.tree import TreeCompiler
from report_compiler.config import ReportConfig
from report_compiler.errors import (
    ConfigurationError,
    ContentRecoveryWarning,
    ReportCompilerError,
    TemplateError,
)
from report_compiler.model import LogEntry, LogStatus, Tag, TestNode, TestStatus
from report_compiler.view import Formatter, TemplateProvider

__all__ = [
    "ConfigurationError",
    "ContentRecoveryWarning",
    "Formatter",
    "LogEntry",
    "LogStatus",
    "ReportCompilerError",
    "ReportConfig",
    "Tag",
    "TemplateError",
    "TemplateProvider",
    "TestNode",
    "TestStatus",
    "TreeCompiler",
]
