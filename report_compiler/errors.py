"""Exception and warning types raised while compiling test reports."""

from __future__ import annotations


class ReportCompilerError(Exception):
    """Base class for report compilation failures."""


class TemplateError(ReportCompilerError, LookupError):
    """A required slot is missing from a template skeleton.

    Indicates a mismatch between the compiler and the templates it was
    given; compilation of the affected tree is aborted.
    """

    def __init__(self, kind: str, selector: str) -> None:
        self.kind = kind
        self.selector = selector
        super().__init__(
            f"Template '{kind}' has no slot matching '{selector}'"
        )


class ConfigurationError(ReportCompilerError, ValueError):
    """Unrecognized column count, status, template kind or input value."""


class ContentRecoveryWarning(UserWarning):
    """Log details could not be parsed and were embedded as literal text."""
