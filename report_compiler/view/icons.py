"""Icon names for test and log statuses."""

from __future__ import annotations

from report_compiler.errors import ConfigurationError
from report_compiler.model.status import LogStatus, TestStatus

# Prefix applied to icon names when used as a class
ICON_PREFIX = "fa-"

# Shared by TestStatus and LogStatus, keyed by canonical string form
STATUS_ICONS: dict[str, str] = {
    "pass": "check-circle-o",
    "fail": "times-circle-o",
    "fatal": "exclamation-circle",
    "error": "exclamation-circle",
    "warning": "warning",
    "info": "info",
    "skip": "chevron-right",
    "unknown": "question",
}


def icon_for(status: TestStatus | LogStatus) -> str:
    """Return the icon name for a status.

    Raises:
        ConfigurationError: If the status has no icon.
    """
    try:
        return STATUS_ICONS[str(status)]
    except KeyError:
        raise ConfigurationError(f"No icon for status: {status!r}") from None


def icon_class(status: TestStatus | LogStatus) -> str:
    return ICON_PREFIX + icon_for(status)
