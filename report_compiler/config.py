"""Report configuration file management.

Reads the JSON file holding the date/time formats and page
settings used when compiling and writing reports.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

# Default configuration values
DEFAULT_CONFIG: dict[str, Any] = {
    "date_time_format": "%Y-%m-%d %H:%M:%S",
    "time_format": "%H:%M:%S",
    "document_title": "Test Report",
}


class ReportConfig:
    """Manages the report configuration JSON file."""

    def __init__(self, path: Path | None = None) -> None:
        self.path = path
        self._data: dict[str, Any] = dict(DEFAULT_CONFIG)
        if path is not None and path.exists():
            self._load()

    def _load(self) -> None:
        """Load config from the file."""
        assert self.path is not None
        try:
            text = self.path.read_text()
            data = json.loads(text)
            if isinstance(data, dict):
                self._data = {**DEFAULT_CONFIG, **data}
        except (json.JSONDecodeError, OSError):
            self._data = dict(DEFAULT_CONFIG)

    @property
    def date_time_format(self) -> str:
        """strftime format for test start/end times."""
        return str(
            self._data.get("date_time_format", DEFAULT_CONFIG["date_time_format"])
        )

    @property
    def time_format(self) -> str:
        """strftime format for log row timestamps."""
        return str(self._data.get("time_format", DEFAULT_CONFIG["time_format"]))

    @property
    def document_title(self) -> str:
        return str(
            self._data.get("document_title", DEFAULT_CONFIG["document_title"])
        )

    def set_config(
        self,
        date_time_format: str | None = None,
        time_format: str | None = None,
        document_title: str | None = None,
    ) -> None:
        """Update configuration values."""
        if date_time_format is not None:
            self._data["date_time_format"] = date_time_format
        if time_format is not None:
            self._data["time_format"] = time_format
        if document_title is not None:
            self._data["document_title"] = document_title
