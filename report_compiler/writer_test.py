"""Tests for HTML page output."""

from __future__ import annotations

import datetime
import tempfile
from pathlib import Path

from report_compiler.building.tree import TreeCompiler
from report_compiler.config import ReportConfig
from report_compiler.model.nodes import TestNode
from report_compiler.model.status import TestStatus
from report_compiler.writer import generate_html_report, write_html_report

T0 = datetime.datetime(2026, 1, 1)


def _fragments(*names: str) -> list:
    compiler = TreeCompiler()
    return [
        compiler.compile(TestNode(name=n, status=TestStatus.PASS, started_at=T0, ended_at=T0))
        for n in names
    ]


class TestGenerateHtmlReport:
    """Tests for generate_html_report."""

    def test_page_structure(self):
        """Output is a complete page wrapping the fragments."""
        result = generate_html_report(_fragments("a"))
        assert result.startswith("<!DOCTYPE html>")
        assert '<ul class="test-collection">' in result
        assert "</html>" in result

    def test_fragments_in_order(self):
        result = generate_html_report(_fragments("first", "second"))
        assert result.index("first") < result.index("second")

    def test_title_escaped(self):
        config = ReportConfig(None)
        config.set_config(document_title="A & B")
        assert "<title>A &amp; B</title>" in generate_html_report([], config)


class TestWriteHtmlReport:
    """Tests for write_html_report."""

    def test_creates_parent_dirs(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "nested" / "report.html"
            write_html_report(_fragments("a"), path)
            assert path.exists()
            assert "collection-item" in path.read_text()
