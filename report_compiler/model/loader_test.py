"""Unit tests for loading test trees from JSON and YAML."""

from __future__ import annotations

import datetime
import json
import tempfile
from pathlib import Path

import pytest
import yaml

from report_compiler.errors import ConfigurationError
from report_compiler.model.loader import (
    load_test_trees,
    node_from_dict,
    trees_from_document,
)
from report_compiler.model.status import LogStatus, TestStatus


def _test_dict(name: str = "root", **kwargs) -> dict:
    data = {
        "name": name,
        "status": "pass",
        "started_at": "2026-01-01T10:00:00",
        "ended_at": "2026-01-01T10:00:05",
    }
    data.update(kwargs)
    return data


class TestNodeFromDict:
    """Tests for node_from_dict."""

    def test_minimal(self):
        """Required fields produce a node with defaults."""
        node = node_from_dict(_test_dict())
        assert node.name == "root"
        assert node.status is TestStatus.PASS
        assert node.started_at == datetime.datetime(2026, 1, 1, 10, 0, 0)
        assert node.children == []
        assert node.log_column_count == 3

    def test_full_tree(self):
        """Children, logs and tags are converted recursively."""
        data = _test_dict(
            id="r1",
            description="desc",
            internal_warning="late log",
            log_column_count=4,
            categories=["Smoke", {"name": "UI"}],
            authors=["Ann"],
            logs=[{
                "timestamp": "2026-01-01T10:00:01",
                "status": "info",
                "step_name": "open",
                "details": "a\nb",
            }],
            children=[_test_dict("child", children=[_test_dict("grandchild")])],
        )
        node = node_from_dict(data)
        assert node.id == "r1"
        assert node.internal_warning == "late log"
        assert [t.name for t in node.categories] == ["Smoke", "UI"]
        assert [t.name for t in node.authors] == ["Ann"]
        assert node.logs[0].log_status is LogStatus.INFO
        assert node.logs[0].step_name == "open"
        assert node.children[0].children[0].name == "grandchild"

    def test_missing_required_field(self):
        """A missing status is reported."""
        data = _test_dict()
        del data["status"]
        with pytest.raises(ConfigurationError, match="'status'"):
            node_from_dict(data)

    def test_bad_timestamp(self):
        """Unparseable timestamps are reported."""
        with pytest.raises(ConfigurationError, match="Invalid timestamp"):
            node_from_dict(_test_dict(started_at="yesterday"))

    def test_mixed_naive_and_offset_timestamps(self):
        """A naive start and an offset-aware end can't be compared."""
        data = _test_dict(
            started_at="2026-01-01T00:00:00",
            ended_at="2026-01-01T00:00:05+00:00",
        )
        with pytest.raises(ConfigurationError, match="incomparable"):
            node_from_dict(data)

    def test_repeated_id_on_path(self):
        """A node whose id repeats an ancestor's is rejected."""
        data = _test_dict(id="x", children=[_test_dict("c", id="x")])
        with pytest.raises(ConfigurationError, match="own ancestor"):
            node_from_dict(data)

    def test_repeated_id_on_sibling_paths_allowed(self):
        """The same id in two separate branches is not a cycle."""
        data = _test_dict(children=[_test_dict("a", id="x"), _test_dict("b", id="x")])
        assert len(node_from_dict(data).children) == 2

    def test_has_child_nodes_disagreement(self):
        """An explicit flag that contradicts the children list is rejected."""
        with pytest.raises(ConfigurationError, match="has_child_nodes"):
            node_from_dict(_test_dict(has_child_nodes=True))

    def test_unknown_column_count(self):
        """Unsupported column counts are rejected, not coerced."""
        with pytest.raises(ConfigurationError, match="column count"):
            node_from_dict(_test_dict(log_column_count=6))


class TestTreesFromDocument:
    """Tests for the accepted document shapes."""

    def test_single_mapping(self):
        assert len(trees_from_document(_test_dict())) == 1

    def test_list(self):
        assert len(trees_from_document([_test_dict("a"), _test_dict("b")])) == 2

    def test_tests_key(self):
        assert len(trees_from_document({"tests": [_test_dict()]})) == 1

    def test_invalid(self):
        with pytest.raises(ConfigurationError):
            trees_from_document("nope")


class TestLoadTestTrees:
    """Tests for reading files."""

    def test_json_file(self):
        """JSON files are loaded."""
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "tests.json"
            path.write_text(json.dumps({"tests": [_test_dict("a"), _test_dict("b")]}))
            roots = load_test_trees(path)
            assert [r.name for r in roots] == ["a", "b"]

    def test_yaml_file(self):
        """YAML files are loaded, including native timestamps."""
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "tests.yaml"
            path.write_text(yaml.safe_dump([{
                "name": "y",
                "status": "skip",
                "started_at": datetime.datetime(2026, 1, 1, 8, 0, 0),
                "ended_at": datetime.datetime(2026, 1, 1, 8, 0, 1),
            }]))
            roots = load_test_trees(path)
            assert roots[0].status is TestStatus.SKIP
            assert roots[0].ended_at == datetime.datetime(2026, 1, 1, 8, 0, 1)

    def test_missing_file(self):
        """A missing file raises FileNotFoundError."""
        with tempfile.TemporaryDirectory() as tmpdir:
            with pytest.raises(FileNotFoundError):
                load_test_trees(Path(tmpdir) / "missing.json")

    def test_corrupt_json(self):
        """Invalid JSON is reported as a ConfigurationError."""
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "tests.json"
            path.write_text("{ not json")
            with pytest.raises(ConfigurationError, match="Could not parse"):
                load_test_trees(path)
