"""Load test trees from JSON or YAML files.

Input documents hold either a single test mapping, a list of test
mappings, or a mapping with a ``tests`` list.  Each test mapping may nest
further tests under ``children``.
"""

from __future__ import annotations

import datetime
import json
from pathlib import Path
from typing import Any

import yaml

from report_compiler.errors import ConfigurationError
from report_compiler.model.nodes import LogEntry, Tag, TestNode

YAML_SUFFIXES = frozenset({".yaml", ".yml"})


def _parse_instant(value: Any, field_name: str) -> datetime.datetime:
    if isinstance(value, datetime.datetime):
        return value
    if isinstance(value, str):
        try:
            return datetime.datetime.fromisoformat(value)
        except ValueError:
            pass
    raise ConfigurationError(f"Invalid timestamp for '{field_name}': {value!r}")


def _require(data: dict[str, Any], key: str, where: str) -> Any:
    if key not in data:
        raise ConfigurationError(f"Missing required field '{key}' in {where}")
    return data[key]


def _tags(values: Any, where: str) -> list[Tag]:
    if values is None:
        return []
    if not isinstance(values, list):
        raise ConfigurationError(f"Expected a list of names in {where}")
    tags: list[Tag] = []
    for value in values:
        if isinstance(value, dict):
            value = _require(value, "name", where)
        tags.append(Tag(name=str(value)))
    return tags


def log_from_dict(data: dict[str, Any]) -> LogEntry:
    """Build a LogEntry from a plain dict.

    Raises:
        ConfigurationError: If a required field is missing or invalid.
    """
    if not isinstance(data, dict):
        raise ConfigurationError(f"Log entry must be a mapping, got {data!r}")
    return LogEntry(
        timestamp=_parse_instant(_require(data, "timestamp", "log entry"), "timestamp"),
        log_status=_require(data, "status", "log entry"),
        details=str(data.get("details", "") or ""),
        step_name=str(data.get("step_name", "") or ""),
    )


def node_from_dict(
    data: dict[str, Any], _ancestors: frozenset[str] = frozenset()
) -> TestNode:
    """Build a TestNode tree from a plain dict.

    Args:
        data: Test mapping; nested tests go under ``children``.

    Returns:
        The root TestNode of the tree.

    Raises:
        ConfigurationError: If a required field is missing or invalid, or
            if a node id repeats along a root-to-leaf path.
    """
    if not isinstance(data, dict):
        raise ConfigurationError(f"Test entry must be a mapping, got {data!r}")

    name = str(_require(data, "name", "test entry"))
    where = f"test '{name}'"

    node_id = data.get("id")
    if node_id is not None:
        node_id = str(node_id)
        if node_id in _ancestors:
            raise ConfigurationError(f"Test id '{node_id}' is its own ancestor")
        ancestors = _ancestors | {node_id}
    else:
        ancestors = _ancestors

    children_data = data.get("children") or []
    logs_data = data.get("logs") or []
    if not isinstance(children_data, list) or not isinstance(logs_data, list):
        raise ConfigurationError(f"'children' and 'logs' must be lists in {where}")

    kwargs: dict[str, Any] = {
        "name": name,
        "status": _require(data, "status", where),
        "started_at": _parse_instant(_require(data, "started_at", where), "started_at"),
        "ended_at": _parse_instant(_require(data, "ended_at", where), "ended_at"),
        "description": str(data.get("description", "") or ""),
        "internal_warning": data.get("internal_warning") or None,
        "log_column_count": data.get("log_column_count", 3),
        "children": [node_from_dict(c, ancestors) for c in children_data],
        "logs": [log_from_dict(entry) for entry in logs_data],
        "categories": _tags(data.get("categories"), where),
        "authors": _tags(data.get("authors"), where),
        "has_child_nodes": data.get("has_child_nodes"),
    }
    if node_id is not None:
        kwargs["id"] = node_id
    return TestNode(**kwargs)


def trees_from_document(document: Any) -> list[TestNode]:
    """Build root TestNodes from a parsed JSON/YAML document."""
    if isinstance(document, dict) and "tests" in document:
        document = document["tests"]
    if isinstance(document, dict):
        return [node_from_dict(document)]
    if isinstance(document, list):
        return [node_from_dict(entry) for entry in document]
    raise ConfigurationError(
        "Test document must be a test mapping, a list of tests, "
        "or a mapping with a 'tests' list"
    )


def load_test_trees(path: Path) -> list[TestNode]:
    """Load root TestNodes from a JSON or YAML file.

    Args:
        path: Input file; ``.yaml``/``.yml`` are read as YAML, anything
            else as JSON.

    Returns:
        List of root TestNodes in file order.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        ConfigurationError: If the file can't be parsed or describes an
            invalid tree.
    """
    text = Path(path).read_text()
    try:
        if Path(path).suffix.lower() in YAML_SUFFIXES:
            document = yaml.safe_load(text)
        else:
            document = json.loads(text)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise ConfigurationError(f"Could not parse {path}: {e}") from e
    return trees_from_document(document)
