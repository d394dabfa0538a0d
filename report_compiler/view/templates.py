"""Template skeletons for test, node, log row and tag chip fragments.

Each template kind is keyed by the log column count where the kind
carries a log table.  The compiler relies only on the slot classes
(``.test-name``, ``tbody``, ``.node-list``, ...), not on the surrounding
markup.
"""

from __future__ import annotations

from typing import Union

from report_compiler.errors import ConfigurationError
from report_compiler.model.nodes import validate_column_count
from report_compiler.view.fragment import Skeleton

ROOT_TEST = "root-test"
CHILD_NODE = "child-node"
LOG_ROW = "log-row"
CATEGORY_CHIP = "category-chip"
AUTHOR_CHIP = "author-chip"

# Kinds whose markup depends on the log column count
TABLE_KINDS = frozenset({ROOT_TEST, CHILD_NODE, LOG_ROW})
CHIP_KINDS = frozenset({CATEGORY_CHIP, AUTHOR_CHIP})

_TABLE_HEAD: dict[int, str] = {
    3: "<tr><th>Timestamp</th><th>Status</th><th>Details</th></tr>",
    4: "<tr><th>Timestamp</th><th>Status</th><th>Step</th><th>Details</th></tr>",
}

_ROOT_TEST = """\
<li class="collection-item test displayed active">
  <div class="test-head">
    <span class="test-name"></span>
    <span class="test-status label right outline capitalize"></span>
    <span class="category-assigned hide"></span>
  </div>
  <div class="test-body">
    <div class="test-info">
      <span title="Test started time" class="test-started-time label"></span>
      <span title="Test ended time" class="test-ended-time label"></span>
      <span title="Time taken to finish" class="test-time-taken label"></span>
    </div>
    <div class="test-desc"></div>
    <div class="test-attributes">
      <div class="categories"></div>
      <div class="authors"></div>
    </div>
    <div class="test-steps">
      <table class="bordered table-results">
        <thead>{head}</thead>
        <tbody></tbody>
      </table>
    </div>
    <ul class="collapsible node-list"></ul>
  </div>
</li>"""

_CHILD_NODE = """\
<li class="node displayed">
  <div class="collapsible-header test-node">
    <div class="right test-info">
      <span title="Test started time" class="test-started-time label"></span>
      <span title="Test ended time" class="test-ended-time label"></span>
      <span title="Time taken to finish" class="test-time-taken label"></span>
      <span class="test-status label capitalize"></span>
    </div>
    <div class="test-node-name"></div>
  </div>
  <div class="collapsible-body">
    <div class="test-steps">
      <table class="bordered table-results">
        <thead>{head}</thead>
        <tbody></tbody>
      </table>
    </div>
    <ul class="collapsible node-list"></ul>
  </div>
</li>"""

_LOG_ROW: dict[int, str] = {
    3: """\
<tr>
  <td class="timestamp"></td>
  <td class="status"><i class="fa"></i></td>
  <td class="step-details"></td>
</tr>""",
    4: """\
<tr>
  <td class="timestamp"></td>
  <td class="status"><i class="fa"></i></td>
  <td class="step-name"></td>
  <td class="step-details"></td>
</tr>""",
}

_CHIP: dict[str, str] = {
    CATEGORY_CHIP: '<span class="category label"></span>',
    AUTHOR_CHIP: '<span class="author label"></span>',
}


def _default_sources() -> dict[tuple[str, int | None], str]:
    sources: dict[tuple[str, int | None], str] = {}
    for count, head in _TABLE_HEAD.items():
        sources[(ROOT_TEST, count)] = _ROOT_TEST.format(head=head)
        sources[(CHILD_NODE, count)] = _CHILD_NODE.format(head=head)
        sources[(LOG_ROW, count)] = _LOG_ROW[count]
    for kind, markup in _CHIP.items():
        sources[(kind, None)] = markup
    return sources


OverrideKey = Union[str, tuple[str, int]]


class TemplateProvider:
    """Hands out fresh skeletons keyed by kind and log column count.

    Args:
        overrides: Replacement markup keyed by ``(kind, column_count)``
            for table-bearing kinds, or by ``kind`` for chips.
    """

    def __init__(self, overrides: dict[OverrideKey, str] | None = None) -> None:
        self._sources = _default_sources()
        for key, markup in (overrides or {}).items():
            if isinstance(key, tuple):
                kind, count = key
                self._check_kind(kind)
                if kind in TABLE_KINDS:
                    count = validate_column_count(count)
                else:
                    count = None
                self._sources[(kind, count)] = markup
            else:
                self._check_kind(key)
                if key in TABLE_KINDS:
                    raise ConfigurationError(
                        f"Template '{key}' override needs a column count"
                    )
                self._sources[(key, None)] = markup

    @staticmethod
    def _check_kind(kind: str) -> None:
        if kind not in TABLE_KINDS and kind not in CHIP_KINDS:
            raise ConfigurationError(f"Unknown template kind: {kind!r}")

    def source(self, kind: str, column_count: int | None = 3) -> str:
        """Return the raw markup for a template kind."""
        self._check_kind(kind)
        if kind in TABLE_KINDS:
            return self._sources[(kind, validate_column_count(column_count))]
        return self._sources[(kind, None)]

    def get(self, kind: str, column_count: int | None = 3) -> Skeleton:
        """Return a fresh skeleton for kind.

        Raises:
            ConfigurationError: If kind is unknown, or column_count is not
                supported for a table-bearing kind.
        """
        return Skeleton(kind, self.source(kind, column_count))
