"""Compile a test tree into a report fragment.

The compiler walks a TestNode tree depth-first.  The top-level test gets
the full head (timing, description, tags) and its log rows; each nested
node gets a compact header, its own log table when it has logs, and a
depth class (``node-1x`` for children of the root, ``node-2x`` for
grandchildren, and so on).  Column count and depth are passed down
explicitly, so nothing set while rendering one subtree carries over to
its siblings.
"""

from __future__ import annotations

from typing import Iterable

from bs4 import Tag

from report_compiler.building.attributes import ID_ATTRIBUTE, bind_head, bind_tags
from report_compiler.building.log_rows import build_row
from report_compiler.model.nodes import TestNode
from report_compiler.view.formatting import Formatter
from report_compiler.view.fragment import (
    add_class,
    append_child,
    set_attribute,
    set_text,
    slot_in,
)
from report_compiler.view.templates import CHILD_NODE, ROOT_TEST, TemplateProvider

HAS_CHILDREN = "hasChildren"


def depth_class(depth: int) -> str:
    """Class marking a node's distance from the root, e.g. ``node-2x``."""
    return f"node-{depth}x"


class TreeCompiler:
    """Compiles TestNode trees into ``<li>`` fragments.

    Args:
        templates: Source of fresh skeletons.
        formatter: Date, elapsed-time and text formatting.
    """

    def __init__(
        self,
        templates: TemplateProvider | None = None,
        formatter: Formatter | None = None,
    ) -> None:
        self.templates = templates if templates is not None else TemplateProvider()
        self.formatter = formatter if formatter is not None else Formatter()

    def compile(self, root: TestNode) -> Tag:
        """Compile a top-level test and all its descendants.

        Returns:
            The test's ``<li>`` element.

        Raises:
            ConfigurationError: If a node has an unsupported column count.
            TemplateError: If a skeleton lacks a required slot.
        """
        columns = root.log_column_count
        skeleton = self.templates.get(ROOT_TEST, columns)

        bind_head(root, skeleton, self.formatter)
        bind_tags(root, skeleton, self.templates)

        # marker for tests with child nodes
        if root.has_children:
            add_class(skeleton.slot(".test"), HAS_CHILDREN)

        tbody = skeleton.slot("tbody")
        for log in root.logs:
            append_child(
                tbody, build_row(log, columns, self.templates, self.formatter)
            )

        self.compile_children(root, skeleton.root, 1)
        return skeleton.slot(".collection-item")

    def compile_all(self, roots: Iterable[TestNode]) -> list[Tag]:
        """Compile several independent top-level tests, in order."""
        return [self.compile(root) for root in roots]

    def compile_children(
        self, parent: TestNode, parent_fragment: Tag, depth: int
    ) -> Tag:
        """Append a fragment for each child of parent into parent_fragment.

        Children are appended to the first ``.node-list`` under
        parent_fragment; grandchildren go into the child's own list at
        ``depth + 1``.

        Returns:
            parent_fragment.
        """
        kind = ROOT_TEST if depth == 1 else CHILD_NODE
        node_list = slot_in(parent_fragment, ".node-list", kind)
        for node in parent.children:
            li = self._compile_node(node, depth)
            append_child(node_list, li)
            if node.has_children:
                self.compile_children(node, li, depth + 1)
        return parent_fragment

    def _compile_node(self, node: TestNode, depth: int) -> Tag:
        columns = node.log_column_count
        skeleton = self.templates.get(CHILD_NODE, columns)
        status = str(node.status)

        li = skeleton.slot("li")
        add_class(li, depth_class(depth), status)
        set_attribute(li, ID_ATTRIBUTE, str(node.id))

        fmt = self.formatter
        set_text(skeleton.slot(".test-node-name"), node.name)
        set_text(skeleton.slot(".test-started-time"), fmt.date_time(node.started_at))
        set_text(skeleton.slot(".test-ended-time"), fmt.date_time(node.ended_at))
        set_text(
            skeleton.slot(".test-time-taken"),
            fmt.node_elapsed(node.ended_at, node.started_at),
        )

        if node.logs:
            add_class(skeleton.slot(".test-node"), status)
            set_text(add_class(skeleton.slot(".test-status"), status), status)

            tbody = skeleton.slot("tbody")
            for log in node.logs:
                append_child(
                    tbody,
                    build_row(log, columns, self.templates, fmt, nested=True),
                )

        return li
