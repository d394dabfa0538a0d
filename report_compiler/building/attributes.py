"""Head fields and category/author chips for a top-level test fragment."""

from __future__ import annotations

from report_compiler.model.nodes import Tag, TestNode
from report_compiler.view.formatting import Formatter
from report_compiler.view.fragment import (
    Skeleton,
    add_class,
    append_child,
    parse_fragment,
    set_attribute,
    set_text,
)
from report_compiler.view.templates import AUTHOR_CHIP, CATEGORY_CHIP, TemplateProvider

HIDE = "hide"
ID_ATTRIBUTE = "extentId"


def bind_head(node: TestNode, skeleton: Skeleton, formatter: Formatter) -> Skeleton:
    """Fill name, id, status, timing and description slots of a test.

    An empty description hides the description slot instead of removing
    it.  The name is followed by a warning marker when the test carries
    an internal warning.
    """
    desc = skeleton.slot(".test-desc")
    if node.description == "":
        add_class(desc, HIDE)

    name = set_text(skeleton.slot(".test-name"), node.name)
    for marker in parse_fragment(formatter.warning_marker(node.internal_warning)):
        append_child(name, marker)

    status = str(node.status)
    test = skeleton.slot(".test")
    set_attribute(test, ID_ATTRIBUTE, str(node.id))
    add_class(test, status)
    set_text(add_class(skeleton.slot(".test-status"), status), status)

    set_text(skeleton.slot(".test-started-time"), formatter.date_time(node.started_at))
    set_text(skeleton.slot(".test-ended-time"), formatter.date_time(node.ended_at))
    set_text(
        skeleton.slot(".test-time-taken"),
        formatter.elapsed(node.ended_at, node.started_at),
    )

    set_text(desc, node.description)
    return skeleton


def _append_chips(
    tags: list[Tag],
    kind: str,
    selector: str,
    container_selector: str,
    skeleton: Skeleton,
    templates: TemplateProvider,
) -> None:
    if not tags:
        return
    container = skeleton.slot(container_selector)
    assigned = skeleton.slot(".category-assigned")
    for tag in tags:
        chip = templates.get(kind)
        append_child(container, set_text(chip.slot(selector), tag.name))
        add_class(assigned, tag.name.lower())


def bind_tags(
    node: TestNode, skeleton: Skeleton, templates: TemplateProvider
) -> Skeleton:
    """Append category then author chips, in input order.

    Every tag also adds its lower-cased name as a class on the
    ``.category-assigned`` marker.  A test without tags gets its
    attributes container hidden.
    """
    _append_chips(
        node.categories, CATEGORY_CHIP, ".category", ".categories",
        skeleton, templates,
    )
    _append_chips(
        node.authors, AUTHOR_CHIP, ".author", ".authors",
        skeleton, templates,
    )
    if not node.has_tags:
        add_class(skeleton.slot(".test-attributes"), HIDE)
    return skeleton
