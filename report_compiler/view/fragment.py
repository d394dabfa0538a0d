"""Fragment skeletons built on BeautifulSoup.

A Skeleton is a freshly parsed template with named, selectable slots.
Slot lookups that find nothing raise TemplateError instead of returning
None, so a template/compiler mismatch surfaces immediately.
"""

from __future__ import annotations

from bs4 import BeautifulSoup, NavigableString, PageElement, Tag

from report_compiler.errors import TemplateError

PARSER = "html.parser"


class Skeleton:
    """A parsed template instance with selectable slots."""

    def __init__(self, kind: str, markup: str) -> None:
        self.kind = kind
        self._soup = BeautifulSoup(markup, PARSER)
        root = self._soup.find(True)
        if root is None:
            raise TemplateError(kind, "<root element>")
        self.root: Tag = root

    def select_first(self, selector: str) -> Tag | None:
        """Return the first element matching selector, or None."""
        return self._soup.select_one(selector)

    def slot(self, selector: str) -> Tag:
        """Return the first element matching selector.

        Raises:
            TemplateError: If the skeleton has no matching element.
        """
        element = self.select_first(selector)
        if element is None:
            raise TemplateError(self.kind, selector)
        return element

    def __repr__(self) -> str:
        return f"Skeleton(kind={self.kind!r})"


def slot_in(element: Tag, selector: str, kind: str) -> Tag:
    """Like Skeleton.slot, for an element already detached from its skeleton."""
    found = element.select_one(selector)
    if found is None:
        raise TemplateError(kind, selector)
    return found


def set_text(element: Tag, text: str) -> Tag:
    """Replace the element's contents with literal text."""
    element.string = text
    return element


def add_class(element: Tag, *names: str) -> Tag:
    """Add classes to the element, keeping existing ones.

    Each name may hold several whitespace-separated classes.
    """
    existing = element.get("class") or []
    if isinstance(existing, str):
        existing = existing.split()
    classes = list(existing)
    for name in names:
        for part in name.split():
            if part not in classes:
                classes.append(part)
    element["class"] = classes
    return element


def set_attribute(element: Tag, name: str, value: str) -> Tag:
    element[name] = value
    return element


def append_child(parent: Tag, child: PageElement | str) -> Tag:
    """Append child (moving it out of any tree it belongs to)."""
    if isinstance(child, str) and not isinstance(child, NavigableString):
        child = NavigableString(child)
    parent.append(child)
    return parent


def parse_fragment(markup: str) -> list[PageElement]:
    """Parse markup as a bare fragment and return its top-level nodes."""
    return list(BeautifulSoup(markup, PARSER).contents)


def parse_document_body(markup: str) -> list[PageElement]:
    """Parse markup as a whole document and return the body's nodes.

    Markup without an explicit ``<body>`` yields its top-level nodes.
    """
    soup = BeautifulSoup(markup, PARSER)
    container = soup.body if soup.body is not None else soup
    return list(container.contents)
