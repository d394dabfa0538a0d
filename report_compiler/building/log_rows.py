"""Log table rows.

Rows for a top-level test and rows for nested nodes differ in how the
details cell is filled.  Top-level rows parse the line-broken details as
a document, re-extract the body and fall back to literal text when the
markup can't be parsed.  Nested rows append the line-broken markup
directly; markup the parser rejects goes in as plain text, silently.
"""

from __future__ import annotations

import warnings

from bs4 import ParserRejectedMarkup, Tag

from report_compiler.errors import ContentRecoveryWarning
from report_compiler.model.nodes import LogEntry, validate_column_count
from report_compiler.view.formatting import Formatter
from report_compiler.view.fragment import (
    add_class,
    append_child,
    parse_document_body,
    parse_fragment,
    set_attribute,
    set_text,
)
from report_compiler.view.icons import icon_class
from report_compiler.view.templates import LOG_ROW, TemplateProvider

STEP_COLUMNS = 4


def _fill_details(cell: Tag, markup: str, nested: bool) -> None:
    if nested:
        try:
            parts = parse_fragment(markup)
        except ParserRejectedMarkup:
            append_child(cell, markup)
            return
        for part in parts:
            append_child(cell, part)
        return

    try:
        parts = parse_document_body(markup)
    except ParserRejectedMarkup as e:
        warnings.warn(
            f"Could not parse log details, embedding as text: {e}",
            ContentRecoveryWarning,
            stacklevel=3,
        )
        set_text(cell, markup)
        return
    for part in parts:
        append_child(cell, part)


def build_row(
    log: LogEntry,
    column_count: int,
    templates: TemplateProvider,
    formatter: Formatter,
    nested: bool = False,
) -> Tag:
    """Build one ``<tr>`` for a log entry.

    Args:
        log: The log entry to render.
        column_count: 3 or 4; the step-name cell exists only for 4.
        templates: Source of the row skeleton.
        formatter: Time formatting and newline escaping.
        nested: True for rows of nested nodes (details appended without
            the parse-and-recover step).

    Returns:
        The filled row element, ready to append into a ``tbody``.

    Raises:
        ConfigurationError: If column_count is unsupported.
        TemplateError: If the row skeleton lacks a required slot.
    """
    column_count = validate_column_count(column_count)
    row = templates.get(LOG_ROW, column_count)

    set_text(row.slot("td.timestamp"), formatter.time(log.timestamp))

    status = str(log.log_status)
    status_cell = add_class(row.slot("td.status"), status)
    set_attribute(status_cell, "title", status)
    add_class(row.slot("td.status > i"), icon_class(log.log_status))

    if column_count == STEP_COLUMNS:
        set_text(row.slot(".step-name"), log.step_name)

    _fill_details(
        row.slot(".step-details"),
        formatter.escape_newlines(log.details),
        nested,
    )

    return row.slot("tr")
