"""HTML page output for compiled test fragments."""

from __future__ import annotations

import html
from pathlib import Path
from typing import Iterable

from bs4 import Tag

from report_compiler.config import ReportConfig


def generate_html_report(
    fragments: Iterable[Tag], config: ReportConfig | None = None
) -> str:
    """Wrap compiled test fragments in a minimal HTML page.

    Args:
        fragments: ``<li>`` elements returned by TreeCompiler.compile().
        config: Supplies the document title.

    Returns:
        Complete HTML string.
    """
    config = config if config is not None else ReportConfig()
    parts: list[str] = []

    parts.append("<!DOCTYPE html>")
    parts.append('<html lang="en">')
    parts.append("<head>")
    parts.append('<meta charset="UTF-8">')
    parts.append(f"<title>{html.escape(config.document_title)}</title>")
    parts.append("</head>")
    parts.append("<body>")
    parts.append('<ul class="test-collection">')
    for fragment in fragments:
        parts.append(str(fragment))
    parts.append("</ul>")
    parts.append("</body>")
    parts.append("</html>")

    return "\n".join(parts)


def write_html_report(
    fragments: Iterable[Tag],
    output_path: Path,
    config: ReportConfig | None = None,
) -> None:
    """Write the HTML page for fragments to a file.

    Args:
        fragments: Compiled test fragments.
        output_path: Path to write the HTML file.
        config: Report configuration.
    """
    html_content = generate_html_report(fragments, config)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "w") as f:
        f.write(html_content)
