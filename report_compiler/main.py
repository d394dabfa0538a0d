"""Entry point for the report compiler.

Loads test trees from a JSON or YAML file, compiles each into a report
fragment and writes the resulting HTML page.
"""

from __future__ import annotations

import argparse
import sys
import warnings
from pathlib import Path

from report_compiler.building.tree import TreeCompiler
from report_compiler.config import ReportConfig
from report_compiler.errors import ContentRecoveryWarning, ReportCompilerError
from report_compiler.model.loader import load_test_trees
from report_compiler.view.formatting import Formatter
from report_compiler.view.templates import TemplateProvider
from report_compiler.writer import generate_html_report, write_html_report


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Compile recorded test trees into an HTML report"
    )
    parser.add_argument(
        "--input",
        required=True,
        type=Path,
        help="Path to the JSON or YAML file holding the test trees",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Path to write the HTML report (default: stdout)",
    )
    parser.add_argument(
        "--config-file",
        type=Path,
        default=None,
        help="Path to the report config JSON file",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = parse_args(argv)
    config = ReportConfig(args.config_file)

    try:
        roots = load_test_trees(args.input)
    except FileNotFoundError:
        print(f"Error: Input file not found: {args.input}", file=sys.stderr)
        return 1
    except ReportCompilerError as e:
        print(f"Error: Invalid test data: {e}", file=sys.stderr)
        return 1

    compiler = TreeCompiler(TemplateProvider(), Formatter(config))
    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always", ContentRecoveryWarning)
        try:
            fragments = compiler.compile_all(roots)
        except ReportCompilerError as e:
            print(f"Error compiling report: {e}", file=sys.stderr)
            return 1

    for w in caught:
        if issubclass(w.category, ContentRecoveryWarning):
            print(f"Warning: {w.message}", file=sys.stderr)
        else:
            warnings.showwarning(w.message, w.category, w.filename, w.lineno)

    if args.output is None:
        print(generate_html_report(fragments, config))
    else:
        write_html_report(fragments, args.output, config)
        print(f"Report written to {args.output} ({len(fragments)} tests)")
    return 0


if __name__ == "__main__":
    sys.exit(main())
