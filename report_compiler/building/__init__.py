"""Compilation of test trees into report fragments."""

from report_compiler.building.attributes import bind_head, bind_tags
from report_compiler.building.log_rows import build_row
from report_compiler.building.tree import TreeCompiler, depth_class

__all__ = [
    "TreeCompiler",
    "bind_head",
    "bind_tags",
    "build_row",
    "depth_class",
]
