"""Rendering collaborators: fragment skeletons, templates, formatting, icons."""

from report_compiler.view.formatting import Formatter
from report_compiler.view.fragment import Skeleton
from report_compiler.view.icons import icon_for
from report_compiler.view.templates import TemplateProvider

__all__ = [
    "Formatter",
    "Skeleton",
    "TemplateProvider",
    "icon_for",
]
