"""Markdown parsing utilities."""

from .markdown import Section, parse_markdown_to_sections
from .hierarchy import build_section_tree, find_section, iter_sections, render_tree

__all__ = [
    "Section",
    "parse_markdown_to_sections",
    "build_section_tree",
    "find_section",
    "iter_sections",
    "render_tree",
]
