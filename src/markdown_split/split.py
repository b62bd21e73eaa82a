"""Split a markdown document into sections based on headings (h1-h6)."""

from typing import Optional

from .config import SplitOptions
from .parser.hierarchy import build_section_tree
from .parser.markdown import Section, parse_markdown_to_sections


def split_markdown(text: str, options: Optional[SplitOptions] = None) -> Section:
    """
    Split markdown text into a tree of sections.

    Returns the level-0 root section. Its body holds any preamble before the
    first heading and its children are the top-level sections. Any text is
    accepted, so this never fails.
    """
    return build_section_tree(parse_markdown_to_sections(text, options))


def split_text(text: str, options: Optional[SplitOptions] = None) -> list[str]:
    """
    Split markdown text into a flat list of section texts.

    Each item starts at a heading line and runs to the next heading; text
    before the first heading is its own item unless it is empty. Joining
    the items gives back the input with `\\r\\n` normalized to `\\n`.
    """
    return [s.text for s in parse_markdown_to_sections(text, options) if s.level or s.body]
