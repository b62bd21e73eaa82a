"""Tool to split a markdown document into a section tree."""

from typing import Optional

import httpx

from ..config import SplitOptions
from ..exceptions import InputAcquisitionError
from ..parser.hierarchy import iter_sections
from ..parser.markdown import Section
from ..split import split_markdown
from .load_input import load_markdown


def resolve_options(max_split_level: Optional[int] = None) -> SplitOptions:
    """Environment defaults, with an explicit split level taking precedence."""
    options = SplitOptions.from_env()
    if max_split_level is None:
        return options
    return SplitOptions(
        max_split_level=max_split_level,
        allow_indented_headings=options.allow_indented_headings,
        skip_html_comments=options.skip_html_comments,
    )


def section_to_dict(section: Section, include_body: bool = True) -> dict:
    """Convert a section and its subtree to a JSON-ready dict."""
    entry = {
        "level": section.level,
        "title": section.heading_text,
        "anchor": section.anchor,
        "line_number": section.line_number,
        "line_count": section.line_count,
    }
    if include_body:
        entry["heading_line"] = section.heading_line
        entry["body"] = section.body_text
    entry["children"] = [section_to_dict(child, include_body) for child in section.children]
    return entry


def split_markdown_text(
    content: str,
    max_split_level: Optional[int] = None,
    include_body: bool = True,
) -> dict:
    """
    Split markdown text that is already in memory.

    Args:
        content: Markdown document
        max_split_level: Only split on headings up to this level (1-6)
        include_body: Whether to include raw heading lines and bodies

    Returns:
        Dict with the nested section tree
    """
    try:
        options = resolve_options(max_split_level)
    except ValueError as e:
        return {"error": str(e)}

    root = split_markdown(content, options)
    return {
        "section_count": sum(1 for s in iter_sections(root) if s.level),
        "root": section_to_dict(root, include_body),
    }


async def split_document(
    source: str,
    max_split_level: Optional[int] = None,
    include_body: bool = True,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> dict:
    """
    Load a markdown document from a path or URL and split it.

    Args:
        source: Local file path or http(s) URL
        max_split_level: Only split on headings up to this level (1-6)
        include_body: Whether to include raw heading lines and bodies

    Returns:
        Dict with the nested section tree, or an error
    """
    try:
        content = await load_markdown(source, transport=transport)
    except InputAcquisitionError as e:
        return {"error": str(e)}

    result = split_markdown_text(content, max_split_level, include_body)
    if "error" in result:
        return result
    return {"source": source, **result}
