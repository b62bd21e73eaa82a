"""Tool to get a specific section's content."""

from typing import Optional, Union

import httpx

from ..exceptions import InputAcquisitionError
from ..parser.hierarchy import find_section, render_tree
from ..split import split_markdown
from .get_toc import PATH_SEPARATOR
from .load_input import load_markdown
from .split_document import resolve_options


async def get_section(
    source: str,
    anchor: Optional[str] = None,
    path: Optional[Union[str, list[str]]] = None,
    max_split_level: Optional[int] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> dict:
    """
    Get the full content of a specific section.

    Args:
        source: Local file path or http(s) URL
        anchor: The section anchor (e.g. "advanced-config")
        path: Heading path, either a list of heading texts or a string joined
            with " > " (e.g. "Configuration > Advanced Config"). Use the list
            form when a heading itself contains " > ".
        max_split_level: Only split on headings up to this level (1-6)

    Returns:
        Dict with section content (including subsections) and metadata
    """
    if anchor is None and path is None:
        return {"error": "Either anchor or path is required"}

    try:
        options = resolve_options(max_split_level)
        content = await load_markdown(source, transport=transport)
    except (InputAcquisitionError, ValueError) as e:
        return {"error": str(e)}

    root = split_markdown(content, options)
    if isinstance(path, str):
        titles = path.split(PATH_SEPARATOR)
    else:
        titles = list(path) if path is not None else None
    section = find_section(root, anchor=anchor, path=titles)
    if section is None or section is root:
        return {"error": f"Section not found: {anchor if anchor is not None else path}"}

    return {
        "title": section.heading_text,
        "anchor": section.anchor,
        "level": section.level,
        "line_number": section.line_number,
        "children": [child.heading_text for child in section.children],
        "content": render_tree(section),
    }
