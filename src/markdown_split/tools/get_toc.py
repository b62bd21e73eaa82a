"""Tool to get the table of contents of a markdown document."""

from typing import Optional

import httpx

from ..exceptions import InputAcquisitionError
from ..parser.hierarchy import flatten_tree
from ..parser.markdown import Section
from ..split import split_markdown
from .load_input import load_markdown
from .split_document import resolve_options

PATH_SEPARATOR = " > "


def build_toc(root: Section, max_depth: Optional[int] = None) -> list[dict]:
    """
    List headings in document order with their heading paths.

    Headings with a level above max_depth are left out.
    """
    entries: list[dict] = []
    path: list[str] = []

    for section, depth in flatten_tree(root.children):
        del path[depth:]
        path.append(section.heading_text)
        if max_depth is not None and section.level > max_depth:
            continue
        entries.append({
            "level": section.level,
            "title": section.heading_text,
            "anchor": section.anchor,
            "path": list(path),
            "line_number": section.line_number,
            "line_count": section.line_count,
        })

    return entries


def render_toc_markdown(root: Section, max_depth: Optional[int] = None) -> str:
    """Render the table of contents as a nested markdown bullet list."""
    lines = []
    for entry in build_toc(root, max_depth):
        indent = "  " * (len(entry["path"]) - 1)
        lines.append(f"{indent}- [{entry['title']}](#{entry['anchor']})")
    return "\n".join(lines)


def heading_paths(root: Section) -> list[str]:
    """Every heading as a 'Parent > Child' path string."""
    return [PATH_SEPARATOR.join(entry["path"]) for entry in build_toc(root)]


async def get_toc(
    source: str,
    max_depth: Optional[int] = None,
    max_split_level: Optional[int] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> dict:
    """
    Get the table of contents for a markdown document.

    Args:
        source: Local file path or http(s) URL
        max_depth: Only include headings with level <= this value
        max_split_level: Only split on headings up to this level (1-6)

    Returns:
        Dict with TOC entries and a rendered markdown TOC
    """
    try:
        options = resolve_options(max_split_level)
        content = await load_markdown(source, transport=transport)
    except (InputAcquisitionError, ValueError) as e:
        return {"error": str(e)}

    root = split_markdown(content, options)
    entries = build_toc(root, max_depth)
    return {
        "source": source,
        "section_count": len(entries),
        "sections": entries,
        "markdown": render_toc_markdown(root, max_depth),
    }
