"""Build hierarchical section tree from flat section list."""

from typing import Iterator, Optional

from .markdown import Section


def build_section_tree(sections: list[Section]) -> Section:
    """
    Nest flat sections by heading level and return the level-0 root.

    Each section becomes the last child of the nearest preceding section
    with a strictly lower level, so a level-3 heading right after a level-1
    heading nests directly under it. If the list does not start with a
    level-0 section an empty root is created.
    """
    if sections and sections[0].level == 0:
        root, rest = sections[0], sections[1:]
    else:
        root, rest = Section(level=0), sections

    stack: list[Section] = [root]
    for section in rest:
        if section.level == 0:
            raise ValueError("Only the first section may be a level-0 root")
        while stack[-1].level >= section.level:
            stack.pop()
        stack[-1].children.append(section)
        stack.append(section)

    return root


def iter_sections(root: Section) -> Iterator[Section]:
    """Pre-order traversal, root included."""
    yield root
    for child in root.children:
        yield from iter_sections(child)


def flatten_tree(nodes: list[Section], depth: int = 0) -> list[tuple[Section, int]]:
    """
    Flatten tree back to list with indent depth.

    Returns list of (section, indent_depth) tuples.
    """
    result: list[tuple[Section, int]] = []
    for node in nodes:
        result.append((node, depth))
        result.extend(flatten_tree(node.children, depth + 1))
    return result


def render_tree(section: Section) -> str:
    """Reassemble the text of a section and its whole subtree."""
    return "".join(node.text for node in iter_sections(section))


def get_section_path(root: Section, target: Section) -> Optional[list[Section]]:
    """Get the chain of sections from the root down to target, or None."""
    if root is target:
        return [root]
    for child in root.children:
        path = get_section_path(child, target)
        if path is not None:
            return [root] + path
    return None


def find_section(
    root: Section,
    anchor: Optional[str] = None,
    path: Optional[list[str]] = None,
) -> Optional[Section]:
    """
    Look a section up by its anchor or by its heading path.

    A heading path lists heading texts from the top level down, e.g.
    ["Configuration", "Advanced Config"]. The first match in document order
    wins.
    """
    if anchor is not None:
        return next((s for s in iter_sections(root) if s.level and s.anchor == anchor), None)

    if path is None:
        return None

    node = root
    for title in path:
        node = next((c for c in node.children if c.heading_text == title), None)
        if node is None:
            return None
    return node
