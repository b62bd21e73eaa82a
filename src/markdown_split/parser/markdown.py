"""Markdown parsing into a flat, ordered list of heading-anchored sections."""

import logging
from dataclasses import dataclass, field
from typing import Optional

from ..config import SplitOptions
from .headings import match_heading, slugify
from .scanner import scan_lines

logger = logging.getLogger(__name__)


@dataclass
class Section:
    """
    A heading plus the raw lines that follow it.

    Level 0 is the synthetic preamble/root section: it has no heading line
    and holds whatever precedes the first heading. Body lines keep their
    newline, so joining them gives back the original text.
    """
    level: int
    heading_text: str = ""
    heading_line: str = ""
    body: list[str] = field(default_factory=list)
    children: list["Section"] = field(default_factory=list)
    line_number: int = 0
    anchor: str = ""

    @property
    def body_text(self) -> str:
        return "".join(self.body)

    @property
    def text(self) -> str:
        """Heading line followed by the body, without child sections."""
        return self.heading_line + self.body_text

    @property
    def line_count(self) -> int:
        return len(self.body) + (1 if self.heading_line else 0)


def _unique_anchor(title: str, seen: dict[str, int]) -> str:
    """GitHub-style anchor: repeated slugs get -1, -2, ... suffixes until unused."""
    slug = slugify(title) or "section"
    anchor = slug
    while anchor in seen:
        seen[slug] += 1
        anchor = f"{slug}-{seen[slug]}"
    seen[anchor] = 0
    return anchor


def parse_markdown_to_sections(content: str, options: Optional[SplitOptions] = None) -> list[Section]:
    """
    Parse markdown content into sections based on ATX headers.

    Each header up to `options.max_split_level` starts a new section which
    runs until the next such header. The level-0 preamble section is always
    first, even when the document opens with a heading and its body is empty.
    Headings inside fenced code blocks (and HTML comments, when enabled) are
    ordinary body lines.
    """
    options = options or SplitOptions()
    sections: list[Section] = []
    anchors: dict[str, int] = {}
    current = Section(level=0)

    for line in scan_lines(content, options):
        heading = match_heading(line.content, options) if line.is_heading_candidate else None

        if heading is None or heading.level > options.max_split_level:
            current.body.append(line.raw)
            continue

        sections.append(current)
        current = Section(
            level=heading.level,
            heading_text=heading.text,
            heading_line=line.raw,
            line_number=line.number,
            anchor=_unique_anchor(heading.text, anchors),
        )

    sections.append(current)

    logger.debug("Split points (lines): %s", [s.line_number for s in sections[1:]])
    logger.debug("Found %d sections", len(sections))
    return sections
