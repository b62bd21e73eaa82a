"""ATX heading detection and anchor slugs."""

import re
from typing import NamedTuple, Optional

from ..config import SplitOptions

# 1-6 `#`, then whitespace or end of line. Seven or more never match.
ATX_HEADING_PATTERN = re.compile(r'^(?P<indent> {0,3})(?P<marks>#{1,6})(?:[ \t]+(?P<text>.*))?$')
CLOSING_SEQUENCE_PATTERN = re.compile(r'[ \t]+#+$')


class HeadingMatch(NamedTuple):
    level: int
    text: str


def _strip_closing_sequence(text: str) -> str:
    text = text.strip(' \t')
    if text and set(text) == {'#'}:
        return ''
    return CLOSING_SEQUENCE_PATTERN.sub('', text).rstrip(' \t')


def match_heading(line: str, options: Optional[SplitOptions] = None) -> Optional[HeadingMatch]:
    """
    Classify a line as an ATX heading.

    Returns (level, text) or None. Setext headings (text underlined with
    `===` or `---`) are not recognized.
    """
    options = options or SplitOptions()
    match = ATX_HEADING_PATTERN.match(line)
    if not match:
        return None
    if match.group('indent') and not options.allow_indented_headings:
        return None

    level = len(match.group('marks'))
    return HeadingMatch(level, _strip_closing_sequence(match.group('text') or ''))


def slugify(text: str) -> str:
    """Convert text to a URL-friendly slug."""
    text = text.lower().strip()
    text = re.sub(r'[^\w\s-]', '', text)
    text = re.sub(r'[-\s]+', '-', text)
    return text
