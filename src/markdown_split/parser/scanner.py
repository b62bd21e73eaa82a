"""Line scanning with fenced code block and HTML comment tracking."""

import re
from typing import Iterator, NamedTuple, Optional

from ..config import SplitOptions

# Up to 3 spaces of indentation, a run of 3+ backticks or tildes, then anything
FENCE_PATTERN = re.compile(r'^ {0,3}(`{3,}|~{3,})(.*)$')
COMMENT_OPEN_PATTERN = re.compile(r'^ {0,3}<!--')


class ScannedLine(NamedTuple):
    """A single line of input classified by the scanner."""
    content: str
    number: int
    in_fence: bool
    terminated: bool = True
    in_comment: bool = False

    @property
    def raw(self) -> str:
        """The line as it appears in the (newline-normalized) document."""
        return self.content + '\n' if self.terminated else self.content

    @property
    def is_heading_candidate(self) -> bool:
        return not (self.in_fence or self.in_comment)


def iter_raw_lines(text: str) -> Iterator[tuple[str, bool]]:
    """
    Yield (line, terminated) pairs with `\\r\\n` normalized to `\\n`.

    A trailing newline does not produce an extra empty line.
    """
    text = text.replace('\r\n', '\n')
    start = 0
    while start < len(text):
        end = text.find('\n', start)
        if end == -1:
            yield text[start:], False
            return
        yield text[start:end], True
        start = end + 1


def _opening_fence(line: str) -> Optional[tuple[str, int]]:
    """Return (fence char, run length) if the line opens a fenced block."""
    match = FENCE_PATTERN.match(line)
    if not match:
        return None
    marker, info = match.group(1), match.group(2)
    # Backtick fences cannot carry backticks in their info string
    if marker[0] == '`' and '`' in info:
        return None
    return marker[0], len(marker)


def _closes_fence(line: str, fence_char: str, fence_length: int) -> bool:
    match = FENCE_PATTERN.match(line)
    if not match:
        return False
    marker, rest = match.group(1), match.group(2)
    return marker[0] == fence_char and len(marker) >= fence_length and not rest.strip()


def scan_lines(text: str, options: Optional[SplitOptions] = None) -> Iterator[ScannedLine]:
    """
    Walk the document line by line, tracking fenced code blocks.

    Opening and closing fence lines are reported as inside the fence. A
    fence only closes on a run of the same character at least as long as
    the opening run; an unterminated fence runs to the end of the document.
    When enabled, `<!-- ... -->` blocks are tracked the same way.
    """
    options = options or SplitOptions()
    fence: Optional[tuple[str, int]] = None
    in_comment = False

    for number, (line, terminated) in enumerate(iter_raw_lines(text), start=1):
        if fence is not None:
            if _closes_fence(line, *fence):
                fence = None
            yield ScannedLine(line, number, True, terminated)
            continue

        if in_comment:
            if '-->' in line:
                in_comment = False
            yield ScannedLine(line, number, False, terminated, in_comment=True)
            continue

        opening = _opening_fence(line)
        if opening is not None:
            fence = opening
            yield ScannedLine(line, number, True, terminated)
            continue

        if options.skip_html_comments and COMMENT_OPEN_PATTERN.match(line):
            opener = line.index('<!--')
            in_comment = '-->' not in line[opener + 2:]
            yield ScannedLine(line, number, False, terminated, in_comment=True)
            continue

        yield ScannedLine(line, number, False, terminated)
