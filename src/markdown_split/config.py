"""Configuration for markdown-split."""

import os
from dataclasses import dataclass

DEFAULT_MAX_SPLIT_LEVEL = 6
DEFAULT_FETCH_TIMEOUT_S = 30.0
DEFAULT_USER_AGENT = "markdown-split"

MARKDOWN_SPLIT_FETCH_TIMEOUT_S = float(os.getenv("MARKDOWN_SPLIT_FETCH_TIMEOUT_S", str(DEFAULT_FETCH_TIMEOUT_S)))
MARKDOWN_SPLIT_USER_AGENT = os.getenv("MARKDOWN_SPLIT_USER_AGENT", DEFAULT_USER_AGENT)


def _env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.lower() in ('true', '1', 'yes')


@dataclass(frozen=True)
class SplitOptions:
    """
    Knobs for the splitter.

    max_split_level: headings deeper than this value are treated as plain
        text, not section boundaries.
    allow_indented_headings: accept up to 3 leading spaces before the `#` run.
    skip_html_comments: never treat lines inside `<!-- ... -->` blocks as headings.
    """
    max_split_level: int = DEFAULT_MAX_SPLIT_LEVEL
    allow_indented_headings: bool = True
    skip_html_comments: bool = True

    def __post_init__(self):
        if not 1 <= self.max_split_level <= 6:
            raise ValueError(f"max_split_level must be between 1 and 6, got {self.max_split_level}")

    @classmethod
    def from_env(cls) -> "SplitOptions":
        """Build options from MARKDOWN_SPLIT_* environment variables."""
        return cls(
            max_split_level=int(os.getenv("MARKDOWN_SPLIT_MAX_LEVEL", str(DEFAULT_MAX_SPLIT_LEVEL))),
            allow_indented_headings=not _env_flag("MARKDOWN_SPLIT_STRICT_INDENT", False),
            skip_html_comments=_env_flag("MARKDOWN_SPLIT_SKIP_HTML_COMMENTS", True),
        )
