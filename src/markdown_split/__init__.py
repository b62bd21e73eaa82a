"""Split markdown documents into heading-anchored sections."""

from .config import SplitOptions
from .exceptions import InputAcquisitionError, MarkdownSplitError
from .parser.markdown import Section
from .split import split_markdown, split_text

__all__ = [
    "Section",
    "SplitOptions",
    "InputAcquisitionError",
    "MarkdownSplitError",
    "split_markdown",
    "split_text",
]

__version__ = "0.1.0"
