"""MCP tool implementations."""

from .split_document import split_document, split_markdown_text
from .get_toc import get_toc
from .get_section import get_section

__all__ = ["split_document", "split_markdown_text", "get_toc", "get_section"]
