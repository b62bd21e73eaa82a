"""Custom exceptions for markdown-split."""


class MarkdownSplitError(Exception):
    """Base exception for markdown-split operations."""


class InputAcquisitionError(MarkdownSplitError):
    """The markdown source could not be read, fetched or decoded."""
