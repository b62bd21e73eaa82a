"""Acquire markdown text from local files or URLs."""

import logging
from pathlib import Path
from typing import Optional

import httpx

from ..config import MARKDOWN_SPLIT_FETCH_TIMEOUT_S, MARKDOWN_SPLIT_USER_AGENT
from ..exceptions import InputAcquisitionError

logger = logging.getLogger(__name__)


def is_url(source: str) -> bool:
    return source.startswith(("http://", "https://"))


def read_markdown_file(path: str, encoding: str = "utf-8") -> str:
    """
    Read a markdown file from disk.

    Raises:
        InputAcquisitionError: the path is missing, is not a file, cannot be
            read, or is not valid text in the given encoding.
    """
    file_path = Path(path)
    if not file_path.exists():
        raise InputAcquisitionError(f"Path does not exist: {path}")
    if not file_path.is_file():
        raise InputAcquisitionError(f"Path is not a file: {path}")

    try:
        with open(file_path, 'r', encoding=encoding, newline='') as f:
            content = f.read()
    except UnicodeDecodeError as e:
        raise InputAcquisitionError(f"File is not valid {encoding} text: {path}") from e
    except OSError as e:
        raise InputAcquisitionError(f"Could not read {path}: {e}") from e

    logger.info("Read %s (%d chars)", path, len(content))
    return content


async def fetch_markdown_url(
    url: str,
    timeout: Optional[float] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> str:
    """
    Fetch raw markdown over HTTP(S).

    Raises:
        InputAcquisitionError: on transport errors or non-2xx responses.
    """
    headers = {
        "Accept": "text/markdown, text/plain;q=0.9, */*;q=0.1",
        "User-Agent": MARKDOWN_SPLIT_USER_AGENT,
    }

    try:
        async with httpx.AsyncClient(
            timeout=timeout or MARKDOWN_SPLIT_FETCH_TIMEOUT_S,
            transport=transport,
            follow_redirects=True,
        ) as client:
            response = await client.get(url, headers=headers)
            response.raise_for_status()
    except httpx.HTTPStatusError as e:
        logger.warning("Fetching %s failed with status %s", url, e.response.status_code)
        raise InputAcquisitionError(f"HTTP {e.response.status_code} fetching {url}") from e
    except httpx.HTTPError as e:
        logger.warning("Fetching %s failed: %s", url, e)
        raise InputAcquisitionError(f"Could not fetch {url}: {e}") from e

    encoding = response.encoding or "utf-8"
    try:
        content = response.content.decode(encoding)
    except (UnicodeDecodeError, LookupError) as e:
        logger.warning("Response from %s is not valid %s text", url, encoding)
        raise InputAcquisitionError(f"Response is not valid {encoding} text: {url}") from e

    logger.info("Fetched %s (%d chars)", url, len(content))
    return content


async def load_markdown(source: str, transport: Optional[httpx.AsyncBaseTransport] = None) -> str:
    """Load markdown from a URL or a local path."""
    if is_url(source):
        return await fetch_markdown_url(source, transport=transport)
    return read_markdown_file(source)
