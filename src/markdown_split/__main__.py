"""Command-line interface for markdown-split."""

import argparse
import asyncio
import json
import logging
import sys
from typing import Optional

from .exceptions import InputAcquisitionError
from .split import split_markdown, split_text
from .tools.get_toc import heading_paths, render_toc_markdown
from .tools.load_input import load_markdown
from .tools.split_document import resolve_options, section_to_dict


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="markdown-split",
        description="Split a markdown document into sections based on headings",
    )
    parser.add_argument("source", help="Markdown file path, http(s) URL, or - for stdin")
    parser.add_argument("--max-level", type=int, default=None,
                        help="Only split on headings up to this level (1-6)")
    parser.add_argument("--format", choices=["sections", "json", "paths", "toc"], default="sections",
                        help="Output format (default: sections)")
    parser.add_argument("--no-body", action="store_true", help="Omit section bodies from JSON output")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="Increase log verbosity")
    return parser


def _read_source(source: str) -> str:
    if source == "-":
        try:
            return sys.stdin.read()
        except UnicodeDecodeError as e:
            raise InputAcquisitionError(f"stdin is not valid {sys.stdin.encoding} text") from e
        except OSError as e:
            raise InputAcquisitionError(f"Could not read stdin: {e}") from e
    return asyncio.run(load_markdown(source))


def _format_sections(content: str, options) -> str:
    return "\n".join(
        f"Section {i}\n---------\n{text}\n---------"
        for i, text in enumerate(split_text(content, options))
    )


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    level = logging.WARNING - 10 * min(args.verbose, 2)
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    try:
        options = resolve_options(args.max_level)
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    try:
        content = _read_source(args.source)
    except InputAcquisitionError as e:
        print(f"error: input acquisition failed: {e}", file=sys.stderr)
        return 2

    if args.format == "sections":
        print(_format_sections(content, options))
        return 0

    root = split_markdown(content, options)
    if args.format == "json":
        print(json.dumps(section_to_dict(root, include_body=not args.no_body), indent=2, ensure_ascii=False))
    elif args.format == "paths":
        print("\n".join(heading_paths(root)))
    else:
        print(render_toc_markdown(root))
    return 0


if __name__ == "__main__":
    sys.exit(main())
