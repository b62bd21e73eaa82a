"""MCP Server for splitting markdown documents into sections."""

import asyncio
import json
from typing import Any

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import Tool, TextContent

from .tools.split_document import (
    split_document as do_split_document,
    split_markdown_text as do_split_markdown_text,
)
from .tools.get_toc import get_toc as do_get_toc
from .tools.get_section import get_section as do_get_section

SPLIT_LEVEL_PROPERTY = {
    "type": "integer",
    "description": "Only split on headings up to this level (1-6); deeper headings stay in the body",
    "minimum": 1,
    "maximum": 6,
}

SOURCE_PROPERTY = {
    "type": "string",
    "description": "Local markdown file path or http(s) URL",
}


# Create MCP server
server = Server("markdown-split")


@server.list_tools()
async def list_tools() -> list[Tool]:
    """List available tools."""
    return [
        Tool(
            name="split_markdown",
            description="""Split markdown text into a tree of heading-anchored sections.

Each ATX heading (# to ######) starts a section; sections nest by heading
level. Text before the first heading is the body of the level-0 root.
Headings inside fenced code blocks are ignored.""",
            inputSchema={
                "type": "object",
                "properties": {
                    "content": {
                        "type": "string",
                        "description": "Markdown document text",
                    },
                    "max_split_level": SPLIT_LEVEL_PROPERTY,
                    "include_body": {
                        "type": "boolean",
                        "description": "Include raw heading lines and section bodies",
                        "default": True,
                    },
                },
                "required": ["content"],
            },
        ),
        Tool(
            name="split_document",
            description="""Load a markdown file or URL and split it into a section tree.

Same output as split_markdown, plus the source it was loaded from.""",
            inputSchema={
                "type": "object",
                "properties": {
                    "source": SOURCE_PROPERTY,
                    "max_split_level": SPLIT_LEVEL_PROPERTY,
                    "include_body": {
                        "type": "boolean",
                        "description": "Include raw heading lines and section bodies",
                        "default": True,
                    },
                },
                "required": ["source"],
            },
        ),
        Tool(
            name="get_toc",
            description="""Get the table of contents of a markdown document.

Returns headings with levels, anchors and heading paths, plus a rendered
markdown TOC. Use it to navigate before loading full sections.""",
            inputSchema={
                "type": "object",
                "properties": {
                    "source": SOURCE_PROPERTY,
                    "max_depth": {
                        "type": "integer",
                        "description": "Only include headings with level <= this value",
                    },
                    "max_split_level": SPLIT_LEVEL_PROPERTY,
                },
                "required": ["source"],
            },
        ),
        Tool(
            name="get_section",
            description="""Get the full text of one section, including its subsections.

Identify the section by anchor (from get_toc) or by heading path such as
"Configuration > Advanced Config".""",
            inputSchema={
                "type": "object",
                "properties": {
                    "source": SOURCE_PROPERTY,
                    "anchor": {
                        "type": "string",
                        "description": "Section anchor, e.g. 'advanced-config'",
                    },
                    "path": {
                        "anyOf": [
                            {"type": "string"},
                            {"type": "array", "items": {"type": "string"}},
                        ],
                        "description": "Heading path joined with ' > ', or a list of heading texts "
                                       "(use the list form when a heading contains ' > ')",
                    },
                    "max_split_level": SPLIT_LEVEL_PROPERTY,
                },
                "required": ["source"],
            },
        ),
    ]


@server.call_tool()
async def call_tool(name: str, arguments: dict[str, Any]) -> list[TextContent]:
    """Handle tool calls."""
    try:
        if name == "split_markdown":
            result = do_split_markdown_text(
                content=arguments["content"],
                max_split_level=arguments.get("max_split_level"),
                include_body=arguments.get("include_body", True),
            )
        elif name == "split_document":
            result = await do_split_document(
                source=arguments["source"],
                max_split_level=arguments.get("max_split_level"),
                include_body=arguments.get("include_body", True),
            )
        elif name == "get_toc":
            result = await do_get_toc(
                source=arguments["source"],
                max_depth=arguments.get("max_depth"),
                max_split_level=arguments.get("max_split_level"),
            )
        elif name == "get_section":
            result = await do_get_section(
                source=arguments["source"],
                anchor=arguments.get("anchor"),
                path=arguments.get("path"),
                max_split_level=arguments.get("max_split_level"),
            )
        else:
            result = {"error": f"Unknown tool: {name}"}

        return [TextContent(type="text", text=json.dumps(result, indent=2))]

    except Exception as e:
        error_result = {"error": str(e)}
        return [TextContent(type="text", text=json.dumps(error_result, indent=2))]


async def run_server():
    """Run the MCP server."""
    async with stdio_server() as (read_stream, write_stream):
        await server.run(
            read_stream,
            write_stream,
            server.create_initialization_options(),
        )


def main():
    """Entry point for the MCP server."""
    asyncio.run(run_server())


if __name__ == "__main__":
    main()
