"""Tests for MCP tool dispatch."""

import json

import pytest

from markdown_split.server import call_tool, list_tools


class TestServer:
    @pytest.mark.asyncio
    async def test_list_tools(self):
        names = [tool.name for tool in await list_tools()]
        assert names == ["split_markdown", "split_document", "get_toc", "get_section"]

    @pytest.mark.asyncio
    async def test_split_markdown(self):
        content = await call_tool("split_markdown", {"content": "# A\n## B\n"})
        result = json.loads(content[0].text)
        assert result["section_count"] == 2
        assert result["root"]["children"][0]["children"][0]["title"] == "B"

    @pytest.mark.asyncio
    async def test_get_toc(self, sample_file):
        content = await call_tool("get_toc", {"source": sample_file, "max_depth": 2})
        result = json.loads(content[0].text)
        assert result["section_count"] == 4

    @pytest.mark.asyncio
    async def test_missing_argument(self):
        content = await call_tool("split_document", {})
        assert "error" in json.loads(content[0].text)

    @pytest.mark.asyncio
    async def test_unknown_tool(self):
        content = await call_tool("nope", {})
        assert "Unknown tool" in json.loads(content[0].text)["error"]
