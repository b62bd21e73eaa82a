"""Tests for the section builder and the top-level split functions."""

import pytest

from markdown_split import SplitOptions, split_markdown, split_text
from markdown_split.parser.hierarchy import iter_sections, render_tree
from markdown_split.parser.markdown import parse_markdown_to_sections


class TestParseMarkdown:
    def test_basic_sections(self, sample_markdown):
        sections = parse_markdown_to_sections(sample_markdown)
        titles = [s.heading_text for s in sections]
        assert titles == [
            "", "Getting Started", "Installation", "Configuration", "Basic Config",
            "Advanced Config", "API Reference", "Authentication", "Endpoints",
            "GET /users", "POST /users",
        ]

    def test_section_levels(self, sample_markdown):
        levels = {s.heading_text: s.level for s in parse_markdown_to_sections(sample_markdown)}
        assert levels["Getting Started"] == 1
        assert levels["Installation"] == 2
        assert levels["Basic Config"] == 3
        assert levels["GET /users"] == 4

    def test_code_comment_is_not_heading(self, sample_markdown):
        sections = parse_markdown_to_sections(sample_markdown)
        installation = next(s for s in sections if s.heading_text == "Installation")
        assert "# install the package\n" in installation.body

    def test_root_always_first(self):
        sections = parse_markdown_to_sections("# A\n")
        assert sections[0].level == 0
        assert sections[0].body == []
        assert sections[1].heading_line == "# A\n"

    def test_headingless(self, sample_headingless):
        sections = parse_markdown_to_sections(sample_headingless)
        assert len(sections) == 1
        assert sections[0].level == 0
        assert sections[0].body_text == sample_headingless

    def test_line_numbers(self):
        sections = parse_markdown_to_sections("pre\n\n# A\ntext\n## B\n")
        assert [s.line_number for s in sections] == [0, 3, 5]

    def test_max_split_level(self):
        options = SplitOptions(max_split_level=2)
        sections = parse_markdown_to_sections("# A\n## B\n### C\nx\n", options)
        assert [s.heading_text for s in sections] == ["", "A", "B"]
        assert sections[2].body == ["### C\n", "x\n"]

    def test_invalid_max_split_level(self):
        with pytest.raises(ValueError):
            SplitOptions(max_split_level=0)
        with pytest.raises(ValueError):
            SplitOptions(max_split_level=7)

    def test_unique_anchors(self):
        sections = parse_markdown_to_sections("# Intro\n# Intro\n## Intro\n# !!!\n")
        assert [s.anchor for s in sections[1:]] == ["intro", "intro-1", "intro-2", "section"]

    def test_suffixed_anchor_not_reused(self):
        sections = parse_markdown_to_sections("# A\n# A\n# A-1\n")
        anchors = [s.anchor for s in sections[1:]]
        assert anchors == ["a", "a-1", "a-1-1"]
        assert len(set(anchors)) == len(anchors)

    def test_setext_not_recognized(self):
        sections = parse_markdown_to_sections("Title\n=====\n\nSub\n---\n")
        assert len(sections) == 1

    def test_blockquote_heading_stays_in_body(self):
        sections = parse_markdown_to_sections("# A\n> ## Quoted\n")
        assert len(sections) == 2
        assert sections[1].body == ["> ## Quoted\n"]

    def test_line_count(self):
        sections = parse_markdown_to_sections("# A\none\ntwo\n")
        assert sections[1].line_count == 3
        assert sections[0].line_count == 0


class TestSplitMarkdown:
    def test_basic_split(self):
        root = split_markdown("# Title\nintro\n## Sub\nbody\n")
        assert root.level == 0
        assert root.body_text == ""
        assert len(root.children) == 1

        title = root.children[0]
        assert (title.level, title.heading_text, title.body_text) == (1, "Title", "intro\n")
        assert len(title.children) == 1

        sub = title.children[0]
        assert (sub.level, sub.heading_text, sub.body_text) == (2, "Sub", "body\n")
        assert sub.children == []

    def test_level_skip_nesting(self):
        root = split_markdown("# A\n### B\ntext\n")
        a = root.children[0]
        assert [c.heading_text for c in a.children] == ["B"]
        assert a.children[0].level == 3
        assert a.children[0].body_text == "text\n"

    def test_empty_input(self):
        root = split_markdown("")
        assert root.level == 0
        assert root.heading_text == ""
        assert root.body == []
        assert root.children == []

    def test_no_headings(self):
        root = split_markdown("just text\nmore text\n")
        assert root.body_text == "just text\nmore text\n"
        assert root.children == []

    def test_only_fenced_block(self):
        text = "```\n# not a heading\n## nor this\n```\n"
        root = split_markdown(text)
        assert root.children == []
        assert root.body_text == text

    def test_mismatched_fence_markers(self):
        text = "```\n# a\n~~~\n# b\n"
        root = split_markdown(text)
        assert root.children == []
        assert root.body_text == text

    def test_unterminated_fence(self):
        root = split_markdown("# A\n```\n# B\n")
        assert [s.heading_text for s in iter_sections(root)] == ["", "A"]

    def test_only_headings(self):
        root = split_markdown("# A\n## B\n# C")
        assert [c.heading_text for c in root.children] == ["A", "C"]
        assert root.children[1].heading_line == "# C"

    def test_child_levels_greater_than_parent(self, sample_markdown):
        for section in iter_sections(split_markdown(sample_markdown)):
            for child in section.children:
                assert child.level > section.level

    @pytest.mark.parametrize("text", [
        "",
        "\n",
        "no newline at end",
        "# A\n### B\ntext\n",
        "pre\n\n# A\n## B\n# C\n",
        "## Start low\n# Then high\n",
        "```\n# a\n~~~\n# b\n",
        "   ## Indented ##\nbody",
    ])
    def test_round_trip(self, text):
        assert render_tree(split_markdown(text)) == text

    def test_round_trip_sample(self, sample_markdown, sample_translated_chapter):
        assert render_tree(split_markdown(sample_markdown)) == sample_markdown
        assert render_tree(split_markdown(sample_translated_chapter)) == sample_translated_chapter

    def test_crlf_normalized(self):
        root = split_markdown("# A\r\nbody\r\n")
        assert root.children[0].heading_line == "# A\n"
        assert render_tree(root) == "# A\nbody\n"


class TestSplitText:
    def test_empty(self):
        assert split_text("") == []

    def test_headingless(self):
        assert split_text("no heading") == ["no heading"]

    def test_empty_preamble_omitted(self):
        assert split_text("# A\nx\n# B\ny\n") == ["# A\nx\n", "# B\ny\n"]

    def test_preamble_kept(self):
        assert split_text("pre\n\n# A\n") == ["pre\n\n", "# A\n"]

    def test_joins_back(self, sample_markdown):
        assert "".join(split_text(sample_markdown)) == sample_markdown

    def test_html_comment_headings_ignored(self, sample_translated_chapter):
        sections = split_text(sample_translated_chapter)
        assert len(sections) == 4
        assert "<!--\n## Installation\n-->" in sections[0]
        assert sections[1].startswith("## インストール\n")
        assert "> ### コマンドラインの記法" in sections[1]
        assert "### Installing `rustup` on Linux or macOS" in sections[1]
        assert sections[2].startswith("### LinuxとmacOSに`rustup`をインストールする\n")
        assert sections[3].startswith("### トラブルシューティング\n")

    def test_html_comment_headings_split_when_disabled(self, sample_translated_chapter):
        options = SplitOptions(skip_html_comments=False)
        assert len(split_text(sample_translated_chapter, options)) == 6
