"""Tests for the model answer formatter."""

import pytest

from verifact.formatting import format_response, render_blocks
from verifact.schemas import BlockKind, FormattedBlock, InlineSpan


def kinds(blocks):
    return [b.kind for b in blocks]


class TestFormatResponse:
    """Tests for format_response()."""

    def test_structured_credibility_answer(self):
        """Subheadings, section break and inline bullets in order."""
        blocks = format_response("CREDIBILITY RATING: HIGH\n\nKEY FINDINGS:\n* point one * point two")

        assert blocks == (
            FormattedBlock.of(BlockKind.SUBHEADING, "CREDIBILITY RATING: HIGH"),
            FormattedBlock.section_break(),
            FormattedBlock.of(BlockKind.SUBHEADING, "KEY FINDINGS:"),
            FormattedBlock.of(BlockKind.BULLET_POINT, "point one"),
            FormattedBlock.of(BlockKind.BULLET_POINT, "point two"),
        )

    @pytest.mark.parametrize("raw", ["", "   ", "\n\n  \n"])
    def test_blank_input(self, raw):
        assert format_response(raw) == ()

    def test_plain_text_passes_through(self):
        blocks = format_response("Nothing special here.")
        assert blocks == (FormattedBlock.of(BlockKind.TEXT, "Nothing special here."),)

    def test_emphasis(self):
        (block,) = format_response("This is **important** text")
        assert block.kind is BlockKind.TEXT
        assert block.spans == (
            InlineSpan(text="This is "),
            InlineSpan(text="important", emphasis=True),
            InlineSpan(text=" text"),
        )

    def test_emphasis_asterisks_do_not_start_bullets(self):
        (block,) = format_response("**Note** the claim")
        assert block.kind is BlockKind.TEXT
        assert block.text == "Note the claim"

    def test_bullet_with_emphasis(self):
        (block,) = format_response("* **Strong** sourcing")
        assert block.kind is BlockKind.BULLET_POINT
        assert block.spans == (
            InlineSpan(text="Strong", emphasis=True),
            InlineSpan(text=" sourcing"),
        )

    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("## Summary", "Summary"),
            ("# Title #", "Title"),
            ("###### Deep", "Deep"),
        ],
    )
    def test_headings(self, raw, expected):
        (block,) = format_response(raw)
        assert block == FormattedBlock.of(BlockKind.HEADING, expected)

    def test_bold_subheading(self):
        (block,) = format_response("**KEY FINDINGS:**")
        assert block == FormattedBlock.of(BlockKind.SUBHEADING, "KEY FINDINGS:")

    def test_subheading_with_sentence_value(self):
        blocks = format_response("RECOMMENDATION: Verify with other sources.")
        assert blocks == (
            FormattedBlock.of(BlockKind.SUBHEADING, "RECOMMENDATION:"),
            FormattedBlock.of(BlockKind.TEXT, "Verify with other sources."),
        )

    def test_subheading_value_keeps_emphasis(self):
        blocks = format_response("RECOMMENDATION: **Verify** it.")
        assert blocks[0] == FormattedBlock.of(BlockKind.SUBHEADING, "RECOMMENDATION:")
        assert blocks[1].kind is BlockKind.TEXT
        assert blocks[1].spans == (
            InlineSpan(text="Verify", emphasis=True),
            InlineSpan(text=" it."),
        )

    def test_bold_label_with_emphasized_value(self):
        blocks = format_response("**SOURCE ANALYSIS:** Cites **two** outlets")
        assert blocks[0] == FormattedBlock.of(BlockKind.SUBHEADING, "SOURCE ANALYSIS:")
        assert blocks[1].spans == (
            InlineSpan(text="Cites "),
            InlineSpan(text="two", emphasis=True),
            InlineSpan(text=" outlets"),
        )

    def test_lowercase_label_is_not_subheading(self):
        (block,) = format_response("Note: sources were checked")
        assert block.kind is BlockKind.TEXT

    def test_bullet_markers(self):
        blocks = format_response("• one\n• two\n- three")
        assert kinds(blocks) == [BlockKind.BULLET_POINT] * 3
        assert [b.text for b in blocks] == ["one", "two", "three"]

    def test_text_before_inline_bullets(self):
        blocks = format_response("Findings: * a * b")
        assert kinds(blocks) == [BlockKind.TEXT, BlockKind.BULLET_POINT, BlockKind.BULLET_POINT]
        assert blocks[0].text == "Findings:"

    def test_asterisk_inside_word_is_text(self):
        (block,) = format_response("5*3 equals 15")
        assert block == FormattedBlock.of(BlockKind.TEXT, "5*3 equals 15")

    def test_unclosed_emphasis_is_text(self):
        (block,) = format_response("**unclosed")
        assert block == FormattedBlock.of(BlockKind.TEXT, "**unclosed")

    def test_single_break_between_text_lines(self):
        blocks = format_response("First line\nSecond line")
        assert kinds(blocks) == [BlockKind.TEXT, BlockKind.LINE_BREAK, BlockKind.TEXT]

    def test_multiple_breaks_collapse_to_one_section_break(self):
        blocks = format_response("Para one\n\n\n\nPara two")
        assert kinds(blocks) == [BlockKind.TEXT, BlockKind.SECTION_BREAK, BlockKind.TEXT]

    def test_single_break_before_subheading_is_section_break(self):
        blocks = format_response("Intro text\nKEY FINDINGS:")
        assert kinds(blocks) == [BlockKind.TEXT, BlockKind.SECTION_BREAK, BlockKind.SUBHEADING]

    def test_single_break_before_bullet_is_absorbed(self):
        blocks = format_response("Intro text\n* item")
        assert kinds(blocks) == [BlockKind.TEXT, BlockKind.BULLET_POINT]

    def test_windows_line_endings(self):
        blocks = format_response("First\r\n\r\nSecond")
        assert kinds(blocks) == [BlockKind.TEXT, BlockKind.SECTION_BREAK, BlockKind.TEXT]

    def test_no_block_is_empty(self):
        blocks = format_response("* \n*  *\nREAL TEXT here")
        for block in blocks:
            if block.kind not in (BlockKind.LINE_BREAK, BlockKind.SECTION_BREAK):
                assert block.text


class TestRenderBlocks:
    """Tests for render_blocks()."""

    def test_renders_markdown(self):
        blocks = format_response("CREDIBILITY RATING: HIGH\n\nKEY FINDINGS:\n* point one * point two")
        assert render_blocks(blocks) == (
            "**CREDIBILITY RATING: HIGH**\n\n**KEY FINDINGS:**\n- point one\n- point two"
        )

    def test_line_break_and_emphasis(self):
        blocks = format_response("First **bold** line\nSecond line")
        assert render_blocks(blocks) == "First **bold** line\nSecond line"

    def test_heading(self):
        assert render_blocks(format_response("# Summary\nBody")) == "## Summary\nBody"

    def test_empty(self):
        assert render_blocks(()) == ""
