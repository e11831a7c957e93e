"""Unit tests for core/markdown/blocks.py"""

import pytest

from docview.core.markdown.blocks import READERS, parse
from docview.core.markdown.nodes import (
    Align, Blockquote, CodeBlock, Definition, FootnoteDef, Heading, HorizontalRule,
    ListBlock, MathBlock, Paragraph, RawHtml, Strong, Table, Text,
)


def test_heading_and_paragraph():
    assert parse("# T\n\ntext") == [
        Heading(level=1, children=(Text("T"),)),
        Paragraph(children=(Text("text"),)),
    ]


def test_seven_hashes_is_a_paragraph():
    blocks = parse("###### six\n####### seven")
    assert blocks[0] == Heading(level=6, children=(Text("six"),))
    assert isinstance(blocks[1], Paragraph)


def test_paragraph_lines_join_with_space():
    assert parse("one\ntwo\n\nthree") == [
        Paragraph((Text("one two"),)),
        Paragraph((Text("three"),)),
    ]


def test_fence_with_language():
    assert parse("```py\nx = 1\ny = 2\n```") == [CodeBlock(language="py", body="x = 1\ny = 2")]


def test_unterminated_fence_runs_to_end():
    assert parse("```js\nlet a") == [CodeBlock(language="js", body="let a")]


def test_fence_keeps_markdown_literal():
    assert parse("```\n# not a heading\n```") == [CodeBlock(language="", body="# not a heading")]


def test_math_block():
    assert parse("$$\nE=mc^2\n$$") == [MathBlock(body="E=mc^2")]


@pytest.mark.parametrize("line", ["---", "***", "___", "-----"])
def test_horizontal_rule(line):
    assert parse(line) == [HorizontalRule()]


def test_table_alignment():
    blocks = parse("| a | b | c |\n|:--|:-:|--:|\n| 1 | 2 | 3 |")
    table = blocks[0]
    assert isinstance(table, Table)
    assert table.aligns == (Align.left, Align.center, Align.right)
    assert table.headers == ((Text("a"),), (Text("b"),), (Text("c"),))
    assert table.rows == (((Text("1"),), (Text("2"),), (Text("3"),)),)


def test_table_ends_at_line_without_pipe():
    blocks = parse("a|b\n---|---\n1|2\nafter")
    assert isinstance(blocks[0], Table)
    assert len(blocks[0].rows) == 1
    assert blocks[1] == Paragraph((Text("after"),))


def test_empty_table_cells_are_dropped():
    table = parse("a|b\n---|---\n1||3")[0]
    assert table.rows == (((Text("1"),), (Text("3"),)),)


def test_nested_blockquote():
    assert parse("> a\n>> b") == [
        Blockquote((
            Paragraph((Text("a"),)),
            Blockquote((Paragraph((Text("b"),)),)),
        )),
    ]


def test_blockquote_continues_over_blank_line():
    assert parse("> a\n\n> b") == [
        Blockquote((Paragraph((Text("a"),)), Paragraph((Text("b"),)))),
    ]


def test_blockquote_holds_list():
    [quote] = parse("> - x\n> - y")
    assert isinstance(quote.children[0], ListBlock)
    assert len(quote.children[0].items) == 2


def test_blockquote_depth_cap():
    """Past the depth limit the remaining quote text becomes one paragraph."""
    assert parse(">>> deep", max_depth=1) == [
        Blockquote((Blockquote((Paragraph((Text("> deep"),)),)),)),
    ]


def test_deep_blockquote_does_not_recurse_unbounded():
    blocks = parse(">" * 5000 + " x")
    assert isinstance(blocks[0], Blockquote)


def test_footnote_definition():
    assert parse("[^1]: the note") == [FootnoteDef(id="1", children=(Text("the note"),))]


def test_raw_html_lines_pass_through():
    blocks = parse("<details>\n<summary>S</summary>\nbody\n</details>")
    assert blocks == [
        RawHtml("<details>"),
        RawHtml("<summary>S</summary>"),
        Paragraph((Text("body"),)),
        RawHtml("</details>"),
    ]


def test_definition_replaces_plain_paragraph():
    assert parse("Term\n: meaning") == [
        Definition(term=(Text("Term"),), children=(Text("meaning"),)),
    ]


def test_definition_needs_plain_term():
    """A formatted paragraph is not turned into a definition term."""
    blocks = parse("**Term**\n: x")
    assert blocks == [
        Paragraph((Strong((Text("Term"),)),)),
        Paragraph((Text(": x"),)),
    ]


def test_crlf_is_normalized():
    assert parse("# A\r\n\r\nb\r\n") == parse("# A\n\nb\n")


@pytest.mark.parametrize("source", [
    "", "\n\n", "```", "$$", ">", "|", "- ", "[^1]:", "***bold", "|a|\n|-|",
    "\x00", ": orphan", "1.", "> > >", "- [x]", "<details", "| --- |",
])
def test_parse_never_raises(source):
    assert isinstance(parse(source), list)


def test_readers_share_the_reader_signature():
    """Every block reader is annotated with the common reader signature and documented."""
    for reader in READERS:
        hints = reader.__annotations__
        assert list(hints) == ["lines", "i", "blocks", "ctx", "return"], reader.__name__
        assert reader.__doc__, reader.__name__
