"""Serialize the markdown AST to HTML markup"""

from html import escape
from typing import Iterable

from docview.core.highlight.highlight import highlight
from docview.core.highlight.rules import FENCE_LANGUAGES
from docview.core.markdown.blocks import DEFAULT_MAX_DEPTH, parse
from docview.core.markdown.nodes import (
    Autolink, Block, Blockquote, Code, CodeBlock, Definition, Emphasis,
    FootnoteDef, FootnoteRef, Heading, HorizontalRule, Image, Inline, Link,
    ListBlock, Mark, MathBlock, Paragraph, RawHtml, Strike, Strong,
    StrongEmphasis, Table, Text,
)


_WRAPPERS = {
    StrongEmphasis: ('<strong><em>', '</em></strong>'),
    Strong:         ('<strong>', '</strong>'),
    Emphasis:       ('<em>', '</em>'),
    Strike:         ('<del>', '</del>'),
    Mark:           ('<mark>', '</mark>'),
    Code:           ('<code>', '</code>'),
}


def emit_inline(nodes: Iterable[Inline]) -> str:
    out = []
    for node in nodes:
        if isinstance(node, Text):
            out.append(escape(node.text))
        elif type(node) in _WRAPPERS:
            start, end = _WRAPPERS[type(node)]
            out.append(start + emit_inline(node.children) + end)
        elif isinstance(node, Link):
            out.append(f'<a href="{escape(node.href)}" target="_blank" rel="noopener">{emit_inline(node.children)}</a>')
        elif isinstance(node, Autolink):
            url = escape(node.url)
            out.append(f'<a href="{url}" target="_blank" rel="noopener">{url}</a>')
        elif isinstance(node, Image):
            out.append(f'<img src="{escape(node.src)}" alt="{escape(node.alt)}" loading="lazy">')
        elif isinstance(node, FootnoteRef):
            out.append(f'<sup class="footnote-ref"><a href="#fn{node.id}" id="fnref{node.id}">[{node.id}]</a></sup>')
    return ''.join(out)


def _emit_list(lst: ListBlock) -> str:
    tag = 'ol' if lst.ordered else 'ul'
    out = [f'<{tag}>']
    for item in lst.items:
        if item.checked is None:
            out.append('<li>')
        else:
            state = ' checked disabled' if item.checked else ' disabled'
            out.append(f'<li class="task-list-item"><input type="checkbox"{state}>')
        out.append(emit_inline(item.children))
        out.extend(_emit_list(sub) for sub in item.sublists)
        out.append('</li>')
    out.append(f'</{tag}>')
    return ''.join(out)


def _emit_table(table: Table) -> str:
    def align(col: int) -> str:
        return table.aligns[col].value if col < len(table.aligns) else 'left'

    out = ['<table><thead><tr>']
    for col, cell in enumerate(table.headers):
        out.append(f'<th style="text-align:{align(col)}">{emit_inline(cell)}</th>')
    out.append('</tr></thead><tbody>')
    for row in table.rows:
        out.append('<tr>')
        for col, cell in enumerate(row):
            out.append(f'<td style="text-align:{align(col)}">{emit_inline(cell)}</td>')
        out.append('</tr>')
    out.append('</tbody></table>')
    return ''.join(out)


def _emit_code(block: CodeBlock) -> str:
    lang = block.language
    body = highlight(block.body, lang) if lang in FENCE_LANGUAGES else escape(block.body)
    attr = f' data-lang="{escape(lang)}"' if lang else ''
    return f'<pre{attr}><code>{body}</code></pre>'


def emit_block(block: Block) -> str:
    if isinstance(block, Heading):
        return f'<h{block.level}>{emit_inline(block.children)}</h{block.level}>'
    if isinstance(block, Paragraph):
        return f'<p>{emit_inline(block.children)}</p>'
    if isinstance(block, CodeBlock):
        return _emit_code(block)
    if isinstance(block, MathBlock):
        return f'<div class="math-block"><code>{escape(block.body)}</code></div>'
    if isinstance(block, Blockquote):
        return f'<blockquote>{emit_blocks(block.children)}</blockquote>'
    if isinstance(block, ListBlock):
        return _emit_list(block)
    if isinstance(block, Table):
        return _emit_table(block)
    if isinstance(block, HorizontalRule):
        return '<hr>'
    if isinstance(block, FootnoteDef):
        return (f'<div class="footnotes"><p id="fn{block.id}"><sup>{block.id}</sup> '
                f'{emit_inline(block.children)} <a href="#fnref{block.id}">↩</a></p></div>')
    if isinstance(block, RawHtml):
        return block.line
    if isinstance(block, Definition):
        return f'<dl><dt>{emit_inline(block.term)}</dt><dd>{emit_inline(block.children)}</dd></dl>'
    raise TypeError(f"Unknown block node: {type(block).__name__}")


def emit_blocks(blocks: Iterable[Block]) -> str:
    return ''.join(emit_block(b) for b in blocks)


def render_markdown(source: str, max_depth: int = DEFAULT_MAX_DEPTH) -> str:
    """Parse markdown source and return its HTML markup."""
    return emit_blocks(parse(source, max_depth=max_depth))
