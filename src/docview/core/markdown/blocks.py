"""Line-cursor block scanner producing the markdown AST"""

import re
from dataclasses import dataclass
from typing import Callable, Optional

from docview.core.markdown.inline import is_plain, parse_inline
from docview.core.markdown.lists import LIST_START_RE, build_lists
from docview.core.markdown.nodes import (
    Align, Block, Blockquote, CodeBlock, Definition, FootnoteDef, Heading,
    HorizontalRule, MathBlock, Paragraph, RawHtml, Table,
)


DEFAULT_MAX_DEPTH = 32

FENCE_RE = re.compile(r'^```(\w*)')
HEADING_RE = re.compile(r'^(#{1,6})\s+(.+)')
RULE_RE = re.compile(r'\*{3,}|-{3,}|_{3,}')
TABLE_SEP_RE = re.compile(r'^\|?\s*:?-+:?\s*\|')
TABLE_END_RE = re.compile(r'^(\*{3,}|-{3,})')
QUOTE_RE = re.compile(r'^>\s?')
FOOTNOTE_RE = re.compile(r'^\[\^(\d+)\]:\s+(.+)')
RAW_HTML_RE = re.compile(r'^<(details|summary|/details|/summary)', re.IGNORECASE)
DEFINITION_RE = re.compile(r'^:\s+')
PARAGRAPH_STOP_RE = re.compile(r'^[#>|\-*\d`$<:]|^\[\^')


@dataclass(frozen=True)
class _Context:
    depth: int
    max_depth: int


# A reader looks at lines[i]; it returns None when the line does not start its
# block, else (block or None, index of the first unconsumed line).
ReadResult = Optional[tuple[Optional[Block], int]]
Reader = Callable[[list[str], int, list[Block], _Context], ReadResult]


def _cells(line: str) -> list[str]:
    return [c.strip() for c in line.split('|') if c.strip()]


def _align(cell: str) -> Align:
    if cell.startswith(':') and cell.endswith(':'):
        return Align.center
    if cell.endswith(':'):
        return Align.right
    return Align.left


def _read_fence(lines: list[str], i: int, blocks: list[Block], ctx: _Context) -> ReadResult:
    """Fenced code block, up to a closing fence or the end of the document."""
    m = FENCE_RE.match(lines[i])
    if not m:
        return None
    body = []
    i += 1
    while i < len(lines) and not lines[i].startswith('```'):
        body.append(lines[i])
        i += 1
    return CodeBlock(language=m.group(1), body='\n'.join(body)), i + 1


def _read_math(lines: list[str], i: int, blocks: list[Block], ctx: _Context) -> ReadResult:
    """Display math between two $$ lines."""
    if lines[i].strip() != '$$':
        return None
    body = []
    i += 1
    while i < len(lines) and lines[i].strip() != '$$':
        body.append(lines[i])
        i += 1
    return MathBlock(body='\n'.join(body)), i + 1


def _read_heading(lines: list[str], i: int, blocks: list[Block], ctx: _Context) -> ReadResult:
    """ATX heading, levels 1-6."""
    m = HEADING_RE.match(lines[i])
    if not m:
        return None
    return Heading(level=len(m.group(1)), children=parse_inline(m.group(2).strip())), i + 1


def _read_rule(lines: list[str], i: int, blocks: list[Block], ctx: _Context) -> ReadResult:
    """Horizontal rule of three or more *, - or _."""
    if not RULE_RE.fullmatch(lines[i].strip()):
        return None
    return HorizontalRule(), i + 1


def _read_table(lines: list[str], i: int, blocks: list[Block], ctx: _Context) -> ReadResult:
    """Pipe table: header row, alignment row, then body rows containing |."""
    if '|' not in lines[i] or i + 1 >= len(lines) or not TABLE_SEP_RE.match(lines[i + 1]):
        return None
    headers = _cells(lines[i])
    aligns = tuple(_align(a) for a in _cells(lines[i + 1]))
    rows = []
    i += 2
    while i < len(lines) and '|' in lines[i] and not TABLE_END_RE.match(lines[i]):
        rows.append(tuple(parse_inline(c) for c in _cells(lines[i])))
        i += 1
    table = Table(
        headers=tuple(parse_inline(h) for h in headers),
        aligns=aligns,
        rows=tuple(rows),
    )
    return table, i


def _read_blockquote(lines: list[str], i: int, blocks: list[Block], ctx: _Context) -> ReadResult:
    """Contiguous > lines parsed recursively, up to ctx.max_depth levels."""
    if not lines[i].startswith('>'):
        return None
    inner = []
    while i < len(lines) and (
        lines[i].startswith('>')
        or (lines[i].strip() == '' and i + 1 < len(lines) and lines[i + 1].startswith('>'))
    ):
        inner.append(QUOTE_RE.sub('', lines[i], count=1))
        i += 1
    if ctx.depth + 1 > ctx.max_depth:
        text = ' '.join(line.strip() for line in inner if line.strip())
        return Blockquote(children=(Paragraph(parse_inline(text)),)), i
    nested = _Context(depth=ctx.depth + 1, max_depth=ctx.max_depth)
    return Blockquote(children=tuple(_parse_lines(inner, nested))), i


def _read_list(lines: list[str], i: int, blocks: list[Block], ctx: _Context) -> ReadResult:
    """Consecutive list lines; a single blank line between items keeps the list open."""
    if not LIST_START_RE.match(lines[i]):
        return None
    collected = []
    while i < len(lines):
        if LIST_START_RE.match(lines[i]):
            collected.append(lines[i])
            i += 1
        elif lines[i].strip() == '' and i + 1 < len(lines) and LIST_START_RE.match(lines[i + 1]):
            i += 1
        else:
            break
    lists = build_lists(collected, max_depth=ctx.max_depth)
    if len(lists) == 1:
        return lists[0], i
    # Dedenting past the first item's level yields several adjacent top-level lists.
    for lst in lists[:-1]:
        blocks.append(lst)
    return (lists[-1] if lists else None), i


def _read_footnote(lines: list[str], i: int, blocks: list[Block], ctx: _Context) -> ReadResult:
    """Footnote definition [^N]: text."""
    m = FOOTNOTE_RE.match(lines[i])
    if not m:
        return None
    return FootnoteDef(id=m.group(1), children=parse_inline(m.group(2))), i + 1


def _read_raw_html(lines: list[str], i: int, blocks: list[Block], ctx: _Context) -> ReadResult:
    """details/summary tag lines passed through unchanged."""
    if not RAW_HTML_RE.match(lines[i]):
        return None
    return RawHtml(line=lines[i]), i + 1


def _read_definition(lines: list[str], i: int, blocks: list[Block], ctx: _Context) -> ReadResult:
    """A : line turning the preceding plain paragraph into a definition term."""
    if not DEFINITION_RE.match(lines[i]) or not blocks:
        return None
    prev = blocks[-1]
    if not isinstance(prev, Paragraph) or not prev.children or not is_plain(prev.children):
        return None
    blocks.pop()
    return Definition(term=prev.children, children=parse_inline(DEFINITION_RE.sub('', lines[i], count=1))), i + 1


def _read_blank(lines: list[str], i: int, blocks: list[Block], ctx: _Context) -> ReadResult:
    """Skip one blank line."""
    if lines[i].strip():
        return None
    return None, i + 1


def _read_paragraph(lines: list[str], i: int, blocks: list[Block], ctx: _Context) -> ReadResult:
    """Lines up to a blank line or a block start, joined with spaces."""
    collected = [lines[i]]
    i += 1
    while i < len(lines) and lines[i].strip() and not PARAGRAPH_STOP_RE.match(lines[i]):
        collected.append(lines[i])
        i += 1
    return Paragraph(parse_inline(' '.join(collected))), i


READERS: tuple[Reader, ...] = (
    _read_fence,
    _read_math,
    _read_heading,
    _read_rule,
    _read_table,
    _read_blockquote,
    _read_list,
    _read_footnote,
    _read_raw_html,
    _read_definition,
    _read_blank,
    _read_paragraph,
)


def _parse_lines(lines: list[str], ctx: _Context) -> list[Block]:
    blocks: list[Block] = []
    i = 0
    while i < len(lines):
        for reader in READERS:
            result = reader(lines, i, blocks, ctx)
            if result is None:
                continue
            block, i = result
            if block is not None:
                blocks.append(block)
            break
    return blocks


def parse(source: str, max_depth: int = DEFAULT_MAX_DEPTH) -> list[Block]:
    """Parse a markdown document into a list of block nodes. Never raises on any input."""
    lines = source.replace('\r\n', '\n').split('\n')
    return _parse_lines(lines, _Context(depth=0, max_depth=max_depth))
