"""Inline tokenizer: ordered rules over a run of text and already-built nodes

Rules run in fixed priority order. Each rule claims all of its left-to-right
matches in the current run; a claimed match becomes a single opaque node, so
later rules can wrap around it but never split it. The text inside a match
is tokenized with the rules that come after the one that matched.
"""

import re
from dataclasses import dataclass
from typing import Callable, Sequence

from docview.core.markdown.nodes import (
    Autolink, Code, Emphasis, FootnoteRef, Image, Inline, Link, Mark,
    Strike, Strong, StrongEmphasis, Text,
)


NODE = '\x00'  # stands for one already-built node inside a run


@dataclass(frozen=True)
class InlineRule:
    name: str
    pattern: re.Pattern
    build: Callable[[re.Match, Callable[[int], tuple]], Inline]


def _strip_nodes(s: str) -> str:
    return s.replace(NODE, '')


RULES: tuple[InlineRule, ...] = (
    InlineRule('image', re.compile(r'!\[([^\]]*)\]\(([^)\x00]+)\)'),
               lambda m, child: Image(src=m.group(2), alt=_strip_nodes(m.group(1)))),
    InlineRule('link', re.compile(r'\[([^\]]+)\]\(([^)\x00]+)\)'),
               lambda m, child: Link(href=m.group(2), children=child(1))),
    InlineRule('autolink', re.compile(r'(?<!["=])https?://[^\s<\x00]+'),
               lambda m, child: Autolink(url=m.group(0))),
    InlineRule('bold_italic', re.compile(r'\*\*\*(.+?)\*\*\*'),
               lambda m, child: StrongEmphasis(child(1))),
    InlineRule('bold', re.compile(r'\*\*(.+?)\*\*'),
               lambda m, child: Strong(child(1))),
    InlineRule('italic', re.compile(r'\*(.+?)\*'),
               lambda m, child: Emphasis(child(1))),
    InlineRule('strike', re.compile(r'~~(.+?)~~'),
               lambda m, child: Strike(child(1))),
    InlineRule('mark', re.compile(r'==(.+?)=='),
               lambda m, child: Mark(child(1))),
    InlineRule('code', re.compile(r'`([^`]+)`'),
               lambda m, child: Code(child(1))),
    InlineRule('footnote_ref', re.compile(r'\[\^(\d+)\]'),
               lambda m, child: FootnoteRef(id=m.group(1))),
)


def _substitute(text: str, nodes: list, rule: InlineRule, rest: Sequence[InlineRule]) -> tuple[str, list]:
    """Replace every match of rule in the run with one node marker."""
    out: list[str] = []
    out_nodes: list = []
    pos = 0
    consumed = 0

    for m in rule.pattern.finditer(text):
        before = text[pos:m.start()]
        n = before.count(NODE)
        out.append(before)
        out_nodes.extend(nodes[consumed:consumed + n])
        consumed += n

        match_nodes = nodes[consumed:consumed + text.count(NODE, m.start(), m.end())]
        consumed += len(match_nodes)

        def child(group: int, m=m, match_nodes=match_nodes) -> tuple:
            start, end = m.span(group)
            offset = text.count(NODE, m.start(), start)
            inner = match_nodes[offset:offset + text.count(NODE, start, end)]
            inner_rules = [r for r in rest if not (rule.name == 'link' and r.name == 'autolink')]
            return _tokenize(text[start:end], inner, inner_rules)

        out.append(NODE)
        out_nodes.append(rule.build(m, child))
        pos = m.end()

    if pos == 0:
        return text, nodes
    out.append(text[pos:])
    out_nodes.extend(nodes[consumed:])
    return ''.join(out), out_nodes


def _tokenize(text: str, nodes: list, rules: Sequence[InlineRule]) -> tuple[Inline, ...]:
    for i, rule in enumerate(rules):
        text, nodes = _substitute(text, nodes, rule, rules[i + 1:])

    result: list[Inline] = []
    pieces = text.split(NODE)
    for i, piece in enumerate(pieces):
        if piece:
            result.append(Text(piece))
        if i < len(nodes):
            result.append(nodes[i])
    return tuple(result)


def parse_inline(text: str) -> tuple[Inline, ...]:
    """Tokenize one line of inline markdown into a tuple of inline nodes."""
    # NUL is not valid in markdown text and doubles as the node marker.
    return _tokenize(text.replace(NODE, '\ufffd'), [], RULES)


def is_plain(children: Sequence[Inline]) -> bool:
    return all(isinstance(c, Text) for c in children)
