"""Highlight tokens as non-overlapping intervals over the raw code string"""

import html
import re
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Mapping, Sequence


class Category(str, Enum):
    comment  = "comment"
    string   = "string"
    keyword  = "keyword"
    number   = "number"
    attr     = "attr"       # JSON/YAML keys, attribute names
    title    = "title"      # function names, CSS selectors
    built_in = "built_in"


@dataclass(frozen=True, order=True)
class Token:
    """Half-open [start, end) span of the raw code classified as category."""
    start: int
    end: int
    category: Category


@dataclass(frozen=True)
class Rule:
    """One matching pass. Only the span of `group` is claimed by the token."""
    pattern: re.Pattern
    category: Category
    group: int = 0


def _gaps(tokens: Sequence[Token], length: int) -> Iterator[tuple[int, int]]:
    """Yield the [start, end) regions of the code not covered by any token."""
    pos = 0
    for tok in tokens:
        if tok.start > pos:
            yield pos, tok.start
        pos = max(pos, tok.end)
    if pos < length:
        yield pos, length


def scan(code: str, rules: Sequence[Rule]) -> list[Token]:
    """Apply rules in order; each rule only matches inside text no earlier rule claimed.

    Returns a sorted, non-overlapping token list.
    """
    tokens: list[Token] = []
    for rule in rules:
        found = []
        for start, end in _gaps(tokens, len(code)):
            for m in rule.pattern.finditer(code, start, end):
                s, e = m.span(rule.group)
                if s < e:
                    found.append(Token(s, e, rule.category))
        if found:
            tokens = sorted(tokens + found)
    return tokens


def render_tokens(code: str, tokens: Sequence[Token], classes: Mapping[Category, str]) -> str:
    """Escape every segment of code exactly once, wrapping token segments in their category span."""
    out: list[str] = []
    pos = 0
    for tok in tokens:
        out.append(html.escape(code[pos:tok.start]))
        out.append(f'<span class="{classes[tok.category]}">{html.escape(code[tok.start:tok.end])}</span>')
        pos = tok.end
    out.append(html.escape(code[pos:]))
    return "".join(out)
