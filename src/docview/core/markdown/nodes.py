"""Markdown AST: block and inline node variants"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union


class Align(str, Enum):
    left = "left"
    center = "center"
    right = "right"


# --- inline nodes ---

@dataclass(frozen=True)
class Text:
    text: str


@dataclass(frozen=True)
class Image:
    src: str
    alt: str


@dataclass(frozen=True)
class Link:
    href: str
    children: tuple


@dataclass(frozen=True)
class Autolink:
    url: str


@dataclass(frozen=True)
class StrongEmphasis:
    children: tuple


@dataclass(frozen=True)
class Strong:
    children: tuple


@dataclass(frozen=True)
class Emphasis:
    children: tuple


@dataclass(frozen=True)
class Strike:
    children: tuple


@dataclass(frozen=True)
class Mark:
    children: tuple


@dataclass(frozen=True)
class Code:
    children: tuple


@dataclass(frozen=True)
class FootnoteRef:
    id: str


Inline = Union[Text, Image, Link, Autolink, StrongEmphasis, Strong, Emphasis, Strike, Mark, Code, FootnoteRef]


# --- block nodes ---

@dataclass(frozen=True)
class Heading:
    level: int                      # 1-6
    children: tuple[Inline, ...]


@dataclass(frozen=True)
class Paragraph:
    children: tuple[Inline, ...]


@dataclass(frozen=True)
class CodeBlock:
    language: str                   # tag as written after the fence; '' when absent
    body: str


@dataclass(frozen=True)
class MathBlock:
    body: str


@dataclass(frozen=True)
class Blockquote:
    children: tuple["Block", ...]


@dataclass(frozen=True)
class ListItem:
    children: tuple[Inline, ...]
    checked: Optional[bool] = None  # None for non-task items
    sublists: tuple["ListBlock", ...] = ()


@dataclass(frozen=True)
class ListBlock:
    ordered: bool
    items: tuple[ListItem, ...]


@dataclass(frozen=True)
class Table:
    headers: tuple[tuple[Inline, ...], ...]
    aligns: tuple[Align, ...]
    rows: tuple[tuple[tuple[Inline, ...], ...], ...]


@dataclass(frozen=True)
class HorizontalRule:
    pass


@dataclass(frozen=True)
class FootnoteDef:
    id: str
    children: tuple[Inline, ...]


@dataclass(frozen=True)
class RawHtml:
    line: str


@dataclass(frozen=True)
class Definition:
    term: tuple[Inline, ...]
    children: tuple[Inline, ...]


Block = Union[
    Heading, Paragraph, CodeBlock, MathBlock, Blockquote, ListBlock, Table,
    HorizontalRule, FootnoteDef, RawHtml, Definition,
]
